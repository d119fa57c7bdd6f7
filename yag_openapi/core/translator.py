"""Translation of JSON Schema fragments into TypeScript type expressions.

A raw schema node is first classified into one of the tagged
:data:`SchemaNode` variants, then translated. Classification follows a
fixed precedence (first match wins) so every call site, parameters and
bodies alike, sees the same result:

1. absent node -> ``unknown``
2. ``$ref`` -> the last path segment, used as a type name
3. ``oneOf`` / ``anyOf`` -> union of the members
4. ``allOf`` -> intersection of the members
5. ``enum`` -> union of the JSON-encoded literal values
6. ``type: object`` or ``properties`` -> inline object type
7. ``type: array`` -> element type with the ``[]`` suffix
8. ``string`` / ``number`` / ``integer`` / ``boolean`` / ``null`` -> scalar,
   anything else -> ``any``
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from yag_openapi.core.type_expr import (
    ANY,
    UNKNOWN,
    TypeExpr,
    array_type,
    field,
    inline_object_type,
    intersection_type,
    literal,
    render_type,
    to_type_name,
    union_type,
)

__all__ = [
    'RefNode',
    'OneOfNode',
    'AnyOfNode',
    'AllOfNode',
    'EnumNode',
    'ObjectNode',
    'ArrayNode',
    'PrimitiveNode',
    'UnknownNode',
    'SchemaNode',
    'classify_schema',
    'schema_to_type',
    'schema_to_type_string',
]

_PRIMITIVE_TYPES = {
    'string': 'string',
    'number': 'number',
    'integer': 'number',
    'boolean': 'boolean',
    'null': 'null',
}


@dataclass(frozen=True)
class RefNode:
    name: str


@dataclass(frozen=True)
class OneOfNode:
    members: tuple[Any, ...]


@dataclass(frozen=True)
class AnyOfNode:
    members: tuple[Any, ...]


@dataclass(frozen=True)
class AllOfNode:
    members: tuple[Any, ...]


@dataclass(frozen=True)
class EnumNode:
    values: tuple[Any, ...]


@dataclass(frozen=True)
class ObjectNode:
    properties: tuple[tuple[str, Any], ...]
    required: frozenset[str]


@dataclass(frozen=True)
class ArrayNode:
    items: Any


@dataclass(frozen=True)
class PrimitiveNode:
    type_name: str


@dataclass(frozen=True)
class UnknownNode:
    """Absent schema (``unknown``) or unrecognised shape (``any``)."""

    absent: bool = False


SchemaNode = (
    RefNode
    | OneOfNode
    | AnyOfNode
    | AllOfNode
    | EnumNode
    | ObjectNode
    | ArrayNode
    | PrimitiveNode
    | UnknownNode
)


def _ref_name(ref: Any) -> str:
    name = str(ref).rsplit('/', 1)[-1]
    return to_type_name(name) if name else UNKNOWN.text


def _as_tuple(value: Any) -> tuple[Any, ...]:
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return ()


def classify_schema(node: Any) -> SchemaNode:
    """Classify a raw schema mapping into its tagged variant.

    Never raises: shapes that are not understood become :class:`UnknownNode`.
    """
    if node is None:
        return UnknownNode(absent=True)
    if not isinstance(node, Mapping):
        return UnknownNode()

    if node.get('$ref'):
        return RefNode(_ref_name(node['$ref']))
    if 'oneOf' in node:
        return OneOfNode(_as_tuple(node['oneOf']))
    if 'anyOf' in node:
        return AnyOfNode(_as_tuple(node['anyOf']))
    if 'allOf' in node:
        return AllOfNode(_as_tuple(node['allOf']))
    if 'enum' in node:
        return EnumNode(_as_tuple(node['enum']))

    schema_type = node.get('type')
    properties = node.get('properties')
    if schema_type == 'object' or 'properties' in node:
        if not isinstance(properties, Mapping):
            properties = {}
        required = node.get('required')
        if not isinstance(required, (list, tuple)):
            required = ()
        return ObjectNode(
            properties=tuple(properties.items()),
            required=frozenset(str(name) for name in required),
        )
    if schema_type == 'array':
        return ArrayNode(node.get('items'))
    if isinstance(schema_type, str) and schema_type in _PRIMITIVE_TYPES:
        return PrimitiveNode(schema_type)
    return UnknownNode()


def _literal_value(value: Any) -> TypeExpr:
    return literal(json.dumps(value, ensure_ascii=False))


def schema_to_type(node: Any) -> TypeExpr:
    """Translate a raw schema node into a type expression.

    Args:
        node: A JSON Schema fragment (mapping), or None.

    Returns:
        The corresponding type expression. Objects are built inline.
    """
    schema = classify_schema(node)

    if isinstance(schema, RefNode):
        return literal(schema.name)
    if isinstance(schema, (OneOfNode, AnyOfNode)):
        return union_type(schema_to_type(member) for member in schema.members)
    if isinstance(schema, AllOfNode):
        return intersection_type(schema_to_type(member) for member in schema.members)
    if isinstance(schema, EnumNode):
        return union_type(_literal_value(value) for value in schema.values)
    if isinstance(schema, ObjectNode):
        return inline_object_type(
            field(
                str(name),
                schema_to_type(value),
                optional=str(name) not in schema.required,
            )
            for name, value in schema.properties
        )
    if isinstance(schema, ArrayNode):
        return array_type(schema_to_type(schema.items))
    if isinstance(schema, PrimitiveNode):
        return literal(_PRIMITIVE_TYPES[schema.type_name])
    if schema.absent:
        return UNKNOWN
    return ANY


def schema_to_type_string(node: Any) -> str:
    return render_type(schema_to_type(node))
