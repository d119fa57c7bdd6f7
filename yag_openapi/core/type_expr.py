"""Type expression AST and rendering for generated TypeScript declarations.

Type expressions are immutable, inspectable values. They are composed by the
translator and the framework builders, compared structurally in tests and
turned into text exactly once, by :class:`TypeRenderer`.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

__all__ = [
    # AST nodes
    'LiteralType',
    'Field',
    'ObjectType',
    'UnionType',
    'IntersectionType',
    'GenericType',
    'ArrayType',
    'TypeExpr',
    # Well-known types
    'ANY',
    'UNKNOWN',
    'NEVER',
    'EMPTY_OBJECT',
    # Builders
    'literal',
    'field',
    'object_type',
    'inline_object_type',
    'union_type',
    'intersection_type',
    'generic_type',
    'array_type',
    'to_type_expr',
    # Rendering
    'TypeRenderer',
    'render_type',
    'render_key',
    'is_identifier',
    'to_type_name',
]

INDENT = '    '

_IDENTIFIER_RE = re.compile(r'^[A-Za-z_$][A-Za-z0-9_$]*$')
_NUMERIC_KEY_RE = re.compile(r'^(0|[1-9][0-9]*)$')
_NON_IDENTIFIER_CHAR_RE = re.compile(r'[^A-Za-z0-9_$]')


@dataclass(frozen=True)
class LiteralType:
    """Verbatim type text: a keyword, a type name or a quoted literal."""

    text: str


@dataclass(frozen=True)
class Field:
    """A single member of an object type.

    Attributes:
        name: The property key, unquoted.
        type: The member type.
        optional: Whether the key carries the ``?`` marker.
        quoted: Always render the key as a string literal.
    """

    name: str
    type: TypeExpr
    optional: bool = False
    quoted: bool = False


@dataclass(frozen=True)
class ObjectType:
    """Object type. Inline objects render on one line, others as a block."""

    fields: tuple[Field, ...] = ()
    inline: bool = False


@dataclass(frozen=True)
class UnionType:
    members: tuple[TypeExpr, ...]


@dataclass(frozen=True)
class IntersectionType:
    members: tuple[TypeExpr, ...]


@dataclass(frozen=True)
class GenericType:
    name: str
    arguments: tuple[TypeExpr, ...]


@dataclass(frozen=True)
class ArrayType:
    element: TypeExpr


TypeExpr = (
    LiteralType | ObjectType | UnionType | IntersectionType | GenericType | ArrayType
)

ANY = LiteralType('any')
UNKNOWN = LiteralType('unknown')
NEVER = LiteralType('never')
EMPTY_OBJECT = ObjectType()


def is_identifier(name: str) -> bool:
    return bool(_IDENTIFIER_RE.match(name))


def to_type_name(name: str) -> str:
    """Map a component name to a usable type alias name.

    Component names may contain ``.`` and ``-``; every character that cannot
    appear in an identifier becomes ``_`` and a leading digit gets a ``_``
    prefix, so ``Pet.Category`` is emitted as ``Pet_Category``.
    """
    type_name = _NON_IDENTIFIER_CHAR_RE.sub('_', name)
    if not type_name or type_name[0].isdigit():
        type_name = f'_{type_name}'
    return type_name


def to_type_expr(value: TypeExpr | str) -> TypeExpr:
    if isinstance(value, str):
        return LiteralType(value)
    return value


def literal(text: str) -> LiteralType:
    return LiteralType(text)


def field(
    name: str, type_: TypeExpr | str, optional: bool = False, quoted: bool = False
) -> Field:
    return Field(name=name, type=to_type_expr(type_), optional=optional, quoted=quoted)


def _fields(properties: Mapping[str, TypeExpr | str] | Iterable[Field]) -> tuple[Field, ...]:
    if isinstance(properties, Mapping):
        return tuple(field(name, value) for name, value in properties.items())
    return tuple(properties)


def object_type(
    properties: Mapping[str, TypeExpr | str] | Iterable[Field] = (),
) -> ObjectType:
    """Build a block object type.

    Args:
        properties: Either a mapping of key to member type (keys rendered
            as-is, never optional) or an iterable of :class:`Field`.

    Returns:
        The object type, keys kept in the given order.
    """
    return ObjectType(fields=_fields(properties))


def inline_object_type(
    properties: Mapping[str, TypeExpr | str] | Iterable[Field] = (),
) -> ObjectType:
    return ObjectType(fields=_fields(properties), inline=True)


def union_type(types: Iterable[TypeExpr | str]) -> UnionType:
    return UnionType(members=tuple(to_type_expr(t) for t in types))


def intersection_type(types: Iterable[TypeExpr | str]) -> IntersectionType:
    return IntersectionType(members=tuple(to_type_expr(t) for t in types))


def generic_type(name: str, arguments: Iterable[TypeExpr | str]) -> GenericType:
    return GenericType(name=name, arguments=tuple(to_type_expr(a) for a in arguments))


def array_type(element: TypeExpr | str) -> ArrayType:
    return ArrayType(element=to_type_expr(element))


def render_key(f: Field) -> str:
    """Render an object key, quoting it when it is not a bare identifier."""
    key = f.name
    if f.quoted or not (is_identifier(key) or _NUMERIC_KEY_RE.match(key)):
        key = json.dumps(key, ensure_ascii=False)
    return f'{key}?' if f.optional else key


def _is_compound(expr: TypeExpr) -> bool:
    return isinstance(expr, (UnionType, IntersectionType)) and len(expr.members) > 1


class TypeRenderer:
    """Serializes type expressions to TypeScript source text.

    Block objects put one member per line, indented one level deeper than
    the line holding the opening brace. Separators go strictly between
    members, never after the last one.

    Example:
        >>> TypeRenderer().render(union_type(['string', 'number']))
        'string | number'
    """

    def __init__(self, indent: str = INDENT):
        self.indent = indent

    def render(self, expr: TypeExpr, level: int = 0) -> str:
        if isinstance(expr, LiteralType):
            return expr.text
        if isinstance(expr, ObjectType):
            if expr.inline:
                return self._render_inline_object(expr, level)
            return self._render_block_object(expr, level)
        if isinstance(expr, UnionType):
            return self._render_members(expr.members, ' | ', level, parenthesize=())
        if isinstance(expr, IntersectionType):
            return self._render_members(
                expr.members, ' & ', level, parenthesize=(UnionType,)
            )
        if isinstance(expr, GenericType):
            arguments = ', '.join(self.render(arg, level) for arg in expr.arguments)
            return f'{expr.name}<{arguments}>'
        if isinstance(expr, ArrayType):
            element = self.render(expr.element, level)
            if _is_compound(expr.element):
                element = f'({element})'
            return f'{element}[]'
        raise TypeError(f'Unsupported type expression: {expr!r}')

    def _render_members(
        self,
        members: tuple[TypeExpr, ...],
        separator: str,
        level: int,
        parenthesize: tuple[type, ...],
    ) -> str:
        if not members:
            return NEVER.text
        parts = []
        for member in members:
            text = self.render(member, level)
            if isinstance(member, parenthesize) and _is_compound(member):
                text = f'({text})'
            parts.append(text)
        return separator.join(parts)

    def _render_inline_object(self, expr: ObjectType, level: int) -> str:
        if not expr.fields:
            return '{}'
        members = '; '.join(
            f'{render_key(f)}: {self.render(f.type, level)}' for f in expr.fields
        )
        return f'{{ {members} }}'

    def _render_block_object(self, expr: ObjectType, level: int) -> str:
        if not expr.fields:
            return '{}'
        inner = self.indent * (level + 1)
        lines = ['{']
        last = len(expr.fields) - 1
        for index, f in enumerate(expr.fields):
            separator = ';' if index < last else ''
            lines.append(
                f'{inner}{render_key(f)}: {self.render(f.type, level + 1)}{separator}'
            )
        lines.append(f'{self.indent * level}}}')
        return '\n'.join(lines)


def render_type(expr: TypeExpr | str, indent: str = INDENT) -> str:
    return TypeRenderer(indent).render(to_type_expr(expr))
