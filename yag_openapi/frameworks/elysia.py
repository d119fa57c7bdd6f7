"""Elysia route schema types.

Elysia describes routes as a tree keyed by path segment. Routes sharing a
prefix share the corresponding nodes, so ``/posts`` and
``/posts/{postId}/comments`` both live under a single ``"posts"`` key:

    {
        "posts": {
            "get": { ... };
            ":postId": {
                "comments": { "get": { ... } }
            }
        }
    }
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field as dataclass_field

from yag_openapi.core.models import APIModel, MethodModel, RouteModel
from yag_openapi.core.translator import schema_to_type
from yag_openapi.core.type_expr import (
    EMPTY_OBJECT,
    UNKNOWN,
    ObjectType,
    TypeExpr,
    field,
    generic_type,
    object_type,
)
from yag_openapi.frameworks.base import FrameworkTypeBuilder

__all__ = ['ElysiaTypeBuilder', 'RouteTree', 'to_elysia_segments']

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = 'application/json'
ROOT_SEGMENT = 'index'
TYPE_ARGUMENTS = ('""', 'SingletonBase', 'DefinitionBase', 'MetadataBase')

_PATH_PARAM_RE = re.compile(r'\{([^}]+)\}')


def to_elysia_segments(path: str) -> list[str]:
    """Split an OpenAPI path template into Elysia path segments.

    ``/posts/{postId}/comments`` becomes ``['posts', ':postId', 'comments']``.
    Empty segments (leading, trailing or doubled slashes) are dropped.
    """
    elysia_path = _PATH_PARAM_RE.sub(r':\1', path.removeprefix('/'))
    return [segment for segment in elysia_path.split('/') if segment]


@dataclass
class RouteTree:
    """Ordered route tree with merge-on-insert semantics.

    Attributes:
        methods: Method types attached to this node, keyed by lower-case verb.
        children: Child nodes keyed by path segment, in insertion order.
    """

    methods: dict[str, TypeExpr] = dataclass_field(default_factory=dict)
    children: dict[str, RouteTree] = dataclass_field(default_factory=dict)

    def insert(self, segments: list[str], methods: dict[str, TypeExpr]) -> None:
        """Attach ``methods`` at ``segments``, creating missing nodes.

        Existing nodes along the way are reused, so routes with a common
        prefix merge instead of producing duplicate keys.
        """
        node = self
        for segment in segments:
            if segment not in node.children:
                node.children[segment] = RouteTree()
            node = node.children[segment]
        node.methods.update(methods)

    def get(self, segments: list[str]) -> RouteTree | None:
        node = self
        for segment in segments:
            if segment not in node.children:
                return None
            node = node.children[segment]
        return node

    def to_type(self) -> ObjectType:
        """Render the tree as nested object types with quoted keys.

        A child segment spelled like a verb already attached to this node
        cannot be represented next to it and is left out with a warning.
        """
        fields = [field(verb, type_, quoted=True) for verb, type_ in self.methods.items()]
        for segment, child in self.children.items():
            if segment in self.methods:
                logger.warning(
                    f"Dropping route segment '{segment}': it collides with the "
                    f'{segment.upper()} method of the same route'
                )
                continue
            fields.append(field(segment, child.to_type(), quoted=True))
        return object_type(fields)


class ElysiaTypeBuilder(FrameworkTypeBuilder):
    def build_input_type(self, method: MethodModel) -> ObjectType:
        body = method.request_body
        if body is not None and body.content_type == JSON_CONTENT_TYPE:
            body_type = schema_to_type(body.schema)
        else:
            body_type = UNKNOWN

        path_params = method.unique_parameters_in('path')
        query_params = method.unique_parameters_in('query')
        header_params = method.unique_parameters_in('header')

        return object_type(
            {
                'body': body_type,
                'params': (
                    object_type(field(p.name, p.type) for p in path_params)
                    if path_params
                    else EMPTY_OBJECT
                ),
                'query': (
                    object_type(
                        field(p.name, p.type, optional=True) for p in query_params
                    )
                    if query_params
                    else UNKNOWN
                ),
                'headers': (
                    object_type(
                        field(p.name, p.type, optional=True) for p in header_params
                    )
                    if header_params
                    else UNKNOWN
                ),
            }
        )

    def build_output_type(self, method: MethodModel) -> TypeExpr:
        # Every declared status code is kept, not only the successful ones.
        return object_type(
            {
                r.status_code: (
                    schema_to_type(r.schema) if r.schema is not None else UNKNOWN
                )
                for r in method.responses
            }
        )

    def build_method_type(self, method: MethodModel) -> TypeExpr:
        input_type = self.build_input_type(method)
        return object_type(
            [*input_type.fields, field('response', self.build_output_type(method))]
        )

    def _method_types(self, route: RouteModel) -> dict[str, TypeExpr]:
        return {m.method.lower(): self.build_method_type(m) for m in route.methods}

    def build_route_type(self, route: RouteModel) -> TypeExpr:
        return object_type(
            field(verb, type_, quoted=True)
            for verb, type_ in self._method_types(route).items()
        )

    def build_route_tree(self, api: APIModel) -> RouteTree:
        tree = RouteTree()
        for route in api.routes:
            segments = to_elysia_segments(route.path) or [ROOT_SEGMENT]
            tree.insert(segments, self._method_types(route))
        return tree

    def build_app_type(self, api: APIModel) -> TypeExpr:
        tree = self.build_route_tree(api)
        return generic_type('Elysia', [*TYPE_ARGUMENTS, tree.to_type()])
