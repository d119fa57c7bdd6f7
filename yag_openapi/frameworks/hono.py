"""Hono route schema types.

Produces ``Hono<BlankEnv, Schema, "/">`` where the schema is a flat object
keyed by Hono-style path (``/users/:id``), each path mapping ``$get``,
``$post``, ... to an endpoint with ``input``, ``output``, ``outputFormat``
and ``status``.
"""

import logging
import re

from yag_openapi.core.models import APIModel, MethodModel, RouteModel
from yag_openapi.core.translator import schema_to_type
from yag_openapi.core.type_expr import (
    EMPTY_OBJECT,
    TypeExpr,
    field,
    generic_type,
    intersection_type,
    literal,
    object_type,
)
from yag_openapi.frameworks.base import FrameworkTypeBuilder

__all__ = ['HonoTypeBuilder', 'to_hono_path']

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = 'application/json'
STATUS_TYPE = 'ContentfulStatusCode'
ENV_TYPE = 'BlankEnv'
BASE_PATH = '"/"'

_PATH_PARAM_RE = re.compile(r'\{([^}]+)\}')
_SUCCESS_STATUS_RE = re.compile(r'^2\d\d$')


def to_hono_path(path: str) -> str:
    """Convert an OpenAPI path template to Hono syntax (``{id}`` -> ``:id``)."""
    return _PATH_PARAM_RE.sub(r':\1', path)


class HonoTypeBuilder(FrameworkTypeBuilder):
    def build_input_type(self, method: MethodModel) -> TypeExpr:
        fields = []

        path_params = method.unique_parameters_in('path')
        if path_params:
            fields.append(
                field('param', object_type(field(p.name, p.type) for p in path_params))
            )

        query_params = method.unique_parameters_in('query')
        if query_params:
            fields.append(
                field(
                    'query',
                    object_type(
                        field(p.name, p.type, optional=True) for p in query_params
                    ),
                )
            )

        body = method.request_body
        if body is not None:
            if body.content_type == JSON_CONTENT_TYPE:
                fields.append(field('json', schema_to_type(body.schema)))
            else:
                logger.debug(
                    f'Skipping {body.content_type} request body of {method.method}'
                )

        header_params = method.unique_parameters_in('header')
        if header_params:
            fields.append(
                field(
                    'header',
                    object_type(
                        field(p.name, p.type, optional=True) for p in header_params
                    ),
                )
            )

        return object_type(fields)

    def build_output_type(self, method: MethodModel) -> TypeExpr:
        success = next(
            (r for r in method.responses if _SUCCESS_STATUS_RE.match(r.status_code)),
            None,
        )
        if success is None or success.schema is None:
            return EMPTY_OBJECT
        return schema_to_type(success.schema)

    def build_method_type(self, method: MethodModel) -> TypeExpr:
        return object_type(
            {
                'input': self.build_input_type(method),
                'output': self.build_output_type(method),
                'outputFormat': literal('"json"'),
                'status': literal(STATUS_TYPE),
            }
        )

    def build_route_type(self, route: RouteModel) -> TypeExpr:
        return object_type(
            {f'${m.method.lower()}': self.build_method_type(m) for m in route.methods}
        )

    def build_app_type(self, api: APIModel) -> TypeExpr:
        routes = object_type(
            field(to_hono_path(route.path), self.build_route_type(route), quoted=True)
            for route in api.routes
        )
        schema = intersection_type([routes, EMPTY_OBJECT])
        return generic_type('Hono', [ENV_TYPE, schema, BASE_PATH])
