"""Intermediate representation of a parsed OpenAPI document.

Instances are created once per parse and never mutated afterwards; list
valued attributes are tuples. Schema nodes are kept as the raw
(dereferenced) mappings from the source document.
"""

import dataclasses
from collections.abc import Mapping
from typing import Any, Literal

from yag_openapi.core.type_expr import TypeExpr

__all__ = [
    'HTTP_METHODS',
    'ParameterLocation',
    'ApiInfo',
    'ParameterModel',
    'RequestBodyModel',
    'ResponseModel',
    'MethodModel',
    'RouteModel',
    'APIModel',
]

HTTP_METHODS = ('get', 'post', 'put', 'patch', 'delete', 'head', 'options', 'trace')

ParameterLocation = Literal['path', 'query', 'header', 'cookie']


@dataclasses.dataclass(frozen=True)
class ApiInfo:
    title: str
    version: str
    description: str | None = None


@dataclasses.dataclass(frozen=True)
class ParameterModel:
    name: str
    type: TypeExpr
    location: ParameterLocation
    required: bool = False
    description: str | None = None


@dataclasses.dataclass(frozen=True)
class RequestBodyModel:
    content_type: str
    schema: Any
    required: bool = False


@dataclasses.dataclass(frozen=True)
class ResponseModel:
    status_code: str
    description: str = ''
    content_type: str | None = None
    schema: Any = None
    headers: Mapping[str, Any] | None = None


@dataclasses.dataclass(frozen=True)
class MethodModel:
    """A single operation. ``method`` is the upper-case HTTP verb."""

    method: str
    parameters: tuple[ParameterModel, ...] = ()
    request_body: RequestBodyModel | None = None
    responses: tuple[ResponseModel, ...] = ()
    operation_id: str | None = None
    summary: str | None = None
    description: str | None = None

    def parameters_in(self, location: ParameterLocation) -> tuple[ParameterModel, ...]:
        return tuple(p for p in self.parameters if p.location == location)

    def unique_parameters_in(
        self, location: ParameterLocation
    ) -> tuple[ParameterModel, ...]:
        """Parameters in ``location`` with one entry per name.

        A later declaration replaces an earlier one of the same name (an
        operation-level parameter overrides the path-level one) but keeps the
        position of the first.
        """
        by_name: dict[str, ParameterModel] = {}
        for parameter in self.parameters_in(location):
            by_name[parameter.name] = parameter
        return tuple(by_name.values())


@dataclasses.dataclass(frozen=True)
class RouteModel:
    path: str
    methods: tuple[MethodModel, ...]


@dataclasses.dataclass(frozen=True)
class APIModel:
    info: ApiInfo
    routes: tuple[RouteModel, ...] = ()
    schemas: Mapping[str, Any] | None = None
