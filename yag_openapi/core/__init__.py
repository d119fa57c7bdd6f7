"""Translation pipeline: parsing, intermediate model, type expressions, output."""

from yag_openapi.core.code_generator import (
    CodeGenerator,
    ImportDeclaration,
    NamedImport,
)
from yag_openapi.core.models import (
    APIModel,
    ApiInfo,
    MethodModel,
    ParameterModel,
    RequestBodyModel,
    ResponseModel,
    RouteModel,
)
from yag_openapi.core.models_generator import ModelsGenerator
from yag_openapi.core.parser import OpenAPIParser
from yag_openapi.core.translator import schema_to_type, schema_to_type_string
from yag_openapi.core.type_expr import TypeRenderer, render_type

__all__ = [
    'APIModel',
    'ApiInfo',
    'RouteModel',
    'MethodModel',
    'ParameterModel',
    'RequestBodyModel',
    'ResponseModel',
    'OpenAPIParser',
    'CodeGenerator',
    'ImportDeclaration',
    'NamedImport',
    'ModelsGenerator',
    'TypeRenderer',
    'render_type',
    'schema_to_type',
    'schema_to_type_string',
]
