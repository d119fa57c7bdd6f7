"""yag-openapi - Generate Hono and Elysia client types from OpenAPI specifications.

yag-openapi translates an OpenAPI 3.x or Swagger 2.0 document into
TypeScript declarations shaped the way the Hono and Elysia typed clients
expect, plus an optional module of named schema types.

Quick Start:
    >>> from yag_openapi import generate, generate_models
    >>>
    >>> content = open('openapi.yaml').read()
    >>> hono_types = await generate('AppType', content, 'hono')
    >>> models = await generate_models(content)

CLI Usage:
    $ yag-openapi generate --config yag.yaml
    $ yag-openapi models ./openapi.yaml -o models.ts
    $ yag-openapi validate ./openapi.yaml
"""

from importlib.metadata import PackageNotFoundError, version as _package_version

from yag_openapi.config import GeneratorConfig, SourceConfig, get_config
from yag_openapi.core import (
    APIModel,
    CodeGenerator,
    ModelsGenerator,
    OpenAPIParser,
    schema_to_type,
    schema_to_type_string,
)
from yag_openapi.exceptions import (
    PARSE_ERROR_PREFIX,
    CodeGenerationError,
    ConfigurationError,
    OutputError,
    ParseError,
    SchemaError,
    SchemaLoadError,
    SchemaReferenceError,
    UnsupportedFrameworkError,
    ValidationError,
    YagOpenAPIError,
)
from yag_openapi.frameworks import ElysiaTypeBuilder, FrameworkTypeBuilder, HonoTypeBuilder
from yag_openapi.generator import (
    Framework,
    TypeGenerationPipeline,
    generate,
    generate_models,
    validate,
)

__all__ = [
    # Main entry points
    'generate',
    'generate_models',
    'validate',
    'Framework',
    'TypeGenerationPipeline',
    # Pipeline components
    'APIModel',
    'OpenAPIParser',
    'FrameworkTypeBuilder',
    'HonoTypeBuilder',
    'ElysiaTypeBuilder',
    'CodeGenerator',
    'ModelsGenerator',
    'schema_to_type',
    'schema_to_type_string',
    # Configuration
    'GeneratorConfig',
    'SourceConfig',
    'get_config',
    # Exceptions
    'PARSE_ERROR_PREFIX',
    'YagOpenAPIError',
    'SchemaError',
    'ParseError',
    'ValidationError',
    'SchemaReferenceError',
    'SchemaLoadError',
    'CodeGenerationError',
    'UnsupportedFrameworkError',
    'ConfigurationError',
    'OutputError',
]

try:
    __version__ = _package_version('yag-openapi')
except PackageNotFoundError:
    __version__ = 'unknown'
