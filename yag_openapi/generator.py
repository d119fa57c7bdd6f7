"""Orchestration of the type generation pipeline.

Wires the parser, the framework type builder and the code generator
together for one named schema and one target framework. Every call builds
its own parser result, builder and output, so calls for different schemas
or frameworks can run concurrently.

Example:
    >>> content = Path('openapi.yaml').read_text()
    >>> print(await generate('PetStore', content, 'hono'))
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from yag_openapi.core.code_generator import (
    CodeGenerator,
    ImportDeclaration,
    NamedImport,
)
from yag_openapi.core.models import APIModel
from yag_openapi.core.models_generator import ModelsGenerator
from yag_openapi.core.parser import OpenAPIParser
from yag_openapi.exceptions import UnsupportedFrameworkError
from yag_openapi.frameworks.base import FrameworkTypeBuilder
from yag_openapi.frameworks.elysia import ElysiaTypeBuilder
from yag_openapi.frameworks.hono import HonoTypeBuilder

__all__ = [
    'Framework',
    'FrameworkTarget',
    'TARGETS',
    'get_target',
    'create_code_generator',
    'TypeGenerationPipeline',
    'generate',
    'generate_models',
    'validate',
]

logger = logging.getLogger(__name__)


class Framework(str, Enum):
    HONO = 'hono'
    ELYSIA = 'elysia'


@dataclass(frozen=True)
class FrameworkTarget:
    """Everything needed to generate declarations for one framework.

    Attributes:
        builder_factory: Creates a fresh type builder per generation.
        imports: The fixed import declarations of the generated module.
    """

    builder_factory: Callable[[], FrameworkTypeBuilder]
    imports: tuple[ImportDeclaration, ...]


TARGETS: dict[Framework, FrameworkTarget] = {
    Framework.HONO: FrameworkTarget(
        builder_factory=HonoTypeBuilder,
        imports=(
            ImportDeclaration('hono', (NamedImport('Hono', is_type_only=True),)),
            ImportDeclaration(
                'hono/types', (NamedImport('BlankEnv', is_type_only=True),)
            ),
            ImportDeclaration(
                'hono/utils/http-status',
                (NamedImport('ContentfulStatusCode', is_type_only=True),),
            ),
        ),
    ),
    Framework.ELYSIA: FrameworkTarget(
        builder_factory=ElysiaTypeBuilder,
        imports=(
            ImportDeclaration(
                'elysia',
                (
                    NamedImport('DefinitionBase', is_type_only=True),
                    NamedImport('Elysia', is_type_only=True),
                    NamedImport('MetadataBase', is_type_only=True),
                    NamedImport('SingletonBase', is_type_only=True),
                ),
            ),
        ),
    ),
}


def get_target(framework: Framework | str) -> FrameworkTarget:
    """Look up the generation target for a framework identifier.

    Raises:
        UnsupportedFrameworkError: If the identifier is not a known framework.
    """
    try:
        return TARGETS[Framework(framework)]
    except (ValueError, KeyError):
        raise UnsupportedFrameworkError(
            framework, supported=[f.value for f in Framework]
        ) from None


def create_code_generator(source_name: str, framework: Framework | str) -> CodeGenerator:
    target = get_target(framework)
    return CodeGenerator(source_name, target.builder_factory(), target.imports)


class TypeGenerationPipeline:
    """Parses a schema and generates the declaration module for one framework.

    Attributes:
        source_name: Name of the exported type alias.
        framework: The target framework.
    """

    def __init__(
        self,
        source_name: str,
        framework: Framework | str,
        parser: OpenAPIParser | None = None,
    ):
        self.source_name = source_name
        self.target = get_target(framework)
        self.framework = Framework(framework)
        self.parser = parser or OpenAPIParser()

    async def execute(self, schema_content: str) -> str:
        api = await self.parser.parse(schema_content)
        code_generator = CodeGenerator(
            self.source_name, self.target.builder_factory(), self.target.imports
        )
        logger.debug(
            f'Generating {self.framework.value} types for {self.source_name} '
            f'with {len(self.target.imports)} imports'
        )
        return code_generator.generate(api)


async def generate(source_name: str, schema: str, framework: Framework | str) -> str:
    """Generate the framework declaration module for a raw OpenAPI document.

    Args:
        source_name: Name of the exported type alias.
        schema: The OpenAPI document, YAML or JSON encoded.
        framework: ``'hono'`` or ``'elysia'``.

    Raises:
        UnsupportedFrameworkError: If ``framework`` is unknown.
        ParseError: If the document cannot be decoded.
        ValidationError: If the document is not valid OpenAPI.
    """
    return await TypeGenerationPipeline(source_name, framework).execute(schema)


async def generate_models(schema: str) -> str:
    """Generate a module with one exported type alias per component schema."""
    api = await OpenAPIParser().parse(schema)
    return ModelsGenerator().generate(api)


async def validate(schema: str) -> APIModel:
    """Parse and validate a raw OpenAPI document without generating code."""
    return await OpenAPIParser().parse(schema)
