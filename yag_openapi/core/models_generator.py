"""Generation of a framework-independent module of named schema types."""

import logging

from yag_openapi.core.code_generator import render_type_alias
from yag_openapi.core.models import APIModel
from yag_openapi.core.translator import schema_to_type
from yag_openapi.core.type_expr import TypeRenderer, to_type_name

__all__ = ['ModelsGenerator']

logger = logging.getLogger(__name__)


class ModelsGenerator:
    """Emits one exported type alias per component schema.

    Aliases keep the order of the schemas in the source document. A document
    without schemas produces an empty module. Component names that are not
    identifiers are mapped with :func:`to_type_name`, the same way references
    to them are.
    """

    def __init__(self, renderer: TypeRenderer | None = None):
        self.renderer = renderer or TypeRenderer()

    def generate(self, api: APIModel) -> str:
        aliases = []
        for name, schema in (api.schemas or {}).items():
            type_name = to_type_name(name)
            if type_name != name:
                logger.debug(f"Emitting schema '{name}' as '{type_name}'")
            aliases.append(
                render_type_alias(type_name, self.renderer.render(schema_to_type(schema)))
            )
        if not aliases:
            return ''
        return '\n'.join(aliases) + '\n'
