"""Assembly of the generated TypeScript declaration module.

The generated text consists of a fixed list of import declarations followed
by one exported type alias bound to the framework builder's app type.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from yag_openapi.core.models import APIModel
from yag_openapi.core.type_expr import TypeRenderer, is_identifier
from yag_openapi.exceptions import CodeGenerationError

if TYPE_CHECKING:
    from yag_openapi.frameworks.base import FrameworkTypeBuilder

__all__ = ['NamedImport', 'ImportDeclaration', 'CodeGenerator', 'render_type_alias']


@dataclass(frozen=True)
class NamedImport:
    name: str
    is_type_only: bool = False

    def render(self) -> str:
        return f'type {self.name}' if self.is_type_only else self.name


@dataclass(frozen=True)
class ImportDeclaration:
    """A single ``import ... from "module";`` statement.

    Attributes:
        module_specifier: The module to import from.
        named_imports: Names listed between braces.
        default_import: Optional default import binding.
        is_type_only: Emit ``import type`` for the whole declaration.
    """

    module_specifier: str
    named_imports: tuple[NamedImport, ...] = ()
    default_import: str | None = None
    is_type_only: bool = False

    def render(self) -> str:
        bindings = []
        if self.default_import:
            bindings.append(self.default_import)
        if self.named_imports:
            names = ', '.join(named.render() for named in self.named_imports)
            bindings.append(f'{{ {names} }}')

        keyword = 'import type' if self.is_type_only else 'import'
        if not bindings:
            return f'import "{self.module_specifier}";'
        return f'{keyword} {", ".join(bindings)} from "{self.module_specifier}";'


def render_type_alias(name: str, type_text: str) -> str:
    if not is_identifier(name):
        raise CodeGenerationError(
            f"'{name}' is not a valid type alias name", context=name
        )
    return f'export type {name} = {type_text};'


class CodeGenerator:
    """Generates the declaration module for one framework.

    Example:
        >>> generator = CodeGenerator('AppType', HonoTypeBuilder(), HONO_IMPORTS)
        >>> print(generator.generate(api))
        import { type Hono } from "hono";
        ...
        export type AppType = Hono<...>;
    """

    def __init__(
        self,
        source_name: str,
        type_builder: 'FrameworkTypeBuilder',
        imports: tuple[ImportDeclaration, ...] = (),
        renderer: TypeRenderer | None = None,
    ):
        self.source_name = source_name
        self.type_builder = type_builder
        self.imports = tuple(imports)
        self.renderer = renderer or TypeRenderer()

    def generate(self, api: APIModel) -> str:
        app_type = self.type_builder.build_app_type(api)
        alias = render_type_alias(self.source_name, self.renderer.render(app_type))

        sections = []
        if self.imports:
            sections.append('\n'.join(decl.render() for decl in self.imports))
        sections.append(alias)
        return '\n\n'.join(sections) + '\n'
