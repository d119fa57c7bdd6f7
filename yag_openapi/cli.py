import asyncio
import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn
from upath import UPath

from yag_openapi.config import SourceConfig, get_config
from yag_openapi.exceptions import OutputError, YagOpenAPIError
from yag_openapi.generator import generate as generate_types
from yag_openapi.generator import generate_models, validate as validate_schema
from yag_openapi.loader import SchemaSourceLoader

console = Console()
app = typer.Typer(
    name='yag-openapi',
    help='Generate Hono and Elysia type declarations from OpenAPI specifications',
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format='%(message)s',
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _write(path: UPath, content: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')
    except OSError as e:
        raise OutputError(str(path), cause=e) from e


async def _generate_source(source: SourceConfig, loader: SchemaSourceLoader) -> list[str]:
    content = loader.load(source.source)
    output_dir = UPath(source.output)
    written = []

    for framework in source.frameworks:
        code = await generate_types(source.name, content, framework)
        path = output_dir / f'{source.name}.{framework.value}.ts'
        _write(path, code)
        written.append(str(path))

    if source.models:
        path = output_dir / f'{source.name}.models.ts'
        _write(path, await generate_models(content))
        written.append(str(path))

    return written


@app.command()
def generate(
    config: Annotated[
        str | None,
        typer.Option('--config', '-c', help='Path to configuration file (YAML)'),
    ] = None,
    verbose: Annotated[
        bool, typer.Option('--verbose', '-v', help='Enable debug logging')
    ] = False,
) -> None:
    """Generate type declarations for every configured source.

    A failing source is reported and skipped; the remaining sources are
    still generated.

    Examples:
        yag-openapi generate
        yag-openapi generate --config my-config.yaml
    """
    try:
        settings = get_config(config)
    except YagOpenAPIError as e:
        console.print(f'[red]Error:[/red] {e}')
        raise typer.Exit(1)

    _configure_logging('DEBUG' if verbose else settings.log_level)

    loader = SchemaSourceLoader()
    failed = []

    for source in settings.sources:
        with Progress(
            SpinnerColumn(),
            TextColumn('[progress.description]{task.description}'),
            console=console,
        ) as progress:
            task = progress.add_task(
                f'Generating types for {source.name} from {source.source}...',
                total=None,
            )
            try:
                written = asyncio.run(_generate_source(source, loader))
            except YagOpenAPIError as e:
                progress.update(task, description=f'Failed: {source.name}')
                logger.debug('Generation failed', exc_info=True)
                console.print(f'[red]Error ({source.name}):[/red] {e}')
                failed.append(source.name)
                continue
            progress.update(task, description=f'Generated types for {source.name}')

        console.print('[dim]Generated files:[/dim]')
        for path in written:
            console.print(f'  - {path}')

    if failed:
        console.print(f'[red]Failed sources:[/red] {", ".join(failed)}')
        raise typer.Exit(1)

    console.print('[green]Successfully generated type declarations[/green]')


@app.command()
def models(
    source: Annotated[str, typer.Argument(help='Path or URL to the OpenAPI document')],
    output: Annotated[
        str | None,
        typer.Option('--output', '-o', help='Write to this file instead of stdout'),
    ] = None,
) -> None:
    """Generate the named schema types module for a single document."""
    try:
        code = asyncio.run(generate_models(SchemaSourceLoader().load(source)))
        if output:
            _write(UPath(output), code)
            console.print(f'[green]Wrote[/green] {output}')
        else:
            typer.echo(code, nl=False)
    except YagOpenAPIError as e:
        console.print(f'[red]Error:[/red] {e}')
        raise typer.Exit(1)


@app.command()
def validate(
    source: Annotated[str, typer.Argument(help='Path or URL to the OpenAPI document')],
) -> None:
    """Validate an OpenAPI document."""
    try:
        api = asyncio.run(validate_schema(SchemaSourceLoader().load(source)))
    except YagOpenAPIError as e:
        console.print(f'[red]Invalid:[/red] {e}')
        raise typer.Exit(1)

    console.print(
        f'[green]Valid:[/green] {api.info.title} {api.info.version} '
        f'({len(api.routes)} routes, {len(api.schemas or {})} schemas)'
    )


@app.command()
def version() -> None:
    """Show the version of yag-openapi."""
    from yag_openapi import __version__

    console.print(f'yag-openapi version: {__version__}')


if __name__ == '__main__':
    app()
