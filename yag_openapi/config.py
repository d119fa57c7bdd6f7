import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from yag_openapi.exceptions import ConfigurationError
from yag_openapi.generator import Framework

DEFAULT_FILENAMES = ['yag.yaml', 'yag.yml']
PYPROJECT_TOOL_KEY = 'yag-openapi'


class SourceConfig(BaseModel):
    """Represents a single schema source to generate declarations for."""

    name: str = Field(..., description='Name of the exported type alias.')

    source: str = Field(..., description='Path or URL to the OpenAPI document.')

    frameworks: list[Framework] = Field(
        default_factory=lambda: [Framework.HONO],
        description='Target frameworks to generate declarations for.',
    )

    output: str = Field(
        'generated', description='Output directory for the generated modules.'
    )

    models: bool = Field(
        True, description='Whether to also generate the named schema types module.'
    )


class GeneratorConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='YAG_OPENAPI_')

    sources: list[SourceConfig] = Field(
        ..., description='List of schema sources to process.'
    )

    log_level: str = Field('WARNING', description='Logging level for the CLI.')


def load_yaml(path: str | Path) -> dict:
    return yaml.safe_load(Path(path).read_text()) or {}


def _validate(data: dict, config_path: str | Path) -> GeneratorConfig:
    try:
        return GeneratorConfig.model_validate(data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        raise ConfigurationError(
            f'Invalid configuration: {first["msg"]}',
            config_path=str(config_path),
            field='.'.join(str(part) for part in first['loc']),
        ) from e


def get_config(path: str | None = None) -> GeneratorConfig:
    """Load configuration from a file or the project defaults.

    Looks for, in order: the explicit ``path``, ``yag.yaml`` / ``yag.yml`` in
    the current directory, a ``[tool.yag-openapi]`` table in ``pyproject.toml``.

    Raises:
        ConfigurationError: If no configuration is found or it is invalid.
    """
    if path:
        if not Path(path).exists():
            raise ConfigurationError('Configuration file not found', config_path=path)
        return _validate(load_yaml(path), path)

    cwd = Path(os.getcwd())

    for filename in DEFAULT_FILENAMES:
        candidate = cwd / filename
        if candidate.exists():
            return _validate(load_yaml(candidate), candidate)

    pyproject_path = cwd / 'pyproject.toml'

    if pyproject_path.exists():
        import tomllib

        pyproject = tomllib.loads(pyproject_path.read_text())
        tools = pyproject.get('tool', {})

        if PYPROJECT_TOOL_KEY in tools:
            return _validate(tools[PYPROJECT_TOOL_KEY], pyproject_path)

    raise ConfigurationError('Configuration not found', config_path=str(cwd))
