"""Test suite for yag-openapi exceptions.

Covers the exception hierarchy and the message formats callers rely on,
in particular the shared prefix of parse and validation failures.
"""

import json

import pytest
import yaml

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


def _decoder_errors():
    try:
        yaml.safe_load('a: [b')
    except yaml.YAMLError as e:
        yaml_error = e
    try:
        json.loads('{')
    except json.JSONDecodeError as e:
        json_error = e
    return yaml_error, json_error


class TestExceptionHierarchy:
    """Test that exceptions share the expected base classes."""

    @pytest.mark.parametrize(
        'exc_class',
        [
            SchemaError,
            ParseError,
            ValidationError,
            SchemaReferenceError,
            SchemaLoadError,
            CodeGenerationError,
            UnsupportedFrameworkError,
            ConfigurationError,
            OutputError,
        ],
    )
    def test_all_inherit_from_base(self, exc_class):
        assert issubclass(exc_class, YagOpenAPIError)

    def test_schema_errors(self):
        assert issubclass(ParseError, SchemaError)
        assert issubclass(ValidationError, SchemaError)
        assert issubclass(SchemaLoadError, SchemaError)

    def test_reference_error_is_validation_error(self):
        assert issubclass(SchemaReferenceError, ValidationError)

    def test_catch_with_base(self):
        with pytest.raises(YagOpenAPIError):
            raise UnsupportedFrameworkError('express')


class TestParseError:
    def test_message_includes_both_decoders(self):
        yaml_error, json_error = _decoder_errors()

        error = ParseError(yaml_error, json_error)

        assert str(error).startswith(
            f'{PARSE_ERROR_PREFIX}Failed to parse schema as YAML or JSON: '
        )
        assert str(json_error) in str(error)
        assert error.yaml_error is yaml_error


class TestValidationError:
    def test_single_message(self):
        error = ValidationError('info: Field required')

        assert error.errors == ['info: Field required']
        assert str(error) == 'Failed to parse OpenAPI schema: info: Field required'

    def test_several_messages(self):
        error = ValidationError(['a: bad', 'b: worse'])

        assert str(error) == f'{PARSE_ERROR_PREFIX}a: bad; b: worse'

    def test_cause(self):
        cause = ValueError('boom')

        assert ValidationError('x', cause=cause).cause is cause


class TestSchemaReferenceError:
    def test_with_reason(self):
        error = SchemaReferenceError('#/components/schemas/X', reason="'X' not found")

        assert error.reference == '#/components/schemas/X'
        assert str(error) == (
            f"{PARSE_ERROR_PREFIX}Failed to resolve reference "
            f"'#/components/schemas/X': 'X' not found"
        )

    def test_without_reason(self):
        error = SchemaReferenceError('#/a')

        assert str(error).endswith("Failed to resolve reference '#/a'")


class TestOtherErrors:
    """Test message formats of the remaining exceptions."""

    def test_schema_load_error(self):
        error = SchemaLoadError('./api.yaml', cause=FileNotFoundError('missing'))

        assert str(error) == "Failed to load schema from './api.yaml': missing"
        assert error.source == './api.yaml'

    def test_code_generation_error(self):
        error = CodeGenerationError('Bad name', context='my-api')

        assert str(error) == 'Bad name (while generating my-api)'

    def test_code_generation_error_with_cause(self):
        error = CodeGenerationError('Failed', cause=RuntimeError('x'))

        assert str(error) == 'Failed: x'

    def test_unsupported_framework_error(self):
        error = UnsupportedFrameworkError('express', supported=['hono', 'elysia'])

        assert str(error) == 'Unsupported framework: express (expected one of: hono, elysia)'
        assert error.framework == 'express'

    def test_configuration_error(self):
        error = ConfigurationError(
            'Invalid configuration', config_path='yag.yaml', field='sources'
        )

        assert str(error) == "Invalid configuration in 'yag.yaml' (field: sources)"

    def test_output_error(self):
        error = OutputError('out/App.hono.ts', cause=PermissionError('denied'))

        assert str(error) == "Failed to write output to 'out/App.hono.ts': denied"

    def test_message_attribute(self):
        assert YagOpenAPIError('plain').message == 'plain'
