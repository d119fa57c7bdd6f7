"""Custom exceptions for yag-openapi.

This module defines the hierarchy of exceptions raised while turning an
OpenAPI document into framework type declarations. Parse and validation
failures share the ``PARSE_ERROR_PREFIX`` message prefix so callers can
recognise them without caring which stage failed.
"""

PARSE_ERROR_PREFIX = 'Failed to parse OpenAPI schema: '


class YagOpenAPIError(Exception):
    """Base exception for all yag-openapi errors.

    Example:
        try:
            await generate('AppType', content, 'hono')
        except YagOpenAPIError as e:
            print(f"yag-openapi error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class SchemaError(YagOpenAPIError):
    """Base exception for schema-related errors."""

    pass


class ParseError(SchemaError):
    """The raw document could be decoded neither as YAML nor as JSON.

    Attributes:
        yaml_error: The exception raised by the YAML decoder.
        json_error: The exception raised by the JSON decoder.
    """

    def __init__(self, yaml_error: Exception, json_error: Exception):
        self.yaml_error = yaml_error
        self.json_error = json_error
        message = (
            f'{PARSE_ERROR_PREFIX}Failed to parse schema as YAML or JSON: '
            f'{yaml_error}; {json_error}'
        )
        super().__init__(message)


class ValidationError(SchemaError):
    """The document was decoded but is not a valid OpenAPI description.

    Attributes:
        errors: List of validation error messages.
        cause: The underlying validator exception, if any.
    """

    def __init__(self, errors: list[str] | str, cause: Exception | None = None):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = errors
        self.cause = cause
        super().__init__(f'{PARSE_ERROR_PREFIX}{"; ".join(errors)}')


class SchemaReferenceError(ValidationError):
    """An internal $ref could not be resolved.

    Attributes:
        reference: The $ref string that could not be resolved.
        reason: Explanation of why the reference couldn't be resolved.
    """

    def __init__(self, reference: str, reason: str | None = None):
        self.reference = reference
        self.reason = reason
        message = f"Failed to resolve reference '{reference}'"
        if reason:
            message += f': {reason}'
        super().__init__(message)


class SchemaLoadError(SchemaError):
    """Failed to read a schema document from a file or URL.

    Attributes:
        source: The source path or URL that failed to load.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load schema from '{source}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class CodeGenerationError(YagOpenAPIError):
    """Error while assembling the generated source text.

    Attributes:
        context: Additional context about what was being generated.
        cause: The underlying exception that caused the failure.
    """

    def __init__(
        self, message: str, context: str | None = None, cause: Exception | None = None
    ):
        self.context = context
        self.cause = cause
        full_message = message
        if context:
            full_message = f'{message} (while generating {context})'
        if cause:
            full_message += f': {cause}'
        super().__init__(full_message)


class UnsupportedFrameworkError(YagOpenAPIError):
    """An unknown target framework identifier was requested.

    Attributes:
        framework: The rejected framework identifier.
        supported: The identifiers that are accepted.
    """

    def __init__(self, framework: object, supported: list[str] | None = None):
        self.framework = framework
        self.supported = supported or []
        message = f'Unsupported framework: {framework}'
        if self.supported:
            message += f' (expected one of: {", ".join(self.supported)})'
        super().__init__(message)


class ConfigurationError(YagOpenAPIError):
    """Error in configuration.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)


class OutputError(YagOpenAPIError):
    """Error writing generated output.

    Attributes:
        output_path: The path where output was being written.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, output_path: str, cause: Exception | None = None):
        self.output_path = output_path
        self.cause = cause
        message = f"Failed to write output to '{output_path}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)
