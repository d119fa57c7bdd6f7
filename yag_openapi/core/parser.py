"""OpenAPI document parsing.

This module turns raw OpenAPI 3.x or Swagger 2.0 text (YAML or JSON) into
the :class:`~yag_openapi.core.models.APIModel` intermediate representation.
The work happens in three steps:

1. decode the text, trying YAML first and JSON second
2. validate the decoded document and inline its internal references
3. reduce the document to routes, methods, parameters and schemas
"""

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any

import yaml
from openapi_pydantic.v3.parser import OpenAPIv3
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from yag_openapi.core.models import (
    HTTP_METHODS,
    APIModel,
    ApiInfo,
    MethodModel,
    ParameterModel,
    RequestBodyModel,
    ResponseModel,
    RouteModel,
)
from yag_openapi.core.references import dereference
from yag_openapi.core.swagger import SwaggerDocument, is_swagger, upgrade_swagger
from yag_openapi.core.translator import schema_to_type
from yag_openapi.exceptions import ParseError, ValidationError

__all__ = ['OpenAPIParser']

logger = logging.getLogger(__name__)

PARAMETER_LOCATIONS = ('path', 'query', 'header', 'cookie')
MAX_REPORTED_ERRORS = 10


def _stringify_keys(obj: Any) -> Any:
    """Convert non-string mapping keys (e.g. YAML ``200:``) to strings."""
    if isinstance(obj, dict):
        return {str(key): _stringify_keys(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [_stringify_keys(item) for item in obj]
    return obj


def _format_validation_errors(error: PydanticValidationError) -> list[str]:
    messages = []
    for detail in error.errors()[:MAX_REPORTED_ERRORS]:
        location = '.'.join(str(part) for part in detail['loc'])
        messages.append(f'{location}: {detail["msg"]}' if location else detail['msg'])
    return messages


def _first_media_type(content: Any) -> tuple[str, Mapping[str, Any]] | None:
    if not isinstance(content, Mapping) or not content:
        return None
    content_type, media_type = next(iter(content.items()))
    if len(content) > 1:
        logger.debug(
            f'Keeping content type {content_type}, ignoring {list(content)[1:]}'
        )
    if not isinstance(media_type, Mapping):
        media_type = {}
    return content_type, media_type


class OpenAPIParser:
    """Parses OpenAPI documents into an :class:`APIModel`.

    The parser holds no state between calls, so a single instance can serve
    any number of concurrent ``parse`` calls.

    Example:
        >>> parser = OpenAPIParser()
        >>> api = await parser.parse(open('openapi.yaml').read())
        >>> [route.path for route in api.routes]
        ['/users', '/users/{id}']
    """

    async def parse(self, raw_content: str) -> APIModel:
        """Parse and validate raw OpenAPI text.

        Args:
            raw_content: The document, YAML or JSON encoded.

        Returns:
            The intermediate representation of the document.

        Raises:
            ParseError: If the text is neither valid YAML nor valid JSON.
            ValidationError: If the document is not a valid OpenAPI description.
        """
        document = self.decode(raw_content)
        validated = await asyncio.to_thread(self.validate, document)
        api = self.to_api_model(validated)
        logger.debug(
            f'Parsed "{api.info.title}" {api.info.version}: '
            f'{len(api.routes)} routes, {len(api.schemas or {})} schemas'
        )
        return api

    def decode(self, raw_content: str) -> Any:
        try:
            return yaml.safe_load(raw_content)
        except yaml.YAMLError as yaml_error:
            try:
                return json.loads(raw_content)
            except json.JSONDecodeError as json_error:
                raise ParseError(yaml_error, json_error) from json_error

    def validate(self, document: Any) -> dict:
        """Validate a decoded document and inline its internal references.

        Swagger 2.0 documents are upgraded to the OpenAPI 3 layout.

        Returns:
            The dereferenced OpenAPI 3 document.

        Raises:
            ValidationError: If the document does not validate.
        """
        if not isinstance(document, dict):
            raise ValidationError(
                f'Expected an OpenAPI document object, got {type(document).__name__}'
            )

        document = dereference(_stringify_keys(document))

        try:
            if is_swagger(document):
                SwaggerDocument.model_validate(document)
                document, _ = upgrade_swagger(document)
            else:
                version = str(document.get('openapi', ''))
                if not version.startswith('3.'):
                    raise ValidationError(
                        f"Unsupported OpenAPI version '{version or 'missing'}'"
                    )
                TypeAdapter(OpenAPIv3).validate_python(document)
        except PydanticValidationError as e:
            raise ValidationError(_format_validation_errors(e), cause=e) from e

        return document

    def to_api_model(self, document: dict) -> APIModel:
        info = document.get('info') or {}
        components = document.get('components') or {}
        schemas = components.get('schemas')

        return APIModel(
            info=ApiInfo(
                title=str(info.get('title', '')),
                version=str(info.get('version', '')),
                description=info.get('description'),
            ),
            routes=self._extract_routes(document.get('paths') or {}),
            schemas=dict(schemas) if schemas else None,
        )

    def _extract_routes(self, paths: Mapping[str, Any]) -> tuple[RouteModel, ...]:
        routes = []
        for path, path_item in paths.items():
            if not isinstance(path_item, Mapping):
                continue
            methods = self._extract_methods(path_item)
            if methods:
                routes.append(RouteModel(path=path, methods=methods))
        return tuple(routes)

    def _extract_methods(self, path_item: Mapping[str, Any]) -> tuple[MethodModel, ...]:
        methods = []
        for method in HTTP_METHODS:
            operation = path_item.get(method)
            if not isinstance(operation, Mapping):
                continue

            methods.append(
                MethodModel(
                    method=method.upper(),
                    parameters=self._extract_parameters(path_item, operation),
                    request_body=self._extract_request_body(operation),
                    responses=self._extract_responses(operation),
                    operation_id=operation.get('operationId'),
                    summary=operation.get('summary'),
                    description=operation.get('description'),
                )
            )
        return tuple(methods)

    def _extract_parameters(
        self, path_item: Mapping[str, Any], operation: Mapping[str, Any]
    ) -> tuple[ParameterModel, ...]:
        # Path-item and operation parameters are concatenated as declared,
        # an operation-level redefinition does not replace the path-level one.
        declared = [
            *(path_item.get('parameters') or []),
            *(operation.get('parameters') or []),
        ]

        parameters = []
        for parameter in declared:
            if not isinstance(parameter, Mapping) or '$ref' in parameter:
                continue
            location = parameter.get('in')
            if location not in PARAMETER_LOCATIONS:
                continue

            schema = parameter.get('schema')
            if schema is None:
                media = _first_media_type(parameter.get('content'))
                if media:
                    schema = media[1].get('schema')

            parameters.append(
                ParameterModel(
                    name=str(parameter.get('name', '')),
                    type=schema_to_type(schema),
                    location=location,
                    required=bool(parameter.get('required', False)),
                    description=parameter.get('description'),
                )
            )
        return tuple(parameters)

    def _extract_request_body(
        self, operation: Mapping[str, Any]
    ) -> RequestBodyModel | None:
        request_body = operation.get('requestBody')
        if not isinstance(request_body, Mapping) or '$ref' in request_body:
            return None

        media = _first_media_type(request_body.get('content'))
        if media is None:
            return None

        content_type, media_type = media
        if media_type.get('schema') is None:
            return None

        return RequestBodyModel(
            content_type=content_type,
            schema=media_type['schema'],
            required=bool(request_body.get('required', False)),
        )

    def _extract_responses(
        self, operation: Mapping[str, Any]
    ) -> tuple[ResponseModel, ...]:
        responses = []
        for status_code, response in (operation.get('responses') or {}).items():
            if not isinstance(response, Mapping) or '$ref' in response:
                continue

            content_type = None
            schema = None
            media = _first_media_type(response.get('content'))
            if media is not None:
                content_type, media_type = media
                schema = media_type.get('schema')

            responses.append(
                ResponseModel(
                    status_code=str(status_code),
                    description=str(response.get('description', '')),
                    content_type=content_type,
                    schema=schema,
                    headers=response.get('headers'),
                )
            )
        return tuple(responses)
