"""Swagger 2.0 support.

Swagger documents are validated against a small structural model, then
upgraded to the OpenAPI 3 shape so the rest of the parser only deals with
one document layout. The upgrade works on already dereferenced documents.
"""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

__all__ = ['SwaggerDocument', 'is_swagger', 'upgrade_swagger']

logger = logging.getLogger(__name__)

DEFAULT_MEDIA_TYPE = 'application/json'

_FORM_MEDIA_TYPES = ('multipart/form-data', 'application/x-www-form-urlencoded')

_OPERATION_KEYS = ('get', 'put', 'post', 'delete', 'options', 'head', 'patch')
_COPIED_OPERATION_KEYS = ('tags', 'summary', 'description', 'operationId', 'deprecated')
_SCHEMA_KEYWORDS = (
    'format',
    'items',
    'default',
    'maximum',
    'minimum',
    'maxLength',
    'minLength',
    'pattern',
    'maxItems',
    'minItems',
    'uniqueItems',
    'enum',
    'multipleOf',
)


class SwaggerInfo(BaseModel):
    model_config = ConfigDict(extra='allow')

    title: str
    version: str
    description: str | None = None


class SwaggerParameter(BaseModel):
    model_config = ConfigDict(extra='allow', populate_by_name=True)

    name: str
    in_: str = Field(..., alias='in', pattern=r'^(query|header|path|formData|body)$')
    required: bool = False
    description: str | None = None


class SwaggerResponse(BaseModel):
    model_config = ConfigDict(extra='allow', populate_by_name=True)

    description: str
    schema_: dict[str, Any] | None = Field(None, alias='schema')
    headers: dict[str, Any] | None = None


class SwaggerOperation(BaseModel):
    model_config = ConfigDict(extra='allow')

    parameters: list[SwaggerParameter] | None = None
    responses: dict[str, SwaggerResponse]
    consumes: list[str] | None = None
    produces: list[str] | None = None


class SwaggerPathItem(BaseModel):
    model_config = ConfigDict(extra='allow')

    get: SwaggerOperation | None = None
    put: SwaggerOperation | None = None
    post: SwaggerOperation | None = None
    delete: SwaggerOperation | None = None
    options: SwaggerOperation | None = None
    head: SwaggerOperation | None = None
    patch: SwaggerOperation | None = None
    parameters: list[SwaggerParameter] | None = None


class SwaggerDocument(BaseModel):
    """Structural model of a (dereferenced) Swagger 2.0 document."""

    model_config = ConfigDict(extra='allow')

    swagger: str = Field(..., pattern=r'^2\.0$')
    info: SwaggerInfo
    paths: dict[str, SwaggerPathItem] = Field(default_factory=dict)
    definitions: dict[str, Any] | None = None
    consumes: list[str] | None = None
    produces: list[str] | None = None


def is_swagger(document: dict) -> bool:
    return 'swagger' in document


def _rewrite_refs(obj: Any) -> Any:
    if isinstance(obj, dict):
        result = {}
        for key, value in obj.items():
            if key == '$ref' and isinstance(value, str):
                value = value.replace('#/definitions/', '#/components/schemas/')
            result[key] = _rewrite_refs(value)
        return result
    if isinstance(obj, list):
        return [_rewrite_refs(item) for item in obj]
    return obj


def _parameter_schema(parameter: dict) -> dict:
    schema: dict[str, Any] = {}
    if parameter.get('type') == 'file':
        schema['type'] = 'string'
        schema['format'] = 'binary'
    elif 'type' in parameter:
        schema['type'] = parameter['type']
    for keyword in _SCHEMA_KEYWORDS:
        if keyword in parameter and keyword not in schema:
            schema[keyword] = parameter[keyword]
    return schema


def _convert_parameter(parameter: dict) -> dict:
    result: dict[str, Any] = {'name': parameter['name'], 'in': parameter['in']}
    if parameter.get('description'):
        result['description'] = parameter['description']
    if parameter.get('required'):
        result['required'] = True
    result['schema'] = _parameter_schema(parameter)
    return result


def _convert_form_parameters(parameters: list[dict], consumes: list[str]) -> dict:
    declared = [c for c in consumes if c in _FORM_MEDIA_TYPES]
    if declared:
        media_type = declared[0]
    elif any(p.get('type') == 'file' for p in parameters):
        media_type = 'multipart/form-data'
    else:
        media_type = 'application/x-www-form-urlencoded'

    properties = {p['name']: _parameter_schema(p) for p in parameters}
    required = [p['name'] for p in parameters if p.get('required')]
    schema: dict[str, Any] = {'type': 'object', 'properties': properties}
    if required:
        schema['required'] = required
    return {'content': {media_type: {'schema': schema}}}


def _convert_parameters(
    parameters: list[dict], consumes: list[str]
) -> tuple[list[dict], dict | None]:
    converted = []
    body = None
    form = []
    for parameter in parameters:
        location = parameter.get('in')
        if location == 'body':
            body = parameter
        elif location == 'formData':
            form.append(parameter)
        else:
            converted.append(_convert_parameter(parameter))

    request_body = None
    if body is not None:
        request_body = {
            'content': {
                media_type: {'schema': body.get('schema', {})} for media_type in consumes
            }
        }
        if body.get('required'):
            request_body['required'] = True
    elif form:
        request_body = _convert_form_parameters(form, consumes)
    return converted, request_body


def _convert_response(response: dict, produces: list[str]) -> dict:
    result: dict[str, Any] = {'description': response.get('description', '')}
    if response.get('schema') is not None:
        result['content'] = {
            media_type: {'schema': response['schema']} for media_type in produces
        }
    if response.get('headers'):
        result['headers'] = {
            name: {'schema': _parameter_schema(header)}
            for name, header in response['headers'].items()
        }
    return result


def _convert_operation(
    operation: dict, consumes: list[str], produces: list[str]
) -> dict:
    result = {key: operation[key] for key in _COPIED_OPERATION_KEYS if key in operation}
    parameters, request_body = _convert_parameters(
        operation.get('parameters') or [], operation.get('consumes') or consumes
    )
    if parameters:
        result['parameters'] = parameters
    if request_body:
        result['requestBody'] = request_body

    operation_produces = operation.get('produces') or produces
    result['responses'] = {
        str(status): _convert_response(response, operation_produces)
        for status, response in (operation.get('responses') or {}).items()
    }
    return result


def upgrade_swagger(document: dict) -> tuple[dict, list[str]]:
    """Upgrade a dereferenced Swagger 2.0 document to the OpenAPI 3.0 layout.

    Args:
        document: The Swagger document, with internal references inlined.

    Returns:
        A tuple of (OpenAPI 3.0 document, list of upgrade warnings).
    """
    warnings: list[str] = []
    consumes = document.get('consumes') or [DEFAULT_MEDIA_TYPE]
    produces = document.get('produces') or [DEFAULT_MEDIA_TYPE]

    paths: dict[str, Any] = {}
    for path, path_item in (document.get('paths') or {}).items():
        if path.startswith('x-') or not isinstance(path_item, dict):
            continue
        converted: dict[str, Any] = {}
        if path_item.get('parameters'):
            parameters, request_body = _convert_parameters(
                path_item['parameters'], consumes
            )
            if request_body:
                warnings.append(
                    f'Path-level body parameters of {path} are not supported, ignoring them'
                )
            if parameters:
                converted['parameters'] = parameters
        for method in _OPERATION_KEYS:
            if isinstance(path_item.get(method), dict):
                converted[method] = _convert_operation(
                    path_item[method], consumes, produces
                )
        paths[path] = converted

    upgraded: dict[str, Any] = {
        'openapi': '3.0.3',
        'info': document['info'],
        'paths': paths,
    }
    if document.get('definitions'):
        upgraded['components'] = {'schemas': document['definitions']}

    for warning in warnings:
        logger.warning(warning)
    return _rewrite_refs(upgraded), warnings
