"""Test fixtures for yag-openapi tests.

This module provides sample OpenAPI documents used across the parser,
framework builder and end-to-end generation tests.
"""

import json

import yaml

# Minimal OpenAPI 3.0 document without any paths
MINIMAL_OPENAPI_SPEC = {
    'openapi': '3.0.0',
    'info': {'title': 'Minimal API', 'version': '1.0.0'},
    'paths': {},
}

# Users API with path parameters, a JSON body and component schemas
SIMPLE_OPENAPI_SPEC = {
    'openapi': '3.0.0',
    'info': {'title': 'Test API', 'version': '1.0.0'},
    'paths': {
        '/users': {
            'get': {
                'summary': 'List users',
                'responses': {
                    '200': {
                        'description': 'Successful response',
                        'content': {
                            'application/json': {
                                'schema': {
                                    'type': 'array',
                                    'items': {'$ref': '#/components/schemas/User'},
                                }
                            }
                        },
                    }
                },
            },
            'post': {
                'summary': 'Create user',
                'requestBody': {
                    'required': True,
                    'content': {
                        'application/json': {
                            'schema': {'$ref': '#/components/schemas/CreateUser'}
                        }
                    },
                },
                'responses': {
                    '201': {
                        'description': 'Created',
                        'content': {
                            'application/json': {
                                'schema': {'$ref': '#/components/schemas/User'}
                            }
                        },
                    }
                },
            },
        },
        '/users/{id}': {
            'get': {
                'summary': 'Get user',
                'parameters': [
                    {
                        'name': 'id',
                        'in': 'path',
                        'required': True,
                        'schema': {'type': 'string'},
                    }
                ],
                'responses': {
                    '200': {
                        'description': 'Successful response',
                        'content': {
                            'application/json': {
                                'schema': {'$ref': '#/components/schemas/User'}
                            }
                        },
                    },
                    '404': {'description': 'Not found'},
                },
            }
        },
    },
    'components': {
        'schemas': {
            'User': {
                'type': 'object',
                'required': ['id', 'name'],
                'properties': {
                    'id': {'type': 'string'},
                    'name': {'type': 'string'},
                    'email': {'type': 'string'},
                },
            },
            'CreateUser': {
                'type': 'object',
                'required': ['name'],
                'properties': {
                    'name': {'type': 'string'},
                    'email': {'type': 'string'},
                },
            },
        }
    },
}

# Blog API with nested routes sharing the /posts prefix
COMPLEX_OPENAPI_SPEC = {
    'openapi': '3.0.0',
    'info': {'title': 'Blog API', 'version': '2.0.0'},
    'paths': {
        '/posts': {
            'get': {
                'parameters': [
                    {'name': 'page', 'in': 'query', 'schema': {'type': 'integer'}},
                    {'name': 'limit', 'in': 'query', 'schema': {'type': 'integer'}},
                ],
                'responses': {
                    '200': {
                        'description': 'Posts',
                        'content': {
                            'application/json': {
                                'schema': {
                                    'type': 'array',
                                    'items': {'$ref': '#/components/schemas/Post'},
                                }
                            }
                        },
                    }
                },
            }
        },
        '/posts/{postId}/comments': {
            'get': {
                'parameters': [
                    {
                        'name': 'postId',
                        'in': 'path',
                        'required': True,
                        'schema': {'type': 'string'},
                    },
                    {
                        'name': 'X-Request-Id',
                        'in': 'header',
                        'schema': {'type': 'string'},
                    },
                ],
                'responses': {
                    '200': {
                        'description': 'Comments',
                        'content': {
                            'application/json': {
                                'schema': {
                                    'type': 'array',
                                    'items': {'$ref': '#/components/schemas/Comment'},
                                }
                            }
                        },
                    },
                    '404': {'description': 'Post not found'},
                },
            }
        },
    },
    'components': {
        'schemas': {
            'Post': {
                'type': 'object',
                'required': ['id', 'title', 'status'],
                'properties': {
                    'id': {'type': 'string'},
                    'title': {'type': 'string'},
                    'status': {'type': 'string', 'enum': ['draft', 'published']},
                    'tags': {'type': 'array', 'items': {'type': 'string'}},
                },
            },
            'Comment': {
                'allOf': [
                    {'$ref': '#/components/schemas/Post'},
                    {
                        'type': 'object',
                        'properties': {'postId': {'type': 'string'}},
                    },
                ]
            },
        }
    },
}

# Self-referencing schema
RECURSIVE_OPENAPI_SPEC = {
    'openapi': '3.0.0',
    'info': {'title': 'Tree API', 'version': '1.0.0'},
    'paths': {
        '/nodes': {
            'get': {
                'responses': {
                    '200': {
                        'description': 'Root node',
                        'content': {
                            'application/json': {
                                'schema': {'$ref': '#/components/schemas/Node'}
                            }
                        },
                    }
                }
            }
        }
    },
    'components': {
        'schemas': {
            'Node': {
                'type': 'object',
                'required': ['value'],
                'properties': {
                    'value': {'type': 'string'},
                    'children': {
                        'type': 'array',
                        'items': {'$ref': '#/components/schemas/Node'},
                    },
                },
            }
        }
    },
}

# Swagger 2.0 document exercising body, query and definitions
SWAGGER_SPEC = {
    'swagger': '2.0',
    'info': {'title': 'Pet Store', 'version': '1.0.0'},
    'consumes': ['application/json'],
    'produces': ['application/json'],
    'paths': {
        '/pets': {
            'get': {
                'operationId': 'listPets',
                'parameters': [
                    {'name': 'limit', 'in': 'query', 'type': 'integer'},
                ],
                'responses': {
                    '200': {
                        'description': 'A list of pets',
                        'schema': {
                            'type': 'array',
                            'items': {'$ref': '#/definitions/Pet'},
                        },
                    }
                },
            },
            'post': {
                'operationId': 'createPet',
                'parameters': [
                    {
                        'name': 'pet',
                        'in': 'body',
                        'required': True,
                        'schema': {'$ref': '#/definitions/Pet'},
                    }
                ],
                'responses': {'201': {'description': 'Created'}},
            },
        }
    },
    'definitions': {
        'Pet': {
            'type': 'object',
            'required': ['name'],
            'properties': {
                'id': {'type': 'integer'},
                'name': {'type': 'string'},
            },
        }
    },
}

# Operation parameter overriding a path-level one, and a dotted component name
OVERRIDE_OPENAPI_SPEC = {
    'openapi': '3.0.0',
    'info': {'title': 'Pets API', 'version': '1.0.0'},
    'paths': {
        '/users/{id}': {
            'parameters': [
                {'name': 'id', 'in': 'path', 'required': True, 'schema': {'type': 'string'}}
            ],
            'get': {
                'parameters': [
                    {
                        'name': 'id',
                        'in': 'path',
                        'required': True,
                        'schema': {'type': 'integer'},
                    }
                ],
                'responses': {'204': {'description': 'No content'}},
            },
        }
    },
    'components': {
        'schemas': {
            'Pet.Category': {
                'type': 'object',
                'required': ['name'],
                'properties': {
                    'name': {'type': 'string'},
                    'parent': {'$ref': '#/components/schemas/Pet.Category'},
                },
            }
        }
    },
}

# Decodes fine but is missing the required 'info' object
INVALID_OPENAPI_SPEC = {
    'openapi': '3.0.0',
    'paths': {},
}

# Neither valid YAML nor valid JSON
MALFORMED_CONTENT = 'openapi: "3.0.0"\ninfo: {title: [unclosed\n'


def as_json(spec: dict) -> str:
    return json.dumps(spec)


def as_yaml(spec: dict) -> str:
    return yaml.safe_dump(spec, sort_keys=False)
