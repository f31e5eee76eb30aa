"""Test fixtures for oasmodel tests.

Sample OpenAPI 3.0 documents in their plain dict form. Each of them is
expected to survive ``OpenAPI.from_dict(doc).to_dict()`` unchanged.
"""

# Smallest valid document
MINIMAL_OPENAPI_SPEC = {
    'openapi': '3.0.3',
    'info': {'title': 'Minimal API', 'version': '1.0.0'},
    'paths': {},
}

# Pet store with most of the object types in use
PETSTORE_SPEC = {
    'openapi': '3.0.3',
    'info': {
        'title': 'Pet Store',
        'description': 'A sample pet store',
        'termsOfService': 'https://example.com/terms',
        'contact': {'name': 'API Support', 'email': 'support@example.com'},
        'license': {'name': 'Apache 2.0', 'url': 'https://www.apache.org/licenses/LICENSE-2.0'},
        'version': '1.0.0',
        'x-audience': 'public',
    },
    'externalDocs': {'description': 'Guides', 'url': 'https://example.com/docs'},
    'servers': [
        {
            'url': 'https://{region}.example.com/v1',
            'description': 'Regional endpoint',
            'variables': {
                'region': {'enum': ['eu', 'us'], 'default': 'eu'},
            },
        }
    ],
    'security': [{'api_key': []}, {'petstore_auth': ['read:pets', 'write:pets']}],
    'tags': [
        {'name': 'pets', 'description': 'Everything about pets'},
        {'name': 'store', 'externalDocs': {'url': 'https://example.com/store'}},
    ],
    'paths': {
        '/pets': {
            'summary': 'Pets',
            'get': {
                'tags': ['pets'],
                'operationId': 'listPets',
                'parameters': [
                    {
                        'name': 'limit',
                        'in': 'query',
                        'required': False,
                        'style': 'form',
                        'schema': {'type': 'integer', 'format': 'int32', 'maximum': 100},
                    },
                    {'$ref': '#/components/parameters/offset'},
                ],
                'responses': {
                    '200': {
                        'description': 'A page of pets',
                        'headers': {
                            'x-next': {'description': 'Next page', 'schema': {'type': 'string'}},
                        },
                        'content': {
                            'application/json': {
                                'schema': {
                                    'type': 'array',
                                    'items': {'$ref': '#/components/schemas/Pet'},
                                }
                            }
                        },
                    },
                    'default': {'$ref': '#/components/responses/Error'},
                },
            },
            'post': {
                'operationId': 'createPet',
                'requestBody': {
                    'required': True,
                    'content': {
                        'application/json': {
                            'schema': {'$ref': '#/components/schemas/Pet'},
                            'examples': {
                                'cat': {'summary': 'A cat', 'value': {'name': 'Tom'}},
                            },
                        }
                    },
                },
                'responses': {'201': {'description': 'Created'}},
                'callbacks': {
                    'onAdopted': {
                        '{$request.body#/callbackUrl}': {
                            'post': {
                                'responses': {'2XX': {'description': 'Acknowledged'}},
                            }
                        }
                    }
                },
                'security': [{'petstore_auth': ['write:pets']}],
                'x-rate-limit': 10,
            },
        },
        '/pets/{petId}': {
            'parameters': [
                {'name': 'petId', 'in': 'path', 'required': True, 'schema': {'type': 'string'}},
            ],
            'servers': [{'url': 'https://pets.example.com'}],
            'get': {
                'operationId': 'showPetById',
                'deprecated': True,
                'responses': {
                    '200': {
                        'description': 'A pet',
                        'links': {
                            'owner': {
                                'operationId': 'showOwner',
                                'parameters': {'petId': '$response.body#/id'},
                            }
                        },
                    }
                },
            },
        },
    },
    'components': {
        'schemas': {
            'Pet': {
                'type': 'object',
                'required': ['name'],
                'properties': {
                    'id': {'type': 'integer', 'format': 'int64', 'readOnly': True},
                    'name': {'type': 'string', 'minLength': 1},
                    'tag': {'type': 'string', 'nullable': True},
                    'kind': {'type': 'string', 'enum': ['cat', 'dog']},
                },
                'additionalProperties': False,
                'discriminator': {'propertyName': 'kind'},
                'xml': {'name': 'pet'},
            },
            'Cat': {
                'allOf': [
                    {'$ref': '#/components/schemas/Pet'},
                    {'type': 'object', 'properties': {'lives': {'type': 'integer', 'minimum': 0}}},
                ]
            },
            'NotAString': {'not': {'type': 'string'}},
            'Labels': {'type': 'object', 'additionalProperties': {'type': 'string'}},
        },
        'responses': {
            'Error': {'description': 'Unexpected error'},
        },
        'parameters': {
            'offset': {'name': 'offset', 'in': 'query', 'schema': {'type': 'integer'}},
        },
        'securitySchemes': {
            'api_key': {'type': 'apiKey', 'name': 'api_key', 'in': 'header'},
            'petstore_auth': {
                'type': 'oauth2',
                'flows': {
                    'implicit': {
                        'authorizationUrl': 'https://example.com/oauth/dialog',
                        'scopes': {'read:pets': 'read your pets', 'write:pets': 'modify pets'},
                    }
                },
            },
            'bearer': {'type': 'http', 'scheme': 'bearer', 'bearerFormat': 'JWT'},
        },
    },
    'x-generated-by': 'hand',
}

# Path item pointing somewhere else while also declaring local fields
REF_PATH_ITEM_SPEC = {
    'openapi': '3.0.3',
    'info': {'title': 'Refs', 'version': '0.1.0'},
    'paths': {
        '/shared': {
            '$ref': 'https://example.com/paths.yaml#/shared',
            'summary': 'Local summary',
            'get': {'operationId': 'localGet'},
        }
    },
}
