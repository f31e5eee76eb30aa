"""oasmodel - An in-memory object model for OpenAPI 3.0 documents.

Every object of an OpenAPI document (the root, path items, operations,
schemas, servers, security requirements, tags...) is a mutable pydantic
model that starts out empty and is filled in by attribute assignment or
fluent chaining. Vendor extensions (``x-`` keys) are kept on every object.

Quick Start:
    >>> from oasmodel import Info, OpenAPI, Operation, PathItem
    >>>
    >>> document = (
    ...     OpenAPI()
    ...     .set(openapi='3.0.3', info=Info(title='Pets', version='1.0.0'))
    ...     .add_path('/pets', PathItem().set(get=Operation(operationId='listPets')))
    ... )
    >>> document.to_dict()['paths']['/pets']['get']
    {'operationId': 'listPets'}

Parsing and emitting JSON or YAML text, meta-schema validation and
reference resolution are left to other tools; they exchange documents with
this model through ``from_dict``/``to_dict``.
"""

from oasmodel._version import version as __version__
from oasmodel.config import ModelSettings, get_settings
from oasmodel.exceptions import (
    ConfigurationError,
    InvalidExtensionError,
    OASModelError,
    ReservedKeyError,
    UnsupportedModelError,
)
from oasmodel.factory import apply_settings, create_document, create_object
from oasmodel.openapi import *  # noqa: F403
from oasmodel.openapi import __all__ as _openapi_all

__all__ = [
    *_openapi_all,
    # Construction
    'create_object',
    'create_document',
    'apply_settings',
    # Configuration
    'ModelSettings',
    'get_settings',
    # Exceptions
    'OASModelError',
    'InvalidExtensionError',
    'UnsupportedModelError',
    'ReservedKeyError',
    'ConfigurationError',
]
