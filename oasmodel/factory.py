"""Construction helpers for document model objects.

:func:`create_object` builds an empty instance of any model type.
:func:`create_document` starts a new document with the configured
OpenAPI version, and :func:`apply_settings` overrides servers at
document, path and operation level from :class:`ModelSettings`.
"""

import logging
from typing import TypeVar

from oasmodel.config import ModelSettings, get_settings
from oasmodel.exceptions import UnsupportedModelError
from oasmodel.openapi.base import OpenAPIObject
from oasmodel.openapi.v3 import Info, OpenAPI, SecurityRequirement, Server

logger = logging.getLogger(__name__)

T = TypeVar('T')


def create_object(model: type[T]) -> T:
    """Create an empty instance of a document model type.

    Raises:
        UnsupportedModelError: If ``model`` is not a document model type.
    """
    if not isinstance(model, type) or not issubclass(
        model, (OpenAPIObject, SecurityRequirement)
    ):
        raise UnsupportedModelError(model)
    return model()


def create_document(
    title: str, version: str, settings: ModelSettings | None = None
) -> OpenAPI:
    """Create a document with its info block set and settings applied."""
    settings = settings or get_settings()
    document = OpenAPI().set(
        openapi=settings.openapi_version,
        info=Info().set(title=title, version=version),
    )
    return apply_settings(document, settings)


def apply_settings(
    document: OpenAPI, settings: ModelSettings | None = None
) -> OpenAPI:
    """Replace servers in ``document`` with the ones configured in ``settings``.

    Paths and operationIds that the document does not contain are skipped
    with a warning.
    """
    settings = settings or get_settings()

    if settings.servers:
        document.servers = _servers(settings.servers)
        logger.debug('Applied %d document servers', len(settings.servers))

    for path, urls in settings.path_servers.items():
        item = document.paths.get(path)
        if item is None:
            logger.warning(f"Configured servers for unknown path '{path}'")
            continue
        item.servers = _servers(urls)
        logger.debug("Applied %d servers to path '%s'", len(urls), path)

    if settings.operation_servers:
        operations = {
            operation.operationId: operation
            for item in document.paths.values()
            for operation in item.read_operations()
            if operation.operationId
        }
        for operation_id, urls in settings.operation_servers.items():
            operation = operations.get(operation_id)
            if operation is None:
                logger.warning(
                    f"Configured servers for unknown operation '{operation_id}'"
                )
                continue
            operation.servers = _servers(urls)
            logger.debug(
                "Applied %d servers to operation '%s'", len(urls), operation_id
            )

    return document


def _servers(urls: list[str]) -> list[Server]:
    return [Server(url=url) for url in urls]
