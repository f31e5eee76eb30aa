from oasmodel.openapi.base import EXTENSION_PREFIX, OpenAPIObject, Reference
from oasmodel.openapi.v3 import *  # noqa: F403
from oasmodel.openapi.v3 import __all__ as _v3_all

__all__ = ['EXTENSION_PREFIX', 'OpenAPIObject', 'Reference', *_v3_all]
