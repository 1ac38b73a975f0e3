#
#
#

__version__ = '1.0.0'

from .exceptions import (  # noqa: E402
    ConstellixClientBadRequest,
    ConstellixClientNotFound,
    ConstellixClientUnauthorized,
    ConstellixException,
    ConstellixHttpException,
    InvalidArgument,
    ModelNotFoundException,
    ReadOnlyPropertyException,
)
from .pagination import (  # noqa: E402
    Paginator,
    PaginatorFactory,
    PaginatorFactoryInterface,
)
from .client import ConstellixClient  # noqa: E402

__all__ = [
    'ConstellixClient',
    'ConstellixClientBadRequest',
    'ConstellixClientNotFound',
    'ConstellixClientUnauthorized',
    'ConstellixException',
    'ConstellixHttpException',
    'InvalidArgument',
    'ModelNotFoundException',
    'Paginator',
    'PaginatorFactory',
    'PaginatorFactoryInterface',
    'ReadOnlyPropertyException',
]
