from .client import CatalogClient
from .error_mapper import CatalogErrorMapper
from .exceptions import (
    AuthenticationError,
    BadRequestError,
    CatalogAPIError,
    NotFoundError,
    RateLimitError,
    ResponseFormatError,
    ServerError,
    TransportError,
)
from .retry_handler import CatalogRetryHandler

__all__ = [
    "CatalogClient",
    "CatalogErrorMapper",
    "CatalogRetryHandler",
    "AuthenticationError",
    "BadRequestError",
    "CatalogAPIError",
    "NotFoundError",
    "RateLimitError",
    "ResponseFormatError",
    "ServerError",
    "TransportError",
]
