from .catalog import ICatalogProvider
from .http import HttpResponse, IHttpClient
from .validators import IRetryHandler

__all__ = [
    "HttpResponse",
    "ICatalogProvider",
    "IHttpClient",
    "IRetryHandler",
]
