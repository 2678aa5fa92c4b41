from .value_objects import CatalogApiConfig, HttpClientConfig, RetryConfig

__all__ = ["CatalogApiConfig", "HttpClientConfig", "RetryConfig"]
