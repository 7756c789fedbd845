"""Async client for the Auth0 Management API v2."""
from auth0_management.exceptions.management_exceptions import (
    ConfigurationError,
    FetchError,
    ManagementApiError,
    ManagementError,
    RequestTimeoutError,
    RequiredError,
    ResponseDecodeError,
    ResponseError,
)
from auth0_management.sources.client.auth0.auth0 import Auth0Client, ManagementClientOptions
from auth0_management.sources.client.http.middleware import Middleware, RequestOptions
from auth0_management.sources.external.auth0.management_client import ManagementClient
from auth0_management.version import __version__

__all__ = [
    "Auth0Client",
    "ConfigurationError",
    "FetchError",
    "ManagementApiError",
    "ManagementClient",
    "ManagementClientOptions",
    "ManagementError",
    "Middleware",
    "RequestOptions",
    "RequestTimeoutError",
    "RequiredError",
    "ResponseDecodeError",
    "ResponseError",
    "__version__",
]
