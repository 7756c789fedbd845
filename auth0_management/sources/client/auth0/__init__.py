"""Management API client package."""
from auth0_management.sources.client.auth0.auth0 import (
    Auth0Client,
    Auth0RESTClientViaClientCredentials,
    Auth0RESTClientViaToken,
    ManagementClientOptions,
)
from auth0_management.sources.client.auth0.token_provider import TokenProvider

__all__ = [
    "Auth0Client",
    "Auth0RESTClientViaClientCredentials",
    "Auth0RESTClientViaToken",
    "ManagementClientOptions",
    "TokenProvider",
]
