import base64
import inspect
import json
import platform
import re
from typing import Any, Awaitable, Callable, Dict, Optional, Union
from urllib.parse import urlsplit

from auth0_management.sources.client.auth0.token_provider import TokenProvider
from auth0_management.sources.client.http.http_request import HTTPRequest
from auth0_management.sources.client.http.middleware import Middleware
from auth0_management.version import __version__

TELEMETRY_HEADER = "Auth0-Client"
CUSTOM_DOMAIN_HEADER = "Auth0-Custom-Domain"

CUSTOM_DOMAIN_PATHS = [
    re.compile(pattern)
    for pattern in (
        r"^/api/v2/jobs/verification-email$",
        r"^/api/v2/tickets/email-verification$",
        r"^/api/v2/tickets/password-change$",
        r"^/api/v2/organizations/[^/]+/invitations$",
        r"^/api/v2/users$",
        r"^/api/v2/users/[^/]+$",
        r"^/api/v2/guardian/enrollments/ticket$",
    )
]

TokenSupplier = Union[str, Callable[[], Union[str, Awaitable[str]]]]


def generate_client_info() -> Dict[str, Any]:
    return {
        "name": "auth0-management",
        "version": __version__,
        "env": {"python": platform.python_version()},
    }


def encode_client_info(client_info: Dict[str, Any]) -> str:
    """base64url (unpadded) encoding of the client info JSON"""
    raw = json.dumps(client_info, separators=(",", ":")).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def is_custom_domain_path(path: str) -> bool:
    if not path.startswith("/api/v2/"):
        path = f"/api/v2{path}"
    return any(regex.match(path) for regex in CUSTOM_DOMAIN_PATHS)


class TelemetryMiddleware(Middleware):
    """Adds the Auth0-Client header describing this library"""

    def __init__(self, client_info: Optional[Dict[str, Any]] = None) -> None:
        self.client_info = client_info or generate_client_info()

    async def pre(self, request: HTTPRequest) -> Optional[HTTPRequest]:
        name = self.client_info.get("name")
        if not isinstance(name, str) or not name:
            return None
        headers = {**request.headers, TELEMETRY_HEADER: encode_client_info(self.client_info)}
        return request.model_copy(update={"headers": headers})


class CustomDomainHeaderMiddleware(Middleware):
    """Adds Auth0-Custom-Domain on the endpoints that honour it"""

    def __init__(self, domain: str) -> None:
        if not domain or not domain.strip():
            raise ValueError("Domain parameter is required and must be a non-empty string")
        self.domain = domain.strip()

    async def pre(self, request: HTTPRequest) -> Optional[HTTPRequest]:
        if not is_custom_domain_path(urlsplit(request.url).path):
            return None
        headers = {**request.headers, CUSTOM_DOMAIN_HEADER: self.domain}
        return request.model_copy(update={"headers": headers})


class TokenProviderMiddleware(Middleware):
    """Sets the bearer Authorization header before every request

    Args:
        token: A static token, a sync/async callable returning one, or a TokenProvider
    """

    def __init__(self, token: Union[TokenSupplier, TokenProvider]) -> None:
        self.token = token

    async def _resolve_token(self) -> str:
        if isinstance(self.token, TokenProvider):
            return await self.token.get_access_token()
        if callable(self.token):
            value = self.token()
            if inspect.isawaitable(value):
                value = await value
            return value
        return self.token

    async def pre(self, request: HTTPRequest) -> Optional[HTTPRequest]:
        token = await self._resolve_token()
        headers = {**request.headers, "Authorization": f"Bearer {token}"}
        return request.model_copy(update={"headers": headers})
