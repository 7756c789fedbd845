import json
import logging
from typing import Any, Dict, List, Optional, Union

import httpx  # type: ignore
from pydantic import BaseModel, ConfigDict, Field, field_validator  # type: ignore

from auth0_management.config.settings import ManagementSettings, get_settings
from auth0_management.exceptions.management_exceptions import (
    ConfigurationError,
    ManagementApiError,
    ManagementError,
    ResponseError,
)
from auth0_management.sources.client.auth0.middleware import (
    CustomDomainHeaderMiddleware,
    TelemetryMiddleware,
    TokenProviderMiddleware,
    TokenSupplier,
)
from auth0_management.sources.client.auth0.token_provider import TokenProvider
from auth0_management.sources.client.http.http_client import HTTPClient
from auth0_management.sources.client.http.http_request import HTTPRequest
from auth0_management.sources.client.http.http_response import HTTPResponse
from auth0_management.sources.client.http.middleware import Middleware
from auth0_management.sources.client.iclient import IClient

logger = logging.getLogger(__name__)


async def parse_management_error(response: HTTPResponse) -> Exception:
    """Turn a non-2xx Management API response into an exception

    Error payloads look like:
        {
            "errorCode": "invalid_body",
            "error": "Bad Request",
            "message": "Payload validation failed ...",
            "statusCode": 400
        }
    Bodies that are not a JSON object become a plain ResponseError.
    """
    body = response.text()
    try:
        data = json.loads(body)
    except ValueError:
        data = None

    if not isinstance(data, dict):
        return ResponseError(response.status, body, response.headers, "Response returned an error code")

    return ManagementApiError(
        error_code=data.get("errorCode"),
        error=data.get("error"),
        status_code=data.get("statusCode") or response.status,
        body=body,
        headers=response.headers,
        message=data.get("message"),
    )


class Auth0RESTClient(HTTPClient):
    """Management API HTTP client

    Wires the telemetry and custom domain middleware and the Management API
    error parser on top of HTTPClient. Authentication middleware is added by
    the subclasses.
    """

    def __init__(
        self,
        domain: str,
        headers: Optional[Dict[str, str]] = None,
        timeout: float = 10.0,
        telemetry: bool = True,
        client_info: Optional[Dict[str, Any]] = None,
        custom_domain: Optional[str] = None,
        middleware: Optional[List[Middleware]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        super().__init__(
            headers=headers,
            timeout=timeout,
            error_parser=parse_management_error,
            transport=transport,
            logger=logger,
        )
        self.domain = domain
        self.base_url = f"https://{domain}/api/v2"
        if telemetry:
            self.use(TelemetryMiddleware(client_info))
        if custom_domain:
            self.use(CustomDomainHeaderMiddleware(custom_domain))
        if middleware:
            self.use(*middleware)

    def get_base_url(self) -> str:
        return self.base_url


class Auth0RESTClientViaToken(Auth0RESTClient):
    """Management API client authenticated with an existing access token

    Args:
        domain: Tenant domain
        token: Access token, or a sync/async callable returning one per request
    """

    def __init__(self, domain: str, token: TokenSupplier, **kwargs: Any) -> None:
        super().__init__(domain, **kwargs)
        self.use(TokenProviderMiddleware(token))


class Auth0RESTClientViaClientCredentials(Auth0RESTClient):
    """Management API client that obtains tokens with the client credentials grant"""

    def __init__(self, domain: str, token_provider: TokenProvider, **kwargs: Any) -> None:
        super().__init__(domain, **kwargs)
        self.token_provider = token_provider
        self.use(TokenProviderMiddleware(token_provider))

    async def close(self) -> None:
        await self.token_provider.http_client.close()
        await super().close()


ClientType = Union[Auth0RESTClientViaToken, Auth0RESTClientViaClientCredentials]


class ManagementClientOptions(BaseModel):
    """Configuration for a Management API client

    Provide either ``token`` or ``client_id`` together with ``client_secret``
    or ``client_assertion_signing_key``.

    Args:
        domain: Tenant domain, e.g. tenant.auth0.com
        token: Access token, or a callable returning one
        client_id: Client ID for the client credentials grant
        client_secret: Client secret
        client_assertion_signing_key: PEM private key for private key JWT authentication
        client_assertion_signing_alg: Signing algorithm for the client assertion
        audience: Token audience, defaults to https://{domain}/api/v2/
        headers: Default headers sent with every request
        timeout_in_seconds: Default request timeout
        telemetry: Send the Auth0-Client header
        client_info: Custom telemetry payload, must carry a "name"
        custom_domain: Value for Auth0-Custom-Domain on the endpoints that honour it
        enable_cache: Reuse client credentials tokens until they expire
        cache_ttl_in_seconds: Fixed token reuse window
        middleware: Extra middleware appended after the built-in ones
        transport: Optional httpx transport
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    domain: str
    token: Optional[Any] = None
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    client_assertion_signing_key: Optional[str] = None
    client_assertion_signing_alg: str = "RS256"
    audience: Optional[str] = None
    headers: Dict[str, str] = Field(default_factory=dict)
    timeout_in_seconds: float = Field(default=10.0, gt=0)
    telemetry: bool = True
    client_info: Optional[Dict[str, Any]] = None
    custom_domain: Optional[str] = None
    enable_cache: bool = True
    cache_ttl_in_seconds: Optional[float] = None
    middleware: List[Any] = Field(default_factory=list)
    transport: Optional[Any] = None

    @field_validator("domain")
    @classmethod
    def validate_domain(cls, v: str) -> str:
        v = v.strip()
        for prefix in ("https://", "http://"):
            if v.startswith(prefix):
                v = v[len(prefix):]
        return v.rstrip("/")

    def _client_kwargs(self) -> Dict[str, Any]:
        return {
            "headers": self.headers,
            "timeout": self.timeout_in_seconds,
            "telemetry": self.telemetry,
            "client_info": self.client_info,
            "custom_domain": self.custom_domain,
            "middleware": self.middleware,
            "transport": self.transport,
        }

    def create_client(self) -> ClientType:
        """Create the HTTP client for these options
        Raises:
            ConfigurationError: The options don't describe a usable client
        """
        if not self.domain:
            raise ConfigurationError("Must provide a domain")

        if self.token is not None:
            if isinstance(self.token, str) and not self.token:
                raise ConfigurationError("Must provide a non-empty token")
            return Auth0RESTClientViaToken(self.domain, self.token, **self._client_kwargs())

        if not self.client_id:
            raise ConfigurationError("Must provide a token or a client_id")

        token_provider = TokenProvider(
            domain=self.domain,
            client_id=self.client_id,
            audience=self.audience or f"https://{self.domain}/api/v2/",
            client_secret=self.client_secret,
            client_assertion_signing_key=self.client_assertion_signing_key,
            client_assertion_signing_alg=self.client_assertion_signing_alg,
            enable_cache=self.enable_cache,
            cache_ttl_in_seconds=self.cache_ttl_in_seconds,
            http_client=HTTPClient(timeout=self.timeout_in_seconds, transport=self.transport),
        )
        return Auth0RESTClientViaClientCredentials(self.domain, token_provider, **self._client_kwargs())

    def to_dict(self) -> dict:
        """Convert the configuration to a dictionary, without credentials"""
        return self.model_dump(
            exclude={"token", "client_secret", "client_assertion_signing_key", "middleware", "transport"}
        )

    @classmethod
    def from_settings(cls, settings: ManagementSettings, **overrides: Any) -> "ManagementClientOptions":
        values: Dict[str, Any] = {
            "domain": settings.domain,
            "token": settings.token,
            "client_id": settings.client_id,
            "client_secret": settings.client_secret,
            "audience": settings.audience,
            "timeout_in_seconds": settings.timeout_in_seconds,
            "telemetry": settings.telemetry,
            "custom_domain": settings.custom_domain,
        }
        values.update(overrides)
        return cls(**values)


class Auth0Client(IClient):
    """Builder class for Management API clients with different construction methods"""

    def __init__(self, client: ClientType) -> None:
        """Initialize with a Management API client object"""
        self.client = client

    def get_client(self) -> ClientType:
        """Return the Management API client object"""
        return self.client

    def get_base_url(self) -> str:
        """Get the base URL"""
        return self.client.get_base_url()

    @classmethod
    def build_with_config(cls, config: ManagementClientOptions) -> "Auth0Client":
        """Build Auth0Client with configuration
        Args:
            config: ManagementClientOptions instance
        Returns:
            Auth0Client instance
        """
        return cls(config.create_client())

    @classmethod
    def build_from_settings(
        cls, settings: Optional[ManagementSettings] = None, **overrides: Any
    ) -> "Auth0Client":
        """Build Auth0Client from environment settings
        Args:
            settings: Settings to use, defaults to the process-wide settings
            overrides: Option values replacing the settings
        Returns:
            Auth0Client instance
        """
        settings = settings or get_settings()
        return cls.build_with_config(ManagementClientOptions.from_settings(settings, **overrides))

    @classmethod
    async def build_and_validate(cls, config: ManagementClientOptions) -> "Auth0Client":
        """
        Builds the Auth0Client and validates credentials by making a test API call.
        Raises:
            ConfigurationError: If the credentials are rejected or the tenant can't be reached.
        """
        client_instance = cls.build_with_config(config)
        http_client = client_instance.get_client()

        # Lightweight endpoint, a single tenant setting
        request = HTTPRequest(
            method="GET",
            url=f"{http_client.get_base_url()}/tenants/settings",
            query={"fields": "friendly_name", "include_fields": True},
        )
        try:
            await http_client.execute(request)
        except ManagementError as e:
            logger.warning("Management API client validation failed: %s", e.message)
            await http_client.close()
            raise ConfigurationError(f"Failed to validate Management API client: {e.message}") from e

        return client_instance
