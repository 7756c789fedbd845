"""
Client credentials token provider.

Access tokens are fetched from ``https://{domain}/oauth/token`` and reused
until shortly before they expire.
"""

import asyncio
import logging
import time
import uuid
from typing import Any, Dict, Optional

from jose import jwt  # type: ignore

from auth0_management.exceptions.management_exceptions import (
    ConfigurationError,
    ManagementError,
    ResponseDecodeError,
)
from auth0_management.sources.client.http.http_client import HTTPClient
from auth0_management.sources.client.http.http_request import HTTPRequest

CLIENT_ASSERTION_TYPE = "urn:ietf:params:oauth:client-assertion-type:jwt-bearer"
CLIENT_ASSERTION_LIFETIME_SECONDS = 120
EXPIRY_LEEWAY_SECONDS = 10
DEFAULT_TOKEN_MAX_AGE_SECONDS = 60 * 60


def build_client_assertion(
    domain: str,
    client_id: str,
    signing_key: str,
    algorithm: str = "RS256",
) -> str:
    """Sign a private key JWT used to authenticate the client"""
    now = int(time.time())
    claims = {
        "iss": client_id,
        "sub": client_id,
        "aud": f"https://{domain}/",
        "iat": now,
        "exp": now + CLIENT_ASSERTION_LIFETIME_SECONDS,
        "jti": str(uuid.uuid4()),
    }
    return jwt.encode(claims, signing_key, algorithm=algorithm)


def token_max_age(data: Dict[str, Any], cache_ttl_in_seconds: Optional[float] = None) -> float:
    """Seconds a token response may be reused.

    An explicit cache TTL wins. Otherwise ``expires_in`` minus a 10 second
    leeway, unless ``expires_in`` is already 10 seconds or less. Responses
    without ``expires_in`` are kept for an hour.
    """
    if cache_ttl_in_seconds:
        return float(cache_ttl_in_seconds)
    expires_in = data.get("expires_in")
    if expires_in:
        expires_in = float(expires_in)
        if expires_in <= EXPIRY_LEEWAY_SECONDS:
            return expires_in
        return expires_in - EXPIRY_LEEWAY_SECONDS
    return float(DEFAULT_TOKEN_MAX_AGE_SECONDS)


class TokenProvider:
    """
    Fetches Management API access tokens with the client credentials grant.

    Args:
        domain: Tenant domain
        client_id: Client ID
        audience: Token audience
        client_secret: Client secret, used when no signing key is given
        client_assertion_signing_key: PEM private key for private key JWT authentication
        client_assertion_signing_alg: JWT signing algorithm (default: RS256)
        enable_cache: Reuse tokens until they are about to expire
        cache_ttl_in_seconds: Fixed reuse window overriding the token's expires_in
        http_client: HTTPClient used for the token request
        logger: Optional logger instance
    """

    def __init__(
        self,
        domain: str,
        client_id: str,
        audience: str,
        client_secret: Optional[str] = None,
        client_assertion_signing_key: Optional[str] = None,
        client_assertion_signing_alg: str = "RS256",
        enable_cache: bool = True,
        cache_ttl_in_seconds: Optional[float] = None,
        http_client: Optional[HTTPClient] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if not domain:
            raise ConfigurationError("Must provide a domain")
        if not client_id:
            raise ConfigurationError("Must provide a client_id")
        if not client_secret and not client_assertion_signing_key:
            raise ConfigurationError("Must provide a client_secret or a client_assertion_signing_key")
        if not audience:
            raise ConfigurationError("Must provide a audience")
        if enable_cache and cache_ttl_in_seconds is not None and cache_ttl_in_seconds <= 0:
            raise ConfigurationError("cache_ttl_in_seconds must be a greater than 0")

        self.domain = domain
        self.client_id = client_id
        self.audience = audience
        self.client_secret = client_secret
        self.client_assertion_signing_key = client_assertion_signing_key
        self.client_assertion_signing_alg = client_assertion_signing_alg
        self.enable_cache = enable_cache
        self.cache_ttl_in_seconds = cache_ttl_in_seconds
        self.http_client = http_client or HTTPClient()
        self.logger = logger or logging.getLogger(__name__)

        self._access_token: Optional[str] = None
        self._expires_at: float = 0.0
        self._lock = asyncio.Lock()

    @property
    def token_url(self) -> str:
        return f"https://{self.domain}/oauth/token"

    def _grant_body(self) -> Dict[str, str]:
        body = {
            "grant_type": "client_credentials",
            "client_id": self.client_id,
            "audience": self.audience,
        }
        # A signing key takes precedence over the secret
        if self.client_assertion_signing_key:
            body["client_assertion"] = build_client_assertion(
                self.domain,
                self.client_id,
                self.client_assertion_signing_key,
                self.client_assertion_signing_alg,
            )
            body["client_assertion_type"] = CLIENT_ASSERTION_TYPE
        else:
            body["client_secret"] = self.client_secret
        return body

    async def _fetch_token(self) -> Dict[str, Any]:
        request = HTTPRequest(
            method="POST",
            url=self.token_url,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            body=self._grant_body(),
        )
        try:
            response = await self.http_client.execute(request)
        except ManagementError as e:
            self.logger.warning("Client credentials grant failed for %s: %s", self.client_id, e.message)
            raise

        try:
            data = response.json()
        except ValueError as e:
            raise ResponseDecodeError(response.status, response.text()) from e
        if not isinstance(data, dict) or not data.get("access_token"):
            raise ManagementError("Token response did not contain an access_token", {"status": response.status})
        return data

    async def get_access_token(self) -> str:
        """Return a valid access token, fetching a new one when needed"""
        if not self.enable_cache:
            data = await self._fetch_token()
            return data["access_token"]

        async with self._lock:
            if self._access_token is not None and time.monotonic() < self._expires_at:
                return self._access_token

            data = await self._fetch_token()
            self._access_token = data["access_token"]
            self._expires_at = time.monotonic() + token_max_age(data, self.cache_ttl_in_seconds)
            self.logger.debug("Fetched Management API token for %s", self.client_id)
            return self._access_token

    def invalidate(self) -> None:
        """Drop the cached token so the next call fetches a new one"""
        self._access_token = None
        self._expires_at = 0.0
