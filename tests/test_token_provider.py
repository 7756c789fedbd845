"""
Tests for the client credentials token provider.
"""

import asyncio
from urllib.parse import parse_qs

import httpx  # type: ignore
import pytest  # type: ignore
from cryptography.hazmat.primitives import serialization  # type: ignore
from cryptography.hazmat.primitives.asymmetric import rsa  # type: ignore
from jose import jwt  # type: ignore

from auth0_management.exceptions.management_exceptions import (
    ConfigurationError,
    ManagementApiError,
    ManagementError,
    ResponseDecodeError,
)
from auth0_management.sources.client.auth0.auth0 import parse_management_error
from auth0_management.sources.client.auth0.token_provider import (
    CLIENT_ASSERTION_TYPE,
    TokenProvider,
    build_client_assertion,
    token_max_age,
)
from auth0_management.sources.client.http.http_client import HTTPClient


@pytest.fixture(scope="module")
def rsa_keys():
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    private_pem = key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    ).decode()
    public_pem = key.public_key().public_bytes(
        serialization.Encoding.PEM,
        serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode()
    return private_pem, public_pem


def _form(request: httpx.Request) -> dict:
    return {k: v[0] for k, v in parse_qs(request.content.decode()).items()}


def _provider(mock_api, domain, **kwargs) -> TokenProvider:
    values = {
        "domain": domain,
        "client_id": "cid",
        "client_secret": "secret",
        "audience": f"https://{domain}/api/v2/",
        "http_client": HTTPClient(transport=mock_api.transport),
    }
    values.update(kwargs)
    return TokenProvider(**values)


class TestTokenMaxAge:
    def test_leeway_is_subtracted(self):
        assert token_max_age({"expires_in": 86400}) == 86390

    def test_short_lifetime_used_as_is(self):
        assert token_max_age({"expires_in": 10}) == 10
        assert token_max_age({"expires_in": 5}) == 5

    def test_missing_expires_in_defaults_to_an_hour(self):
        assert token_max_age({}) == 3600

    def test_explicit_ttl_wins(self):
        assert token_max_age({"expires_in": 86400}, 30) == 30


class TestTokenProviderConfig:
    def test_requires_secret_or_key(self, domain):
        with pytest.raises(ConfigurationError):
            TokenProvider(domain=domain, client_id="cid", audience="aud")

    def test_requires_client_id(self, domain):
        with pytest.raises(ConfigurationError):
            TokenProvider(domain=domain, client_id="", client_secret="s", audience="aud")

    def test_rejects_non_positive_ttl(self, domain):
        with pytest.raises(ConfigurationError):
            TokenProvider(domain=domain, client_id="cid", client_secret="s", audience="aud", cache_ttl_in_seconds=0)


class TestTokenProvider:
    @pytest.mark.asyncio
    async def test_client_secret_grant(self, mock_api, domain):
        provider = _provider(mock_api, domain)

        token = await provider.get_access_token()

        assert token == mock_api.access_token
        request = mock_api.token_requests[0]
        assert str(request.url) == f"https://{domain}/oauth/token"
        assert request.method == "POST"
        assert request.headers["Content-Type"].startswith("application/x-www-form-urlencoded")
        assert _form(request) == {
            "grant_type": "client_credentials",
            "client_id": "cid",
            "audience": f"https://{domain}/api/v2/",
            "client_secret": "secret",
        }

    @pytest.mark.asyncio
    async def test_token_is_cached(self, mock_api, domain):
        provider = _provider(mock_api, domain)

        await provider.get_access_token()
        await provider.get_access_token()

        assert len(mock_api.token_requests) == 1

    @pytest.mark.asyncio
    async def test_concurrent_callers_share_one_fetch(self, mock_api, domain):
        provider = _provider(mock_api, domain)

        tokens = await asyncio.gather(*(provider.get_access_token() for _ in range(5)))

        assert set(tokens) == {mock_api.access_token}
        assert len(mock_api.token_requests) == 1

    @pytest.mark.asyncio
    async def test_invalidate_forces_refetch(self, mock_api, domain):
        provider = _provider(mock_api, domain)

        await provider.get_access_token()
        provider.invalidate()
        await provider.get_access_token()

        assert len(mock_api.token_requests) == 2

    @pytest.mark.asyncio
    async def test_cache_disabled(self, mock_api, domain):
        provider = _provider(mock_api, domain, enable_cache=False)

        await provider.get_access_token()
        await provider.get_access_token()

        assert len(mock_api.token_requests) == 2

    @pytest.mark.asyncio
    async def test_private_key_jwt(self, mock_api, domain, rsa_keys):
        private_pem, public_pem = rsa_keys
        provider = _provider(mock_api, domain, client_secret=None, client_assertion_signing_key=private_pem)

        await provider.get_access_token()

        form = _form(mock_api.token_requests[0])
        assert "client_secret" not in form
        assert form["client_assertion_type"] == CLIENT_ASSERTION_TYPE
        claims = jwt.decode(form["client_assertion"], public_pem, algorithms=["RS256"], audience=f"https://{domain}/")
        assert claims["iss"] == "cid"
        assert claims["sub"] == "cid"
        assert claims["exp"] - claims["iat"] == 120

    @pytest.mark.asyncio
    async def test_failed_grant_is_logged_and_raised(self, domain, caplog):
        def deny(request):
            return httpx.Response(401, json={"error": "access_denied", "message": "Unauthorized"})

        provider = TokenProvider(
            domain=domain,
            client_id="cid",
            client_secret="wrong",
            audience="aud",
            http_client=HTTPClient(transport=httpx.MockTransport(deny), error_parser=parse_management_error),
        )

        with pytest.raises(ManagementApiError):
            await provider.get_access_token()

        assert any(record.levelname == "WARNING" for record in caplog.records)
        assert all("wrong" not in record.getMessage() for record in caplog.records)

    @pytest.mark.asyncio
    async def test_response_without_token(self, domain):
        provider = TokenProvider(
            domain=domain,
            client_id="cid",
            client_secret="s",
            audience="aud",
            http_client=HTTPClient(transport=httpx.MockTransport(lambda request: httpx.Response(200, json={}))),
        )

        with pytest.raises(ManagementError):
            await provider.get_access_token()

    @pytest.mark.asyncio
    async def test_non_json_token_response(self, domain):
        html = "<html><body>Service Unavailable</body></html>"
        provider = TokenProvider(
            domain=domain,
            client_id="cid",
            client_secret="s",
            audience="aud",
            http_client=HTTPClient(transport=httpx.MockTransport(lambda request: httpx.Response(200, text=html))),
        )

        with pytest.raises(ResponseDecodeError) as exc_info:
            await provider.get_access_token()

        assert exc_info.value.status_code == 200
        assert exc_info.value.body == html
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestClientAssertion:
    def test_unique_jti(self, rsa_keys):
        private_pem, _ = rsa_keys

        first = jwt.get_unverified_claims(build_client_assertion("t.auth0.com", "cid", private_pem))
        second = jwt.get_unverified_claims(build_client_assertion("t.auth0.com", "cid", private_pem))

        assert first["jti"] != second["jti"]
        assert first["aud"] == "https://t.auth0.com/"
