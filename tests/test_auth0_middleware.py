"""
Tests for the telemetry, custom domain and authentication middleware.
"""

import base64
import json
import platform

import pytest  # type: ignore

from auth0_management.sources.client.auth0.middleware import (
    CUSTOM_DOMAIN_HEADER,
    TELEMETRY_HEADER,
    CustomDomainHeaderMiddleware,
    TelemetryMiddleware,
    TokenProviderMiddleware,
    encode_client_info,
    generate_client_info,
    is_custom_domain_path,
)
from auth0_management.sources.client.http.http_request import HTTPRequest
from auth0_management.sources.external.auth0.management_client import ManagementClient
from auth0_management.version import __version__


def _decode(value: str) -> dict:
    padded = value + "=" * (-len(value) % 4)
    return json.loads(base64.urlsafe_b64decode(padded))


def _request(path: str) -> HTTPRequest:
    return HTTPRequest(url=f"https://tenant.auth0.com/api/v2{path}")


class TestTelemetry:
    def test_default_client_info(self):
        info = generate_client_info()
        assert info == {
            "name": "auth0-management",
            "version": __version__,
            "env": {"python": platform.python_version()},
        }

    def test_encoding_is_unpadded_base64url(self):
        encoded = encode_client_info({"name": "x" * 7})
        assert "=" not in encoded
        assert _decode(encoded) == {"name": "x" * 7}

    @pytest.mark.asyncio
    async def test_header_added(self):
        request = await TelemetryMiddleware().pre(_request("/users"))
        assert _decode(request.headers[TELEMETRY_HEADER])["name"] == "auth0-management"

    @pytest.mark.asyncio
    async def test_custom_client_info(self):
        info = {"name": "my-app", "version": "9.9.9"}
        request = await TelemetryMiddleware(info).pre(_request("/users"))
        assert _decode(request.headers[TELEMETRY_HEADER]) == info

    @pytest.mark.asyncio
    async def test_client_info_without_name_is_skipped(self):
        assert await TelemetryMiddleware({"version": "1"}).pre(_request("/users")) is None

    @pytest.mark.asyncio
    async def test_disabled_on_client(self, make_options, mock_api):
        management = ManagementClient.from_options(make_options(telemetry=False))
        await management.roles.get_all()

        assert TELEMETRY_HEADER not in mock_api.last.headers


class TestCustomDomain:
    @pytest.mark.parametrize(
        "path",
        [
            "/jobs/verification-email",
            "/tickets/email-verification",
            "/tickets/password-change",
            "/organizations/org_123/invitations",
            "/users",
            "/users/auth0%7C123",
            "/guardian/enrollments/ticket",
        ],
    )
    def test_whitelisted_paths(self, path):
        assert is_custom_domain_path(f"/api/v2{path}")
        assert is_custom_domain_path(path)

    @pytest.mark.parametrize(
        "path",
        ["/users/auth0%7C123/roles", "/organizations/org_123/members", "/clients", "/jobs/users-imports"],
    )
    def test_other_paths(self, path):
        assert not is_custom_domain_path(f"/api/v2{path}")

    @pytest.mark.asyncio
    async def test_header_only_on_whitelisted_paths(self):
        middleware = CustomDomainHeaderMiddleware("login.example.com")

        on_users = await middleware.pre(_request("/users"))
        on_roles = await middleware.pre(_request("/roles"))

        assert on_users.headers[CUSTOM_DOMAIN_HEADER] == "login.example.com"
        assert on_roles is None

    def test_empty_domain_rejected(self):
        with pytest.raises(ValueError):
            CustomDomainHeaderMiddleware("  ")

    @pytest.mark.asyncio
    async def test_sent_by_managers(self, make_options, mock_api):
        management = ManagementClient.from_options(make_options(custom_domain="login.example.com"))

        await management.tickets.change_password({"user_id": "auth0|1"})
        assert mock_api.last.headers[CUSTOM_DOMAIN_HEADER] == "login.example.com"

        await management.users.get_roles({"id": "auth0|1"})
        assert CUSTOM_DOMAIN_HEADER not in mock_api.last.headers


class TestTokenProviderMiddleware:
    @pytest.mark.asyncio
    async def test_static_token(self):
        request = await TokenProviderMiddleware("abc").pre(_request("/users"))
        assert request.headers["Authorization"] == "Bearer abc"

    @pytest.mark.asyncio
    async def test_sync_callable(self):
        request = await TokenProviderMiddleware(lambda: "from-sync").pre(_request("/users"))
        assert request.headers["Authorization"] == "Bearer from-sync"

    @pytest.mark.asyncio
    async def test_async_callable_called_per_request(self):
        calls = []

        async def supplier() -> str:
            calls.append(1)
            return f"tok-{len(calls)}"

        middleware = TokenProviderMiddleware(supplier)
        first = await middleware.pre(_request("/users"))
        second = await middleware.pre(_request("/users"))

        assert first.headers["Authorization"] == "Bearer tok-1"
        assert second.headers["Authorization"] == "Bearer tok-2"
