"""
Tests for settings, client options and the client builders.
"""

import logging

import httpx  # type: ignore
import pytest  # type: ignore
from pydantic import ValidationError  # type: ignore

from auth0_management import ManagementClient, __version__
from auth0_management.config.settings import LoggingSettings, ManagementSettings, get_settings
from auth0_management.exceptions.management_exceptions import ConfigurationError, ManagementApiError
from auth0_management.sources.client.auth0.auth0 import (
    Auth0Client,
    Auth0RESTClientViaClientCredentials,
    Auth0RESTClientViaToken,
    ManagementClientOptions,
)
from auth0_management.utils.logger import LOGGER_NAME, setup_logging


class TestSettings:
    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("AUTH0_DOMAIN", "https://tenant.us.auth0.com/")
        monkeypatch.setenv("AUTH0_CLIENT_ID", "cid")
        monkeypatch.setenv("AUTH0_CLIENT_SECRET", "secret")
        monkeypatch.setenv("AUTH0_TIMEOUT", "30")
        monkeypatch.setenv("AUTH0_TELEMETRY", "false")
        monkeypatch.setenv("AUTH0_LOG_LEVEL", "debug")

        settings = get_settings()

        assert settings.domain == "tenant.us.auth0.com"
        assert settings.client_id == "cid"
        assert settings.timeout_in_seconds == 30.0
        assert settings.telemetry is False
        assert settings.logging.level == "DEBUG"
        assert settings.token is None

    def test_singleton(self):
        assert get_settings() is get_settings()

    def test_unknown_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("AUTH0_LOG_LEVEL", "verbose")

        with pytest.raises(ValidationError):
            get_settings()

    def test_log_level_is_normalised(self):
        assert LoggingSettings(level="error").level == "ERROR"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            LoggingSettings(level="trace")


class TestManagementClientOptions:
    def test_domain_is_normalised(self):
        options = ManagementClientOptions(domain="https://tenant.auth0.com/", token="t")
        assert options.domain == "tenant.auth0.com"

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            ManagementClientOptions(domain="tenant.auth0.com", token="t", timeout_in_seconds=0)

    def test_token_client(self, make_options):
        client = make_options().create_client()
        assert isinstance(client, Auth0RESTClientViaToken)
        assert client.get_base_url() == f"https://{client.domain}/api/v2"

    def test_client_credentials_client(self, make_options, domain):
        client = make_options(token=None, client_id="cid", client_secret="secret").create_client()

        assert isinstance(client, Auth0RESTClientViaClientCredentials)
        assert client.token_provider.audience == f"https://{domain}/api/v2/"

    def test_custom_audience(self, make_options):
        client = make_options(token=None, client_id="cid", client_secret="s", audience="https://api/").create_client()
        assert client.token_provider.audience == "https://api/"

    def test_missing_credentials(self, make_options):
        with pytest.raises(ConfigurationError):
            make_options(token=None).create_client()

    def test_missing_secret(self, make_options):
        with pytest.raises(ConfigurationError):
            make_options(token=None, client_id="cid").create_client()

    def test_empty_token(self, make_options):
        with pytest.raises(ConfigurationError):
            make_options(token="").create_client()

    def test_missing_domain(self):
        with pytest.raises(ConfigurationError):
            ManagementClientOptions(domain="", token="t").create_client()

    def test_to_dict_hides_credentials(self, make_options):
        data = make_options(client_id="cid", client_secret="secret").to_dict()

        assert "client_secret" not in data
        assert "token" not in data
        assert data["client_id"] == "cid"

    def test_from_settings_with_overrides(self, mock_api):
        settings = ManagementSettings(domain="tenant.auth0.com", token="t", timeout_in_seconds=5)

        options = ManagementClientOptions.from_settings(settings, telemetry=False, transport=mock_api.transport)

        assert options.timeout_in_seconds == 5
        assert options.telemetry is False
        assert options.token == "t"


class TestAuth0Client:
    def test_build_from_settings(self, monkeypatch, mock_api):
        monkeypatch.setenv("AUTH0_DOMAIN", "tenant.auth0.com")
        monkeypatch.setenv("AUTH0_TOKEN", "t")

        client = Auth0Client.build_from_settings(transport=mock_api.transport)

        assert client.get_base_url() == "https://tenant.auth0.com/api/v2"

    @pytest.mark.asyncio
    async def test_build_and_validate(self, make_options, mock_api):
        mock_api.queue(httpx.Response(200, json={"friendly_name": "Acme"}))

        client = await Auth0Client.build_and_validate(make_options())

        assert isinstance(client, Auth0Client)
        assert mock_api.last.url.path == "/api/v2/tenants/settings"
        assert mock_api.last.url.params["fields"] == "friendly_name"
        assert mock_api.last.url.params["include_fields"] == "true"

    @pytest.mark.asyncio
    async def test_build_and_validate_rejected(self, make_options, mock_api):
        mock_api.queue(httpx.Response(401, json={"statusCode": 401, "error": "Unauthorized", "message": "Invalid token"}))

        with pytest.raises(ConfigurationError) as exc_info:
            await Auth0Client.build_and_validate(make_options())

        assert isinstance(exc_info.value.__cause__, ManagementApiError)


class TestManagementClient:
    @pytest.mark.asyncio
    async def test_client_credentials_end_to_end(self, make_options, mock_api, faker_instance):
        management = ManagementClient.from_options(make_options(token=None, client_id="cid", client_secret="s"))

        await management.users.get({"id": faker_instance.uuid4()})
        await management.roles.get_all()

        assert len(mock_api.token_requests) == 1
        assert all(r.headers["Authorization"] == f"Bearer {mock_api.access_token}" for r in mock_api.requests)

    @pytest.mark.asyncio
    async def test_from_keyword_options(self, domain, mock_api):
        management = ManagementClient.from_options(domain=domain, token="kw-token", transport=mock_api.transport)

        await management.clients.get_all()

        assert mock_api.last.headers["Authorization"] == "Bearer kw-token"

    @pytest.mark.asyncio
    async def test_async_token_supplier(self, make_options, mock_api):
        async def supplier() -> str:
            return "from-supplier"

        management = ManagementClient.from_options(make_options(token=supplier))
        await management.stats.get_daily({"from": "20250101", "to": "20250131"})

        assert mock_api.last.headers["Authorization"] == "Bearer from-supplier"
        assert mock_api.last.url.query == b"from=20250101&to=20250131"

    @pytest.mark.asyncio
    async def test_default_headers(self, make_options, mock_api):
        management = ManagementClient.from_options(make_options(headers={"X-Tenant-Tag": "blue"}))

        await management.logs.get({"id": "90020"})

        assert mock_api.last.headers["X-Tenant-Tag"] == "blue"

    @pytest.mark.asyncio
    async def test_from_settings(self, mock_api):
        settings = ManagementSettings(domain="tenant.auth0.com", token="t")

        management = ManagementClient.from_settings(settings, transport=mock_api.transport)
        await management.tenants.get_settings()

        assert str(mock_api.last.url) == "https://tenant.auth0.com/api/v2/tenants/settings"

    @pytest.mark.asyncio
    async def test_async_context_closes_client(self, management):
        async with management as m:
            await m.grants.get_all()
            http_client = m.get_client().get_client()
            assert http_client.client is not None

        assert http_client.client is None

    def test_exposes_every_manager(self, management):
        for name in (
            "actions", "anomaly", "attack_protection", "blacklists", "branding", "client_grants",
            "clients", "connection_profiles", "connections", "custom_domains", "device_credentials",
            "email_templates", "emails", "flows", "forms", "grants", "guardian", "hooks", "jobs",
            "keys", "log_streams", "logs", "network_acls", "organizations", "prompts",
            "refresh_tokens", "resource_servers", "risk_assessments", "roles", "rules",
            "rules_configs", "self_service_profiles", "sessions", "stats", "tenants", "tickets",
            "token_exchange_profiles", "user_attribute_profiles", "user_blocks", "users",
            "users_by_email",
        ):
            assert hasattr(management, name)

    def test_version(self):
        assert __version__ == "0.1.0"


class TestLogging:
    @pytest.fixture(autouse=True)
    def restore_logger(self):
        yield
        logger = logging.getLogger(LOGGER_NAME)
        logger.handlers.clear()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)

    def test_setup_logging(self):
        logger = setup_logging("debug")

        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_setup_logging_is_idempotent(self):
        setup_logging()
        logger = setup_logging()

        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_setup_logging_rejects_unknown_level(self):
        with pytest.raises(ValidationError):
            setup_logging("loud")

        assert logging.getLogger(LOGGER_NAME).handlers == []
