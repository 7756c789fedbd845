"""
Tests for the resource managers: URL templates, query allow-lists, bodies and
response kinds as they reach the wire.
"""

import json

import httpx  # type: ignore
import pytest  # type: ignore

from auth0_management.exceptions.management_exceptions import RequiredError
from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.models import (
    ConnectionStrategy,
    MultifactorProvider,
    SearchEngineVersion,
    TriggerId,
    parse_paginated,
)
from auth0_management.sources.external.auth0.runtime import (
    JSONApiResponse,
    TextApiResponse,
    VoidApiResponse,
)


@pytest.fixture
def user_id(faker_instance) -> str:
    return f"auth0|{faker_instance.uuid4()}"


class TestUsersManager:
    @pytest.mark.asyncio
    async def test_get_with_fields(self, management, mock_api, user_id, faker_instance):
        user = {"user_id": user_id, "email": faker_instance.email()}
        mock_api.queue(httpx.Response(200, json=user))

        response = await management.users.get({"id": user_id, "fields": "email,user_id", "include_fields": True})

        assert isinstance(response, JSONApiResponse)
        assert response.value() == user
        request = mock_api.last
        assert request.method == "GET"
        assert request.url.raw_path.startswith(b"/api/v2/users/auth0%7C")
        assert request.url.params["fields"] == "email,user_id"
        assert request.url.params["include_fields"] == "true"

    @pytest.mark.asyncio
    async def test_get_all_search(self, management, mock_api):
        await management.users.get_all({
            "q": 'email:"jane@example.com"',
            "search_engine": SearchEngineVersion.V3,
            "per_page": 10,
            "unknown": "dropped",
        })

        params = mock_api.last.url.params
        assert params["q"] == 'email:"jane@example.com"'
        assert params["search_engine"] == "v3"
        assert params["per_page"] == "10"
        assert "unknown" not in params

    @pytest.mark.asyncio
    async def test_create(self, management, mock_api, faker_instance):
        body = {"email": faker_instance.email(), "password": faker_instance.password(), "connection": "db"}

        await management.users.create(body)

        assert mock_api.last.method == "POST"
        assert mock_api.last.url.path == "/api/v2/users"
        assert mock_api.last_json() == body

    @pytest.mark.asyncio
    async def test_delete_is_void(self, management, mock_api, user_id):
        mock_api.queue(httpx.Response(204))

        response = await management.users.delete({"id": user_id})

        assert isinstance(response, VoidApiResponse)
        assert response.value() is None
        assert mock_api.last.method == "DELETE"

    @pytest.mark.asyncio
    async def test_assign_roles(self, management, mock_api, user_id):
        response = await management.users.assign_roles({"id": user_id}, {"roles": ["rol_1", "rol_2"]})

        assert isinstance(response, VoidApiResponse)
        assert mock_api.last.method == "POST"
        assert mock_api.last.url.path == f"/api/v2/users/{user_id}/roles"
        assert mock_api.last_json() == {"roles": ["rol_1", "rol_2"]}

    @pytest.mark.asyncio
    async def test_delete_permissions_sends_body(self, management, mock_api, user_id):
        body = {"permissions": [{"resource_server_identifier": "https://api", "permission_name": "read:x"}]}

        await management.users.delete_permissions({"id": user_id}, body)

        assert mock_api.last.method == "DELETE"
        assert mock_api.last_json() == body

    @pytest.mark.asyncio
    async def test_unlink_returns_identities(self, management, mock_api, user_id):
        identities = [{"provider": "auth0", "user_id": user_id.split("|")[1]}]
        mock_api.queue(httpx.Response(200, json=identities))

        response = await management.users.unlink({"id": user_id, "provider": "google-oauth2", "user_id": "10987"})

        assert response.value() == identities
        assert mock_api.last.url.path.endswith("/identities/google-oauth2/10987")

    @pytest.mark.asyncio
    async def test_unlink_requires_provider(self, management, mock_api, user_id):
        with pytest.raises(RequiredError) as exc_info:
            await management.users.unlink({"id": user_id, "user_id": "10987"})

        assert exc_info.value.field == "provider"
        assert mock_api.requests == []

    @pytest.mark.asyncio
    async def test_delete_multifactor_provider(self, management, mock_api, user_id):
        await management.users.delete_multifactor_provider(
            {"id": user_id, "provider": MultifactorProvider.GOOGLE_AUTHENTICATOR}
        )

        assert mock_api.last.url.path.endswith("/multifactor/google-authenticator")

    @pytest.mark.asyncio
    async def test_sessions_checkpoint(self, management, mock_api, user_id):
        mock_api.queue(httpx.Response(200, json={"sessions": [{"id": "s1"}], "next": "chk2"}))

        response = await management.users.get_sessions({"user_id": user_id, "from": "chk1", "take": 50, "page": 3})

        assert mock_api.last.url.query == b"from=chk1&take=50"
        page = parse_paginated(response.value(), "sessions")
        assert page.kind == "checkpoint"
        assert page.next == "chk2"

    @pytest.mark.asyncio
    async def test_replace_authentication_methods(self, management, mock_api, user_id):
        methods = [{"type": "phone", "phone_number": "+15555550100"}]

        await management.users.update_authentication_methods({"id": user_id}, methods)

        assert mock_api.last.method == "PUT"
        assert mock_api.last_json() == methods

    @pytest.mark.asyncio
    async def test_request_options_reach_the_wire(self, management, mock_api, user_id):
        await management.users.get({"id": user_id}, RequestOptions(headers={"X-Correlation-Id": "c-1"}))

        assert mock_api.last.headers["X-Correlation-Id"] == "c-1"


class TestRolesManager:
    @pytest.mark.asyncio
    async def test_get_users_checkpoint(self, management, mock_api):
        await management.roles.get_users({"id": "rol_1", "from": "chk1", "take": 50})

        assert mock_api.last.url.path == "/api/v2/roles/rol_1/users"
        assert mock_api.last.url.query == b"from=chk1&take=50"

    @pytest.mark.asyncio
    async def test_get_all_offset(self, management, mock_api):
        mock_api.queue(httpx.Response(200, json={"roles": [], "start": 0, "limit": 50, "total": 0}))

        response = await management.roles.get_all({"page": 0, "per_page": 50, "include_totals": True})

        assert mock_api.last.url.query == b"per_page=50&page=0&include_totals=true"
        assert parse_paginated(response.value(), "roles").kind == "offset"

    @pytest.mark.asyncio
    async def test_assign_users(self, management, mock_api, user_id):
        response = await management.roles.assign_users({"id": "rol_1"}, {"users": [user_id]})

        assert isinstance(response, VoidApiResponse)
        assert mock_api.last_json() == {"users": [user_id]}


class TestLogsManager:
    @pytest.mark.asyncio
    async def test_checkpoint_params_only(self, management, mock_api):
        await management.logs.get_all({"from": "chk1", "take": 50})

        assert mock_api.last.url.query == b"from=chk1&take=50"


class TestJobsManager:
    @pytest.mark.asyncio
    async def test_get_errors_no_content(self, management, mock_api):
        mock_api.queue(httpx.Response(204))

        response = await management.jobs.get_errors({"id": "job_1"})

        assert isinstance(response, VoidApiResponse)
        assert response.value() is None

    @pytest.mark.asyncio
    async def test_get_errors_with_body(self, management, mock_api):
        errors = [{"user": {"email": "x@example.com"}, "errors": [{"code": "INVALID_FORMAT"}]}]
        mock_api.queue(httpx.Response(200, json=errors))

        response = await management.jobs.get_errors({"id": "job_1"})

        assert isinstance(response, JSONApiResponse)
        assert response.value() == errors

    @pytest.mark.asyncio
    async def test_import_users_multipart(self, management, mock_api):
        users = json.dumps([{"email": "a@example.com", "email_verified": True}])

        await management.jobs.import_users({
            "users": users,
            "connection_id": "con_123",
            "upsert": True,
            "external_id": None,
        })

        request = mock_api.last
        assert request.url.path == "/api/v2/jobs/users-imports"
        assert request.headers["Content-Type"].startswith("multipart/form-data")
        content = request.content
        assert b'name="users"; filename="users.json"' in content
        assert users.encode() in content
        assert b'name="connection_id"\r\n\r\ncon_123' in content
        assert b'name="upsert"\r\n\r\ntrue' in content
        assert b'name="external_id"' not in content

    @pytest.mark.asyncio
    async def test_import_users_from_path(self, management, mock_api, tmp_path):
        users_file = tmp_path / "export.json"
        users_file.write_text("[]")

        await management.jobs.import_users({"users": users_file, "connection_id": "con_123"})

        assert b'filename="export.json"' in mock_api.last.content


class TestConnectionsManager:
    @pytest.mark.asyncio
    async def test_strategy_repeats_key(self, management, mock_api):
        await management.connections.get_all({
            "strategy": [ConnectionStrategy.AUTH0, ConnectionStrategy.GOOGLE_OAUTH2],
            "name": "db",
        })

        assert mock_api.last.url.params.get_list("strategy") == ["auth0", "google-oauth2"]
        assert mock_api.last.url.params["name"] == "db"

    @pytest.mark.asyncio
    async def test_delete_user_by_email_requires_email(self, management, mock_api):
        with pytest.raises(RequiredError):
            await management.connections.delete_user_by_email({"id": "con_1"})

        await management.connections.delete_user_by_email({"id": "con_1", "email": "a+b@example.com"})
        assert mock_api.last.url.params["email"] == "a+b@example.com"
        assert mock_api.last.url.path == "/api/v2/connections/con_1/users"


class TestOrganizationsManager:
    @pytest.mark.asyncio
    async def test_client_grants_grant_ids(self, management, mock_api):
        await management.organizations.get_organization_client_grants({"id": "org_1", "grant_ids": ["cgr_1", "cgr_2"]})

        assert mock_api.last.url.path == "/api/v2/organizations/org_1/client-grants"
        assert mock_api.last.url.params.get_list("grant_ids") == ["cgr_1", "cgr_2"]

    @pytest.mark.asyncio
    async def test_add_members(self, management, mock_api, user_id):
        response = await management.organizations.add_members({"id": "org_1"}, {"members": [user_id]})

        assert isinstance(response, VoidApiResponse)
        assert mock_api.last_json() == {"members": [user_id]}


class TestOtherManagers:
    @pytest.mark.asyncio
    async def test_flows_hydrate(self, management, mock_api):
        await management.flows.get({"id": "af_1", "hydrate": ["form_count"]})

        assert mock_api.last.url.params.get_list("hydrate") == ["form_count"]

    @pytest.mark.asyncio
    async def test_actions_trigger_filter(self, management, mock_api):
        await management.actions.get_all({"triggerId": TriggerId.POST_LOGIN, "deployed": False})

        assert mock_api.last.url.query == b"triggerId=post-login&deployed=false"

    @pytest.mark.asyncio
    async def test_hook_secrets_delete_body(self, management, mock_api):
        await management.hooks.delete_secrets({"id": "hk_1"}, ["API_KEY"])

        assert mock_api.last.method == "DELETE"
        assert mock_api.last_json() == ["API_KEY"]

    @pytest.mark.asyncio
    async def test_active_users_count_is_text(self, management, mock_api):
        mock_api.queue(httpx.Response(200, text="42"))

        response = await management.stats.get_active_users_count()

        assert isinstance(response, TextApiResponse)
        assert response.value() == "42"

    @pytest.mark.asyncio
    async def test_attack_protection_is_void(self, management, mock_api):
        mock_api.queue(httpx.Response(200, json={"enabled": True}))

        response = await management.attack_protection.get_brute_force_config()

        assert isinstance(response, VoidApiResponse)
        assert response.raw.json() == {"enabled": True}
        assert mock_api.last.url.path == "/api/v2/attack-protection/brute-force-protection"

    @pytest.mark.asyncio
    async def test_user_blocks_by_identifier(self, management, mock_api):
        with pytest.raises(RequiredError):
            await management.user_blocks.delete_all({})

        await management.user_blocks.delete_all({"identifier": "jane@example.com"})
        assert mock_api.last.url.params["identifier"] == "jane@example.com"

    @pytest.mark.asyncio
    async def test_users_by_email(self, management, mock_api):
        await management.users_by_email.get_by_email({"email": "jane@example.com", "fields": "user_id"})

        assert mock_api.last.url.query == b"fields=user_id&email=jane%40example.com"

    @pytest.mark.asyncio
    async def test_token_exchange_profile_update_is_void(self, management, mock_api):
        response = await management.token_exchange_profiles.update({"id": "tep_1"}, {"name": "renamed"})

        assert isinstance(response, VoidApiResponse)
        assert mock_api.last.method == "PATCH"

    @pytest.mark.asyncio
    async def test_self_service_sso_ticket_revoke_is_text(self, management, mock_api):
        mock_api.queue(httpx.Response(202, text=""))

        response = await management.self_service_profiles.revoke_sso_ticket({"profileId": "ssp_1", "id": "t_1"})

        assert isinstance(response, TextApiResponse)
        assert mock_api.last.url.path == "/api/v2/self-service-profiles/ssp_1/sso-ticket/t_1/revoke"
