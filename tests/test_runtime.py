"""
Tests for the manager runtime: parameter validation, path and query building,
response adapters and the BaseManager request helper.
"""

import httpx  # type: ignore
import pytest  # type: ignore

from auth0_management.exceptions.management_exceptions import RequiredError, ResponseDecodeError
from auth0_management.sources.client.http.http_response import HTTPResponse
from auth0_management.sources.external.auth0.models import ConnectionStrategy, TriggerId
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    JSONApiResponse,
    QueryParam,
    ResponseKind,
    TextApiResponse,
    VoidApiResponse,
    adapt_response,
    apply_query_params,
    build_path,
    validate_required_request_params,
)


def _response(status: int = 200, **kwargs) -> HTTPResponse:
    return HTTPResponse(httpx.Response(status, **kwargs))


class TestValidateRequiredParams:
    def test_passes_when_all_present(self):
        validate_required_request_params({"id": "abc", "user_id": 0}, ["id", "user_id"])

    def test_missing_key_raises(self):
        with pytest.raises(RequiredError) as exc_info:
            validate_required_request_params({"id": "abc"}, ["id", "user_id"])

        assert exc_info.value.field == "user_id"
        assert exc_info.value.message == "Required parameter request_parameters.user_id was null or undefined."

    def test_none_value_counts_as_missing(self):
        with pytest.raises(RequiredError):
            validate_required_request_params({"id": None}, ["id"])

    def test_no_params_at_all(self):
        with pytest.raises(RequiredError):
            validate_required_request_params(None, ["id"])

    def test_empty_string_counts_as_missing(self):
        with pytest.raises(RequiredError) as exc_info:
            validate_required_request_params({"id": "abc", "user_id": ""}, ["id", "user_id"])

        assert exc_info.value.field == "user_id"

    def test_falsy_non_string_values_pass(self):
        validate_required_request_params({"page": 0, "enabled": False}, ["page", "enabled"])


class TestBuildPath:
    def test_substitutes_every_placeholder(self):
        path = build_path("/actions/actions/{actionId}/versions/{id}", {"actionId": "act_1", "id": "ver_2"})
        assert path == "/actions/actions/act_1/versions/ver_2"

    def test_values_are_percent_encoded(self):
        assert build_path("/users/{id}", {"id": "auth0|abc/def"}) == "/users/auth0%7Cabc%2Fdef"
        assert build_path("/users/{id}", {"id": "a b@c"}) == "/users/a%20b%40c"

    def test_enum_values_use_wire_string(self):
        path = build_path("/actions/triggers/{triggerId}/bindings", {"triggerId": TriggerId.POST_LOGIN})
        assert path == "/actions/triggers/post-login/bindings"

    def test_extra_params_are_ignored(self):
        assert build_path("/roles/{id}", {"id": "rol_1", "page": 2}) == "/roles/rol_1"


class TestApplyQueryParams:
    def test_allow_list_drops_unknown_and_none(self):
        query = apply_query_params(
            {"page": 0, "per_page": None, "bogus": "x", "include_totals": True},
            ["page", "per_page", "include_totals"],
        )
        assert query == {"page": 0, "include_totals": True}

    def test_keeps_allow_list_order(self):
        query = apply_query_params({"take": 50, "from": "chk1"}, ["from", "take"])
        assert list(query) == ["from", "take"]

    def test_multi_array_keeps_list(self):
        query = apply_query_params(
            {"strategy": [ConnectionStrategy.AUTH0, "google-oauth2"]},
            [QueryParam("strategy", is_array=True, multi=True)],
        )
        assert query == {"strategy": ["auth0", "google-oauth2"]}

    def test_multi_array_accepts_single_value(self):
        query = apply_query_params({"hydrate": "form"}, [QueryParam("hydrate", is_array=True, multi=True)])
        assert query == {"hydrate": ["form"]}

    @pytest.mark.parametrize(
        "collection_format,expected",
        [("csv", "a,b"), ("ssv", "a b"), ("tsv", "a\tb"), ("pipes", "a|b")],
    )
    def test_joined_array_separators(self, collection_format, expected):
        query = apply_query_params(
            {"fields": ["a", "b"]},
            [QueryParam("fields", is_array=True, collection_format=collection_format)],
        )
        assert query == {"fields": expected}

    def test_joined_array_renders_booleans(self):
        query = apply_query_params({"flags": [True, False]}, [QueryParam("flags", is_array=True)])
        assert query == {"flags": "true,false"}


class TestResponseAdapters:
    def test_json_value_is_memoized(self, faker_instance):
        payload = {"user_id": faker_instance.uuid4(), "email": faker_instance.email()}
        adapter = JSONApiResponse(_response(json=payload))

        first = adapter.value()
        assert first == payload
        assert adapter.value() is first
        assert adapter.data is first

    def test_json_decode_error(self):
        adapter = JSONApiResponse(_response(text="<html>nope</html>"))

        with pytest.raises(ResponseDecodeError) as exc_info:
            adapter.value()
        assert exc_info.value.status_code == 200
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_void_returns_none(self):
        adapter = VoidApiResponse(_response(204))
        assert adapter.value() is None
        assert adapter.status == 204

    def test_text_returns_body(self):
        adapter = TextApiResponse(_response(text="42"))
        assert adapter.value() == "42"

    def test_adapter_exposes_headers_and_status(self):
        adapter = JSONApiResponse(_response(201, json={}, headers={"X-RateLimit-Remaining": "9"}))
        assert adapter.status == 201
        assert adapter.status_text == "Created"
        assert adapter.headers["x-ratelimit-remaining"] == "9"

    def test_json_or_void(self):
        assert isinstance(adapt_response(_response(204), ResponseKind.JSON_OR_VOID), VoidApiResponse)
        assert isinstance(adapt_response(_response(json=[]), ResponseKind.JSON_OR_VOID), JSONApiResponse)

    def test_json_or_void_only_treats_204_as_empty(self):
        assert isinstance(adapt_response(_response(200, text=""), ResponseKind.JSON_OR_VOID), JSONApiResponse)

    def test_kind_selects_adapter(self):
        assert isinstance(adapt_response(_response(json={}), ResponseKind.JSON), JSONApiResponse)
        assert isinstance(adapt_response(_response(text="x"), ResponseKind.TEXT), TextApiResponse)
        assert isinstance(adapt_response(_response(json={}), ResponseKind.VOID), VoidApiResponse)


class TestBaseManager:
    @pytest.mark.asyncio
    async def test_missing_path_param_sends_nothing(self, auth0_client, mock_api):
        manager = BaseManager(auth0_client)

        with pytest.raises(RequiredError):
            await manager._request("GET", "/users/{id}", {}, required=["id"])

        assert mock_api.requests == []

    @pytest.mark.asyncio
    async def test_empty_path_param_sends_nothing(self, management, mock_api):
        with pytest.raises(RequiredError) as exc_info:
            await management.users.get({"id": ""})

        assert exc_info.value.field == "id"
        assert mock_api.requests == []

    @pytest.mark.asyncio
    async def test_request_builds_url(self, auth0_client, mock_api, domain):
        manager = BaseManager(auth0_client)

        response = await manager._request(
            "GET", "/users/{id}", {"id": "auth0|x/y", "fields": "email", "ignored": 1},
            required=["id"], query=["fields"],
        )

        assert isinstance(response, JSONApiResponse)
        assert mock_api.last.url.host == domain
        assert mock_api.last.url.raw_path == b"/api/v2/users/auth0%7Cx%2Fy?fields=email"

    @pytest.mark.asyncio
    async def test_no_query_string_when_empty(self, auth0_client, mock_api):
        manager = BaseManager(auth0_client)

        await manager._request("GET", "/roles")

        assert mock_api.last.url.query == b""
        assert str(mock_api.last.url).endswith("/api/v2/roles")
