"""
Tests for HTTPClient: header merging, middleware hooks, per-call options and
transport failures.
"""

import json
import logging

import httpx  # type: ignore
import pytest  # type: ignore

from auth0_management.config.constants.http_status_code import is_success_status
from auth0_management.exceptions.management_exceptions import (
    FetchError,
    RequestTimeoutError,
    ResponseError,
)
from auth0_management.sources.client.http.http_client import HTTPClient
from auth0_management.sources.client.http.http_request import HTTPRequest, querystring
from auth0_management.sources.client.http.http_response import HTTPResponse
from auth0_management.sources.client.http.middleware import (
    Middleware,
    RequestOptions,
    RequestOverride,
)

URL = "https://tenant.auth0.com/api/v2/users"


class _Recorder:
    def __init__(self, response: httpx.Response = None) -> None:
        self.requests = []
        self.timeouts = []
        self.response = response

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        self.timeouts.append(request.extensions.get("timeout"))
        return self.response or httpx.Response(200, json={"ok": True})


def _client(handler, **kwargs) -> HTTPClient:
    return HTTPClient(transport=httpx.MockTransport(handler), **kwargs)


class TestQuerystring:
    def test_encodes_and_repeats_lists(self):
        assert querystring({"q": "email:\"a@b.c\"", "strategy": ["auth0", "sms"], "flag": False}) == (
            "q=email%3A%22a%40b.c%22&strategy=auth0&strategy=sms&flag=false"
        )

    def test_empty(self):
        assert querystring({}) == ""

    def test_build_url_without_query(self):
        assert HTTPRequest(url=URL).build_url() == URL


class TestSuccessStatus:
    @pytest.mark.parametrize("status", [200, 201, 204, 299])
    def test_2xx_is_success(self, status):
        assert is_success_status(status)
        assert HTTPResponse(httpx.Response(status)).is_success

    @pytest.mark.parametrize("status", [199, 300, 304, 404, 500])
    def test_other_statuses_are_not(self, status):
        assert not is_success_status(status)


class TestHTTPClientExecute:
    @pytest.mark.asyncio
    async def test_headers_are_merged(self):
        recorder = _Recorder()
        client = _client(recorder, headers={"X-Client": "1", "X-Shared": "client"})

        request = HTTPRequest(method="GET", url=URL, headers={"X-Shared": "request", "X-Request": "2"})
        await client.execute(request, RequestOptions(headers={"X-Call": "3"}))

        sent = recorder.requests[0].headers
        assert sent["X-Client"] == "1"
        assert sent["X-Shared"] == "request"
        assert sent["X-Request"] == "2"
        assert sent["X-Call"] == "3"

    @pytest.mark.asyncio
    async def test_none_header_is_removed(self):
        recorder = _Recorder()
        client = _client(recorder, headers={"X-Remove-Me": "1"})

        await client.execute(HTTPRequest(url=URL), RequestOptions(headers={"X-Remove-Me": None}))

        assert "X-Remove-Me" not in recorder.requests[0].headers

    @pytest.mark.asyncio
    async def test_static_token_sets_authorization(self):
        recorder = _Recorder()
        client = _client(recorder, token="abc")

        await client.execute(HTTPRequest(url=URL))

        assert recorder.requests[0].headers["Authorization"] == "Bearer abc"

    @pytest.mark.asyncio
    async def test_json_body(self, faker_instance):
        recorder = _Recorder()
        client = _client(recorder)
        body = {"email": faker_instance.email(), "connection": "Username-Password-Authentication"}

        await client.execute(HTTPRequest(method="POST", url=URL, body=body))

        sent = recorder.requests[0]
        assert sent.headers["Content-Type"] == "application/json"
        assert json.loads(sent.content) == body

    @pytest.mark.asyncio
    async def test_list_body_is_json(self):
        recorder = _Recorder()
        client = _client(recorder)

        await client.execute(HTTPRequest(method="PUT", url=URL, body=[{"type": "phone"}]))

        assert json.loads(recorder.requests[0].content) == [{"type": "phone"}]

    @pytest.mark.asyncio
    async def test_timeout_from_request_options(self):
        recorder = _Recorder()
        client = _client(recorder, timeout=10.0)

        await client.execute(HTTPRequest(url=URL), RequestOptions(timeout_in_seconds=2.5))

        assert recorder.timeouts[0]["read"] == 2.5

    @pytest.mark.asyncio
    async def test_init_override_async_dict(self):
        recorder = _Recorder()
        client = _client(recorder)
        seen = []

        async def override(request: HTTPRequest):
            seen.append(request.url)
            return {"headers": {"X-Override": "yes"}, "timeout_in_seconds": 1.0}

        await client.execute(HTTPRequest(url=URL), RequestOptions(init_override=override))

        assert seen == [URL]
        assert recorder.requests[0].headers["X-Override"] == "yes"
        assert recorder.timeouts[0]["read"] == 1.0

    @pytest.mark.asyncio
    async def test_init_override_sync_model(self):
        recorder = _Recorder()
        client = _client(recorder)

        options = RequestOptions(init_override=lambda request: RequestOverride(headers={"X-Sync": "1"}))
        await client.execute(HTTPRequest(url=URL), options)

        assert recorder.requests[0].headers["X-Sync"] == "1"

    @pytest.mark.asyncio
    async def test_non_2xx_uses_error_parser(self):
        client = _client(_Recorder(httpx.Response(503, text="down")))

        with pytest.raises(ResponseError) as exc_info:
            await client.execute(HTTPRequest(url=URL))

        assert exc_info.value.status_code == 503
        assert exc_info.value.body == "down"
        assert exc_info.value.message == "Response returned an error code"

    @pytest.mark.asyncio
    async def test_custom_error_parser(self):
        class TeapotError(Exception):
            pass

        async def parser(response: HTTPResponse) -> Exception:
            return TeapotError(response.status)

        client = _client(_Recorder(httpx.Response(418)), error_parser=parser)

        with pytest.raises(TeapotError):
            await client.execute(HTTPRequest(url=URL))

    @pytest.mark.asyncio
    async def test_debug_log_per_request(self, caplog):
        client = _client(_Recorder())

        with caplog.at_level(logging.DEBUG, logger="auth0_management.sources.client.http.http_client"):
            await client.execute(HTTPRequest(method="DELETE", url=URL))

        messages = [record.getMessage() for record in caplog.records]
        assert f"DELETE {URL}" in messages
        assert f"DELETE {URL} -> 200" in messages


class TestMiddleware:
    @pytest.mark.asyncio
    async def test_pre_and_post_run_in_order(self):
        recorder = _Recorder()
        calls = []

        class Tag(Middleware):
            def __init__(self, name):
                self.name = name

            async def pre(self, request):
                calls.append(f"pre:{self.name}")
                headers = {**request.headers, "X-Tag": self.name}
                return request.model_copy(update={"headers": headers})

            async def post(self, request, response):
                calls.append(f"post:{self.name}")
                return None

        client = _client(recorder).use(Tag("a"), Tag("b"))
        await client.execute(HTTPRequest(url=URL))

        assert calls == ["pre:a", "pre:b", "post:a", "post:b"]
        assert recorder.requests[0].headers["X-Tag"] == "b"

    @pytest.mark.asyncio
    async def test_post_can_replace_response(self):
        class Replace(Middleware):
            async def post(self, request, response):
                return HTTPResponse(httpx.Response(200, json={"replaced": True}))

        client = _client(_Recorder(httpx.Response(500)), middleware=[Replace()])

        response = await client.execute(HTTPRequest(url=URL))

        assert response.json() == {"replaced": True}

    @pytest.mark.asyncio
    async def test_on_error_can_recover(self):
        def fail(request):
            raise httpx.ConnectError("connection refused", request=request)

        class Recover(Middleware):
            def __init__(self):
                self.errors = []

            async def on_error(self, request, error):
                self.errors.append(error)
                return HTTPResponse(httpx.Response(200, json={"fallback": True}))

        recover = Recover()
        client = _client(fail, middleware=[recover])

        response = await client.execute(HTTPRequest(url=URL))

        assert response.json() == {"fallback": True}
        assert isinstance(recover.errors[0], httpx.ConnectError)


class TestTransportFailures:
    @pytest.mark.asyncio
    async def test_fetch_error_keeps_cause(self):
        def fail(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = _client(fail)

        with pytest.raises(FetchError) as exc_info:
            await client.execute(HTTPRequest(url=URL))

        assert not isinstance(exc_info.value, RequestTimeoutError)
        assert isinstance(exc_info.value.cause, httpx.ConnectError)
        assert exc_info.value.__cause__ is exc_info.value.cause

    @pytest.mark.asyncio
    async def test_timeout(self):
        def slow(request):
            raise httpx.ReadTimeout("timed out", request=request)

        client = _client(slow)

        with pytest.raises(RequestTimeoutError) as exc_info:
            await client.execute(HTTPRequest(url=URL))

        assert exc_info.value.message == "The request was timed out."


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_context_manager_closes(self):
        client = _client(_Recorder())

        async with client:
            await client.execute(HTTPRequest(url=URL))
            assert client.client is not None

        assert client.client is None
