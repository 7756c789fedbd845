"""
Global pytest configuration and fixtures for the Management API client tests.

Requests never leave the process: every client is built on an
httpx.MockTransport that records what it receives and answers from a queue.
"""

import json
from typing import Any, Callable, Dict, Generator, List, Optional

import httpx  # type: ignore
import pytest  # type: ignore
from faker import Faker  # type: ignore

from auth0_management.config.settings import reset_settings
from auth0_management.sources.client.auth0.auth0 import Auth0Client, ManagementClientOptions
from auth0_management.sources.external.auth0.management_client import ManagementClient

fake: Faker = Faker()

TOKEN_PATH = "/oauth/token"


class MockApi:
    """Records requests and replays queued responses.

    Unqueued requests get ``200 {}``; token requests get a fresh access token
    unless a response was queued for them.
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.token_requests: List[httpx.Request] = []
        self._responses: List[httpx.Response] = []
        self._handler: Optional[Callable[[httpx.Request], httpx.Response]] = None
        self.access_token = "tok-" + fake.pystr(min_chars=12, max_chars=12)
        self.expires_in = 86400

    def queue(self, *responses: httpx.Response) -> "MockApi":
        self._responses.extend(responses)
        return self

    def respond_with(self, handler: Callable[[httpx.Request], httpx.Response]) -> "MockApi":
        self._handler = handler
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.url.path == TOKEN_PATH:
            self.token_requests.append(request)
            return httpx.Response(
                200,
                json={"access_token": self.access_token, "expires_in": self.expires_in, "token_type": "Bearer"},
            )
        self.requests.append(request)
        if self._handler is not None:
            return self._handler(request)
        if self._responses:
            return self._responses.pop(0)
        return httpx.Response(200, json={})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture(scope="session")
def faker_instance() -> Faker:
    """
    Provide a Faker instance for generating test data.

    Returns:
        Configured Faker instance
    """
    return fake


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch) -> Generator[None, None, None]:
    """
    Drop AUTH0_* variables and the cached settings around each test.
    """
    for key in (
        "AUTH0_DOMAIN", "AUTH0_TOKEN", "AUTH0_CLIENT_ID", "AUTH0_CLIENT_SECRET", "AUTH0_AUDIENCE",
        "AUTH0_TIMEOUT", "AUTH0_CUSTOM_DOMAIN", "AUTH0_TELEMETRY", "AUTH0_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def domain(faker_instance: Faker) -> str:
    return f"{faker_instance.domain_word()}.eu.auth0.com"


@pytest.fixture
def mock_api() -> MockApi:
    return MockApi()


@pytest.fixture
def make_options(domain: str, mock_api: MockApi) -> Callable[..., ManagementClientOptions]:
    """Options bound to the mock transport; keyword arguments override the defaults"""

    def _make(**overrides: Any) -> ManagementClientOptions:
        values: Dict[str, Any] = {"domain": domain, "token": "static-token", "transport": mock_api.transport}
        values.update(overrides)
        return ManagementClientOptions(**values)

    return _make


@pytest.fixture
def auth0_client(make_options) -> Auth0Client:
    return Auth0Client.build_with_config(make_options())


@pytest.fixture
def management(auth0_client: Auth0Client) -> ManagementClient:
    return ManagementClient(auth0_client)
