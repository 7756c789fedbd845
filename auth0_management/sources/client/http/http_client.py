import inspect
import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

import httpx  # type: ignore

from auth0_management.exceptions.management_exceptions import (
    FetchError,
    RequestTimeoutError,
    ResponseError,
)
from auth0_management.sources.client.http.http_request import HTTPRequest
from auth0_management.sources.client.http.http_response import HTTPResponse
from auth0_management.sources.client.http.middleware import (
    Middleware,
    RequestOptions,
    RequestOverride,
)
from auth0_management.sources.client.iclient import IClient

ErrorParser = Callable[[HTTPResponse], Awaitable[Exception]]


async def default_error_parser(response: HTTPResponse) -> Exception:
    return ResponseError(response.status, response.text(), response.headers)


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _split_form(form: Dict[str, Any]) -> Tuple[Dict[str, str], Dict[str, Any]]:
    """Split multipart fields into plain data fields and file parts"""
    data: Dict[str, str] = {}
    files: Dict[str, Any] = {}
    for key, value in form.items():
        if value is None:
            continue
        if isinstance(value, Path):
            files[key] = (value.name, value.read_bytes())
        elif isinstance(value, (bytes, tuple)) or hasattr(value, "read"):
            files[key] = value
        else:
            data[key] = _form_value(value)
    return data, files


class HTTPClient(IClient):
    """
    Async HTTP client performing exactly one round trip per call.

    Features:
    - Optional static Authorization header
    - Middleware hooks (pre / post / on_error) around each request
    - Per-call RequestOptions (headers, timeout, init override)
    - Non-2xx responses converted into exceptions by the error parser

    Args:
        token: Optional static token for the Authorization header
        token_type: Token type for Authorization header (default: "Bearer")
        headers: Default headers sent with every request
        timeout: Request timeout in seconds (default: 10.0)
        follow_redirects: Whether to follow HTTP redirects (default: True)
        middleware: Middleware run in order around every request
        error_parser: Coroutine turning a non-2xx response into an exception
        transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        logger: Optional logger instance
    """
    def __init__(
        self,
        token: Optional[str] = None,
        token_type: str = "Bearer",
        headers: Optional[Dict[str, str]] = None,
        timeout: float = 10.0,
        follow_redirects: bool = True,
        middleware: Optional[List[Middleware]] = None,
        error_parser: Optional[ErrorParser] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None
    ) -> None:
        self.headers: Dict[str, str] = dict(headers or {})
        if token:
            self.headers["Authorization"] = f"{token_type} {token}"
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self.middleware: List[Middleware] = list(middleware or [])
        self.error_parser: ErrorParser = error_parser or default_error_parser
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)
        self.client: Optional[httpx.AsyncClient] = None

    def get_client(self) -> "HTTPClient":
        """Get the client"""
        return self

    def use(self, *middleware: Middleware) -> "HTTPClient":
        """Append middleware, returning self for chaining"""
        self.middleware.extend(middleware)
        return self

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure client is created and available"""
        if self.client is None:
            self.client = httpx.AsyncClient(
                transport=self.transport,
                timeout=self.timeout,
                follow_redirects=self.follow_redirects
            )
        return self.client

    async def _apply_override(
        self, request: HTTPRequest, options: RequestOptions, timeout: float
    ) -> Tuple[HTTPRequest, float]:
        override = options.init_override(request)
        if inspect.isawaitable(override):
            override = await override
        if override is None:
            return request, timeout
        if isinstance(override, dict):
            override = RequestOverride(**override)
        headers = {**request.headers, **override.headers}
        request = request.model_copy(update={"headers": headers})
        return request, override.timeout_in_seconds or timeout

    def _body_kwargs(self, request: HTTPRequest) -> Dict[str, Any]:
        if request.form is not None:
            data, files = _split_form(request.form)
            return {"data": data, "files": files or None}
        if isinstance(request.body, (dict, list)):
            # Check if Content-Type indicates form data
            content_type = (request.headers.get("Content-Type") or "").lower()
            if "application/x-www-form-urlencoded" in content_type and isinstance(request.body, dict):
                return {"data": request.body}
            return {"json": request.body}
        if isinstance(request.body, bytes):
            return {"content": request.body}
        if isinstance(request.body, Path):
            return {"content": request.body.read_bytes()}
        return {}

    async def execute(
        self,
        request: HTTPRequest,
        request_options: Optional[RequestOptions] = None,
        **kwargs
    ) -> HTTPResponse:
        """Execute an HTTP request
        Args:
            request: The HTTP request to execute
            request_options: Per-call headers, timeout and init override
            kwargs: Additional keyword arguments to pass to httpx
        Returns:
            A HTTPResponse object for a 2xx response
        Raises:
            FetchError: The transport failed and no middleware recovered
            RequestTimeoutError: The request timed out
            ResponseError: Whatever the error parser returns for non-2xx statuses
        """
        options = request_options or RequestOptions()
        client = await self._ensure_client()

        # Merge client headers with request headers (request headers take precedence)
        merged_headers = {**self.headers, **request.headers, **options.headers}
        request = request.model_copy(update={"headers": merged_headers})

        for middleware in self.middleware:
            updated = await middleware.pre(request)
            if updated is not None:
                request = updated

        timeout = options.timeout_in_seconds or self.timeout
        if options.init_override is not None:
            request, timeout = await self._apply_override(request, options, timeout)

        headers = {k: v for k, v in request.headers.items() if v is not None}
        url = request.build_url()
        self.logger.debug("%s %s", request.method, url)

        response: Optional[HTTPResponse] = None
        try:
            raw = await client.request(
                request.method,
                url,
                headers=headers,
                timeout=timeout,
                **self._body_kwargs(request),
                **kwargs
            )
            response = HTTPResponse(raw)
        except httpx.TransportError as e:
            for middleware in self.middleware:
                response = await middleware.on_error(request, e)
                if response is not None:
                    break
            if response is None:
                self.logger.debug("%s %s failed: %s", request.method, url, e)
                if isinstance(e, httpx.TimeoutException):
                    raise RequestTimeoutError(e) from e
                raise FetchError(e) from e

        for middleware in self.middleware:
            updated_response = await middleware.post(request, response)
            if updated_response is not None:
                response = updated_response

        self.logger.debug("%s %s -> %s", request.method, url, response.status)
        if response.is_success:
            return response
        raise await self.error_parser(response)

    async def close(self) -> None:
        """Close the client"""
        if self.client:
            await self.client.aclose()
            self.client = None

    async def __aenter__(self) -> "HTTPClient":
        """Async context manager entry"""
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit"""
        await self.close()
