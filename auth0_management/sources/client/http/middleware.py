from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field  # type: ignore

from auth0_management.sources.client.http.http_request import HTTPRequest
from auth0_management.sources.client.http.http_response import HTTPResponse


class Middleware:
    """Hooks run by HTTPClient around every request.

    Each hook may return a replacement object or None to keep the current one.
    """

    async def pre(self, request: HTTPRequest) -> Optional[HTTPRequest]:
        return None

    async def post(self, request: HTTPRequest, response: HTTPResponse) -> Optional[HTTPResponse]:
        return None

    async def on_error(self, request: HTTPRequest, error: Exception) -> Optional[HTTPResponse]:
        """Called when the transport failed; return a response to recover"""
        return None


class RequestOverride(BaseModel):
    """Values an init override hook may replace for a single request"""
    headers: Dict[str, Optional[str]] = Field(default_factory=dict)
    timeout_in_seconds: Optional[float] = None


class RequestOptions(BaseModel):
    """Per-call options
    Args:
        headers: Extra headers for this call; a None value removes the header
        timeout_in_seconds: Timeout for this call, overrides the client default
        init_override: Sync or async callable receiving the prepared HTTPRequest
            and returning a RequestOverride (or a dict with the same keys)
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    headers: Dict[str, Optional[str]] = Field(default_factory=dict)
    timeout_in_seconds: Optional[float] = Field(default=None, gt=0)
    init_override: Optional[Callable[[HTTPRequest], Any]] = None
