from typing import Any, Dict, Optional

import httpx  # type: ignore

from auth0_management.config.constants.http_status_code import is_success_status


class HTTPResponse:
    """HTTP response
    Args:
        response: The httpx response returned by the transport
    """
    def __init__(self, response: httpx.Response) -> None:
        self.response = response

    @property
    def status(self) -> int:
        return self.response.status_code

    @property
    def status_text(self) -> str:
        return self.response.reason_phrase

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self.response.headers)

    @property
    def url(self) -> str:
        return str(self.response.url)

    @property
    def is_success(self) -> bool:
        return is_success_status(self.status)

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive single header lookup"""
        return self.response.headers.get(name)

    def json(self) -> Any:
        """Get the response body as parsed JSON"""
        return self.response.json()

    def text(self) -> str:
        """Get the response body as text"""
        return self.response.text

    def bytes(self) -> bytes:
        """Get the response body as bytes"""
        return self.response.content

    def __repr__(self) -> str:
        return f"HTTPResponse(status={self.status}, url={self.url!r})"
