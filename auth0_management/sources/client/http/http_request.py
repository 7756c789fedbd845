import json
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field  # type: ignore

QueryValue = Union[str, int, float, bool, None, List[Union[str, int, float, bool, None]]]


def _to_query_str(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def querystring(params: Dict[str, QueryValue]) -> str:
    """Render query parameters, repeating the key for list values.

    Keys keep their insertion order; empty lists produce nothing.
    """
    parts: List[str] = []
    for key, value in params.items():
        encoded_key = quote(str(key), safe='')
        if isinstance(value, (list, tuple)):
            parts.extend(f"{encoded_key}={quote(_to_query_str(v), safe='')}" for v in value)
        else:
            parts.append(f"{encoded_key}={quote(_to_query_str(value), safe='')}")
    return '&'.join(parts)


class HTTPRequest(BaseModel):
    """HTTP request
    Args:
        url: The URL of the request, path parameters already substituted
        method: The HTTP method to use
        headers: The headers to send with the request
        body: The JSON body of the request (or raw bytes)
        form: Multipart form fields, sent instead of body when set
        query_params: The query parameters to use
    """
    model_config = ConfigDict(populate_by_name=True)

    url: str = Field(alias="uri")
    method: str = Field(default="GET")
    headers: Dict[str, Optional[str]] = Field(default_factory=dict)
    body: Union[Dict[str, Any], List[Any], bytes, Path, None] = None
    form: Optional[Dict[str, Any]] = None
    query_params: Dict[str, Any] = Field(default_factory=dict, alias="query")

    def build_url(self) -> str:
        """URL with the query string appended.

        No ``?`` is added when there are no query parameters.
        """
        if not self.query_params:
            return self.url
        return f"{self.url}?{querystring(self.query_params)}"

    def to_json(self) -> str:
        """
        Convert request to a JSON string.
        Files are represented as their path, bytes are decoded as UTF-8.
        """
        data = self.model_dump(exclude={"form"})

        if isinstance(self.body, Path):
            data["body"] = str(self.body)
        elif isinstance(self.body, bytes):
            data["body"] = self.body.decode("utf-8", errors="replace")

        return json.dumps(data, indent=2)
