"""
Shared request machinery for the Management API managers.

Every manager method validates its required parameters, substitutes path
parameters into the URL template, keeps the allow-listed query parameters,
issues one request and wraps the response in an adapter.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union
from urllib.parse import quote

from auth0_management.config.constants.http_status_code import HttpStatusCode
from auth0_management.exceptions.management_exceptions import (
    RequiredError,
    ResponseDecodeError,
)
from auth0_management.sources.client.auth0.auth0 import Auth0Client
from auth0_management.sources.client.http.http_request import HTTPRequest
from auth0_management.sources.client.http.http_response import HTTPResponse
from auth0_management.sources.client.http.middleware import RequestOptions

COLLECTION_FORMATS = {
    "csv": ",",
    "ssv": " ",
    "tsv": "\t",
    "pipes": "|",
}


class ResponseKind(str, Enum):
    JSON = "json"
    VOID = "void"
    TEXT = "text"
    # JSON body, or nothing on 204 No Content
    JSON_OR_VOID = "json_or_void"


@dataclass(frozen=True)
class QueryParam:
    """Allow-listed query parameter

    Args:
        key: Parameter name as sent on the wire
        is_array: The value is a list
        multi: Repeat the key for each list item instead of joining them
        collection_format: Separator used for joined lists (csv, ssv, tsv, pipes)
    """
    key: str
    is_array: bool = False
    multi: bool = False
    collection_format: str = "csv"


QuerySpec = Union[str, QueryParam]


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def _to_bool_str(v: Any) -> str:
    if isinstance(v, bool):
        return 'true' if v else 'false'
    return str(_plain(v))


def validate_required_request_params(params: Optional[Mapping[str, Any]], keys: Iterable[str]) -> None:
    """Raise RequiredError for the first key that is missing, None or an empty string"""
    params = params or {}
    for key in keys:
        value = params.get(key)
        if value is None or value == "":
            raise RequiredError(key)


def build_path(template: str, params: Optional[Mapping[str, Any]]) -> str:
    """Substitute ``{name}`` placeholders with percent-encoded values"""
    class _SafeDict(dict):
        def __missing__(self, key: str) -> str:
            return '{' + key + '}'

    encoded = {k: quote(_to_bool_str(v), safe='') for k, v in (params or {}).items() if v is not None}
    return template.format_map(_SafeDict(encoded))


def apply_query_params(params: Optional[Mapping[str, Any]], keys: Sequence[QuerySpec]) -> Dict[str, Any]:
    """Keep the allow-listed, non-None parameters in allow-list order"""
    params = params or {}
    query: Dict[str, Any] = {}
    for spec in keys:
        if isinstance(spec, str):
            spec = QueryParam(spec)
        value = params.get(spec.key)
        if value is None:
            continue
        if spec.is_array or isinstance(value, (list, tuple, set)):
            items: List[Any] = [_plain(v) for v in (value if isinstance(value, (list, tuple, set)) else [value])]
            if spec.multi:
                query[spec.key] = items
            else:
                separator = COLLECTION_FORMATS.get(spec.collection_format, ",")
                query[spec.key] = separator.join(_to_bool_str(v) for v in items)
        else:
            query[spec.key] = _plain(value)
    return query


class ApiResponse:
    """Common response adapter surface"""

    def __init__(self, raw: HTTPResponse) -> None:
        self.raw = raw

    @property
    def headers(self) -> Dict[str, str]:
        return self.raw.headers

    @property
    def status(self) -> int:
        return self.raw.status

    @property
    def status_text(self) -> str:
        return self.raw.status_text

    @property
    def data(self) -> Any:
        return self.value()

    def value(self) -> Any:
        raise NotImplementedError


class JSONApiResponse(ApiResponse):
    """Parses the body as JSON on first access and keeps the result"""

    _UNSET = object()

    def __init__(self, raw: HTTPResponse) -> None:
        super().__init__(raw)
        self._value: Any = self._UNSET

    def value(self) -> Any:
        if self._value is self._UNSET:
            body = self.raw.text()
            try:
                self._value = json.loads(body)
            except ValueError as e:
                raise ResponseDecodeError(self.status, body) from e
        return self._value


class VoidApiResponse(ApiResponse):
    def value(self) -> None:
        return None


class TextApiResponse(ApiResponse):
    def value(self) -> str:
        return self.raw.text()


def adapt_response(response: HTTPResponse, kind: ResponseKind) -> ApiResponse:
    if kind == ResponseKind.VOID:
        return VoidApiResponse(response)
    if kind == ResponseKind.TEXT:
        return TextApiResponse(response)
    if kind == ResponseKind.JSON_OR_VOID and response.status == HttpStatusCode.NO_CONTENT.value:
        return VoidApiResponse(response)
    return JSONApiResponse(response)


class BaseManager:
    """Base class for the resource managers"""

    def __init__(self, client: Auth0Client) -> None:
        self._client = client.get_client()
        if self._client is None:
            raise ValueError('HTTP client is not initialized')
        self.base_url = self._client.get_base_url().rstrip('/')

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        required: Sequence[str] = (),
        query: Sequence[QuerySpec] = (),
        body: Any = None,
        form: Optional[Dict[str, Any]] = None,
        kind: ResponseKind = ResponseKind.JSON,
        request_options: Optional[RequestOptions] = None,
    ) -> Any:
        validate_required_request_params(params, required)

        req = HTTPRequest(
            method=method,
            url=self.base_url + build_path(path, params),
            query=apply_query_params(params, query),
            body=body,
            form=form,
        )
        response = await self._client.execute(req, request_options)
        return adapt_response(response, kind)
