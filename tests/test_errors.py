"""
Tests for Management API error parsing.
"""

import json

import httpx  # type: ignore
import pytest  # type: ignore

from auth0_management.exceptions.management_exceptions import (
    ManagementApiError,
    ManagementError,
    ResponseError,
)
from auth0_management.sources.client.auth0.auth0 import parse_management_error
from auth0_management.sources.client.http.http_response import HTTPResponse
from auth0_management.sources.external.auth0.models import ManagementApiErrorPayload


def _error_body(status: int, error: str, message: str, code: str) -> dict:
    return {"statusCode": status, "error": error, "message": message, "errorCode": code}


class TestParseManagementError:
    @pytest.mark.asyncio
    async def test_structured_payload(self):
        body = _error_body(404, "Not Found", "The user does not exist.", "inexistent_user")
        response = HTTPResponse(httpx.Response(404, json=body, headers={"x-request-id": "req-1"}))

        error = await parse_management_error(response)

        assert isinstance(error, ManagementApiError)
        assert error.status_code == 404
        assert error.error_code == "inexistent_user"
        assert error.error == "Not Found"
        assert error.message == "The user does not exist."
        assert error.headers["x-request-id"] == "req-1"
        assert json.loads(error.body) == body
        assert isinstance(error.payload, ManagementApiErrorPayload)
        assert error.payload.error_code == "inexistent_user"
        assert error.payload.model_dump(by_alias=True) == body

    @pytest.mark.asyncio
    async def test_status_falls_back_to_http_status(self):
        response = HTTPResponse(httpx.Response(429, json={"error": "Too Many Requests", "message": "Slow down"}))

        error = await parse_management_error(response)

        assert isinstance(error, ManagementApiError)
        assert error.status_code == 429
        assert error.error_code is None

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        response = HTTPResponse(httpx.Response(502, text="<html>Bad Gateway</html>"))

        error = await parse_management_error(response)

        assert type(error) is ResponseError
        assert error.status_code == 502
        assert error.message == "Response returned an error code"
        assert error.body == "<html>Bad Gateway</html>"

    @pytest.mark.asyncio
    async def test_json_array_body_is_not_structured(self):
        response = HTTPResponse(httpx.Response(400, json=["bad"]))

        error = await parse_management_error(response)

        assert type(error) is ResponseError


class TestManagerErrors:
    @pytest.mark.asyncio
    async def test_404_raises_management_api_error(self, management, mock_api, faker_instance):
        user_id = f"auth0|{faker_instance.uuid4()}"
        mock_api.queue(httpx.Response(404, json=_error_body(404, "Not Found", "The user does not exist.", "inexistent_user")))

        with pytest.raises(ManagementApiError) as exc_info:
            await management.users.get({"id": user_id})

        assert exc_info.value.status_code == 404
        assert isinstance(exc_info.value, ManagementError)

    def test_payload_model_reads_wire_names(self):
        payload = ManagementApiErrorPayload.model_validate(
            _error_body(400, "Bad Request", "Payload validation error", "invalid_body")
        )
        assert payload.error_code == "invalid_body"
        assert payload.status_code == 400
