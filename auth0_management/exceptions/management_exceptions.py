from typing import Mapping, Optional

from auth0_management.sources.external.auth0.models import ManagementApiErrorPayload


class ManagementError(Exception):
    """Base exception for Management API client errors"""

    def __init__(self, message: str, details: Optional[dict] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(ManagementError, ValueError):
    """Raised when client options are missing or invalid"""


class RequiredError(ManagementError):
    """Raised when a required request parameter was not provided"""

    def __init__(self, field: str, message: Optional[str] = None) -> None:
        super().__init__(
            message or f"Required parameter request_parameters.{field} was null or undefined.",
            {"field": field},
        )
        self.field = field


class FetchError(ManagementError):
    """Raised when the request failed at the transport level"""

    def __init__(
        self,
        cause: Exception,
        message: str = "The request failed and the interceptors did not return an alternative response",
    ) -> None:
        super().__init__(message, {"cause": repr(cause)})
        self.cause = cause


class RequestTimeoutError(FetchError):
    """Raised when the request was timed out"""

    def __init__(self, cause: Exception, message: str = "The request was timed out.") -> None:
        super().__init__(cause, message)


class ResponseError(ManagementError):
    """Raised when the API returns an error response that can't be parsed to a more specific error"""

    def __init__(
        self,
        status_code: int,
        body: str,
        headers: Optional[Mapping[str, str]] = None,
        message: str = "Response returned an error code",
    ) -> None:
        super().__init__(message, {"status_code": status_code, "body": body})
        self.status_code = status_code
        self.body = body
        self.headers = dict(headers or {})


class ManagementApiError(ResponseError):
    """Raised when the API returns a structured error payload

    Error payloads look like:
        {
            "statusCode": 400,
            "error": "Bad Request",
            "message": "Payload validation error ...",
            "errorCode": "invalid_body"
        }
    """

    def __init__(
        self,
        error_code: Optional[str],
        error: Optional[str],
        status_code: int,
        body: str,
        headers: Optional[Mapping[str, str]] = None,
        message: Optional[str] = None,
    ) -> None:
        super().__init__(status_code, body, headers, message or error or "Response returned an error code")
        self.error_code = error_code
        self.error = error
        self.details.update({"error_code": error_code, "error": error})

    @property
    def payload(self) -> ManagementApiErrorPayload:
        """The structured error payload as the server sent it"""
        return ManagementApiErrorPayload(
            error_code=self.error_code,
            error=self.error,
            message=self.message,
            status_code=self.status_code,
        )


class ResponseDecodeError(ManagementError):
    """Raised when a JSON response body could not be decoded"""

    def __init__(self, status_code: int, body: str, message: str = "Response body is not valid JSON") -> None:
        super().__init__(message, {"status_code": status_code, "body": body})
        self.status_code = status_code
        self.body = body
