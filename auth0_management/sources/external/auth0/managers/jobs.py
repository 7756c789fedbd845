from pathlib import Path
from typing import Any, Dict, Optional, Union

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    ApiResponse,
    BaseManager,
    JSONApiResponse,
    ResponseKind,
)

IMPORT_FORM_FIELDS = ('users', 'connection_id', 'upsert', 'external_id', 'send_completion_email')


def _users_file(users: Union[str, bytes, Path, Any]) -> Any:
    """Normalise the users payload into a multipart file part"""
    if isinstance(users, Path):
        return (users.name, users.read_bytes(), 'application/json')
    if isinstance(users, str):
        users = users.encode('utf-8')
    if isinstance(users, bytes):
        return ('users.json', users, 'application/json')
    return users


class JobsManager(BaseManager):
    async def get(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get a job

        HTTP GET /jobs/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', '/jobs/{id}', params, required=['id'], request_options=request_options)

    async def get_errors(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        """Get the errors of a job

        HTTP GET /jobs/{id}/errors

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse on 204, otherwise JSONApiResponse
        """
        return await self._request(
            'GET', '/jobs/{id}/errors', params,
            required=['id'], kind=ResponseKind.JSON_OR_VOID, request_options=request_options,
        )

    async def export_users(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create a users export job

        HTTP POST /jobs/users-exports

        Args:
            body: ``connection_id``, ``format`` (``json`` or ``csv``), ``limit`` and ``fields``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/jobs/users-exports', body=body, request_options=request_options)

    async def import_users(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create a users import job

        HTTP POST /jobs/users-imports

        Args:
            body: Multipart fields ``users`` (JSON file content as str, bytes or a Path) and
                ``connection_id`` (required), ``upsert``, ``external_id`` and
                ``send_completion_email``. Fields left out or set to None are not sent
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        form: Dict[str, Any] = {}
        for field in IMPORT_FORM_FIELDS:
            value = body.get(field)
            if value is None:
                continue
            form[field] = _users_file(value) if field == 'users' else value
        return await self._request('POST', '/jobs/users-imports', form=form, request_options=request_options)

    async def verify_email(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Send a verification email job

        HTTP POST /jobs/verification-email

        Args:
            body: ``user_id`` (required), ``client_id``, ``identity`` and ``organization_id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/jobs/verification-email', body=body, request_options=request_options)
