from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    JSONApiResponse,
    ResponseKind,
    VoidApiResponse,
)


class ClientsManager(BaseManager):
    async def delete(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a client

        HTTP DELETE /clients/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/clients/{id}', params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def get_all(
        self, params: Optional[Dict[str, Any]] = None, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get clients

        HTTP GET /clients

        Args:
            params: Query ``fields``, ``include_fields``, ``page``, ``per_page``,
                ``include_totals``, ``is_global``, ``is_first_party``, ``app_type``, all optional
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/clients', params,
            query=[
                'fields', 'include_fields', 'page', 'per_page', 'include_totals',
                'is_global', 'is_first_party', 'app_type',
            ],
            request_options=request_options,
        )

    async def get(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get a client

        HTTP GET /clients/{id}

        Args:
            params: Path ``id``; query ``fields``, ``include_fields``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/clients/{id}', params,
            required=['id'], query=['fields', 'include_fields'], request_options=request_options,
        )

    async def update(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update a client

        HTTP PATCH /clients/{id}

        Args:
            params: Path ``id``
            body: Client fields to change, e.g. ``name``, ``callbacks``, ``allowed_origins``,
                ``grant_types``, ``jwt_configuration`` and ``client_metadata``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', '/clients/{id}', params, required=['id'], body=body, request_options=request_options
        )

    async def create(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create a client

        HTTP POST /clients

        Args:
            body: ``name`` (required), ``app_type``, ``callbacks``, ``allowed_logout_urls``,
                ``grant_types``, ``token_endpoint_auth_method`` and ``client_metadata``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/clients', body=body, request_options=request_options)

    async def rotate_client_secret(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Rotate a client secret

        HTTP POST /clients/{id}/rotate-secret

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'POST', '/clients/{id}/rotate-secret', params, required=['id'], request_options=request_options
        )
