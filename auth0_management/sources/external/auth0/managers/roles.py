from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    JSONApiResponse,
    ResponseKind,
    VoidApiResponse,
)


class RolesManager(BaseManager):
    async def delete_permissions(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Remove permissions from a role

        HTTP DELETE /roles/{id}/permissions

        Args:
            params: Path ``id``
            body: ``permissions`` (required): list of ``{"resource_server_identifier": ...,
                "permission_name": ...}`` items
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/roles/{id}/permissions', params,
            required=['id'], body=body, kind=ResponseKind.VOID, request_options=request_options,
        )

    async def delete(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a role

        HTTP DELETE /roles/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/roles/{id}', params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def get_permissions(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the permissions granted by a role

        HTTP GET /roles/{id}/permissions

        Args:
            params: Path ``id``; query ``per_page``, ``page``, ``include_totals``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/roles/{id}/permissions', params,
            required=['id'], query=['per_page', 'page', 'include_totals'], request_options=request_options,
        )

    async def get_users(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the users assigned to a role

        Supports offset (``page``/``per_page``) and checkpoint (``from``/``take``)
        pagination.

        HTTP GET /roles/{id}/users

        Args:
            params: Path ``id``; query ``per_page``, ``page``, ``include_totals``, ``from``,
                ``take``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/roles/{id}/users', params,
            required=['id'], query=['per_page', 'page', 'include_totals', 'from', 'take'],
            request_options=request_options,
        )

    async def get_all(
        self, params: Optional[Dict[str, Any]] = None, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get roles

        HTTP GET /roles

        Args:
            params: Query ``per_page``, ``page``, ``include_totals``, ``name_filter``, all optional
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/roles', params,
            query=['per_page', 'page', 'include_totals', 'name_filter'], request_options=request_options,
        )

    async def get(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get a role

        HTTP GET /roles/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', '/roles/{id}', params, required=['id'], request_options=request_options)

    async def update(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update a role

        HTTP PATCH /roles/{id}

        Args:
            params: Path ``id``
            body: ``name`` and ``description``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', '/roles/{id}', params, required=['id'], body=body, request_options=request_options
        )

    async def add_permissions(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Associate permissions with a role

        HTTP POST /roles/{id}/permissions

        Args:
            params: Path ``id``
            body: ``permissions`` (required): list of ``{"resource_server_identifier": ...,
                "permission_name": ...}`` items
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'POST', '/roles/{id}/permissions', params,
            required=['id'], body=body, kind=ResponseKind.VOID, request_options=request_options,
        )

    async def assign_users(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Assign users to a role

        HTTP POST /roles/{id}/users

        Args:
            params: Path ``id``
            body: ``users`` (required): list of user ids
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'POST', '/roles/{id}/users', params,
            required=['id'], body=body, kind=ResponseKind.VOID, request_options=request_options,
        )

    async def create(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create a role

        HTTP POST /roles

        Args:
            body: ``name`` (required) and ``description``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/roles', body=body, request_options=request_options)
