from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    JSONApiResponse,
    ResponseKind,
    VoidApiResponse,
)


class ClientGrantsManager(BaseManager):
    async def delete(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a client grant

        HTTP DELETE /client-grants/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/client-grants/{id}', params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def get_all(
        self, params: Optional[Dict[str, Any]] = None, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get client grants

        HTTP GET /client-grants

        Args:
            params: Query ``per_page``, ``page``, ``include_totals``, ``audience``, ``client_id``,
                ``allow_any_organization``, all optional
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/client-grants', params,
            query=['per_page', 'page', 'include_totals', 'audience', 'client_id', 'allow_any_organization'],
            request_options=request_options,
        )

    async def get_organizations(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the organizations associated to a client grant

        HTTP GET /client-grants/{id}/organizations

        Args:
            params: Path ``id``; query ``page``, ``per_page``, ``include_totals``, ``from``,
                ``take``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/client-grants/{id}/organizations', params,
            required=['id'], query=['page', 'per_page', 'include_totals', 'from', 'take'],
            request_options=request_options,
        )

    async def update(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update a client grant

        HTTP PATCH /client-grants/{id}

        Args:
            params: Path ``id``
            body: ``scope``, ``organization_usage`` and ``allow_any_organization``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', '/client-grants/{id}', params, required=['id'], body=body, request_options=request_options
        )

    async def create(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create a client grant

        HTTP POST /client-grants

        Args:
            body: ``client_id`` and ``audience`` (required), ``scope``, ``organization_usage`` and
                ``allow_any_organization``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/client-grants', body=body, request_options=request_options)
