from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    JSONApiResponse,
    QueryParam,
    ResponseKind,
    VoidApiResponse,
)


class ResourceServersManager(BaseManager):
    async def delete(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a resource server

        HTTP DELETE /resource-servers/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/resource-servers/{id}', params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def get_all(
        self, params: Optional[Dict[str, Any]] = None, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get resource servers

        ``identifiers`` may be a list and is sent as a repeated key.

        HTTP GET /resource-servers

        Args:
            params: Query ``identifiers``, ``page``, ``per_page``, ``include_totals``,
                ``include_fields``, all optional
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/resource-servers', params,
            query=[
                QueryParam('identifiers', is_array=True, multi=True),
                'page', 'per_page', 'include_totals', 'include_fields',
            ],
            request_options=request_options,
        )

    async def get(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get a resource server

        HTTP GET /resource-servers/{id}

        Args:
            params: Path ``id``; query ``include_fields``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/resource-servers/{id}', params,
            required=['id'], query=['include_fields'], request_options=request_options,
        )

    async def update(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update a resource server

        HTTP PATCH /resource-servers/{id}

        Args:
            params: Path ``id``
            body: ``name``, ``scopes``, ``signing_alg``, ``token_lifetime``,
                ``allow_offline_access``, ``skip_consent_for_verifiable_first_party_clients`` and
                ``token_dialect``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', '/resource-servers/{id}', params, required=['id'], body=body, request_options=request_options
        )

    async def create(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create a resource server

        HTTP POST /resource-servers

        Args:
            body: ``identifier`` (required), ``name``, ``scopes``, ``signing_alg``,
                ``token_lifetime``, ``allow_offline_access`` and ``token_dialect``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/resource-servers', body=body, request_options=request_options)
