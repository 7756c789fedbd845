from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    JSONApiResponse,
    QueryParam,
    ResponseKind,
    VoidApiResponse,
)

HYDRATE = QueryParam('hydrate', is_array=True, multi=True)


class FormsManager(BaseManager):
    async def delete(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a form

        HTTP DELETE /forms/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/forms/{id}', params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def get_all(
        self, params: Optional[Dict[str, Any]] = None, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get forms

        HTTP GET /forms

        Args:
            params: Query ``page``, ``per_page``, ``include_totals``, ``hydrate``, all optional
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/forms', params,
            query=['page', 'per_page', 'include_totals', HYDRATE], request_options=request_options,
        )

    async def get(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get a form

        HTTP GET /forms/{id}

        Args:
            params: Path ``id``; query ``hydrate``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/forms/{id}', params, required=['id'], query=[HYDRATE], request_options=request_options
        )

    async def update(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update a form

        HTTP PATCH /forms/{id}

        Args:
            params: Path ``id``
            body: ``name``, ``messages``, ``languages``, ``translations``, ``nodes``, ``start``,
                ``ending`` and ``style``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', '/forms/{id}', params, required=['id'], body=body, request_options=request_options
        )

    async def create(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create a form

        HTTP POST /forms

        Args:
            body: ``name`` (required), ``messages``, ``languages``, ``translations``, ``nodes``,
                ``start``, ``ending`` and ``style``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/forms', body=body, request_options=request_options)
