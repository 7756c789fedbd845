from typing import Any, Dict, List, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    JSONApiResponse,
    ResponseKind,
    VoidApiResponse,
)


class HooksManager(BaseManager):
    async def delete(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a hook

        HTTP DELETE /hooks/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/hooks/{id}', params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def get_all(
        self, params: Optional[Dict[str, Any]] = None, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get hooks

        ``triggerId`` takes a HookTriggerId value.

        HTTP GET /hooks

        Args:
            params: Query ``page``, ``per_page``, ``include_totals``, ``enabled``, ``fields``,
                ``triggerId``, all optional
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/hooks', params,
            query=['page', 'per_page', 'include_totals', 'enabled', 'fields', 'triggerId'],
            request_options=request_options,
        )

    async def get(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get a hook

        HTTP GET /hooks/{id}

        Args:
            params: Path ``id``; query ``fields``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/hooks/{id}', params, required=['id'], query=['fields'], request_options=request_options
        )

    async def update(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update a hook

        HTTP PATCH /hooks/{id}

        Args:
            params: Path ``id``
            body: ``name``, ``script``, ``enabled`` and ``dependencies``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', '/hooks/{id}', params, required=['id'], body=body, request_options=request_options
        )

    async def create(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create a hook

        HTTP POST /hooks

        Args:
            body: ``name``, ``script`` and ``triggerId`` (required), ``enabled`` and
                ``dependencies``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/hooks', body=body, request_options=request_options)

    async def get_secrets(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the secrets of a hook, values are masked

        HTTP GET /hooks/{id}/secrets

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/hooks/{id}/secrets', params, required=['id'], request_options=request_options
        )

    async def add_secrets(
        self,
        params: Dict[str, Any],
        body: Dict[str, str],
        request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Add secrets to a hook

        HTTP POST /hooks/{id}/secrets

        Args:
            params: Path ``id``
            body: Mapping of secret name to value
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'POST', '/hooks/{id}/secrets', params,
            required=['id'], body=body, kind=ResponseKind.VOID, request_options=request_options,
        )

    async def update_secrets(
        self,
        params: Dict[str, Any],
        body: Dict[str, str],
        request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Update existing secrets of a hook

        HTTP PATCH /hooks/{id}/secrets

        Args:
            params: Path ``id``
            body: Mapping of secret name to new value
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'PATCH', '/hooks/{id}/secrets', params,
            required=['id'], body=body, kind=ResponseKind.VOID, request_options=request_options,
        )

    async def delete_secrets(
        self,
        params: Dict[str, Any],
        body: List[str],
        request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete secrets of a hook by name

        HTTP DELETE /hooks/{id}/secrets

        Args:
            params: Path ``id``
            body: List of secret names
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/hooks/{id}/secrets', params,
            required=['id'], body=body, kind=ResponseKind.VOID, request_options=request_options,
        )
