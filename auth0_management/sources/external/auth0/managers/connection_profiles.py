from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    JSONApiResponse,
    ResponseKind,
    VoidApiResponse,
)


class ConnectionProfilesManager(BaseManager):
    async def delete(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a connection profile

        HTTP DELETE /connection-profiles/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/connection-profiles/{id}', params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def get_template(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get a connection profile template

        HTTP GET /connection-profiles/templates/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/connection-profiles/templates/{id}', params, required=['id'], request_options=request_options
        )

    async def get_all_templates(self, request_options: Optional[RequestOptions] = None) -> JSONApiResponse:
        """Get the connection profile templates

        HTTP GET /connection-profiles/templates

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', '/connection-profiles/templates', request_options=request_options)

    async def get_all(
        self, params: Optional[Dict[str, Any]] = None, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get connection profiles

        HTTP GET /connection-profiles

        Args:
            params: Query ``from``, ``take``, all optional
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/connection-profiles', params, query=['from', 'take'], request_options=request_options
        )

    async def get(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get a connection profile

        HTTP GET /connection-profiles/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/connection-profiles/{id}', params, required=['id'], request_options=request_options
        )

    async def update(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update a connection profile

        HTTP PATCH /connection-profiles/{id}

        Args:
            params: Path ``id``
            body: ``name``, ``organization``, ``connection_name_prefix_template``,
                ``enabled_features``, ``connection_config`` and ``strategy_overrides``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', '/connection-profiles/{id}', params,
            required=['id'], body=body, request_options=request_options,
        )

    async def create(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create a connection profile

        HTTP POST /connection-profiles

        Args:
            body: ``name`` (required), ``organization``, ``connection_name_prefix_template``,
                ``enabled_features``, ``connection_config`` and ``strategy_overrides``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/connection-profiles', body=body, request_options=request_options)
