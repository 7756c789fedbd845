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


class FlowsManager(BaseManager):
    """Flows, their executions and the vault connections they use"""

    async def delete(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a flow

        HTTP DELETE /flows/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/flows/{id}', params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def get_all(
        self, params: Optional[Dict[str, Any]] = None, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get flows

        HTTP GET /flows

        Args:
            params: Query ``page``, ``per_page``, ``include_totals``, ``hydrate``, ``synchronous``,
                all optional
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/flows', params,
            query=['page', 'per_page', 'include_totals', HYDRATE, 'synchronous'],
            request_options=request_options,
        )

    async def get(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get a flow

        HTTP GET /flows/{id}

        Args:
            params: Path ``id``; query ``hydrate``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/flows/{id}', params, required=['id'], query=[HYDRATE], request_options=request_options
        )

    async def update(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update a flow

        HTTP PATCH /flows/{id}

        Args:
            params: Path ``id``
            body: ``name`` and ``actions``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', '/flows/{id}', params, required=['id'], body=body, request_options=request_options
        )

    async def create(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create a flow

        HTTP POST /flows

        Args:
            body: ``name`` (required) and ``actions``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/flows', body=body, request_options=request_options)

    # Executions

    async def get_all_executions(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the executions of a flow

        HTTP GET /flows/{flow_id}/executions

        Args:
            params: Path ``flow_id``; query ``page``, ``per_page``, ``include_totals``, ``from``,
                ``take``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/flows/{flow_id}/executions', params,
            required=['flow_id'], query=['page', 'per_page', 'include_totals', 'from', 'take'],
            request_options=request_options,
        )

    async def get_execution(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get a flow execution

        HTTP GET /flows/{flow_id}/executions/{execution_id}

        Args:
            params: Path ``flow_id``, ``execution_id``; query ``hydrate``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/flows/{flow_id}/executions/{execution_id}', params,
            required=['flow_id', 'execution_id'], query=[HYDRATE], request_options=request_options,
        )

    async def delete_execution(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a flow execution

        HTTP DELETE /flows/{flow_id}/executions/{execution_id}

        Args:
            params: Path ``flow_id``, ``execution_id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/flows/{flow_id}/executions/{execution_id}', params,
            required=['flow_id', 'execution_id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    # Vault connections

    async def get_all_connections(
        self, params: Optional[Dict[str, Any]] = None, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get flow vault connections

        HTTP GET /flows/vault/connections

        Args:
            params: Query ``page``, ``per_page``, ``include_totals``, all optional
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/flows/vault/connections', params,
            query=['page', 'per_page', 'include_totals'], request_options=request_options,
        )

    async def get_connection(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get a flow vault connection

        HTTP GET /flows/vault/connections/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/flows/vault/connections/{id}', params, required=['id'], request_options=request_options
        )

    async def create_connection(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create a flow vault connection

        HTTP POST /flows/vault/connections

        Args:
            body: ``name`` and ``app_id`` (required), ``setup``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/flows/vault/connections', body=body, request_options=request_options)

    async def update_connection(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update a flow vault connection

        HTTP PATCH /flows/vault/connections/{id}

        Args:
            params: Path ``id``
            body: ``name`` and ``setup``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', '/flows/vault/connections/{id}', params,
            required=['id'], body=body, request_options=request_options,
        )

    async def delete_connection(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a flow vault connection

        HTTP DELETE /flows/vault/connections/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/flows/vault/connections/{id}', params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )
