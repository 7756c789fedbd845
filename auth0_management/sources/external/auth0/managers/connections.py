from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    JSONApiResponse,
    QueryParam,
    ResponseKind,
    VoidApiResponse,
)

SCIM_CONFIGURATION = '/connections/{id}/scim-configuration'


class ConnectionsManager(BaseManager):
    async def delete(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a connection and all its users

        HTTP DELETE /connections/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/connections/{id}', params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def delete_scim_configuration(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete the SCIM configuration of a connection

        HTTP DELETE /connections/{id}/scim-configuration

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', SCIM_CONFIGURATION, params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def delete_scim_token(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a SCIM token of a connection

        HTTP DELETE /connections/{id}/scim-configuration/tokens/{tokenId}

        Args:
            params: Path ``id``, ``tokenId``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', SCIM_CONFIGURATION + '/tokens/{tokenId}', params,
            required=['id', 'tokenId'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def delete_user_by_email(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a user from a database connection by email

        HTTP DELETE /connections/{id}/users

        Args:
            params: Path ``id``; query ``email`` (required)
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/connections/{id}/users', params,
            required=['id', 'email'], query=['email'],
            kind=ResponseKind.VOID, request_options=request_options,
        )

    async def get_enabled_clients(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the clients enabled for a connection

        HTTP GET /connections/{id}/clients

        Args:
            params: Path ``id``; query ``take``, ``from``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/connections/{id}/clients', params,
            required=['id'], query=['take', 'from'], request_options=request_options,
        )

    async def get_all(
        self, params: Optional[Dict[str, Any]] = None, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get connections

        ``strategy`` may be a list and is sent as a repeated key.

        HTTP GET /connections

        Args:
            params: Query ``per_page``, ``page``, ``include_totals``, ``from``, ``take``,
                ``strategy``, ``domain_alias``, ``name``, ``fields``, ``include_fields``, all
                optional
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/connections', params,
            query=[
                'per_page', 'page', 'include_totals', 'from', 'take',
                QueryParam('strategy', is_array=True, multi=True),
                'domain_alias', 'name', 'fields', 'include_fields',
            ],
            request_options=request_options,
        )

    async def get(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get a connection

        HTTP GET /connections/{id}

        Args:
            params: Path ``id``; query ``fields``, ``include_fields``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/connections/{id}', params,
            required=['id'], query=['fields', 'include_fields'], request_options=request_options,
        )

    async def get_default_scim_mapping(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the default SCIM attribute mapping of a connection

        HTTP GET /connections/{id}/scim-configuration/default-mapping

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', SCIM_CONFIGURATION + '/default-mapping', params,
            required=['id'], request_options=request_options,
        )

    async def get_keys(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the signing keys of a connection

        HTTP GET /connections/{id}/keys

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/connections/{id}/keys', params, required=['id'], request_options=request_options
        )

    async def get_scim_configuration(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the SCIM configuration of a connection

        HTTP GET /connections/{id}/scim-configuration

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', SCIM_CONFIGURATION, params, required=['id'], request_options=request_options)

    async def get_scim_tokens(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the SCIM tokens of a connection

        HTTP GET /connections/{id}/scim-configuration/tokens

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', SCIM_CONFIGURATION + '/tokens', params, required=['id'], request_options=request_options
        )

    async def check_status(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Check that a connection is online

        HTTP GET /connections/{id}/status

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'GET', '/connections/{id}/status', params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def update_enabled_clients(
        self,
        params: Dict[str, Any],
        body: Any,
        request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Enable or disable clients for a connection

        HTTP PATCH /connections/{id}/clients

        Args:
            params: Path ``id``
            body: List of ``{"client_id": ..., "status": bool}`` items
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'PATCH', '/connections/{id}/clients', params,
            required=['id'], body=body, kind=ResponseKind.VOID, request_options=request_options,
        )

    async def update(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update a connection

        HTTP PATCH /connections/{id}

        Args:
            params: Path ``id``
            body: ``display_name``, ``options``, ``enabled_clients``, ``is_domain_connection``,
                ``show_as_button``, ``realms`` and ``metadata``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', '/connections/{id}', params, required=['id'], body=body, request_options=request_options
        )

    async def update_scim_configuration(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update the SCIM configuration of a connection

        HTTP PATCH /connections/{id}/scim-configuration

        Args:
            params: Path ``id``
            body: ``user_id_attribute`` and ``mapping`` (required)
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', SCIM_CONFIGURATION, params, required=['id'], body=body, request_options=request_options
        )

    async def create(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create a connection

        HTTP POST /connections

        Args:
            body: ``name`` and ``strategy`` (required), ``display_name``, ``options``,
                ``enabled_clients``, ``realms`` and ``metadata``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/connections', body=body, request_options=request_options)

    async def rotate_keys(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Rotate the signing keys of a connection

        HTTP POST /connections/{id}/keys/rotate

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'POST', '/connections/{id}/keys/rotate', params, required=['id'], request_options=request_options
        )

    async def create_scim_configuration(
        self,
        params: Dict[str, Any],
        body: Optional[Dict[str, Any]] = None,
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create a SCIM configuration for a connection

        HTTP POST /connections/{id}/scim-configuration

        Args:
            params: Path ``id``
            body: Optional ``user_id_attribute`` and ``mapping``; defaults apply when empty
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'POST', SCIM_CONFIGURATION, params,
            required=['id'], body=body if body is not None else {}, request_options=request_options,
        )

    async def create_scim_token(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create a SCIM token for a connection

        HTTP POST /connections/{id}/scim-configuration/tokens

        Args:
            params: Path ``id``
            body: ``scopes`` and ``token_lifetime``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'POST', SCIM_CONFIGURATION + '/tokens', params,
            required=['id'], body=body, request_options=request_options,
        )
