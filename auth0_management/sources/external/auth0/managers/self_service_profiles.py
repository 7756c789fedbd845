from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    JSONApiResponse,
    ResponseKind,
    TextApiResponse,
    VoidApiResponse,
)

CUSTOM_TEXT = '/self-service-profiles/{id}/custom-text/{language}/{page}'


class SelfServiceProfilesManager(BaseManager):
    """Self-service SSO profiles and tickets"""

    async def delete(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a self-service profile

        HTTP DELETE /self-service-profiles/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/self-service-profiles/{id}', params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def get_all(
        self, params: Optional[Dict[str, Any]] = None, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get self-service profiles

        HTTP GET /self-service-profiles

        Args:
            params: Query ``page``, ``per_page``, ``include_totals``, all optional
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/self-service-profiles', params,
            query=['page', 'per_page', 'include_totals'], request_options=request_options,
        )

    async def get(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get a self-service profile

        HTTP GET /self-service-profiles/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/self-service-profiles/{id}', params, required=['id'], request_options=request_options
        )

    async def update(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update a self-service profile

        HTTP PATCH /self-service-profiles/{id}

        Args:
            params: Path ``id``
            body: ``name``, ``description``, ``branding``, ``allowed_strategies`` and
                ``user_attributes``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', '/self-service-profiles/{id}', params, required=['id'], body=body, request_options=request_options
        )

    async def create(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create a self-service profile

        HTTP POST /self-service-profiles

        Args:
            body: ``name`` (required), ``description``, ``branding``, ``allowed_strategies`` and
                ``user_attributes``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/self-service-profiles', body=body, request_options=request_options)

    async def get_custom_text(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the custom text of a self-service profile page

        HTTP GET /self-service-profiles/{id}/custom-text/{language}/{page}

        Args:
            params: Path ``id``, ``language``, ``page``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', CUSTOM_TEXT, params, required=['id', 'language', 'page'], request_options=request_options
        )

    async def update_custom_text(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Set the custom text of a self-service profile page

        HTTP PUT /self-service-profiles/{id}/custom-text/{language}/{page}

        Args:
            params: Path ``id``, ``language``, ``page``
            body: Mapping of text key to override; replaces the whole set
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PUT', CUSTOM_TEXT, params,
            required=['id', 'language', 'page'], body=body, request_options=request_options,
        )

    async def create_sso_ticket(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create a self-service SSO access ticket

        HTTP POST /self-service-profiles/{id}/sso-ticket

        Args:
            params: Path ``id``
            body: ``connection_id``, ``connection_config``, ``enabled_clients``,
                ``enabled_organizations``, ``ttl_sec`` and ``domain_aliases_config``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'POST', '/self-service-profiles/{id}/sso-ticket', params,
            required=['id'], body=body, request_options=request_options,
        )

    async def revoke_sso_ticket(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> TextApiResponse:
        """Revoke a self-service SSO access ticket

        HTTP POST /self-service-profiles/{profileId}/sso-ticket/{id}/revoke

        Args:
            params: Path ``profileId``, ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            TextApiResponse with the raw response text
        """
        return await self._request(
            'POST', '/self-service-profiles/{profileId}/sso-ticket/{id}/revoke', params,
            required=['profileId', 'id'], kind=ResponseKind.TEXT, request_options=request_options,
        )
