"""
Users manager

Covers the user profile itself plus its sub-resources: authentication
methods, authenticators, multifactor providers, permissions, roles, linked
identities, logs, organizations, refresh tokens and sessions.
"""

from typing import Any, Dict, List, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    JSONApiResponse,
    ResponseKind,
    VoidApiResponse,
)

PAGED_TOTALS = ['page', 'per_page', 'include_totals']
CHECKPOINT = ['include_totals', 'from', 'take']


class UsersManager(BaseManager):
    # Authentication methods

    async def delete_authentication_methods(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete every authentication method of a user

        HTTP DELETE /users/{id}/authentication-methods

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/users/{id}/authentication-methods', params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def delete_authentication_method(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete an authentication method of a user

        HTTP DELETE /users/{id}/authentication-methods/{authentication_method_id}

        Args:
            params: Path ``id``, ``authentication_method_id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/users/{id}/authentication-methods/{authentication_method_id}', params,
            required=['id', 'authentication_method_id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def get_authentication_methods(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the authentication methods of a user

        HTTP GET /users/{id}/authentication-methods

        Args:
            params: Path ``id``; query ``page``, ``per_page``, ``include_totals``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/users/{id}/authentication-methods', params,
            required=['id'], query=PAGED_TOTALS, request_options=request_options,
        )

    async def get_authentication_method(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get an authentication method of a user

        HTTP GET /users/{id}/authentication-methods/{authentication_method_id}

        Args:
            params: Path ``id``, ``authentication_method_id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/users/{id}/authentication-methods/{authentication_method_id}', params,
            required=['id', 'authentication_method_id'], request_options=request_options,
        )

    async def update_authentication_method(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update an authentication method of a user

        HTTP PATCH /users/{id}/authentication-methods/{authentication_method_id}

        Args:
            params: Path ``id``, ``authentication_method_id``
            body: ``name`` and ``preferred_authentication_method``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', '/users/{id}/authentication-methods/{authentication_method_id}', params,
            required=['id', 'authentication_method_id'], body=body, request_options=request_options,
        )

    async def create_authentication_method(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create an authentication method for a user

        HTTP POST /users/{id}/authentication-methods

        Args:
            params: Path ``id``
            body: ``type`` (required), ``name``, ``phone_number``, ``email``, ``totp_secret`` and
                ``preferred_authentication_method``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'POST', '/users/{id}/authentication-methods', params,
            required=['id'], body=body, request_options=request_options,
        )

    async def update_authentication_methods(
        self,
        params: Dict[str, Any],
        body: List[Dict[str, Any]],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Replace every authentication method of a user

        HTTP PUT /users/{id}/authentication-methods

        Args:
            params: Path ``id``
            body: List of authentication methods, each with ``type`` and its fields
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PUT', '/users/{id}/authentication-methods', params,
            required=['id'], body=body, request_options=request_options,
        )

    # Multifactor

    async def delete_all_authenticators(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete every authenticator of a user

        HTTP DELETE /users/{id}/authenticators

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/users/{id}/authenticators', params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def delete_multifactor_provider(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a multifactor provider (duo or google-authenticator) of a user

        HTTP DELETE /users/{id}/multifactor/{provider}

        Args:
            params: Path ``id``, ``provider``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/users/{id}/multifactor/{provider}', params,
            required=['id', 'provider'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def invalidate_remember_browser(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Invalidate every remembered browser of a user

        HTTP POST /users/{id}/multifactor/actions/invalidate-remember-browser

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'POST', '/users/{id}/multifactor/actions/invalidate-remember-browser', params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def regenerate_recovery_code(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Regenerate the multi-factor recovery code of a user

        HTTP POST /users/{id}/recovery-code-regeneration

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'POST', '/users/{id}/recovery-code-regeneration', params,
            required=['id'], request_options=request_options,
        )

    async def get_enrollments(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the Guardian enrollments of a user

        HTTP GET /users/{id}/enrollments

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/users/{id}/enrollments', params, required=['id'], request_options=request_options
        )

    # Permissions

    async def delete_permissions(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Remove permissions from a user

        HTTP DELETE /users/{id}/permissions

        Args:
            params: Path ``id``
            body: ``permissions`` (required): list of ``{"resource_server_identifier": ...,
                "permission_name": ...}`` items
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/users/{id}/permissions', params,
            required=['id'], body=body, kind=ResponseKind.VOID, request_options=request_options,
        )

    async def get_permissions(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the permissions of a user

        HTTP GET /users/{id}/permissions

        Args:
            params: Path ``id``; query ``per_page``, ``page``, ``include_totals``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/users/{id}/permissions', params,
            required=['id'], query=['per_page', 'page', 'include_totals'], request_options=request_options,
        )

    async def assign_permissions(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Assign permissions to a user

        HTTP POST /users/{id}/permissions

        Args:
            params: Path ``id``
            body: ``permissions`` (required): list of ``{"resource_server_identifier": ...,
                "permission_name": ...}`` items
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'POST', '/users/{id}/permissions', params,
            required=['id'], body=body, kind=ResponseKind.VOID, request_options=request_options,
        )

    # Roles

    async def delete_roles(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Remove roles from a user

        HTTP DELETE /users/{id}/roles

        Args:
            params: Path ``id``
            body: ``roles`` (required): list of role ids
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/users/{id}/roles', params,
            required=['id'], body=body, kind=ResponseKind.VOID, request_options=request_options,
        )

    async def get_roles(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the roles of a user

        HTTP GET /users/{id}/roles

        Args:
            params: Path ``id``; query ``per_page``, ``page``, ``include_totals``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/users/{id}/roles', params,
            required=['id'], query=['per_page', 'page', 'include_totals'], request_options=request_options,
        )

    async def assign_roles(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Assign roles to a user

        HTTP POST /users/{id}/roles

        Args:
            params: Path ``id``
            body: ``roles`` (required): list of role ids
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'POST', '/users/{id}/roles', params,
            required=['id'], body=body, kind=ResponseKind.VOID, request_options=request_options,
        )

    # Refresh tokens and sessions

    async def delete_refresh_tokens(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete every refresh token of a user

        HTTP DELETE /users/{user_id}/refresh-tokens

        Args:
            params: Path ``user_id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/users/{user_id}/refresh-tokens', params,
            required=['user_id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def delete_sessions(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete every session of a user

        HTTP DELETE /users/{user_id}/sessions

        Args:
            params: Path ``user_id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/users/{user_id}/sessions', params,
            required=['user_id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def get_refresh_tokens(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the refresh tokens of a user

        HTTP GET /users/{user_id}/refresh-tokens

        Args:
            params: Path ``user_id``; query ``include_totals``, ``from``, ``take``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/users/{user_id}/refresh-tokens', params,
            required=['user_id'], query=CHECKPOINT, request_options=request_options,
        )

    async def get_sessions(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the sessions of a user

        HTTP GET /users/{user_id}/sessions

        Args:
            params: Path ``user_id``; query ``include_totals``, ``from``, ``take``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/users/{user_id}/sessions', params,
            required=['user_id'], query=CHECKPOINT, request_options=request_options,
        )

    # Identities

    async def unlink(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Unlink a secondary identity; returns the remaining identities

        HTTP DELETE /users/{id}/identities/{provider}/{user_id}

        Args:
            params: Path ``id``, ``provider``, ``user_id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'DELETE', '/users/{id}/identities/{provider}/{user_id}', params,
            required=['id', 'provider', 'user_id'], request_options=request_options,
        )

    async def link(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Link a secondary account to the primary user ``id``

        HTTP POST /users/{id}/identities

        Args:
            params: Path ``id``
            body: ``provider`` and ``user_id`` of the secondary account, or its ``link_with`` ID
                token; ``connection_id`` when needed
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'POST', '/users/{id}/identities', params,
            required=['id'], body=body, request_options=request_options,
        )

    # Users

    async def delete(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a user

        HTTP DELETE /users/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/users/{id}', params, required=['id'], kind=ResponseKind.VOID, request_options=request_options
        )

    async def get_logs(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the log events of a user

        HTTP GET /users/{id}/logs

        Args:
            params: Path ``id``; query ``page``, ``per_page``, ``sort``, ``include_totals``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/users/{id}/logs', params,
            required=['id'], query=['page', 'per_page', 'sort', 'include_totals'], request_options=request_options,
        )

    async def get_user_organizations(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the organizations a user is a member of

        HTTP GET /users/{id}/organizations

        Args:
            params: Path ``id``; query ``page``, ``per_page``, ``include_totals``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/users/{id}/organizations', params,
            required=['id'], query=PAGED_TOTALS, request_options=request_options,
        )

    async def get_all(
        self, params: Optional[Dict[str, Any]] = None, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """List or search users

        HTTP GET /users

        Args:
            params: Query ``page``, ``per_page``, ``include_totals``, ``sort``, ``connection``,
                ``fields``, ``include_fields``, ``q``, ``search_engine``, all optional
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/users', params,
            query=[
                'page', 'per_page', 'include_totals', 'sort', 'connection',
                'fields', 'include_fields', 'q', 'search_engine',
            ],
            request_options=request_options,
        )

    async def get(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get a user

        HTTP GET /users/{id}

        Args:
            params: Path ``id``; query ``fields``, ``include_fields``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/users/{id}', params,
            required=['id'], query=['fields', 'include_fields'], request_options=request_options,
        )

    async def update(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update a user

        HTTP PATCH /users/{id}

        Args:
            params: Path ``id``
            body: User fields to change, e.g. ``email``, ``name``, ``blocked``, ``email_verified``,
                ``password``, ``app_metadata`` and ``user_metadata``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', '/users/{id}', params, required=['id'], body=body, request_options=request_options
        )

    async def create(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create a user

        HTTP POST /users

        Args:
            body: ``connection`` (required), ``email``, ``phone_number``, ``username``,
                ``password``, ``user_metadata``, ``app_metadata`` and ``email_verified``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/users', body=body, request_options=request_options)
