from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    JSONApiResponse,
    ResponseKind,
    VoidApiResponse,
)


class UserAttributeProfilesManager(BaseManager):
    async def delete(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a user attribute profile

        HTTP DELETE /user-attribute-profiles/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/user-attribute-profiles/{id}', params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def get_template(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get a user attribute profile template

        HTTP GET /user-attribute-profiles/templates/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/user-attribute-profiles/templates/{id}', params, required=['id'], request_options=request_options
        )

    async def get_all_templates(self, request_options: Optional[RequestOptions] = None) -> JSONApiResponse:
        """Get the user attribute profile templates

        HTTP GET /user-attribute-profiles/templates

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', '/user-attribute-profiles/templates', request_options=request_options)

    async def get_all(
        self, params: Optional[Dict[str, Any]] = None, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get user attribute profiles

        HTTP GET /user-attribute-profiles

        Args:
            params: Query ``from``, ``take``, all optional
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/user-attribute-profiles', params, query=['from', 'take'], request_options=request_options
        )

    async def get(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get a user attribute profile

        HTTP GET /user-attribute-profiles/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/user-attribute-profiles/{id}', params, required=['id'], request_options=request_options
        )

    async def update(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update a user attribute profile

        HTTP PATCH /user-attribute-profiles/{id}

        Args:
            params: Path ``id``
            body: ``name``, ``user_id`` and ``user_attributes``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', '/user-attribute-profiles/{id}', params,
            required=['id'], body=body, request_options=request_options,
        )

    async def create(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create a user attribute profile

        HTTP POST /user-attribute-profiles

        Args:
            body: ``name`` and ``user_attributes`` (required), ``user_id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/user-attribute-profiles', body=body, request_options=request_options)
