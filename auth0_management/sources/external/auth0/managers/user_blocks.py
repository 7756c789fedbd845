from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    JSONApiResponse,
    ResponseKind,
    VoidApiResponse,
)


class UserBlocksManager(BaseManager):
    """Brute-force blocks, by user id or by identifier (username, phone number or email)"""

    async def delete_all(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Unblock every user matching an identifier

        HTTP DELETE /user-blocks

        Args:
            params: Query ``identifier`` (required)
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/user-blocks', params,
            required=['identifier'], query=['identifier'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def delete(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Unblock a user

        HTTP DELETE /user-blocks/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/user-blocks/{id}', params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def get_all(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the blocks of an identifier

        HTTP GET /user-blocks

        Args:
            params: Query ``identifier`` (required), ``consider_brute_force_enablement``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/user-blocks', params,
            required=['identifier'], query=['identifier', 'consider_brute_force_enablement'],
            request_options=request_options,
        )

    async def get(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the blocks of a user

        HTTP GET /user-blocks/{id}

        Args:
            params: Path ``id``; query ``consider_brute_force_enablement``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/user-blocks/{id}', params,
            required=['id'], query=['consider_brute_force_enablement'], request_options=request_options,
        )
