from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    JSONApiResponse,
    ResponseKind,
    VoidApiResponse,
)


class GrantsManager(BaseManager):
    async def delete(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a grant

        HTTP DELETE /grants/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/grants/{id}', params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def delete_by_user_id(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete all grants of a user

        HTTP DELETE /grants

        Args:
            params: Query ``user_id`` (required)
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/grants', params,
            required=['user_id'], query=['user_id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def get_all(
        self, params: Optional[Dict[str, Any]] = None, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get grants

        HTTP GET /grants

        Args:
            params: Query ``per_page``, ``page``, ``include_totals``, ``user_id``, ``client_id``,
                ``audience``, all optional
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/grants', params,
            query=['per_page', 'page', 'include_totals', 'user_id', 'client_id', 'audience'],
            request_options=request_options,
        )
