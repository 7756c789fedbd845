from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    JSONApiResponse,
    ResponseKind,
    VoidApiResponse,
)


class BlacklistsManager(BaseManager):
    async def get_all(
        self,
        params: Optional[Dict[str, Any]] = None,
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get blacklisted tokens

        HTTP GET /blacklists/tokens

        Args:
            params: Query ``aud``, all optional
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/blacklists/tokens', params, query=['aud'], request_options=request_options
        )

    async def add(
        self,
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Blacklist a token

        HTTP POST /blacklists/tokens

        Args:
            body: ``jti`` (required) and ``aud`` of the token
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'POST', '/blacklists/tokens', body=body,
            kind=ResponseKind.VOID, request_options=request_options,
        )
