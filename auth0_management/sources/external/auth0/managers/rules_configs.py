from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    JSONApiResponse,
    ResponseKind,
    VoidApiResponse,
)


class RulesConfigsManager(BaseManager):
    """Rules configuration variables, addressed by ``key``"""

    async def delete(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a rules config variable

        HTTP DELETE /rules-configs/{key}

        Args:
            params: Path ``key``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/rules-configs/{key}', params,
            required=['key'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def get_all(self, request_options: Optional[RequestOptions] = None) -> JSONApiResponse:
        """Get the rules config variable keys

        HTTP GET /rules-configs

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', '/rules-configs', request_options=request_options)

    async def set(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Set a rules config variable

        HTTP PUT /rules-configs/{key}

        Args:
            params: Path ``key``
            body: ``value`` (required)
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PUT', '/rules-configs/{key}', params, required=['key'], body=body, request_options=request_options
        )
