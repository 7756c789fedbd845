from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    ResponseKind,
    VoidApiResponse,
)


class AnomalyManager(BaseManager):
    async def delete_blocked_ip(
        self,
        params: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Remove a blocked IP address

        HTTP DELETE /anomaly/blocks/ips/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/anomaly/blocks/ips/{id}', params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def check_if_ip_is_blocked(
        self,
        params: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Check if an IP address is blocked

        A 200 means blocked; an unblocked address answers 404 and raises
        ManagementApiError.

        HTTP GET /anomaly/blocks/ips/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'GET', '/anomaly/blocks/ips/{id}', params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )
