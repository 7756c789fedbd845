from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    JSONApiResponse,
    ResponseKind,
    TextApiResponse,
)


class StatsManager(BaseManager):
    async def get_active_users_count(self, request_options: Optional[RequestOptions] = None) -> TextApiResponse:
        """Get the number of active users in the last 30 days

        HTTP GET /stats/active-users

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            TextApiResponse with the raw response text
        """
        return await self._request(
            'GET', '/stats/active-users', kind=ResponseKind.TEXT, request_options=request_options
        )

    async def get_daily(
        self, params: Optional[Dict[str, Any]] = None, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get daily statistics for a period

        HTTP GET /stats/daily

        Args:
            params: Query ``from``, ``to``, all optional
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', '/stats/daily', params, query=['from', 'to'], request_options=request_options)
