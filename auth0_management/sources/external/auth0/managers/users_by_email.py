from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import BaseManager, JSONApiResponse


class UsersByEmailManager(BaseManager):
    async def get_by_email(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Search users by email address

        HTTP GET /users-by-email

        Args:
            params: Query ``fields``, ``include_fields``, ``email`` (required)
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/users-by-email', params,
            required=['email'], query=['fields', 'include_fields', 'email'], request_options=request_options,
        )
