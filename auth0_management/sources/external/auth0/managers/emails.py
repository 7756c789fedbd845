from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import BaseManager, JSONApiResponse


class EmailsManager(BaseManager):
    """Email provider configuration"""

    async def get(
        self, params: Optional[Dict[str, Any]] = None, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the email provider

        HTTP GET /emails/provider

        Args:
            params: Query ``fields``, ``include_fields``, all optional
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/emails/provider', params, query=['fields', 'include_fields'], request_options=request_options
        )

    async def update(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update the email provider

        HTTP PATCH /emails/provider

        Args:
            body: ``name``, ``enabled``, ``default_from_address``, ``credentials`` and ``settings``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('PATCH', '/emails/provider', body=body, request_options=request_options)

    async def configure(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Configure the email provider

        HTTP POST /emails/provider

        Args:
            body: ``name`` and ``credentials`` (required), ``enabled``, ``default_from_address`` and
                ``settings``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/emails/provider', body=body, request_options=request_options)
