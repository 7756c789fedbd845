from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import BaseManager, JSONApiResponse


class TenantsManager(BaseManager):
    async def get_settings(
        self, params: Optional[Dict[str, Any]] = None, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the tenant settings

        HTTP GET /tenants/settings

        Args:
            params: Query ``fields``, ``include_fields``, all optional
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/tenants/settings', params, query=['fields', 'include_fields'], request_options=request_options
        )

    async def update_settings(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update the tenant settings

        HTTP PATCH /tenants/settings

        Args:
            body: Tenant fields to change, e.g. ``friendly_name``, ``support_email``,
                ``default_directory``, ``session_lifetime``, ``flags`` and ``enabled_locales``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('PATCH', '/tenants/settings', body=body, request_options=request_options)
