from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import BaseManager, JSONApiResponse


class RiskAssessmentsManager(BaseManager):
    async def get_settings(self, request_options: Optional[RequestOptions] = None) -> JSONApiResponse:
        """Get the risk assessment settings

        HTTP GET /risk-assessments/settings

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', '/risk-assessments/settings', request_options=request_options)

    async def update_settings(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update the risk assessment settings

        HTTP PATCH /risk-assessments/settings

        Args:
            body: ``enabled`` (required)
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('PATCH', '/risk-assessments/settings', body=body, request_options=request_options)

    async def get_new_device_settings(self, request_options: Optional[RequestOptions] = None) -> JSONApiResponse:
        """Get the new device risk assessment settings

        HTTP GET /risk-assessments/settings/new-device

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', '/risk-assessments/settings/new-device', request_options=request_options)

    async def update_new_device_settings(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update the new device risk assessment settings

        HTTP PATCH /risk-assessments/settings/new-device

        Args:
            body: ``remember_for`` (required): days a device is remembered
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', '/risk-assessments/settings/new-device', body=body, request_options=request_options
        )
