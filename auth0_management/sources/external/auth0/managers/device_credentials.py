from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    JSONApiResponse,
    ResponseKind,
    VoidApiResponse,
)


class DeviceCredentialsManager(BaseManager):
    async def delete(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a device credential

        HTTP DELETE /device-credentials/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/device-credentials/{id}', params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def get_all(
        self, params: Optional[Dict[str, Any]] = None, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get device credentials

        ``type`` takes a DeviceCredentialType value.

        HTTP GET /device-credentials

        Args:
            params: Query ``page``, ``per_page``, ``include_totals``, ``fields``,
                ``include_fields``, ``user_id``, ``client_id``, ``type``, all optional
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/device-credentials', params,
            query=[
                'page', 'per_page', 'include_totals', 'fields', 'include_fields',
                'user_id', 'client_id', 'type',
            ],
            request_options=request_options,
        )

    async def create_public_key(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create a device public key credential

        HTTP POST /device-credentials

        Args:
            body: ``device_name``, ``type``, ``value`` and ``device_id`` (required), ``client_id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/device-credentials', body=body, request_options=request_options)
