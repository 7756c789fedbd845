from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    ResponseKind,
    VoidApiResponse,
)

BREACHED_PASSWORD_DETECTION = '/attack-protection/breached-password-detection'
BRUTE_FORCE_PROTECTION = '/attack-protection/brute-force-protection'
SUSPICIOUS_IP_THROTTLING = '/attack-protection/suspicious-ip-throttling'


class AttackProtectionManager(BaseManager):
    """Attack protection settings

    These endpoints are exposed without a response model, so every call
    returns a VoidApiResponse. The raw body is still reachable through
    ``response.raw.json()``.
    """

    async def get_breached_password_detection_config(
        self, request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Get the breached password detection settings

        HTTP GET /attack-protection/breached-password-detection

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'GET', BREACHED_PASSWORD_DETECTION, kind=ResponseKind.VOID, request_options=request_options
        )

    async def get_brute_force_config(
        self, request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Get the brute force protection settings

        HTTP GET /attack-protection/brute-force-protection

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'GET', BRUTE_FORCE_PROTECTION, kind=ResponseKind.VOID, request_options=request_options
        )

    async def get_brute_force_defaults(
        self, request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Get the default brute force protection settings

        HTTP GET /attack-protection/brute-force-protection/defaults

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'GET', BRUTE_FORCE_PROTECTION + '/defaults', kind=ResponseKind.VOID, request_options=request_options
        )

    async def get_suspicious_ip_throttling_config(
        self, request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Get the suspicious IP throttling settings

        HTTP GET /attack-protection/suspicious-ip-throttling

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'GET', SUSPICIOUS_IP_THROTTLING, kind=ResponseKind.VOID, request_options=request_options
        )

    async def update_breached_password_detection_config(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Update the breached password detection settings

        HTTP PATCH /attack-protection/breached-password-detection

        Args:
            body: ``enabled``, ``shields``, ``admin_notification_frequency``, ``method`` and
                ``stage``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'PATCH', BREACHED_PASSWORD_DETECTION, body=body,
            kind=ResponseKind.VOID, request_options=request_options,
        )

    async def update_brute_force_config(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Update the brute force protection settings

        HTTP PATCH /attack-protection/brute-force-protection

        Args:
            body: ``enabled``, ``shields``, ``allowlist``, ``mode`` and ``max_attempts``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'PATCH', BRUTE_FORCE_PROTECTION, body=body,
            kind=ResponseKind.VOID, request_options=request_options,
        )

    async def update_suspicious_ip_throttling_config(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Update the suspicious IP throttling settings

        HTTP PATCH /attack-protection/suspicious-ip-throttling

        Args:
            body: ``enabled``, ``shields``, ``allowlist`` and ``stage``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'PATCH', SUSPICIOUS_IP_THROTTLING, body=body,
            kind=ResponseKind.VOID, request_options=request_options,
        )
