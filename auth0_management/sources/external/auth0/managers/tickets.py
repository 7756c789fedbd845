from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import BaseManager, JSONApiResponse


class TicketsManager(BaseManager):
    async def verify_email(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create an email verification ticket

        HTTP POST /tickets/email-verification

        Args:
            body: ``user_id`` (required), ``result_url``, ``client_id``, ``organization_id``,
                ``ttl_sec`` and ``identity``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/tickets/email-verification', body=body, request_options=request_options)

    async def change_password(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create a password change ticket

        HTTP POST /tickets/password-change

        Args:
            body: ``user_id`` or ``email`` with ``connection_id``, ``result_url``, ``client_id``,
                ``organization_id``, ``ttl_sec`` and ``mark_email_as_verified``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/tickets/password-change', body=body, request_options=request_options)
