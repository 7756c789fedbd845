from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    JSONApiResponse,
    ResponseKind,
    VoidApiResponse,
)


class CustomDomainsManager(BaseManager):
    async def delete(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a custom domain

        HTTP DELETE /custom-domains/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/custom-domains/{id}', params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def get_all(self, request_options: Optional[RequestOptions] = None) -> JSONApiResponse:
        """Get custom domains

        HTTP GET /custom-domains

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', '/custom-domains', request_options=request_options)

    async def get(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get a custom domain

        HTTP GET /custom-domains/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', '/custom-domains/{id}', params, required=['id'], request_options=request_options)

    async def update(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update a custom domain

        HTTP PATCH /custom-domains/{id}

        Args:
            params: Path ``id``
            body: ``tls_policy``, ``custom_client_ip_header`` and ``domain_metadata``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', '/custom-domains/{id}', params, required=['id'], body=body, request_options=request_options
        )

    async def create(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create a custom domain

        HTTP POST /custom-domains

        Args:
            body: ``domain`` and ``type`` (required), ``verification_method``, ``tls_policy`` and
                ``custom_client_ip_header``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/custom-domains', body=body, request_options=request_options)

    async def verify(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Run the verification process on a custom domain

        HTTP POST /custom-domains/{id}/verify

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'POST', '/custom-domains/{id}/verify', params, required=['id'], request_options=request_options
        )
