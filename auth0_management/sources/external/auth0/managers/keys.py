from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    JSONApiResponse,
    ResponseKind,
    VoidApiResponse,
)


class KeysManager(BaseManager):
    """Signing keys and customer provided encryption keys"""

    async def get_all(self, request_options: Optional[RequestOptions] = None) -> JSONApiResponse:
        """Get the application signing keys

        HTTP GET /keys/signing

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', '/keys/signing', request_options=request_options)

    async def get(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get an application signing key

        HTTP GET /keys/signing/{kid}

        Args:
            params: Path ``kid``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', '/keys/signing/{kid}', params, required=['kid'], request_options=request_options)

    async def rotate(self, request_options: Optional[RequestOptions] = None) -> JSONApiResponse:
        """Rotate the application signing key

        HTTP POST /keys/signing/rotate

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/keys/signing/rotate', request_options=request_options)

    async def revoke(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Revoke an application signing key

        HTTP PUT /keys/signing/{kid}/revoke

        Args:
            params: Path ``kid``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PUT', '/keys/signing/{kid}/revoke', params, required=['kid'], request_options=request_options
        )

    async def get_all_encryption_keys(
        self, params: Optional[Dict[str, Any]] = None, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the encryption keys

        HTTP GET /keys/encryption

        Args:
            params: Query ``page``, ``per_page``, ``include_totals``, all optional
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/keys/encryption', params,
            query=['page', 'per_page', 'include_totals'], request_options=request_options,
        )

    async def create_encryption_key(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create an encryption key

        HTTP POST /keys/encryption

        Args:
            body: ``type`` (required): ``customer-provided-root-key`` or ``tenant-encryption-key``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/keys/encryption', body=body, request_options=request_options)

    async def get_encryption_key(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get an encryption key

        HTTP GET /keys/encryption/{kid}

        Args:
            params: Path ``kid``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/keys/encryption/{kid}', params, required=['kid'], request_options=request_options
        )

    async def import_encryption_key(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Import wrapped key material into an encryption key

        HTTP POST /keys/encryption/{kid}

        Args:
            params: Path ``kid``
            body: ``wrapped_key`` (required): base64 key material wrapped with the public wrapping
                key
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'POST', '/keys/encryption/{kid}', params, required=['kid'], body=body, request_options=request_options
        )

    async def delete_encryption_key(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete an encryption key

        HTTP DELETE /keys/encryption/{kid}

        Args:
            params: Path ``kid``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/keys/encryption/{kid}', params,
            required=['kid'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def post_encryption_rekey(self, request_options: Optional[RequestOptions] = None) -> VoidApiResponse:
        """Rekey the key hierarchy

        HTTP POST /keys/encryption/rekey

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'POST', '/keys/encryption/rekey', kind=ResponseKind.VOID, request_options=request_options
        )

    async def create_public_wrapping_key(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create the public wrapping key used to import key material

        HTTP POST /keys/encryption/{kid}/wrapping-key

        Args:
            params: Path ``kid``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'POST', '/keys/encryption/{kid}/wrapping-key', params, required=['kid'], request_options=request_options
        )
