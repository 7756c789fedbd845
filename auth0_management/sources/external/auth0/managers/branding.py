from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    JSONApiResponse,
    ResponseKind,
    VoidApiResponse,
)

UNIVERSAL_LOGIN_TEMPLATE = '/branding/templates/universal-login'


class BrandingManager(BaseManager):
    """Branding settings, themes, universal login template and phone notifications"""

    async def get_settings(self, request_options: Optional[RequestOptions] = None) -> JSONApiResponse:
        """Get the branding settings

        HTTP GET /branding

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', '/branding', request_options=request_options)

    async def update_settings(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update the branding settings

        HTTP PATCH /branding

        Args:
            body: ``colors``, ``favicon_url``, ``logo_url`` and ``font``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('PATCH', '/branding', body=body, request_options=request_options)

    async def get_universal_login_template(
        self, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the Universal Login page template

        HTTP GET /branding/templates/universal-login

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', UNIVERSAL_LOGIN_TEMPLATE, request_options=request_options)

    async def set_universal_login_template(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Set the Universal Login page template

        HTTP PUT /branding/templates/universal-login

        Args:
            body: ``template``: the page HTML, which must contain the ``{%- auth0:head -%}`` and
                ``{%- auth0:widget -%}`` tags
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'PUT', UNIVERSAL_LOGIN_TEMPLATE, body=body,
            kind=ResponseKind.VOID, request_options=request_options,
        )

    async def delete_universal_login_template(
        self, request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete the Universal Login page template

        HTTP DELETE /branding/templates/universal-login

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', UNIVERSAL_LOGIN_TEMPLATE, kind=ResponseKind.VOID, request_options=request_options
        )

    # Themes

    async def create_theme(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create a branding theme

        HTTP POST /branding/themes

        Args:
            body: ``borders``, ``colors``, ``fonts``, ``page_background`` and ``widget`` (required),
                ``displayName``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/branding/themes', body=body, request_options=request_options)

    async def get_default_theme(self, request_options: Optional[RequestOptions] = None) -> JSONApiResponse:
        """Get the default branding theme

        HTTP GET /branding/themes/default

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', '/branding/themes/default', request_options=request_options)

    async def get_theme(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get a branding theme

        HTTP GET /branding/themes/{themeId}

        Args:
            params: Path ``themeId``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/branding/themes/{themeId}', params,
            required=['themeId'], request_options=request_options,
        )

    async def update_theme(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update a branding theme

        HTTP PATCH /branding/themes/{themeId}

        Args:
            params: Path ``themeId``
            body: ``borders``, ``colors``, ``fonts``, ``page_background``, ``widget`` and
                ``displayName``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', '/branding/themes/{themeId}', params,
            required=['themeId'], body=body, request_options=request_options,
        )

    async def delete_theme(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a branding theme

        HTTP DELETE /branding/themes/{themeId}

        Args:
            params: Path ``themeId``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/branding/themes/{themeId}', params,
            required=['themeId'], kind=ResponseKind.VOID, request_options=request_options,
        )

    # Phone providers

    async def get_all_phone_providers(
        self, params: Optional[Dict[str, Any]] = None, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the phone notification providers

        HTTP GET /branding/phone/providers

        Args:
            params: Query ``disabled``, all optional
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/branding/phone/providers', params, query=['disabled'], request_options=request_options
        )

    async def configure_phone_provider(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Configure a phone notification provider

        HTTP POST /branding/phone/providers

        Args:
            body: ``name`` (required), ``configuration``, ``credentials`` and ``disabled``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/branding/phone/providers', body=body, request_options=request_options)

    async def get_phone_provider(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get a phone notification provider

        HTTP GET /branding/phone/providers/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/branding/phone/providers/{id}', params, required=['id'], request_options=request_options
        )

    async def update_phone_provider(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update a phone notification provider

        HTTP PATCH /branding/phone/providers/{id}

        Args:
            params: Path ``id``
            body: ``name``, ``configuration``, ``credentials`` and ``disabled``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', '/branding/phone/providers/{id}', params,
            required=['id'], body=body, request_options=request_options,
        )

    async def delete_phone_provider(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a phone notification provider

        HTTP DELETE /branding/phone/providers/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/branding/phone/providers/{id}', params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    # Phone templates

    async def get_all_phone_templates(
        self, params: Optional[Dict[str, Any]] = None, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the phone notification templates

        HTTP GET /branding/phone/templates

        Args:
            params: Query ``disabled``, all optional
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/branding/phone/templates', params, query=['disabled'], request_options=request_options
        )

    async def create_phone_template(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create a phone notification template

        HTTP POST /branding/phone/templates

        Args:
            body: ``type``, ``content`` and ``disabled``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/branding/phone/templates', body=body, request_options=request_options)

    async def get_phone_template(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get a phone notification template

        HTTP GET /branding/phone/templates/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/branding/phone/templates/{id}', params, required=['id'], request_options=request_options
        )

    async def update_phone_template(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update a phone notification template

        HTTP PATCH /branding/phone/templates/{id}

        Args:
            params: Path ``id``
            body: ``content`` and ``disabled``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', '/branding/phone/templates/{id}', params,
            required=['id'], body=body, request_options=request_options,
        )

    async def delete_phone_template(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a phone notification template

        HTTP DELETE /branding/phone/templates/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/branding/phone/templates/{id}', params,
            required=['id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    async def reset_template(
        self,
        params: Dict[str, Any],
        body: Any = None,
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Reset a phone notification template to its default content

        HTTP PATCH /branding/phone/templates/{id}/reset

        Args:
            params: Path ``id``
            body: Sent as is, usually an empty object
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', '/branding/phone/templates/{id}/reset', params,
            required=['id'], body=body if body is not None else {}, request_options=request_options,
        )
