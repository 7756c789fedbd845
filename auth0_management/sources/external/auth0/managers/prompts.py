from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    JSONApiResponse,
    ResponseKind,
    VoidApiResponse,
)

CUSTOM_TEXT = '/prompts/{prompt}/custom-text/{language}'


class PromptsManager(BaseManager):
    """Universal login prompt settings and custom text

    ``prompt`` takes a PromptName value and ``language`` a PromptLanguage value.
    """

    async def get(self, request_options: Optional[RequestOptions] = None) -> JSONApiResponse:
        """Get the prompts settings

        HTTP GET /prompts

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', '/prompts', request_options=request_options)

    async def update(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update the prompts settings

        HTTP PATCH /prompts

        Args:
            body: ``universal_login_experience``, ``identifier_first`` and
                ``webauthn_platform_first_factor``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('PATCH', '/prompts', body=body, request_options=request_options)

    async def get_custom_text_by_language(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the custom text of a prompt

        HTTP GET /prompts/{prompt}/custom-text/{language}

        Args:
            params: Path ``prompt``, ``language``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', CUSTOM_TEXT, params, required=['prompt', 'language'], request_options=request_options
        )

    async def update_custom_text_by_language(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Set the custom text of a prompt

        HTTP PUT /prompts/{prompt}/custom-text/{language}

        Args:
            params: Path ``prompt``, ``language``
            body: Mapping of screen name to text overrides; replaces the whole set
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'PUT', CUSTOM_TEXT, params,
            required=['prompt', 'language'], body=body, kind=ResponseKind.VOID, request_options=request_options,
        )
