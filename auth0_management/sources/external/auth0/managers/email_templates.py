from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import BaseManager, JSONApiResponse


class EmailTemplatesManager(BaseManager):
    """Email templates, addressed by an EmailTemplateName value"""

    async def get(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get an email template

        HTTP GET /email-templates/{templateName}

        Args:
            params: Path ``templateName``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/email-templates/{templateName}', params,
            required=['templateName'], request_options=request_options,
        )

    async def update(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Patch an email template

        HTTP PATCH /email-templates/{templateName}

        Args:
            params: Path ``templateName``
            body: Template fields to change: ``body``, ``from``, ``resultUrl``, ``subject``,
                ``syntax``, ``urlLifetimeInSeconds`` and ``enabled``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', '/email-templates/{templateName}', params,
            required=['templateName'], body=body, request_options=request_options,
        )

    async def put(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Replace an email template

        HTTP PUT /email-templates/{templateName}

        Args:
            params: Path ``templateName``
            body: ``template`` (required) and the other template fields
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PUT', '/email-templates/{templateName}', params,
            required=['templateName'], body=body, request_options=request_options,
        )

    async def create(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create an email template

        HTTP POST /email-templates

        Args:
            body: ``template``, ``body``, ``from``, ``subject``, ``syntax`` and ``enabled``
                (required), ``resultUrl`` and ``urlLifetimeInSeconds``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/email-templates', body=body, request_options=request_options)
