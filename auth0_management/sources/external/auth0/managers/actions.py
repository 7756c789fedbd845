from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    JSONApiResponse,
    ResponseKind,
    VoidApiResponse,
)


class ActionsManager(BaseManager):
    async def delete(
        self,
        params: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete an action and all of its versions

        The action must be unbound from all triggers first unless ``force`` is true.

        HTTP DELETE /actions/actions/{id}

        Args:
            params: Path ``id``; query ``force``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', '/actions/actions/{id}', params,
            required=['id'], query=['force'],
            kind=ResponseKind.VOID, request_options=request_options,
        )

    async def get(
        self,
        params: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get an action

        HTTP GET /actions/actions/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/actions/actions/{id}', params,
            required=['id'], request_options=request_options,
        )

    async def get_version(
        self,
        params: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get a specific version of an action

        HTTP GET /actions/actions/{actionId}/versions/{id}

        Args:
            params: Path ``actionId``, ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/actions/actions/{actionId}/versions/{id}', params,
            required=['actionId', 'id'], request_options=request_options,
        )

    async def get_versions(
        self,
        params: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the versions of an action

        HTTP GET /actions/actions/{actionId}/versions

        Args:
            params: Path ``actionId``; query ``page``, ``per_page``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/actions/actions/{actionId}/versions', params,
            required=['actionId'], query=['page', 'per_page'],
            request_options=request_options,
        )

    async def get_all(
        self,
        params: Optional[Dict[str, Any]] = None,
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get actions

        HTTP GET /actions/actions

        Args:
            params: Query ``triggerId``, ``actionName``, ``deployed``, ``page``, ``per_page``,
                ``installed``, all optional
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/actions/actions', params,
            query=['triggerId', 'actionName', 'deployed', 'page', 'per_page', 'installed'],
            request_options=request_options,
        )

    async def get_trigger_bindings(
        self,
        params: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the actions bound to a trigger

        HTTP GET /actions/triggers/{triggerId}/bindings

        Args:
            params: Path ``triggerId``; query ``page``, ``per_page``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/actions/triggers/{triggerId}/bindings', params,
            required=['triggerId'], query=['page', 'per_page'],
            request_options=request_options,
        )

    async def get_execution(
        self,
        params: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get an action execution

        HTTP GET /actions/executions/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/actions/executions/{id}', params,
            required=['id'], request_options=request_options,
        )

    async def get_all_triggers(
        self,
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the available triggers

        HTTP GET /actions/triggers

        Args:
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', '/actions/triggers', request_options=request_options)

    async def update(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update an action

        HTTP PATCH /actions/actions/{id}

        Args:
            params: Path ``id``
            body: Action fields to change: ``name``, ``supported_triggers``, ``code``,
                ``dependencies``, ``runtime`` and ``secrets``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', '/actions/actions/{id}', params,
            required=['id'], body=body, request_options=request_options,
        )

    async def update_trigger_bindings(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update the actions bound to a trigger

        HTTP PATCH /actions/triggers/{triggerId}/bindings

        Args:
            params: Path ``triggerId``
            body: ``bindings``: ordered list of ``{"ref": {"type": ..., "value": ...},
                "display_name": ...}`` items
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', '/actions/triggers/{triggerId}/bindings', params,
            required=['triggerId'], body=body, request_options=request_options,
        )

    async def create(
        self,
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create an action

        HTTP POST /actions/actions

        Args:
            body: ``name`` and ``supported_triggers`` (required), ``code``, ``dependencies``,
                ``runtime``, ``secrets`` and ``deploy``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/actions/actions', body=body, request_options=request_options)

    async def deploy(
        self,
        params: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Deploy the latest version of an action

        HTTP POST /actions/actions/{id}/deploy

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'POST', '/actions/actions/{id}/deploy', params,
            required=['id'], request_options=request_options,
        )

    async def deploy_version(
        self,
        params: Dict[str, Any],
        body: Optional[Dict[str, Any]] = None,
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Roll back to a previous action version

        HTTP POST /actions/actions/{actionId}/versions/{id}/deploy

        Args:
            params: Path ``actionId``, ``id``
            body: Optional ``update_draft`` flag that also resets the draft to this version
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'POST', '/actions/actions/{actionId}/versions/{id}/deploy', params,
            required=['id', 'actionId'], body=body, request_options=request_options,
        )

    async def test(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Test an action with a sample payload

        HTTP POST /actions/actions/{id}/test

        Args:
            params: Path ``id``
            body: ``payload``: the event object the action is run against
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'POST', '/actions/actions/{id}/test', params,
            required=['id'], body=body, request_options=request_options,
        )
