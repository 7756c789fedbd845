from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import BaseManager, JSONApiResponse


class LogsManager(BaseManager):
    async def get_all(
        self, params: Optional[Dict[str, Any]] = None, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Search log events

        Offset (``page``/``per_page``) and checkpoint (``from``/``take``)
        parameters are both forwarded; the server decides which applies.

        HTTP GET /logs

        Args:
            params: Query ``page``, ``per_page``, ``sort``, ``fields``, ``include_fields``,
                ``include_totals``, ``from``, ``take``, ``q``, all optional
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/logs', params,
            query=[
                'page', 'per_page', 'sort', 'fields', 'include_fields',
                'include_totals', 'from', 'take', 'q',
            ],
            request_options=request_options,
        )

    async def get(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get a log event

        HTTP GET /logs/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', '/logs/{id}', params, required=['id'], request_options=request_options)
