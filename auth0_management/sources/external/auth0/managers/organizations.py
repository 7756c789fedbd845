from typing import Any, Dict, Optional

from auth0_management.sources.client.http.middleware import RequestOptions
from auth0_management.sources.external.auth0.runtime import (
    BaseManager,
    JSONApiResponse,
    QueryParam,
    ResponseKind,
    VoidApiResponse,
)

ORGANIZATION = '/organizations/{id}'
ENABLED_CONNECTIONS = ORGANIZATION + '/enabled_connections'
INVITATIONS = ORGANIZATION + '/invitations'
MEMBERS = ORGANIZATION + '/members'
MEMBER_ROLES = MEMBERS + '/{user_id}/roles'
CLIENT_GRANTS = ORGANIZATION + '/client-grants'
DISCOVERY_DOMAINS = ORGANIZATION + '/discovery-domains'

OFFSET_PAGE = ['page', 'per_page', 'include_totals']


class OrganizationsManager(BaseManager):
    """Organizations and their connections, invitations, members, grants and discovery domains"""

    async def get_all(
        self, params: Optional[Dict[str, Any]] = None, request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get organizations

        HTTP GET /organizations

        Args:
            params: Query ``page``, ``per_page``, ``include_totals``, ``from``, ``take``, ``sort``,
                all optional
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/organizations', params,
            query=OFFSET_PAGE + ['from', 'take', 'sort'], request_options=request_options,
        )

    async def get(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get an organization

        HTTP GET /organizations/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('GET', ORGANIZATION, params, required=['id'], request_options=request_options)

    async def get_by_name(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get an organization by its name

        HTTP GET /organizations/name/{name}

        Args:
            params: Path ``name``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', '/organizations/name/{name}', params, required=['name'], request_options=request_options
        )

    async def create(
        self, body: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create an organization

        HTTP POST /organizations

        Args:
            body: ``name`` (required), ``display_name``, ``branding``, ``metadata`` and
                ``enabled_connections``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request('POST', '/organizations', body=body, request_options=request_options)

    async def update(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update an organization

        HTTP PATCH /organizations/{id}

        Args:
            params: Path ``id``
            body: ``name``, ``display_name``, ``branding`` and ``metadata``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', ORGANIZATION, params, required=['id'], body=body, request_options=request_options
        )

    async def delete(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete an organization

        HTTP DELETE /organizations/{id}

        Args:
            params: Path ``id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', ORGANIZATION, params, required=['id'], kind=ResponseKind.VOID, request_options=request_options
        )

    # Enabled connections

    async def get_enabled_connections(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the connections enabled for an organization

        HTTP GET /organizations/{id}/enabled_connections

        Args:
            params: Path ``id``; query ``page``, ``per_page``, ``include_totals``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', ENABLED_CONNECTIONS, params, required=['id'], query=OFFSET_PAGE, request_options=request_options
        )

    async def get_enabled_connection(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get an enabled connection of an organization

        HTTP GET /organizations/{id}/enabled_connections/{connectionId}

        Args:
            params: Path ``id``, ``connectionId``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', ENABLED_CONNECTIONS + '/{connectionId}', params,
            required=['id', 'connectionId'], request_options=request_options,
        )

    async def add_enabled_connection(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Enable a connection for an organization

        HTTP POST /organizations/{id}/enabled_connections

        Args:
            params: Path ``id``
            body: ``connection_id`` (required), ``assign_membership_on_login``,
                ``is_signup_enabled`` and ``show_as_button``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'POST', ENABLED_CONNECTIONS, params, required=['id'], body=body, request_options=request_options
        )

    async def update_enabled_connection(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update an enabled connection of an organization

        HTTP PATCH /organizations/{id}/enabled_connections/{connectionId}

        Args:
            params: Path ``id``, ``connectionId``
            body: ``assign_membership_on_login``, ``is_signup_enabled`` and ``show_as_button``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', ENABLED_CONNECTIONS + '/{connectionId}', params,
            required=['id', 'connectionId'], body=body, request_options=request_options,
        )

    async def delete_enabled_connection(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Disable a connection for an organization

        HTTP DELETE /organizations/{id}/enabled_connections/{connectionId}

        Args:
            params: Path ``id``, ``connectionId``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', ENABLED_CONNECTIONS + '/{connectionId}', params,
            required=['id', 'connectionId'], kind=ResponseKind.VOID, request_options=request_options,
        )

    # Invitations

    async def get_invitations(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the invitations of an organization

        HTTP GET /organizations/{id}/invitations

        Args:
            params: Path ``id``; query ``page``, ``per_page``, ``include_totals``, ``fields``,
                ``include_fields``, ``sort``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', INVITATIONS, params,
            required=['id'], query=OFFSET_PAGE + ['fields', 'include_fields', 'sort'],
            request_options=request_options,
        )

    async def get_invitation(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get an invitation

        HTTP GET /organizations/{id}/invitations/{invitation_id}

        Args:
            params: Path ``id``, ``invitation_id``; query ``fields``, ``include_fields``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', INVITATIONS + '/{invitation_id}', params,
            required=['id', 'invitation_id'], query=['fields', 'include_fields'],
            request_options=request_options,
        )

    async def create_invitation(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create an invitation

        HTTP POST /organizations/{id}/invitations

        Args:
            params: Path ``id``
            body: ``inviter``, ``invitee`` and ``client_id`` (required), ``connection_id``,
                ``app_metadata``, ``user_metadata``, ``ttl_sec``, ``roles`` and
                ``send_invitation_email``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'POST', INVITATIONS, params, required=['id'], body=body, request_options=request_options
        )

    async def delete_invitation(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete an invitation

        HTTP DELETE /organizations/{id}/invitations/{invitation_id}

        Args:
            params: Path ``id``, ``invitation_id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', INVITATIONS + '/{invitation_id}', params,
            required=['id', 'invitation_id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    # Members

    async def get_members(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the members of an organization

        HTTP GET /organizations/{id}/members

        Args:
            params: Path ``id``; query ``page``, ``per_page``, ``include_totals``, ``from``,
                ``take``, ``fields``, ``include_fields``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', MEMBERS, params,
            required=['id'], query=OFFSET_PAGE + ['from', 'take', 'fields', 'include_fields'],
            request_options=request_options,
        )

    async def add_members(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Add members to an organization

        HTTP POST /organizations/{id}/members

        Args:
            params: Path ``id``
            body: ``members`` (required): list of user ids
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'POST', MEMBERS, params,
            required=['id'], body=body, kind=ResponseKind.VOID, request_options=request_options,
        )

    async def delete_members(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Remove members from an organization

        HTTP DELETE /organizations/{id}/members

        Args:
            params: Path ``id``
            body: ``members`` (required): list of user ids
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', MEMBERS, params,
            required=['id'], body=body, kind=ResponseKind.VOID, request_options=request_options,
        )

    async def get_member_roles(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the roles of an organization member

        HTTP GET /organizations/{id}/members/{user_id}/roles

        Args:
            params: Path ``id``, ``user_id``; query ``page``, ``per_page``, ``include_totals``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', MEMBER_ROLES, params,
            required=['id', 'user_id'], query=OFFSET_PAGE, request_options=request_options,
        )

    async def add_member_roles(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Assign roles to an organization member

        HTTP POST /organizations/{id}/members/{user_id}/roles

        Args:
            params: Path ``id``, ``user_id``
            body: ``roles`` (required): list of role ids
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'POST', MEMBER_ROLES, params,
            required=['id', 'user_id'], body=body, kind=ResponseKind.VOID, request_options=request_options,
        )

    async def delete_member_roles(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Remove roles from an organization member

        HTTP DELETE /organizations/{id}/members/{user_id}/roles

        Args:
            params: Path ``id``, ``user_id``
            body: ``roles`` (required): list of role ids
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', MEMBER_ROLES, params,
            required=['id', 'user_id'], body=body, kind=ResponseKind.VOID, request_options=request_options,
        )

    # Client grants

    async def get_organization_client_grants(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the client grants associated to an organization

        HTTP GET /organizations/{id}/client-grants

        Args:
            params: Path ``id``; query ``audience``, ``client_id``, ``grant_ids``, ``page``,
                ``per_page``, ``include_totals``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', CLIENT_GRANTS, params,
            required=['id'],
            query=['audience', 'client_id', QueryParam('grant_ids', is_array=True, multi=True)] + OFFSET_PAGE,
            request_options=request_options,
        )

    async def post_organization_client_grants(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Associate a client grant with an organization

        HTTP POST /organizations/{id}/client-grants

        Args:
            params: Path ``id``
            body: ``grant_id`` (required)
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'POST', CLIENT_GRANTS, params, required=['id'], body=body, request_options=request_options
        )

    async def delete_client_grants_by_grant_id(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Remove a client grant from an organization

        HTTP DELETE /organizations/{id}/client-grants/{grant_id}

        Args:
            params: Path ``id``, ``grant_id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', CLIENT_GRANTS + '/{grant_id}', params,
            required=['id', 'grant_id'], kind=ResponseKind.VOID, request_options=request_options,
        )

    # Discovery domains

    async def get_all_discovery_domains(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get the discovery domains of an organization

        HTTP GET /organizations/{id}/discovery-domains

        Args:
            params: Path ``id``; query ``from``, ``take``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', DISCOVERY_DOMAINS, params, required=['id'], query=['from', 'take'], request_options=request_options
        )

    async def get_discovery_domain(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Get a discovery domain

        HTTP GET /organizations/{id}/discovery-domains/{discovery_domain_id}

        Args:
            params: Path ``id``, ``discovery_domain_id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'GET', DISCOVERY_DOMAINS + '/{discovery_domain_id}', params,
            required=['id', 'discovery_domain_id'], request_options=request_options,
        )

    async def create_discovery_domain(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Create a discovery domain

        HTTP POST /organizations/{id}/discovery-domains

        Args:
            params: Path ``id``
            body: ``domain`` (required) and ``status``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'POST', DISCOVERY_DOMAINS, params, required=['id'], body=body, request_options=request_options
        )

    async def update_discovery_domain(
        self,
        params: Dict[str, Any],
        body: Dict[str, Any],
        request_options: Optional[RequestOptions] = None
    ) -> JSONApiResponse:
        """Update a discovery domain

        HTTP PATCH /organizations/{id}/discovery-domains/{discovery_domain_id}

        Args:
            params: Path ``id``, ``discovery_domain_id``
            body: ``status``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            JSONApiResponse wrapping the decoded JSON body
        """
        return await self._request(
            'PATCH', DISCOVERY_DOMAINS + '/{discovery_domain_id}', params,
            required=['id', 'discovery_domain_id'], body=body, request_options=request_options,
        )

    async def delete_discovery_domain(
        self, params: Dict[str, Any], request_options: Optional[RequestOptions] = None
    ) -> VoidApiResponse:
        """Delete a discovery domain

        HTTP DELETE /organizations/{id}/discovery-domains/{discovery_domain_id}

        Args:
            params: Path ``id``, ``discovery_domain_id``
            request_options: Per-call headers, timeout and middleware overrides

        Returns:
            VoidApiResponse, the endpoint sends no body
        """
        return await self._request(
            'DELETE', DISCOVERY_DOMAINS + '/{discovery_domain_id}', params,
            required=['id', 'discovery_domain_id'], kind=ResponseKind.VOID, request_options=request_options,
        )
