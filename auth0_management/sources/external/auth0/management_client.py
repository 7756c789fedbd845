"""
Management API client
=====================

Exposes every resource manager of the Management API v2 as an attribute on a
single object sharing one HTTP client.

Usage:
    ```python
    from auth0_management import ManagementClient

    async with ManagementClient.from_options(
        domain="tenant.auth0.com",
        client_id="...",
        client_secret="...",
    ) as management:
        response = await management.users.get({"id": "auth0|123"})
        print(response.value())
    ```
"""

from typing import Any, Optional

from auth0_management.config.settings import ManagementSettings
from auth0_management.sources.client.auth0.auth0 import (
    Auth0Client,
    ManagementClientOptions,
)
from auth0_management.sources.external.auth0.managers.actions import ActionsManager
from auth0_management.sources.external.auth0.managers.anomaly import AnomalyManager
from auth0_management.sources.external.auth0.managers.attack_protection import AttackProtectionManager
from auth0_management.sources.external.auth0.managers.blacklists import BlacklistsManager
from auth0_management.sources.external.auth0.managers.branding import BrandingManager
from auth0_management.sources.external.auth0.managers.client_grants import ClientGrantsManager
from auth0_management.sources.external.auth0.managers.clients import ClientsManager
from auth0_management.sources.external.auth0.managers.connection_profiles import ConnectionProfilesManager
from auth0_management.sources.external.auth0.managers.connections import ConnectionsManager
from auth0_management.sources.external.auth0.managers.custom_domains import CustomDomainsManager
from auth0_management.sources.external.auth0.managers.device_credentials import DeviceCredentialsManager
from auth0_management.sources.external.auth0.managers.email_templates import EmailTemplatesManager
from auth0_management.sources.external.auth0.managers.emails import EmailsManager
from auth0_management.sources.external.auth0.managers.flows import FlowsManager
from auth0_management.sources.external.auth0.managers.forms import FormsManager
from auth0_management.sources.external.auth0.managers.grants import GrantsManager
from auth0_management.sources.external.auth0.managers.guardian import GuardianManager
from auth0_management.sources.external.auth0.managers.hooks import HooksManager
from auth0_management.sources.external.auth0.managers.jobs import JobsManager
from auth0_management.sources.external.auth0.managers.keys import KeysManager
from auth0_management.sources.external.auth0.managers.log_streams import LogStreamsManager
from auth0_management.sources.external.auth0.managers.logs import LogsManager
from auth0_management.sources.external.auth0.managers.network_acls import NetworkAclsManager
from auth0_management.sources.external.auth0.managers.organizations import OrganizationsManager
from auth0_management.sources.external.auth0.managers.prompts import PromptsManager
from auth0_management.sources.external.auth0.managers.refresh_tokens import RefreshTokensManager
from auth0_management.sources.external.auth0.managers.resource_servers import ResourceServersManager
from auth0_management.sources.external.auth0.managers.risk_assessments import RiskAssessmentsManager
from auth0_management.sources.external.auth0.managers.roles import RolesManager
from auth0_management.sources.external.auth0.managers.rules import RulesManager
from auth0_management.sources.external.auth0.managers.rules_configs import RulesConfigsManager
from auth0_management.sources.external.auth0.managers.self_service_profiles import SelfServiceProfilesManager
from auth0_management.sources.external.auth0.managers.sessions import SessionsManager
from auth0_management.sources.external.auth0.managers.stats import StatsManager
from auth0_management.sources.external.auth0.managers.tenants import TenantsManager
from auth0_management.sources.external.auth0.managers.tickets import TicketsManager
from auth0_management.sources.external.auth0.managers.token_exchange_profiles import TokenExchangeProfilesManager
from auth0_management.sources.external.auth0.managers.user_attribute_profiles import UserAttributeProfilesManager
from auth0_management.sources.external.auth0.managers.user_blocks import UserBlocksManager
from auth0_management.sources.external.auth0.managers.users import UsersManager
from auth0_management.sources.external.auth0.managers.users_by_email import UsersByEmailManager


class ManagementClient:
    """Entry point to the Management API

    Args:
        client: Built Auth0Client whose HTTP client every manager shares
    """

    def __init__(self, client: Auth0Client) -> None:
        self._client = client

        self.actions = ActionsManager(client)
        self.anomaly = AnomalyManager(client)
        self.attack_protection = AttackProtectionManager(client)
        self.blacklists = BlacklistsManager(client)
        self.branding = BrandingManager(client)
        self.client_grants = ClientGrantsManager(client)
        self.clients = ClientsManager(client)
        self.connection_profiles = ConnectionProfilesManager(client)
        self.connections = ConnectionsManager(client)
        self.custom_domains = CustomDomainsManager(client)
        self.device_credentials = DeviceCredentialsManager(client)
        self.email_templates = EmailTemplatesManager(client)
        self.emails = EmailsManager(client)
        self.flows = FlowsManager(client)
        self.forms = FormsManager(client)
        self.grants = GrantsManager(client)
        self.guardian = GuardianManager(client)
        self.hooks = HooksManager(client)
        self.jobs = JobsManager(client)
        self.keys = KeysManager(client)
        self.log_streams = LogStreamsManager(client)
        self.logs = LogsManager(client)
        self.network_acls = NetworkAclsManager(client)
        self.organizations = OrganizationsManager(client)
        self.prompts = PromptsManager(client)
        self.refresh_tokens = RefreshTokensManager(client)
        self.resource_servers = ResourceServersManager(client)
        self.risk_assessments = RiskAssessmentsManager(client)
        self.roles = RolesManager(client)
        self.rules = RulesManager(client)
        self.rules_configs = RulesConfigsManager(client)
        self.self_service_profiles = SelfServiceProfilesManager(client)
        self.sessions = SessionsManager(client)
        self.stats = StatsManager(client)
        self.tenants = TenantsManager(client)
        self.tickets = TicketsManager(client)
        self.token_exchange_profiles = TokenExchangeProfilesManager(client)
        self.user_attribute_profiles = UserAttributeProfilesManager(client)
        self.user_blocks = UserBlocksManager(client)
        self.users = UsersManager(client)
        self.users_by_email = UsersByEmailManager(client)

    @classmethod
    def from_options(
        cls, options: Optional[ManagementClientOptions] = None, **kwargs: Any
    ) -> "ManagementClient":
        """Build from a ManagementClientOptions instance or its keyword arguments"""
        if options is None:
            options = ManagementClientOptions(**kwargs)
        return cls(Auth0Client.build_with_config(options))

    @classmethod
    def from_settings(
        cls, settings: Optional[ManagementSettings] = None, **overrides: Any
    ) -> "ManagementClient":
        """Build from AUTH0_* environment settings"""
        return cls(Auth0Client.build_from_settings(settings, **overrides))

    def get_client(self) -> Auth0Client:
        return self._client

    async def close(self) -> None:
        await self._client.get_client().close()

    async def __aenter__(self) -> "ManagementClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
