"""
Entry point of the Harbor REST API client

A HarborClient owns one HarborTransport and exposes every resource group
as an attribute, e.g. `await client.projects.list_projects()`.
"""

from types import TracebackType
from typing import Any, Optional, Type

import httpx
from loguru import logger
from pydantic import ValidationError

from harbor_api.config import ClientConfig, HarborSettings
from harbor_api.exceptions import InvalidConfigurationError
from harbor_api.log import sensitive_log_filter
from harbor_api.resources import (
    LDAP,
    Accessories,
    Additions,
    Artifacts,
    AuditLogs,
    Configuration,
    GarbageCollection,
    Icons,
    ImmutableTagRules,
    JobService,
    Labels,
    P2PPreheat,
    Permissions,
    Projects,
    PurgeAudit,
    Quotas,
    Registries,
    Replication,
    Repositories,
    Retention,
    Robots,
    ScanDataExport,
    Scanners,
    Scans,
    Security,
    System,
    Tags,
    UserGroups,
    Users,
    Webhooks,
)
from harbor_api.transport import HarborTransport
from harbor_api.utils.constants import DEFAULT_BASE_ADDRESS


class HarborClient:
    """
    Async client for the Harbor v2.0 REST API

    Every resource group shares the same transport, so one client holds a
    single connection pool. Use it as an async context manager or call
    `aclose` when done.
    """

    def __init__(
        self,
        config: ClientConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Args:
            config: Base address and Basic auth credentials
            http_client: Optional pre-built httpx client, left open by `aclose`
        """
        self.config = config
        sensitive_log_filter.hide_sensitive_strings(config.credential.get_secret_value())

        self._transport = HarborTransport(config, http_client=http_client)

        self.projects = Projects(self._transport)
        self.repositories = Repositories(self._transport)
        self.artifacts = Artifacts(self._transport)
        self.tags = Tags(self._transport)
        self.accessories = Accessories(self._transport)
        self.additions = Additions(self._transport)
        self.scans = Scans(self._transport)
        self.scanners = Scanners(self._transport)
        self.scan_data_export = ScanDataExport(self._transport)
        self.security = Security(self._transport)
        self.system = System(self._transport)
        self.garbage_collection = GarbageCollection(self._transport)
        self.purge_audit = PurgeAudit(self._transport)
        self.audit_logs = AuditLogs(self._transport)
        self.configuration = Configuration(self._transport)
        self.icons = Icons(self._transport)
        self.immutable_tag_rules = ImmutableTagRules(self._transport)
        self.job_service = JobService(self._transport)
        self.labels = Labels(self._transport)
        self.ldap = LDAP(self._transport)
        self.p2p_preheat = P2PPreheat(self._transport)
        self.permissions = Permissions(self._transport)
        self.quotas = Quotas(self._transport)
        self.registries = Registries(self._transport)
        self.replication = Replication(self._transport)
        self.retention = Retention(self._transport)
        self.robots = Robots(self._transport)
        self.user_groups = UserGroups(self._transport)
        self.users = Users(self._transport)
        self.webhooks = Webhooks(self._transport)

        logger.info(
            f"harbor_api::client::Initialized client for {config.base_address} "
            f"(verify_ssl={config.verify_ssl})"
        )

    @classmethod
    def from_credentials(
        cls,
        username: str,
        password: str,
        base_address: str = DEFAULT_BASE_ADDRESS,
        **kwargs: Any,
    ) -> "HarborClient":
        """
        Build a client from plain credentials

        Extra keyword arguments (`timeout`, `verify_ssl`, `http_client`) are
        passed through.
        """
        http_client = kwargs.pop("http_client", None)
        try:
            config = ClientConfig(
                base_address=base_address,
                principal=username,
                credential=password,
                **kwargs,
            )
        except ValidationError as e:
            raise InvalidConfigurationError(str(e)) from e
        return cls(config, http_client=http_client)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[HarborSettings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "HarborClient":
        """Build a client from HARBOR_* environment variables (or a `.env` file)"""
        try:
            settings = settings or HarborSettings()
            config = settings.client_config()
        except ValidationError as e:
            raise InvalidConfigurationError(str(e)) from e
        return cls(config, http_client=http_client)

    @property
    def transport(self) -> HarborTransport:
        return self._transport

    async def get_health(self) -> Any:
        return await self.system.get_health()

    async def search(self, query: str) -> Any:
        return await self.system.search(query)

    async def get_statistics(self) -> Any:
        return await self.system.get_statistics()

    async def get_system_info(self) -> Any:
        return await self.system.get_system_info()

    async def get_system_volume_info(self) -> Any:
        return await self.system.get_system_volumes()

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> "HarborClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        await self.aclose()
