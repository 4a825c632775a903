from typing import Any

from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import HttpMethod


class Security(BaseResource):
    async def get_system_cve_allowlist(self) -> Any:
        return await self._request("/system/CVEAllowlist")

    async def update_system_cve_allowlist(self, allowlist: dict[str, Any]) -> Any:
        return await self._request("/system/CVEAllowlist", HttpMethod.PUT, body=allowlist)

    async def get_scan_all_schedule(self) -> Any:
        return await self._request("/system/scanAll/schedule")

    async def update_scan_all_schedule(self, schedule: dict[str, Any]) -> Any:
        return await self._request("/system/scanAll/schedule", HttpMethod.PUT, body=schedule)

    async def create_scan_all_schedule(self, schedule: dict[str, Any]) -> Any:
        return await self._request("/system/scanAll/schedule", HttpMethod.POST, body=schedule)
