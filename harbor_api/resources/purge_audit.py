from typing import Any, Optional

from harbor_api.core.options import ListOptions
from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import STOP_ACTION, HttpMethod
from harbor_api.utils.helpers import encode_segment


class PurgeAudit(BaseResource):
    """Audit log purge jobs (`/system/purgeaudit`)."""

    async def get_purge_history(self, options: Optional[ListOptions] = None) -> Any:
        return await self._request(
            "/system/purgeaudit", params=self._params(options, ListOptions)
        )

    async def get_purge_job(self, purge_id: int) -> Any:
        return await self._request(f"/system/purgeaudit/{encode_segment(purge_id)}")

    async def stop_purge(self, purge_id: int) -> Any:
        return await self._request(
            f"/system/purgeaudit/{encode_segment(purge_id)}",
            HttpMethod.PUT,
            body=STOP_ACTION,
        )

    async def get_purge_job_log(self, purge_id: int) -> Optional[str]:
        return await self._request(
            f"/system/purgeaudit/{encode_segment(purge_id)}/log",
            headers={"Accept": "text/plain"},
            as_text=True,
        )

    async def get_purge_schedule(self) -> Any:
        return await self._request("/system/purgeaudit/schedule")

    async def create_purge_schedule(self, schedule: dict[str, Any]) -> Any:
        return await self._request(
            "/system/purgeaudit/schedule", HttpMethod.POST, body=schedule
        )

    async def update_purge_schedule(self, schedule: dict[str, Any]) -> Any:
        return await self._request(
            "/system/purgeaudit/schedule", HttpMethod.PUT, body=schedule
        )
