from typing import Any, Optional

from harbor_api.core.options import PageOptions
from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import STOP_ACTION, HttpMethod
from harbor_api.utils.helpers import encode_segment


class GarbageCollection(BaseResource):
    """
    Garbage collection history, logs and schedule
    """

    async def get_gc_history(self, options: Optional[PageOptions] = None) -> Any:
        return await self._request("/system/gc", params=self._params(options, PageOptions))

    async def get_gc(self, gc_id: int) -> Any:
        return await self._request(f"/system/gc/{encode_segment(gc_id)}")

    async def stop_gc(self, gc_id: int) -> Any:
        return await self._request(
            f"/system/gc/{encode_segment(gc_id)}", HttpMethod.PUT, body=STOP_ACTION
        )

    async def get_gc_log(self, gc_id: int) -> Optional[str]:
        return await self._request(
            f"/system/gc/{encode_segment(gc_id)}/log",
            headers={"Accept": "text/plain"},
            as_text=True,
        )

    async def get_gc_schedule(self) -> Any:
        return await self._request("/system/gc/schedule")

    async def create_gc_schedule(self, schedule: dict[str, Any]) -> Any:
        return await self._request("/system/gc/schedule", HttpMethod.POST, body=schedule)

    async def update_gc_schedule(self, schedule: dict[str, Any]) -> Any:
        return await self._request("/system/gc/schedule", HttpMethod.PUT, body=schedule)

    async def start_gc(self, dry_run: bool = False, delete_untagged: bool = False) -> Any:
        """
        Trigger a garbage collection run now

        Harbor has no dedicated start endpoint, a run is a `Manual` schedule.
        """
        return await self._request(
            "/system/gc/schedule",
            HttpMethod.POST,
            body={
                "schedule": {"type": "Manual"},
                "parameters": {"dry_run": dry_run, "delete_untagged": delete_untagged},
            },
        )
