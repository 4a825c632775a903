from typing import Any, Optional

from harbor_api.core.options import PageOptions
from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import STOP_ACTION, HttpMethod
from harbor_api.utils.helpers import encode_segment


class P2PPreheat(BaseResource):
    """P2P preheat provider instances and preheat tasks."""

    async def list_instances(self, options: Optional[PageOptions] = None) -> Any:
        return await self._request(
            "/p2p/preheat/instances", params=self._params(options, PageOptions)
        )

    async def create_instance(self, instance: dict[str, Any]) -> Any:
        return await self._request("/p2p/preheat/instances", HttpMethod.POST, body=instance)

    async def get_instance(self, instance_name: str) -> Any:
        return await self._request(f"/p2p/preheat/instances/{encode_segment(instance_name)}")

    async def update_instance(self, instance_name: str, instance: dict[str, Any]) -> Any:
        return await self._request(
            f"/p2p/preheat/instances/{encode_segment(instance_name)}",
            HttpMethod.PUT,
            body=instance,
        )

    async def delete_instance(self, instance_name: str) -> Any:
        return await self._request(
            f"/p2p/preheat/instances/{encode_segment(instance_name)}", HttpMethod.DELETE
        )

    async def list_tasks(self, options: Optional[PageOptions] = None) -> Any:
        return await self._request(
            "/p2p/preheat/tasks", params=self._params(options, PageOptions)
        )

    async def create_task(self, task: dict[str, Any]) -> Any:
        return await self._request("/p2p/preheat/tasks", HttpMethod.POST, body=task)

    async def get_task(self, task_id: int) -> Any:
        return await self._request(f"/p2p/preheat/tasks/{encode_segment(task_id)}")

    async def stop_task(self, task_id: int) -> Any:
        return await self._request(
            f"/p2p/preheat/tasks/{encode_segment(task_id)}",
            HttpMethod.PUT,
            body=STOP_ACTION,
        )

    async def get_task_log(self, task_id: int) -> Optional[str]:
        return await self._request(
            f"/p2p/preheat/tasks/{encode_segment(task_id)}/log",
            headers={"Accept": "text/plain"},
            as_text=True,
        )
