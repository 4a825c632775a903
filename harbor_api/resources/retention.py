from typing import Any, Optional

from harbor_api.core.options import PageOptions
from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import STOP_ACTION, HttpMethod
from harbor_api.utils.helpers import encode_segment


class Retention(BaseResource):
    """Tag retention policies and their executions."""

    @staticmethod
    def _executions_path(retention_id: int) -> str:
        return f"/retentions/{encode_segment(retention_id)}/executions"

    async def get_retention_metadata(self) -> Any:
        """Rule templates and scope selectors supported by the server"""
        return await self._request("/retentions/metadatas")

    async def create_retention_policy(self, policy: dict[str, Any]) -> Any:
        return await self._request("/retentions", HttpMethod.POST, body=policy)

    async def get_retention_policy(self, retention_id: int) -> Any:
        return await self._request(f"/retentions/{encode_segment(retention_id)}")

    async def update_retention_policy(self, retention_id: int, policy: dict[str, Any]) -> Any:
        return await self._request(
            f"/retentions/{encode_segment(retention_id)}", HttpMethod.PUT, body=policy
        )

    async def delete_retention_policy(self, retention_id: int) -> Any:
        return await self._request(
            f"/retentions/{encode_segment(retention_id)}", HttpMethod.DELETE
        )

    async def trigger_retention_execution(self, retention_id: int, dry_run: bool = False) -> Any:
        return await self._request(
            self._executions_path(retention_id),
            HttpMethod.POST,
            body={"dry_run": dry_run},
        )

    async def list_retention_executions(
        self, retention_id: int, options: Optional[PageOptions] = None
    ) -> Any:
        return await self._request(
            self._executions_path(retention_id),
            params=self._params(options, PageOptions),
        )

    async def stop_retention_execution(self, retention_id: int, execution_id: int) -> Any:
        return await self._request(
            f"{self._executions_path(retention_id)}/{encode_segment(execution_id)}",
            HttpMethod.PATCH,
            body=STOP_ACTION,
        )

    async def list_retention_tasks(
        self,
        retention_id: int,
        execution_id: int,
        options: Optional[PageOptions] = None,
    ) -> Any:
        return await self._request(
            f"{self._executions_path(retention_id)}/{encode_segment(execution_id)}/tasks",
            params=self._params(options, PageOptions),
        )

    async def get_retention_task_log(
        self, retention_id: int, execution_id: int, task_id: int
    ) -> Optional[str]:
        return await self._request(
            f"{self._executions_path(retention_id)}/{encode_segment(execution_id)}"
            f"/tasks/{encode_segment(task_id)}",
            headers={"Accept": "text/plain"},
            as_text=True,
        )
