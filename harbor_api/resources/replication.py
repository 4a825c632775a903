from typing import Any, Optional

from harbor_api.core.options import (
    ListReplicationExecutionsOptions,
    ListReplicationPoliciesOptions,
    ListReplicationTasksOptions,
)
from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import STOP_ACTION, HttpMethod
from harbor_api.utils.helpers import encode_segment


class Replication(BaseResource):
    """
    Replication policies and their executions

    Registry endpoints used by the policies are managed through
    `Registries`.
    """

    async def list_replication_policies(
        self, options: Optional[ListReplicationPoliciesOptions] = None
    ) -> Any:
        return await self._request(
            "/replication/policies",
            params=self._params(options, ListReplicationPoliciesOptions),
        )

    async def create_replication_policy(self, policy: dict[str, Any]) -> Any:
        return await self._request("/replication/policies", HttpMethod.POST, body=policy)

    async def get_replication_policy(self, policy_id: int) -> Any:
        return await self._request(f"/replication/policies/{encode_segment(policy_id)}")

    async def update_replication_policy(self, policy_id: int, policy: dict[str, Any]) -> Any:
        return await self._request(
            f"/replication/policies/{encode_segment(policy_id)}",
            HttpMethod.PUT,
            body=policy,
        )

    async def delete_replication_policy(self, policy_id: int) -> Any:
        return await self._request(
            f"/replication/policies/{encode_segment(policy_id)}", HttpMethod.DELETE
        )

    async def list_replication_executions(
        self, options: Optional[ListReplicationExecutionsOptions] = None
    ) -> Any:
        return await self._request(
            "/replication/executions",
            params=self._params(options, ListReplicationExecutionsOptions),
        )

    async def start_replication(self, execution: dict[str, Any]) -> Any:
        """
        Start a manual replication

        Args:
            execution: `{"policy_id": <id>}`
        """
        return await self._request("/replication/executions", HttpMethod.POST, body=execution)

    async def get_replication_execution(self, execution_id: int) -> Any:
        return await self._request(f"/replication/executions/{encode_segment(execution_id)}")

    async def stop_replication(self, execution_id: int) -> Any:
        return await self._request(
            f"/replication/executions/{encode_segment(execution_id)}",
            HttpMethod.PUT,
            body=STOP_ACTION,
        )

    async def list_replication_tasks(
        self,
        execution_id: int,
        options: Optional[ListReplicationTasksOptions] = None,
    ) -> Any:
        return await self._request(
            f"/replication/executions/{encode_segment(execution_id)}/tasks",
            params=self._params(options, ListReplicationTasksOptions),
        )

    async def get_replication_task_log(self, execution_id: int, task_id: int) -> Optional[str]:
        return await self._request(
            f"/replication/executions/{encode_segment(execution_id)}"
            f"/tasks/{encode_segment(task_id)}/log",
            headers={"Accept": "text/plain"},
            as_text=True,
        )
