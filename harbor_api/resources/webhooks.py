from typing import Any, Optional

from harbor_api.core.options import ListOptions
from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import HttpMethod
from harbor_api.utils.helpers import encode_segment


class Webhooks(BaseResource):
    """
    Project webhook policies, their executions and delivery tasks
    """

    @staticmethod
    def _webhook_path(project_name_or_id: str | int) -> str:
        return f"/projects/{encode_segment(project_name_or_id)}/webhook"

    @classmethod
    def _policy_path(cls, project_name_or_id: str | int, policy_id: int) -> str:
        return f"{cls._webhook_path(project_name_or_id)}/policies/{encode_segment(policy_id)}"

    async def list_webhook_policies(
        self, project_name_or_id: str | int, options: Optional[ListOptions] = None
    ) -> Any:
        return await self._request(
            f"{self._webhook_path(project_name_or_id)}/policies",
            params=self._params(options, ListOptions),
        )

    async def create_webhook_policy(
        self, project_name_or_id: str | int, policy: dict[str, Any]
    ) -> Any:
        """
        Create a webhook policy

        Args:
            project_name_or_id: Project name or id
            policy: Policy with `name`, `event_types` and `targets`
                (each target has `type`, `address` and optional `auth_header`)
        """
        return await self._request(
            f"{self._webhook_path(project_name_or_id)}/policies",
            HttpMethod.POST,
            body=policy,
        )

    async def get_webhook_policy(self, project_name_or_id: str | int, policy_id: int) -> Any:
        return await self._request(self._policy_path(project_name_or_id, policy_id))

    async def update_webhook_policy(
        self, project_name_or_id: str | int, policy_id: int, policy: dict[str, Any]
    ) -> Any:
        return await self._request(
            self._policy_path(project_name_or_id, policy_id), HttpMethod.PUT, body=policy
        )

    async def delete_webhook_policy(self, project_name_or_id: str | int, policy_id: int) -> Any:
        return await self._request(
            self._policy_path(project_name_or_id, policy_id), HttpMethod.DELETE
        )

    async def list_webhook_jobs(
        self,
        project_name_or_id: str | int,
        policy_id: int,
        options: Optional[ListOptions] = None,
    ) -> Any:
        params = {"policy_id": policy_id, **self._params(options, ListOptions)}
        return await self._request(
            f"{self._webhook_path(project_name_or_id)}/jobs", params=params
        )

    async def list_webhook_executions(
        self,
        project_name_or_id: str | int,
        policy_id: int,
        options: Optional[ListOptions] = None,
    ) -> Any:
        return await self._request(
            f"{self._policy_path(project_name_or_id, policy_id)}/executions",
            params=self._params(options, ListOptions),
        )

    async def list_webhook_tasks(
        self,
        project_name_or_id: str | int,
        policy_id: int,
        execution_id: int,
        options: Optional[ListOptions] = None,
    ) -> Any:
        return await self._request(
            f"{self._policy_path(project_name_or_id, policy_id)}"
            f"/executions/{encode_segment(execution_id)}/tasks",
            params=self._params(options, ListOptions),
        )

    async def get_webhook_task_log(
        self,
        project_name_or_id: str | int,
        policy_id: int,
        execution_id: int,
        task_id: int,
    ) -> Optional[str]:
        return await self._request(
            f"{self._policy_path(project_name_or_id, policy_id)}"
            f"/executions/{encode_segment(execution_id)}"
            f"/tasks/{encode_segment(task_id)}/log",
            headers={"Accept": "text/plain"},
            as_text=True,
        )

    async def get_webhook_last_trigger(self, project_name_or_id: str | int) -> Any:
        return await self._request(f"{self._webhook_path(project_name_or_id)}/lasttrigger")

    async def get_supported_event_types(self, project_name_or_id: str | int) -> Any:
        return await self._request(f"{self._webhook_path(project_name_or_id)}/events")
