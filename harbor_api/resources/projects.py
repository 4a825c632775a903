from typing import Any, Optional

from harbor_api.core.options import ListProjectsOptions
from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import HttpMethod
from harbor_api.utils.helpers import encode_segment


class Projects(BaseResource):
    """
    Project endpoints

    Every method that takes `project_name_or_id` accepts either the project
    name or its numeric id, as Harbor does.
    """

    async def list_projects(self, options: Optional[ListProjectsOptions] = None) -> Any:
        """
        List projects visible to the current user

        Args:
            options: Paging (defaults to page 1, 10 per page) and filters such
                as `name`, `public`, `owner` and `with_detail`

        Returns:
            List of projects
        """
        return await self._request(
            "/projects", params=self._params(options, ListProjectsOptions)
        )

    async def create_project(self, project: dict[str, Any]) -> Any:
        return await self._request("/projects", HttpMethod.POST, body=project)

    async def get_project(self, project_name_or_id: str | int) -> Any:
        return await self._request(f"/projects/{encode_segment(project_name_or_id)}")

    async def update_project(
        self, project_name_or_id: str | int, project: dict[str, Any]
    ) -> Any:
        return await self._request(
            f"/projects/{encode_segment(project_name_or_id)}",
            HttpMethod.PUT,
            body=project,
        )

    async def delete_project(self, project_name_or_id: str | int) -> Any:
        return await self._request(
            f"/projects/{encode_segment(project_name_or_id)}", HttpMethod.DELETE
        )

    async def get_project_deletable(self, project_name_or_id: str | int) -> Any:
        """Whether the project can be deleted, with the reason when it cannot"""
        return await self._request(
            f"/projects/{encode_segment(project_name_or_id)}/_deletable"
        )

    async def get_project_summary(self, project_name_or_id: str | int) -> Any:
        return await self._request(
            f"/projects/{encode_segment(project_name_or_id)}/summary"
        )
