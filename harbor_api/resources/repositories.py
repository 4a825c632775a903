from typing import Any, Optional

from harbor_api.core.options import ListOptions
from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import HttpMethod
from harbor_api.utils.helpers import encode_segment


class Repositories(BaseResource):
    """Repository endpoints, scoped to a project except for `list_all_repositories`."""

    async def list_all_repositories(self, options: Optional[ListOptions] = None) -> Any:
        """List repositories across every project the user can see"""
        return await self._request("/repositories", params=self._params(options, ListOptions))

    async def list_repositories(
        self, project_name: str, options: Optional[ListOptions] = None
    ) -> Any:
        return await self._request(
            f"/projects/{encode_segment(project_name)}/repositories",
            params=self._params(options, ListOptions),
        )

    async def get_repository(self, project_name: str, repository_name: str) -> Any:
        """
        Args:
            project_name: Project name
            repository_name: Repository name without the project prefix,
                may contain slashes (e.g. `team/nginx`)
        """
        return await self._request(self._repository_path(project_name, repository_name))

    async def update_repository(
        self, project_name: str, repository_name: str, repository: dict[str, Any]
    ) -> Any:
        """Update the repository, Harbor only applies the `description` field"""
        return await self._request(
            self._repository_path(project_name, repository_name),
            HttpMethod.PUT,
            body=repository,
        )

    async def delete_repository(self, project_name: str, repository_name: str) -> Any:
        return await self._request(
            self._repository_path(project_name, repository_name), HttpMethod.DELETE
        )
