from typing import Any, Optional

from harbor_api.core.options import ListUserGroupsOptions, PageOptions
from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import HttpMethod
from harbor_api.utils.helpers import encode_segment


class UserGroups(BaseResource):
    async def list_user_groups(self, options: Optional[ListUserGroupsOptions] = None) -> Any:
        return await self._request(
            "/usergroups", params=self._params(options, ListUserGroupsOptions)
        )

    async def create_user_group(self, group: dict[str, Any]) -> Any:
        return await self._request("/usergroups", HttpMethod.POST, body=group)

    async def get_user_group(self, group_id: int) -> Any:
        return await self._request(f"/usergroups/{encode_segment(group_id)}")

    async def update_user_group(self, group_id: int, group: dict[str, Any]) -> Any:
        return await self._request(
            f"/usergroups/{encode_segment(group_id)}", HttpMethod.PUT, body=group
        )

    async def delete_user_group(self, group_id: int) -> Any:
        return await self._request(f"/usergroups/{encode_segment(group_id)}", HttpMethod.DELETE)

    async def list_group_users(
        self, group_id: int, options: Optional[PageOptions] = None
    ) -> Any:
        return await self._request(
            f"/usergroups/{encode_segment(group_id)}/users",
            params=self._params(options, PageOptions),
        )

    async def add_user_to_group(self, group_id: int, user: dict[str, Any]) -> Any:
        return await self._request(
            f"/usergroups/{encode_segment(group_id)}/users", HttpMethod.POST, body=user
        )

    async def remove_user_from_group(self, group_id: int, user_id: int) -> Any:
        return await self._request(
            f"/usergroups/{encode_segment(group_id)}/users/{encode_segment(user_id)}",
            HttpMethod.DELETE,
        )
