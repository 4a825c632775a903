from typing import Any, Optional

from harbor_api.core.options import ListOptions, PageOptions, UserPermissionsOptions
from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import HttpMethod
from harbor_api.utils.helpers import encode_segment


class Users(BaseResource):
    """
    User management

    Most calls here need a system administrator; `get_current_user_info`,
    `get_current_user_permissions` and `search_users` work for any user.
    """

    async def list_users(self, options: Optional[ListOptions] = None) -> Any:
        return await self._request("/users", params=self._params(options, ListOptions))

    async def create_user(self, user_req: dict[str, Any]) -> Any:
        return await self._request("/users", HttpMethod.POST, body=user_req)

    async def get_current_user_info(self) -> Any:
        return await self._request("/users/current")

    async def search_users(self, username: str, options: Optional[PageOptions] = None) -> Any:
        params = {"username": username, **self._params(options, PageOptions)}
        return await self._request("/users/search", params=params)

    async def get_user(self, user_id: int) -> Any:
        return await self._request(f"/users/{encode_segment(user_id)}")

    async def update_user_profile(self, user_id: int, profile: dict[str, Any]) -> Any:
        return await self._request(
            f"/users/{encode_segment(user_id)}", HttpMethod.PUT, body=profile
        )

    async def delete_user(self, user_id: int) -> Any:
        return await self._request(f"/users/{encode_segment(user_id)}", HttpMethod.DELETE)

    async def set_user_sysadmin(self, user_id: int, sysadmin_flag: dict[str, bool]) -> Any:
        """
        Args:
            sysadmin_flag: `{"sysadmin_flag": True}` to grant, `False` to revoke
        """
        return await self._request(
            f"/users/{encode_segment(user_id)}/sysadmin", HttpMethod.PUT, body=sysadmin_flag
        )

    async def update_user_password(self, user_id: int, password_req: dict[str, str]) -> Any:
        return await self._request(
            f"/users/{encode_segment(user_id)}/password", HttpMethod.PUT, body=password_req
        )

    async def get_current_user_permissions(
        self, options: Optional[UserPermissionsOptions] = None
    ) -> Any:
        return await self._request(
            "/users/current/permissions",
            params=self._params(options, UserPermissionsOptions),
        )

    async def set_cli_secret(self, user_id: int, secret: dict[str, str]) -> Any:
        return await self._request(
            f"/users/{encode_segment(user_id)}/cli_secret", HttpMethod.PUT, body=secret
        )
