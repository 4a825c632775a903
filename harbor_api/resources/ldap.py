from typing import Any, Optional

from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import HttpMethod


class LDAP(BaseResource):
    async def ping_ldap(self, ldap_config: Optional[dict[str, Any]] = None) -> Any:
        """
        Test an LDAP configuration

        Harbor pings the saved configuration when `ldap_config` is omitted.
        """
        return await self._request(
            "/ldap/ping", HttpMethod.POST, body=ldap_config if ldap_config is not None else {}
        )

    async def search_ldap_users(self, username: Optional[str] = None) -> Any:
        return await self._request("/ldap/users/search", params={"username": username})

    async def import_ldap_users(self, uid_list: list[str]) -> Any:
        return await self._request(
            "/ldap/users/import", HttpMethod.POST, body={"uid_list": uid_list}
        )

    async def search_ldap_groups(
        self, groupname: Optional[str] = None, groupdn: Optional[str] = None
    ) -> Any:
        return await self._request(
            "/ldap/groups/search", params={"groupname": groupname, "groupdn": groupdn}
        )
