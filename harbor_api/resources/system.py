from typing import Any, Optional

from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import HttpMethod


class System(BaseResource):
    async def get_health(self) -> Any:
        """Overall status plus the health of each Harbor component"""
        return await self._request("/health")

    async def search(self, query: str) -> Any:
        """Projects, repositories and charts whose name matches `query`"""
        return await self._request("/search", params={"q": query})

    async def get_statistics(self) -> Any:
        return await self._request("/statistics")

    async def get_system_info(self) -> Any:
        return await self._request("/systeminfo")

    async def get_system_volumes(self) -> Any:
        return await self._request("/systeminfo/volumes")

    async def get_system_cert(self) -> Optional[str]:
        """Default root certificate of the registry, as PEM text"""
        return await self._request(
            "/systeminfo/getcert",
            headers={"Accept": "application/octet-stream"},
            as_text=True,
        )

    async def ping_oidc(self, endpoint: dict[str, Any]) -> Any:
        """
        Test an OIDC endpoint before saving it in the configuration

        Args:
            endpoint: `{"url": ..., "verify_cert": bool}`
        """
        return await self._request("/system/oidc/ping", HttpMethod.POST, body=endpoint)
