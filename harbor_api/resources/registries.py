from typing import Any, Optional

from harbor_api.core.options import ListRegistriesOptions
from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import HttpMethod
from harbor_api.utils.helpers import encode_segment


class Registries(BaseResource):
    """Remote registry endpoints used as replication sources and targets."""

    async def list_registry_adapters(self) -> Any:
        return await self._request("/replication/adapters")

    async def list_registry_provider_infos(self) -> Any:
        return await self._request("/replication/adapterinfos")

    async def create_registry(self, registry: dict[str, Any]) -> Any:
        return await self._request("/registries", HttpMethod.POST, body=registry)

    async def list_registries(self, options: Optional[ListRegistriesOptions] = None) -> Any:
        return await self._request(
            "/registries", params=self._params(options, ListRegistriesOptions)
        )

    async def ping_registry(self, registry: dict[str, Any]) -> Any:
        """Check a registry is reachable, either by `id` or by full settings"""
        return await self._request("/registries/ping", HttpMethod.POST, body=registry)

    async def get_registry(self, registry_id: int) -> Any:
        return await self._request(f"/registries/{encode_segment(registry_id)}")

    async def update_registry(self, registry_id: int, registry: dict[str, Any]) -> Any:
        return await self._request(
            f"/registries/{encode_segment(registry_id)}", HttpMethod.PUT, body=registry
        )

    async def delete_registry(self, registry_id: int) -> Any:
        return await self._request(
            f"/registries/{encode_segment(registry_id)}", HttpMethod.DELETE
        )

    async def get_registry_info(self, registry_id: int) -> Any:
        """Supported resource filters and triggers of the registry"""
        return await self._request(f"/registries/{encode_segment(registry_id)}/info")
