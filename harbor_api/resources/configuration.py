from typing import Any

from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import HttpMethod


class Configuration(BaseResource):
    async def get_configuration(self) -> Any:
        return await self._request("/configurations")

    async def update_configuration(self, configuration: dict[str, Any]) -> Any:
        """Only the keys present in `configuration` are changed"""
        return await self._request("/configurations", HttpMethod.PUT, body=configuration)
