from typing import Any, Optional

from harbor_api.core.options import ListOptions
from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import HttpMethod
from harbor_api.utils.helpers import encode_segment


class Robots(BaseResource):
    async def list_robots(self, options: Optional[ListOptions] = None) -> Any:
        return await self._request("/robots", params=self._params(options, ListOptions))

    async def create_robot(self, robot: dict[str, Any]) -> Any:
        """Create a robot account, the response holds its generated secret"""
        return await self._request("/robots", HttpMethod.POST, body=robot)

    async def get_robot(self, robot_id: int) -> Any:
        return await self._request(f"/robots/{encode_segment(robot_id)}")

    async def update_robot(self, robot_id: int, robot: dict[str, Any]) -> Any:
        return await self._request(
            f"/robots/{encode_segment(robot_id)}", HttpMethod.PUT, body=robot
        )

    async def refresh_robot_secret(self, robot_id: int, robot_sec: dict[str, Any]) -> Any:
        """
        Args:
            robot_sec: `{"secret": "..."}` to set a secret, `{}` to let Harbor generate one
        """
        return await self._request(
            f"/robots/{encode_segment(robot_id)}", HttpMethod.PATCH, body=robot_sec
        )

    async def delete_robot(self, robot_id: int) -> Any:
        return await self._request(f"/robots/{encode_segment(robot_id)}", HttpMethod.DELETE)
