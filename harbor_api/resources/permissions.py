from typing import Any, Optional

from harbor_api.core.options import PageOptions
from harbor_api.resources.base import BaseResource
from harbor_api.utils.helpers import encode_segment


class Permissions(BaseResource):
    async def list_permissions(self, options: Optional[PageOptions] = None) -> Any:
        """System and project level permissions a robot account can be granted"""
        return await self._request("/permissions", params=self._params(options, PageOptions))

    async def get_permission(self, permission_id: int) -> Any:
        return await self._request(f"/permissions/{encode_segment(permission_id)}")

    async def list_permission_templates(self, options: Optional[PageOptions] = None) -> Any:
        return await self._request(
            "/permissions/templates", params=self._params(options, PageOptions)
        )

    async def get_permission_template(self, template_id: int) -> Any:
        return await self._request(f"/permissions/templates/{encode_segment(template_id)}")

    async def list_permission_policies(self, options: Optional[PageOptions] = None) -> Any:
        return await self._request(
            "/permissions/policies", params=self._params(options, PageOptions)
        )

    async def get_permission_policy(self, policy_id: int) -> Any:
        return await self._request(f"/permissions/policies/{encode_segment(policy_id)}")
