from typing import Any, Optional

from harbor_api.core.options import ListQuotasOptions
from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import HttpMethod
from harbor_api.utils.helpers import encode_segment


class Quotas(BaseResource):
    async def list_quotas(self, options: Optional[ListQuotasOptions] = None) -> Any:
        """
        List quotas

        Args:
            options: Paging plus `reference` (e.g. `project`), `reference_id` and `sort`
        """
        return await self._request("/quotas", params=self._params(options, ListQuotasOptions))

    async def get_quota(self, quota_id: int) -> Any:
        return await self._request(f"/quotas/{encode_segment(quota_id)}")

    async def update_quota(self, quota_id: int, hard: dict[str, int]) -> Any:
        """
        Args:
            hard: New hard limits, e.g. `{"storage": 1073741824}`; `-1` means unlimited
        """
        return await self._request(
            f"/quotas/{encode_segment(quota_id)}", HttpMethod.PUT, body={"hard": hard}
        )
