from typing import Any, Optional

from harbor_api.core.options import ListLabelsOptions
from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import HttpMethod
from harbor_api.utils.helpers import encode_segment


class Labels(BaseResource):
    """
    Global (`scope=g`) and project (`scope=p`) labels

    Attaching a label to an artifact lives on `Artifacts.add_label`.
    """

    async def list_labels(self, options: Optional[ListLabelsOptions] = None) -> Any:
        return await self._request("/labels", params=self._params(options, ListLabelsOptions))

    async def create_label(self, label: dict[str, Any]) -> Any:
        return await self._request("/labels", HttpMethod.POST, body=label)

    async def get_label(self, label_id: int) -> Any:
        return await self._request(f"/labels/{encode_segment(label_id)}")

    async def update_label(self, label_id: int, label: dict[str, Any]) -> Any:
        return await self._request(
            f"/labels/{encode_segment(label_id)}", HttpMethod.PUT, body=label
        )

    async def delete_label(self, label_id: int) -> Any:
        return await self._request(f"/labels/{encode_segment(label_id)}", HttpMethod.DELETE)
