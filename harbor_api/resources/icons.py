from typing import Any

from harbor_api.resources.base import BaseResource
from harbor_api.utils.helpers import encode_segment


class Icons(BaseResource):
    async def get_icon(self, digest: str) -> Any:
        return await self._request(f"/icons/{encode_segment(digest)}")
