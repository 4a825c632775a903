from typing import Any, Optional

from harbor_api.core.options import ListOptions
from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import HttpMethod
from harbor_api.utils.helpers import encode_segment


class Accessories(BaseResource):
    """Signatures, SBOMs and other accessories attached to an artifact."""

    async def list_accessories(
        self,
        project_name: str,
        repository_name: str,
        reference: str,
        options: Optional[ListOptions] = None,
    ) -> Any:
        return await self._request(
            f"{self._artifact_path(project_name, repository_name, reference)}/accessories",
            params=self._params(options, ListOptions),
        )

    async def get_accessory(
        self,
        project_name: str,
        repository_name: str,
        reference: str,
        accessory_digest: str,
    ) -> Any:
        return await self._request(
            f"{self._artifact_path(project_name, repository_name, reference)}"
            f"/accessories/{encode_segment(accessory_digest)}"
        )

    async def delete_accessory(
        self,
        project_name: str,
        repository_name: str,
        reference: str,
        accessory_digest: str,
    ) -> Any:
        return await self._request(
            f"{self._artifact_path(project_name, repository_name, reference)}"
            f"/accessories/{encode_segment(accessory_digest)}",
            HttpMethod.DELETE,
        )
