from typing import Any, Optional

from harbor_api.core.options import ListTagsOptions
from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import HttpMethod
from harbor_api.utils.helpers import encode_segment


class Tags(BaseResource):
    async def list_tags(
        self,
        project_name: str,
        repository_name: str,
        reference: str,
        options: Optional[ListTagsOptions] = None,
    ) -> Any:
        return await self._request(
            f"{self._artifact_path(project_name, repository_name, reference)}/tags",
            params=self._params(options, ListTagsOptions),
        )

    async def create_tag(
        self,
        project_name: str,
        repository_name: str,
        reference: str,
        tag: dict[str, Any],
    ) -> Any:
        return await self._request(
            f"{self._artifact_path(project_name, repository_name, reference)}/tags",
            HttpMethod.POST,
            body=tag,
        )

    async def delete_tag(
        self,
        project_name: str,
        repository_name: str,
        reference: str,
        tag_name: str,
    ) -> Any:
        return await self._request(
            f"{self._artifact_path(project_name, repository_name, reference)}"
            f"/tags/{encode_segment(tag_name)}",
            HttpMethod.DELETE,
        )
