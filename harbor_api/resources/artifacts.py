from typing import Any, Optional

from harbor_api.core.options import ArtifactOptions, ListArtifactsOptions
from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import HttpMethod
from harbor_api.utils.helpers import encode_segment


class Artifacts(BaseResource):
    """
    Artifact endpoints

    `reference` is either a digest (`sha256:...`) or a tag name.
    """

    async def list_artifacts(
        self,
        project_name: str,
        repository_name: str,
        options: Optional[ListArtifactsOptions] = None,
    ) -> Any:
        """
        List artifacts of a repository

        Args:
            project_name: Project name
            repository_name: Repository name without the project prefix
            options: Paging, `q`/`sort` and the `with_*` enrichment flags

        Returns:
            List of artifacts
        """
        return await self._request(
            f"{self._repository_path(project_name, repository_name)}/artifacts",
            params=self._params(options, ListArtifactsOptions),
        )

    async def get_artifact(
        self,
        project_name: str,
        repository_name: str,
        reference: str,
        options: Optional[ArtifactOptions] = None,
    ) -> Any:
        return await self._request(
            self._artifact_path(project_name, repository_name, reference),
            params=self._params(options, ArtifactOptions),
        )

    async def delete_artifact(
        self, project_name: str, repository_name: str, reference: str
    ) -> Any:
        return await self._request(
            self._artifact_path(project_name, repository_name, reference),
            HttpMethod.DELETE,
        )

    async def add_label(
        self,
        project_name: str,
        repository_name: str,
        reference: str,
        label: dict[str, Any],
    ) -> Any:
        """Attach an existing label, `label` needs at least its `id`"""
        return await self._request(
            f"{self._artifact_path(project_name, repository_name, reference)}/labels",
            HttpMethod.POST,
            body=label,
        )

    async def remove_label(
        self,
        project_name: str,
        repository_name: str,
        reference: str,
        label_id: int,
    ) -> Any:
        return await self._request(
            f"{self._artifact_path(project_name, repository_name, reference)}"
            f"/labels/{encode_segment(label_id)}",
            HttpMethod.DELETE,
        )
