from typing import Any

from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import ArtifactAddition
from harbor_api.utils.helpers import encode_segment


class Additions(BaseResource):
    async def get_vulnerabilities(
        self, project_name: str, repository_name: str, reference: str
    ) -> Any:
        """Vulnerability report of the artifact, keyed by report mime type"""
        return await self.get_addition(
            project_name, repository_name, reference, "vulnerabilities"
        )

    async def get_addition(
        self,
        project_name: str,
        repository_name: str,
        reference: str,
        addition: ArtifactAddition | str,
    ) -> Any:
        return await self._request(
            f"{self._artifact_path(project_name, repository_name, reference)}"
            f"/additions/{encode_segment(addition)}"
        )
