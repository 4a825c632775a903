from typing import Any, Optional

from harbor_api.core.options import ListOptions
from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import HttpMethod
from harbor_api.utils.helpers import encode_segment


class Scanners(BaseResource):
    """
    Scanner registrations (`/scanners`) and the scanner bound to a project
    """

    async def list_scanners(self, options: Optional[ListOptions] = None) -> Any:
        return await self._request("/scanners", params=self._params(options, ListOptions))

    async def create_scanner(self, registration: dict[str, Any]) -> Any:
        return await self._request("/scanners", HttpMethod.POST, body=registration)

    async def ping_scanner(self, settings: dict[str, Any]) -> Any:
        """Check that Harbor can reach the scanner adapter described by `settings`"""
        return await self._request("/scanners/ping", HttpMethod.POST, body=settings)

    async def get_scanner(self, registration_id: str) -> Any:
        return await self._request(f"/scanners/{encode_segment(registration_id)}")

    async def update_scanner(
        self, registration_id: str, registration: dict[str, Any]
    ) -> Any:
        return await self._request(
            f"/scanners/{encode_segment(registration_id)}",
            HttpMethod.PUT,
            body=registration,
        )

    async def delete_scanner(self, registration_id: str) -> Any:
        return await self._request(
            f"/scanners/{encode_segment(registration_id)}", HttpMethod.DELETE
        )

    async def set_scanner_as_default(self, registration_id: str) -> Any:
        return await self._request(
            f"/scanners/{encode_segment(registration_id)}",
            HttpMethod.PATCH,
            body={"is_default": True},
        )

    async def get_scanner_metadata(self, registration_id: str) -> Any:
        return await self._request(f"/scanners/{encode_segment(registration_id)}/metadata")

    async def get_project_scanner(self, project_name_or_id: str | int) -> Any:
        return await self._request(
            f"/projects/{encode_segment(project_name_or_id)}/scanner"
        )

    async def set_project_scanner(
        self, project_name_or_id: str | int, payload: dict[str, Any]
    ) -> Any:
        """
        Bind a scanner to the project

        Args:
            payload: `{"uuid": <registration id>}`
        """
        return await self._request(
            f"/projects/{encode_segment(project_name_or_id)}/scanner",
            HttpMethod.PUT,
            body=payload,
        )

    async def list_scanner_candidates(
        self, project_name_or_id: str | int, options: Optional[ListOptions] = None
    ) -> Any:
        return await self._request(
            f"/projects/{encode_segment(project_name_or_id)}/scanner/candidates",
            params=self._params(options, ListOptions),
        )
