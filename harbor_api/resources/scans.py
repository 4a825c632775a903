from typing import Any, Optional

from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import HttpMethod
from harbor_api.utils.helpers import encode_segment


class Scans(BaseResource):
    async def get_latest_scan_all_metrics(self) -> Any:
        return await self._request("/scans/all/metrics")

    async def get_latest_scheduled_scan_all_metrics(self) -> Any:
        return await self._request("/scans/schedule/metrics")

    async def scan_artifact(
        self,
        project_name: str,
        repository_name: str,
        reference: str,
        scan_type: Optional[dict[str, Any]] = None,
    ) -> Any:
        """
        Trigger a scan of the artifact

        Args:
            scan_type: e.g. `{"scan_type": "sbom"}`, Harbor runs a
                vulnerability scan when omitted
        """
        return await self._request(
            f"{self._artifact_path(project_name, repository_name, reference)}/scan",
            HttpMethod.POST,
            body=scan_type,
        )

    async def stop_scan_artifact(
        self,
        project_name: str,
        repository_name: str,
        reference: str,
        scan_type: Optional[dict[str, Any]] = None,
    ) -> Any:
        return await self._request(
            f"{self._artifact_path(project_name, repository_name, reference)}/scan/stop",
            HttpMethod.POST,
            body=scan_type,
        )

    async def get_report_log(
        self,
        project_name: str,
        repository_name: str,
        reference: str,
        report_id: str,
    ) -> Optional[str]:
        """Raw scanner log of one report, returned as text"""
        return await self._request(
            f"{self._artifact_path(project_name, repository_name, reference)}"
            f"/scan/{encode_segment(report_id)}/log",
            headers={"Accept": "text/plain"},
            as_text=True,
        )
