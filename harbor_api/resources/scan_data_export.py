from typing import Any, Optional

from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import (
    DEFAULT_SCAN_DATA_TYPE,
    SCAN_DATA_TYPE_HEADER,
    HttpMethod,
)
from harbor_api.utils.helpers import encode_segment


class ScanDataExport(BaseResource):
    """CVE export jobs (`/export/cve`)."""

    async def export_scan_data(
        self,
        criteria: dict[str, Any],
        scan_data_type: str = DEFAULT_SCAN_DATA_TYPE,
    ) -> Any:
        """
        Start an export of vulnerability data

        Args:
            criteria: Filters such as `projects`, `labels`, `repositories`, `cveIds`, `tags`
            scan_data_type: Report mime type sent as `X-Scan-Data-Type`

        Returns:
            The export execution id
        """
        return await self._request(
            "/export/cve",
            HttpMethod.POST,
            body=criteria,
            headers={SCAN_DATA_TYPE_HEADER: scan_data_type},
        )

    async def get_scan_data_export_execution(self, execution_id: int) -> Any:
        return await self._request(f"/export/cve/execution/{encode_segment(execution_id)}")

    async def get_scan_data_export_executions(self) -> Any:
        return await self._request("/export/cve/executions")

    async def download_scan_data(
        self, execution_id: int, format: str = "CSV"
    ) -> Optional[str]:
        return await self._request(
            f"/export/cve/download/{encode_segment(execution_id)}",
            params={"format": format},
            headers={"Accept": "text/csv"},
            as_text=True,
        )
