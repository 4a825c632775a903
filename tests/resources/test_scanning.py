import pytest

from harbor_api.resources.scan_data_export import ScanDataExport
from harbor_api.resources.scanners import Scanners
from harbor_api.resources.scans import Scans
from harbor_api.resources.security import Security
from harbor_api.utils.constants import (
    DEFAULT_SCAN_DATA_TYPE,
    SCAN_DATA_TYPE_HEADER,
    HttpMethod,
)

ARTIFACT_PATH = "/projects/library/repositories/nginx/artifacts/latest"


class TestScans:
    @pytest.mark.asyncio
    async def test_metrics(self, mock_transport, sent_request):
        scans = Scans(mock_transport)

        await scans.get_latest_scan_all_metrics()
        assert sent_request()["path"] == "/scans/all/metrics"

        await scans.get_latest_scheduled_scan_all_metrics()
        assert sent_request()["path"] == "/scans/schedule/metrics"

    @pytest.mark.asyncio
    async def test_scan_artifact(self, mock_transport, sent_request):
        scans = Scans(mock_transport)

        await scans.scan_artifact("library", "nginx", "latest")
        request = sent_request()
        assert request["path"] == f"{ARTIFACT_PATH}/scan"
        assert request["method"] == HttpMethod.POST
        assert request["body"] is None

        await scans.stop_scan_artifact("library", "nginx", "latest", {"scan_type": "sbom"})
        request = sent_request()
        assert request["path"] == f"{ARTIFACT_PATH}/scan/stop"
        assert request["body"] == {"scan_type": "sbom"}

    @pytest.mark.asyncio
    async def test_report_log_is_text(self, mock_transport, sent_request):
        mock_transport.request.return_value = "scan started"

        log = await Scans(mock_transport).get_report_log("library", "nginx", "latest", "r-1")

        assert log == "scan started"
        request = sent_request()
        assert request["path"] == f"{ARTIFACT_PATH}/scan/r-1/log"
        assert request["as_text"] is True
        assert request["headers"]["Accept"] == "text/plain"


class TestScanners:
    @pytest.mark.asyncio
    async def test_registration_crud(self, mock_transport, sent_request):
        scanners = Scanners(mock_transport)

        await scanners.list_scanners()
        assert sent_request()["path"] == "/scanners"

        await scanners.create_scanner({"name": "trivy", "url": "http://trivy:8080"})
        assert sent_request()["method"] == HttpMethod.POST

        await scanners.ping_scanner({"url": "http://trivy:8080"})
        assert sent_request()["path"] == "/scanners/ping"

        await scanners.get_scanner_metadata("uuid-1")
        assert sent_request()["path"] == "/scanners/uuid-1/metadata"

        await scanners.delete_scanner("uuid-1")
        assert sent_request()["method"] == HttpMethod.DELETE

    @pytest.mark.asyncio
    async def test_set_scanner_as_default(self, mock_transport, sent_request):
        await Scanners(mock_transport).set_scanner_as_default("uuid-1")

        request = sent_request()
        assert request["path"] == "/scanners/uuid-1"
        assert request["method"] == HttpMethod.PATCH
        assert request["body"] == {"is_default": True}

    @pytest.mark.asyncio
    async def test_project_scanner(self, mock_transport, sent_request):
        scanners = Scanners(mock_transport)

        await scanners.set_project_scanner("library", {"uuid": "uuid-1"})
        request = sent_request()
        assert request["path"] == "/projects/library/scanner"
        assert request["method"] == HttpMethod.PUT

        await scanners.list_scanner_candidates("library")
        assert sent_request()["path"] == "/projects/library/scanner/candidates"


class TestScanDataExport:
    @pytest.mark.asyncio
    async def test_export_sends_scan_data_type(self, mock_transport, sent_request):
        await ScanDataExport(mock_transport).export_scan_data({"projects": [1]})

        request = sent_request()
        assert request["path"] == "/export/cve"
        assert request["method"] == HttpMethod.POST
        assert request["headers"][SCAN_DATA_TYPE_HEADER] == DEFAULT_SCAN_DATA_TYPE

    @pytest.mark.asyncio
    async def test_executions_and_download(self, mock_transport, sent_request):
        export = ScanDataExport(mock_transport)

        await export.get_scan_data_export_execution(4)
        assert sent_request()["path"] == "/export/cve/execution/4"

        await export.get_scan_data_export_executions()
        assert sent_request()["path"] == "/export/cve/executions"

        await export.download_scan_data(4)
        request = sent_request()
        assert request["path"] == "/export/cve/download/4"
        assert request["params"] == {"format": "CSV"}
        assert request["as_text"] is True


class TestSecurity:
    @pytest.mark.asyncio
    async def test_cve_allowlist(self, mock_transport, sent_request):
        security = Security(mock_transport)

        await security.get_system_cve_allowlist()
        assert sent_request()["path"] == "/system/CVEAllowlist"

        await security.update_system_cve_allowlist({"items": [{"cve_id": "CVE-2024-1"}]})
        assert sent_request()["method"] == HttpMethod.PUT

    @pytest.mark.asyncio
    async def test_scan_all_schedule(self, mock_transport, sent_request):
        security = Security(mock_transport)
        schedule = {"schedule": {"type": "Daily", "cron": "0 0 0 * * *"}}

        await security.create_scan_all_schedule(schedule)
        request = sent_request()
        assert request["path"] == "/system/scanAll/schedule"
        assert request["method"] == HttpMethod.POST
        assert request["body"] == schedule
