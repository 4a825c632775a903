from typing import Any, Optional

from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import STOP_ACTION, HttpMethod
from harbor_api.utils.helpers import encode_segment


class JobService(BaseResource):
    """Job service dashboard: worker pools, workers, queues and single jobs."""

    async def get_job_service_status(self) -> Any:
        return await self._request("/jobservice/status")

    async def get_job_service_workers(self) -> Any:
        return await self._request("/jobservice/workers")

    async def get_job_service_queue(self) -> Any:
        return await self._request("/jobservice/queue")

    async def get_worker_pools(self) -> Any:
        return await self._request("/jobservice/pools")

    async def get_workers_in_pool(self, pool_id: str) -> Any:
        return await self._request(f"/jobservice/pools/{encode_segment(pool_id)}/workers")

    async def get_job(self, job_id: str) -> Any:
        return await self._request(f"/jobservice/jobs/{encode_segment(job_id)}")

    async def stop_job(self, job_id: str) -> Any:
        return await self._request(
            f"/jobservice/jobs/{encode_segment(job_id)}",
            HttpMethod.PUT,
            body=STOP_ACTION,
        )

    async def get_job_log(self, job_id: str) -> Optional[str]:
        return await self._request(
            f"/jobservice/jobs/{encode_segment(job_id)}/log",
            headers={"Accept": "text/plain"},
            as_text=True,
        )
