from typing import Any, Optional

from harbor_api.core.options import ListOptions
from harbor_api.resources.base import BaseResource


class AuditLogs(BaseResource):
    async def list_audit_logs(self, options: Optional[ListOptions] = None) -> Any:
        """
        List audit log entries of the projects the user is a member of

        Args:
            options: Paging plus a `q` expression, e.g. `operation=delete`
        """
        return await self._request("/audit-logs", params=self._params(options, ListOptions))
