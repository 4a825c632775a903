from typing import Any, Optional

from harbor_api.core.options import PageOptions
from harbor_api.resources.base import BaseResource
from harbor_api.utils.constants import HttpMethod
from harbor_api.utils.helpers import encode_segment


class ImmutableTagRules(BaseResource):
    @staticmethod
    def _rules_path(project_name_or_id: str | int) -> str:
        return f"/projects/{encode_segment(project_name_or_id)}/immutabletagrules"

    async def list_immutable_tag_rules(
        self, project_name_or_id: str | int, options: Optional[PageOptions] = None
    ) -> Any:
        return await self._request(
            self._rules_path(project_name_or_id),
            params=self._params(options, PageOptions),
        )

    async def create_immutable_tag_rule(
        self, project_name_or_id: str | int, rule: dict[str, Any]
    ) -> Any:
        return await self._request(
            self._rules_path(project_name_or_id), HttpMethod.POST, body=rule
        )

    async def update_immutable_tag_rule(
        self, project_name_or_id: str | int, rule_id: int, rule: dict[str, Any]
    ) -> Any:
        return await self._request(
            f"{self._rules_path(project_name_or_id)}/{encode_segment(rule_id)}",
            HttpMethod.PUT,
            body=rule,
        )

    async def delete_immutable_tag_rule(
        self, project_name_or_id: str | int, rule_id: int
    ) -> Any:
        return await self._request(
            f"{self._rules_path(project_name_or_id)}/{encode_segment(rule_id)}",
            HttpMethod.DELETE,
        )
