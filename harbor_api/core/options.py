"""Harbor API options for paging, filtering and enrichment of list calls."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from harbor_api.utils.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE


class BaseOptions(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    def to_params(self) -> dict[str, Any]:
        """Query parameters for this option set, unset filters are left out"""
        return self.model_dump(by_alias=True, exclude_none=True)


class PageOptions(BaseOptions):
    """Plain paging."""

    page: int = Field(default=DEFAULT_PAGE, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)


class ListOptions(PageOptions):
    """Paging plus Harbor's `q` query expression and sort key."""

    query: Optional[str] = Field(default=None, alias="q")
    sort: Optional[str] = None


class ListProjectsOptions(ListOptions):
    name: Optional[str] = None
    public: Optional[bool] = None
    owner: Optional[str] = None
    with_detail: Optional[bool] = None


class ArtifactOptions(BaseOptions):
    """Enrichment flags for a single artifact."""

    with_tag: Optional[bool] = None
    with_label: Optional[bool] = None
    with_scan_overview: Optional[bool] = None
    with_accessory: Optional[bool] = None
    with_signature: Optional[bool] = None
    with_immutable_status: Optional[bool] = None


class ListArtifactsOptions(ListOptions, ArtifactOptions):
    pass


class ListTagsOptions(ListOptions):
    with_immutable_status: Optional[bool] = None


class ListLabelsOptions(ListOptions):
    name: Optional[str] = None
    scope: Optional[str] = None
    project_id: Optional[int] = None


class ListRegistriesOptions(ListOptions):
    name: Optional[str] = None


class ListReplicationPoliciesOptions(ListOptions):
    name: Optional[str] = None


class ListReplicationExecutionsOptions(PageOptions):
    policy_id: Optional[int] = None
    status: Optional[str] = None
    trigger: Optional[str] = None
    sort: Optional[str] = None


class ListReplicationTasksOptions(PageOptions):
    status: Optional[str] = None
    resource_type: Optional[str] = None
    sort: Optional[str] = None


class ListUserGroupsOptions(PageOptions):
    group_name: Optional[str] = None
    ldap_group_dn: Optional[str] = None


class ListQuotasOptions(PageOptions):
    reference: Optional[str] = None
    reference_id: Optional[str] = None
    sort: Optional[str] = None


class UserPermissionsOptions(BaseOptions):
    scope: Optional[str] = None
    relative: Optional[bool] = None
