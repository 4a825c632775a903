from harbor_api.core.options import (
    ArtifactOptions,
    BaseOptions,
    ListArtifactsOptions,
    ListLabelsOptions,
    ListOptions,
    ListProjectsOptions,
    ListQuotasOptions,
    ListRegistriesOptions,
    ListReplicationExecutionsOptions,
    ListReplicationPoliciesOptions,
    ListReplicationTasksOptions,
    ListTagsOptions,
    ListUserGroupsOptions,
    PageOptions,
    UserPermissionsOptions,
)

__all__ = [
    "ArtifactOptions",
    "BaseOptions",
    "ListArtifactsOptions",
    "ListLabelsOptions",
    "ListOptions",
    "ListProjectsOptions",
    "ListQuotasOptions",
    "ListRegistriesOptions",
    "ListReplicationExecutionsOptions",
    "ListReplicationPoliciesOptions",
    "ListReplicationTasksOptions",
    "ListTagsOptions",
    "ListUserGroupsOptions",
    "PageOptions",
    "UserPermissionsOptions",
]
