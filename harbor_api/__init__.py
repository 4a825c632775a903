from harbor_api.client import HarborClient
from harbor_api.config import ClientConfig, HarborSettings
from harbor_api.core.options import (
    ArtifactOptions,
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
from harbor_api.exceptions import (
    ConflictError,
    ForbiddenError,
    HarborClientError,
    InvalidConfigurationError,
    InvalidRequestError,
    NotFoundError,
    RequestError,
    ResponseDecodeError,
    ServerError,
    UnauthorizedError,
)
from harbor_api.transport import HarborTransport
from harbor_api.version import __version__

__all__ = [
    "__version__",
    "HarborClient",
    "HarborTransport",
    "ClientConfig",
    "HarborSettings",
    "ArtifactOptions",
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
    "HarborClientError",
    "InvalidConfigurationError",
    "InvalidRequestError",
    "RequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "ServerError",
    "ResponseDecodeError",
]
