from harbor_api.resources.accessories import Accessories
from harbor_api.resources.additions import Additions
from harbor_api.resources.artifacts import Artifacts
from harbor_api.resources.audit_logs import AuditLogs
from harbor_api.resources.base import BaseResource
from harbor_api.resources.configuration import Configuration
from harbor_api.resources.garbage_collection import GarbageCollection
from harbor_api.resources.icons import Icons
from harbor_api.resources.immutable_tag_rules import ImmutableTagRules
from harbor_api.resources.job_service import JobService
from harbor_api.resources.labels import Labels
from harbor_api.resources.ldap import LDAP
from harbor_api.resources.p2p_preheat import P2PPreheat
from harbor_api.resources.permissions import Permissions
from harbor_api.resources.projects import Projects
from harbor_api.resources.purge_audit import PurgeAudit
from harbor_api.resources.quotas import Quotas
from harbor_api.resources.registries import Registries
from harbor_api.resources.replication import Replication
from harbor_api.resources.repositories import Repositories
from harbor_api.resources.retention import Retention
from harbor_api.resources.robots import Robots
from harbor_api.resources.scan_data_export import ScanDataExport
from harbor_api.resources.scanners import Scanners
from harbor_api.resources.scans import Scans
from harbor_api.resources.security import Security
from harbor_api.resources.system import System
from harbor_api.resources.tags import Tags
from harbor_api.resources.user_groups import UserGroups
from harbor_api.resources.users import Users
from harbor_api.resources.webhooks import Webhooks

__all__ = [
    "Accessories",
    "Additions",
    "Artifacts",
    "AuditLogs",
    "BaseResource",
    "Configuration",
    "GarbageCollection",
    "Icons",
    "ImmutableTagRules",
    "JobService",
    "Labels",
    "LDAP",
    "P2PPreheat",
    "Permissions",
    "Projects",
    "PurgeAudit",
    "Quotas",
    "Registries",
    "Replication",
    "Repositories",
    "Retention",
    "Robots",
    "ScanDataExport",
    "Scanners",
    "Scans",
    "Security",
    "System",
    "Tags",
    "UserGroups",
    "Users",
    "Webhooks",
]
