""" Constants for the Harbor API client

Please keep this file focused on constants only, and updated with
the latest Harbor API details.
"""
from enum import StrEnum

API_VERSION = "v2.0"
DEFAULT_BASE_ADDRESS = f"http://localhost/api/{API_VERSION}"

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

AUTHORIZATION_HEADER = "Authorization"
REQUEST_ID_HEADER = "X-Request-Id"
SCAN_DATA_TYPE_HEADER = "X-Scan-Data-Type"

DEFAULT_SCAN_DATA_TYPE = (
    "application/vnd.security.vulnerability.report; version=1.1"
)

# used when an error body has no usable `message`
FALLBACK_ERROR_MESSAGE = "Request failed"

STOP_ACTION = {"action": "stop"}


class HttpMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class ArtifactAddition(StrEnum):
    BUILD_HISTORY = "build_history"
    VALUES_YAML = "values.yaml"
    README = "readme.md"
    DEPENDENCIES = "dependencies"
    SBOMS = "sboms"
