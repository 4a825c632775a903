import base64

from harbor_api.utils.constants import AUTHORIZATION_HEADER


def generate_basic_auth_header(username: str, password: str) -> tuple[str, str]:
    """
    Returns the Basic Auth header for given username and password
    """
    credentials = f"{username}:{password}"
    encoded = base64.b64encode(credentials.encode("utf-8")).decode("ascii")

    return AUTHORIZATION_HEADER, f"Basic {encoded}"
