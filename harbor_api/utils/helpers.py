"""Small helpers shared by the transport and the resource groups."""

import uuid
from typing import Any, Mapping, Optional
from urllib.parse import quote

from pydantic import BaseModel


def compact_params(params: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """
    Drops query parameters that have no value

    Order of the remaining keys is preserved. Falsy values such as `0`,
    `False` and `""` are kept, only `None` is removed.
    """
    if not params:
        return {}

    return {key: value for key, value in params.items() if value is not None}


def encode_segment(value: Any) -> str:
    """Percent-encode a single path segment, slashes included"""
    return quote(str(value), safe="")


def encode_repository_name(repository_name: str) -> str:
    """
    Harbor expects repository names to be encoded twice

    First encoding: library/nginx -> library%2Fnginx
    Second encoding: library%2Fnginx -> library%252Fnginx
    """
    return quote(quote(repository_name, safe=""), safe="")


def serialize_body(body: Any) -> Any:
    """Turns pydantic models into plain JSON-compatible data, leaves the rest as is"""
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)

    return body


def generate_request_id() -> str:
    return uuid.uuid4().hex
