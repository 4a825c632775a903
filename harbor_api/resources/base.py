from typing import Any, Mapping, Optional

from harbor_api.core.options import BaseOptions
from harbor_api.transport import HarborTransport
from harbor_api.utils.constants import REQUEST_ID_HEADER, HttpMethod
from harbor_api.utils.helpers import (
    encode_repository_name,
    encode_segment,
    generate_request_id,
)


class BaseResource:
    """
    Common plumbing for one group of Harbor endpoints

    Subclasses only map their arguments to a path, a method, query
    parameters and a body; the transport does the rest.
    """

    def __init__(self, transport: HarborTransport) -> None:
        self._transport = transport

    async def _request(
        self,
        path: str,
        method: HttpMethod = HttpMethod.GET,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        as_text: bool = False,
    ) -> Any:
        request_headers = {REQUEST_ID_HEADER: generate_request_id()}
        if headers:
            request_headers.update(headers)

        return await self._transport.request(
            path,
            method=method,
            params=params,
            body=body,
            headers=request_headers,
            as_text=as_text,
        )

    @staticmethod
    def _params(options: Optional[BaseOptions], default: type[BaseOptions]) -> dict[str, Any]:
        return (options or default()).to_params()

    @staticmethod
    def _repository_path(project_name: str, repository_name: str) -> str:
        return (
            f"/projects/{encode_segment(project_name)}"
            f"/repositories/{encode_repository_name(repository_name)}"
        )

    @classmethod
    def _artifact_path(cls, project_name: str, repository_name: str, reference: str) -> str:
        return (
            f"{cls._repository_path(project_name, repository_name)}"
            f"/artifacts/{encode_segment(reference)}"
        )
