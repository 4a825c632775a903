"""
Shared transport for every Harbor resource group

Turns a request description (path, method, query parameters, body, headers)
into one HTTP call against the configured base address and maps the response
to decoded JSON or a raised RequestError. No retries, no caching and no
throttling happen here: every error reaches the caller of the resource method.
"""

from types import TracebackType
from typing import Any, Mapping, Optional, Type

import httpx
from loguru import logger

from harbor_api.config import ClientConfig
from harbor_api.exceptions import (
    InvalidRequestError,
    ResponseDecodeError,
    error_for_status,
)
from harbor_api.utils.auth import generate_basic_auth_header
from harbor_api.utils.constants import (
    DEFAULT_HEADERS,
    FALLBACK_ERROR_MESSAGE,
    HttpMethod,
)
from harbor_api.utils.helpers import compact_params, serialize_body


def extract_error_details(response: httpx.Response) -> tuple[str, list[Any]]:
    """
    Reads the message (and Harbor's `errors` array when present) from an error body

    Falls back to a fixed message when the body is empty, is not JSON or has no
    usable `message` field.
    """
    try:
        payload = response.json()
    except ValueError:
        return FALLBACK_ERROR_MESSAGE, []

    if not isinstance(payload, dict):
        return FALLBACK_ERROR_MESSAGE, []

    errors = payload.get("errors")
    errors = errors if isinstance(errors, list) else []

    message = payload.get("message")
    if not message:
        return FALLBACK_ERROR_MESSAGE, errors

    return str(message), errors


class HarborTransport:
    """
    Async HTTP transport bound to a single ClientConfig

    The underlying httpx.AsyncClient is created on construction unless one is
    injected. Only an owned client is closed by `aclose`.
    """

    def __init__(
        self,
        config: ClientConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config
        self._owns_client = http_client is None
        self.client = http_client or httpx.AsyncClient(
            timeout=config.timeout,
            verify=config.verify_ssl,
        )

    def build_url(self, path: str) -> str:
        return f"{self.config.base_address}{path}"

    def build_headers(self, headers: Optional[Mapping[str, str]] = None) -> httpx.Headers:
        merged = httpx.Headers(DEFAULT_HEADERS)
        if headers:
            merged.update(headers)

        # computed per call and applied last so callers cannot replace it
        auth_header_name, auth_header_value = generate_basic_auth_header(
            self.config.principal, self.config.credential.get_secret_value()
        )
        merged[auth_header_name] = auth_header_value
        return merged

    async def request(
        self,
        path: str,
        method: HttpMethod | str = HttpMethod.GET,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        as_text: bool = False,
    ) -> Any:
        """
        Send one request to Harbor

        Args:
            path: Endpoint path, already percent-encoded, appended verbatim to the base address
            method: HTTP method, GET by default
            params: Query parameters, entries with a None value are not sent
            body: JSON-serializable value or pydantic model, not allowed on GET
            headers: Extra headers, merged over the JSON defaults
            as_text: Return the body as text instead of decoding JSON

        Returns:
            Decoded JSON, the text body when `as_text` is set, or None for an empty body

        Raises:
            InvalidRequestError: unsupported method or a body on a GET request
            RequestError: Harbor answered with a non-success status
            ResponseDecodeError: a success response carried invalid JSON
        """
        try:
            http_method = HttpMethod(str(method).upper())
        except ValueError as e:
            raise InvalidRequestError(f"Unsupported HTTP method: {method}") from e

        if body is not None and http_method == HttpMethod.GET:
            raise InvalidRequestError(f"GET {path} cannot carry a request body")

        url = self.build_url(path)
        query_params = compact_params(params)
        request_kwargs: dict[str, Any] = {
            "params": query_params,
            "headers": self.build_headers(headers),
        }
        if body is not None:
            request_kwargs["json"] = serialize_body(body)

        logger.debug(
            f"harbor_api::transport::{http_method} {url} with params={query_params}"
        )

        try:
            response = await self.client.request(
                http_method.value, url, **request_kwargs
            )
        except httpx.TransportError as e:
            logger.error(
                f"harbor_api::transport::{http_method} {url} failed: {type(e).__name__}: {e}"
            )
            raise

        if not response.is_success:
            self._raise_for_response(http_method, url, response)

        return self._decode(http_method, url, response, as_text)

    def _raise_for_response(
        self, method: HttpMethod, url: str, response: httpx.Response
    ) -> None:
        status_code = response.status_code
        message, errors = extract_error_details(response)

        if status_code >= 500:
            logger.error(
                f"harbor_api::transport::Harbor server error ({status_code}) for {method} {url}: {message}"
            )
        else:
            logger.warning(
                f"harbor_api::transport::Harbor API error ({status_code}) for {method} {url}: {message}"
            )

        raise error_for_status(status_code, message, errors)

    def _decode(
        self, method: HttpMethod, url: str, response: httpx.Response, as_text: bool
    ) -> Any:
        if not response.content:
            return None

        if as_text:
            return response.text

        try:
            return response.json()
        except ValueError as e:
            logger.error(
                f"harbor_api::transport::Invalid JSON in {response.status_code} response for {method} {url}"
            )
            raise ResponseDecodeError(
                f"Could not decode JSON response from {method} {url}",
                response.status_code,
            ) from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "HarborTransport":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        await self.aclose()
