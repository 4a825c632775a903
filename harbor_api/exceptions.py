"""
Contains contracts that maps to Harbor's Error object and our internal exceptions
raised in the library.
"""

from typing import Any, Optional, TypedDict

from harbor_api.utils.constants import FALLBACK_ERROR_MESSAGE


# Maps to Harbor's Error object
class Error(TypedDict):
    code: str
    """The error code"""

    message: str
    """ The error message"""


class HarborClientError(Exception):
    """Base exception for every error raised by this library"""


class InvalidConfigurationError(HarborClientError):
    """Raised when the configuration provided is invalid"""

    def __init__(self, message: str = "Invalid Harbor configuration provided") -> None:
        super().__init__(message)


class InvalidRequestError(HarborClientError):
    """Raised when a request cannot be sent as described"""


class RequestError(HarborClientError):
    """Raised when Harbor answers with a non-success status code"""

    def __init__(
        self,
        message: str = FALLBACK_ERROR_MESSAGE,
        status_code: Optional[int] = None,
        errors: Optional[list[Error]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors or []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code}, message={self.message!r})"


class UnauthorizedError(RequestError):
    """Raised when authentication to Harbor fails"""


class ForbiddenError(RequestError):
    """Raised when access to a Harbor resource is forbidden"""


class NotFoundError(RequestError):
    """Raised when a requested resource is not found in Harbor"""


class ConflictError(RequestError):
    """Raised when the resource already exists or is in a conflicting state"""


class ServerError(RequestError):
    """Raised when Harbor API returns a server error"""


class ResponseDecodeError(HarborClientError):
    """Raised when a successful response carries a body that is not valid JSON"""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def error_for_status(
    status_code: int, message: str, errors: Optional[list[Any]] = None
) -> RequestError:
    """Picks the RequestError subclass matching the status code"""
    match status_code:
        case 401:
            error_class: type[RequestError] = UnauthorizedError
        case 403:
            error_class = ForbiddenError
        case 404:
            error_class = NotFoundError
        case 409:
            error_class = ConflictError
        case _ if status_code >= 500:
            error_class = ServerError
        case _:
            error_class = RequestError

    return error_class(message, status_code, errors)
