from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Sequence

if TYPE_CHECKING:
    from .response import Response


class RestlerError(Exception):
    """Base class for every error delivered by restler."""


class ErrorType(str, Enum):
    INVALID_PARAMETERS = "invalid_parameters"
    INVALID_RESPONSE = "invalid_response"
    INTERNAL_FRAMEWORK_ERROR = "internal_framework_error"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    VALIDATION_ERROR = "validation_error"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    REQUEST_FAILED = "request_failed"
    UNKNOWN_ERROR = "unknown_error"

    @classmethod
    def from_status(cls, status_code: Optional[int]) -> "ErrorType":
        if status_code is None:
            return cls.REQUEST_FAILED
        if status_code == 401:
            return cls.UNAUTHORIZED
        if status_code == 403:
            return cls.FORBIDDEN
        if status_code == 404:
            return cls.NOT_FOUND
        if status_code == 422:
            return cls.VALIDATION_ERROR
        if 400 <= status_code < 500:
            return cls.CLIENT_ERROR
        if 500 <= status_code < 600:
            return cls.SERVER_ERROR
        return cls.UNKNOWN_ERROR


class CommonError(RestlerError):
    """A categorized error, optionally wrapping the underlying cause."""

    def __init__(self, type: ErrorType, base: Optional[BaseException] = None) -> None:
        self.type = type
        self.base = base
        message = type.value if base is None else f"{type.value}: {base}"
        super().__init__(message)
        if base is not None:
            self.__cause__ = base

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommonError):
            return NotImplemented
        return self.type == other.type and self.base is other.base

    def __hash__(self) -> int:
        return hash((self.type, id(self.base)))

    def __repr__(self) -> str:
        return f"CommonError(type={self.type!r}, base={self.base!r})"


class MultipleErrors(RestlerError):
    """Aggregate of two or more errors collected while building a request."""

    def __init__(self, errors: Sequence[BaseException]) -> None:
        self.errors = tuple(errors)
        super().__init__(
            f"{len(self.errors)} errors occurred: "
            + "; ".join(str(error) for error in self.errors)
        )


class EncodingError(RestlerError):
    """Raised by an encoder when a value cannot be serialized."""


class DecodingError(RestlerError):
    """Raised by a decoder when response data cannot be turned into the target type."""


class NetworkError(RestlerError):
    """Raised by the transport when a request fails.

    ``response`` carries whatever the server returned (status code, headers,
    raw body). It has no status code when the request never got a response,
    e.g. on connection errors or timeouts.
    """

    def __init__(
        self,
        message: str,
        response: "Response",
        base: Optional[BaseException] = None,
    ) -> None:
        self.response = response
        self.base = base
        super().__init__(message)
        if base is not None:
            self.__cause__ = base

    @property
    def status_code(self) -> Optional[int]:
        return self.response.status_code


class BaseUrlMissingError(RestlerError):
    def __init__(
        self,
        message="Base URL is required. Pass base_url to Restler() or set the RESTLER_BASE_URL environment variable.",
    ):
        self.message = message
        super().__init__(self.message)


def internal_error(**details: Any) -> CommonError:
    """Fallback error for states the framework should never reach."""
    return CommonError(
        ErrorType.INTERNAL_FRAMEWORK_ERROR,
        base=RuntimeError(f"restler internal error {details}" if details else "restler internal error"),
    )
