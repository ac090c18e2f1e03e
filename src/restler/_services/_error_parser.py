from logging import getLogger
from typing import Iterable, Optional

from .._utils.constants import LOGGER_NAME
from ..models.errors import CommonError, ErrorType, NetworkError, RestlerError
from ..models.response import Response


class ErrorParser:
    """Registry of error types tried against failed responses.

    One parser is owned by each client and shared by every request built from
    it, so registering a type through ``RequestBuilder.failure_decode`` makes
    it apply to later requests of the same client too.
    """

    def __init__(self, decoded_errors: Iterable[type] = ()) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._decoded_errors: list[type] = list(decoded_errors)

    @property
    def decoded_errors(self) -> tuple[type, ...]:
        return tuple(self._decoded_errors)

    def decode(self, error_type: type) -> None:
        """Register ``error_type``. Duplicates are kept and tried again."""
        self._decoded_errors.append(error_type)

    def copy(self) -> "ErrorParser":
        return ErrorParser(self._decoded_errors)

    def parse(self, error: BaseException) -> BaseException:
        """Pick the error to deliver for a failed request.

        Registered types are tried in registration order against the failed
        response; the first one that recognizes it wins. Otherwise the
        original error is wrapped in a ``CommonError`` categorized by status
        code.
        """
        if not isinstance(error, NetworkError):
            if isinstance(error, RestlerError):
                return error
            return CommonError(ErrorType.UNKNOWN_ERROR, base=error)

        for error_type in self._decoded_errors:
            decoded = self._try_decode(error_type, error.response)
            if decoded is not None:
                self._logger.debug(
                    f"Decoded failure as {error_type.__name__} (status {error.status_code})"
                )
                return decoded

        return CommonError(ErrorType.from_status(error.status_code), base=error)

    def _try_decode(self, error_type: type, response: Response) -> Optional[BaseException]:
        from_response = getattr(error_type, "from_response", None)
        if from_response is None:
            self._logger.debug(
                f"{error_type.__name__} does not define from_response; skipping"
            )
            return None
        try:
            return from_response(response)
        except Exception:
            self._logger.debug(
                f"{error_type.__name__}.from_response raised; treating as no match",
                exc_info=True,
            )
            return None
