import threading
from abc import ABC, abstractmethod
from enum import Enum
from logging import getLogger
from typing import Any, Callable, Generic, Optional, Sequence, TypeVar, cast

from httpx import URL

from .._encoding import JSONDecoderType
from .._utils.constants import LOGGER_NAME
from ..models.errors import CommonError, ErrorType, MultipleErrors, internal_error
from ..models.header import Header
from ..models.method import HTTPMethod
from ..models.result import Failure, Result, Success
from ._dispatch import DispatchContext, DispatchQueueManagerType, SyncPolicy
from ._error_parser import ErrorParser
from ._networking import DataResult, NetworkingType, RequestModification, Task

T = TypeVar("T")


class RequestState(str, Enum):
    IDLE = "idle"
    EXECUTING = "executing"
    COMPLETED = "completed"


class Request(ABC, Generic[T]):
    """A fully configured request, executed once with ``start()``.

    Handlers registered with ``on_success``, ``on_failure`` and
    ``on_completion`` run on the ``MAIN`` dispatch context after the outcome
    is known. The request keeps no reference to the client that built it.

    Examples:
        ```python
        (
            client.get("users/1")
            .decode(User)
            .on_success(lambda user: print(user.name))
            .on_failure(lambda error: print(f"failed: {error}"))
            .start()
        )
        ```
    """

    def __init__(
        self,
        *,
        url: URL,
        networking: NetworkingType,
        decoder: JSONDecoderType,
        dispatch_queue_manager: DispatchQueueManagerType,
        method: HTTPMethod,
        errors: Sequence[BaseException],
        error_parser: ErrorParser,
        header: Header,
        custom_request_modification: Optional[RequestModification] = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._url = url
        self._networking = networking
        self._decoder = decoder
        self._dispatch_queue_manager = dispatch_queue_manager
        self._method = method
        self._errors = tuple(errors)
        self._error_parser = error_parser
        self._header = header.copy()
        self._custom_request_modification = custom_request_modification

        self._lock = threading.Lock()
        self._state = RequestState.IDLE
        self._task: Optional[Task] = None
        self._success_handlers: list[Callable[[T], None]] = []
        self._failure_handlers: list[Callable[[BaseException], None]] = []
        self._completion_handlers: list[Callable[[Result[T]], None]] = []
        self._outcome: Optional[Result[T]] = None
        self._delivered = threading.Event()

    @property
    def url(self) -> URL:
        return self._url

    @property
    def method(self) -> HTTPMethod:
        return self._method

    @property
    def header(self) -> Header:
        return self._header.copy()

    @property
    def errors(self) -> tuple[BaseException, ...]:
        return self._errors

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def task(self) -> Optional[Task]:
        """Transport handle, available once the request has been sent."""
        return self._task

    def on_success(self, handler: Callable[[T], None]) -> "Request[T]":
        self._success_handlers.append(handler)
        return self

    def on_failure(self, handler: Callable[[BaseException], None]) -> "Request[T]":
        self._failure_handlers.append(handler)
        return self

    def on_completion(self, handler: Callable[[Result[T]], None]) -> "Request[T]":
        self._completion_handlers.append(handler)
        return self

    def start(self) -> "Request[T]":
        """Execute the request. Starting it a second time does nothing."""
        with self._lock:
            if self._state is not RequestState.IDLE:
                self._logger.warning(
                    f"Request {self._method.name} {self._url} was already started; ignoring"
                )
                return self
            self._state = RequestState.EXECUTING

        if self._errors:
            self._logger.debug(
                f"Skipping {self._method.name} {self._url}: "
                f"{len(self._errors)} error(s) while building the request"
            )
            error = self._errors[0] if len(self._errors) == 1 else MultipleErrors(self._errors)
            self._complete(Failure(error))
            return self

        try:
            self._task = self._networking.make_request(
                url=self._url,
                method=self._method,
                header=self._header,
                custom_request_modification=self._custom_request_modification,
                completion=self._handle_completion,
            )
        except Exception as e:
            self._logger.warning(
                f"Could not send {self._method.name} {self._url}: {e!r}"
            )
            self._complete(Failure(CommonError(ErrorType.UNKNOWN_ERROR, base=e)))
        return self

    def wait(self, timeout: Optional[float] = None) -> Result[T]:
        """Block until the handlers have run and return the outcome.

        Raises:
            RuntimeError: If the request was never started.
            TimeoutError: If the outcome is not delivered within ``timeout`` seconds.
        """
        if self._state is RequestState.IDLE:
            raise RuntimeError("Request has not been started")
        if not self._delivered.wait(timeout):
            raise TimeoutError(f"Request {self._method.name} {self._url} did not complete in {timeout}s")
        return cast(Result[T], self._outcome)

    @abstractmethod
    def _result_from_data(self, data: Optional[bytes]) -> Result[T]:
        """Turn the body of a successful response into the delivered outcome."""

    def _handle_completion(self, result: DataResult) -> None:
        if isinstance(result, Failure):
            outcome: Result[T] = Failure(self._error_parser.parse(result.error))
        elif isinstance(result, Success):
            outcome = self._result_from_data(result.value)
        else:
            outcome = Failure(internal_error(completion=type(result).__name__))
        self._complete(outcome)

    def _complete(self, outcome: Result[T]) -> None:
        with self._lock:
            if self._state is RequestState.COMPLETED:
                return
            self._state = RequestState.COMPLETED
        self._dispatch_queue_manager.perform(
            DispatchContext.MAIN, SyncPolicy.ASYNC, lambda: self._deliver(outcome)
        )

    def _deliver(self, outcome: Result[T]) -> None:
        if isinstance(outcome, Success):
            for success_handler in self._success_handlers:
                self._call_handler(success_handler, outcome.value)
        else:
            for failure_handler in self._failure_handlers:
                self._call_handler(failure_handler, outcome.error)
        for completion_handler in self._completion_handlers:
            self._call_handler(completion_handler, outcome)
        self._outcome = outcome
        self._delivered.set()

    def _call_handler(self, handler: Callable[[Any], None], argument: Any) -> None:
        try:
            handler(argument)
        except Exception:
            self._logger.warning(
                f"Handler {handler!r} for {self._method.name} {self._url} raised",
                exc_info=True,
            )


class VoidRequest(Request[None]):
    """Ignores the response body; succeeds whenever the transport does."""

    def _result_from_data(self, data: Optional[bytes]) -> Result[None]:
        return Success(None)


class DecodableRequest(Request[T]):
    """Requires the response body to decode into ``decode_type``."""

    def __init__(self, decode_type: type[T], **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.decode_type = decode_type

    def _result_from_data(self, data: Optional[bytes]) -> Result[T]:
        if not data:
            return Failure(CommonError(ErrorType.INVALID_RESPONSE))
        try:
            return Success(self._decoder.decode(self.decode_type, data))
        except Exception as e:
            return Failure(CommonError(ErrorType.INVALID_RESPONSE, base=e))


class OptionalDecodableRequest(Request[Optional[T]]):
    """Decodes the response body into ``decode_type`` when it can, else yields ``None``."""

    def __init__(self, decode_type: type[T], **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.decode_type = decode_type

    def _result_from_data(self, data: Optional[bytes]) -> Result[Optional[T]]:
        if not data:
            return Success(None)
        try:
            return Success(self._decoder.decode(self.decode_type, data))
        except Exception as e:
            self._logger.debug(f"Ignoring undecodable response as {self.decode_type!r}: {e}")
            return Success(None)
