import threading
from concurrent.futures import CancelledError, Future, ThreadPoolExecutor
from logging import getLogger
from typing import Callable, Optional, Protocol, Union

from httpx import URL, Client, HTTPError
from httpx import Request as HTTPXRequest

from .._config import Config
from .._utils import masked_headers
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import HEADER_USER_AGENT, LOGGER_NAME, USER_AGENT
from ..models.errors import CommonError, ErrorType, NetworkError
from ..models.header import Header
from ..models.method import HTTPMethod
from ..models.response import Response
from ..models.result import Failure, Result, Success

DataResult = Result[Optional[bytes]]
DataCompletion = Callable[[DataResult], None]
RequestModification = Callable[[HTTPXRequest], None]


class Task:
    """Handle to one in-flight transport call.

    Cancelling a task that has not been sent yet prevents it from being sent;
    cancelling one that is already on the wire discards its response. Either
    way the request completes with a failure.
    """

    def __init__(self, request: HTTPXRequest) -> None:
        self.request = request
        self._future: Optional[Future] = None
        self._cancelled = threading.Event()

    def _attach(self, future: Future) -> None:
        self._future = future

    @property
    def url(self) -> URL:
        return self.request.url

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        self._cancelled.set()
        if self._future is not None:
            self._future.cancel()


class NetworkingType(Protocol):
    def make_request(
        self,
        url: URL,
        method: HTTPMethod,
        header: Header,
        custom_request_modification: Optional[RequestModification],
        completion: DataCompletion,
    ) -> Optional[Task]: ...


class Networking:
    """httpx-backed transport.

    Requests are sent from a thread pool; ``completion`` is called exactly
    once from that pool with the raw body on a 2xx response or with a
    ``NetworkError`` otherwise.
    """

    def __init__(
        self,
        config: Config,
        *,
        client: Optional[Client] = None,
        max_workers: Optional[int] = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config

        self._client = client or Client(
            **get_httpx_client_kwargs(config),
            headers={HEADER_USER_AGENT: USER_AGENT},
        )
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="restler-networking"
        )

    def build_request(self, url: Union[URL, str], method: HTTPMethod, header: Header) -> HTTPXRequest:
        return self._client.build_request(
            method.name,
            url,
            params=list(method.query) or None,
            content=method.content,
            headers=header.raw,
        )

    def make_request(
        self,
        url: URL,
        method: HTTPMethod,
        header: Header,
        custom_request_modification: Optional[RequestModification],
        completion: DataCompletion,
    ) -> Optional[Task]:
        try:
            request = self.build_request(url, method, header)
            if custom_request_modification is not None:
                custom_request_modification(request)
        except Exception as e:
            self._logger.debug(f"Could not build request {method.name} {url}: {e}")
            completion(Failure(CommonError(ErrorType.INVALID_PARAMETERS, base=e)))
            return None

        task = Task(request)
        future = self._executor.submit(self._perform, task, completion)
        task._attach(future)
        future.add_done_callback(
            lambda f: self._handle_cancelled(f, task, completion)
        )
        return task

    def _perform(self, task: Task, completion: DataCompletion) -> None:
        request = task.request
        self._logger.debug(f"Request: {request.method} {request.url}")
        self._logger.debug(f"HEADERS: {masked_headers(dict(request.headers))}")

        try:
            response = self._client.send(request)
        except HTTPError as e:
            self._logger.debug(f"Request {request.method} {request.url} failed: {e!r}")
            result: DataResult = Failure(NetworkError(str(e) or type(e).__name__, Response(), base=e))
        except Exception as e:
            self._logger.exception(f"Unexpected error sending {request.method} {request.url}")
            result = Failure(CommonError(ErrorType.UNKNOWN_ERROR, base=e))
        else:
            self._logger.debug(f"Response: {response.status_code} {request.method} {request.url}")
            raw = Response(
                status_code=response.status_code,
                headers=response.headers,
                data=response.content or None,
            )
            if raw.is_successful:
                result = Success(raw.data)
            else:
                self._logger.debug(f"Response body: {raw.text}")
                result = Failure(
                    NetworkError(
                        f"{response.status_code} {response.reason_phrase} for {request.method} {request.url}",
                        raw,
                    )
                )

        if task.cancelled:
            result = Failure(self._cancellation_error(task))
        completion(result)

    def _handle_cancelled(self, future: Future, task: Task, completion: DataCompletion) -> None:
        # a future cancelled before it ran never reaches _perform
        if future.cancelled():
            completion(Failure(self._cancellation_error(task)))

    def _cancellation_error(self, task: Task) -> NetworkError:
        return NetworkError(
            f"Request {task.request.method} {task.request.url} was cancelled",
            Response(),
            base=CancelledError(),
        )

    def close(self) -> None:
        """Close the HTTP client and stop accepting requests."""
        try:
            self._executor.shutdown(wait=True)
        finally:
            self._client.close()
