import asyncio
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from enum import Enum
from logging import getLogger
from typing import Callable, Optional, Protocol

from .._utils.constants import LOGGER_NAME

_local = threading.local()


class DispatchContext(str, Enum):
    MAIN = "main"
    BACKGROUND = "background"


class SyncPolicy(str, Enum):
    SYNC = "sync"
    ASYNC = "async"


class DispatchQueueManagerType(Protocol):
    def perform(
        self,
        context: DispatchContext,
        sync_policy: SyncPolicy,
        action: Callable[[], None],
    ) -> None: ...


def _mark_context(context: DispatchContext) -> None:
    _local.context = context


class DispatchQueueManager:
    """Runs callbacks on a designated execution context.

    ``MAIN`` is a single worker thread, so every completion handler of every
    request runs serialized on it, whichever thread the transport used. When
    an asyncio event loop is given, ``MAIN`` callbacks are scheduled on that
    loop instead. ``BACKGROUND`` is a regular thread pool.
    """

    def __init__(
        self,
        loop: Optional[asyncio.AbstractEventLoop] = None,
        max_background_workers: Optional[int] = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._loop = loop
        self._main = ThreadPoolExecutor(
            max_workers=1,
            thread_name_prefix="restler-main",
            initializer=_mark_context,
            initargs=(DispatchContext.MAIN,),
        )
        self._background = ThreadPoolExecutor(
            max_workers=max_background_workers,
            thread_name_prefix="restler-background",
            initializer=_mark_context,
            initargs=(DispatchContext.BACKGROUND,),
        )

    def perform(
        self,
        context: DispatchContext,
        sync_policy: SyncPolicy,
        action: Callable[[], None],
    ) -> None:
        if context is DispatchContext.MAIN and self._loop is not None:
            self._perform_on_loop(self._loop, sync_policy, action)
            return

        if sync_policy is SyncPolicy.SYNC and getattr(_local, "context", None) is context:
            action()
            return

        executor = self._main if context is DispatchContext.MAIN else self._background
        try:
            future = executor.submit(action)
        except RuntimeError:
            # executor already shut down
            self._logger.warning(
                f"{context.value} context is shut down; running action on the calling thread"
            )
            action()
            return
        if sync_policy is SyncPolicy.SYNC:
            future.result()
        else:
            future.add_done_callback(self._log_exception)

    def _perform_on_loop(
        self,
        loop: asyncio.AbstractEventLoop,
        sync_policy: SyncPolicy,
        action: Callable[[], None],
    ) -> None:
        if sync_policy is SyncPolicy.ASYNC:
            loop.call_soon_threadsafe(action)
            return

        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None
        if running is loop:
            action()
            return

        future: Future[None] = Future()

        def run() -> None:
            try:
                action()
            except BaseException as e:
                future.set_exception(e)
            else:
                future.set_result(None)

        loop.call_soon_threadsafe(run)
        future.result()

    def _log_exception(self, future: Future) -> None:
        if future.cancelled():
            return
        exception = future.exception()
        if exception is not None:
            self._logger.error(
                "Dispatched action raised an exception",
                exc_info=(type(exception), exception, exception.__traceback__),
            )

    def shutdown(self, wait: bool = True) -> None:
        self._main.shutdown(wait=wait)
        self._background.shutdown(wait=wait)
