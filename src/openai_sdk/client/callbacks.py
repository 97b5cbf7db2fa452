"""
Callback call style

Every endpoint operation is written once as a coroutine. The callback
variants run that same coroutine as an independent task and hand its
outcome to a callback, so the two styles cannot drift apart.
"""

import asyncio
import concurrent.futures
import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Coroutine, Generic, Optional, TypeVar, Union


T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CallResult(Generic[T]):
    """Terminal outcome of one call: a value or an error, never both"""
    value: Optional[T] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise the error"""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


Callback = Callable[[CallResult[Any]], None]


class _CallState:
    """
    Delivery state shared by a handle and its done-callback

    Cancelling and delivering both go through one lock, so whichever
    claims the call first wins: a cancel that returns True means the
    callback will never run, and a claimed delivery makes cancel return
    False.
    """

    def __init__(self, callback: Callback) -> None:
        self._callback = callback
        self._lock = threading.Lock()
        self._claimed = False
        self.cancel_requested = threading.Event()
        self.settled = threading.Event()

    def request_cancel(self) -> bool:
        with self._lock:
            if self._claimed or self.cancel_requested.is_set():
                return False
            self.cancel_requested.set()
            return True

    def deliver(self, future: Any) -> None:
        try:
            with self._lock:
                if future.cancelled() or self.cancel_requested.is_set():
                    logger.debug("Call cancelled, dropping result")
                    return
                self._claimed = True

            error = future.exception()
            if error is not None:
                self._callback(CallResult(error=error))
            else:
                self._callback(CallResult(value=future.result()))
        finally:
            self.settled.set()


class CallHandle:
    """
    Handle for a call started in callback style

    Cancellation is best-effort: once ``cancel()`` returns True, the
    callback will not be invoked, but an HTTP exchange already running in
    a worker thread is not interrupted.
    """

    def __init__(
        self,
        future: Union["asyncio.Task[Any]", "concurrent.futures.Future[Any]"],
        state: _CallState,
    ) -> None:
        self._future = future
        self._state = state

    def cancel(self) -> bool:
        """Request cancellation; returns False if the result was already delivered"""
        if not self._state.request_cancel():
            return False
        if isinstance(self._future, asyncio.Task):
            self._future.get_loop().call_soon_threadsafe(self._future.cancel)
        else:
            self._future.cancel()
        return True

    def cancelled(self) -> bool:
        return self._state.cancel_requested.is_set()

    def done(self) -> bool:
        return self._future.done()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the callback has run or the call was cancelled

        Only valid for calls started outside a running event loop; inside a
        loop, await the call directly instead.

        Returns:
            True if the call settled within the timeout
        """
        if isinstance(self._future, asyncio.Task):
            raise RuntimeError(
                "wait() cannot block on a call scheduled on a running event loop"
            )
        return self._state.settled.wait(timeout)


_loop_lock = threading.Lock()
_background_loop: Optional[asyncio.AbstractEventLoop] = None


def _get_background_loop() -> asyncio.AbstractEventLoop:
    """Event loop thread used for callback calls made from synchronous code"""
    global _background_loop

    with _loop_lock:
        if _background_loop is None or _background_loop.is_closed():
            loop = asyncio.new_event_loop()
            thread = threading.Thread(
                target=loop.run_forever,
                name="openai-sdk-callbacks",
                daemon=True,
            )
            thread.start()
            _background_loop = loop
            logger.debug("Started background event loop for callback calls")
        return _background_loop


def watch(
    future: Union["asyncio.Task[Any]", "concurrent.futures.Future[Any]"],
    callback: Callback,
) -> CallHandle:
    """Deliver the outcome of an already started future to a callback"""
    state = _CallState(callback)
    future.add_done_callback(state.deliver)
    return CallHandle(future, state)


def submit(operation: Coroutine[Any, Any, T], callback: Callback) -> CallHandle:
    """
    Start an operation and deliver its outcome to a callback

    Inside a running event loop the operation becomes a task on that loop;
    from synchronous code it runs on a shared background loop thread.

    Args:
        operation: Coroutine of the direct call
        callback: Receives exactly one CallResult

    Returns:
        Handle that can cancel the delivery
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return watch(
            asyncio.run_coroutine_threadsafe(operation, _get_background_loop()),
            callback,
        )

    return watch(loop.create_task(operation), callback)
