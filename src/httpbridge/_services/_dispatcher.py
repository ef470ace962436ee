import asyncio
import logging
import queue
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from ..models.response import ResponseResult, ResultHandler

logger = logging.getLogger(__name__)

_STOP = object()


class Dispatcher(ABC):
    """Runs result handlers on one designated execution context.

    ``deliver`` may be called from any thread; the handler always runs on
    the context owned by the concrete dispatcher.
    """

    @abstractmethod
    def post(self, fn: Callable[..., Any], *args: Any) -> None:
        """Schedule ``fn(*args)`` on the designated context."""

    def deliver(self, handler: Optional[ResultHandler], result: ResponseResult) -> None:
        self.post(self._invoke, handler, result)

    @staticmethod
    def _invoke(handler: Optional[ResultHandler], result: ResponseResult) -> None:
        if handler is None:
            logger.warning(
                f"HTTP response received but no callback was bound "
                f"(success={result.success}, status={result.status_code})"
            )
            return
        try:
            handler(result)
        except Exception:
            logger.exception("HTTP response callback raised")


class CallbackDispatcher(Dispatcher):
    """A thread-safe work queue drained by a single consumer thread.

    The consumer is either a dedicated thread started with :meth:`start`,
    or the host's own thread calling :meth:`process_pending` from its loop
    (a UI or game loop tick, a CLI waiting for its answer). Whichever
    thread consumes first becomes the designated context; consuming from
    any other thread afterwards is an error.

    Tasks run in arrival order.
    """

    def __init__(self) -> None:
        self._tasks: queue.Queue[Any] = queue.Queue()
        self._owner: Optional[int] = None
        self._owner_lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None
        self._stop_requested = False

    @property
    def thread_id(self) -> Optional[int]:
        """Identity of the designated thread, once one has been bound."""
        return self._owner

    def post(self, fn: Callable[..., Any], *args: Any) -> None:
        self._tasks.put((fn, args))

    def _bind_current_thread(self) -> None:
        current = threading.get_ident()
        with self._owner_lock:
            if self._owner is None:
                self._owner = current
            elif self._owner != current:
                raise RuntimeError(
                    "CallbackDispatcher is bound to another thread; "
                    "callbacks must be processed on a single context"
                )

    def process_pending(self, timeout: Optional[float] = 0) -> int:
        """Run queued tasks on the calling thread.

        Args:
            timeout: How long to wait for the first task. ``0`` only drains
                what is already queued, ``None`` waits indefinitely.

        Returns:
            int: Number of tasks run.
        """
        self._bind_current_thread()

        processed = 0
        block = timeout is None or timeout > 0
        while True:
            try:
                if processed == 0 and block:
                    item = self._tasks.get(timeout=timeout)
                else:
                    item = self._tasks.get_nowait()
            except queue.Empty:
                return processed
            if item is _STOP:
                return processed
            fn, args = item
            fn(*args)
            processed += 1

    def start(self, name: str = "httpbridge-dispatch") -> None:
        """Start a dedicated daemon thread that becomes the designated context."""
        if self._thread is not None and self._thread.is_alive():
            return
        ready = threading.Event()

        def _run() -> None:
            self._bind_current_thread()
            ready.set()
            try:
                self._run_forever()
            finally:
                with self._owner_lock:
                    self._owner = None

        self._stop_requested = False
        self._thread = threading.Thread(target=_run, name=name, daemon=True)
        self._thread.start()
        ready.wait()

    def _run_forever(self) -> None:
        while True:
            item = self._tasks.get()
            if item is _STOP:
                return
            fn, args = item
            fn(*args)

    def stop(self, timeout: float = 5.0) -> None:
        """Stop the dedicated thread after it has run everything queued so far.

        The thread stays the designated context until it has actually exited;
        if it is still busy after ``timeout``, calling ``stop`` again waits
        for it once more.
        """
        thread = self._thread
        if thread is None:
            return
        if not self._stop_requested:
            self._stop_requested = True
            self._tasks.put(_STOP)
        if thread is threading.current_thread():
            return
        thread.join(timeout=timeout)
        if thread.is_alive():
            logger.warning(
                f"Dispatcher thread {thread.name} still running after {timeout}s"
            )
            return
        self._thread = None


class AsyncioDispatcher(Dispatcher):
    """Uses an asyncio event loop as the designated context."""

    def __init__(self, loop: asyncio.AbstractEventLoop) -> None:
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop

    def post(self, fn: Callable[..., Any], *args: Any) -> None:
        self._loop.call_soon_threadsafe(fn, *args)


_default_dispatcher: Optional[CallbackDispatcher] = None
_default_lock = threading.Lock()


def get_default_dispatcher() -> CallbackDispatcher:
    """Process-wide dispatcher running on its own thread."""
    global _default_dispatcher
    with _default_lock:
        if _default_dispatcher is None:
            _default_dispatcher = CallbackDispatcher()
            _default_dispatcher.start()
        return _default_dispatcher
