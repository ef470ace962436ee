import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Optional, Protocol

from httpx import Client, HTTPError, Response

from ..models.request import TransportRequest
from ..models.response import TransportOutcome
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import DEFAULT_MAX_WORKERS

logger = logging.getLogger(__name__)

CompletionCallback = Callable[[TransportOutcome], None]


class Transport(Protocol):
    """Executes requests off the caller's thread.

    ``start`` returns whether the request was accepted. When it returns
    True, ``on_complete`` is called exactly once, from any thread. When it
    returns False, ``on_complete`` is never called.
    """

    def start(self, request: TransportRequest, on_complete: CompletionCallback) -> bool:
        ...

    def close(self) -> None:
        ...


def _header_lines(response: Response) -> list[str]:
    # raw keeps wire casing and repeated headers
    encoding = response.headers.encoding
    return [
        f"{name.decode(encoding)}: {value.decode(encoding)}"
        for name, value in response.headers.raw
    ]


class HttpxTransport:
    """Runs requests on a thread pool with a shared ``httpx.Client``."""

    def __init__(
        self,
        max_workers: int = DEFAULT_MAX_WORKERS,
        client_kwargs: Optional[dict[str, Any]] = None,
    ) -> None:
        self._client = Client(**(client_kwargs or get_httpx_client_kwargs()))
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="httpbridge-transport"
        )
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def start(self, request: TransportRequest, on_complete: CompletionCallback) -> bool:
        with self._lock:
            if self._closed:
                logger.debug(f"Transport closed, refusing {request.method.value} {request.url}")
                return False
            try:
                self._executor.submit(self._execute, request, on_complete)
            except RuntimeError as e:
                logger.debug(f"Executor refused request: {e}")
                return False
        return True

    def _execute(self, request: TransportRequest, on_complete: CompletionCallback) -> None:
        outcome = self._perform(request)
        try:
            on_complete(outcome)
        except Exception:
            # submitted futures are never awaited
            logger.exception(f"Completion handling failed for {request.url}")

    def _perform(self, request: TransportRequest) -> TransportOutcome:
        """Send one request. Never raises: any failure is a transport-level one."""
        started = time.monotonic()
        try:
            response = self._client.request(
                request.method.value,
                request.url,
                headers=request.headers,
                content=request.body.encode("utf-8") if request.body else None,
                timeout=request.timeout,
            )
            return TransportOutcome(
                succeeded_at_transport_level=True,
                status_code=response.status_code,
                raw_header_lines=_header_lines(response),
                raw_body=response.text,
                elapsed_seconds=time.monotonic() - started,
                request_url=request.url,
            )
        except HTTPError as e:
            logger.debug(f"Transport error for {request.url}: {e!r}")
        except Exception:
            # httpx.InvalidURL, UnicodeEncodeError from header values, ...
            logger.exception(f"Could not send request to {request.url}")

        return TransportOutcome(
            succeeded_at_transport_level=False,
            elapsed_seconds=time.monotonic() - started,
            request_url=request.url,
        )

    def close(self) -> None:
        """Stop accepting requests, wait for in-flight ones, release the client."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._executor.shutdown(wait=True)
        self._client.close()
