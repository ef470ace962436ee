import threading
from typing import Callable, Optional

from httpbridge.models.request import TransportRequest
from httpbridge.models.response import TransportOutcome


class FakeTransport:
    """Transport double that completes from its own thread.

    ``outcome`` decides what is reported back; ``accept=False`` makes
    ``start`` refuse every request.
    """

    def __init__(
        self,
        outcome: Optional[Callable[[TransportRequest], TransportOutcome]] = None,
        accept: bool = True,
    ) -> None:
        self._outcome = outcome or (
            lambda request: TransportOutcome(
                succeeded_at_transport_level=True,
                status_code=200,
                raw_body="ok",
                request_url=request.url,
            )
        )
        self.accept = accept
        self.requests: list[TransportRequest] = []
        self.completion_threads: list[int] = []
        self.closed = False
        self._threads: list[threading.Thread] = []

    def start(self, request, on_complete) -> bool:
        self.requests.append(request)
        if not self.accept:
            return False

        def _complete() -> None:
            self.completion_threads.append(threading.get_ident())
            on_complete(self._outcome(request))

        thread = threading.Thread(target=_complete, daemon=True)
        self._threads.append(thread)
        thread.start()
        return True

    def close(self) -> None:
        for thread in self._threads:
            thread.join(timeout=5)
        self.closed = True


class Recorder:
    """Continuation that remembers every call and the thread it ran on."""

    def __init__(self) -> None:
        self.calls: list[tuple[bool, int, str, str]] = []
        self.threads: list[int] = []

    def __call__(self, success: bool, status_code: int, body: str, error_message: str) -> None:
        self.calls.append((success, status_code, body, error_message))
        self.threads.append(threading.get_ident())
