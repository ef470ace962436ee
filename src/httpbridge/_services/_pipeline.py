import logging
import threading
from enum import Enum
from typing import Callable, Optional

from ..models.errors import (
    ErrorKind,
    InvalidStateTransitionError,
    RequestValidationError,
    TransportUnavailableError,
)
from ..models.request import RequestSpec
from ..models.response import ResponseResult, ResultHandler, TransportOutcome
from ._builder import RequestBuilder
from ._dispatcher import Dispatcher
from ._normalizer import normalize
from ._transport import Transport
from ._validator import validate

logger = logging.getLogger(__name__)

TransportProvider = Callable[[], Transport]

TRANSPORT_START_FAILURE_MESSAGE = "Failed to start HTTP request"


class RequestState(str, Enum):
    CREATED = "Created"
    VALIDATING = "Validating"
    VALIDATION_FAILED = "ValidationFailed"
    VALIDATED = "Validated"
    DISPATCHED = "Dispatched"
    TRANSPORT_START_FAILED = "TransportStartFailed"
    TRANSPORT_COMPLETED = "TransportCompleted"
    NORMALIZED = "Normalized"
    TERMINAL = "Terminal"


_TRANSITIONS: dict[RequestState, frozenset[RequestState]] = {
    RequestState.CREATED: frozenset({RequestState.VALIDATING}),
    RequestState.VALIDATING: frozenset(
        {RequestState.VALIDATION_FAILED, RequestState.VALIDATED}
    ),
    RequestState.VALIDATION_FAILED: frozenset({RequestState.TERMINAL}),
    # A missing transport ends the request before anything is dispatched.
    RequestState.VALIDATED: frozenset({RequestState.DISPATCHED, RequestState.TERMINAL}),
    RequestState.DISPATCHED: frozenset(
        {RequestState.TRANSPORT_START_FAILED, RequestState.TRANSPORT_COMPLETED}
    ),
    RequestState.TRANSPORT_START_FAILED: frozenset({RequestState.TERMINAL}),
    RequestState.TRANSPORT_COMPLETED: frozenset({RequestState.NORMALIZED}),
    RequestState.NORMALIZED: frozenset({RequestState.TERMINAL}),
    RequestState.TERMINAL: frozenset(),
}


class RequestPipeline:
    """Carries one request from validation to its single callback.

    A pipeline is used once. Every path ends in exactly one delivery to the
    dispatcher, and every failure is logged once before that delivery.
    """

    def __init__(
        self,
        spec: RequestSpec,
        handler: Optional[ResultHandler],
        dispatcher: Dispatcher,
        transport_provider: TransportProvider,
        builder: RequestBuilder,
    ) -> None:
        self._spec = spec
        self._handler = handler
        self._dispatcher = dispatcher
        self._transport_provider = transport_provider
        self._builder = builder
        self._state = RequestState.CREATED
        self._lock = threading.Lock()

    @property
    def state(self) -> RequestState:
        return self._state

    def _transition(self, target: RequestState) -> None:
        with self._lock:
            if target not in _TRANSITIONS[self._state]:
                raise InvalidStateTransitionError(self._state, target)
            self._state = target

    def _finish(self, result: ResponseResult) -> None:
        self._transition(RequestState.TERMINAL)
        handler, self._handler = self._handler, None
        self._dispatcher.deliver(handler, result)

    def run(self) -> None:
        self._transition(RequestState.VALIDATING)
        try:
            method = validate(self._spec)
        except RequestValidationError as e:
            logger.error(f"HTTP request validation failed: {e.message}")
            self._transition(RequestState.VALIDATION_FAILED)
            self._finish(ResponseResult.failure(e.kind, e.message))
            return
        self._transition(RequestState.VALIDATED)

        try:
            transport = self._transport_provider()
        except TransportUnavailableError as e:
            logger.error(e.message)
            self._finish(ResponseResult.failure(ErrorKind.TRANSPORT_UNAVAILABLE, e.message))
            return

        request = self._builder.build(self._spec)
        logger.info(f"Starting HTTP {method.value} request to: {request.url}")
        logger.debug(f"HEADERS: {request.headers}")
        if request.body:
            logger.debug(f"Request body: {request.body}")

        self._transition(RequestState.DISPATCHED)
        if not transport.start(request, self._on_transport_complete):
            logger.error(TRANSPORT_START_FAILURE_MESSAGE)
            self._transition(RequestState.TRANSPORT_START_FAILED)
            self._finish(
                ResponseResult.failure(
                    ErrorKind.TRANSPORT_START_FAILURE, TRANSPORT_START_FAILURE_MESSAGE
                )
            )

    def _claim_completion(self) -> Optional[RequestState]:
        """Move Dispatched -> TransportCompleted atomically.

        Returns None on success, else the state that blocked the move.
        """
        with self._lock:
            if self._state is not RequestState.DISPATCHED:
                return self._state
            self._state = RequestState.TRANSPORT_COMPLETED
            return None

    def _on_transport_complete(self, outcome: TransportOutcome) -> None:
        blocked_by = self._claim_completion()
        if blocked_by is not None:
            logger.warning(
                f"Ignoring transport completion for {outcome.request_url} "
                f"in state {blocked_by.value}"
            )
            return

        result = normalize(outcome)
        self._transition(RequestState.NORMALIZED)

        logger.info(
            f"HTTP request completed. Success: {str(result.success).lower()}, "
            f"Code: {result.status_code}"
        )
        if not result.success:
            logger.warning(f"HTTP request failed: {result.error_message}")
        self._finish(result)
