from .errors import (
    ErrorKind,
    HttpBridgeError,
    InvalidStateTransitionError,
    RequestValidationError,
    TransportUnavailableError,
)
from .request import HttpMethod, RequestSpec, TransportRequest
from .response import Continuation, ResponseResult, ResultHandler, TransportOutcome

__all__ = [
    "Continuation",
    "ErrorKind",
    "HttpBridgeError",
    "HttpMethod",
    "InvalidStateTransitionError",
    "RequestSpec",
    "RequestValidationError",
    "ResponseResult",
    "ResultHandler",
    "TransportOutcome",
    "TransportRequest",
    "TransportUnavailableError",
]
