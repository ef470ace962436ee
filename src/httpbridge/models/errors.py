from enum import Enum


class ErrorKind(str, Enum):
    """Every way a request can end without a 2xx response."""

    MISSING_URL = "MissingUrl"
    INVALID_URL_SCHEME = "InvalidUrlScheme"
    INVALID_URL_EMPTY = "InvalidUrlEmpty"
    INVALID_URL_CHARACTERS = "InvalidUrlCharacters"
    INVALID_METHOD_EMPTY = "InvalidMethodEmpty"
    UNSUPPORTED_METHOD = "UnsupportedMethod"
    TRANSPORT_UNAVAILABLE = "TransportUnavailable"
    TRANSPORT_START_FAILURE = "TransportStartFailure"
    NETWORK_FAILURE = "NetworkFailure"
    HTTP_ERROR = "HttpError"


VALIDATION_ERROR_KINDS = frozenset(
    {
        ErrorKind.MISSING_URL,
        ErrorKind.INVALID_URL_SCHEME,
        ErrorKind.INVALID_URL_EMPTY,
        ErrorKind.INVALID_URL_CHARACTERS,
        ErrorKind.INVALID_METHOD_EMPTY,
        ErrorKind.UNSUPPORTED_METHOD,
    }
)


class HttpBridgeError(Exception):
    """Base class for errors raised inside httpbridge."""


class RequestValidationError(HttpBridgeError):
    """Raised when a request description is rejected before any I/O.

    Never escapes the public API: the pipeline turns it into a failed
    ``ResponseResult`` carrying ``message`` verbatim.
    """

    def __init__(self, kind: ErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)


class TransportUnavailableError(HttpBridgeError):
    def __init__(self, message: str = "HTTP transport not available"):
        self.message = message
        super().__init__(self.message)


class InvalidStateTransitionError(HttpBridgeError):
    """Raised when a request pipeline is driven out of order."""

    def __init__(self, current, target):
        self.current = current
        self.target = target
        super().__init__(f"Cannot move request from {current.value} to {target.value}")
