from ._builder import RequestBuilder
from ._dispatcher import (
    AsyncioDispatcher,
    CallbackDispatcher,
    Dispatcher,
    get_default_dispatcher,
)
from ._normalizer import describe_status, is_success_status, normalize, parse_header_lines
from ._pipeline import RequestPipeline, RequestState
from ._transport import HttpxTransport, Transport
from ._validator import validate

__all__ = [
    "AsyncioDispatcher",
    "CallbackDispatcher",
    "Dispatcher",
    "HttpxTransport",
    "RequestBuilder",
    "RequestPipeline",
    "RequestState",
    "Transport",
    "describe_status",
    "get_default_dispatcher",
    "is_success_status",
    "normalize",
    "parse_header_lines",
    "validate",
]
