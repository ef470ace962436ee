from ._config import Config
from ._logging import configure_logging
from ._services import (
    AsyncioDispatcher,
    CallbackDispatcher,
    HttpxTransport,
    Transport,
    describe_status,
    get_default_dispatcher,
    is_success_status,
)
from ._utils import extract_domain, is_valid_url
from .client import (
    HttpClient,
    make_get_request,
    make_post_request,
    make_request_with_headers,
)
from .models import (
    ErrorKind,
    HttpMethod,
    RequestSpec,
    ResponseResult,
    TransportOutcome,
)

__all__ = [
    "AsyncioDispatcher",
    "CallbackDispatcher",
    "Config",
    "ErrorKind",
    "HttpClient",
    "HttpMethod",
    "HttpxTransport",
    "RequestSpec",
    "ResponseResult",
    "Transport",
    "TransportOutcome",
    "configure_logging",
    "describe_status",
    "extract_domain",
    "get_default_dispatcher",
    "is_success_status",
    "is_valid_url",
    "make_get_request",
    "make_post_request",
    "make_request_with_headers",
]
