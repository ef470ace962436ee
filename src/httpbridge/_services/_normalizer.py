import logging
from types import MappingProxyType
from typing import Iterable

from ..models.errors import ErrorKind
from ..models.response import ResponseResult, TransportOutcome

logger = logging.getLogger(__name__)

HEADER_SEPARATOR = ": "

STATUS_DESCRIPTIONS = MappingProxyType(
    {
        # 2xx
        200: "OK",
        201: "Created",
        202: "Accepted",
        204: "No Content",
        # 3xx
        301: "Moved Permanently",
        302: "Found",
        304: "Not Modified",
        # 4xx
        400: "Bad Request",
        401: "Unauthorized",
        403: "Forbidden",
        404: "Not Found",
        405: "Method Not Allowed",
        408: "Request Timeout",
        409: "Conflict",
        422: "Unprocessable Entity",
        429: "Too Many Requests",
        # 5xx
        500: "Internal Server Error",
        501: "Not Implemented",
        502: "Bad Gateway",
        503: "Service Unavailable",
        504: "Gateway Timeout",
    }
)


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 300


def describe_status(status_code: int) -> str:
    """Human-readable description of a status code, e.g. ``"Not Found"``.

    Codes missing from the table fall back to ``"HTTP <code>"``.
    """
    return STATUS_DESCRIPTIONS.get(status_code, f"HTTP {status_code}")


def parse_header_lines(lines: Iterable[str]) -> dict[str, str]:
    """Parse raw ``"Name: value"`` lines into a mapping.

    Lines without the ``": "`` separator are dropped. When a name repeats,
    the first occurrence wins.
    """
    headers: dict[str, str] = {}
    for line in lines:
        name, separator, value = line.partition(HEADER_SEPARATOR)
        if not separator:
            logger.debug(f"Dropping malformed header line: {line!r}")
            continue
        headers.setdefault(name, value)
    return headers


def normalize(outcome: TransportOutcome) -> ResponseResult:
    """Turn a raw transport outcome into the result handed to callers."""
    if not outcome.succeeded_at_transport_level:
        message = "Network error: Request failed to complete"
        if outcome.request_url:
            message += f" (URL: {outcome.request_url})"
        return ResponseResult(
            success=False,
            status_code=0,
            error_message=message,
            error_kind=ErrorKind.NETWORK_FAILURE,
            elapsed_seconds=outcome.elapsed_seconds,
        )

    success = is_success_status(outcome.status_code)
    error_message = ""
    if not success:
        error_message = (
            f"HTTP Error {outcome.status_code}: {describe_status(outcome.status_code)}"
        )

    return ResponseResult(
        success=success,
        status_code=outcome.status_code,
        body=outcome.raw_body,
        headers=parse_header_lines(outcome.raw_header_lines),
        error_message=error_message,
        error_kind=None if success else ErrorKind.HTTP_ERROR,
        elapsed_seconds=outcome.elapsed_seconds,
    )
