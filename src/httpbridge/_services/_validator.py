from ..models.errors import ErrorKind, RequestValidationError
from ..models.request import HttpMethod, RequestSpec
from .._utils._urls import check_url

_SUPPORTED_METHODS = frozenset(method.value for method in HttpMethod)

_URL_MESSAGES = {
    ErrorKind.MISSING_URL: "URL cannot be empty",
    ErrorKind.INVALID_URL_SCHEME: "Invalid URL format. URL must start with http:// or https://",
    ErrorKind.INVALID_URL_EMPTY: "Invalid URL format. URL has no host after the scheme",
    ErrorKind.INVALID_URL_CHARACTERS: "Invalid URL format. URL contains invalid characters (space, '<' or '>')",
}


def validate(spec: RequestSpec) -> HttpMethod:
    """Check a request description before any I/O happens.

    Rules are applied in order and the first failure wins.

    Args:
        spec: The request as supplied by the caller.

    Returns:
        HttpMethod: The normalized (upper-cased) method.

    Raises:
        RequestValidationError: With the failing rule's kind and message.
    """
    url_error = check_url(spec.url)
    if url_error is not None:
        raise RequestValidationError(url_error, _URL_MESSAGES[url_error])

    if not spec.method:
        raise RequestValidationError(
            ErrorKind.INVALID_METHOD_EMPTY, "HTTP method cannot be empty"
        )

    method = spec.method.upper()
    if method not in _SUPPORTED_METHODS:
        raise RequestValidationError(
            ErrorKind.UNSUPPORTED_METHOD, f"Unsupported HTTP method: {spec.method}"
        )

    return HttpMethod(method)
