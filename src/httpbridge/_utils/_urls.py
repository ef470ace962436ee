from typing import Optional

from ..models.errors import ErrorKind
from .constants import HTTP_SCHEME, HTTPS_SCHEME

_INVALID_URL_CHARACTERS = (" ", "<", ">")


def _strip_scheme(url: str) -> Optional[str]:
    # Scheme matching ignores case: "HTTPS://" is accepted like "https://".
    lowered = url.lower()
    for scheme in (HTTPS_SCHEME, HTTP_SCHEME):
        if lowered.startswith(scheme):
            return url[len(scheme) :]
    return None


def check_url(url: str) -> Optional[ErrorKind]:
    """Return the first rule a URL breaks, or None if it is well formed."""
    if not url:
        return ErrorKind.MISSING_URL

    remainder = _strip_scheme(url)
    if remainder is None:
        return ErrorKind.INVALID_URL_SCHEME
    if not remainder:
        return ErrorKind.INVALID_URL_EMPTY
    if any(char in remainder for char in _INVALID_URL_CHARACTERS):
        return ErrorKind.INVALID_URL_CHARACTERS
    return None


def is_valid_url(url: str) -> bool:
    """Check whether a string looks like an http(s) URL the client will accept."""
    return check_url(url) is None


def extract_domain(url: str) -> str:
    """Extract the host part of a URL.

    The scheme is stripped, then the remainder is cut at the first ``/`` or
    ``?``. Anything that is not prefixed with a scheme is treated as if the
    scheme had already been removed.

    Example:
        >>> extract_domain("https://api.example.com/v1/data?x=1")
        'api.example.com'
    """
    domain = _strip_scheme(url)
    if domain is None:
        domain = url

    cut_positions = [pos for pos in (domain.find("/"), domain.find("?")) if pos >= 0]
    if cut_positions:
        domain = domain[: min(cut_positions)]
    return domain
