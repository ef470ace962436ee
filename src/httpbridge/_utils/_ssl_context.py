import os
import ssl
from typing import Any, Optional

from .constants import REQUEST_TIMEOUT_SECONDS

_CA_FILE_VARIABLES = ("SSL_CERT_FILE", "REQUESTS_CA_BUNDLE")
_CA_DIR_VARIABLE = "SSL_CERT_DIR"


def _env_path(variable: str) -> Optional[str]:
    value = os.environ.get(variable)
    if not value:
        return None
    return os.path.expanduser(os.path.expandvars(value))


def create_ssl_context() -> ssl.SSLContext:
    """TLS context for outgoing requests.

    Uses the operating system trust store through ``truststore`` when it is
    installed. Otherwise a CA file from ``SSL_CERT_FILE`` or
    ``REQUESTS_CA_BUNDLE`` is used, falling back to the ``certifi`` bundle,
    plus an optional ``SSL_CERT_DIR``.
    """
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        import certifi

        ca_file = next(
            (path for path in map(_env_path, _CA_FILE_VARIABLES) if path),
            certifi.where(),
        )
        return ssl.create_default_context(
            cafile=ca_file, capath=_env_path(_CA_DIR_VARIABLE)
        )


def get_httpx_client_kwargs() -> dict[str, Any]:
    """Keyword arguments shared by every httpx client the transport creates."""
    return {
        "verify": create_ssl_context(),
        "timeout": REQUEST_TIMEOUT_SECONDS,
        "follow_redirects": False,
    }
