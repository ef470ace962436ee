from typing import Mapping

from ..models.request import HttpMethod, RequestSpec, TransportRequest
from .._utils.constants import (
    DEFAULT_CONTENT_TYPE,
    DEFAULT_USER_AGENT,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
    REQUEST_TIMEOUT_SECONDS,
)


def _has_header(headers: Mapping[str, str], name: str) -> bool:
    lowered = name.lower()
    return any(key.lower() == lowered for key in headers)


class RequestBuilder:
    def __init__(self, user_agent: str = DEFAULT_USER_AGENT) -> None:
        self._user_agent = user_agent

    def default_headers(self, spec: RequestSpec) -> dict[str, str]:
        """Headers added when the caller did not set them."""
        defaults = {HEADER_USER_AGENT: self._user_agent}
        if spec.body:
            defaults[HEADER_CONTENT_TYPE] = DEFAULT_CONTENT_TYPE
        return defaults

    def build(self, spec: RequestSpec) -> TransportRequest:
        headers = dict(spec.headers)
        for name, value in self.default_headers(spec).items():
            if not _has_header(headers, name):
                headers[name] = value

        return TransportRequest(
            url=spec.url,
            method=HttpMethod(spec.method.upper()),
            body=spec.body,
            headers=headers,
            timeout=REQUEST_TIMEOUT_SECONDS,
        )
