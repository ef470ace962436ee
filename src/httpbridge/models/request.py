from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


@dataclass(frozen=True)
class RequestSpec:
    """Describes a request as the caller supplied it.

    ``method`` is kept as the raw string so that validation can report an
    empty or unsupported verb. Headers are copied into a read-only mapping
    that keeps the caller's ordering and key casing.
    """

    url: str
    method: str = HttpMethod.GET.value
    body: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def __hash__(self) -> int:
        return hash((self.url, self.method, self.body, tuple(self.headers.items())))


@dataclass(frozen=True)
class TransportRequest:
    """A validated request with default policy applied, ready for a transport."""

    url: str
    method: HttpMethod
    timeout: float
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)
