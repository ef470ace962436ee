from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import ErrorKind


class TransportOutcome(BaseModel):
    """Raw completion data handed back by a transport.

    Nothing here is trusted: header lines are unparsed and the status code
    is whatever the server (or the lack of one) produced.
    """

    model_config = ConfigDict(frozen=True)

    succeeded_at_transport_level: bool
    status_code: int = 0
    raw_header_lines: list[str] = Field(default_factory=list)
    raw_body: str = ""
    elapsed_seconds: float = 0.0
    request_url: str = ""


class ResponseResult(BaseModel):
    """The normalized outcome of one request, delivered to the caller."""

    model_config = ConfigDict(frozen=True)

    success: bool
    status_code: int = 0
    body: str = ""
    headers: dict[str, str] = Field(default_factory=dict)
    error_message: str = ""
    error_kind: Optional[ErrorKind] = None
    elapsed_seconds: float = 0.0

    @model_validator(mode="after")
    def _check_error_message(self) -> "ResponseResult":
        if self.success and self.error_message:
            raise ValueError("successful results cannot carry an error message")
        if not self.success and not self.error_message:
            raise ValueError("failed results must carry an error message")
        return self

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "ResponseResult":
        """Build a result for a request that never got a response."""
        return cls(success=False, status_code=0, error_message=message, error_kind=kind)


Continuation = Callable[[bool, int, str, str], None]
ResultHandler = Callable[[ResponseResult], None]
