"""Problem taxonomy - every failure of a call is reported as exactly one Problem.

Problems are exceptions so they can be raised from deep inside the pipeline
(codec, classifier) and caught once at the CallClient boundary, where they are
returned inside a Failure. Callers match on the concrete class to get at the
embedded context:

    match result:
        case Failure(BadResponse(code=404, body=body)):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from netcall.models import HTTPMethod


class Problem(Exception):
    """Base class for all call problems."""

    @property
    def description(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.description


def _describe_cause(cause: BaseException | None) -> str:
    if cause is None:
        return "nil error"
    return str(cause) or type(cause).__name__


@dataclass(eq=False)
class BadResponse(Problem):
    """Response status was outside the 2xx range. body is the raw payload."""

    code: int
    body: bytes

    @property
    def description(self) -> str:
        return f"Bad response code: {self.code}"


@dataclass(eq=False)
class CannotDecodeResponse(Problem):
    """Call succeeded but the response body did not decode into the requested shape."""

    cause: BaseException
    body: bytes

    @property
    def description(self) -> str:
        return f"Cannot decode response body with error: {_describe_cause(self.cause)}"


@dataclass(eq=False)
class CannotEncodeBody(Problem):
    """The request body could not be serialized."""

    cause: BaseException
    value: Any

    @property
    def description(self) -> str:
        return f"Cannot encode request body with error: {_describe_cause(self.cause)}"


@dataclass(eq=False)
class MissingBody(Problem):
    """A method that requires a request body was invoked without one."""

    method: HTTPMethod

    @property
    def description(self) -> str:
        return f"Missing body for HTTP method {self.method.value}"


@dataclass(eq=False)
class InvalidResponseType(Problem):
    """The transport returned something that is not an HTTP response."""

    @property
    def description(self) -> str:
        return "Response type is not an HTTP response"


@dataclass(eq=False)
class Unknown(Problem):
    """Any failure not covered by another kind (transport errors, for example)."""

    cause: BaseException | None

    @property
    def description(self) -> str:
        return f"Unclassified error: {_describe_cause(self.cause)}"


@dataclass(eq=False)
class BadURL(Problem):
    """A URL string was rejected by parse_url. Never raised by the call pipeline."""

    url_string: str

    @property
    def description(self) -> str:
        return f"Invalid string passed as for URL: {self.url_string}"
