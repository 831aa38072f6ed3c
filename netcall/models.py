"""Internal data models for netcall.

Request/response shapes passed between the request builder, transports and the
response classifier, plus the Success/Failure result returned to callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

from netcall.problems import Problem

T = TypeVar("T")

# Sentinel for "no request body was supplied". None is a valid body (JSON null).
NOTHING = object()


class HTTPMethod(str, Enum):
    """HTTP methods supported by the call helper."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def requires_body(self) -> bool:
        return self in (HTTPMethod.POST, HTTPMethod.PUT)


# =============================================================================
# Transport-level Models
# =============================================================================


@dataclass
class RequestDescriptor:
    """One outgoing request, built fresh for every call.

    Header keys keep the casing the caller supplied; lookups against them are
    case-insensitive (see request_builder.merge_headers).
    """

    method: HTTPMethod
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None


@dataclass(frozen=True)
class ResponseMetadata:
    """Status information for a raw response.

    status_code is None when the transport produced something that is not an
    HTTP response.
    """

    status_code: int | None
    url: str | None = None

    @property
    def is_http(self) -> bool:
        return self.status_code is not None


@dataclass(frozen=True)
class RawResponse:
    """Undecoded response body plus its metadata, as returned by a transport."""

    body: bytes
    metadata: ResponseMetadata


# =============================================================================
# Call Results
# =============================================================================


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful call. value is the decoded body or the bare status code."""

    value: T


@dataclass(frozen=True)
class Failure:
    """Failed call carrying exactly one Problem."""

    problem: Problem


CallResult = Success[T] | Failure
