"""Pytest configuration and fixtures for netcall tests.

This file provides:
- make_raw_response: RawResponse factory with sensible defaults
- RecordingTransport: in-memory Transport that records every invocation
- run: drive a coroutine to completion from a plain pytest test
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from dataclasses import dataclass, field
from typing import Any, TypeVar

import pytest

from netcall.models import RawResponse, RequestDescriptor, ResponseMetadata

T = TypeVar("T")


def make_raw_response(
    status_code: int | None = 200,
    body: bytes = b"",
    url: str | None = "https://api.example.com/items/42",
) -> RawResponse:
    """Create a RawResponse for testing classification.

    Pass status_code=None for a response that is not HTTP-shaped.
    """
    return RawResponse(body=body, metadata=ResponseMetadata(status_code=status_code, url=url))


def run(coro: Coroutine[Any, Any, T]) -> T:
    return asyncio.run(coro)


@dataclass
class RecordingTransport:
    """Transport double returning a canned response (or raising a canned error).

    Records (operation, request, body) for every invocation so tests can assert
    how many network exchanges happened and what was sent.
    """

    response: RawResponse = field(default_factory=make_raw_response)
    error: Exception | None = None
    calls: list[tuple[str, RequestDescriptor, bytes | None]] = field(default_factory=list)

    async def send(self, request: RequestDescriptor) -> RawResponse:
        self.calls.append(("send", request, request.body))
        return self._respond()

    async def upload(self, request: RequestDescriptor, body: bytes) -> RawResponse:
        self.calls.append(("upload", request, body))
        return self._respond()

    def _respond(self) -> RawResponse:
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()
