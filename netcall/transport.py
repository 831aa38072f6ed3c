"""Transport Invoker - the only part of netcall that performs I/O.

A Transport makes exactly one network attempt per send/upload. Transport
failures (DNS, TLS, timeouts, resets) are not translated here; they propagate
to CallClient, which reports them as Unknown problems.
"""

from __future__ import annotations

import asyncio
from typing import Any, Protocol, runtime_checkable

import httpx

from netcall.config import TransportConfig
from netcall.models import RawResponse, RequestDescriptor, ResponseMetadata


@runtime_checkable
class Transport(Protocol):
    async def send(self, request: RequestDescriptor) -> RawResponse:
        """Send a request without a body."""
        ...

    async def upload(self, request: RequestDescriptor, body: bytes) -> RawResponse:
        """Send a request with body, replacing any body already on the descriptor."""
        ...


def _build_client_kwargs(config: TransportConfig) -> dict[str, Any]:
    """Build kwargs for httpx.AsyncClient including TLS configuration."""
    kwargs: dict[str, Any] = {
        "headers": config.default_headers,
        "timeout": config.request_timeout,
    }

    # Client certificate (mTLS)
    if config.cert and config.key:
        kwargs["cert"] = (config.cert, config.key)
    elif config.cert:
        kwargs["cert"] = config.cert

    if config.ca_bundle:
        kwargs["verify"] = config.ca_bundle
    elif not config.verify_ssl:
        kwargs["verify"] = False
    # else: use httpx default (True)

    return kwargs


class HttpxTransport:
    """Transport backed by httpx.AsyncClient.

    Usage:
        async with HttpxTransport() as transport:
            client = CallClient(transport=transport)
            ...

    A transport created without a client owns the httpx.AsyncClient it builds
    and closes it in aclose(); a caller-supplied client is left open.
    """

    def __init__(
        self,
        config: TransportConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or TransportConfig()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(**_build_client_kwargs(self._config))

    async def __aenter__(self) -> HttpxTransport:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def send(self, request: RequestDescriptor) -> RawResponse:
        return await self._exchange(request, request.body)

    async def upload(self, request: RequestDescriptor, body: bytes) -> RawResponse:
        return await self._exchange(request, body)

    async def _exchange(self, request: RequestDescriptor, content: bytes | None) -> RawResponse:
        # resource_timeout bounds the whole exchange; request_timeout (on the
        # client) bounds each individual network operation.
        return await asyncio.wait_for(
            self._request(request, content), timeout=self._config.resource_timeout
        )

    async def _request(self, request: RequestDescriptor, content: bytes | None) -> RawResponse:
        http_response = await self._client.request(
            method=request.method.value,
            url=request.url,
            headers=request.headers or None,
            content=content,
        )
        return RawResponse(
            body=http_response.content,
            metadata=ResponseMetadata(
                status_code=http_response.status_code,
                url=str(http_response.request.url),
            ),
        )
