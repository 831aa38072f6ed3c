"""Call Orchestrator - the public entry points of netcall.

CallClient sequences encode -> build -> send/upload -> classify -> decode and
guarantees that every outcome is a Success or a Failure holding exactly one
Problem. Nothing raised by a codec or transport escapes a call.

Usage:
    async with CallClient.from_config(config) as client:
        result = await client.call(url, HTTPMethod.GET, Item)
        match result:
            case Success(item):
                ...
            case Failure(problem):
                ...
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from netcall.codec import Codec, JSONCodec
from netcall.config import NetcallConfig
from netcall.logs import CallLogger, DataDirection, LogStyle
from netcall.models import NOTHING, CallResult, Failure, HTTPMethod, RawResponse
from netcall.problems import CannotEncodeBody, MissingBody, Problem, Unknown
from netcall.request_builder import make_request
from netcall.response import classify, classify_and_decode
from netcall.transport import HttpxTransport, Transport

T = TypeVar("T")


class CallClient:
    """Makes HTTP calls with a default transport, codec and log style.

    Per-call transport/codec arguments override the defaults for that call only.
    The client holds no per-call state; concurrent calls may share it.

    Cancelling the task running a call raises asyncio.CancelledError as usual;
    cancellation is not reported as a Failure.
    """

    def __init__(
        self,
        transport: Transport | None = None,
        codec: Codec | None = None,
        log_style: LogStyle = LogStyle.COMPLETE,
    ) -> None:
        """Initialize the client.

        Args:
            transport: Default transport. If None, an HttpxTransport with default
                       settings is created and closed by aclose().
            codec: Default codec. If None, a JSONCodec with default settings.
            log_style: Which call events are logged.
        """
        self._owns_transport = transport is None
        self._transport: Transport = transport or HttpxTransport()
        self._codec: Codec = codec or JSONCodec()
        self._logger = CallLogger(log_style)

    @classmethod
    def from_config(cls, config: NetcallConfig) -> CallClient:
        """Build a client (and the transport it owns) from configuration."""
        client = cls(
            transport=HttpxTransport(config.transport),
            codec=JSONCodec(config.codec),
            log_style=config.get_log_style(),
        )
        client._owns_transport = True
        return client

    async def __aenter__(self) -> CallClient:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the default transport if this client created it."""
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            await self._transport.aclose()

    @property
    def log_style(self) -> LogStyle:
        return self._logger.style

    async def call(
        self,
        url: str,
        method: HTTPMethod,
        response_type: type[T] | Any,
        *,
        headers: Mapping[str, str] | None = None,
        body: Any = NOTHING,
        transport: Transport | None = None,
        codec: Codec | None = None,
    ) -> CallResult[T]:
        """Make a call and decode the response body into response_type.

        Args:
            url: Target URL, used as-is.
            method: HTTP method.
            response_type: Shape to decode a successful response body into.
            headers: Request headers.
            body: Request body value. Omit for a body-less call; None is sent
                  as JSON null.
            transport: Transport override for this call.
            codec: Codec override for this call (encodes body, decodes response).

        Returns:
            Success with the decoded value, or Failure with one Problem.
        """
        codec = codec or self._codec
        try:
            raw = await self._exchange(url, method, headers, body, transport, codec)
            return classify_and_decode(raw, response_type, codec, self._logger)
        except Problem as problem:
            return Failure(problem)
        except Exception as e:
            return Failure(Unknown(e))

    async def call_without_response(
        self,
        url: str,
        method: HTTPMethod,
        *,
        headers: Mapping[str, str] | None = None,
        body: Any = NOTHING,
        transport: Transport | None = None,
        codec: Codec | None = None,
    ) -> CallResult[int]:
        """Make a call and ignore the body of a successful response.

        Arguments are as for call(). codec is only used to encode body.

        Returns:
            Success with the status code, or Failure with one Problem.
        """
        codec = codec or self._codec
        try:
            raw = await self._exchange(url, method, headers, body, transport, codec)
            return classify(raw, self._logger)
        except Problem as problem:
            return Failure(problem)
        except Exception as e:
            return Failure(Unknown(e))

    async def _exchange(
        self,
        url: str,
        method: HTTPMethod,
        headers: Mapping[str, str] | None,
        body: Any,
        transport: Transport | None,
        codec: Codec,
    ) -> RawResponse:
        """Run the I/O half of a call: encode, build, then send or upload.

        Raises:
            MissingBody: If method requires a body and none was given (no I/O done).
            CannotEncodeBody: If body cannot be encoded (no I/O done).
        """
        transport = transport or self._transport

        if body is NOTHING:
            if method.requires_body:
                raise MissingBody(method)
            request = make_request(url, method, headers, self._logger)
            return await transport.send(request)

        payload = self._encode(body, codec)
        request = make_request(url, method, headers, self._logger)
        return await transport.upload(request, payload)

    def _encode(self, body: Any, codec: Codec) -> bytes:
        try:
            payload = codec.encode(body)
        except CannotEncodeBody as problem:
            self._logger.log_problem("Encoding request body", problem.cause)
            raise
        except Exception as e:
            self._logger.log_problem("Encoding request body", e)
            raise CannotEncodeBody(e, body) from e

        self._logger.log_data(payload, DataDirection.OUTGOING)
        return payload
