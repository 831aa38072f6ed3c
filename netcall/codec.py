"""Body Codec - JSON encoding of request values and decoding of response bodies.

Values are serialized with pydantic (models, dataclasses, TypedDicts and plain
containers all work) and decoded by validating the parsed JSON against a target
shape through a TypeAdapter. Failures surface as CannotEncodeBody and
CannotDecodeResponse respectively.
"""

from __future__ import annotations

import datetime
import math
from functools import lru_cache
from typing import Any, Callable, Protocol

import pydantic_core
from pydantic import PydanticUserError, TypeAdapter
from pydantic.alias_generators import to_camel, to_snake

from netcall.config import CodecConfig, DateStrategy, KeyStrategy
from netcall.problems import CannotDecodeResponse, CannotEncodeBody


class Codec(Protocol):
    """Anything that can encode request values and decode response bodies.

    Exceptions raised by encode are reported as CannotEncodeBody and those
    raised by decode as CannotDecodeResponse.
    """

    def encode(self, value: Any) -> bytes: ...

    def decode(self, body: bytes, shape: Any) -> Any: ...


@lru_cache(maxsize=256)
def _cached_adapter(shape: Any) -> TypeAdapter[Any]:
    return TypeAdapter(shape)


def _adapter(shape: Any) -> TypeAdapter[Any]:
    try:
        hash(shape)
    except TypeError:
        return TypeAdapter(shape)
    return _cached_adapter(shape)


def _rewrite_keys(data: Any, convert: Callable[[str], str]) -> Any:
    """Recursively apply convert to every string key of every object."""
    if isinstance(data, dict):
        return {
            (convert(k) if isinstance(k, str) else k): _rewrite_keys(v, convert)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [_rewrite_keys(item, convert) for item in data]
    return data


class JSONCodec:
    """Encodes Python values to JSON bytes and decodes JSON bytes into a shape.

    A codec holds no per-call state and can be shared between concurrent calls.
    """

    def __init__(self, config: CodecConfig | None = None) -> None:
        self.config = config or CodecConfig()

    def encode(self, value: Any) -> bytes:
        """Serialize value to JSON bytes.

        Raises:
            CannotEncodeBody: If the value (or something inside it) cannot be
                serialized, e.g. an unknown type or a cyclic structure.
        """
        try:
            data = _adapter(type(value)).dump_python(
                value, by_alias=True, context=self.config.context or None
            )
            data = self._prepare_outgoing(data)
            return pydantic_core.to_json(data, indent=self.config.indent)
        except (ValueError, TypeError, RecursionError, PydanticUserError) as e:
            raise CannotEncodeBody(e, value) from e

    def decode(self, body: bytes, shape: Any) -> Any:
        """Parse body as JSON and validate it against shape.

        Validation is strict: JSON types must match the shape exactly (no
        "42" or true for an int), except that ISO 8601 strings still parse into
        dates and times. An empty body is never valid, whatever the shape.

        Raises:
            CannotDecodeResponse: If body is not JSON or does not match shape.
        """
        try:
            data = pydantic_core.from_json(body, allow_inf_nan=self.config.allow_inf_nan)
            if self.config.key_strategy is KeyStrategy.CAMEL_CASE:
                data = _rewrite_keys(data, to_snake)
            return _adapter(shape).validate_json(
                pydantic_core.to_json(data), strict=True, context=self.config.context or None
            )
        except (ValueError, TypeError, PydanticUserError) as e:
            raise CannotDecodeResponse(e, body) from e

    def _prepare_outgoing(self, data: Any) -> Any:
        """Apply key, date, float and ordering settings to dumped python data."""
        if isinstance(data, dict):
            items = []
            for key, value in data.items():
                if isinstance(key, str) and self.config.key_strategy is KeyStrategy.CAMEL_CASE:
                    key = to_camel(key)
                items.append((key, self._prepare_outgoing(value)))
            if self.config.sort_keys:
                items.sort(key=lambda item: str(item[0]))
            return dict(items)
        if isinstance(data, (list, tuple, set, frozenset)):
            return [self._prepare_outgoing(item) for item in data]
        if isinstance(data, float) and not math.isfinite(data) and not self.config.allow_inf_nan:
            raise ValueError(f"Float value {data!r} is not JSON compliant")
        if isinstance(data, datetime.datetime):
            return self._encode_datetime(data)
        return data

    def _encode_datetime(self, value: datetime.datetime) -> Any:
        strategy = self.config.date_strategy
        if strategy is DateStrategy.SECONDS_SINCE_EPOCH:
            return value.timestamp()
        if strategy is DateStrategy.MILLISECONDS_SINCE_EPOCH:
            return value.timestamp() * 1000
        # ISO8601 is pydantic's native datetime format.
        return value
