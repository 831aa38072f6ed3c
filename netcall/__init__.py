"""netcall - an asynchronous HTTP call helper with a closed problem taxonomy."""

from netcall.client import CallClient
from netcall.codec import Codec, JSONCodec
from netcall.config import CodecConfig, DateStrategy, KeyStrategy, NetcallConfig, TransportConfig
from netcall.logs import LogStyle
from netcall.models import NOTHING, Failure, HTTPMethod, RawResponse, RequestDescriptor, ResponseMetadata, Success
from netcall.problems import (
    BadResponse,
    BadURL,
    CannotDecodeResponse,
    CannotEncodeBody,
    InvalidResponseType,
    MissingBody,
    Problem,
    Unknown,
)
from netcall.transport import HttpxTransport, Transport
from netcall.urls import parse_url

__all__ = [
    "BadResponse",
    "BadURL",
    "CallClient",
    "CannotDecodeResponse",
    "CannotEncodeBody",
    "Codec",
    "CodecConfig",
    "DateStrategy",
    "Failure",
    "HTTPMethod",
    "HttpxTransport",
    "InvalidResponseType",
    "JSONCodec",
    "KeyStrategy",
    "LogStyle",
    "MissingBody",
    "NOTHING",
    "NetcallConfig",
    "Problem",
    "RawResponse",
    "RequestDescriptor",
    "ResponseMetadata",
    "Success",
    "Transport",
    "TransportConfig",
    "Unknown",
    "parse_url",
]
