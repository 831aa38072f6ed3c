"""Tests for response classification (status handling and optional decode)."""

import logging
from dataclasses import dataclass
from typing import Any

import pytest

from netcall.codec import JSONCodec
from netcall.logs import CallLogger, LogStyle
from netcall.models import Failure, Success
from netcall.problems import BadResponse, CannotDecodeResponse, InvalidResponseType
from netcall.response import classify, classify_and_decode, is_success_status
from tests.conftest import make_raw_response


@dataclass
class Item:
    id: int
    title: str


class ExplodingCodec:
    def encode(self, value: Any) -> bytes:
        raise NotImplementedError

    def decode(self, body: bytes, shape: Any) -> Any:
        raise KeyError("boom")


class TestClassify:
    @pytest.mark.parametrize("status", [200, 201, 204, 250, 299])
    def test_success_range_returns_status(self, status: int) -> None:
        result = classify(make_raw_response(status_code=status))
        assert result == Success(status)

    @pytest.mark.parametrize("status", [100, 199, 300, 304, 404, 500, 503])
    def test_outside_range_is_bad_response_with_exact_body(self, status: int) -> None:
        body = b'{"error":"nope"}'
        result = classify(make_raw_response(status_code=status, body=body))
        assert isinstance(result, Failure)
        assert isinstance(result.problem, BadResponse)
        assert result.problem.code == status
        assert result.problem.body == body

    def test_non_http_response(self) -> None:
        result = classify(make_raw_response(status_code=None))
        assert isinstance(result, Failure)
        assert isinstance(result.problem, InvalidResponseType)

    def test_success_body_ignored(self) -> None:
        assert classify(make_raw_response(status_code=200, body=b"not json")) == Success(200)

    def test_is_success_status_bounds(self) -> None:
        assert is_success_status(200)
        assert is_success_status(299)
        assert not is_success_status(300)
        assert not is_success_status(199)


class TestClassifyAndDecode:
    def test_decodes_on_success(self) -> None:
        raw = make_raw_response(status_code=200, body=b'{"id":42,"title":"T"}')
        assert classify_and_decode(raw, Item, JSONCodec()) == Success(Item(id=42, title="T"))

    def test_bad_response_skips_decode(self) -> None:
        body = b'{"error":"not found"}'
        raw = make_raw_response(status_code=404, body=body)
        result = classify_and_decode(raw, Item, ExplodingCodec())
        assert isinstance(result, Failure)
        assert isinstance(result.problem, BadResponse)
        assert result.problem.code == 404
        assert result.problem.body == body

    def test_undecodable_success_body(self) -> None:
        body = b'{"id":"x"}'
        result = classify_and_decode(make_raw_response(status_code=200, body=body), Item, JSONCodec())
        assert isinstance(result, Failure)
        assert isinstance(result.problem, CannotDecodeResponse)
        assert result.problem.body == body

    def test_foreign_decode_error_becomes_cannot_decode(self) -> None:
        body = b"{}"
        result = classify_and_decode(
            make_raw_response(status_code=200, body=body), Item, ExplodingCodec()
        )
        assert isinstance(result, Failure)
        assert isinstance(result.problem, CannotDecodeResponse)
        assert isinstance(result.problem.cause, KeyError)
        assert result.problem.body == body

    def test_empty_body_is_decode_failure(self) -> None:
        result = classify_and_decode(make_raw_response(status_code=204, body=b""), Item, JSONCodec())
        assert isinstance(result, Failure)
        assert isinstance(result.problem, CannotDecodeResponse)

    def test_optional_shape_still_needs_a_body(self) -> None:
        result = classify_and_decode(
            make_raw_response(status_code=200, body=b""), Item | None, JSONCodec()
        )
        assert isinstance(result, Failure)
        assert isinstance(result.problem, CannotDecodeResponse)

    def test_non_http_response(self) -> None:
        result = classify_and_decode(make_raw_response(status_code=None), Item, JSONCodec())
        assert isinstance(result, Failure)
        assert isinstance(result.problem, InvalidResponseType)


class TestClassifierLogging:
    def test_success_and_payload_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="netcall")
        raw = make_raw_response(status_code=200, body=b'{"id":1,"title":"a"}')
        classify_and_decode(raw, Item, JSONCodec(), CallLogger(LogStyle.COMPLETE))
        assert "Call to https://api.example.com/items/42 SUCCEEDED - 200" in caplog.messages
        assert 'Incoming JSON:\n{"id":1,"title":"a"}' in caplog.messages

    def test_failure_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="netcall")
        classify(make_raw_response(status_code=500, body=b""), CallLogger(LogStyle.COMPLETE))
        assert "Call to https://api.example.com/items/42 FAILED - 500" in caplog.messages
        assert "Incoming JSON:\nNo Data" in caplog.messages

    def test_logging_does_not_change_result(self) -> None:
        raw = make_raw_response(status_code=404, body=b"x")
        quiet = classify(raw, CallLogger(LogStyle.NONE))
        loud = classify(raw, CallLogger(LogStyle.COMPLETE))
        assert isinstance(quiet, Failure) and isinstance(loud, Failure)
        assert quiet.problem.description == loud.problem.description
