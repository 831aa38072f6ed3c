"""Response Classifier - turns a RawResponse into a Success or Failure.

A response is successful when its status code is in [200, 300). Failed
responses always carry the exact body bytes received, whether or not a decode
was requested.
"""

from __future__ import annotations

from typing import Any, TypeVar

from netcall.codec import Codec
from netcall.logs import CallLogger, DataDirection
from netcall.models import CallResult, Failure, RawResponse, Success
from netcall.problems import BadResponse, CannotDecodeResponse, InvalidResponseType

T = TypeVar("T")


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 300


def _check_status(raw: RawResponse, logger: CallLogger | None) -> int | Failure:
    """Return the status code of a 2xx response, or a Failure for anything else."""
    metadata = raw.metadata
    code = metadata.status_code
    if code is None:
        return Failure(InvalidResponseType())

    if is_success_status(code):
        if logger is not None:
            logger.log_success(metadata)
        return code

    if logger is not None:
        logger.log_failure(metadata)
        logger.log_data(raw.body, DataDirection.INCOMING)
    return Failure(BadResponse(code=code, body=raw.body))


def classify(raw: RawResponse, logger: CallLogger | None = None) -> CallResult[int]:
    """Classify a response, ignoring its body on success.

    Returns:
        Success with the status code, or Failure(InvalidResponseType | BadResponse).
    """
    checked = _check_status(raw, logger)
    if isinstance(checked, Failure):
        return checked
    return Success(checked)


def classify_and_decode(
    raw: RawResponse,
    shape: type[T] | Any,
    codec: Codec,
    logger: CallLogger | None = None,
) -> CallResult[T]:
    """Classify a response and decode its body into shape on success.

    Returns:
        Success with the decoded value, or Failure(InvalidResponseType |
        BadResponse | CannotDecodeResponse).
    """
    checked = _check_status(raw, logger)
    if isinstance(checked, Failure):
        return checked

    if logger is not None:
        logger.log_data(raw.body, DataDirection.INCOMING)
    try:
        return Success(codec.decode(raw.body, shape))
    except CannotDecodeResponse as problem:
        decode_problem = problem
    except Exception as e:
        decode_problem = CannotDecodeResponse(e, raw.body)

    if logger is not None:
        logger.log_problem("Decoding response body", decode_problem.cause)
    return Failure(decode_problem)
