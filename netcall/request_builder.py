"""Request Builder - assembles method, URL and headers into a RequestDescriptor."""

from __future__ import annotations

from collections.abc import Mapping

from netcall.logs import CallLogger
from netcall.models import HTTPMethod, RequestDescriptor


def merge_headers(
    existing: Mapping[str, str],
    headers: Mapping[str, str] | None,
) -> dict[str, str]:
    """Merge headers onto an existing header set.

    Keys are matched case-insensitively, as HTTP header names are. A matching
    key is replaced (value and spelling) by the incoming one; anything else is
    appended. The result never holds two keys that differ only in case.

    Args:
        existing: Headers already present on the request.
        headers: Headers to apply. None leaves the existing set unchanged.

    Returns:
        A new dict; neither argument is mutated.
    """
    merged = dict(existing)
    if not headers:
        return merged

    for key, value in headers.items():
        lower_key = key.lower()
        for existing_key in list(merged):
            if existing_key.lower() == lower_key:
                del merged[existing_key]
        merged[key] = value
    return merged


def make_request(
    url: str,
    method: HTTPMethod,
    headers: Mapping[str, str] | None = None,
    logger: CallLogger | None = None,
) -> RequestDescriptor:
    """Create a body-less RequestDescriptor.

    The URL is used as-is; callers that want validation should go through
    netcall.urls.parse_url first.
    """
    if logger is not None:
        logger.log_request(method, url, headers)
    return RequestDescriptor(
        method=method,
        url=url,
        headers=merge_headers({}, headers),
    )
