"""Client-side URL validation.

The call pipeline never validates URLs. Callers that build URLs from strings can
use parse_url to reject bad input up front with the matching Problem kind.
"""

from __future__ import annotations

import httpx

from netcall.problems import BadURL

_SUPPORTED_SCHEMES = frozenset({"http", "https"})


def parse_url(url_string: str) -> httpx.URL:
    """Parse an absolute http(s) URL.

    Raises:
        BadURL: If the string is not a valid absolute http or https URL.
    """
    try:
        url = httpx.URL(url_string)
    except (httpx.InvalidURL, TypeError) as e:
        raise BadURL(url_string) from e

    if url.scheme not in _SUPPORTED_SCHEMES or not url.host:
        raise BadURL(url_string)
    return url
