"""Call logging.

LogStyle selects which lines CallLogger emits. Everything goes through the
stdlib "netcall" logger at INFO level, so the host application still decides
whether anything is actually printed. Logging never affects call results.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from enum import Enum, Flag

from netcall.models import HTTPMethod, ResponseMetadata

logger = logging.getLogger("netcall")


class LogStyle(Flag):
    """Which call events are logged.

    CALL_HEADERS is ignored unless CALL_DESCRIPTIONS is also set.
    """

    NONE = 0
    CALL_DESCRIPTIONS = 1
    CALL_HEADERS = 2
    OUTGOING_PAYLOAD = 4
    INCOMING_PAYLOAD = 8
    COMPLETE = CALL_DESCRIPTIONS | CALL_HEADERS | OUTGOING_PAYLOAD | INCOMING_PAYLOAD

    @classmethod
    def from_names(cls, names: Iterable[str]) -> LogStyle:
        """Build a style from flag names such as ["call_descriptions", "incoming_payload"].

        Raises:
            ValueError: If a name is not a LogStyle member.
        """
        style = cls.NONE
        for name in names:
            try:
                style |= cls[name.upper()]
            except KeyError:
                raise ValueError(f"Unknown log style: {name!r}") from None
        return style


class DataDirection(str, Enum):
    INCOMING = "incoming"
    OUTGOING = "outgoing"

    @property
    def log_prefix(self) -> str:
        return f"{self.value.capitalize()} JSON:\n"


class CallLogger:
    """Emits human-readable call lines according to a LogStyle."""

    def __init__(self, style: LogStyle = LogStyle.COMPLETE, log: logging.Logger | None = None) -> None:
        self.style = style
        self._log = log or logger

    def log_request(self, method: HTTPMethod, url: str, headers: Mapping[str, str] | None) -> None:
        if LogStyle.CALL_DESCRIPTIONS not in self.style:
            return
        self._log.info("Creating %s Request for URL: %s", method.value, url)
        if LogStyle.CALL_HEADERS in self.style:
            self._log.info("Headers: %s", dict(headers or {}))

    def log_success(self, metadata: ResponseMetadata) -> None:
        if LogStyle.CALL_DESCRIPTIONS not in self.style:
            return
        self._log.info(
            "Call to %s SUCCEEDED - %s", metadata.url or "Unknown URL", metadata.status_code
        )

    def log_failure(self, metadata: ResponseMetadata) -> None:
        if LogStyle.CALL_DESCRIPTIONS not in self.style:
            return
        self._log.info(
            "Call to %s FAILED - %s", metadata.url or "Unknown URL", metadata.status_code
        )

    def log_problem(self, stage: str, error: BaseException) -> None:
        """Log an encode/decode failure. Only used for failures that carry a cause."""
        if LogStyle.CALL_DESCRIPTIONS not in self.style:
            return
        self._log.warning("%s failed: %s", stage, error)

    def log_data(self, data: bytes | None, direction: DataDirection) -> None:
        if direction is DataDirection.INCOMING and LogStyle.INCOMING_PAYLOAD not in self.style:
            return
        if direction is DataDirection.OUTGOING and LogStyle.OUTGOING_PAYLOAD not in self.style:
            return
        if not data:
            self._log.info("%sNo Data", direction.log_prefix)
            return
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError:
            text = "invalid JSON"
        self._log.info("%s%s", direction.log_prefix, text)
