"""Configuration models for netcall.

All models use Pydantic v2. A NetcallConfig is the single explicit place the
defaults for a CallClient come from (transport, codec and log style).
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from netcall.logs import LogStyle


class KeyStrategy(str, Enum):
    """How object keys are rewritten between Python and the wire."""

    USE_DEFAULT_KEYS = "use_default_keys"
    # Encode: snake_case -> camelCase. Decode: camelCase -> snake_case.
    CAMEL_CASE = "camel_case"


class DateStrategy(str, Enum):
    """How datetime values are written into outgoing JSON."""

    ISO8601 = "iso8601"
    SECONDS_SINCE_EPOCH = "seconds_since_epoch"
    MILLISECONDS_SINCE_EPOCH = "milliseconds_since_epoch"


class CodecConfig(BaseModel):
    """Settings for JSONCodec."""

    model_config = ConfigDict(extra="forbid")

    key_strategy: KeyStrategy = Field(
        default=KeyStrategy.USE_DEFAULT_KEYS, description="Key rewriting in both directions"
    )
    date_strategy: DateStrategy = Field(
        default=DateStrategy.ISO8601, description="Encoding of datetime values"
    )
    indent: int | None = Field(default=None, description="Pretty-print outgoing JSON")
    sort_keys: bool = Field(default=False, description="Sort object keys in outgoing JSON")
    allow_inf_nan: bool = Field(
        default=False, description="Accept/emit Infinity and NaN instead of failing"
    )
    context: dict[str, Any] = Field(
        default_factory=dict, description="User context passed to pydantic serializers and validators"
    )


class TransportConfig(BaseModel):
    """Settings for HttpxTransport."""

    model_config = ConfigDict(extra="forbid")

    request_timeout: float = Field(default=15.0, gt=0, description="Per network operation timeout (s)")
    resource_timeout: float = Field(default=30.0, gt=0, description="Whole exchange timeout (s)")
    verify_ssl: bool = Field(default=True, description="Verify server certificates")
    ca_bundle: str | None = Field(default=None, description="Path to a CA bundle")
    cert: str | None = Field(default=None, description="Client certificate path (mTLS)")
    key: str | None = Field(default=None, description="Client key path (mTLS)")
    default_headers: dict[str, str] = Field(
        default_factory=dict, description="Headers sent with every request"
    )


class NetcallConfig(BaseModel):
    """Top-level configuration (typically loaded from YAML)."""

    model_config = ConfigDict(extra="forbid")

    log_style: list[str] = Field(
        default_factory=lambda: ["complete"], description="LogStyle flag names"
    )
    transport: TransportConfig = Field(default_factory=TransportConfig)
    codec: CodecConfig = Field(default_factory=CodecConfig)

    @field_validator("log_style")
    @classmethod
    def check_log_style(cls, value: list[str]) -> list[str]:
        LogStyle.from_names(value)
        return value

    def get_log_style(self) -> LogStyle:
        return LogStyle.from_names(self.log_style)
