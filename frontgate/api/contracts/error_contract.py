"""
frontgate.api.contracts.error_contract

Purpose:
    Stable error contract for every failure response (codes + envelope model).
    Used by the error normalizer so that clients always receive the same shape.

Created:
    2026-10-19
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ErrorCode(str, Enum):
    HTTP_EXCEPTION = "HTTP_EXCEPTION"
    ERROR = "ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2026-10-19T08:15:02.117Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ErrorEnvelope(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable (possibly localized) message")
    correlation_id: str = Field(
        ...,
        alias="correlationId",
        description="Request correlation id for debugging",
    )
    timestamp: str = Field(default_factory=utc_timestamp, description="ISO-8601 UTC time")
    path: str = Field(..., description="Request path that produced the error")

    def to_json(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)
