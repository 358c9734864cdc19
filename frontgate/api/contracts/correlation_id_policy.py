"""
frontgate.api.contracts.correlation_id_policy

Purpose:
    Central policy for correlation IDs (inbound header names, accepted format,
    response header and the sentinel used when no ID is attached).

Created:
    2026-10-19
"""

from __future__ import annotations

import re
from dataclasses import dataclass

UNKNOWN_CORRELATION_ID = "unknown"


@dataclass(frozen=True)
class CorrelationIdPolicy:
    correlation_id_header: str = "X-Correlation-Id"
    request_id_header: str = "X-Request-Id"
    response_header: str = "X-Correlation-Id"

    max_length: int = 128
    allowed_pattern: str = r"[A-Za-z0-9._:\-]+"

    def inbound_headers(self) -> tuple[str, ...]:
        return (self.correlation_id_header, self.request_id_header)

    def is_acceptable(self, value: str | None) -> bool:
        if not value or len(value) > self.max_length:
            return False
        return re.fullmatch(self.allowed_pattern, value) is not None
