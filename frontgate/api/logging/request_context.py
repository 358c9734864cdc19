"""
frontgate.api.logging.request_context

Purpose:
    Request-scoped context storage using contextvars.
    Enables correlation_id propagation into logs.

Created:
    2026-10-19
"""

from __future__ import annotations

import contextvars

correlation_id_ctx_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "correlation_id",
    default=None,
)
