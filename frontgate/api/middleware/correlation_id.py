"""
frontgate.api.middleware.correlation_id

Purpose:
    Middleware that ensures each request has a correlation id before anything
    else sees it, and propagates it to responses.

Created:
    2026-10-19
"""

from __future__ import annotations

import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from frontgate.api.contracts.correlation_id_policy import CorrelationIdPolicy
from frontgate.api.logging.request_context import correlation_id_ctx_var


def new_correlation_id() -> str:
    return str(uuid.uuid4())


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, policy: CorrelationIdPolicy | None = None) -> None:
        super().__init__(app)
        self._policy = policy or CorrelationIdPolicy()

    def _incoming(self, request: Request) -> str | None:
        for header in self._policy.inbound_headers():
            value = request.headers.get(header)
            if self._policy.is_acceptable(value):
                return value
        return None

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        correlation_id = self._incoming(request) or new_correlation_id()

        # Attach for handlers/logging
        request.state.correlation_id = correlation_id
        token = correlation_id_ctx_var.set(correlation_id)

        try:
            response: Response = await call_next(request)
        finally:
            correlation_id_ctx_var.reset(token)

        # Echo back for client correlation
        response.headers[self._policy.response_header] = correlation_id
        return response
