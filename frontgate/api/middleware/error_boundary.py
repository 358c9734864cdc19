"""
frontgate.api.middleware.error_boundary

Purpose:
    Catches anything FastAPI's exception handlers did not (plain exceptions
    from handlers or inner middleware) and hands it to the ErrorNormalizer, so
    the request still ends with an ErrorEnvelope inside the correlation and
    access-log middleware.

Created:
    2026-10-19
"""

from __future__ import annotations

from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from frontgate.api.error_handlers import ErrorNormalizer


class ErrorNormalizerMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, normalizer: ErrorNormalizer) -> None:
        super().__init__(app)
        self._normalizer = normalizer

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return self._normalizer.handle(request, exc)
