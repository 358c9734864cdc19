"""
frontgate.api.middleware.access_log

Purpose:
    One access-log line per request: correlation id, method, path, status,
    latency and outcome. Purely observational; never alters the response.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from frontgate.api.contracts.correlation_id_policy import UNKNOWN_CORRELATION_ID

logger = logging.getLogger("frontgate.access")


def _correlation_id(request: Request) -> str:
    cid = getattr(request.state, "correlation_id", None)
    return cid if isinstance(cid, str) and cid else UNKNOWN_CORRELATION_ID


class AccessLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()

        try:
            response: Response = await call_next(request)
        except Exception:
            self._log(request, 500, started, "failed")
            raise

        self._log(request, response.status_code, started, "completed")
        return response

    @staticmethod
    def _log(request: Request, status_code: int, started: float, outcome: str) -> None:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "[%s] %s %s - %s - %.1fms - %s",
            _correlation_id(request),
            request.method,
            request.url.path,
            status_code,
            elapsed_ms,
            outcome,
        )
