"""
frontgate.api.middleware

Purpose:
    The request pipeline, composed once at startup. Order is outermost first:

        CorrelationIdMiddleware -> AccessLogMiddleware -> ErrorNormalizerMiddleware -> router

Created:
    2026-10-19
"""

from __future__ import annotations

from starlette.middleware import Middleware

from frontgate.api.contracts.correlation_id_policy import CorrelationIdPolicy
from frontgate.api.error_handlers import ErrorNormalizer
from frontgate.api.middleware.access_log import AccessLogMiddleware
from frontgate.api.middleware.correlation_id import CorrelationIdMiddleware
from frontgate.api.middleware.error_boundary import ErrorNormalizerMiddleware


def build_middleware_chain(
    normalizer: ErrorNormalizer,
    policy: CorrelationIdPolicy | None = None,
) -> list[Middleware]:
    return [
        Middleware(CorrelationIdMiddleware, policy=policy or CorrelationIdPolicy()),
        Middleware(AccessLogMiddleware),
        Middleware(ErrorNormalizerMiddleware, normalizer=normalizer),
    ]
