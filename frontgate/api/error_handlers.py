"""
frontgate.api.error_handlers

Purpose:
    The single site that turns any error raised while handling a request into
    a response: either the SPA index document (client-side route that nothing
    server-side matched) or the canonical ErrorEnvelope.

Notes:
    - HTTPException / ApiError / RequestValidationError are routed here by
      FastAPI's exception handlers; everything else reaches it through
      ErrorNormalizerMiddleware.
    - handle() never raises. Any secondary failure degrades to UNKNOWN_ERROR.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from frontgate.api.contracts.api_paths import ApiPaths
from frontgate.api.contracts.correlation_id_policy import UNKNOWN_CORRELATION_ID
from frontgate.api.contracts.error_contract import ErrorEnvelope
from frontgate.api.errors import (
    ApiError,
    ClassifiedError,
    ResourceNotFound,
    UnknownFailure,
    classify,
)
from frontgate.api.frontend.resolver import FrontendResolver
from frontgate.api.i18n.translator import Translator
from frontgate.api.logging.request_context import correlation_id_ctx_var

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR_KEY = "common.INTERNAL_SERVER_ERROR"
INTERNAL_SERVER_ERROR_TEXT = "Internal server error"


def get_correlation_id(request: Request) -> str:
    cid = getattr(getattr(request, "state", None), "correlation_id", None)
    if isinstance(cid, str) and cid:
        return cid

    cid2 = correlation_id_ctx_var.get()
    if isinstance(cid2, str) and cid2:
        return cid2

    return UNKNOWN_CORRELATION_ID


class ErrorNormalizer:
    def __init__(
        self,
        resolver: FrontendResolver,
        paths: ApiPaths | None = None,
        translator: Translator | None = None,
    ) -> None:
        self._resolver = resolver
        self._paths = paths or ApiPaths()
        self._translator = translator

    def _spa_recovery_eligible(self, path: str) -> bool:
        return not (self._paths.is_api(path) or self._paths.is_asset(path))

    def _unknown_message(self, request: Request) -> str:
        if self._translator is None:
            return INTERNAL_SERVER_ERROR_TEXT
        try:
            locale = self._translator.resolve_locale(request)
            return self._translator.translate(INTERNAL_SERVER_ERROR_KEY, locale) or INTERNAL_SERVER_ERROR_TEXT
        except Exception:
            logger.warning("Translation lookup failed for %s", INTERNAL_SERVER_ERROR_KEY, exc_info=True)
            return INTERNAL_SERVER_ERROR_TEXT

    def _resolve(self, request: Request, classified: ClassifiedError) -> tuple[int, str, str]:
        if isinstance(classified, UnknownFailure):
            return classified.status_code, classified.code, self._unknown_message(request)
        return classified.status_code, classified.code, classified.message

    def _try_spa_recovery(self, request: Request, correlation_id: str) -> Response | None:
        if not self._spa_recovery_eligible(request.url.path):
            return None

        index = self._resolver.index()
        if not index.exists:
            return None

        logger.info("[%s] Serving frontend for %s", correlation_id, request.url.path)
        return FileResponse(index.path, media_type="text/html")

    def _fallback_response(self, request: Request, correlation_id: str) -> JSONResponse:
        failure = UnknownFailure()
        try:
            path = request.url.path
        except Exception:
            path = "-"
        envelope = ErrorEnvelope(
            code=failure.code,
            message=INTERNAL_SERVER_ERROR_TEXT,
            correlation_id=correlation_id,
            path=path,
        )
        return JSONResponse(status_code=failure.status_code, content=envelope.to_json())

    def handle(self, request: Request, exc: object) -> Response:
        correlation_id = get_correlation_id(request)

        try:
            classified = classify(exc)

            if isinstance(classified, ResourceNotFound):
                recovered = self._try_spa_recovery(request, correlation_id)
                if recovered is not None:
                    return recovered

            status_code, code, message = self._resolve(request, classified)
            envelope = ErrorEnvelope(
                code=code,
                message=message,
                correlation_id=correlation_id,
                path=request.url.path,
            )
        except Exception:
            logger.exception("[%s] Error normalization failed", correlation_id)
            return self._fallback_response(request, correlation_id)

        # Traceback only for 5xx.
        exc_info = exc if isinstance(exc, BaseException) and status_code >= 500 else None
        logger.error(
            "[%s] %s %s - %s - %s",
            correlation_id,
            request.method,
            request.url.path,
            status_code,
            message,
            exc_info=exc_info,
        )

        return JSONResponse(status_code=status_code, content=envelope.to_json())


def register_error_handlers(app: FastAPI, normalizer: ErrorNormalizer) -> None:
    """
    Register global exception handlers on the FastAPI app.
    """

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> Response:
        return normalizer.handle(request, exc)

    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError) -> Response:
        return normalizer.handle(request, exc)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> Response:
        return normalizer.handle(request, exc)
