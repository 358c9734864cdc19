"""
frontgate.api.routing.dispatcher

Purpose:
    Catch-all routing policy for everything the API routers did not match.
    decide() picks a RouteDecision from the path alone (first match wins):

        1. API prefix            -> ApiHandler (unmatched API call, genuine 404)
        2. assets prefix         -> StaticAsset or NotFound(ASSET_MISSING)
        3. existing file in root -> StaticAsset
        4. favicon without file  -> NotFound(FAVICON_MISSING)  (204, no error)
        5. anything else         -> SpaFallback or NotFound(FRONTEND_MISSING)

    The root path never matches rule 3 and, without a frontend, answers with
    the API identity payload instead of the catch-all 404.

Notes:
    - Errors are raised, never rendered here; the ErrorNormalizer owns the
      envelope.
    - decide() is deterministic for a given filesystem state.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Union

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse, JSONResponse
from starlette.responses import Response

from frontgate.api.contracts.api_paths import ApiPaths
from frontgate.api.errors import NotFoundError
from frontgate.api.frontend.resolver import FrontendResolver

logger = logging.getLogger(__name__)

FRONTEND_NOT_DEPLOYED = "Frontend not found. Please build the frontend and ensure it is deployed."
FRONTEND_NOT_BUILT = "Frontend not found. Please build the frontend."

CATCH_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


class NotFoundReason(str, Enum):
    ASSET_MISSING = "asset_missing"
    FAVICON_MISSING = "favicon_missing"
    FRONTEND_MISSING = "frontend_missing"


@dataclass(frozen=True)
class ApiHandler:
    pass


@dataclass(frozen=True)
class StaticAsset:
    path: Path


@dataclass(frozen=True)
class SpaFallback:
    path: Path


@dataclass(frozen=True)
class NotFound:
    reason: NotFoundReason


RouteDecision = Union[ApiHandler, StaticAsset, SpaFallback, NotFound]


def decide(path: str, resolver: FrontendResolver, paths: ApiPaths | None = None) -> RouteDecision:
    paths = paths or ApiPaths()

    if paths.is_api(path):
        return ApiHandler()

    if paths.is_asset(path):
        asset = resolver.asset(path)
        return StaticAsset(asset.path) if asset.exists else NotFound(NotFoundReason.ASSET_MISSING)

    if path != paths.root:
        asset = resolver.asset(path)
        if asset.exists:
            return StaticAsset(asset.path)

        if path == paths.favicon:
            return NotFound(NotFoundReason.FAVICON_MISSING)

    index = resolver.index()
    if index.exists:
        return SpaFallback(index.path)
    return NotFound(NotFoundReason.FRONTEND_MISSING)


class RoutingDispatcher:
    def __init__(
        self,
        resolver: FrontendResolver,
        paths: ApiPaths | None = None,
        identity: Callable[[], dict[str, Any]] | None = None,
    ) -> None:
        self._resolver = resolver
        self._paths = paths or ApiPaths()
        # None means "/" 404s like any other path when the frontend is missing.
        self._identity = identity

    def decide(self, path: str) -> RouteDecision:
        return decide(path, self._resolver, self._paths)

    async def dispatch(self, request: Request) -> Response:
        path = request.url.path
        decision = self.decide(path)

        if isinstance(decision, ApiHandler):
            raise NotFoundError(f"Cannot {request.method} {path}")

        if isinstance(decision, StaticAsset):
            return FileResponse(decision.path)

        if isinstance(decision, SpaFallback):
            return FileResponse(decision.path, media_type="text/html")

        if decision.reason is NotFoundReason.FAVICON_MISSING:
            return Response(status_code=204)

        if decision.reason is NotFoundReason.ASSET_MISSING:
            raise NotFoundError(f"Cannot {request.method} {path}")

        if path == self._paths.root:
            if self._identity is not None:
                return JSONResponse(content=self._identity())
            logger.warning("Frontend index.html not found under %s", self._resolver.root)
            raise NotFoundError(FRONTEND_NOT_BUILT)

        logger.warning("Frontend index.html not found under %s (requested %s)", self._resolver.root, path)
        raise NotFoundError(FRONTEND_NOT_DEPLOYED)

    def router(self) -> APIRouter:
        """Catch-all router; include it after every other router."""
        router = APIRouter()
        router.add_api_route(
            "/{full_path:path}",
            self._endpoint,
            methods=CATCH_ALL_METHODS,
            include_in_schema=False,
        )
        return router

    async def _endpoint(self, request: Request) -> Response:
        return await self.dispatch(request)
