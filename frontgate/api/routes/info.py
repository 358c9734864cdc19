"""
frontgate.api.routes.info

Purpose:
    API identity payload (name/version/status/endpoints). Served at /api/info
    and, when no frontend is deployed, at the bare root "/".

Created:
    2026-10-19
"""

from __future__ import annotations

from typing import Any, Callable

from fastapi import APIRouter

from frontgate.api.contracts.api_paths import ApiPaths
from frontgate.api.contracts.api_tags import ApiTags
from frontgate.api.settings import Settings


def identity_payload(settings: Settings, paths: ApiPaths | None = None) -> dict[str, Any]:
    paths = paths or ApiPaths()
    # Keep this as stable contract; safe for clients to depend on.
    return {
        "name": settings.service_name,
        "version": settings.service_version,
        "status": "running",
        "endpoints": {
            "api": paths.api_prefix,
            "docs": paths.api(paths.docs),
            "health": paths.api(paths.health),
            "info": paths.api(paths.info),
        },
    }


def build_info_router(identity: Callable[[], dict[str, Any]]) -> APIRouter:
    router = APIRouter(tags=[ApiTags().info])

    @router.get(ApiPaths().info)
    def info() -> dict:
        return identity()

    return router
