from __future__ import annotations

from typing import Any, Callable, Iterable

from fastapi import APIRouter

from frontgate.api.contracts.api_paths import ApiPaths
from frontgate.api.routes.health import router as health_router
from frontgate.api.routes.info import build_info_router


def build_api_router(
    identity: Callable[[], dict[str, Any]],
    extra_routers: Iterable[APIRouter] = (),
) -> APIRouter:
    api_router = APIRouter(prefix=ApiPaths().api_prefix)

    api_router.include_router(health_router)
    api_router.include_router(build_info_router(identity))
    for router in extra_routers:
        api_router.include_router(router)

    return api_router
