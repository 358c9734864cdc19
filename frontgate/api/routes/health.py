"""
frontgate.api.routes.health

Purpose:
    Health endpoint for container/orchestrator checks (mounted under /api).

Created:
    2026-10-19
"""

from __future__ import annotations

from fastapi import APIRouter

from frontgate.api.contracts.api_paths import ApiPaths
from frontgate.api.contracts.api_tags import ApiTags

_paths = ApiPaths()
_tags = ApiTags()

router = APIRouter(tags=[_tags.health])


@router.get(_paths.health)
def health() -> dict:
    return {"status": "ok"}
