# frontgate/api/contracts/api_paths.py
"""
frontgate.api.contracts.api_paths

Purpose:
    Central definition of reserved path namespaces and API route paths.
    Keeps routing stable and prevents string duplication.

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass


def has_prefix(path: str, prefix: str) -> bool:
    """True when `path` is `prefix` itself or lives below it (segment-aware)."""
    prefix = prefix.rstrip("/")
    if not prefix:
        return True
    return path == prefix or path.startswith(prefix + "/")


@dataclass(frozen=True)
class ApiPaths:
    api_prefix: str = "/api"
    assets_prefix: str = "/assets"
    favicon: str = "/favicon.ico"
    root: str = "/"

    health: str = "/health"
    info: str = "/info"
    docs: str = "/docs"
    openapi: str = "/openapi.json"

    def is_api(self, path: str) -> bool:
        return has_prefix(path, self.api_prefix)

    def is_asset(self, path: str) -> bool:
        return has_prefix(path, self.assets_prefix)

    def api(self, sub_path: str) -> str:
        return f"{self.api_prefix.rstrip('/')}{sub_path}"
