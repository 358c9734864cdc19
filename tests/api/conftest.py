"""
tests.api.conftest

Shared pytest fixtures for API tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi import APIRouter, HTTPException
from fastapi.testclient import TestClient

from frontgate.api.errors import NotFoundError
from frontgate.api.main import create_app
from frontgate.api.settings import Settings

INDEX_HTML = "<!doctype html><html><body><div id='root'>app shell</div></body></html>"


@pytest.fixture()
def frontend_root(tmp_path: Path) -> Path:
    """Empty frontend directory: nothing deployed yet."""
    root = tmp_path / "frontend"
    root.mkdir()
    return root


@pytest.fixture()
def deployed_frontend(frontend_root: Path) -> Path:
    """A built SPA: index.html, an asset bundle and a top-level static file."""
    (frontend_root / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (frontend_root / "assets").mkdir()
    (frontend_root / "assets" / "app.js").write_text("console.log('app');", encoding="utf-8")
    (frontend_root / "robots.txt").write_text("User-agent: *\n", encoding="utf-8")
    return frontend_root


@pytest.fixture()
def failing_router() -> APIRouter:
    """Business-like API endpoints that fail in every way the normalizer handles."""
    router = APIRouter()

    @router.get("/boom")
    def boom() -> dict:
        raise RuntimeError("database unreachable")

    @router.get("/opaque")
    def opaque() -> dict:
        raise RuntimeError()

    @router.get("/teapot")
    def teapot() -> dict:
        raise HTTPException(status_code=418, detail={"code": "TEAPOT", "message": "short and stout"})

    @router.get("/forbidden")
    def forbidden() -> dict:
        raise HTTPException(status_code=403, detail="Forbidden")

    @router.get("/orders/{order_id}")
    def order(order_id: int) -> dict:
        raise NotFoundError(f"Order {order_id} not found", code="ORDER_NOT_FOUND")

    @router.get("/items")
    def items(limit: int) -> dict:
        return {"limit": limit}

    return router


@pytest.fixture()
def client_factory(frontend_root: Path, failing_router: APIRouter):
    """
    Factory fixture that creates a fresh TestClient against `frontend_root`.

    Keyword overrides are passed to Settings (e.g. root_identity_when_no_frontend=False).
    """

    def _make(**overrides) -> TestClient:
        settings = Settings(frontend_root=frontend_root, **overrides)
        app = create_app(settings, api_routers=[failing_router])
        return TestClient(app, raise_server_exceptions=True)

    return _make


@pytest.fixture()
def client(client_factory) -> TestClient:
    return client_factory()
