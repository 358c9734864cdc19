"""
tests.api.test_settings

Purpose:
    Environment-driven configuration.
"""

from __future__ import annotations

from pathlib import Path

from frontgate.api.settings import Settings


def test_frontend_root_defaults_to_cwd(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("FRONTEND_ROOT", raising=False)
    monkeypatch.chdir(tmp_path)
    assert Settings().frontend_root == tmp_path / "frontend"


def test_env_overrides(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("FRONTEND_ROOT", str(tmp_path / "dist"))
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ROOT_IDENTITY_WHEN_NO_FRONTEND", "false")

    settings = Settings()
    assert settings.frontend_root == tmp_path / "dist"
    assert settings.port == 8080
    assert settings.root_identity_when_no_frontend is False


def test_relative_frontend_root_is_anchored_to_cwd(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    settings = Settings(frontend_root=Path("web/dist"))
    assert settings.frontend_root == tmp_path / "web" / "dist"
