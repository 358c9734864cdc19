# frontgate/api/settings.py
"""
frontgate.api.settings

Purpose:
    Centralized configuration for the gateway service.
    Loaded from environment variables / .env so deployments can relocate the
    frontend bundle without code changes.

Notes:
    - frontend_root defaults to <cwd>/frontend, resolved once when settings load.
    - Path prefixes are not configurable here; see contracts.api_paths.

Created:
    2026-10-19
"""

from __future__ import annotations

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_frontend_root() -> Path:
    return Path.cwd() / "frontend"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    service_name: str = Field(
        default="Easy Dispatch API",
        validation_alias=AliasChoices("SERVICE_NAME", "service_name"),
    )
    service_version: str = Field(
        default="1.0.0",
        validation_alias=AliasChoices("SERVICE_VERSION", "service_version"),
    )

    host: str = Field(default="0.0.0.0", validation_alias=AliasChoices("HOST", "host"))
    port: int = Field(default=3000, validation_alias=AliasChoices("PORT", "port"))
    log_level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL", "log_level"))

    frontend_root: Path = Field(
        default_factory=_default_frontend_root,
        description="Directory holding the built SPA (index.html, assets/, ...)",
        validation_alias=AliasChoices("FRONTEND_ROOT", "frontend_root"),
    )

    default_locale: str = Field(
        default="en",
        validation_alias=AliasChoices("DEFAULT_LOCALE", "default_locale"),
    )

    # With no frontend deployed, "/" answers with the API identity payload
    # instead of a 404 envelope.
    root_identity_when_no_frontend: bool = Field(
        default=True,
        validation_alias=AliasChoices("ROOT_IDENTITY_WHEN_NO_FRONTEND", "root_identity_when_no_frontend"),
    )

    @field_validator("frontend_root")
    @classmethod
    def _absolute_frontend_root(cls, v: Path) -> Path:
        return v if v.is_absolute() else (Path.cwd() / v)


def get_settings() -> Settings:
    return Settings()
