"""
frontgate.api.i18n.translator

Purpose:
    Minimal message catalog for localized error messages.
    Catalogs are JSON files shipped as package data:

        frontgate/api/i18n/locales/<lang>/<namespace>.json

    and keys are addressed as "<namespace>.<KEY>" (e.g. "common.INTERNAL_SERVER_ERROR").

Notes:
    - Locale resolution: ?lang= query param, X-Lang header, Accept-Language, default.
    - translate() returns None for unknown keys/locales; callers own the fallback text.

Created:
    2026-10-19
"""

from __future__ import annotations

import json
import logging
from importlib import resources
from typing import Mapping, Protocol

from starlette.requests import Request

logger = logging.getLogger(__name__)

LANG_QUERY_PARAM = "lang"
LANG_HEADER = "X-Lang"


class Translator(Protocol):
    def translate(self, key: str, locale: str | None = None) -> str | None: ...

    def resolve_locale(self, request: Request) -> str: ...


def _base_language(tag: str) -> str:
    return tag.strip().split("-")[0].split("_")[0].lower()


def parse_accept_language(header: str | None) -> list[str]:
    """Return language tags from an Accept-Language header, highest q first."""
    if not header:
        return []

    weighted: list[tuple[float, int, str]] = []
    for idx, part in enumerate(header.split(",")):
        piece = part.strip()
        if not piece:
            continue
        tag, _, params = piece.partition(";")
        q = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                q = float(params[2:])
            except ValueError:
                q = 0.0
        if tag.strip() and tag.strip() != "*" and q > 0:
            weighted.append((-q, idx, tag.strip()))

    return [tag for _, _, tag in sorted(weighted)]


class JsonCatalogTranslator:
    def __init__(self, catalogs: Mapping[str, Mapping[str, str]], default_locale: str = "en") -> None:
        self._catalogs = {lang.lower(): dict(messages) for lang, messages in catalogs.items()}
        self._default_locale = default_locale.lower()

    @classmethod
    def from_package(cls, default_locale: str = "en") -> "JsonCatalogTranslator":
        catalogs: dict[str, dict[str, str]] = {}
        locales_dir = resources.files("frontgate.api.i18n").joinpath("locales")

        for lang_dir in locales_dir.iterdir():
            if not lang_dir.is_dir():
                continue
            messages: dict[str, str] = {}
            for entry in lang_dir.iterdir():
                if not entry.name.endswith(".json"):
                    continue
                namespace = entry.name[: -len(".json")]
                data = json.loads(entry.read_text(encoding="utf-8"))
                for key, value in data.items():
                    messages[f"{namespace}.{key}"] = str(value)
            catalogs[lang_dir.name] = messages

        logger.debug("Loaded message catalogs: %s", sorted(catalogs))
        return cls(catalogs, default_locale=default_locale)

    @property
    def locales(self) -> list[str]:
        return sorted(self._catalogs)

    def resolve_locale(self, request: Request) -> str:
        candidates: list[str] = []
        query_lang = request.query_params.get(LANG_QUERY_PARAM)
        if query_lang:
            candidates.append(query_lang)
        header_lang = request.headers.get(LANG_HEADER)
        if header_lang:
            candidates.append(header_lang)
        candidates.extend(parse_accept_language(request.headers.get("accept-language")))

        for tag in candidates:
            lang = _base_language(tag)
            if lang in self._catalogs:
                return lang
        return self._default_locale

    def translate(self, key: str, locale: str | None = None) -> str | None:
        lang = _base_language(locale) if locale else self._default_locale
        message = self._catalogs.get(lang, {}).get(key)
        if message is None and lang != self._default_locale:
            message = self._catalogs.get(self._default_locale, {}).get(key)
        return message
