"""
frontgate.api.frontend.resolver

Purpose:
    Single place that answers "is the frontend deployed?" and "does this static
    asset exist?" for the dispatcher, the root route and the error normalizer.

Notes:
    - Every call hits the filesystem. The bundle can be deployed or removed
      while the process runs, so nothing is cached.
    - Never reads file contents; callers stream the file themselves.

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

INDEX_DOCUMENT = "index.html"


@dataclass(frozen=True)
class Resolution:
    exists: bool
    path: Path


class FrontendResolver:
    def __init__(self, root: Path) -> None:
        self._root = Path(root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def root_exists(self) -> bool:
        return self._root.is_dir()

    @staticmethod
    def _is_file(candidate: Path) -> bool:
        # ENAMETOOLONG and embedded NUL bytes count as missing.
        try:
            return candidate.is_file()
        except (OSError, ValueError):
            return False

    def index(self) -> Resolution:
        candidate = self._root / INDEX_DOCUMENT
        return Resolution(exists=self._is_file(candidate), path=candidate)

    def asset(self, request_path: str) -> Resolution:
        relative = request_path.lstrip("/")
        candidate = self._root / relative
        if not relative:
            return Resolution(exists=False, path=candidate)

        try:
            candidate = candidate.resolve()
        except (OSError, ValueError):
            return Resolution(exists=False, path=candidate)

        # Anything resolving outside the root (.., symlinks) does not exist for us.
        if not candidate.is_relative_to(self._root):
            return Resolution(exists=False, path=candidate)

        return Resolution(exists=self._is_file(candidate), path=candidate)
