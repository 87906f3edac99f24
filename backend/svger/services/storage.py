"""File-system collaborators — source reader/writer and the advisory lock list."""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path

from svger.engine.errors import SourceNotFoundError, WriteError

logger = logging.getLogger(__name__)


class LocalFileStore:
    """Reads SVG sources and writes generated files on the local disk."""

    encoding = "utf-8"

    def read_text(self, path: str | Path) -> str:
        path = Path(path)
        try:
            return path.read_text(encoding=self.encoding)
        except FileNotFoundError:
            raise SourceNotFoundError(f"SVG file not found: {path}", path=str(path)) from None
        except IsADirectoryError:
            raise SourceNotFoundError(f"Not a file: {path}", path=str(path)) from None

    def write_text(self, path: str | Path, content: str) -> None:
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding=self.encoding)
        except OSError as e:
            raise WriteError(f"Cannot write {path}: {e.strerror or e}", path=str(path)) from e

    def list_svgs(self, directory: str | Path) -> list[Path]:
        directory = Path(directory)
        if not directory.is_dir():
            raise SourceNotFoundError(f"Source folder not found: {directory}", path=str(directory))
        return sorted(p for p in directory.iterdir() if p.is_file() and p.suffix.lower() == ".svg")

    def empty_dir(self, directory: str | Path) -> int:
        """Delete every file under ``directory``; returns how many were removed."""
        directory = Path(directory)
        if not directory.is_dir():
            return 0
        removed = 0
        for path in sorted(directory.rglob("*"), reverse=True):
            if path.is_dir():
                path.rmdir()
            else:
                path.unlink()
                removed += 1
        return removed


class LockStore:
    """JSON list of locked SVG basenames (``.svg-lock``).

    Locked sources are skipped by builds so hand-edited components survive.
    """

    def __init__(self, path: str | Path = ".svg-lock") -> None:
        self.path = Path(path)
        self._lock = threading.Lock()
        self._cache: set[str] | None = None

    def _read(self) -> set[str]:
        if self._cache is not None:
            return self._cache
        if not self.path.exists():
            self._cache = set()
            return self._cache
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable lock file %s: %s", self.path, e)
            data = []
        self._cache = {str(name) for name in data} if isinstance(data, list) else set()
        return self._cache

    def _write(self, names: set[str]) -> None:
        try:
            self.path.write_text(json.dumps(sorted(names), indent=2), encoding="utf-8")
        except OSError as e:
            raise WriteError(f"Cannot write lock file {self.path}: {e}", path=str(self.path)) from e
        self._cache = names

    def locked(self) -> list[str]:
        with self._lock:
            return sorted(self._read())

    def is_locked(self, file: str | Path) -> bool:
        with self._lock:
            return Path(file).name in self._read()

    def lock(self, files: list[str | Path]) -> list[str]:
        names = {Path(f).name for f in files}
        with self._lock:
            current = set(self._read()) | names
            self._write(current)
        logger.info("Locked files: %s", ", ".join(sorted(names)))
        return sorted(current)

    def unlock(self, files: list[str | Path]) -> list[str]:
        names = {Path(f).name for f in files}
        with self._lock:
            current = set(self._read()) - names
            self._write(current)
        logger.info("Unlocked files: %s", ", ".join(sorted(names)))
        return sorted(current)

    def clear_cache(self) -> None:
        with self._lock:
            self._cache = None
