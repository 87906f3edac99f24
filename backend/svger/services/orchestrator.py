"""Orchestrator — lock check → read → generate → write, per file and per batch.

The only layer that talks to the file system. Every per-file failure is
turned into a FileResult so a batch always runs to completion.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from svger.engine.errors import (
    DuplicateIdentifierError,
    SourceNotFoundError,
    SvgerError,
    UnsupportedFrameworkError,
    WriteError,
)
from svger.engine.generator import Generator, get_generator
from svger.engine.naming import derive_identifier, output_filename
from svger.models.options import GenerationOptions
from svger.services.config_store import ConfigStore
from svger.services.index_file import entry_for, generate_index, index_filename
from svger.services.storage import LocalFileStore, LockStore

logger = logging.getLogger(__name__)


@dataclass
class FileResult:
    """Outcome of one source file; ``success`` is False for skipped files too."""

    source: str
    success: bool = False
    identifier: str = ""
    output_path: str | None = None
    error: str | None = None
    error_code: str | None = None
    skipped: bool = False
    malformed: bool = False
    duration_ms: float = 0.0


@dataclass
class BuildSummary:
    results: list[FileResult] = field(default_factory=list)
    index_path: str | None = None

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def skipped(self) -> int:
        return sum(1 for r in self.results if r.skipped)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.success and not r.skipped)

    @property
    def ok(self) -> bool:
        return self.failed == 0


class Orchestrator:
    """Drives the pure engine over files, with injected collaborators."""

    def __init__(
        self,
        generator: Generator | None = None,
        files: LocalFileStore | None = None,
        locks: LockStore | None = None,
        config: ConfigStore | None = None,
        max_workers: int = 4,
    ) -> None:
        self.generator = generator or get_generator()
        self.files = files or LocalFileStore()
        self.locks = locks or LockStore()
        self.config = config or ConfigStore()
        self.max_workers = max(1, max_workers)

    def resolve_options(self, overrides: GenerationOptions | dict[str, Any] | None = None) -> GenerationOptions:
        return self.config.generation_options(overrides)

    def process_file(
        self,
        svg_path: str | Path,
        out_dir: str | Path,
        options: GenerationOptions | dict[str, Any] | None = None,
    ) -> FileResult:
        return self._process(Path(svg_path), Path(out_dir), self.resolve_options(options))

    def process_batch(
        self,
        svg_paths: list[str | Path],
        out_dir: str | Path,
        options: GenerationOptions | dict[str, Any] | None = None,
    ) -> list[FileResult]:
        """Process files with at most ``max_workers`` in flight; results keep input order."""
        resolved = self.resolve_options(options)
        out = Path(out_dir)
        paths = [Path(p) for p in svg_paths]
        if self.max_workers == 1 or len(paths) <= 1:
            return [self._process(p, out, resolved) for p in paths]
        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="svger") as pool:
            return list(pool.map(lambda p: self._process(p, out, resolved), paths))

    def build(
        self,
        src_dir: str | Path,
        out_dir: str | Path,
        options: GenerationOptions | dict[str, Any] | None = None,
        write_index: bool | None = None,
    ) -> BuildSummary:
        """Convert every ``*.svg`` in ``src_dir`` (minus configured excludes)."""
        config = self.config.read()
        resolved = config.to_generation_options().merge(options)
        logger.info("Starting build: %s → %s (%s)", src_dir, out_dir, resolved.framework)

        excluded = set(config.exclude)
        sources = [p for p in self.files.list_svgs(src_dir) if p.name not in excluded]
        if not sources:
            logger.warning("No SVG files found in %s", src_dir)
            return BuildSummary()

        logger.info("Found %d SVG files to process", len(sources))
        unique, clashes = self._split_duplicates(sources, resolved)
        processed = iter(self.process_batch(unique, out_dir, resolved))
        summary = BuildSummary(
            results=[self._duplicate_result(p, clashes[p]) if p in clashes else next(processed) for p in sources]
        )

        logger.info(
            "Build complete: %d successful, %d failed, %d skipped",
            summary.succeeded,
            summary.failed,
            summary.skipped,
        )
        for r in summary.results:
            if not r.success and not r.skipped:
                logger.warning("  - %s: %s", Path(r.source).name, r.error)

        if (config.generate_index if write_index is None else write_index) and summary.succeeded:
            summary.index_path = self.write_index(out_dir, summary.results, resolved)
        return summary

    def _output_key(self, svg_path: Path, options: GenerationOptions) -> str:
        identifier = derive_identifier(svg_path.stem)
        if options.framework in self.generator.registry:
            identifier = self.generator.resolve_identifier(identifier, options.framework)
        # Case-folded so Home.tsx and home.tsx collide on case-insensitive disks too
        return output_filename(identifier, "", options.naming_convention).lower()

    def _split_duplicates(
        self, sources: list[Path], options: GenerationOptions
    ) -> tuple[list[Path], dict[Path, Path]]:
        """First source per output name wins; later ones map to the winner."""
        claimed: dict[str, Path] = {}
        unique: list[Path] = []
        clashes: dict[Path, Path] = {}
        for path in sources:
            key = self._output_key(path, options)
            if key in claimed:
                clashes[path] = claimed[key]
            else:
                claimed[key] = path
                unique.append(path)
        return unique, clashes

    def _duplicate_result(self, svg_path: Path, winner: Path) -> FileResult:
        identifier = derive_identifier(svg_path.stem)
        error = DuplicateIdentifierError(
            f"component {identifier} is already generated from {winner.name}",
            path=str(svg_path),
        )
        _log_failure(svg_path, error)
        return FileResult(
            source=str(svg_path),
            identifier=identifier,
            error=f"{svg_path.name}: {error.message}",
            error_code=error.code,
        )

    def write_index(self, out_dir: str | Path, results: list[FileResult], options: GenerationOptions) -> str | None:
        entries = []
        exported: set[str] = set()
        for r in results:
            if not r.success or not r.output_path or r.identifier in exported:
                continue
            exported.add(r.identifier)
            entries.append(entry_for(r.identifier, r.output_path))
        if not entries:
            return None
        path = Path(out_dir) / index_filename(options.typescript)
        try:
            self.files.write_text(path, generate_index(entries, options.framework, self.generator.registry))
        except WriteError as e:
            logger.error("Failed to write index: %s", e)
            return None
        logger.info("Generated %s with %d component exports", path.name, len(entries))
        return str(path)

    def clean(self, out_dir: str | Path) -> int:
        removed = self.files.empty_dir(out_dir)
        logger.info("Cleaned %d generated files in %s", removed, out_dir)
        return removed

    def _process(self, svg_path: Path, out_dir: Path, options: GenerationOptions) -> FileResult:
        result = FileResult(source=str(svg_path))
        t0 = time.perf_counter()

        if self.locks.is_locked(svg_path):
            logger.warning("Skipped locked file: %s", svg_path.name)
            result.skipped = True
            result.error = "file is locked"
            return result

        try:
            svg_text = self.files.read_text(svg_path)
            identifier = derive_identifier(svg_path.stem)
            result.identifier = identifier
            spec, emitted = self.generator.generate(identifier, svg_text, options)
            result.identifier = spec.identifier
            target = out_dir / output_filename(spec.identifier, emitted.extension, options.naming_convention)
            self.files.write_text(target, emitted.code)
        except SvgerError as e:
            _log_failure(svg_path, e)
            result.error = f"{svg_path.name}: {e.message}"
            result.error_code = e.code
        except Exception as e:
            logger.exception("Unexpected failure processing %s", svg_path.name)
            result.error = f"{svg_path.name}: {e}"
            result.error_code = "UNEXPECTED"
        else:
            result.success = True
            result.output_path = str(target)
            result.malformed = bool(spec.warnings)
            logger.info("Generated component: %s", target.name)
        finally:
            result.duration_ms = round((time.perf_counter() - t0) * 1000, 1)
        return result


def _log_failure(svg_path: Path, error: SvgerError) -> None:
    if isinstance(error, SourceNotFoundError):
        logger.warning("Failed to process %s: %s", svg_path.name, error.message)
    elif isinstance(error, (UnsupportedFrameworkError, WriteError)):
        logger.error("Failed to process %s: %s", svg_path.name, error.message)
    else:
        logger.error("Failed to process %s: %s (%s)", svg_path.name, error.message, error.code)


def create_orchestrator(**kwargs: Any) -> Orchestrator:
    """Orchestrator wired to the process settings (config, lock file, workers)."""
    from svger.config import settings

    kwargs.setdefault("config", ConfigStore(settings.config_file))
    kwargs.setdefault("locks", LockStore(settings.lock_file))
    kwargs.setdefault("max_workers", settings.max_workers)
    return Orchestrator(**kwargs)
