"""POST /api/build — convert a directory of SVGs on the server's disk."""

from __future__ import annotations

import asyncio
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException

from svger.config import Settings
from svger.dependencies import get_orchestrator, get_settings
from svger.engine.errors import SourceNotFoundError
from svger.models.requests import BuildRequest
from svger.models.responses import BuildResponse, FileResultResponse
from svger.services.orchestrator import Orchestrator

router = APIRouter()


def _within_root(root: Path, path: str) -> Path:
    resolved = (root / path).resolve()
    if not resolved.is_relative_to(root):
        raise HTTPException(status_code=403, detail=f"Path outside project root: {path}")
    return resolved


@router.post("/build", response_model=BuildResponse)
async def build(
    req: BuildRequest,
    orchestrator: Orchestrator = Depends(get_orchestrator),
    settings: Settings = Depends(get_settings),
) -> BuildResponse:
    root = Path(settings.project_root).resolve()
    src = _within_root(root, req.src)
    out = _within_root(root, req.out)

    overrides: dict = {}
    if req.framework is not None:
        overrides["framework"] = req.framework
    if req.typescript is not None:
        overrides["typescript"] = req.typescript
    if req.framework_options:
        overrides["framework_options"] = req.framework_options
    if req.naming_convention is not None:
        overrides["naming_convention"] = req.naming_convention

    loop = asyncio.get_running_loop()
    try:
        # File I/O in a thread so the event loop stays free
        summary = await loop.run_in_executor(None, orchestrator.build, src, out, overrides)
    except SourceNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message) from e

    return BuildResponse(
        results=[
            FileResultResponse(
                source=r.source,
                success=r.success,
                skipped=r.skipped,
                identifier=r.identifier,
                output_path=r.output_path,
                error=r.error,
                error_code=r.error_code,
            )
            for r in summary.results
        ],
        succeeded=summary.succeeded,
        failed=summary.failed,
        skipped=summary.skipped,
        index_path=summary.index_path,
    )
