"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from svger.engine.generator import get_generator
from svger.models.responses import FrameworkInfo, HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        emitters_registered=get_generator().registry.count,
    )


@router.get("/frameworks", response_model=list[FrameworkInfo])
async def frameworks() -> list[FrameworkInfo]:
    return [
        FrameworkInfo(
            name=spec.target.value,
            extension_ts=spec.file_extension(True),
            extension_js=spec.file_extension(False),
            description=spec.description,
        )
        for spec in get_generator().registry.all()
    ]
