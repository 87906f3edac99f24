"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from svger.api import build, generate, health

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(generate.router)
api_router.include_router(build.router)
