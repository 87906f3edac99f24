"""FastAPI dependency injection."""

from __future__ import annotations

from svger.config import settings
from svger.engine.generator import Generator, get_generator
from svger.services.orchestrator import Orchestrator, create_orchestrator


def get_settings():
    return settings


def get_engine() -> Generator:
    return get_generator()


def get_orchestrator() -> Orchestrator:
    return create_orchestrator()
