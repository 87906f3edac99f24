"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    emitters_registered: int = 0


class FrameworkInfo(BaseModel):
    name: str
    extension_ts: str
    extension_js: str
    description: str = ""


class GenerateResponse(BaseModel):
    code: str
    identifier: str
    extension: str
    filename: str
    warnings: list[str] = Field(default_factory=list)


class NormalizeResponse(BaseModel):
    markup: str
    attributes: dict[str, str] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)


class FileResultResponse(BaseModel):
    source: str
    success: bool
    skipped: bool = False
    identifier: str = ""
    output_path: str | None = None
    error: str | None = None
    error_code: str | None = None


class BuildResponse(BaseModel):
    results: list[FileResultResponse] = Field(default_factory=list)
    succeeded: int = 0
    failed: int = 0
    skipped: int = 0
    index_path: str | None = None
