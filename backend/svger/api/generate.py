"""POST /api/generate, /api/normalize — single-component generation."""

from __future__ import annotations

from pathlib import PurePath

from fastapi import APIRouter, Depends, HTTPException

from svger.dependencies import get_engine
from svger.engine.errors import UnsupportedFrameworkError
from svger.engine.generator import Generator
from svger.engine.naming import derive_identifier, output_filename
from svger.models.options import GenerationOptions
from svger.models.requests import GenerateRequest, NormalizeRequest
from svger.models.responses import GenerateResponse, NormalizeResponse
from svger.svg.normalizer import normalize

router = APIRouter()


@router.post("/generate", response_model=GenerateResponse)
async def generate(
    req: GenerateRequest,
    engine: Generator = Depends(get_engine),
) -> GenerateResponse:
    stem = PurePath(req.name).stem if req.name.lower().endswith(".svg") else req.name
    identifier = derive_identifier(stem)
    options = GenerationOptions(
        framework=req.framework,
        typescript=req.typescript,
        framework_options=req.framework_options,
        default_width=req.default_width,
        default_height=req.default_height,
        default_fill=req.default_fill,
        naming_convention=req.naming_convention,
    )

    try:
        spec, result = engine.generate(identifier, req.svg, options)
    except UnsupportedFrameworkError as e:
        raise HTTPException(status_code=400, detail=e.message) from e

    return GenerateResponse(
        code=result.code,
        identifier=spec.identifier,
        extension=result.extension,
        filename=output_filename(spec.identifier, result.extension, req.naming_convention),
        warnings=[str(w) for w in spec.warnings],
    )


@router.post("/normalize", response_model=NormalizeResponse)
async def normalize_svg(req: NormalizeRequest) -> NormalizeResponse:
    normalized = normalize(req.svg, camel_case=req.camel_case)
    return NormalizeResponse(
        markup=normalized.markup,
        attributes=normalized.attrs.as_dict(),
        warnings=[str(w) for w in normalized.warnings],
    )
