"""Generator — runs Normalizer → Emitter for one component, no I/O."""

from __future__ import annotations

import logging
import re
import time
from typing import Any

from svger.engine.config import EngineDefaults
from svger.engine.context import ComponentSpec, EmitResult
from svger.engine.errors import UnsupportedFrameworkError
from svger.engine.naming import avoid_reserved, derive_identifier
from svger.engine.registry import EmitterRegistry, EmitterSpec, load_emitters
from svger.models.options import GenerationOptions
from svger.svg.normalizer import normalize

logger = logging.getLogger(__name__)

_COMPONENT_IDENTIFIER_RE = re.compile(r"^[A-Z][A-Za-z0-9_]*$")


class Generator:
    """Pure code generation over the emitter registry."""

    def __init__(self, registry: EmitterRegistry | None = None) -> None:
        self.registry = registry or load_emitters()

    def emitter_for(self, target: str) -> EmitterSpec:
        return self.registry.get(target)

    def resolve_identifier(self, identifier: str, target: str) -> str:
        """Component symbol for ``target``: valid, and not shadowing a name the module uses."""
        if not _COMPONENT_IDENTIFIER_RE.match(identifier):
            identifier = derive_identifier(identifier)
        return avoid_reserved(identifier, self.emitter_for(target).reserved)

    def build_spec(
        self,
        identifier: str,
        svg_text: str,
        options: GenerationOptions | None = None,
    ) -> ComponentSpec:
        """Normalize ``svg_text`` for the chosen target and freeze the result."""
        options = options or GenerationOptions()
        emitter = self.emitter_for(options.framework)

        identifier = self.resolve_identifier(identifier, emitter.target)
        normalized = normalize(svg_text, camel_case=emitter.camel_case_attributes)
        return ComponentSpec(
            identifier=identifier,
            raw_markup=svg_text,
            normalized_markup=normalized.markup,
            target=emitter.target,
            attrs=normalized.attrs,
            typescript=options.typescript,
            framework_options=options.framework_options,
            defaults=EngineDefaults.from_values(
                options.default_width,
                options.default_height,
                options.default_fill,
            ),
            warnings=normalized.warnings,
        )

    def emit(self, spec: ComponentSpec) -> EmitResult:
        emitter = self.emitter_for(spec.target)
        t0 = time.perf_counter()
        code = emitter.fn(spec)
        elapsed = (time.perf_counter() - t0) * 1000
        logger.debug("Emitted %s component %s in %.1fms", spec.target.value, spec.identifier, elapsed)
        return EmitResult(code=code, extension=emitter.file_extension(spec.typescript))

    def generate(
        self,
        identifier: str,
        svg_text: str,
        options: GenerationOptions | None = None,
    ) -> tuple[ComponentSpec, EmitResult]:
        spec = self.build_spec(identifier, svg_text, options)
        return spec, self.emit(spec)

    def generate_component(
        self,
        identifier: str,
        svg_text: str,
        options: GenerationOptions | dict[str, Any] | None = None,
    ) -> str:
        if isinstance(options, dict):
            options = GenerationOptions.model_validate(options)
        _, result = self.generate(identifier, svg_text, options)
        return result.code

    def get_file_extension(self, target: str, typescript: bool = True) -> str:
        return self.emitter_for(target).file_extension(typescript)


_generator: Generator | None = None


def create_generator(registry: EmitterRegistry | None = None) -> Generator:
    """Factory function for creating a generator instance."""
    return Generator(registry=registry)


def get_generator() -> Generator:
    global _generator
    if _generator is None:
        _generator = create_generator()
    return _generator


def generate_component(
    identifier: str,
    svg_text: str,
    options: GenerationOptions | dict[str, Any] | None = None,
) -> str:
    return get_generator().generate_component(identifier, svg_text, options)


def get_file_extension(target: str, typescript: bool = True) -> str:
    """Extension for ``(target, typescript)``; raises UnsupportedFrameworkError."""
    return get_generator().get_file_extension(target, typescript)


def supported_targets() -> list[str]:
    return [e.target.value for e in get_generator().registry.all()]


__all__ = [
    "Generator",
    "UnsupportedFrameworkError",
    "create_generator",
    "generate_component",
    "get_file_extension",
    "get_generator",
    "supported_targets",
]
