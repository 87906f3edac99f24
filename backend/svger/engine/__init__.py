"""svger component generation engine."""

from svger.engine.context import ComponentSpec, EmitResult, ExtractedAttrs, NormalizedSvg
from svger.engine.generator import (
    Generator,
    create_generator,
    generate_component,
    get_file_extension,
)
from svger.engine.naming import derive_identifier, output_filename, to_kebab_case
from svger.engine.registry import TemplateFamily, emitter, get_registry

__all__ = [
    "ComponentSpec",
    "EmitResult",
    "ExtractedAttrs",
    "NormalizedSvg",
    "Generator",
    "create_generator",
    "generate_component",
    "get_file_extension",
    "derive_identifier",
    "output_filename",
    "to_kebab_case",
    "TemplateFamily",
    "emitter",
    "get_registry",
]
