"""ComponentSpec — the single immutable value flowing from normalizer to emitter.

Normalizer output → NormalizedSvg (markup + ExtractedAttrs)
Deriver output → ComponentSpec.identifier
Emitter output → EmitResult (code + extension)
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from svger.engine.config import DEFAULTS, EngineDefaults
from svger.engine.errors import MalformedMarkupWarning
from svger.models.options import Framework, FrameworkOptions

_NUMERIC_RE = re.compile(r"^\d+(?:\.\d+)?$")


@dataclass(frozen=True)
class ExtractedAttrs:
    """Presentation attributes read from the source ``<svg>`` tag."""

    view_box: str | None = None
    width: str | None = None
    height: str | None = None
    fill: str | None = None
    stroke: str | None = None
    # Other root presentation attributes (strokeWidth, fill-rule, ...) in source order
    presentation: tuple[tuple[str, str], ...] = ()

    def as_dict(self) -> dict[str, str]:
        out = {
            "viewBox": self.view_box,
            "width": self.width,
            "height": self.height,
            "fill": self.fill,
            "stroke": self.stroke,
        }
        out.update(dict(self.presentation))
        return {k: v for k, v in out.items() if v is not None}


@dataclass(frozen=True)
class NormalizedSvg:
    markup: str
    attrs: ExtractedAttrs = field(default_factory=ExtractedAttrs)
    # Non-fatal findings; empty for well-formed input
    warnings: tuple[MalformedMarkupWarning, ...] = ()

    @property
    def is_malformed(self) -> bool:
        return bool(self.warnings)


@dataclass(frozen=True)
class ComponentSpec:
    """Everything an emitter branch needs, fully resolved before emission."""

    identifier: str
    raw_markup: str
    normalized_markup: str
    target: Framework
    attrs: ExtractedAttrs = field(default_factory=ExtractedAttrs)
    typescript: bool = True
    framework_options: FrameworkOptions = field(default_factory=FrameworkOptions)
    defaults: EngineDefaults = DEFAULTS
    # Normalizer findings carried through for reporting
    warnings: tuple[MalformedMarkupWarning, ...] = ()

    @property
    def width(self) -> str:
        return self.attrs.width or self.defaults.width

    @property
    def height(self) -> str:
        return self.attrs.height or self.defaults.height

    @property
    def fill(self) -> str:
        return self.attrs.fill or self.defaults.fill

    @property
    def stroke(self) -> str:
        return self.attrs.stroke or ""

    @property
    def view_box(self) -> str:
        if self.attrs.view_box:
            return self.attrs.view_box
        # Derive from explicit dimensions, same as a browser would for a bare canvas
        if self.attrs.width and self.attrs.height:
            w, h = self.width, self.height
            if _NUMERIC_RE.match(w) and _NUMERIC_RE.match(h):
                return f"0 0 {w} {h}"
        return self.defaults.view_box


@dataclass(frozen=True)
class EmitResult:
    code: str
    extension: str
