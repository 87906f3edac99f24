"""Helpers shared by emitter branches: literals, escaping, root attributes."""

from __future__ import annotations

import json
import re

from svger.engine.context import ComponentSpec

SVG_NS = "http://www.w3.org/2000/svg"

_NUMERIC_RE = re.compile(r"^-?\d+(?:\.\d+)?$")
_TAG_SPLIT_RE = re.compile(r"(<[^>]*>)")

# Globals referenced by emitted modules (String(), Object.entries, SVGSVGElement, ...)
JS_GLOBALS = frozenset(
    {"Array", "Boolean", "HTMLElementTagNameMap", "Number", "Object", "Record", "SVGSVGElement", "String", "Symbol"}
)

# Text-node escapes per template dialect; attribute values are left alone
JSX_TEXT = {"{": "&#123;", "}": "&#125;", ">": "&gt;"}
SVELTE_TEXT = {"{": "&#123;", "}": "&#125;"}
VUE_TEXT = {"{": "&#123;"}
ANGULAR_TEXT = {"{": "&#123;", "}": "&#125;", "@": "&#64;"}


def js_literal(value: str) -> str:
    """Numbers stay bare, everything else becomes a double-quoted JS string."""
    if _NUMERIC_RE.match(value):
        return value
    return json.dumps(value)


def js_string(value: str, quote: str = '"') -> str:
    if quote == '"':
        return json.dumps(value)
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def attr(value: str) -> str:
    """Escape a value for a double-quoted markup attribute."""
    return value.replace("&", "&amp;").replace('"', "&quot;")


def escape_text(markup: str, table: dict[str, str]) -> str:
    """Replace characters in text nodes only, leaving tags untouched."""
    parts = _TAG_SPLIT_RE.split(markup)
    for i in range(0, len(parts), 2):
        if parts[i]:
            parts[i] = "".join(table.get(ch, ch) for ch in parts[i])
    return "".join(parts)


def escape_template_literal(markup: str) -> str:
    """Make markup safe inside a JS backtick string."""
    return markup.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


def static_attributes(spec: ComponentSpec, indent: str, jsx: bool = False) -> list[str]:
    """Root presentation attributes carried over from the source ``<svg>``."""
    out = []
    for name, value in spec.attrs.presentation:
        if jsx and _NUMERIC_RE.match(value):
            out.append(f"{indent}{name}={{{value}}}")
        else:
            out.append(f'{indent}{name}="{attr(value)}"')
    return out


def ts(spec: ComponentSpec, text: str) -> str:
    """``text`` in TypeScript mode, nothing in JavaScript mode."""
    return text if spec.typescript else ""
