"""SVG content normalizer — regex passes over raw markup, no XML parser.

The passes run in a fixed order; later patterns assume earlier ones already
ran (e.g. attribute extraction expects line breaks and inline styles gone).
Malformed input is passed through best-effort rather than rejected.
"""

from __future__ import annotations

import logging
import re

from svger.engine.context import ExtractedAttrs, NormalizedSvg
from svger.engine.errors import MalformedMarkupWarning

logger = logging.getLogger(__name__)

_XML_DECL_RE = re.compile(r"<\?xml.*?\?>", re.DOTALL | re.IGNORECASE)
_DOCTYPE_RE = re.compile(r"<!DOCTYPE[^>\[]*(?:\[.*?\])?\s*>", re.DOTALL | re.IGNORECASE)
_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)

# A break that would glue two tokens together (e.g. "<path\nd=") becomes a space
_INNER_BREAK_RE = re.compile(r"(?<=[^\s>])(?:\r\n|\r|\n)+(?=[^\s<])")
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
_MULTI_SPACE_RE = re.compile(r"\s{2,}")

_STYLE_ATTR_RE = re.compile(r"""\s+style\s*=\s*(?:"[^"]*"|'[^']*')""")
_XMLNS_ATTR_RE = re.compile(r"""\s+xmlns(?::xlink)?\s*=\s*(?:"[^"]*"|'[^']*')""")

# Hyphenated presentation attributes → JSX spelling
CAMEL_CASE_ATTRIBUTES: dict[str, str] = {
    "fill-rule": "fillRule",
    "clip-rule": "clipRule",
    "stroke-width": "strokeWidth",
    "stroke-linecap": "strokeLinecap",
    "stroke-linejoin": "strokeLinejoin",
    "stroke-miterlimit": "strokeMiterlimit",
    "stroke-dasharray": "strokeDasharray",
    "stroke-dashoffset": "strokeDashoffset",
    "font-family": "fontFamily",
    "font-size": "fontSize",
    "font-weight": "fontWeight",
    "text-anchor": "textAnchor",
}
# Attribute position only, so CSS inside <style> keeps its property names
_CAMEL_ATTR_RE = re.compile(
    r"(?<![\w:-])(" + "|".join(re.escape(k) for k in CAMEL_CASE_ATTRIBUTES) + r")(?=\s*=)"
)

_SVG_OPEN_RE = re.compile(r"<svg\b([^>]*)>", re.IGNORECASE)
_SVG_WRAPPER_RE = re.compile(r"<svg\b[^>]*?(?:/>|>(.*)</svg\s*>)", re.DOTALL | re.IGNORECASE)

_EXTRACTED = ("viewBox", "width", "height", "fill", "stroke")


def _attr_re(name: str) -> re.Pattern[str]:
    return re.compile(
        r"""(?<![\w:-])""" + name + r"""\s*=\s*(?:"([^"]*)"|'([^']*)')""",
        re.IGNORECASE,
    )


_ATTR_RES = {name: _attr_re(name) for name in _EXTRACTED}
_PRESENTATION_RE = re.compile(
    r"""(?<![\w:-])("""
    + "|".join(re.escape(n) for pair in CAMEL_CASE_ATTRIBUTES.items() for n in pair)
    + r""")\s*=\s*(?:"([^"]*)"|'([^']*)')"""
)


def strip_declarations(svg_text: str) -> str:
    svg_text = _XML_DECL_RE.sub("", svg_text)
    svg_text = _DOCTYPE_RE.sub("", svg_text)
    return _COMMENT_RE.sub("", svg_text)


def collapse_whitespace(svg_text: str) -> str:
    svg_text = _INNER_BREAK_RE.sub(" ", svg_text)
    svg_text = _LINE_BREAK_RE.sub("", svg_text)
    return _MULTI_SPACE_RE.sub(" ", svg_text)


def camel_case_attributes(svg_text: str) -> str:
    return _CAMEL_ATTR_RE.sub(lambda m: CAMEL_CASE_ATTRIBUTES[m.group(1)], svg_text)


def extract_attributes(svg_text: str) -> ExtractedAttrs:
    """Read viewBox/width/height/fill/stroke from the first ``<svg>`` tag."""
    match = _SVG_OPEN_RE.search(svg_text)
    if not match:
        return ExtractedAttrs()

    tag_attrs = match.group(1)
    found: dict[str, str | None] = {}
    for name, pattern in _ATTR_RES.items():
        m = pattern.search(tag_attrs)
        found[name] = None if m is None else (m.group(1) if m.group(1) is not None else m.group(2))

    presentation = tuple(
        (m.group(1), m.group(2) if m.group(2) is not None else m.group(3))
        for m in _PRESENTATION_RE.finditer(tag_attrs)
    )

    return ExtractedAttrs(
        view_box=found["viewBox"],
        width=found["width"],
        height=found["height"],
        fill=found["fill"],
        stroke=found["stroke"],
        presentation=presentation,
    )


def normalize(svg_text: str, *, camel_case: bool = True) -> NormalizedSvg:
    """Clean raw SVG and split it into inner markup + root attributes.

    ``camel_case`` controls the presentation-attribute rewrite; JSX targets
    want it, string-template targets keep the SVG spelling.
    """
    text = strip_declarations(svg_text)
    text = collapse_whitespace(text)
    text = _STYLE_ATTR_RE.sub("", text)
    text = _XMLNS_ATTR_RE.sub("", text)
    if camel_case:
        text = camel_case_attributes(text)

    attrs = extract_attributes(text)

    wrapper = _SVG_WRAPPER_RE.search(text)
    if wrapper is None:
        warning = MalformedMarkupWarning("no <svg> wrapper found; markup passed through unchanged")
        if text.strip():
            logger.warning("Normalizer: %s", warning)
        return NormalizedSvg(markup=text.strip(), attrs=attrs, warnings=(warning,))

    markup = (wrapper.group(1) or "").strip()
    return NormalizedSvg(markup=markup, attrs=attrs)


def clean_content(svg_text: str, *, camel_case: bool = True) -> str:
    """Normalizer alone — just the cleaned inner markup."""
    return normalize(svg_text, camel_case=camel_case).markup
