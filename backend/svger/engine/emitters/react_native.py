"""React Native — same shape as React, rendered with react-native-svg primitives."""

from __future__ import annotations

import re

from svger.engine.context import ComponentSpec
from svger.engine.emitters._markup import JS_GLOBALS, JSX_TEXT, attr, escape_text, js_literal, static_attributes
from svger.engine.registry import TemplateFamily, emitter
from svger.models.options import Framework

# SVG element → react-native-svg export
NATIVE_PRIMITIVES: dict[str, str] = {
    "circle": "Circle",
    "clipPath": "ClipPath",
    "defs": "Defs",
    "ellipse": "Ellipse",
    "foreignObject": "ForeignObject",
    "g": "G",
    "image": "Image",
    "line": "Line",
    "linearGradient": "LinearGradient",
    "marker": "Marker",
    "mask": "Mask",
    "path": "Path",
    "pattern": "Pattern",
    "polygon": "Polygon",
    "polyline": "Polyline",
    "radialGradient": "RadialGradient",
    "rect": "Rect",
    "stop": "Stop",
    "symbol": "Symbol",
    "text": "Text",
    "textPath": "TextPath",
    "tspan": "TSpan",
    "use": "Use",
}

_TAG_RE = re.compile(r"<(/?)([A-Za-z][\w]*)(?=[\s/>])")


def to_native_markup(markup: str) -> tuple[str, list[str]]:
    """Rename known SVG tags to native primitives; return markup + names used."""
    used: set[str] = set()

    def _swap(match: re.Match[str]) -> str:
        native = NATIVE_PRIMITIVES.get(match.group(2))
        if native is None:
            return match.group(0)
        used.add(native)
        return f"<{match.group(1)}{native}"

    converted = _TAG_RE.sub(_swap, markup)
    return converted, sorted(used)


@emitter(
    target=Framework.REACT_NATIVE,
    extension=("ts", "js"),
    family=TemplateFamily.JSX,
    description="React Native component using react-native-svg",
    reserved=JS_GLOBALS | {"React", "Svg", "SvgProps"} | set(NATIVE_PRIMITIVES.values()),
)
def emit_react_native(spec: ComponentSpec) -> str:
    name = spec.identifier
    markup, primitives = to_native_markup(spec.normalized_markup)

    lines = ['import React from "react";']
    if primitives:
        lines.append(f'import Svg, {{ {", ".join(primitives)} }} from "react-native-svg";')
    else:
        lines.append('import Svg from "react-native-svg";')

    if spec.typescript:
        lines += [
            'import type { SvgProps } from "react-native-svg";',
            "",
            f"export interface {name}Props extends SvgProps {{",
            "  size?: number | string;",
            "  color?: string;",
            "}",
        ]
    else:
        lines += [
            "",
            "/**",
            f' * @typedef {{import("react-native-svg").SvgProps & {{ size?: number | string, color?: string }}}} {name}Props',
            " */",
        ]

    generics = f"<Svg, {name}Props>" if spec.typescript else ""
    destructure = "{ size, color, width, height, fill, ...props }"
    lines += [
        "",
        f"const {name} = React.forwardRef{generics}(",
        f"  ({destructure}, ref) => (",
        "    <Svg",
        "      ref={ref}",
        f'      viewBox="{attr(spec.view_box)}"',
        f"      width={{size ?? width ?? {js_literal(spec.width)}}}",
        f"      height={{size ?? height ?? {js_literal(spec.height)}}}",
        f"      fill={{color ?? fill ?? {js_literal(spec.fill)}}}",
    ]
    if spec.stroke:
        lines.append(f"      stroke={{{js_literal(spec.stroke)}}}")
    lines += static_attributes(spec, "      ", jsx=True)
    lines += [
        "      {...props}",
        "    >",
    ]
    if markup:
        lines.append(f"      {escape_text(markup, JSX_TEXT)}")
    lines += [
        "    </Svg>",
        "  )",
        ");",
        "",
        f'{name}.displayName = "{name}";',
        "",
        f"export default {name};",
        "",
    ]
    return "\n".join(lines)
