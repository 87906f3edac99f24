"""Solid — function component typed over ``JSX.SvgSVGAttributes``."""

from __future__ import annotations

from svger.engine.context import ComponentSpec
from svger.engine.emitters._markup import JS_GLOBALS, JSX_TEXT, SVG_NS, attr, escape_text, js_literal, static_attributes
from svger.engine.registry import TemplateFamily, emitter
from svger.models.options import Framework


@emitter(
    target=Framework.SOLID,
    extension=("tsx", "jsx"),
    family=TemplateFamily.JSX,
    description="Solid function component",
    reserved=JS_GLOBALS | {"Component", "JSX", "splitProps"},
)
def emit_solid(spec: ComponentSpec) -> str:
    name = spec.identifier
    lines = []
    if spec.typescript:
        lines += [
            'import { splitProps } from "solid-js";',
            'import type { Component, JSX } from "solid-js";',
            "",
            f"export interface {name}Props extends JSX.SvgSVGAttributes<SVGSVGElement> {{",
            "  size?: number | string;",
            "}",
            "",
            f"const {name}: Component<{name}Props> = (props) => {{",
        ]
    else:
        lines += [
            'import { splitProps } from "solid-js";',
            "",
            "/**",
            f' * @typedef {{import("solid-js").JSX.SvgSVGAttributes<SVGSVGElement> & {{ size?: number | string }}}} {name}Props',
            " */",
            "",
            f"/** @param {{{name}Props}} props */",
            f"const {name} = (props) => {{",
        ]

    # Props are reactive getters in Solid; defaults are read lazily in JSX
    lines += [
        '  const [local, others] = splitProps(props, ["size", "width", "height", "fill"]);',
        "",
        "  return (",
        "    <svg",
        f'      viewBox="{attr(spec.view_box)}"',
        f'      xmlns="{SVG_NS}"',
        f"      width={{local.size ?? local.width ?? {js_literal(spec.width)}}}",
        f"      height={{local.size ?? local.height ?? {js_literal(spec.height)}}}",
        f"      fill={{local.fill ?? {js_literal(spec.fill)}}}",
    ]
    if spec.stroke:
        lines.append(f"      stroke={{{js_literal(spec.stroke)}}}")
    lines += static_attributes(spec, "      ", jsx=True)
    lines += [
        "      {...others}",
        "    >",
    ]
    if spec.normalized_markup:
        lines.append(f"      {escape_text(spec.normalized_markup, JSX_TEXT)}")
    lines += [
        "    </svg>",
        "  );",
        "};",
        "",
        f"export default {name};",
        "",
    ]
    return "\n".join(lines)
