"""Preact — mirrors the React branch with ``class`` and Preact's JSX types."""

from __future__ import annotations

from svger.engine.context import ComponentSpec
from svger.engine.emitters._markup import JS_GLOBALS, JSX_TEXT, SVG_NS, attr, escape_text, js_literal, static_attributes
from svger.engine.registry import TemplateFamily, emitter
from svger.models.options import Framework


@emitter(
    target=Framework.PREACT,
    extension=("tsx", "jsx"),
    family=TemplateFamily.JSX,
    description="Preact function component",
    reserved=JS_GLOBALS | {"FunctionComponent", "JSX", "h"},
)
def emit_preact(spec: ComponentSpec) -> str:
    name = spec.identifier
    destructure = "{ className, size, width, height, fill, ...props }"

    if spec.typescript:
        lines = [
            'import { h } from "preact";',
            'import type { FunctionComponent } from "preact";',
            'import type { JSX } from "preact/jsx-runtime";',
            "",
            f"export interface {name}Props extends JSX.SVGAttributes<SVGSVGElement> {{",
            "  className?: string;",
            "  size?: number | string;",
            "}",
            "",
            f"const {name}: FunctionComponent<{name}Props> = ({destructure}) => (",
        ]
    else:
        lines = [
            'import { h } from "preact";',
            "",
            "/**",
            f' * @typedef {{import("preact/jsx-runtime").JSX.SVGAttributes<SVGSVGElement> & {{ className?: string, size?: number | string }}}} {name}Props',
            " */",
            "",
            f"/** @param {{{name}Props}} props */",
            f"const {name} = ({destructure}) => (",
        ]

    lines += [
        "  <svg",
        "    class={className}",
        f'    viewBox="{attr(spec.view_box)}"',
        f'    xmlns="{SVG_NS}"',
        f"    width={{size ?? width ?? {js_literal(spec.width)}}}",
        f"    height={{size ?? height ?? {js_literal(spec.height)}}}",
        f"    fill={{fill ?? {js_literal(spec.fill)}}}",
    ]
    if spec.stroke:
        lines.append(f"    stroke={{{js_literal(spec.stroke)}}}")
    lines += static_attributes(spec, "    ", jsx=True)
    lines += [
        "    {...props}",
        "  >",
    ]
    if spec.normalized_markup:
        lines.append(f"    {escape_text(spec.normalized_markup, JSX_TEXT)}")
    lines += [
        "  </svg>",
        ");",
        "",
        f'{name}.displayName = "{name}";',
        "",
        f"export default {name};",
        "",
    ]
    return "\n".join(lines)
