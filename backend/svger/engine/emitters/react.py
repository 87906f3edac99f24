"""React — forwardRef function component over ``SVGProps<SVGSVGElement>``."""

from __future__ import annotations

from svger.engine.context import ComponentSpec
from svger.engine.emitters._markup import JS_GLOBALS, JSX_TEXT, SVG_NS, attr, escape_text, js_literal, static_attributes
from svger.engine.registry import TemplateFamily, emitter
from svger.models.options import Framework


def _props_declaration(spec: ComponentSpec) -> list[str]:
    name = spec.identifier
    if spec.typescript:
        return [
            f"export interface {name}Props extends SVGProps<SVGSVGElement> {{",
            "  size?: number | string;",
            "}",
        ]
    return [
        "/**",
        f' * @typedef {{import("react").SVGProps<SVGSVGElement> & {{ size?: number | string }}}} {name}Props',
        " */",
    ]


def _svg_element(spec: ComponentSpec, indent: str, with_ref: bool) -> list[str]:
    pad = indent + "  "
    lines = [f"{indent}<svg"]
    if with_ref:
        lines.append(f"{pad}ref={{ref}}")
    lines += [
        f'{pad}viewBox="{attr(spec.view_box)}"',
        f'{pad}xmlns="{SVG_NS}"',
        f"{pad}width={{size ?? width ?? {js_literal(spec.width)}}}",
        f"{pad}height={{size ?? height ?? {js_literal(spec.height)}}}",
        f"{pad}fill={{fill ?? {js_literal(spec.fill)}}}",
    ]
    if spec.stroke:
        lines.append(f"{pad}stroke={{stroke ?? {js_literal(spec.stroke)}}}")
    lines += static_attributes(spec, pad, jsx=True)
    lines += [
        f"{pad}{{...props}}",
        f"{indent}>",
    ]
    if spec.normalized_markup:
        lines.append(f"{pad}{escape_text(spec.normalized_markup, JSX_TEXT)}")
    lines.append(f"{indent}</svg>")
    return lines


def _destructure(spec: ComponentSpec) -> str:
    names = ["size", "width", "height", "fill"]
    if spec.stroke:
        names.append("stroke")
    return "{ " + ", ".join(names) + ", ...props }"


@emitter(
    target=Framework.REACT,
    extension=("tsx", "jsx"),
    family=TemplateFamily.JSX,
    description="React function component with forwardRef",
    reserved=JS_GLOBALS | {"React", "SVGProps", "SVG"},
)
def emit_react(spec: ComponentSpec) -> str:
    name = spec.identifier
    opts = spec.framework_options
    lines = ['import React from "react";']
    if spec.typescript:
        lines.append('import type { SVGProps } from "react";')
    lines.append("")
    lines += _props_declaration(spec)
    lines.append("")

    if opts.forward_ref:
        generics = f"<SVGSVGElement, {name}Props>" if spec.typescript else ""
        lines.append(f"const {name} = React.forwardRef{generics}(")
        lines.append(f"  ({_destructure(spec)}, ref) => (")
        lines += _svg_element(spec, "    ", with_ref=True)
        lines.append("  )")
        lines.append(");")
    else:
        annotation = f": {name}Props" if spec.typescript else ""
        lines.append(f"const {name} = ({_destructure(spec)}{annotation}) => (")
        lines += _svg_element(spec, "  ", with_ref=False)
        lines.append(");")

    lines += [
        "",
        f'{name}.displayName = "{name}";',
        "",
        f"export default React.memo({name});" if opts.memo else f"export default {name};",
        "",
    ]
    return "\n".join(lines)
