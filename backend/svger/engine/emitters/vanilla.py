"""Vanilla DOM — exported factory building an ``SVGSVGElement`` imperatively."""

from __future__ import annotations

from svger.engine.context import ComponentSpec
from svger.engine.emitters._markup import JS_GLOBALS, SVG_NS, escape_template_literal, js_literal, js_string
from svger.engine.registry import TemplateFamily, emitter
from svger.models.options import Framework


@emitter(
    target=Framework.VANILLA,
    extension=("ts", "js"),
    family=TemplateFamily.TEMPLATE,
    default_export=False,
    description="Framework-free DOM factory function",
    reserved=JS_GLOBALS,
)
def emit_vanilla(spec: ComponentSpec) -> str:
    name = spec.identifier
    lines = []
    if spec.typescript:
        lines += [
            f"export interface {name}Options {{",
            "  className?: string;",
            "  width?: string | number;",
            "  height?: string | number;",
            "  fill?: string;",
            "  stroke?: string;",
            "  [attribute: string]: string | number | undefined;",
            "}",
            "",
            f"export function {name}(options: {name}Options = {{}}): SVGSVGElement {{",
        ]
    else:
        lines += [
            "/**",
            f" * @param {{{{ className?: string, width?: string | number, height?: string | number, fill?: string, stroke?: string }}}} [options]",
            " * @returns {SVGSVGElement}",
            " */",
            f"export function {name}(options = {{}}) {{",
        ]

    lines += [
        "  const {",
        '    className = "",',
        f"    width = {js_literal(spec.width)},",
        f"    height = {js_literal(spec.height)},",
        f"    fill = {js_literal(spec.fill)},",
        f"    stroke = {js_literal(spec.stroke)},",
        "    ...attrs",
        "  } = options;",
        "",
        f'  const svg = document.createElementNS("{SVG_NS}", "svg");',
        f'  svg.setAttribute("viewBox", {js_string(spec.view_box)});',
        f'  svg.setAttribute("xmlns", "{SVG_NS}");',
        "  if (className) svg.setAttribute(\"class\", className);",
        '  svg.setAttribute("width", String(width));',
        '  svg.setAttribute("height", String(height));',
        '  svg.setAttribute("fill", fill);',
        '  if (stroke) svg.setAttribute("stroke", stroke);',
    ]
    for attr_name, value in spec.attrs.presentation:
        lines.append(f"  svg.setAttribute({js_string(attr_name)}, {js_string(value)});")
    lines += [
        "",
        "  for (const [key, value] of Object.entries(attrs)) {",
        "    if (value !== undefined) svg.setAttribute(key, String(value));",
        "  }",
        "",
        f"  svg.innerHTML = `{escape_template_literal(spec.normalized_markup)}`;",
        "",
        "  return svg;",
        "}",
        "",
    ]
    return "\n".join(lines)
