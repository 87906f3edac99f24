"""Svelte — ``export let`` props, shorthand attribute bindings, ``$$restProps``."""

from __future__ import annotations

from svger.engine.context import ComponentSpec
from svger.engine.emitters._markup import SVELTE_TEXT, SVG_NS, attr, escape_text, js_literal, static_attributes
from svger.engine.registry import TemplateFamily, emitter
from svger.models.options import Framework


@emitter(
    target=Framework.SVELTE,
    extension="svelte",
    family=TemplateFamily.TEMPLATE,
    description="Svelte component",
)
def emit_svelte(spec: ComponentSpec) -> str:
    def prop(name: str, ts_type: str, default: str) -> str:
        annotation = f": {ts_type}" if spec.typescript else ""
        return f"  export let {name}{annotation} = {default};"

    lang = ' lang="ts"' if spec.typescript else ""
    lines = [
        f"<script{lang}>",
        prop("className", "string", '""'),
        prop("style", "string", '""'),
        prop("width", "string | number", js_literal(spec.width)),
        prop("height", "string | number", js_literal(spec.height)),
        prop("fill", "string", js_literal(spec.fill)),
        prop("stroke", "string | undefined", js_literal(spec.stroke) if spec.stroke else "undefined"),
        "</script>",
        "",
        "<svg",
        "  class={className}",
        "  {style}",
        "  {width}",
        "  {height}",
        "  {fill}",
        "  {stroke}",
        f'  viewBox="{attr(spec.view_box)}"',
        f'  xmlns="{SVG_NS}"',
    ]
    lines += static_attributes(spec, "  ")
    lines += [
        "  {...$$restProps}",
        ">",
    ]
    if spec.normalized_markup:
        lines.append(f"  {escape_text(spec.normalized_markup, SVELTE_TEXT)}")
    lines += ["</svg>", ""]
    return "\n".join(lines)
