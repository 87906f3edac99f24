"""Lit — ``@customElement`` class extending LitElement with reflected properties."""

from __future__ import annotations

from svger.engine.context import ComponentSpec
from svger.engine.emitters._markup import (
    JS_GLOBALS,
    SVG_NS,
    attr,
    escape_template_literal,
    js_string,
    static_attributes,
)
from svger.engine.naming import custom_element_name
from svger.engine.registry import TemplateFamily, emitter
from svger.models.options import Framework


@emitter(
    target=Framework.LIT,
    extension=("ts", "js"),
    family=TemplateFamily.TEMPLATE,
    default_export=False,
    description="Lit custom element",
    reserved=JS_GLOBALS | {"LitElement", "css", "html", "nothing", "customElement", "property"},
)
def emit_lit(spec: ComponentSpec) -> str:
    name = spec.identifier
    tag = custom_element_name(name)
    # Standard (TC39) decorators on class fields need the accessor keyword
    accessor = "" if spec.typescript else "accessor "

    def prop(field: str, default: str, reflect: bool = True) -> str:
        options = "{ type: String, reflect: true }" if reflect else "{ type: String }"
        return f"  @property({options}) {accessor}{field} = {js_string(default)};"

    lines = [
        'import { LitElement, css, html, nothing } from "lit";',
        'import { customElement, property } from "lit/decorators.js";',
        "",
        f'@customElement("{tag}")',
        f"export class {name} extends LitElement {{",
        "  static styles = css`:host { display: inline-block; line-height: 0; }`;",
        "",
        prop("className", "", reflect=False),
        prop("width", spec.width),
        prop("height", spec.height),
        prop("fill", spec.fill),
        prop("stroke", spec.stroke),
        "",
        "  render() {",
        "    return html`",
        "      <svg",
        "        class=${this.className || nothing}",
        "        width=${this.width}",
        "        height=${this.height}",
        "        fill=${this.fill}",
        "        stroke=${this.stroke || nothing}",
        f'        viewBox="{escape_template_literal(attr(spec.view_box))}"',
        f'        xmlns="{SVG_NS}"',
    ]
    lines += [escape_template_literal(line) for line in static_attributes(spec, "        ")]
    lines.append("      >")
    if spec.normalized_markup:
        lines.append(f"        {escape_template_literal(spec.normalized_markup)}")
    lines += [
        "      </svg>",
        "    `;",
        "  }",
        "}",
    ]
    if spec.typescript:
        lines += [
            "",
            "declare global {",
            "  interface HTMLElementTagNameMap {",
            f'    "{tag}": {name};',
            "  }",
            "}",
        ]
    lines.append("")
    return "\n".join(lines)
