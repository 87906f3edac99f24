"""Angular — ``@Component`` class with ``[attr.*]`` bindings and inputs."""

from __future__ import annotations

from svger.engine.context import ComponentSpec
from svger.engine.emitters._markup import (
    ANGULAR_TEXT,
    SVG_NS,
    attr,
    escape_template_literal,
    escape_text,
    js_literal,
    static_attributes,
)
from svger.engine.naming import to_kebab_case
from svger.engine.registry import TemplateFamily, emitter
from svger.models.options import Framework

# Bound as [attr.*] in template order
_INPUTS = ("className", "width", "height", "fill", "stroke")


def _input_defaults(spec: ComponentSpec) -> list[tuple[str, str, str]]:
    return [
        ("className", "string", '""'),
        ("width", "string | number", js_literal(spec.width)),
        ("height", "string | number", js_literal(spec.height)),
        ("fill", "string", js_literal(spec.fill)),
        ("stroke", "string", js_literal(spec.stroke)),
    ]


def _inputs(spec: ComponentSpec, signals: bool) -> list[str]:
    lines = []
    for name, ts_type, default in _input_defaults(spec):
        if signals:
            generic = f"<{ts_type}>" if spec.typescript else ""
            lines.append(f"  readonly {name} = input{generic}({default});")
        else:
            annotation = f": {ts_type}" if spec.typescript else ""
            lines.append(f"  @Input() {name}{annotation} = {default};")
    return lines


def _template(spec: ComponentSpec, signals: bool) -> list[str]:
    call = "()" if signals else ""
    lines = ["    <svg"]
    for name in _INPUTS:
        bound = "class" if name == "className" else name
        value = f"{name}{call}"
        # Empty strings would render as an attribute; null removes it
        if name in ("className", "stroke"):
            value = f"{value} || null"
        lines.append(f'      [attr.{bound}]="{value}"')
    lines += [
        f'      viewBox="{escape_template_literal(attr(spec.view_box))}"',
        f'      xmlns="{SVG_NS}"',
    ]
    lines += [escape_template_literal(line) for line in static_attributes(spec, "      ")]
    lines.append("    >")
    if spec.normalized_markup:
        markup = escape_text(spec.normalized_markup, ANGULAR_TEXT)
        lines.append(f"      {escape_template_literal(markup)}")
    lines.append("    </svg>")
    return lines


@emitter(
    target=Framework.ANGULAR,
    extension=("component.ts", "component.js"),
    family=TemplateFamily.TEMPLATE,
    default_export=False,
    description="Angular component class",
)
def emit_angular(spec: ComponentSpec) -> str:
    opts = spec.framework_options
    standalone = opts.standalone
    signals = opts.signals

    imports = ["Component", "input" if signals else "Input"]
    if standalone:
        imports.append("ChangeDetectionStrategy")

    lines = [
        f'import {{ {", ".join(imports)} }} from "@angular/core";',
        "",
        "@Component({",
        f'  selector: "{to_kebab_case(spec.identifier)}",',
    ]
    if standalone:
        lines.append("  standalone: true,")
    lines.append("  template: `")
    lines += _template(spec, signals)
    lines.append("  `,")
    if standalone:
        lines.append("  changeDetection: ChangeDetectionStrategy.OnPush,")
    lines += [
        "})",
        f"export class {spec.identifier}Component {{",
    ]
    lines += _inputs(spec, signals)
    lines += ["}", ""]
    return "\n".join(lines)
