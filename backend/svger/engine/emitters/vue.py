"""Vue — ``<script setup>`` SFC (TypeScript) or options-API ``defineComponent``."""

from __future__ import annotations

from svger.engine.context import ComponentSpec
from svger.engine.emitters._markup import SVG_NS, VUE_TEXT, attr, escape_text, js_literal, static_attributes
from svger.engine.registry import TemplateFamily, emitter
from svger.models.options import Framework


def _template(spec: ComponentSpec) -> list[str]:
    lines = [
        "<template>",
        "  <svg",
        '    :class="className"',
        '    :style="style"',
        '    :width="width"',
        '    :height="height"',
        '    :fill="fill"',
        '    :stroke="stroke || undefined"',
        f'    viewBox="{attr(spec.view_box)}"',
        f'    xmlns="{SVG_NS}"',
    ]
    lines += static_attributes(spec, "    ")
    lines += [
        '    v-bind="$attrs"',
        "  >",
    ]
    if spec.normalized_markup:
        lines.append(f"    {escape_text(spec.normalized_markup, VUE_TEXT)}")
    lines += [
        "  </svg>",
        "</template>",
    ]
    return lines


def _script_setup(spec: ComponentSpec) -> list[str]:
    return [
        '<script setup lang="ts">',
        f"defineOptions({{ name: {js_literal(spec.identifier)}, inheritAttrs: false }});",
        "",
        "interface Props {",
        "  className?: string;",
        "  style?: string | Record<string, string>;",
        "  width?: string | number;",
        "  height?: string | number;",
        "  fill?: string;",
        "  stroke?: string;",
        "}",
        "",
        "withDefaults(defineProps<Props>(), {",
        '  className: "",',
        f"  width: {js_literal(spec.width)},",
        f"  height: {js_literal(spec.height)},",
        f"  fill: {js_literal(spec.fill)},",
        f"  stroke: {js_literal(spec.stroke)},",
        "});",
        "</script>",
    ]


def _options_api(spec: ComponentSpec) -> list[str]:
    lang = ' lang="ts"' if spec.typescript else ""
    return [
        f"<script{lang}>",
        'import { defineComponent } from "vue";',
        "",
        "export default defineComponent({",
        f"  name: {js_literal(spec.identifier)},",
        "  inheritAttrs: false,",
        "  props: {",
        '    className: { type: String, default: "" },',
        '    style: { type: [String, Object], default: "" },',
        f"    width: {{ type: [String, Number], default: {js_literal(spec.width)} }},",
        f"    height: {{ type: [String, Number], default: {js_literal(spec.height)} }},",
        f"    fill: {{ type: String, default: {js_literal(spec.fill)} }},",
        f"    stroke: {{ type: String, default: {js_literal(spec.stroke)} }},",
        "  },",
        "});",
        "</script>",
    ]


@emitter(
    target=Framework.VUE,
    extension="vue",
    family=TemplateFamily.TEMPLATE,
    description="Vue single-file component",
)
def emit_vue(spec: ComponentSpec) -> str:
    # <script setup> with a generic defineProps needs TypeScript
    if spec.framework_options.script_setup and spec.typescript:
        script = _script_setup(spec)
    else:
        script = _options_api(spec)
    return "\n".join(_template(spec) + [""] + script + [""])
