"""Tests for the generator (normalize → emit, no I/O)."""

import pytest

from tests.conftest import FILL_RULE_SVG, HOME_SVG, MALFORMED_SVG

from svger.engine.errors import UnsupportedFrameworkError
from svger.engine.generator import generate_component
from svger.models.options import GenerationOptions


def test_build_spec_resolves_defaults(generator):
    spec = generator.build_spec("Plain", '<svg viewBox="0 0 32 32"><circle/></svg>')
    assert spec.width == "24"
    assert spec.height == "24"
    assert spec.fill == "currentColor"
    assert spec.stroke == ""
    assert spec.view_box == "0 0 32 32"


def test_configured_defaults(generator):
    options = GenerationOptions(default_width=32, default_height=32.0, default_fill="#000")
    spec = generator.build_spec("Plain", "<svg><circle/></svg>", options)
    assert (spec.width, spec.height, spec.fill) == ("32", "32", "#000")


def test_view_box_from_dimensions(generator):
    spec = generator.build_spec("Box", '<svg width="16" height="16"><rect/></svg>')
    assert spec.view_box == "0 0 16 16"


def test_invalid_identifier_rederived(generator):
    spec = generator.build_spec("icon-home", HOME_SVG)
    assert spec.identifier == "IconHome"


def test_camel_case_follows_target_family(generator):
    jsx = generator.build_spec("Shape", FILL_RULE_SVG, GenerationOptions(framework="react"))
    template = generator.build_spec("Shape", FILL_RULE_SVG, GenerationOptions(framework="vue"))
    assert 'fillRule="evenodd"' in jsx.normalized_markup
    assert 'fill-rule="evenodd"' in template.normalized_markup


def test_generate_returns_extension(generator):
    spec, result = generator.generate("Home", HOME_SVG, GenerationOptions(framework="svelte"))
    assert result.extension == "svelte"
    assert spec.raw_markup == HOME_SVG


def test_malformed_input_still_emits(generator):
    spec, result = generator.generate("Broken", MALFORMED_SVG)
    assert spec.warnings
    assert MALFORMED_SVG in result.code
    assert "export default Broken;" in result.code


def test_unsupported_framework(generator):
    with pytest.raises(UnsupportedFrameworkError):
        generator.generate("Home", HOME_SVG, GenerationOptions(framework="ember"))


def test_generate_component_accepts_dict():
    code = generate_component("Home", HOME_SVG, {"framework": "preact", "typescript": False})
    assert 'import { h } from "preact";' in code


def test_identifier_avoids_names_the_target_imports(generator):
    native = generator.build_spec("Circle", HOME_SVG, GenerationOptions(framework="react-native"))
    assert native.identifier == "CircleIcon"
    react = generator.build_spec("Circle", HOME_SVG, GenerationOptions(framework="react"))
    assert react.identifier == "Circle"
    assert generator.resolve_identifier("icon-react", "react") == "IconReact"
    assert generator.resolve_identifier("React", "react") == "ReactIcon"
