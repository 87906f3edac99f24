"""Tests for the emitter registry and the extension table."""

import pytest

from svger.engine.context import ComponentSpec
from svger.engine.errors import UnsupportedFrameworkError
from svger.engine.generator import get_file_extension, supported_targets
from svger.engine.registry import EmitterRegistry, EmitterSpec, TemplateFamily, load_emitters
from svger.models.options import Framework


def _noop(spec: ComponentSpec) -> str:
    return ""


def test_register_and_get():
    reg = EmitterRegistry()
    spec = EmitterSpec(target=Framework.VUE, fn=_noop, extension="vue", family=TemplateFamily.TEMPLATE)
    reg.register(spec)
    assert reg.get("vue") is spec
    assert reg.count == 1
    assert "vue" in reg
    assert "react" not in reg


def test_duplicate_registration_rejected():
    reg = EmitterRegistry()
    reg.register(EmitterSpec(target=Framework.LIT, fn=_noop, extension=("ts", "js"), family=TemplateFamily.TEMPLATE))
    with pytest.raises(ValueError):
        reg.register(EmitterSpec(target=Framework.LIT, fn=_noop, extension="ts", family=TemplateFamily.TEMPLATE))


def test_unregistered_target_is_unsupported():
    reg = EmitterRegistry()
    with pytest.raises(UnsupportedFrameworkError):
        reg.get(Framework.REACT)


def test_resolve_normalizes_name():
    reg = load_emitters()
    assert reg.resolve(" React ") is Framework.REACT
    assert reg.resolve("react-native") is Framework.REACT_NATIVE


def test_all_targets_registered():
    reg = load_emitters()
    assert reg.count == 9
    assert supported_targets() == [f.value for f in Framework]


def test_families():
    reg = load_emitters()
    jsx = {s.target for s in reg.all() if s.camel_case_attributes}
    assert jsx == {Framework.REACT, Framework.REACT_NATIVE, Framework.SOLID, Framework.PREACT}


@pytest.mark.parametrize(
    "target,typescript,expected",
    [
        ("react", True, "tsx"),
        ("react", False, "jsx"),
        ("preact", True, "tsx"),
        ("preact", False, "jsx"),
        ("solid", True, "tsx"),
        ("solid", False, "jsx"),
        ("vue", True, "vue"),
        ("vue", False, "vue"),
        ("svelte", True, "svelte"),
        ("svelte", False, "svelte"),
        ("angular", True, "component.ts"),
        ("angular", False, "component.js"),
        ("lit", True, "ts"),
        ("lit", False, "js"),
        ("vanilla", True, "ts"),
        ("vanilla", False, "js"),
        ("react-native", True, "ts"),
        ("react-native", False, "js"),
    ],
)
def test_file_extension_table(target, typescript, expected):
    assert get_file_extension(target, typescript) == expected


def test_unknown_target_extension():
    with pytest.raises(UnsupportedFrameworkError) as exc:
        get_file_extension("ember")
    assert exc.value.code == "UNSUPPORTED_FRAMEWORK"
    assert "ember" in exc.value.message
