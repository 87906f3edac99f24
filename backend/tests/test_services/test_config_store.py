"""Tests for the project config store."""

from __future__ import annotations

import json

import pytest

from svger.engine.errors import ConfigError
from svger.models.options import GenerationOptions, NamingConvention
from svger.services.config_store import ConfigStore


@pytest.fixture
def store(tmp_path) -> ConfigStore:
    return ConfigStore(tmp_path / ".svgconfig.json")


def test_missing_file_means_defaults(store):
    config = store.read()
    assert config.framework == "react"
    assert config.typescript is True
    assert config.generate_index is True
    assert not store.exists()


def test_init_writes_camel_case_keys(store):
    assert store.init() is True
    assert store.init() is False
    raw = json.loads(store.path.read_text())
    assert raw["defaultWidth"] == 24
    assert raw["namingConvention"] == "pascal"
    assert raw["frameworkOptions"]["scriptSetup"] is True


def test_set_persists(store):
    store.set("framework", "vue")
    store.set("default_width", "32")
    fresh = ConfigStore(store.path).read()
    assert fresh.framework == "vue"
    assert fresh.default_width == 32


def test_set_dotted_framework_option(store):
    store.set("frameworkOptions.scriptSetup", "false")
    assert store.read().framework_options.script_setup is False
    assert store.read().framework_options.forward_ref is True


def test_set_unknown_key(store):
    with pytest.raises(ConfigError):
        store.set("colour", "red")
    with pytest.raises(ConfigError):
        store.set("framework.scriptSetup", "true")


def test_set_invalid_value(store):
    with pytest.raises(ConfigError):
        store.set("typescript", "sometimes")


def test_invalid_file(store):
    store.path.write_text("{not json")
    with pytest.raises(ConfigError) as exc:
        store.read()
    assert exc.value.code == "CONFIG_ERROR"


def test_unknown_keys_preserved(store):
    store.path.write_text(json.dumps({"framework": "lit", "plugins": ["x"]}))
    store.set("typescript", "false")
    raw = json.loads(store.path.read_text())
    assert raw["plugins"] == ["x"]
    assert raw["framework"] == "lit"


def test_overrides_take_precedence(store):
    store.set("framework", "solid")
    store.set("frameworkOptions.memo", "true")
    options = store.generation_options({"typescript": False, "framework_options": {"forward_ref": False}})
    assert options.framework == "solid"
    assert options.typescript is False
    assert options.framework_options.memo is True
    assert options.framework_options.forward_ref is False


def test_merge_keeps_unset_fields():
    base = GenerationOptions(framework="vue", naming_convention="kebab")
    merged = base.merge(GenerationOptions(typescript=False))
    assert merged.framework == "vue"
    assert merged.naming_convention is NamingConvention.KEBAB
    assert merged.typescript is False


def test_show_is_json(store):
    assert json.loads(store.show())["framework"] == "react"
