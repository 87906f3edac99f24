"""Tests for the re-export index."""

from svger.services.index_file import IndexEntry, entry_for, generate_index, index_filename


def test_one_export_per_identifier():
    index = generate_index(["Home", "Settings"])
    exports = [line for line in index.splitlines() if line.startswith("export")]
    assert exports == [
        "export { default as Home } from './Home';",
        "export { default as Settings } from './Settings';",
    ]


def test_header_comment():
    assert generate_index(["Home"]).startswith("// SVG component index")


def test_named_exports_for_lit_and_vanilla():
    entries = [IndexEntry("Home", "Home.ts")]
    assert "export { Home } from './Home';" in generate_index(entries, "lit")
    assert "export { Home } from './Home';" in generate_index(entries, "vanilla")


def test_angular_exports_component_class():
    index = generate_index([IndexEntry("Home", "Home.component.ts")], "angular")
    assert "export { HomeComponent } from './Home.component';" in index


def test_single_file_components_keep_extension():
    assert entry_for("Home", "/out/Home.svelte").module == "Home.svelte"
    assert entry_for("Home", "/out/home.jsx").module == "home"


def test_index_filename():
    assert index_filename(True) == "index.ts"
    assert index_filename(False) == "index.js"
