"""Tests for identifier derivation and output filenames."""

import pytest

from svger.engine.naming import (
    avoid_reserved,
    custom_element_name,
    derive_identifier,
    output_filename,
    to_camel_case,
    to_kebab_case,
)


def test_pascal_stem_unchanged():
    assert derive_identifier("ArrowBendDownLeft") == "ArrowBendDownLeft"


@pytest.mark.parametrize(
    "stem,expected",
    [
        ("icon-home-outline", "IconHomeOutline"),
        ("icon_settings", "IconSettings"),
        ("user profile", "UserProfile"),
        ("icon--double__sep", "IconDoubleSep"),
        ("icon.home@2x", "IconHome2x"),
    ],
)
def test_separators_collapse(stem, expected):
    assert derive_identifier(stem) == expected


def test_internal_casing_preserved():
    assert derive_identifier("myHTMLIcon") == "MyHTMLIcon"


def test_prefix_when_not_uppercase():
    assert derive_identifier("123icon") == "Svg123icon"
    assert derive_identifier("") == "Svg"
    assert derive_identifier("---") == "Svg"


@pytest.mark.parametrize("stem", ["a", "9lives", "x-y_z", "_private", "émoji-icon", "Ok"])
def test_always_starts_uppercase(stem):
    name = derive_identifier(stem)
    assert "A" <= name[0] <= "Z"


def test_camel_convention():
    assert derive_identifier("icon-home", "camel") == "iconHome"


def test_kebab_convention_still_pascal_symbol():
    assert derive_identifier("hello-world", "kebab") == "HelloWorld"


def test_to_kebab_case():
    assert to_kebab_case("HelloWorld") == "hello-world"
    assert to_kebab_case("SVGIcon") == "svg-icon"
    assert to_kebab_case("Icon2Home") == "icon2-home"


def test_to_camel_case():
    assert to_camel_case("HomeIcon") == "homeIcon"
    assert to_camel_case("home-icon") == "homeIcon"


def test_output_filename():
    assert output_filename("HomeIcon", "tsx") == "HomeIcon.tsx"
    assert output_filename("HomeIcon", "vue", "kebab") == "home-icon.vue"
    assert output_filename("HomeIcon", "component.ts", "camel") == "homeIcon.component.ts"


def test_custom_element_name_has_hyphen():
    assert custom_element_name("HomeIcon") == "home-icon"
    assert custom_element_name("Home") == "svg-home"


@pytest.mark.parametrize("name", ["FontFace", "MissingGlyph", "ColorProfile", "AnnotationXml"])
def test_custom_element_name_avoids_reserved_tags(name):
    tag = custom_element_name(name)
    assert tag.startswith("svg-")
    assert tag == f"svg-{to_kebab_case(name)}"


def test_avoid_reserved():
    assert avoid_reserved("Circle", {"Circle", "Svg"}) == "CircleIcon"
    assert avoid_reserved("Home", {"Circle"}) == "Home"
    assert avoid_reserved("Circle", {"Circle", "CircleIcon"}) == "CircleIconIcon"
