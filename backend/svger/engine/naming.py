"""Identifier deriver — filename stem → component symbol and output filename."""

from __future__ import annotations

import re

from svger.models.options import NamingConvention

# Prefix for stems whose natural derivation cannot start a component name
IDENTIFIER_PREFIX = "Svg"
# Appended when a component name would shadow a name its module uses
RESERVED_SUFFIX = "Icon"

# Hyphenated names the HTML standard reserves; customElements.define rejects them
RESERVED_ELEMENT_NAMES = frozenset(
    {
        "annotation-xml",
        "color-profile",
        "font-face",
        "font-face-format",
        "font-face-name",
        "font-face-src",
        "font-face-uri",
        "missing-glyph",
    }
)

_PASCAL_TOKEN_RE = re.compile(r"^[A-Z][A-Za-z0-9]*$")
# Anything that cannot appear in an identifier separates words
_SEPARATOR_RE = re.compile(r"[^A-Za-z0-9]+")
_KEBAB_LOWER_UPPER_RE = re.compile(r"([a-z0-9])([A-Z])")
_KEBAB_ACRONYM_RE = re.compile(r"([A-Z]+)([A-Z][a-z])")


def _to_pascal(stem: str) -> str:
    if _PASCAL_TOKEN_RE.match(stem):
        return stem
    words = [w for w in _SEPARATOR_RE.split(stem) if w]
    # Only the first character is forced; "myHTMLIcon" stays "MyHTMLIcon"
    return "".join(w[0].upper() + w[1:] for w in words)


def derive_identifier(
    file_base_name: str,
    convention: NamingConvention | str = NamingConvention.PASCAL,
) -> str:
    """Turn a filename stem into a valid identifier in the given convention.

    ``kebab`` still yields a PascalCase symbol; the convention only changes
    the output filename (see ``output_filename``). Never raises: an empty
    stem yields the bare prefix.
    """
    convention = NamingConvention(convention)
    name = _to_pascal(file_base_name)
    if not ("A" <= name[:1] <= "Z"):
        name = IDENTIFIER_PREFIX + name

    if convention is NamingConvention.CAMEL:
        return name[0].lower() + name[1:]
    return name


def avoid_reserved(identifier: str, reserved: frozenset[str] | set[str]) -> str:
    """``Circle`` next to an imported ``Circle`` primitive becomes ``CircleIcon``."""
    while identifier in reserved:
        identifier += RESERVED_SUFFIX
    return identifier

def to_kebab_case(name: str) -> str:
    """``HelloWorld`` → ``hello-world``; ``SVGIcon`` → ``svg-icon``."""
    name = _KEBAB_ACRONYM_RE.sub(r"\1-\2", name)
    name = _KEBAB_LOWER_UPPER_RE.sub(r"\1-\2", name)
    name = _SEPARATOR_RE.sub("-", name)
    return name.strip("-").lower()


def to_camel_case(name: str) -> str:
    pascal = _to_pascal(name)
    return pascal[:1].lower() + pascal[1:]


def custom_element_name(identifier: str) -> str:
    """Kebab tag name valid for ``customElements.define`` (must contain a hyphen)."""
    tag = to_kebab_case(identifier)
    if "-" not in tag or not tag[:1].isalpha() or tag in RESERVED_ELEMENT_NAMES:
        tag = f"{IDENTIFIER_PREFIX.lower()}-{tag}"
    return tag


def output_filename(
    identifier: str,
    extension: str,
    convention: NamingConvention | str = NamingConvention.PASCAL,
) -> str:
    convention = NamingConvention(convention)
    if convention is NamingConvention.KEBAB:
        stem = to_kebab_case(identifier)
    elif convention is NamingConvention.CAMEL:
        stem = to_camel_case(identifier)
    else:
        stem = identifier
    return f"{stem}.{extension}"
