"""Re-export index for a directory of generated components."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath

from svger.engine.registry import EmitterRegistry, load_emitters
from svger.models.options import Framework

# Extensions a bundler resolves without being spelled out in the import
_IMPLICIT_EXTENSIONS = (".tsx", ".jsx", ".ts", ".js")


@dataclass(frozen=True)
class IndexEntry:
    identifier: str
    filename: str

    @property
    def module(self) -> str:
        for ext in _IMPLICIT_EXTENSIONS:
            if self.filename.endswith(ext):
                return self.filename[: -len(ext)]
        return self.filename


def index_filename(typescript: bool) -> str:
    return "index.ts" if typescript else "index.js"


def export_line(entry: IndexEntry, target: Framework | str, registry: EmitterRegistry | None = None) -> str:
    registry = registry or load_emitters()
    spec = registry.get(target)
    if spec.default_export:
        return f"export {{ default as {entry.identifier} }} from './{entry.module}';"
    if spec.target is Framework.ANGULAR:
        return f"export {{ {entry.identifier}Component }} from './{entry.module}';"
    return f"export {{ {entry.identifier} }} from './{entry.module}';"


def generate_index(
    entries: list[IndexEntry] | list[str],
    target: Framework | str = Framework.REACT,
    registry: EmitterRegistry | None = None,
) -> str:
    """One export line per component, in the order given.

    Bare identifiers are treated as ``<identifier>.tsx`` modules, so the
    module path equals the identifier.
    """
    resolved = [
        e if isinstance(e, IndexEntry) else IndexEntry(identifier=e, filename=f"{e}.tsx")
        for e in entries
    ]
    lines = [
        "// SVG component index, generated by svger. Do not edit.",
        "",
    ]
    lines += [export_line(e, target, registry) for e in resolved]
    lines.append("")
    return "\n".join(lines)


def entry_for(identifier: str, output_path: str) -> IndexEntry:
    return IndexEntry(identifier=identifier, filename=PurePath(output_path).name)
