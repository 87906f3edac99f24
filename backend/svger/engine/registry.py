"""Emitter registry — every target is a standalone function registered via decorator.

Usage:
    @emitter(target=Framework.SVELTE, extension="svelte", family=TemplateFamily.TEMPLATE)
    def emit_svelte(spec: ComponentSpec) -> str:
        return f"<script>...</script>{spec.normalized_markup}"

Adding a new target = creating one module under ``svger.engine.emitters``
with the decorator. Nothing else changes.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from svger.engine.errors import UnsupportedFrameworkError
from svger.models.options import Framework

if TYPE_CHECKING:
    from svger.engine.context import ComponentSpec

logger = logging.getLogger(__name__)


class TemplateFamily(enum.Enum):
    # JSX targets want camelCased presentation attributes
    JSX = "jsx"
    # String-template targets keep the SVG spelling (kebab-case)
    TEMPLATE = "template"


@dataclass(frozen=True)
class EmitterSpec:
    target: Framework
    fn: Callable[["ComponentSpec"], str]
    # Either a fixed extension ("vue") or a (typescript, javascript) pair
    extension: str | tuple[str, str]
    family: TemplateFamily
    # False when the emitted module only has named exports
    default_export: bool = True
    description: str = ""
    # Names the emitted module binds or references; a component may not shadow them
    reserved: frozenset[str] = frozenset()

    def file_extension(self, typescript: bool) -> str:
        if isinstance(self.extension, str):
            return self.extension
        ts_ext, js_ext = self.extension
        return ts_ext if typescript else js_ext

    @property
    def camel_case_attributes(self) -> bool:
        return self.family is TemplateFamily.JSX


class EmitterRegistry:
    """Registry of all target emitters keyed by Framework."""

    def __init__(self) -> None:
        self._emitters: dict[Framework, EmitterSpec] = {}

    def register(self, spec: EmitterSpec) -> None:
        if spec.target in self._emitters:
            raise ValueError(f"Duplicate emitter for target: {spec.target.value}")
        self._emitters[spec.target] = spec
        logger.debug("Registered emitter %s (%s)", spec.target.value, spec.family.value)

    def resolve(self, target: Framework | str) -> Framework:
        """Coerce a target name to a registered Framework or raise."""
        try:
            framework = Framework(target.strip().lower() if isinstance(target, str) else target)
        except ValueError:
            raise UnsupportedFrameworkError(target) from None
        if framework not in self._emitters:
            raise UnsupportedFrameworkError(target)
        return framework

    def get(self, target: Framework | str) -> EmitterSpec:
        return self._emitters[self.resolve(target)]

    def all(self) -> list[EmitterSpec]:
        return [self._emitters[f] for f in Framework if f in self._emitters]

    def __contains__(self, target: object) -> bool:
        try:
            self.resolve(target)  # type: ignore[arg-type]
        except UnsupportedFrameworkError:
            return False
        return True

    @property
    def count(self) -> int:
        return len(self._emitters)


# Module-level singleton
_registry = EmitterRegistry()


def get_registry() -> EmitterRegistry:
    return _registry


def emitter(
    *,
    target: Framework,
    extension: str | tuple[str, str],
    family: TemplateFamily,
    default_export: bool = True,
    description: str = "",
    reserved: frozenset[str] | set[str] = frozenset(),
):
    """Decorator to register an emitter function."""

    def decorator(fn: Callable[["ComponentSpec"], str]):
        _registry.register(
            EmitterSpec(
                target=target,
                fn=fn,
                extension=extension,
                family=family,
                default_export=default_export,
                description=description,
                reserved=frozenset(reserved),
            )
        )
        return fn

    return decorator


def load_emitters() -> EmitterRegistry:
    """Import every emitter module so @emitter decorators fire."""
    import importlib
    import pkgutil

    package = importlib.import_module("svger.engine.emitters")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        if module_name.startswith("_"):
            continue
        importlib.import_module(f"svger.engine.emitters.{module_name}")
    return _registry
