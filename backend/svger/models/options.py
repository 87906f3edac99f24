"""Generation option models — targets, per-target toggles, project config."""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Framework(str, enum.Enum):
    REACT = "react"
    REACT_NATIVE = "react-native"
    VUE = "vue"
    SVELTE = "svelte"
    ANGULAR = "angular"
    SOLID = "solid"
    PREACT = "preact"
    LIT = "lit"
    VANILLA = "vanilla"


class NamingConvention(str, enum.Enum):
    PASCAL = "pascal"
    CAMEL = "camel"
    KEBAB = "kebab"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrameworkOptions(_CamelModel):
    """Target-specific toggles. Unknown keys are dropped, inapplicable ones unused."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    forward_ref: bool = True  # react
    memo: bool = False  # react
    script_setup: bool = True  # vue
    standalone: bool = True  # angular
    signals: bool = False  # angular


class GenerationOptions(_CamelModel):
    """Per-call options; unset fields fall through to the project config."""

    framework: str = Framework.REACT.value
    typescript: bool = True
    framework_options: FrameworkOptions = Field(default_factory=FrameworkOptions)
    default_width: int | float | str = 24
    default_height: int | float | str = 24
    default_fill: str = "currentColor"
    naming_convention: NamingConvention = NamingConvention.PASCAL

    def merge(self, overrides: "GenerationOptions | dict[str, Any] | None") -> "GenerationOptions":
        """Overlay explicitly-set override fields on top of this instance."""
        if overrides is None:
            return self
        if isinstance(overrides, dict):
            overrides = GenerationOptions.model_validate(overrides)

        update = overrides.model_dump(exclude_unset=True, exclude={"framework_options"})
        if "framework_options" in overrides.model_fields_set:
            fo = self.framework_options.model_dump()
            fo.update(overrides.framework_options.model_dump(exclude_unset=True))
            update["framework_options"] = FrameworkOptions(**fo)
        return self.model_copy(update=update)


class SvgConfig(_CamelModel):
    """Contents of the project config file (``.svgconfig.json``)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    source: str = "./src/assets/svg"
    output: str = "./src/components/icons"
    framework: str = Framework.REACT.value
    typescript: bool = True
    watch: bool = False
    default_width: int | float | str = 24
    default_height: int | float | str = 24
    default_fill: str = "currentColor"
    exclude: list[str] = Field(default_factory=list)
    naming_convention: NamingConvention = NamingConvention.PASCAL
    framework_options: FrameworkOptions = Field(default_factory=FrameworkOptions)
    generate_index: bool = True

    def to_generation_options(self) -> GenerationOptions:
        return GenerationOptions(
            framework=self.framework,
            typescript=self.typescript,
            framework_options=self.framework_options,
            default_width=self.default_width,
            default_height=self.default_height,
            default_fill=self.default_fill,
            naming_convention=self.naming_convention,
        )
