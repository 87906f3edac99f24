"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svger.models.options import FrameworkOptions, NamingConvention


class GenerateRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    name: str = Field(
        default="Icon",
        description="Filename stem or identifier; derived into a component name",
    )
    framework: str = Field(default="react", description="Target framework")
    typescript: bool = Field(default=True, description="Emit TypeScript instead of JavaScript")
    framework_options: FrameworkOptions = Field(default_factory=FrameworkOptions)
    naming_convention: NamingConvention = Field(default=NamingConvention.PASCAL)
    default_width: int | float | str = 24
    default_height: int | float | str = 24
    default_fill: str = "currentColor"


class NormalizeRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    camel_case: bool = Field(default=True, description="Rewrite presentation attributes for JSX")


class BuildRequest(BaseModel):
    src: str = Field(..., description="Directory containing SVG sources")
    out: str = Field(..., description="Directory for generated components")
    framework: str | None = Field(default=None, description="Override the configured framework")
    typescript: bool | None = None
    framework_options: dict[str, bool] = Field(default_factory=dict)
    naming_convention: NamingConvention | None = None
