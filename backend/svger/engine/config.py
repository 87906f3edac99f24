"""Engine defaults applied when the source SVG does not carry an attribute."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineDefaults:
    """Fallback presentation values for the root ``<svg>`` element."""

    width: str = "24"
    height: str = "24"
    fill: str = "currentColor"
    view_box: str = "0 0 24 24"

    @classmethod
    def from_values(
        cls,
        width: int | float | str | None = None,
        height: int | float | str | None = None,
        fill: str | None = None,
    ) -> "EngineDefaults":
        base = cls()
        return cls(
            width=_num(width) if width is not None else base.width,
            height=_num(height) if height is not None else base.height,
            fill=fill or base.fill,
        )


def _num(value: int | float | str) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


DEFAULTS = EngineDefaults()
