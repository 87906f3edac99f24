"""Project config store — ``.svgconfig.json`` read/written through SvgConfig."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from svger.engine.errors import ConfigError, WriteError
from svger.models.options import FrameworkOptions, GenerationOptions, SvgConfig

logger = logging.getLogger(__name__)


def _coerce(value: str) -> Any:
    """CLI values arrive as text; accept JSON literals, fall back to the raw string."""
    try:
        return json.loads(value)
    except (TypeError, json.JSONDecodeError):
        return value


class ConfigStore:
    """Cached access to the project config file; a missing file means defaults."""

    def __init__(self, path: str | Path = ".svgconfig.json") -> None:
        self.path = Path(path)
        self._cached: SvgConfig | None = None

    def exists(self) -> bool:
        return self.path.exists()

    def read(self) -> SvgConfig:
        if self._cached is not None:
            return self._cached.model_copy(deep=True)
        if not self.path.exists():
            self._cached = SvgConfig()
        else:
            try:
                raw = json.loads(self.path.read_text(encoding="utf-8"))
                self._cached = SvgConfig.model_validate(raw)
            except (json.JSONDecodeError, ValidationError) as e:
                raise ConfigError(f"Invalid config file {self.path}: {e}", path=str(self.path)) from e
        return self._cached.model_copy(deep=True)

    def write(self, config: SvgConfig) -> None:
        payload = config.model_dump(mode="json", by_alias=True)
        try:
            self.path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            raise WriteError(f"Cannot write config {self.path}: {e}", path=str(self.path)) from e
        self._cached = config.model_copy(deep=True)

    def init(self) -> bool:
        """Create the file with defaults; False when it already exists."""
        if self.path.exists():
            logger.warning("Config file already exists: %s", self.path)
            return False
        self.write(SvgConfig())
        logger.info("Config file created: %s", self.path)
        return True

    def set(self, key: str, value: Any) -> SvgConfig:
        """Set one key (``frameworkOptions.scriptSetup`` style dotted keys allowed)."""
        if isinstance(value, str):
            value = _coerce(value)
        data = self.read().model_dump(by_alias=True)

        head, _, rest = key.partition(".")
        field = _field_alias(SvgConfig, head)
        if rest:
            if field != "frameworkOptions":
                raise ConfigError(f"Unknown config key: {key}")
            data[field] = {**data[field], _field_alias(FrameworkOptions, rest): value}
        else:
            data[field] = value

        try:
            config = SvgConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid value for {key}: {value!r}") from e
        self.write(config)
        logger.info("Set config %s=%s", key, value)
        return config

    def show(self) -> str:
        return json.dumps(self.read().model_dump(mode="json", by_alias=True), indent=2)

    def generation_options(self, overrides: GenerationOptions | dict[str, Any] | None = None) -> GenerationOptions:
        """Config file defaults overlaid with call-site overrides."""
        return self.read().to_generation_options().merge(overrides)

    def clear_cache(self) -> None:
        self._cached = None


def _field_alias(model: type, key: str) -> str:
    for name, info in model.model_fields.items():
        alias = info.alias or to_camel(name)
        if key in (name, alias):
            return alias
    raise ConfigError(f"Unknown config key: {key}")
