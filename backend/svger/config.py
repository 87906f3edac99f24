"""Process configuration from environment variables (``SVGER_*``)."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    env: str = "development"
    log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Project files, relative to the working directory
    config_file: str = ".svgconfig.json"
    lock_file: str = ".svg-lock"

    # /api/build only reads and writes below this directory
    project_root: str = "."

    # Batch permit limit
    max_workers: int = 4

    model_config = {
        "env_prefix": "SVGER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
