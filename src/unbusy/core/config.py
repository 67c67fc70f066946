"""Configuration management.

Loads from a TOML config file + environment variables.
Uses pydantic-settings for validation and env var overriding.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------

class ObservabilityConfig(BaseModel):
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "console"


class CourseConfig(BaseModel):
    catalogue_path: str | None = None  # Extra [[courses]] on top of the built-ins


# ---------------------------------------------------------------------------
# Top-level settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """Top-level settings.

    Loaded from a TOML config file, overridden by environment variables
    (``UNBUSY_OBSERVABILITY__LOG_LEVEL=DEBUG``).
    """

    observability: ObservabilityConfig = ObservabilityConfig()
    courses: CourseConfig = CourseConfig()
    data_dir: str = "data"  # Where routine/holiday/notice documents live

    model_config = {"env_prefix": "UNBUSY_", "env_nested_delimiter": "__"}


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings from TOML file + env vars.

    Args:
        config_path: Path to TOML config file (optional).
        overrides: Dict of overrides to apply on top.
    """
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            import tomli

            with open(path, "rb") as f:
                data = tomli.load(f)

    if overrides:
        data.update(overrides)

    return Settings(**data)
