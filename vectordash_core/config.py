"""Configuration management for vectordash-core.

Settings come from ``config/settings.yaml`` at the project root, overridden by
environment variables. Built-in defaults apply when the file is absent.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from vectordash_core.logging_config import get_logger

logger = get_logger(__name__)

SETTINGS_FILE = "settings.yaml"

ENV_MAX_QUERY_DEPTH = "VECTORDASH_MAX_QUERY_DEPTH"
ENV_SAMPLE_SIZE = "VECTORDASH_SAMPLE_SIZE"
ENV_CONFIG_DIR = "VECTORDASH_CONFIG_DIR"


class QuerySettings(BaseModel):
    """Query canonicalization settings."""

    max_depth: int = Field(default=50, ge=0, description="Maximum recursion depth")


class DetectionSettings(BaseModel):
    """Field detection settings."""

    sample_size: int = Field(
        default=50, gt=0, description="Documents fetched per detection run"
    )
    kind_field: str = Field(
        default="_type", description="Document field holding the kind discriminator"
    )
    default_kind: str = Field(
        default="default", description="Kind for documents without a discriminator"
    )
    internal_prefix: str = Field(
        default="_", description="Field name prefix marking internal fields"
    )
    reserved_fields: list[str] = Field(
        default_factory=lambda: ["_type", "_id", "_embeddings", "_summaries"],
        description="Field names always excluded from detection",
    )


class AppSettings(BaseModel):
    """Main application settings."""

    query: QuerySettings = QuerySettings()
    detection: DetectionSettings = DetectionSettings()


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    override = os.getenv(ENV_CONFIG_DIR)
    if override:
        return Path(override)
    project_root = Path(__file__).resolve().parent.parent
    return project_root / "config"


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file, returning {} if it does not exist."""
    config_file = get_config_dir() / filename

    if not config_file.exists():
        logger.debug(f"No configuration file at {config_file}, using defaults")
        return {}

    try:
        with open(config_file, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_file}: {e}") from e

    if data is not None and not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {config_file}")

    logger.debug(f"Loaded configuration from {config_file}")
    return data or {}


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    overrides = {
        ENV_MAX_QUERY_DEPTH: ("query", "max_depth"),
        ENV_SAMPLE_SIZE: ("detection", "sample_size"),
    }
    for env_var, (section, key) in overrides.items():
        value = os.getenv(env_var)
        if value is None:
            continue
        try:
            parsed = int(value)
        except ValueError as e:
            raise ValueError(f"{env_var} must be an integer, got {value!r}") from e
        data[section] = {**(data.get(section) or {}), key: parsed}
    return data


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Get application settings with environment override support.

    This is the single source of truth for configuration.
    Uses lazy loading to avoid import-time dependencies.
    """
    # Load .env file if present (but not at import time)
    from dotenv import load_dotenv

    load_dotenv(override=False)

    data = _apply_env_overrides(load_yaml_config(SETTINGS_FILE))
    try:
        return AppSettings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid vectordash-core settings: {e}") from e


def clear_settings_cache() -> None:
    """Clear settings cache to force reload from current environment."""
    get_settings.cache_clear()
