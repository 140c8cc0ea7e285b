"""Configuration loading from TOML files and environment variables."""

import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ces.config.models import CesConfig, ConfigError
from ces.config.paths import get_config_path

# (section, key, env var) overrides applied on top of the file
ENV_OVERRIDES = [
    ("product", "survey_url", "CES_SURVEY_URL"),
    ("product", "version", "CES_PRODUCT_VERSION"),
    ("product", "language", "CES_LANGUAGE"),
]


def _get_default_config_paths() -> list[Path]:
    """Get ordered list of default config file locations."""
    return [
        Path("config.toml"),  # Current directory
        get_config_path(),  # ~/.ces/config.toml (or CES_HOME)
        Path("/etc/ces/config.toml"),  # System-wide
    ]


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Override config values from environment variables where set."""
    for section_key, key, env_var in ENV_OVERRIDES:
        value = os.environ.get(env_var)
        if value is None:
            continue
        section = config.setdefault(section_key, {})
        section[key] = value
    return config


def _validate(raw_config: dict[str, Any]) -> CesConfig:
    try:
        return CesConfig.model_validate(raw_config)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def load_config(path: Path | None = None) -> CesConfig:
    """Load configuration from TOML file.

    Args:
        path: Explicit path to config file. If None, searches default locations.

    Returns:
        Validated CesConfig instance.

    Raises:
        FileNotFoundError: If no config file is found.
        ConfigError: If config file is invalid.
    """
    config_path: Path | None = None

    default_paths = _get_default_config_paths()

    if path is not None:
        config_path = Path(path).expanduser()
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        for default_path in default_paths:
            expanded = default_path.expanduser()
            if expanded.exists():
                config_path = expanded
                break

    if config_path is None:
        raise FileNotFoundError(
            f"No config file found. Searched: {', '.join(str(p) for p in default_paths)}"
        )

    try:
        with config_path.open("rb") as f:
            raw_config = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    return _validate(_apply_env_overrides(raw_config))


def get_default_config() -> CesConfig:
    """Get a default configuration, honoring environment overrides."""
    return _validate(_apply_env_overrides({}))
