"""Configuration module."""

from ces.config.loader import get_default_config, load_config
from ces.config.models import (
    CesConfig,
    ConfigError,
    ProductConfig,
    SurveyTimingConfig,
    TelemetryConfig,
)
from ces.config.paths import (
    get_ces_home,
    get_config_path,
    get_state_path,
    get_telemetry_path,
)

__all__ = [
    "CesConfig",
    "ConfigError",
    "ProductConfig",
    "SurveyTimingConfig",
    "TelemetryConfig",
    "get_ces_home",
    "get_config_path",
    "get_default_config",
    "get_state_path",
    "get_telemetry_path",
    "load_config",
]
