"""Configuration models using Pydantic."""

import logging
from datetime import timedelta

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)


class ProductConfig(BaseModel):
    """Product metadata the survey needs.

    An empty survey_url leaves the survey inert.
    """

    survey_url: str = ""
    version: str = "0.0.0"
    # UI language; the survey is only offered to English locales
    language: str = "en"


class SurveyTimingConfig(BaseModel):
    """Policy delays for the survey prompt.

    Durations accept seconds or ISO 8601 durations in TOML.
    """

    wait_time_to_show_survey: timedelta = timedelta(hours=1)
    max_install_age: timedelta = timedelta(hours=24)
    remind_later_delay: timedelta = timedelta(hours=4)

    @field_validator(
        "wait_time_to_show_survey", "max_install_age", "remind_later_delay"
    )
    @classmethod
    def _non_negative(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError("duration must not be negative")
        return value


class TelemetryConfig(BaseModel):
    """Configuration for the telemetry event sink."""

    enabled: bool = True


class ConfigError(Exception):
    """Configuration error."""

    pass


class CesConfig(BaseModel):
    """Root configuration model."""

    product: ProductConfig = Field(default_factory=ProductConfig)
    timing: SurveyTimingConfig = Field(default_factory=SurveyTimingConfig)
    # Experiment treatments by name (e.g. CESSurvey = true)
    experiments: dict[str, bool | str] = Field(default_factory=dict)
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    @property
    def survey_enabled(self) -> bool:
        return bool(self.product.survey_url)
