"""Survey collaborators.

Interfaces:
- ExperimentService, TelemetryService, NotificationPresenter, UrlOpener, Localizer

Reference implementations:
- ConfigExperimentService: Treatments from config
- FileTelemetryService: JSONL event files plus installation identity
- ConsolePresenter: Terminal prompts via rich
- BrowserUrlOpener: Opens URLs with the default browser
- DefaultLocalizer: English default strings
"""

from ces.services.experiments import ConfigExperimentService
from ces.services.localization import DEFAULT_STRINGS, DefaultLocalizer
from ces.services.notifications import ConsolePresenter
from ces.services.opener import BrowserUrlOpener
from ces.services.protocols import (
    ExperimentService,
    Localizer,
    NotificationPresenter,
    ProductInfo,
    PromptChoice,
    Severity,
    TelemetryInfo,
    TelemetryService,
    UrlOpener,
)
from ces.services.telemetry import FileTelemetryService

__all__ = [
    "DEFAULT_STRINGS",
    "BrowserUrlOpener",
    "ConfigExperimentService",
    "ConsolePresenter",
    "DefaultLocalizer",
    "ExperimentService",
    "FileTelemetryService",
    "Localizer",
    "NotificationPresenter",
    "ProductInfo",
    "PromptChoice",
    "Severity",
    "TelemetryInfo",
    "TelemetryService",
    "UrlOpener",
]
