"""Host-side wiring for the survey.

Builds the collaborators from config, applies the language gate and owns the
scheduler lifecycle.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime
from types import TracebackType

from ces.config.models import CesConfig
from ces.config.paths import get_telemetry_path
from ces.dates import utc_now
from ces.scheduling.survey import SurveyScheduler, create_survey_scheduler
from ces.services.experiments import ConfigExperimentService
from ces.services.notifications import ConsolePresenter
from ces.services.opener import BrowserUrlOpener
from ces.services.protocols import (
    ExperimentService,
    NotificationPresenter,
    ProductInfo,
    TelemetryService,
    UrlOpener,
)
from ces.services.telemetry import FileTelemetryService
from ces.store.protocols import KeyValueStore
from ces.store.storage import JsonFileStore

logger = logging.getLogger(__name__)

SURVEY_LANGUAGE = "en"


def is_survey_language(language: str) -> bool:
    """True for English UI locales (``en``, ``en-US``, ``en_GB``)."""
    normalized = language.strip().lower().replace("_", "-")
    return normalized == SURVEY_LANGUAGE or normalized.startswith(SURVEY_LANGUAGE + "-")


def product_info(config: CesConfig) -> ProductInfo:
    return ProductInfo(
        survey_url=config.product.survey_url,
        version=config.product.version,
        language=config.product.language,
    )


def build_survey_scheduler(
    config: CesConfig,
    store: KeyValueStore | None = None,
    presenter: NotificationPresenter | None = None,
    telemetry: TelemetryService | None = None,
    opener: UrlOpener | None = None,
    experiments: ExperimentService | None = None,
    clock: Callable[[], datetime] = utc_now,
) -> SurveyScheduler | None:
    """Create a scheduler from config, filling in default collaborators.

    Returns None for non-English languages or when no survey URL is set.
    """
    if not is_survey_language(config.product.language):
        logger.debug(
            "survey_inactive",
            extra={
                "survey.reason": "language",
                "product.language": config.product.language,
            },
        )
        return None

    store = store or JsonFileStore()
    if telemetry is None:
        telemetry = FileTelemetryService(
            store,
            get_telemetry_path(),
            enabled=config.telemetry.enabled,
            clock=clock,
        )
    if experiments is None and config.experiments:
        experiments = ConfigExperimentService(config.experiments)

    return create_survey_scheduler(
        store=store,
        presenter=presenter or ConsolePresenter(),
        telemetry=telemetry,
        opener=opener or BrowserUrlOpener(),
        product=product_info(config),
        experiments=experiments,
        timing=config.timing,
        clock=clock,
    )


class SurveyHost:
    """Owns a survey scheduler for the lifetime of an async context.

    Example:
        async with SurveyHost(config) as host:
            await host.wait()
    """

    def __init__(
        self,
        config: CesConfig,
        store: KeyValueStore | None = None,
        presenter: NotificationPresenter | None = None,
        telemetry: TelemetryService | None = None,
        opener: UrlOpener | None = None,
        experiments: ExperimentService | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._config = config
        self._store = store
        self._presenter = presenter
        self._telemetry = telemetry
        self._opener = opener
        self._experiments = experiments
        self._clock = clock
        self._scheduler: SurveyScheduler | None = None

    @property
    def scheduler(self) -> SurveyScheduler | None:
        return self._scheduler

    async def __aenter__(self) -> SurveyHost:
        self._scheduler = build_survey_scheduler(
            self._config,
            store=self._store,
            presenter=self._presenter,
            telemetry=self._telemetry,
            opener=self._opener,
            experiments=self._experiments,
            clock=self._clock,
        )
        if self._scheduler is not None:
            await self._scheduler.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._scheduler is not None:
            self._scheduler.stop()

    async def wait(self, poll_interval: float = 1.0) -> None:
        """Wait until no prompt is armed or showing."""
        while self._scheduler is not None and self._scheduler.is_active:
            await asyncio.sleep(poll_interval)
