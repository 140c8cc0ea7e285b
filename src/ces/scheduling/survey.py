"""Survey scheduler: decides whether and when to show the survey prompt.

State is reconstructed from the key-value store on every start; only the
armed timer lives in memory. A persisted skip flag ends the survey for the
installation until something outside this module clears it.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from datetime import datetime
from typing import Literal
from urllib.parse import quote

from ces.config.models import SurveyTimingConfig
from ces.dates import format_http_date, utc_now
from ces.scheduling.policy import (
    REASON_NOT_ELIGIBLE,
    REASON_REMIND_DATE_UNPARSEABLE,
    SurveyDecision,
    decide_survey_wait,
)
from ces.scheduling.timer import RunOnceScheduler
from ces.services.localization import DEFAULT_STRINGS, DefaultLocalizer
from ces.services.protocols import (
    ExperimentService,
    Localizer,
    NotificationPresenter,
    ProductInfo,
    PromptChoice,
    Severity,
    TelemetryService,
    UrlOpener,
)
from ces.store.protocols import REMIND_LATER_DATE_KEY, SKIP_SURVEY_KEY, KeyValueStore

logger = logging.getLogger(__name__)

SURVEY_TREATMENT = "CESSurvey"
MESSAGE_TREATMENT = "CESSurveyMessage"
BUTTON_TREATMENT = "CESSurveyButton"
POPUP_EVENT = "cesSurvey:popup"

UserReaction = Literal["accept", "remindLater", "neverShowAgain"]


def create_survey_scheduler(
    store: KeyValueStore,
    presenter: NotificationPresenter,
    telemetry: TelemetryService,
    opener: UrlOpener,
    product: ProductInfo,
    experiments: ExperimentService | None = None,
    timing: SurveyTimingConfig | None = None,
    localizer: Localizer | None = None,
    clock: Callable[[], datetime] = utc_now,
    platform: str = sys.platform,
) -> SurveyScheduler | None:
    """Create a scheduler, or None when no survey URL is configured.

    Nothing is read from the store when the survey URL is missing.
    """
    if not product.survey_url:
        logger.debug("survey_inactive", extra={"survey.reason": "no_survey_url"})
        return None
    return SurveyScheduler(
        store=store,
        presenter=presenter,
        telemetry=telemetry,
        opener=opener,
        product=product,
        experiments=experiments,
        timing=timing,
        localizer=localizer,
        clock=clock,
        platform=platform,
    )


class SurveyScheduler:
    """Arms a one-shot timer for the survey prompt and handles the choices.

    Example:
        scheduler = create_survey_scheduler(store, presenter, telemetry, opener, product)
        if scheduler:
            await scheduler.start()
            ...
            scheduler.stop()
    """

    def __init__(
        self,
        store: KeyValueStore,
        presenter: NotificationPresenter,
        telemetry: TelemetryService,
        opener: UrlOpener,
        product: ProductInfo,
        experiments: ExperimentService | None = None,
        timing: SurveyTimingConfig | None = None,
        localizer: Localizer | None = None,
        clock: Callable[[], datetime] = utc_now,
        platform: str = sys.platform,
    ) -> None:
        self._store = store
        self._presenter = presenter
        self._telemetry = telemetry
        self._opener = opener
        self._product = product
        self._experiments = experiments
        self._timing = timing or SurveyTimingConfig()
        self._localizer = localizer or DefaultLocalizer()
        self._clock = clock
        self._platform = platform
        self._timer = RunOnceScheduler(self.fire, self._timing.wait_time_to_show_survey)

    @property
    def timer(self) -> RunOnceScheduler:
        return self._timer

    @property
    def is_active(self) -> bool:
        """True while a prompt is armed or being shown."""
        return self._timer.is_scheduled or self._timer.is_running

    async def start(self) -> None:
        if self._store.get(SKIP_SURVEY_KEY):
            logger.debug("survey_inactive", extra={"survey.reason": "skip_flag_set"})
            return
        await self.prepare()

    def stop(self) -> None:
        self._timer.dispose()

    async def prepare(self) -> SurveyDecision:
        """Check eligibility, compute the wait and (re-)arm the timer."""
        is_candidate = await self._get_treatment(SURVEY_TREATMENT)
        if not is_candidate:
            decision = SurveyDecision.skipped(REASON_NOT_ELIGIBLE)
            self.skip(decision.reason)
            return decision

        remind_later_date = self._store.get(REMIND_LATER_DATE_KEY)
        first_session_date: str | None = None
        if not remind_later_date:
            info = await self._telemetry.get_telemetry_info()
            first_session_date = info.first_session_date

        decision = decide_survey_wait(
            self._clock(), remind_later_date, first_session_date, self._timing
        )
        if decision.reason == REASON_REMIND_DATE_UNPARSEABLE:
            logger.warning(
                "survey_remind_date_unparseable",
                extra={"survey.remind_later_date": remind_later_date},
            )
        if decision.skip:
            self.skip(decision.reason)
            return decision

        self._timer.schedule(decision.wait)
        logger.info(
            "survey_scheduled",
            extra={
                "survey.wait_seconds": decision.wait.total_seconds(),
                "survey.reason": decision.reason,
            },
        )
        return decision

    async def fire(self) -> None:
        """Show the survey prompt."""
        message = await self._get_string_treatment(
            MESSAGE_TREATMENT,
            self._localizer.localize(
                "cesSurveyQuestion", DEFAULT_STRINGS["cesSurveyQuestion"]
            ),
        )
        button = await self._get_string_treatment(
            BUTTON_TREATMENT,
            self._localizer.localize("giveFeedback", DEFAULT_STRINGS["giveFeedback"]),
        )

        choices = [
            PromptChoice(label=button, run=self._accept),
            PromptChoice(
                label=self._localizer.localize(
                    "remindLater", DEFAULT_STRINGS["remindLater"]
                ),
                run=self._remind_later,
            ),
            PromptChoice(
                label=self._localizer.localize(
                    "neverAgain", DEFAULT_STRINGS["neverAgain"]
                ),
                run=self._never_show_again,
            ),
        ]
        logger.info("survey_prompt_shown")
        await self._presenter.prompt(Severity.INFO, message, choices, sticky=True)

    def skip(self, reason: str = "") -> None:
        """Persist the skip flag with the current product version."""
        self._timer.cancel()
        self._store.set(SKIP_SURVEY_KEY, self._product.version)
        logger.info(
            "survey_skipped",
            extra={"survey.reason": reason, "product.version": self._product.version},
        )

    def build_survey_url(self, machine_id: str) -> str:
        return (
            f"{self._product.survey_url}"
            f"?o={quote(self._platform, safe='')}"
            f"&v={quote(self._product.version, safe='')}"
            f"&m={quote(machine_id, safe='')}"
        )

    async def _accept(self) -> None:
        await self._send_telemetry("accept")
        info = await self._telemetry.get_telemetry_info()
        await self._opener.open(self.build_survey_url(info.machine_id))
        self.skip("accepted")

    async def _remind_later(self) -> None:
        await self._send_telemetry("remindLater")
        self._store.set(REMIND_LATER_DATE_KEY, format_http_date(self._clock()))
        await self.prepare()

    async def _never_show_again(self) -> None:
        await self._send_telemetry("neverShowAgain")
        self.skip("never_show_again")

    async def _send_telemetry(self, user_reaction: UserReaction) -> None:
        logger.info("survey_choice", extra={"survey.choice": user_reaction})
        await self._telemetry.public_log(POPUP_EVENT, {"userReaction": user_reaction})

    async def _get_treatment(self, name: str) -> bool | str | None:
        if self._experiments is None:
            return None
        return await self._experiments.get_treatment(name)

    async def _get_string_treatment(self, name: str, default: str) -> str:
        value = await self._get_treatment(name)
        if isinstance(value, str) and value:
            return value
        return default
