"""Survey gating policy.

Pure decision logic: given the current time and the persisted dates, decide
whether the installation is permanently skipped or how long to wait before
prompting. Eligibility (the experiment treatment) is checked by the caller
before asking for a decision.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from ces.config.models import SurveyTimingConfig
from ces.dates import parse_date

REASON_REMIND_LATER = "remind_later"
REASON_REMIND_DATE_UNPARSEABLE = "remind_date_unparseable"
REASON_NEW_INSTALL = "new_install"
REASON_INSTALL_TOO_OLD = "install_too_old"
REASON_INSTALL_DATE_UNPARSEABLE = "install_date_unparseable"
REASON_NOT_ELIGIBLE = "not_eligible"


@dataclass(frozen=True)
class SurveyDecision:
    """Outcome of one gating pass: a permanent skip or a wait duration."""

    skip: bool
    wait: timedelta = timedelta(0)
    reason: str = ""

    @classmethod
    def skipped(cls, reason: str) -> "SurveyDecision":
        return cls(skip=True, reason=reason)

    @classmethod
    def wait_for(cls, wait: timedelta, reason: str) -> "SurveyDecision":
        return cls(skip=False, wait=max(wait, timedelta(0)), reason=reason)


def decide_survey_wait(
    now: datetime,
    remind_later_date: str,
    first_session_date: str | None,
    timing: SurveyTimingConfig,
) -> SurveyDecision:
    """Decide skip vs. wait for an eligible installation.

    A persisted remind-later date always takes precedence over install age.
    An unparseable (or out of range) remind-later date counts as an expired
    reminder and fires immediately; an unparseable install date means the
    install is not new.

    Args:
        now: Current aware datetime.
        remind_later_date: Persisted remind-later string, empty if absent.
        first_session_date: Install date string. Only consulted when there
            is no remind-later date; None counts as unparseable.
        timing: Policy delays.
    """
    if remind_later_date:
        remind_at = parse_date(remind_later_date)
        if remind_at is None:
            return SurveyDecision.wait_for(timedelta(0), REASON_REMIND_DATE_UNPARSEABLE)
        try:
            remind_until = remind_at + timing.remind_later_delay
        except OverflowError:
            # Outside the representable calendar, same as unparseable
            return SurveyDecision.wait_for(timedelta(0), REASON_REMIND_DATE_UNPARSEABLE)
        return SurveyDecision.wait_for(remind_until - now, REASON_REMIND_LATER)

    installed_at = parse_date(first_session_date)
    if installed_at is None:
        return SurveyDecision.skipped(REASON_INSTALL_DATE_UNPARSEABLE)

    time_from_install = now - installed_at
    if time_from_install >= timing.max_install_age:
        return SurveyDecision.skipped(REASON_INSTALL_TOO_OLD)

    if time_from_install < timing.wait_time_to_show_survey:
        return SurveyDecision.wait_for(
            timing.wait_time_to_show_survey - time_from_install, REASON_NEW_INSTALL
        )
    return SurveyDecision.wait_for(timedelta(0), REASON_NEW_INSTALL)
