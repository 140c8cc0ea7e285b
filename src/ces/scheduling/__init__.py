"""Survey scheduling.

Public API:
- SurveyScheduler: Gating, timer and prompt handling for the survey
- create_survey_scheduler: Factory that stays inert without a survey URL
- decide_survey_wait: Pure skip-or-wait decision
- RunOnceScheduler: One-shot asyncio timer
"""

from ces.scheduling.policy import SurveyDecision, decide_survey_wait
from ces.scheduling.survey import (
    POPUP_EVENT,
    SURVEY_TREATMENT,
    SurveyScheduler,
    create_survey_scheduler,
)
from ces.scheduling.timer import RunOnceScheduler

__all__ = [
    "POPUP_EVENT",
    "SURVEY_TREATMENT",
    "RunOnceScheduler",
    "SurveyDecision",
    "SurveyScheduler",
    "create_survey_scheduler",
    "decide_survey_wait",
]
