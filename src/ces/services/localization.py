"""Display strings for the survey prompt."""

from collections.abc import Mapping

DEFAULT_STRINGS: dict[str, str] = {
    "cesSurveyQuestion": (
        "Got a moment to help the team? Please tell us about your experience "
        "with the product so far."
    ),
    "giveFeedback": "Give Feedback",
    "remindLater": "Remind Me later",
    "neverAgain": "Don't Show Again",
}


class DefaultLocalizer:
    """Resolves strings from an override table, falling back to the default."""

    def __init__(self, overrides: Mapping[str, str] | None = None) -> None:
        self._overrides = dict(overrides or {})

    def localize(self, key: str, default: str) -> str:
        return self._overrides.get(key, default)
