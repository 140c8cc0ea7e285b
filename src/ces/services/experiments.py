"""Config-backed experiment assignments."""

import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)


class ConfigExperimentService:
    """Serves treatments from the [experiments] config table.

    Unknown treatment names resolve to None.
    """

    def __init__(self, treatments: Mapping[str, bool | str] | None = None) -> None:
        self._treatments = dict(treatments or {})

    async def get_treatment(self, name: str) -> bool | str | None:
        value = self._treatments.get(name)
        logger.debug(
            "treatment_resolved",
            extra={"experiment.treatment": name, "experiment.value": value},
        )
        return value
