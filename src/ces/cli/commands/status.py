"""Survey status command."""

from datetime import datetime, timedelta
from pathlib import Path
from typing import Annotated

import typer

from ces.cli.console import console, dim, load_cli_config
from ces.config.models import CesConfig
from ces.store.protocols import KeyValueStore


def _format_wait(wait: timedelta) -> str:
    """Format a wait duration as a short countdown."""
    total_seconds = int(wait.total_seconds())
    if total_seconds <= 0:
        return "[green]now[/green]"
    if total_seconds < 60:
        return f"in {total_seconds}s"

    total_minutes = total_seconds // 60
    if total_minutes < 60:
        return f"in {total_minutes}m"

    hours, minutes = divmod(total_minutes, 60)
    if minutes:
        return f"in {hours}h {minutes}m"
    return f"in {hours}h"


def describe_decision(config: CesConfig, store: KeyValueStore, now: datetime) -> str:
    """Describe what a scheduler started right now would do."""
    from ces.dates import format_http_date
    from ces.host import is_survey_language
    from ces.scheduling.policy import decide_survey_wait
    from ces.scheduling.survey import SURVEY_TREATMENT
    from ces.store import FIRST_SESSION_DATE_KEY, REMIND_LATER_DATE_KEY, SKIP_SURVEY_KEY

    if not config.survey_enabled:
        return "inactive (no survey URL configured)"
    if not is_survey_language(config.product.language):
        return f"inactive (language {config.product.language!r})"
    if skipped := store.get(SKIP_SURVEY_KEY):
        return f"skipped (version {skipped})"
    if not config.experiments.get(SURVEY_TREATMENT):
        return "would skip (not eligible)"

    # A missing install date is created on first run
    first_session_date = store.get(FIRST_SESSION_DATE_KEY) or format_http_date(now)
    decision = decide_survey_wait(
        now,
        store.get(REMIND_LATER_DATE_KEY),
        first_session_date,
        config.timing,
    )
    if decision.skip:
        return f"would skip ({decision.reason.replace('_', ' ')})"
    return f"prompt {_format_wait(decision.wait)} ({decision.reason.replace('_', ' ')})"


def register(app: typer.Typer) -> None:
    """Register the status command."""

    @app.command()
    def status(
        config_path: Annotated[
            Path | None,
            typer.Option("--config", "-c", help="Path to configuration file"),
        ] = None,
    ) -> None:
        """Show persisted survey state and the next scheduling decision."""
        from rich.table import Table

        from ces.dates import utc_now
        from ces.store import (
            FIRST_SESSION_DATE_KEY,
            MACHINE_ID_KEY,
            REMIND_LATER_DATE_KEY,
            SKIP_SURVEY_KEY,
            JsonFileStore,
        )

        config = load_cli_config(config_path)
        store = JsonFileStore()

        table = Table(show_header=True)
        table.add_column("Key", style="dim")
        table.add_column("Value")
        for key in (
            SKIP_SURVEY_KEY,
            REMIND_LATER_DATE_KEY,
            FIRST_SESSION_DATE_KEY,
            MACHINE_ID_KEY,
        ):
            table.add_row(key, store.get(key) or "[dim]unset[/dim]")

        console.print(table)
        console.print(f"Survey: {describe_decision(config, store, utc_now())}")
        dim(f"State file: {store.path}")
