"""Survey reset command."""

from typing import Annotated

import typer

from ces.cli.console import confirm_or_cancel, success, warning


def register(app: typer.Typer) -> None:
    """Register the reset command."""

    @app.command()
    def reset(
        force: Annotated[
            bool,
            typer.Option("--force", "-f", help="Reset without confirmation"),
        ] = False,
    ) -> None:
        """Clear the skip flag and remind-later date so the survey can run again."""
        from ces.store import REMIND_LATER_DATE_KEY, SKIP_SURVEY_KEY, JsonFileStore

        store = JsonFileStore()
        keys = [key for key in (SKIP_SURVEY_KEY, REMIND_LATER_DATE_KEY) if store.get(key)]
        if not keys:
            warning("Nothing to reset")
            return

        if not confirm_or_cancel(f"Clear {', '.join(keys)}?", force):
            return

        for key in keys:
            store.delete(key)
        success(f"Cleared {len(keys)} key(s)")
