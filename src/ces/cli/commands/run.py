"""Interactive survey run command."""

from pathlib import Path
from typing import Annotated

import typer

from ces.cli.console import console, dim, load_cli_config


def register(app: typer.Typer) -> None:
    """Register the run command."""

    @app.command()
    def run(
        config_path: Annotated[
            Path | None,
            typer.Option("--config", "-c", help="Path to configuration file"),
        ] = None,
        verbose: Annotated[
            bool,
            typer.Option("--verbose", "-v", help="Enable debug logging"),
        ] = False,
    ) -> None:
        """Run the survey scheduler until the prompt is answered or skipped."""
        import asyncio

        from ces.host import SurveyHost
        from ces.logging import configure_logging

        configure_logging("DEBUG" if verbose else None, use_rich=True)
        config = load_cli_config(config_path)

        async def run_survey() -> None:
            async with SurveyHost(config) as host:
                if host.scheduler is None:
                    dim("Survey is not configured for this installation")
                    return
                await host.wait()

        try:
            asyncio.run(run_survey())
        except KeyboardInterrupt:
            console.print("\n[dim]Stopped[/dim]")
