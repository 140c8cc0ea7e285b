"""Shared console utilities for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import typer
from rich.console import Console

if TYPE_CHECKING:
    from ces.config.models import CesConfig

# Shared console instance for all CLI commands
console = Console()


def error(msg: str) -> None:
    """Print an error message in red."""
    console.print(f"[red]{msg}[/red]")


def warning(msg: str) -> None:
    """Print a warning message in yellow."""
    console.print(f"[yellow]{msg}[/yellow]")


def success(msg: str) -> None:
    """Print a success message in green."""
    console.print(f"[green]{msg}[/green]")


def dim(msg: str) -> None:
    """Print a dimmed message."""
    console.print(f"[dim]{msg}[/dim]")


def confirm_or_cancel(prompt: str, force: bool) -> bool:
    """Return True if the user confirms (or force is set). Print cancel on decline."""
    if force:
        return True
    confirmed = typer.confirm(prompt)
    if not confirmed:
        dim("Cancelled")
    return confirmed


def load_cli_config(path: Path | None) -> CesConfig:
    """Load config for a command, exiting with an error if it is invalid.

    Without an explicit path, a missing config file falls back to defaults.
    """
    from ces.config import ConfigError, get_default_config, load_config

    try:
        return load_config(path)
    except FileNotFoundError as e:
        if path is not None:
            error(str(e))
            raise typer.Exit(1) from None
        return get_default_config()
    except ConfigError as e:
        error(str(e))
        raise typer.Exit(1) from None
