"""CLI command modules."""

from ces.cli.commands import reset, run, status

__all__ = [
    "reset",
    "run",
    "status",
]
