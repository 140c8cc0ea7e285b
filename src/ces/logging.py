"""Centralized logging configuration for ces.

Entry points (the CLI) call configure_logging() once, early. Library code only
creates module loggers and never configures handlers itself.

Logging Levels:
- DEBUG: Timer arming details, dropped telemetry events
- INFO: Survey lifecycle transitions (scheduled, shown, choice, skipped)
- WARNING: Recoverable issues such as unreadable state or unparseable dates
- ERROR: Failures inside a fired prompt

Messages are short snake_case event names; context goes in ``extra`` using
dotted keys (``survey.wait_seconds``, ``error.message``).
"""

import logging
import os

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ComponentFormatter(logging.Formatter):
    """Formatter that extracts component name from logger path.

    Converts full module paths to short component names:
    - ces.scheduling.survey -> scheduling
    - ces.services.telemetry -> services
    """

    def format(self, record: logging.LogRecord) -> str:
        parts = record.name.split(".")
        if len(parts) >= 2 and parts[0] == "ces":
            record.component = parts[1]
        else:
            record.component = parts[0]
        return super().format(record)


def resolve_level(level: str | None = None) -> int:
    """Resolve a log level name, falling back to CES_LOG_LEVEL or INFO."""
    if level is None:
        level = os.environ.get("CES_LOG_LEVEL", "INFO")
    level = level.upper()
    if level not in LEVELS:
        level = "INFO"
    return getattr(logging, level)


def configure_logging(level: str | None = None, use_rich: bool = False) -> None:
    """Configure logging for ces.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
            If None, uses CES_LOG_LEVEL env var or INFO.
        use_rich: Use Rich handler for colorful output (interactive mode).
    """
    log_level = resolve_level(level)

    if use_rich:
        from rich.logging import RichHandler

        console_handler: logging.Handler = RichHandler(
            rich_tracebacks=False,
            show_path=False,
            show_time=True,
            markup=False,
        )
        console_handler.setFormatter(ComponentFormatter("%(component)s | %(message)s"))
    else:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            ComponentFormatter(
                "%(asctime)s | %(levelname)-8s | %(component)s | %(message)s",
                datefmt="%H:%M:%S",
            )
        )

    logging.basicConfig(
        level=log_level,
        handlers=[console_handler],
        force=True,
    )
