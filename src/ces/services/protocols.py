"""Collaborator interfaces for the survey scheduler.

The scheduler talks to in-process services only. Each interface here can be
backed by the reference implementations in this package or by a host's own.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


class Severity(Enum):
    """Notification severity."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class ProductInfo:
    """Read-only product metadata."""

    survey_url: str
    version: str
    language: str = "en"


@dataclass(frozen=True)
class TelemetryInfo:
    """Installation identity resolved by the telemetry service."""

    first_session_date: str
    machine_id: str


@dataclass
class PromptChoice:
    """A labelled prompt button with a zero-argument async action."""

    label: str
    run: Callable[[], Awaitable[None]]


@runtime_checkable
class ExperimentService(Protocol):
    """Experiment assignment lookups.

    A missing treatment resolves to None, which callers treat the same as
    having no experiment service at all.
    """

    async def get_treatment(self, name: str) -> bool | str | None: ...


@runtime_checkable
class TelemetryService(Protocol):
    async def public_log(self, event_name: str, payload: dict[str, str]) -> None: ...

    async def get_telemetry_info(self) -> TelemetryInfo: ...


@runtime_checkable
class NotificationPresenter(Protocol):
    async def prompt(
        self,
        severity: Severity,
        message: str,
        choices: list[PromptChoice],
        *,
        sticky: bool = False,
    ) -> None:
        """Show a prompt and run the action of the choice the user picks.

        Returning without running any action means the prompt was dismissed.
        """
        ...


@runtime_checkable
class UrlOpener(Protocol):
    async def open(self, uri: str) -> bool: ...


@runtime_checkable
class Localizer(Protocol):
    def localize(self, key: str, default: str) -> str: ...
