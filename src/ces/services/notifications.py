"""Terminal prompt presenter."""

from __future__ import annotations

import asyncio
import logging

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt

from ces.services.protocols import PromptChoice, Severity

logger = logging.getLogger(__name__)

_SEVERITY_STYLES = {
    Severity.INFO: "cyan",
    Severity.WARNING: "yellow",
    Severity.ERROR: "red",
}


class ConsolePresenter:
    """Shows prompts in the terminal and runs the chosen action.

    Choices are numbered from 1. A sticky prompt keeps asking until a valid
    choice is made; a non-sticky prompt is dismissed by an empty answer.
    End of input always dismisses.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    async def prompt(
        self,
        severity: Severity,
        message: str,
        choices: list[PromptChoice],
        *,
        sticky: bool = False,
    ) -> None:
        options = "\n".join(
            f"[bold]{i}[/bold]. {choice.label}" for i, choice in enumerate(choices, 1)
        )
        self._console.print(
            Panel(
                f"{message}\n\n{options}",
                border_style=_SEVERITY_STYLES.get(severity, "cyan"),
            )
        )

        choice = await asyncio.to_thread(self._ask, choices, sticky)
        if choice is None:
            logger.info("prompt_dismissed")
            return
        await choice.run()

    def _ask(self, choices: list[PromptChoice], sticky: bool) -> PromptChoice | None:
        valid = [str(i) for i in range(1, len(choices) + 1)]
        while True:
            try:
                answer = Prompt.ask(
                    "Choose",
                    console=self._console,
                    default="",
                    show_default=False,
                )
            except EOFError:
                return None
            answer = answer.strip()
            if answer in valid:
                return choices[int(answer) - 1]
            if not sticky and not answer:
                return None
            self._console.print(f"[yellow]Enter one of: {', '.join(valid)}[/yellow]")
