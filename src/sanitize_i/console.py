from __future__ import annotations

import logging
from typing import Optional, Sequence, TextIO, Tuple, TypeVar

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

__all__ = ["ConsoleUI", "escape"]

T = TypeVar("T")

_logger = logging.getLogger(__name__)


class ConsoleUI:
    """User-facing output and prompts.

    Status lines go to stdout and errors to stderr. Messages are rich markup,
    so callers escape any text that comes from disk.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
        input_stream: Optional[TextIO] = None,
    ) -> None:
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)
        # Tests feed answers through a stream; None reads the terminal
        self.input_stream = input_stream

    def print_header(self, title: str) -> None:
        self.console.print(f"\n[bold magenta]=== {title} ===[/bold magenta]\n")

    def print_banner(self, title: str) -> None:
        """Closing counterpart of print_header."""
        self.console.print(f"\n[bold green]=== {title} ===[/bold green]")

    def print_section(self, title: str) -> None:
        self.console.print(f"\n[underline blue]{title}[/underline blue]")

    def print_success(self, message: str) -> None:
        self.console.print(f"[green]✓ {message}[/green]")

    def print_info(self, message: str) -> None:
        self.console.print(f"[cyan]{message}[/cyan]")

    def print_muted(self, message: str) -> None:
        self.console.print(f"[bright_black]- {message}[/bright_black]")

    def print_warning(self, message: str) -> None:
        self.console.print(f"[yellow]⚠ {message}[/yellow]")

    def print_error(self, message: str) -> None:
        self.err_console.print(f"[red]✗ {message}[/red]")

    def print_failure(self, message: str) -> None:
        """A terminal problem that ends the run, e.g. nothing to choose from."""
        self.console.print(f"[bold red]{message}[/bold red]")

    def print_fatal(self, message: str) -> None:
        self.err_console.print(f"\n[bold red]Error: {message}[/bold red]")

    def print_plain(self, message: str) -> None:
        self.console.print(message)

    def select(self, message: str, choices: Sequence[Tuple[str, T]]) -> T:
        """Ask the user to pick one of `choices` and return its value.

        Each choice is a ``(label, value)`` pair. Choices are listed in the
        given order and numbered from 1; the call blocks until a valid number
        is entered.
        """
        if not choices:
            raise ValueError("select() needs at least one choice")
        self.console.print(f"[yellow]{message}[/yellow]")
        for number, (label, _) in enumerate(choices, start=1):
            self.console.print(f"  [bold]{number}[/bold]) {escape(label)}")
        answer = Prompt.ask(
            "Choice",
            console=self.console,
            choices=[str(n) for n in range(1, len(choices) + 1)],
            show_choices=False,
            stream=self.input_stream,
        )
        label, value = choices[int(answer) - 1]
        _logger.debug("Selected %r for %r", label, message)
        return value
