"""Terminal output for termtimer.

The remaining time is drawn at the top-left corner of a freshly cleared
screen on every update, and the alert is the terminal bell. Both rely on
the terminal understanding ANSI control sequences; the sequences are
written even when stdout is piped or TERM names a dumb terminal.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Optional

from rich.console import Console
from rich.control import Control
from rich.text import Text

from termtimer.durations import format_duration


class TerminalScreen:
    """Draws the countdown on a Rich console."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(force_terminal=True)

    def show(self, remaining: timedelta) -> None:
        """Clear the screen, home the cursor and print ``remaining``."""
        # Printed rather than passed to Console.control, which skips dumb terminals.
        self.console.print(
            Control.clear(),
            Control.home(),
            Text(format_duration(remaining)),
            highlight=False,
        )

    def bell(self) -> None:
        self.console.print(Control.bell(), end="")
