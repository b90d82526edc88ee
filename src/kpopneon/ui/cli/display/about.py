"""Static about panel."""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from kpopneon.config.settings import ABOUT_LINES, APP_TITLE

from .result import DEEP_PINK, NEON_PINK


@final
class AboutDisplay:
    """Shows what the app does and where its data comes from."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show(self) -> None:
        body = Text("\n\n".join(ABOUT_LINES))
        self.console.print(
            Panel(
                body,
                title=f"[bold {NEON_PINK}]About {APP_TITLE}[/bold {NEON_PINK}]",
                border_style=DEEP_PINK,
            )
        )
