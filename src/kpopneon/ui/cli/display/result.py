"""src/kpopneon/ui/cli/display/result.py
What: Render artist search outcomes as neon cards or JSON.
Why: Keep console output formatting consistent across commands.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Final, final

from rich.console import Console, Group
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from kpopneon.application.services.search_service import SearchScreenState
from kpopneon.config.settings import NO_RESULTS_MESSAGE
from kpopneon.features.search import Artist, SearchFailure, SearchOutcome, SearchSuccess

NEON_PINK: Final[str] = "#FF00C8"
DEEP_PINK: Final[str] = "#E91E63"
SOFT_PINK: Final[str] = "#FFB8F0"


def render_artist(artist: Artist) -> Panel:
    """Build the card for one artist; absent fields get no line."""

    lines: list[Text] = [Text(artist.name, style=Style(color=NEON_PINK, bold=True))]
    if artist.type:
        lines.append(Text(f"Type: {artist.type}"))
    if artist.country:
        lines.append(Text(f"Country: {artist.country}"))
    if artist.disambiguation:
        lines.append(Text(artist.disambiguation, style=Style(color=SOFT_PINK, italic=True)))
    return Panel(Group(*lines), border_style=DEEP_PINK, expand=True)


def outcome_to_dict(outcome: SearchOutcome) -> dict[str, Any]:
    """Serialize an outcome into a JSON-ready mapping."""

    match outcome:
        case SearchSuccess(artists=artists):
            return {"ok": True, "artists": [asdict(artist) for artist in artists]}
        case SearchFailure(message=message):
            return {"ok": False, "message": message}


@final
class ArtistDisplay:
    """Handles search result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_outcome(
        self,
        outcome: SearchOutcome,
        *,
        as_json: bool = False,
        quiet: bool = False,
    ) -> None:
        """Display a single search outcome.

        Args:
            outcome: Result of ``ArtistSearchClient.search``.
            as_json: Print machine-readable JSON instead of cards.
            quiet: Suppress everything except failures.
        """
        if as_json:
            self.console.print_json(data=outcome_to_dict(outcome))
            return

        match outcome:
            case SearchFailure(message=message):
                self.show_error(message)
            case SearchSuccess(artists=artists):
                if quiet:
                    return
                if not artists:
                    self.show_notice(NO_RESULTS_MESSAGE)
                    return
                self.show_artists(artists)

    def show_state(self, state: SearchScreenState) -> None:
        """Display the settled state of the interactive search screen."""

        if state.error_message == NO_RESULTS_MESSAGE:
            self.show_notice(state.error_message)
        elif state.error_message:
            self.show_error(state.error_message)
        if state.artists:
            self.show_artists(state.artists)

    def show_artists(self, artists: tuple[Artist, ...]) -> None:
        """Print a header followed by one card per artist."""

        self.console.print(f"\n[bold {SOFT_PINK}]Results[/bold {SOFT_PINK}] ({len(artists)})")
        for artist in artists:
            self.console.print(render_artist(artist))

    def show_error(self, message: str) -> None:
        self.console.print(f"[bold red]{message}[/bold red]")

    def show_notice(self, message: str) -> None:
        self.console.print(f"[{SOFT_PINK}]{message}[/{SOFT_PINK}]")


__all__ = ["ArtistDisplay", "outcome_to_dict", "render_artist"]
