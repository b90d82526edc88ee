"""Interactive search screen.

Reads names from the prompt, runs each search on the controller's worker
thread while a spinner is shown, then renders the settled screen state.
"""

from collections.abc import Callable
from typing import Final, final

from rich.prompt import Prompt

from kpopneon.application.services.search_service import ArtistSearchController
from kpopneon.config.settings import APP_TITLE
from kpopneon.features.search import ArtistSearchClient
from kpopneon.ui.cli.args.options import ShellArgs
from kpopneon.ui.cli.commands.executor import EXIT_OK, CommandExecutor
from kpopneon.ui.cli.display.result import NEON_PINK, ArtistDisplay

QUIT_COMMANDS: Final[frozenset[str]] = frozenset({":q", ":quit", ":exit"})


@final
class ShellCommand(CommandExecutor):
    """Prompt loop driving an ``ArtistSearchController``."""

    args: ShellArgs
    controller: ArtistSearchController
    display: ArtistDisplay

    def __init__(
        self,
        args: ShellArgs,
        controller: ArtistSearchController | None = None,
        display: ArtistDisplay | None = None,
        prompt: Callable[[], str] | None = None,
    ) -> None:
        self.args = args
        self.controller = controller or ArtistSearchController(
            ArtistSearchClient.with_timeout(args.request_timeout),
            max_workers=args.max_workers,
        )
        self.display = display or ArtistDisplay()
        self._prompt: Callable[[], str] = prompt or self._ask

    def _ask(self) -> str:
        return Prompt.ask(
            f"[bold {NEON_PINK}]Artist or group name[/bold {NEON_PINK}]",
            console=self.display.console,
            default="",
            show_default=False,
        )

    def execute(self) -> int:
        console = self.display.console
        if not self.args.quiet:
            console.print(f"[bold {NEON_PINK}]{APP_TITLE}[/bold {NEON_PINK}] (type :q to quit)")

        with self.controller:
            while True:
                try:
                    raw = self._prompt()
                except EOFError:
                    break
                if raw.strip() in QUIT_COMMANDS:
                    break

                future = self.controller.submit(raw)
                if future is not None:
                    with console.status("Searching MusicBrainz...", spinner="dots"):
                        _ = future.result()
                self.display.show_state(self.controller.state)

        return EXIT_OK
