"""About command."""

from typing import final

from kpopneon.ui.cli.commands.executor import EXIT_OK, CommandExecutor
from kpopneon.ui.cli.display.about import AboutDisplay


@final
class AboutCommand(CommandExecutor):
    """Print the static about panel."""

    def __init__(self, display: AboutDisplay | None = None) -> None:
        self.display: AboutDisplay = display or AboutDisplay()

    def execute(self) -> int:
        self.display.show()
        return EXIT_OK
