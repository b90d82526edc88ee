"""One-shot search command."""

from typing import final

from kpopneon.features.search import ArtistSearchClient, SearchFailure
from kpopneon.ui.cli.args.options import SearchArgs
from kpopneon.ui.cli.commands.executor import EXIT_OK, EXIT_SEARCH_FAILED, CommandExecutor
from kpopneon.ui.cli.display.result import ArtistDisplay


@final
class SearchCommand(CommandExecutor):
    """Run a single search and print the outcome."""

    args: SearchArgs
    client: ArtistSearchClient
    display: ArtistDisplay

    def __init__(
        self,
        args: SearchArgs,
        client: ArtistSearchClient | None = None,
        display: ArtistDisplay | None = None,
    ) -> None:
        self.args = args
        self.client = client or ArtistSearchClient.with_timeout(args.request_timeout)
        self.display = display or ArtistDisplay()

    def execute(self) -> int:
        outcome = self.client.search(self.args.query.strip())
        self.display.show_outcome(outcome, as_json=self.args.as_json, quiet=self.args.quiet)
        if isinstance(outcome, SearchFailure):
            return EXIT_SEARCH_FAILED
        return EXIT_OK
