"""Command line interface for K-Pop Neon Finder."""

import sys
from typing import final

from kpopneon.platform.logging import logger
from kpopneon.ui.cli.args import ArgumentParser
from kpopneon.ui.cli.args.options import CLIArgs, SearchArgs, ShellArgs
from kpopneon.ui.cli.commands import AboutCommand, CommandExecutor, SearchCommand, ShellCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def build_command(args: CLIArgs) -> CommandExecutor:
        """Pick the executor matching the parsed subcommand."""

        if isinstance(args, SearchArgs):
            return SearchCommand(args)
        if isinstance(args, ShellArgs):
            return ShellCommand(args)
        return AboutCommand()

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            exit_code = CommandProcessor.build_command(args).execute()
            if exit_code:
                sys.exit(exit_code)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures leave through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
