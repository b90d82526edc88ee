"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from kpopneon.config.config import Config
from kpopneon.config.settings import APP_TITLE, BLANK_QUERY_MESSAGE
from kpopneon.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from kpopneon.ui.cli.args.options import AboutArgs, CLIArgs, SearchArgs, ShellArgs

EXIT_USAGE: int = 2


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="kpopneon",
            description=f"{APP_TITLE} - search K-Pop artists using MusicBrainz.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        search_parser = subparsers.add_parser(
            "search",
            help="Search artists tagged k-pop by name",
        )
        _ = search_parser.add_argument(
            "query",
            nargs="+",
            help="Artist or group name",
            metavar="NAME",
        )
        _ = search_parser.add_argument(
            "--json",
            dest="as_json",
            action="store_true",
            help="Print the result as JSON instead of cards",
        )
        ArgumentParser._add_verbosity_flags(search_parser)

        shell_parser = subparsers.add_parser(
            "shell",
            help="Search interactively until you quit",
        )
        ArgumentParser._add_verbosity_flags(shell_parser)

        about_parser = subparsers.add_parser(
            "about",
            help="Show information about this app",
        )
        ArgumentParser._add_verbosity_flags(about_parser)

        return parser

    @staticmethod
    def _add_verbosity_flags(parser: argparse.ArgumentParser) -> None:
        """Apply the shared logging flags."""

        group = parser.add_mutually_exclusive_group()
        _ = group.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed request information",
        )
        _ = group.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the search query is blank.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.WARNING

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "search":
            query = " ".join(parsed_args.query)
            if not query.strip():
                logger.error(BLANK_QUERY_MESSAGE)
                sys.exit(EXIT_USAGE)
            return SearchArgs(
                command="search",
                query=query,
                as_json=parsed_args.as_json,
                verbose=is_verbose,
                quiet=is_quiet,
                request_timeout=configuration.request_timeout,
            )

        if command == "shell":
            return ShellArgs(
                command="shell",
                verbose=is_verbose,
                quiet=is_quiet,
                request_timeout=configuration.request_timeout,
                max_workers=configuration.max_workers,
            )

        if command == "about":
            return AboutArgs(command="about")

        logger.error("Unsupported command: %s", command)
        sys.exit(EXIT_USAGE)
