"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final


@final
@dataclass(slots=True)
class SearchArgs:
    """Command line arguments for the ``search`` subcommand."""

    command: Literal["search"]
    query: str
    as_json: bool
    verbose: bool
    quiet: bool
    request_timeout: float | None


@final
@dataclass(slots=True)
class ShellArgs:
    """Command line arguments for the ``shell`` subcommand."""

    command: Literal["shell"]
    verbose: bool
    quiet: bool
    request_timeout: float | None
    max_workers: int


@final
@dataclass(slots=True)
class AboutArgs:
    """Command line arguments for the ``about`` subcommand."""

    command: Literal["about"]


CLIArgs = SearchArgs | ShellArgs | AboutArgs

__all__ = ["AboutArgs", "CLIArgs", "SearchArgs", "ShellArgs"]
