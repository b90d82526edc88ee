"""Command execution package for CLI."""

from kpopneon.ui.cli.commands.about import AboutCommand
from kpopneon.ui.cli.commands.executor import CommandExecutor
from kpopneon.ui.cli.commands.search import SearchCommand
from kpopneon.ui.cli.commands.shell import ShellCommand

__all__ = [
    "AboutCommand",
    "CommandExecutor",
    "SearchCommand",
    "ShellCommand",
]
