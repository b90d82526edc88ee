"""Command line argument handling package."""

from kpopneon.ui.cli.args.parser import ArgumentParser
from kpopneon.ui.cli.args.options import AboutArgs, CLIArgs, SearchArgs, ShellArgs

__all__ = ["AboutArgs", "ArgumentParser", "CLIArgs", "SearchArgs", "ShellArgs"]
