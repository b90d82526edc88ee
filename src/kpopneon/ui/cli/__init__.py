"""Command line interface package."""

from kpopneon.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
