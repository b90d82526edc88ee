"""Display management for CLI interface."""

from kpopneon.ui.cli.display.about import AboutDisplay
from kpopneon.ui.cli.display.result import ArtistDisplay

__all__ = ["AboutDisplay", "ArtistDisplay"]
