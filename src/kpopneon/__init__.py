"""K-Pop Neon Finder: search MusicBrainz for artists tagged k-pop."""

__version__ = "0.1.0"
