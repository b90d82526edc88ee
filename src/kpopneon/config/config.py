"""Configuration management for K-Pop Neon Finder."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from kpopneon.config.file_ops import write_text_file
from kpopneon.config.paths import default_config_path
from kpopneon.platform.logging import logger

DEFAULT_MAX_WORKERS: int = 1


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


class ConfigError(ValueError):
    """Raised when the configuration file holds unusable values."""


@dataclass
class Config:
    """Application configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Explicit deadline for the MusicBrainz request (seconds); None keeps the
    # library default of waiting indefinitely.
    request_timeout: float | None = None

    # Worker threads used by the interactive search screen
    max_workers: int = DEFAULT_MAX_WORKERS

    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths and validate numeric settings."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        if self.request_timeout is not None:
            if isinstance(self.request_timeout, bool) or not isinstance(
                self.request_timeout, (int, float)
            ):
                raise ConfigError(f"request_timeout must be a number, got {self.request_timeout!r}")
            if self.request_timeout <= 0:
                raise ConfigError("request_timeout must be positive")
            self.request_timeout = float(self.request_timeout)

        if isinstance(self.max_workers, bool) or not isinstance(self.max_workers, int):
            raise ConfigError(f"max_workers must be an integer, got {self.max_workers!r}")
        if self.max_workers < 1:
            raise ConfigError("max_workers must be at least 1")

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to file.

        Args:
            path: Destination file. Defaults to ``default_config_path()``.

        Returns:
            Path: The file that was written.
        """
        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path or default_config_path()
        try:
            write_text_file(target, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", target)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# K-Pop Neon Finder Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/kpopneon.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Deadline in seconds for the MusicBrainz request (optional)")
        lines.append("# Leave unset to wait as long as the HTTP library allows")
        if config["request_timeout"] is not None:
            lines.append(
                f"request_timeout = {self._format_toml_value(config['request_timeout'])}"
            )
        lines.append("")

        lines.append("# Worker threads for the interactive search screen")
        lines.append(f"max_workers = {self._format_toml_value(config['max_workers'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return f'"{str(value)}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults. The instance loaded from the
        default location is cached for the lifetime of the process.

        Args:
            path: Explicit config file; bypasses the cache when given.

        Returns:
            Config: Loaded configuration object.
        """
        if path is None and cls._instance is not None:
            return cls._instance

        config_file = path or default_config_path()

        if not config_file.exists():
            logger.debug("No configuration file at %s; using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
            instance = cls(**{key: value for key, value in config_dict.items() if key in known})
            logger.debug("Configuration loaded from %s", config_file)

        if path is None:
            cls._instance = instance
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` re-reads the file."""

        cls._instance = None


__all__ = ["Config", "ConfigError", "DEFAULT_MAX_WORKERS"]
