"""Configuration management for mkdirstream.

The file is read on demand by ``Config.load``; importing this module has no
side effects, so the library can be used without any configuration file.
"""
import logging
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from mkdirstream.config.paths import default_config_path


_LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


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
    """Package configuration."""

    # Log file path; console-only logging when unset
    log_file: Path | None = _path_field()

    # Console log level name used by the CLI when neither --verbose nor --quiet is given
    console_level: str = "WARNING"

    # Octal mode applied by the CLI when ``--mode`` is not given
    default_mode: str | None = None

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Normalize path fields and validate the log level.

        Uses the ``metadata={"path": True}`` flag set by ``_path_field`` so
        only intended fields are converted.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value).expanduser() if value.strip() else None)

        level = str(self.console_level).strip().upper()
        if level not in _LOG_LEVELS:
            raise ConfigError(f"Unsupported console_level '{self.console_level}'")
        self.console_level = level

        if self.default_mode is not None:
            self.default_mode = str(self.default_mode).strip() or None

    @property
    def console_log_level(self) -> int:
        """Numeric logging level for ``console_level``."""
        return logging.getLevelNamesMapping()[self.console_level]

    @classmethod
    def from_mapping(cls, values: dict[str, Any]) -> "Config":
        """Build a configuration from a parsed TOML table, rejecting unknown keys."""

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**values)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            config_file: Explicit file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object; defaults when the file is absent.
        """
        if cls._instance is not None and config_file is None:
            return cls._instance

        target = config_file or default_config_path()
        if target.exists():
            with open(target, "rb") as f:
                instance = cls.from_mapping(tomllib.load(f))
        else:
            instance = cls()

        if config_file is None:
            cls._instance = instance
            cls._loaded_from = target
        return instance
