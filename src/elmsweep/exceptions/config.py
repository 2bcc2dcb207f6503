"""Configuration exceptions: project shape, paths, settings.

Every error in this module is fatal: it is raised before any analysis
starts and nothing is returned to the caller.
"""

from pathlib import Path
from typing import Any

from .base import ElmSweepError


class ConfigurationError(ElmSweepError):
    """Base class for configuration-related errors."""

    pass


class InvalidPathError(ConfigurationError):
    """Raised when a provided path is invalid."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Invalid path: {path}", details={"path": str(path), "reason": reason})
        self.path = path
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class SourceFileNotFoundError(ConfigurationError):
    """Raised when a source file that must be parsed does not exist."""

    def __init__(self, path: Path):
        super().__init__(f"Source file does not exist: {path}", details={"path": str(path)})
        self.path = path
