"""Exception hierarchy for elmsweep."""

from .analysis import AnalysisError, FileAccessError
from .base import ElmSweepError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
    SourceFileNotFoundError,
)

__all__ = [
    "ElmSweepError",
    "AnalysisError",
    "FileAccessError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
    "SourceFileNotFoundError",
]
