"""Base exception for elmsweep."""

from typing import Any, Dict, Optional


class ElmSweepError(Exception):
    """Base exception for all elmsweep errors.

    ``details`` values are stored as strings so the error renders the same
    on the terminal and in JSON output.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = {key: str(value) for key, value in (details or {}).items()}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({details_str})"

    def to_json(self) -> Dict[str, Any]:
        """Structured form used by ``--format json``."""
        return {
            "error": type(self).__name__,
            "message": self.message,
            "details": dict(self.details),
        }
