"""
Logging configuration for elmsweep.

Routes all package loggers through a rich handler on stderr so that the
report printed on stdout stays machine-readable.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# SweepSettings.verbosity -> level of the "elmsweep" logger
LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Route elmsweep logging to stderr, and optionally to a file.

    Args:
        verbosity: "quiet", "normal" or "verbose", as in SweepSettings
        log_file: Optional file that receives a plain-text copy of every record

    Returns:
        The "elmsweep" logger
    """
    level = LEVELS.get(verbosity, logging.WARNING)
    verbose = level == logging.DEBUG

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            # Messages carry user paths, which may contain brackets
            markup=False,
            show_time=verbose,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)-8s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    # force=True: one process may run several commands (tests, CliRunner)
    logging.basicConfig(level=level, format="%(message)s", handlers=handlers, force=True)

    logger = logging.getLogger("elmsweep")
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``name`` as a child of the "elmsweep" logger."""
    if name is None or name == "elmsweep":
        return logging.getLogger("elmsweep")
    if not name.startswith("elmsweep."):
        name = f"elmsweep.{name}"
    return logging.getLogger(name)
