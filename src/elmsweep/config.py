"""Tool settings for elmsweep.

These settings tune how elmsweep itself scans and reports; they are not the
analyzed project's own configuration, which callers hand over already parsed
as a ``ProjectConfig``. Sources are merged in priority order:
    1. Defaults (defined in SweepSettings)
    2. Global config (~/.elmsweep.toml)
    3. Project config (./elmsweep.toml)
    4. Explicit config file
    5. Environment variables (ELMSWEEP_* prefix)
    6. Keyword overrides (typically CLI flags)

Example:
    >>> settings = load_settings(verbose=True)
    >>> settings.verbosity
    'verbose'
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

_VERBOSITY_LEVELS = ("quiet", "normal", "verbose")


@dataclass(frozen=True)
class SweepSettings:
    """Settings for a scan.

    Attributes:
        source_extension: Extension of source files to enumerate
        encoding: Text encoding used to read source files
        follow_symlinks: Descend into symlinked directories while scanning
        verbosity: Logging verbosity level
        log_file: Optional file that receives a copy of all log records
    """

    source_extension: str = ".elm"
    encoding: str = "utf-8"
    follow_symlinks: bool = False
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        # TOML and keyword overrides are untyped; check types before values
        for name in ("source_extension", "encoding", "verbosity"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise InvalidConfigError(name, value, "must be a string")
        if not isinstance(self.follow_symlinks, bool):
            raise InvalidConfigError("follow_symlinks", self.follow_symlinks, "must be true or false")
        if self.log_file is not None and not isinstance(self.log_file, str):
            raise InvalidConfigError("log_file", self.log_file, "must be a file path")

        if not self.source_extension.startswith(".") or len(self.source_extension) < 2:
            raise InvalidConfigError(
                "source_extension", self.source_extension, "must look like '.elm'"
            )
        if self.verbosity not in _VERBOSITY_LEVELS:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"must be one of {', '.join(_VERBOSITY_LEVELS)}"
            )
        try:
            "".encode(self.encoding)
        except LookupError:
            raise InvalidConfigError("encoding", self.encoding, "unknown text encoding")

    @property
    def verbose(self) -> bool:
        return self.verbosity == "verbose"

    @property
    def quiet(self) -> bool:
        return self.verbosity == "quiet"


DEFAULT_SETTINGS = SweepSettings()


def load_settings(config_file: Optional[Path] = None, **overrides) -> SweepSettings:
    """Load settings with auto-discovery and merging.

    Args:
        config_file: Optional explicit TOML settings file
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated SweepSettings instance

    Raises:
        ConfigurationError: If a settings file is invalid or missing
    """
    merged: dict = {}

    global_config = Path.home() / ".elmsweep.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "elmsweep.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    # Boolean CLI flags collapse into a single verbosity value
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return SweepSettings(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load settings from ELMSWEEP_* environment variables.

    Supported environment variables:
        ELMSWEEP_SOURCE_EXTENSION: str
        ELMSWEEP_ENCODING: str
        ELMSWEEP_FOLLOW_SYMLINKS: bool (true/false/1/0/yes/no)
        ELMSWEEP_VERBOSITY: quiet/normal/verbose
        ELMSWEEP_LOG_FILE: str
    """
    type_hints = get_type_hints(SweepSettings)

    result: dict[str, Any] = {}

    for field_name in SweepSettings.__dataclass_fields__:
        env_key = f"ELMSWEEP_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load a TOML settings file.

    Both a flat file and one with an ``[elmsweep]`` table are accepted.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    section = data.get("elmsweep")
    if isinstance(section, dict):
        return section
    return data
