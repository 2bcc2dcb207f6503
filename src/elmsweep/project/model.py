"""Project model: the two shapes a project can take.

An Application has a single entry module; a Package exposes one or more
modules. Both share source directories, exclude lists and the discovered
file list, so they are one tagged dataclass with a kind-specific payload.
Consumers switch on ``ProjectModel.kind``.

The project's own configuration file is read elsewhere; this module takes
an already-parsed ``ProjectConfig``.

Example:
    >>> config = ProjectConfig(kind="application", root=".", entry_file="src/Main.elm")
    >>> project = build_project(config)
    >>> project.roots
    ('Main',)
"""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from ..config import DEFAULT_SETTINGS, SweepSettings
from ..exceptions import (
    ConfigurationError,
    FileAccessError,
    InvalidConfigError,
)
from ..logging_config import get_logger
from ..security import PathValidator
from .module import Module
from .scanner import SourceScanner

logger = get_logger(__name__)

ExposedModules = Union[Sequence[str], Mapping[str, Sequence[str]]]


class ProjectKind(Enum):
    APPLICATION = "application"
    PACKAGE = "package"


@dataclass
class ProjectConfig:
    """Already-parsed project configuration.

    Attributes:
        kind: "application", "package", or None when undetermined
        root: Project root directory; relative paths below resolve against it
        source_dirs: Source directories
        exclude_dirs: Directories whose own files are not analyzed
        exclude_files: Files that are not analyzed
        entry_file: Application entry file
        exposed_modules: Package exposed modules, as a list or as a mapping
            of category name to list
    """

    kind: Optional[str] = None
    root: Union[str, Path] = "."
    source_dirs: list[str] = field(default_factory=lambda: ["src"])
    exclude_dirs: list[str] = field(default_factory=list)
    exclude_files: list[str] = field(default_factory=list)
    entry_file: Optional[str] = None
    exposed_modules: ExposedModules = field(default_factory=list)


@dataclass(frozen=True)
class ApplicationPayload:
    entry_module: Module


@dataclass(frozen=True)
class PackagePayload:
    exposed_modules: tuple[str, ...]


@dataclass(frozen=True)
class ProjectModel:
    """A project ready for reachability analysis.

    Attributes:
        kind: Application or package
        root: Resolved project root
        source_dirs: Accepted source directories (absolute)
        exclude_dirs: Excluded directories (absolute)
        exclude_files: Excluded files (absolute)
        file_list: Sorted, deduplicated source files
        payload: ApplicationPayload or PackagePayload, matching ``kind``
    """

    kind: ProjectKind
    root: str
    source_dirs: tuple[str, ...]
    exclude_dirs: tuple[str, ...]
    exclude_files: tuple[str, ...]
    file_list: tuple[str, ...]
    payload: Union[ApplicationPayload, PackagePayload]

    @property
    def roots(self) -> tuple[str, ...]:
        """Dotted names reachability starts from."""
        if self.kind is ProjectKind.APPLICATION:
            return (self.payload.entry_module.dotted_name,)
        return self.payload.exposed_modules

    def source_dir_for(self, file_path: str) -> Optional[str]:
        """Return the deepest source directory containing ``file_path``."""
        return _containing_dir(self.source_dirs, file_path)


@dataclass(frozen=True)
class _CommonFields:
    root: str
    source_dirs: tuple[str, ...]
    exclude_dirs: tuple[str, ...]
    exclude_files: tuple[str, ...]
    file_list: tuple[str, ...]


def build_project(
    config: ProjectConfig, settings: SweepSettings = DEFAULT_SETTINGS
) -> ProjectModel:
    """Build the project model matching ``config.kind``.

    Raises:
        ConfigurationError: If the kind is undetermined or the config is
            incomplete for its kind
    """
    if config.kind == ProjectKind.APPLICATION.value:
        return application(config, settings)
    if config.kind == ProjectKind.PACKAGE.value:
        return package(config, settings)
    raise ConfigurationError(
        "Could not determine the project kind",
        details={"kind": str(config.kind)},
    )


def application(
    config: ProjectConfig, settings: SweepSettings = DEFAULT_SETTINGS
) -> ProjectModel:
    """Build an application: one entry module is the single reachability root.

    The entry file is parsed immediately, so a missing entry fails here,
    before any scanning.
    """
    if not config.entry_file:
        raise InvalidConfigError("entry_file", config.entry_file, "an application needs an entry file")

    validator = PathValidator(config.root)
    source_dirs = _accepted_source_dirs(config.source_dirs, validator)
    entry_path = validator.resolve(config.entry_file)

    try:
        entry_module = Module.from_file(
            str(entry_path),
            source_root=_containing_dir(source_dirs, str(entry_path)),
            encoding=settings.encoding,
        )
    except FileAccessError as e:
        raise ConfigurationError(
            f"Cannot read entry file: {entry_path}", details={"reason": e.reason}
        ) from e

    common = _common_fields(config, settings, validator, source_dirs)
    logger.info(
        f"Application rooted at {entry_module.dotted_name}: {len(common.file_list)} source files"
    )
    return ProjectModel(
        kind=ProjectKind.APPLICATION,
        root=common.root,
        source_dirs=common.source_dirs,
        exclude_dirs=common.exclude_dirs,
        exclude_files=common.exclude_files,
        file_list=common.file_list,
        payload=ApplicationPayload(entry_module=entry_module),
    )


def package(config: ProjectConfig, settings: SweepSettings = DEFAULT_SETTINGS) -> ProjectModel:
    """Build a package: every exposed module is a reachability root."""
    exposed = _flatten_exposed(config.exposed_modules)
    if not exposed:
        raise InvalidConfigError(
            "exposed_modules", config.exposed_modules, "a package needs at least one exposed module"
        )

    validator = PathValidator(config.root)
    source_dirs = _accepted_source_dirs(config.source_dirs, validator)
    common = _common_fields(config, settings, validator, source_dirs)

    logger.info(f"Package exposing {len(exposed)} modules: {len(common.file_list)} source files")
    return ProjectModel(
        kind=ProjectKind.PACKAGE,
        root=common.root,
        source_dirs=common.source_dirs,
        exclude_dirs=common.exclude_dirs,
        exclude_files=common.exclude_files,
        file_list=common.file_list,
        payload=PackagePayload(exposed_modules=exposed),
    )


def _accepted_source_dirs(declared: Sequence[str], validator: PathValidator) -> tuple[str, ...]:
    """Resolve source directories, rejecting any that escape the project root."""
    source_dirs: list[str] = []
    for source_dir in declared:
        if not validator.is_within_root(source_dir):
            logger.warning(f"Rejected source directory outside the project root: {source_dir}")
            continue
        resolved = str(validator.resolve(source_dir))
        if resolved not in source_dirs:
            source_dirs.append(resolved)

    if not source_dirs:
        raise ConfigurationError(
            "No source directories inside the project root",
            details={"root": str(validator.root_dir)},
        )
    return tuple(source_dirs)


def _common_fields(
    config: ProjectConfig,
    settings: SweepSettings,
    validator: PathValidator,
    source_dirs: tuple[str, ...],
) -> _CommonFields:
    exclude_dirs = tuple(str(validator.resolve(d)) for d in config.exclude_dirs)
    exclude_files = tuple(str(validator.resolve(f)) for f in config.exclude_files)

    scanner = SourceScanner(
        exclude_dirs=exclude_dirs,
        exclude_files=exclude_files,
        extension=settings.source_extension,
        follow_symlinks=settings.follow_symlinks,
    )
    file_list = tuple(scanner.find_all_files(source_dirs))

    return _CommonFields(
        root=str(validator.root_dir),
        source_dirs=source_dirs,
        exclude_dirs=exclude_dirs,
        exclude_files=exclude_files,
        file_list=file_list,
    )


def _flatten_exposed(exposed: ExposedModules) -> tuple[str, ...]:
    """Flatten a list, or a category mapping, of exposed names; first occurrence wins."""
    if isinstance(exposed, Mapping):
        groups = list(exposed.values())
    else:
        groups = [exposed]
    # A bare string is one name, not a sequence of characters
    names = [
        name
        for group in groups
        for name in ([group] if isinstance(group, str) else group)
    ]
    return tuple(dict.fromkeys(name.strip() for name in names if name.strip()))


def _containing_dir(source_dirs: tuple[str, ...], file_path: str) -> Optional[str]:
    containing = [d for d in source_dirs if os.path.commonpath([d, file_path]) == d]
    return max(containing, key=len) if containing else None
