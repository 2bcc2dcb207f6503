"""Project model: source discovery, parsed modules, application/package shapes."""

from .model import (
    ApplicationPayload,
    PackagePayload,
    ProjectConfig,
    ProjectKind,
    ProjectModel,
    application,
    build_project,
    package,
)
from .module import Module, name_from_path
from .scanner import SourceScanner

__all__ = [
    "ProjectConfig",
    "ProjectKind",
    "ProjectModel",
    "ApplicationPayload",
    "PackagePayload",
    "application",
    "package",
    "build_project",
    "Module",
    "name_from_path",
    "SourceScanner",
]
