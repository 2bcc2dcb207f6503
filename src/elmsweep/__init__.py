"""
elmsweep - unused module detection for Elm projects

Parses every Elm source file of a project with a small hand-written lexer,
builds the import graph, and reports the files that cannot be reached from
the project's entry module (applications) or exposed modules (packages).

The package only computes paths; deleting or renaming files is left to the
caller.
"""

__version__ = "0.1.0"

from .graph import analyze_reachability, find_unused
from .project import Module, ProjectConfig, ProjectKind, ProjectModel, build_project

__all__ = [
    "find_unused",  # Main entry point
    "analyze_reachability",
    "build_project",
    "ProjectConfig",
    "ProjectModel",
    "ProjectKind",
    "Module",
]
