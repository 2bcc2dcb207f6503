"""Unused-module detection: files unreachable from a project's roots.

Every file of the project's file list is parsed into a Module, the import
graph is built over dotted names, and the closure of the roots is computed.
Whatever lies outside the closure is unused.

Each call starts from scratch; nothing is cached between runs. The run is
all-or-nothing: a module that cannot be read aborts it rather than being
left out of the graph.
"""

from __future__ import annotations

from typing import Callable, Optional

from ..config import DEFAULT_SETTINGS, SweepSettings
from ..exceptions import ConfigurationError
from ..logging_config import get_logger
from ..project.model import ProjectKind, ProjectModel
from ..project.module import Module
from .algorithms import compute_reachable
from .builder import build_dependency_graph
from .models import ReachabilityResult

logger = get_logger(__name__)

ModuleLoader = Callable[[str], Module]


def analyze_reachability(
    project: ProjectModel,
    loader: Optional[ModuleLoader] = None,
    settings: SweepSettings = DEFAULT_SETTINGS,
) -> ReachabilityResult:
    """Parse every source file and compute the reachability closure.

    Args:
        project: Project built by ``build_project``
        loader: Turns a file path into a Module; defaults to reading the file
        settings: Tool settings (source encoding)

    Returns:
        ReachabilityResult with the graph, the closure and the unused files

    Raises:
        ConfigurationError: If an exposed module has no source file
        FileAccessError: If a source file cannot be read
    """
    if loader is None:

        def loader(path: str) -> Module:
            return Module.from_file(
                path, source_root=project.source_dir_for(path), encoding=settings.encoding
            )

    scanned = [loader(path) for path in project.file_list]

    modules = list(scanned)
    if project.kind is ProjectKind.APPLICATION:
        entry = project.payload.entry_module
        if entry.file_path not in project.file_list:
            logger.debug(f"Entry file {entry.file_path} lies outside the source directories")
            modules.append(entry)

    graph = build_dependency_graph(modules)

    roots = project.roots
    if project.kind is ProjectKind.PACKAGE:
        missing = [name for name in roots if name not in graph]
        if missing:
            raise ConfigurationError(
                "Exposed modules have no source file",
                details={"modules": ", ".join(missing)},
            )

    reachable = compute_reachable(graph.adjacency, roots)

    unused = [module.file_path for module in scanned if module.dotted_name not in reachable]

    logger.info(
        f"Reachability: {len(reachable)} of {len(graph.adjacency)} modules reachable, "
        f"{len(unused)} unused files"
    )
    return ReachabilityResult(graph=graph, roots=roots, reachable=reachable, unused=unused)


def find_unused(
    project: ProjectModel,
    loader: Optional[ModuleLoader] = None,
    settings: SweepSettings = DEFAULT_SETTINGS,
) -> list[str]:
    """Return the project's unused source files, in file-list order."""
    return analyze_reachability(project, loader=loader, settings=settings).unused
