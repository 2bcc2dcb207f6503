"""Dependency graph construction from parsed modules."""

from collections.abc import Iterable

from ..logging_config import get_logger
from ..project.module import Module
from .models import DependencyGraph

logger = get_logger(__name__)


def build_dependency_graph(modules: Iterable[Module]) -> DependencyGraph:
    """Build the import graph: one node per dotted name, one edge per import.

    Imports are matched against module names by exact string equality; any
    import naming no project module is recorded as external.
    """
    modules = list(modules)
    adjacency: dict[str, set[str]] = {}
    files: dict[str, list[str]] = {}

    for module in modules:
        if module.dotted_name in files:
            logger.warning(
                f"Module {module.dotted_name} is declared by more than one file: "
                f"{files[module.dotted_name][0]}, {module.file_path}"
            )
        files.setdefault(module.dotted_name, []).append(module.file_path)
        adjacency.setdefault(module.dotted_name, set()).update(module.import_names)

    external: dict[str, set[str]] = {}
    edge_count = 0
    for name, targets in adjacency.items():
        for target in targets:
            if target in adjacency:
                edge_count += 1
            else:
                external.setdefault(name, set()).add(target)

    logger.debug(
        f"Built dependency graph: {len(adjacency)} modules, {edge_count} internal edges"
    )
    return DependencyGraph(
        adjacency=adjacency,
        files=files,
        external_imports=external,
        edge_count=edge_count,
    )
