"""Data models for import reachability."""

from dataclasses import dataclass, field


@dataclass
class DependencyGraph:
    """Import graph keyed by dotted module name.

    Edges are directed: adjacency[A] contains B means module A imports B.
    Imports that name no module of the project are kept apart in
    ``external_imports``; they are library modules and never traversed.
    """

    adjacency: dict[str, set[str]] = field(default_factory=dict)
    files: dict[str, list[str]] = field(default_factory=dict)
    external_imports: dict[str, set[str]] = field(default_factory=dict)
    edge_count: int = 0

    def __contains__(self, name: str) -> bool:
        return name in self.adjacency


@dataclass
class ReachabilityResult:
    """Outcome of one reachability run.

    Attributes:
        graph: The dependency graph the run traversed
        roots: Root dotted names the traversal was seeded with
        reachable: Dotted names in the reachability closure
        unused: Files outside the closure, in file-list order
    """

    graph: DependencyGraph
    roots: tuple[str, ...]
    reachable: set[str] = field(default_factory=set)
    unused: list[str] = field(default_factory=list)

    @property
    def unused_modules(self) -> dict[str, str]:
        """Map each unused file to its dotted module name."""
        by_file = {path: name for name, paths in self.graph.files.items() for path in paths}
        return {path: by_file.get(path, "") for path in self.unused}
