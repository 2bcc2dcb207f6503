"""Import graph and reachability analysis."""

from .algorithms import compute_depth, compute_reachable
from .builder import build_dependency_graph
from .models import DependencyGraph, ReachabilityResult
from .reachability import analyze_reachability, find_unused

__all__ = [
    "DependencyGraph",
    "ReachabilityResult",
    "build_dependency_graph",
    "compute_reachable",
    "compute_depth",
    "analyze_reachability",
    "find_unused",
]
