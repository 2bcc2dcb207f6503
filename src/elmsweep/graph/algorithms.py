"""Graph algorithms over the import graph."""

from collections import deque
from collections.abc import Iterable


def compute_reachable(adjacency: dict[str, set[str]], roots: Iterable[str]) -> set[str]:
    """Breadth-first closure of ``roots`` over ``adjacency``.

    Only names present in ``adjacency`` are followed; any other import is a
    library module. The visited set only grows, which also absorbs cycles
    and self-imports.

    Args:
        adjacency: Dotted name -> dotted names it imports
        roots: Names the traversal starts from

    Returns:
        Set of reachable dotted names, roots included
    """
    visited: set[str] = set()
    queue: deque[str] = deque()
    for root in roots:
        if root not in visited:
            visited.add(root)
            queue.append(root)

    while queue:
        node = queue.popleft()
        for neighbor in adjacency.get(node, ()):
            if neighbor in adjacency and neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    return visited


def compute_depth(adjacency: dict[str, set[str]], roots: Iterable[str]) -> dict[str, int]:
    """BFS hop count from the nearest root for every node.

    Nodes outside the reachability closure get depth -1.
    """
    depth: dict[str, int] = dict.fromkeys(adjacency, -1)

    queue: deque[tuple[str, int]] = deque()
    for root in roots:
        if root in depth and depth[root] == -1:
            depth[root] = 0
            queue.append((root, 0))

    while queue:
        node, d = queue.popleft()
        for neighbor in adjacency.get(node, ()):
            if depth.get(neighbor) == -1:
                depth[neighbor] = d + 1
                queue.append((neighbor, d + 1))

    return depth
