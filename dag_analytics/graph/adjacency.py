"""Adjacency list construction.

Converts an edge collection into forward (successor) and reverse
(predecessor) mappings. Every other graph operation starts from here.
"""

from collections.abc import Iterable

import structlog

from .schemas import AdjacencyLists, GraphEdge

logger = structlog.get_logger(__name__)


def build_adjacency_lists(edges: Iterable[GraphEdge]) -> AdjacencyLists:
    """Build deduplicated forward and reverse adjacency lists.

    Edges are scanned in order. A successor (or predecessor) is appended
    only the first time it is seen for a given node, so repeated edges
    collapse to one entry and list order follows first observation.
    Self-loops are recorded in both mappings. Nodes without a qualifying
    edge get no key at all.

    Example:
        build_adjacency_lists([GraphEdge("A", "B"), GraphEdge("A", "B"),
                               GraphEdge("A", "C")])
        # → forward={"A": ["B", "C"]}, reverse={"B": ["A"], "C": ["A"]}

    Args:
        edges: Directed edges. Endpoints need not exist as nodes.

    Returns:
        AdjacencyLists with ``forward`` and ``reverse`` mappings.
    """
    forward: dict[str, list[str]] = {}
    reverse: dict[str, list[str]] = {}
    # Membership sets mirror the lists for O(1) duplicate checks
    forward_seen: dict[str, set[str]] = {}
    reverse_seen: dict[str, set[str]] = {}

    edge_count = 0
    for edge in edges:
        edge_count += 1
        source, target = edge.source, edge.target

        seen = forward_seen.setdefault(source, set())
        if target not in seen:
            seen.add(target)
            forward.setdefault(source, []).append(target)

        seen = reverse_seen.setdefault(target, set())
        if source not in seen:
            seen.add(source)
            reverse.setdefault(target, []).append(source)

    logger.debug(
        "Adjacency lists built",
        edge_count=edge_count,
        nodes_with_successors=len(forward),
        nodes_with_predecessors=len(reverse),
    )

    return AdjacencyLists(forward=forward, reverse=reverse)
