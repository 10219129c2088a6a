"""Ancestor and descendant reachability.

Uses an explicit-stack depth-first walk. Neighbours are pushed in adjacency
order, so the last neighbour is explored first: for a node with successors
[X, Y], Y and everything below it is visited before X. Downstream results
(e.g. ``contributing_nodes`` in aggregation) depend on this exact order.

Example:
    adjacency = build_adjacency_lists(edges)
    reach(adjacency.forward, "A")   # descendants of A
    reach(adjacency.reverse, "A")   # ancestors of A
"""

from collections.abc import Mapping, Sequence

import structlog

from .adjacency import build_adjacency_lists
from .schemas import GraphEdge, GraphNode, ReachabilitySet
from .validation import index_nodes

logger = structlog.get_logger(__name__)


def reach(adjacency: Mapping[str, Sequence[str]], start: str) -> list[str]:
    """Return every node reachable from ``start`` in LIFO depth-first order.

    The start node is marked visited up front and never appears in its own
    result, even when a cycle leads back to it. The visited check happens
    when a node is popped, not when it is pushed.

    Args:
        adjacency: Forward mapping for descendants, reverse for ancestors.
        start: Node to walk from. Unknown ids yield an empty result.

    Returns:
        Distinct node ids in visitation order.
    """
    result: list[str] = []
    visited = {start}
    stack = list(adjacency.get(start, ()))

    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        result.append(current)
        stack.extend(adjacency.get(current, ()))

    return result


def ancestor_descendant(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
) -> list[ReachabilitySet]:
    """Compute ancestors and descendants for every node.

    Node ids are only used as traversal keys, so edges naming nodes outside
    ``nodes`` are traversed like any other.

    Args:
        nodes: Nodes to report on, in output order.
        edges: Directed edges.

    Returns:
        One ReachabilitySet per input node, in input order.

    Raises:
        DuplicateNodeError: If two nodes share an id.
    """
    index_nodes(nodes)

    adjacency = build_adjacency_lists(edges)

    results: list[ReachabilitySet] = []
    for node in nodes:
        ancestors = reach(adjacency.reverse, node.id)
        descendants = reach(adjacency.forward, node.id)
        results.append(
            ReachabilitySet(
                id=node.id,
                ancestors=ancestors,
                descendants=descendants,
                reachable_nodes=ancestors + descendants,
            )
        )

    logger.debug(
        "Reachability computed",
        node_count=len(results),
        edge_count=len(edges),
    )

    return results
