"""Value propagation through a directed acyclic graph.

Top-down aggregation distributes each node's accumulated value equally among
its direct children, so every node ends up with its own value plus a share
of everything above it. Bottom-up aggregation is the mirror image: every
node accumulates its own value plus the totals of its children.

Both evaluate nodes in dependency order (Kahn's algorithm) and reject cyclic
graphs with NotADAGError instead of looping or returning a partial result.

Example:
    nodes = [GraphNode("A", "task", 10.0), GraphNode("B", "task", 2.0),
             GraphNode("C", "task", 3.0)]
    edges = [GraphEdge("A", "B"), GraphEdge("A", "C")]
    top_down_aggregation(nodes, edges)
    # → A: 10.0, B: 7.0 (2 + 10/2), C: 8.0 (3 + 10/2)
"""

from collections import deque
from collections.abc import Mapping, Sequence

import structlog

from .adjacency import build_adjacency_lists
from .exceptions import NotADAGError
from .reachability import reach
from .schemas import AggregatedNode, GraphEdge, GraphNode
from .validation import check_edge_references, index_nodes

logger = structlog.get_logger(__name__)


def _own_value(node: GraphNode) -> float:
    return float(node.value) if node.value is not None else 0.0


def _dependency_order(
    node_ids: Sequence[str],
    upstream: Mapping[str, Sequence[str]],
    downstream: Mapping[str, Sequence[str]],
) -> list[str]:
    """Order nodes so each comes after everything in its ``upstream`` list.

    Nodes with no upstream entries are seeded in input order.

    Raises:
        NotADAGError: If some nodes never become ready (a cycle, including
            self-loops, blocks them).
    """
    pending = {node_id: len(upstream.get(node_id, ())) for node_id in node_ids}
    queue = deque(node_id for node_id in node_ids if pending[node_id] == 0)
    order: list[str] = []

    while queue:
        current = queue.popleft()
        order.append(current)
        for neighbor in downstream.get(current, ()):
            pending[neighbor] -= 1
            if pending[neighbor] == 0:
                queue.append(neighbor)

    if len(order) < len(node_ids):
        ordered = set(order)
        raise NotADAGError([node_id for node_id in node_ids if node_id not in ordered])

    return order


def top_down_aggregation(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
) -> list[AggregatedNode]:
    """Distribute values from ancestors down to descendants.

    Algorithm:
    1. Roots (no incoming edges) keep their own value.
    2. Remaining nodes are evaluated parents-first:
       aggregated(n) = value(n) + sum(aggregated(p) / outdegree(p))
       over the distinct direct predecessors p of n.
    3. contributing_nodes = [n] + ancestors of n (reverse LIFO DFS).

    A node without a value contributes 0.0 for its own term.

    Args:
        nodes: Value nodes, in output order.
        edges: Directed edges forming a DAG.

    Returns:
        One AggregatedNode per input node, in input order.

    Raises:
        DuplicateNodeError: If two nodes share an id.
        DanglingReferenceError: If an edge names an unknown node.
        NotADAGError: If the edges contain a cycle.
    """
    index = index_nodes(nodes)
    check_edge_references(index, edges)

    adjacency = build_adjacency_lists(edges)
    node_ids = [node.id for node in nodes]
    order = _dependency_order(node_ids, adjacency.reverse, adjacency.forward)

    aggregated: dict[str, float] = {}
    for node_id in order:
        total = _own_value(index[node_id])
        for parent in adjacency.predecessors(node_id):
            total += aggregated[parent] / adjacency.out_degree(parent)
        aggregated[node_id] = total

    results = [
        AggregatedNode(
            id=node_id,
            aggregated_value=aggregated[node_id],
            contributing_nodes=[node_id] + reach(adjacency.reverse, node_id),
        )
        for node_id in node_ids
    ]

    logger.debug(
        "Top-down aggregation complete",
        node_count=len(results),
        root_count=sum(1 for node_id in node_ids if node_id not in adjacency.reverse),
    )

    return results


def bottom_up_aggregation(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
) -> list[AggregatedNode]:
    """Accumulate values from descendants up to ancestors.

    Leaves (no outgoing edges) keep their own value; every other node is
    evaluated children-first as value(n) + sum(aggregated(c)) over its
    distinct direct successors c. contributing_nodes is [n] followed by the
    contributing_nodes of each child in successor order, so a descendant
    reached along two paths is listed once per path.

    Raises:
        DuplicateNodeError: If two nodes share an id.
        DanglingReferenceError: If an edge names an unknown node.
        NotADAGError: If the edges contain a cycle.
    """
    index = index_nodes(nodes)
    check_edge_references(index, edges)

    adjacency = build_adjacency_lists(edges)
    node_ids = [node.id for node in nodes]
    order = _dependency_order(node_ids, adjacency.forward, adjacency.reverse)

    aggregated: dict[str, float] = {}
    contributors: dict[str, list[str]] = {}
    for node_id in order:
        total = _own_value(index[node_id])
        collected = [node_id]
        for child in adjacency.successors(node_id):
            total += aggregated[child]
            collected.extend(contributors[child])
        aggregated[node_id] = total
        contributors[node_id] = collected

    results = [
        AggregatedNode(
            id=node_id,
            aggregated_value=aggregated[node_id],
            contributing_nodes=contributors[node_id],
        )
        for node_id in node_ids
    ]

    logger.debug(
        "Bottom-up aggregation complete",
        node_count=len(results),
        leaf_count=sum(1 for node_id in node_ids if node_id not in adjacency.forward),
    )

    return results
