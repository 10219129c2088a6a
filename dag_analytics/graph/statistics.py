"""Overview statistics for a typed graph.

Layers coarse structural metrics on top of type aggregation: counts, the
active node types, which types only emit or only receive edges, and an
average degree.

Note: ``max_depth`` and ``branching_factor`` are placeholders, not graph
measurements. A non-empty graph reports depth 1 and, when it has edges, a
branching factor of 1.0. Real longest-path depth and fan-out ratios would
need a topological depth pass that this module deliberately does not run.
"""

from collections.abc import Sequence

import structlog

from .adjacency import build_adjacency_lists
from .schemas import GraphEdge, GraphNode, OverviewStatistics
from .type_aggregation import aggregate_by_type

logger = structlog.get_logger(__name__)


def overview_statistics(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
) -> OverviewStatistics:
    """Summarise a graph's size and type structure.

    Example:
        A(input) → B(process), A → C(process), B → D(output), C → D
        # → node_count=4, edge_count=4, average_degree=2.0,
        #   node_types=["input", "output", "process"],
        #   source_node_types=["input"], target_node_types=["output"]

    Args:
        nodes: Graph nodes.
        edges: Directed edges between those nodes.

    Returns:
        OverviewStatistics including the full type aggregation.

    Raises:
        DuplicateNodeError: If two nodes share an id.
        DanglingReferenceError: If an edge names an unknown node.
    """
    type_aggregate = aggregate_by_type(nodes, edges)
    adjacency = build_adjacency_lists(edges)

    node_count = len(nodes)
    edge_count = len(edges)

    node_types = [aggregate.type for aggregate in type_aggregate.aggregate_nodes]

    types_with_outgoing = {edge.from_type for edge in type_aggregate.aggregate_edges}
    types_with_incoming = {edge.to_type for edge in type_aggregate.aggregate_edges}

    source_node_types = [t for t in node_types if t not in types_with_incoming]
    target_node_types = [t for t in node_types if t not in types_with_outgoing]

    # Undirected-style approximation: every edge counts towards two degrees
    average_degree = 0.0
    if node_count > 0:
        average_degree = (2.0 * edge_count) / node_count

    branching_factor = 1.0 if edge_count > 0 else 0.0
    max_depth = 1 if node_count > 0 else 0

    logger.debug(
        "Overview statistics computed",
        node_count=node_count,
        edge_count=edge_count,
        unique_node_types=len(node_types),
        nodes_with_successors=len(adjacency.forward),
        nodes_with_predecessors=len(adjacency.reverse),
    )

    return OverviewStatistics(
        node_count=node_count,
        edge_count=edge_count,
        node_types=node_types,
        unique_node_types_count=len(node_types),
        max_depth=max_depth,
        source_node_types=source_node_types,
        target_node_types=target_node_types,
        average_degree=average_degree,
        branching_factor=branching_factor,
        aggregate_nodes=type_aggregate.aggregate_nodes,
        aggregate_edges=type_aggregate.aggregate_edges,
    )
