"""Aggregation of nodes and edges by node type.

Collapses a graph onto its type labels: how many nodes carry each type, how
many edges run between each pair of types, and the row-normalised
probability of moving from one type to another along an edge.
"""

from collections import Counter
from collections.abc import Sequence

import structlog

from .schemas import (
    GraphEdge,
    GraphNode,
    TypeAggregate,
    TypeAggregateEdge,
    TypeAggregateNode,
)
from .validation import check_edge_references, index_nodes

logger = structlog.get_logger(__name__)


def aggregate_by_type(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
) -> TypeAggregate:
    """Group a graph's nodes and edges by node type.

    Only types that label at least one edge endpoint are reported in
    ``aggregate_nodes``; their counts still include every node of that type.
    Every edge is counted, duplicates included. Probabilities for a given
    ``from_type`` sum to 1.0.

    Args:
        nodes: Graph nodes.
        edges: Directed edges between those nodes.

    Returns:
        TypeAggregate with nodes sorted by type and edges sorted by
        (from_type, to_type).

    Raises:
        DuplicateNodeError: If two nodes share an id.
        DanglingReferenceError: If an edge names an unknown node.
    """
    index = index_nodes(nodes)
    check_edge_references(index, edges)

    node_counts = Counter(node.type for node in nodes)

    transitions: Counter[tuple[str, str]] = Counter()
    outgoing: Counter[str] = Counter()
    active_types: set[str] = set()
    for edge in edges:
        from_type = index[edge.source].type
        to_type = index[edge.target].type
        transitions[(from_type, to_type)] += 1
        outgoing[from_type] += 1
        active_types.add(from_type)
        active_types.add(to_type)

    aggregate_nodes = [
        TypeAggregateNode(type=node_type, node_count=node_counts[node_type])
        for node_type in sorted(active_types)
    ]

    aggregate_edges = [
        TypeAggregateEdge(
            from_type=from_type,
            to_type=to_type,
            transition_count=count,
            transition_probability=count / outgoing[from_type],
        )
        for (from_type, to_type), count in sorted(transitions.items())
    ]

    logger.debug(
        "Type aggregation complete",
        active_types=len(aggregate_nodes),
        transition_pairs=len(aggregate_edges),
    )

    return TypeAggregate(aggregate_nodes=aggregate_nodes, aggregate_edges=aggregate_edges)
