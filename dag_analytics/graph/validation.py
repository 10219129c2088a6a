"""Input integrity checks and validation statistics.

Two kinds of helpers live here:

- Strict checks (``index_nodes``, ``check_edge_references``) used by the
  aggregation operations before they resolve node attributes. They raise on
  the first problem.
- ``validate_graph``, a non-raising data-quality report for raw input:
  duplicate nodes and edges, dangling edges, orphaned nodes, and which node
  types and edge patterns are responsible.
"""

from collections import Counter
from collections.abc import Mapping, Sequence

import structlog

from .config import GraphConfig
from .exceptions import DanglingReferenceError, DuplicateNodeError, GraphTooLargeError
from .schemas import (
    EdgePatternIssue,
    GraphEdge,
    GraphNode,
    NodeTypeIssue,
    ValidationStatistics,
)

logger = structlog.get_logger(__name__)

UNKNOWN_TYPE = "unknown"


def index_nodes(nodes: Sequence[GraphNode]) -> dict[str, GraphNode]:
    """Map node id to node, rejecting duplicate ids.

    Raises:
        DuplicateNodeError: If two nodes share an id.
    """
    index: dict[str, GraphNode] = {}
    for node in nodes:
        if node.id in index:
            raise DuplicateNodeError(node.id)
        index[node.id] = node
    return index


def check_edge_references(
    node_index: Mapping[str, GraphNode],
    edges: Sequence[GraphEdge],
) -> None:
    """Ensure every edge endpoint names a known node.

    Raises:
        DanglingReferenceError: For the first edge endpoint not in the index.
    """
    for edge in edges:
        for node_id in (edge.source, edge.target):
            if node_id not in node_index:
                raise DanglingReferenceError(node_id, edge)


def _safe_ratio(numerator: int, denominator: int) -> float:
    if denominator == 0:
        return 0.0
    return numerator / denominator


def validate_graph(
    nodes: Sequence[GraphNode],
    edges: Sequence[GraphEdge],
    config: GraphConfig | None = None,
) -> ValidationStatistics:
    """Compute data-quality statistics for a raw graph.

    Checks performed:
    1. Duplicate nodes: the first occurrence of an id is kept as valid.
    2. Dangling edges: an endpoint is not a valid node id.
    3. Duplicate edges: a (source, target) pair seen more than once.
    4. Orphaned nodes: valid nodes not referenced by any valid edge.

    Nothing is raised for these problems; they are counted. Ratios are 0.0
    when their denominator is zero.

    Args:
        nodes: Raw nodes, possibly with repeated ids.
        edges: Raw edges, possibly dangling or repeated.
        config: Size limits. Defaults to GraphConfig().

    Returns:
        ValidationStatistics for the input.

    Raises:
        GraphTooLargeError: If the node or edge count exceeds the limits.
    """
    cfg = config or GraphConfig()

    if len(nodes) > cfg.max_nodes:
        raise GraphTooLargeError("nodes", len(nodes), cfg.max_nodes)
    if len(edges) > cfg.max_edges:
        raise GraphTooLargeError("edges", len(edges), cfg.max_edges)

    # Step 1: first occurrence of each id is the valid node
    valid_nodes: dict[str, GraphNode] = {}
    node_occurrences: Counter[str] = Counter()
    for node in nodes:
        node_occurrences[node.id] += 1
        valid_nodes.setdefault(node.id, node)

    duplicate_node_count = sum(1 for count in node_occurrences.values() if count > 1)

    # Step 2: dangling and duplicate edges
    pair_occurrences: Counter[tuple[str, str]] = Counter()
    valid_edges: list[GraphEdge] = []
    seen_valid_pairs: set[tuple[str, str]] = set()
    dangling_edge_count = 0

    for edge in edges:
        pair = (edge.source, edge.target)
        pair_occurrences[pair] += 1

        if edge.source in valid_nodes and edge.target in valid_nodes:
            if pair not in seen_valid_pairs:
                seen_valid_pairs.add(pair)
                valid_edges.append(edge)
        else:
            dangling_edge_count += 1

    duplicate_edge_count = sum(1 for count in pair_occurrences.values() if count > 1)

    # Step 3: orphans
    referenced: set[str] = set()
    for edge in valid_edges:
        referenced.add(edge.source)
        referenced.add(edge.target)

    orphaned_node_count = sum(1 for node_id in valid_nodes if node_id not in referenced)

    # Orphans by node type, in first-occurrence order of the type
    type_totals: dict[str, list[int]] = {}
    for node_id, node in valid_nodes.items():
        totals = type_totals.setdefault(node.type, [0, 0])
        totals[0] += 1
        if node_id not in referenced:
            totals[1] += 1

    problematic_node_types = [
        NodeTypeIssue(
            node_type=node_type,
            orphaned_count=orphaned,
            total_count=total,
            orphaned_percentage=_safe_ratio(orphaned, total) * 100.0,
        )
        for node_type, (total, orphaned) in type_totals.items()
    ]

    # Edge patterns: valid counts first, then half-dangling edges
    patterns: dict[tuple[str, str], list[int]] = {}
    for edge in valid_edges:
        key = (valid_nodes[edge.source].type, valid_nodes[edge.target].type)
        patterns.setdefault(key, [0, 0])[0] += 1

    for edge in edges:
        source_known = edge.source in valid_nodes
        target_known = edge.target in valid_nodes
        if source_known == target_known:
            # Fully valid, or both endpoints missing
            continue
        if source_known:
            key = (valid_nodes[edge.source].type, UNKNOWN_TYPE)
        else:
            key = (UNKNOWN_TYPE, valid_nodes[edge.target].type)
        patterns.setdefault(key, [0, 0])[1] += 1

    problematic_edge_patterns = [
        EdgePatternIssue(
            from_type=from_type,
            to_type=to_type,
            dangling_count=dangling,
            valid_count=valid,
            failure_rate=_safe_ratio(dangling, valid + dangling) * 100.0,
        )
        for (from_type, to_type), (valid, dangling) in patterns.items()
    ]

    stats = ValidationStatistics(
        total_node_count=len(nodes),
        total_edge_count=len(edges),
        valid_node_count=len(valid_nodes),
        valid_edge_count=len(valid_edges),
        orphaned_node_count=orphaned_node_count,
        dangling_edge_count=dangling_edge_count,
        duplicate_node_count=duplicate_node_count,
        duplicate_edge_count=duplicate_edge_count,
        node_validity_ratio=_safe_ratio(len(valid_nodes), len(nodes)),
        edge_validity_ratio=_safe_ratio(len(valid_edges), len(edges)),
        connectivity_ratio=_safe_ratio(len(referenced), len(valid_nodes)),
        problematic_node_types=problematic_node_types,
        problematic_edge_patterns=problematic_edge_patterns,
    )

    logger.debug(
        "Graph validation complete",
        total_nodes=stats.total_node_count,
        total_edges=stats.total_edge_count,
        dangling_edges=stats.dangling_edge_count,
        duplicate_nodes=stats.duplicate_node_count,
        orphaned_nodes=stats.orphaned_node_count,
    )

    return stats
