"""Schema definitions for directed graph analytics.

Defines the input node/edge model and the result objects produced by the
adjacency, reachability, aggregation and statistics operations. Inputs are
plain dataclasses; results are frozen so a computed answer cannot be
modified after the fact.
"""

from dataclasses import dataclass, field


@dataclass
class GraphNode:
    """A node in the analysed graph.

    Attributes:
        id: Unique identifier within a graph.
        type: Free-form classification label (e.g., "input", "process").
        value: Scalar used by value aggregation. None counts as 0.0.
        weight: Reserved attribute. Carried through but never read.
    """

    id: str
    type: str
    value: float | None = None
    weight: float | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphNode):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass
class GraphEdge:
    """A directed edge (source → target).

    Endpoints reference node ids. Edges may repeat and may be self-loops.

    Attributes:
        source: Node id the edge leaves from.
        target: Node id the edge points to.
        type: Optional edge label.
    """

    source: str
    target: str
    type: str | None = None

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target


@dataclass(frozen=True)
class AdjacencyLists:
    """Forward and reverse adjacency for an edge collection.

    A node id is a key of ``forward`` only if it has an outgoing edge, and a
    key of ``reverse`` only if it has an incoming edge. Each list is
    duplicate-free and keeps first-observation order.
    """

    forward: dict[str, list[str]] = field(default_factory=dict)
    reverse: dict[str, list[str]] = field(default_factory=dict)

    def successors(self, node_id: str) -> list[str]:
        return self.forward.get(node_id, [])

    def predecessors(self, node_id: str) -> list[str]:
        return self.reverse.get(node_id, [])

    def out_degree(self, node_id: str) -> int:
        """Number of distinct successors of a node."""
        return len(self.forward.get(node_id, ()))


@dataclass(frozen=True)
class ReachabilitySet:
    """Ancestors and descendants of a single node.

    ``reachable_nodes`` is ``ancestors + descendants`` without any
    cross-deduplication.
    """

    id: str
    ancestors: list[str]
    descendants: list[str]
    reachable_nodes: list[str]


@dataclass(frozen=True)
class AggregatedNode:
    """Result of value aggregation for a single node.

    Attributes:
        id: The node.
        aggregated_value: Own value plus the share received from relatives.
        contributing_nodes: The node itself followed by every node whose
            value flowed into it.
    """

    id: str
    aggregated_value: float
    contributing_nodes: list[str]


@dataclass(frozen=True)
class TypeAggregateNode:
    type: str
    node_count: int


@dataclass(frozen=True)
class TypeAggregateEdge:
    """Edge counts between two node types.

    ``transition_probability`` is the share of ``from_type``'s outgoing edges
    that land on ``to_type``.
    """

    from_type: str
    to_type: str
    transition_count: int
    transition_probability: float


@dataclass(frozen=True)
class TypeAggregate:
    aggregate_nodes: list[TypeAggregateNode]
    aggregate_edges: list[TypeAggregateEdge]


@dataclass(frozen=True)
class OverviewStatistics:
    """Snapshot of a graph's size, type structure and coarse metrics.

    ``max_depth`` and ``branching_factor`` are placeholder values: 1 and 1.0
    for any non-empty graph (edge set, for the branching factor), otherwise 0.
    They are not longest-path or fan-out computations.
    """

    node_count: int
    edge_count: int
    node_types: list[str]
    unique_node_types_count: int
    max_depth: int
    source_node_types: list[str]
    target_node_types: list[str]
    average_degree: float
    branching_factor: float
    aggregate_nodes: list[TypeAggregateNode]
    aggregate_edges: list[TypeAggregateEdge]


@dataclass(frozen=True)
class NodeTypeIssue:
    node_type: str
    orphaned_count: int
    total_count: int
    orphaned_percentage: float


@dataclass(frozen=True)
class EdgePatternIssue:
    """Valid vs dangling edge counts for a (from_type, to_type) pattern.

    A missing endpoint is reported with the type ``"unknown"``.
    """

    from_type: str
    to_type: str
    dangling_count: int
    valid_count: int
    failure_rate: float


@dataclass(frozen=True)
class ValidationStatistics:
    """Data-quality report for a raw node/edge collection."""

    total_node_count: int
    total_edge_count: int
    valid_node_count: int
    valid_edge_count: int
    orphaned_node_count: int
    dangling_edge_count: int
    duplicate_node_count: int
    duplicate_edge_count: int
    node_validity_ratio: float
    edge_validity_ratio: float
    connectivity_ratio: float
    problematic_node_types: list[NodeTypeIssue]
    problematic_edge_patterns: list[EdgePatternIssue]
