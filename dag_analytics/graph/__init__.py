"""Directed graph analytics over typed node/edge collections.

Provides adjacency construction, LIFO depth-first reachability, top-down and
bottom-up value aggregation over DAGs, type-level aggregation with
transition probabilities, overview statistics and data-quality validation.

Components:
- build_adjacency_lists: Deduplicated forward/reverse adjacency
- reach / ancestor_descendant: Explicit-stack DFS reachability
- top_down_aggregation / bottom_up_aggregation: Dependency-ordered propagation
- aggregate_by_type / overview_statistics: Type counts and structural metrics
- validate_graph: Duplicate, dangling and orphan statistics
- load_graph / parse_graph: JSON graph documents
- GraphConfig: Pydantic settings with GRAPH_ prefix
"""

from dag_analytics.graph.adjacency import build_adjacency_lists
from dag_analytics.graph.config import GraphConfig
from dag_analytics.graph.exceptions import (
    DanglingReferenceError,
    DuplicateNodeError,
    GraphError,
    GraphTooLargeError,
    MalformedGraphError,
    NotADAGError,
)
from dag_analytics.graph.loader import load_graph, parse_graph
from dag_analytics.graph.propagation import bottom_up_aggregation, top_down_aggregation
from dag_analytics.graph.reachability import ancestor_descendant, reach
from dag_analytics.graph.schemas import (
    AdjacencyLists,
    AggregatedNode,
    EdgePatternIssue,
    GraphEdge,
    GraphNode,
    NodeTypeIssue,
    OverviewStatistics,
    ReachabilitySet,
    TypeAggregate,
    TypeAggregateEdge,
    TypeAggregateNode,
    ValidationStatistics,
)
from dag_analytics.graph.statistics import overview_statistics
from dag_analytics.graph.type_aggregation import aggregate_by_type
from dag_analytics.graph.validation import check_edge_references, index_nodes, validate_graph

__all__ = [
    "AdjacencyLists",
    "AggregatedNode",
    "DanglingReferenceError",
    "DuplicateNodeError",
    "EdgePatternIssue",
    "GraphConfig",
    "GraphEdge",
    "GraphError",
    "GraphNode",
    "GraphTooLargeError",
    "MalformedGraphError",
    "NodeTypeIssue",
    "NotADAGError",
    "OverviewStatistics",
    "ReachabilitySet",
    "TypeAggregate",
    "TypeAggregateEdge",
    "TypeAggregateNode",
    "ValidationStatistics",
    "aggregate_by_type",
    "ancestor_descendant",
    "bottom_up_aggregation",
    "build_adjacency_lists",
    "check_edge_references",
    "index_nodes",
    "load_graph",
    "overview_statistics",
    "parse_graph",
    "reach",
    "top_down_aggregation",
    "validate_graph",
]
