"""Tests for overview statistics.

The depth and branching metrics are placeholders: they must stay at
1 / 1.0 for non-empty input regardless of the graph's real shape.
"""

import pytest

from dag_analytics.graph.exceptions import DanglingReferenceError
from dag_analytics.graph.schemas import GraphEdge, GraphNode, TypeAggregateNode
from dag_analytics.graph.statistics import overview_statistics
from dag_analytics.graph.type_aggregation import aggregate_by_type


class TestOverviewStatistics:
    """Test overview_statistics()."""

    def test_diamond(self, diamond_nodes, diamond_edges) -> None:
        stats = overview_statistics(diamond_nodes, diamond_edges)

        assert stats.node_count == 4
        assert stats.edge_count == 4
        assert stats.average_degree == pytest.approx(2.0)
        assert stats.node_types == ["input", "output", "process"]
        assert stats.unique_node_types_count == 3
        assert stats.source_node_types == ["input"]
        assert stats.target_node_types == ["output"]
        assert stats.aggregate_nodes == [
            TypeAggregateNode("input", 1),
            TypeAggregateNode("output", 1),
            TypeAggregateNode("process", 2),
        ]
        assert [
            (e.from_type, e.to_type, e.transition_count, e.transition_probability)
            for e in stats.aggregate_edges
        ] == [("input", "process", 2, 1.0), ("process", "output", 2, 1.0)]

    def test_self_loop(self, self_loop_nodes, self_loop_edges) -> None:
        """Both types keep an outgoing edge, so there are no target types."""
        stats = overview_statistics(self_loop_nodes, self_loop_edges)

        assert stats.node_types == ["input", "recursive"]
        assert stats.source_node_types == ["input"]
        assert stats.target_node_types == []

    def test_placeholders_ignore_real_shape(self) -> None:
        """A 3-level fan-out still reports depth 1 and branching 1.0."""
        nodes = [
            GraphNode(id="A", type="input"),
            GraphNode(id="B", type="process"),
            GraphNode(id="C", type="process"),
            GraphNode(id="D", type="output"),
        ]
        edges = [
            GraphEdge(source="A", target="B"),
            GraphEdge(source="A", target="C"),
            GraphEdge(source="C", target="D"),
        ]
        stats = overview_statistics(nodes, edges)

        assert stats.max_depth == 1
        assert stats.branching_factor == 1.0
        assert stats.average_degree == pytest.approx(1.5)

    def test_empty_graph(self) -> None:
        stats = overview_statistics([], [])

        assert stats.node_count == 0
        assert stats.edge_count == 0
        assert stats.average_degree == 0.0
        assert stats.branching_factor == 0.0
        assert stats.max_depth == 0
        assert stats.node_types == []
        assert stats.unique_node_types_count == 0

    def test_nodes_without_edges(self, diamond_nodes) -> None:
        stats = overview_statistics(diamond_nodes, [])

        assert stats.node_count == 4
        assert stats.average_degree == 0.0
        assert stats.branching_factor == 0.0
        assert stats.max_depth == 1
        assert stats.node_types == []

    def test_unique_count_matches_aggregate(self, diamond_nodes, diamond_edges) -> None:
        stats = overview_statistics(diamond_nodes, diamond_edges)
        aggregate = aggregate_by_type(diamond_nodes, diamond_edges)

        assert stats.unique_node_types_count == len(aggregate.aggregate_nodes)
        assert stats.aggregate_edges == aggregate.aggregate_edges

    def test_dangling_reference(self, diamond_nodes) -> None:
        with pytest.raises(DanglingReferenceError):
            overview_statistics(diamond_nodes, [GraphEdge(source="X", target="A")])
