"""Pytest fixtures for graph analytics tests."""

import pytest

from dag_analytics.graph.schemas import GraphEdge, GraphNode


@pytest.fixture
def value_nodes() -> list[GraphNode]:
    """A(10), B(2), C(3)."""
    return [
        GraphNode(id="A", type="task", value=10.0),
        GraphNode(id="B", type="task", value=2.0),
        GraphNode(id="C", type="task", value=3.0),
    ]


@pytest.fixture
def fan_out_edges() -> list[GraphEdge]:
    """A → B, A → C."""
    return [
        GraphEdge(source="A", target="B"),
        GraphEdge(source="A", target="C"),
    ]


@pytest.fixture
def self_loop_nodes() -> list[GraphNode]:
    return [
        GraphNode(id="loop", type="recursive"),
        GraphNode(id="start", type="input"),
    ]


@pytest.fixture
def self_loop_edges() -> list[GraphEdge]:
    """start → loop, loop → loop."""
    return [
        GraphEdge(source="start", target="loop"),
        GraphEdge(source="loop", target="loop"),
    ]
