"""Pytest fixtures for dag-analytics tests."""

import pytest

from dag_analytics.config.settings import Settings
from dag_analytics.graph.schemas import GraphEdge, GraphNode


@pytest.fixture
def test_settings() -> Settings:
    """Settings configured for testing."""
    return Settings(environment="development", log_level="DEBUG")


@pytest.fixture
def diamond_nodes() -> list[GraphNode]:
    """A(input) → B, C(process) → D(output)."""
    return [
        GraphNode(id="A", type="input"),
        GraphNode(id="B", type="process"),
        GraphNode(id="C", type="process"),
        GraphNode(id="D", type="output"),
    ]


@pytest.fixture
def diamond_edges() -> list[GraphEdge]:
    return [
        GraphEdge(source="A", target="B"),
        GraphEdge(source="A", target="C"),
        GraphEdge(source="B", target="D"),
        GraphEdge(source="C", target="D"),
    ]
