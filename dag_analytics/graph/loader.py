"""Loading graphs from JSON documents.

Document format:
    {
        "nodes": [{"id": "A", "type": "input", "value": 10.0}, ...],
        "edges": [{"from": "A", "to": "B", "type": "feeds"}, ...]
    }

``source``/``target`` are accepted in place of ``from``/``to``. Documents are
validated with pydantic and converted into GraphNode/GraphEdge objects.
"""

import json
from pathlib import Path
from typing import Any

import structlog
from pydantic import AliasChoices, BaseModel, Field, ValidationError

from .exceptions import MalformedGraphError
from .schemas import GraphEdge, GraphNode

logger = structlog.get_logger(__name__)


class NodeModel(BaseModel):
    """Node entry of a graph document."""

    id: str = Field(..., min_length=1, description="Unique node identifier")
    type: str = Field(..., description="Node type label")
    value: float | None = Field(default=None, description="Scalar for value aggregation")
    weight: float | None = Field(default=None, description="Reserved, not interpreted")


class EdgeModel(BaseModel):
    """Edge entry of a graph document."""

    source: str = Field(
        ...,
        validation_alias=AliasChoices("from", "source"),
        description="Node id the edge leaves from",
    )
    target: str = Field(
        ...,
        validation_alias=AliasChoices("to", "target"),
        description="Node id the edge points to",
    )
    type: str | None = Field(default=None, description="Optional edge label")


class GraphDocument(BaseModel):
    """A complete graph document."""

    nodes: list[NodeModel] = Field(default_factory=list)
    edges: list[EdgeModel] = Field(default_factory=list)


def parse_graph(data: Any) -> tuple[list[GraphNode], list[GraphEdge]]:
    """Convert a decoded graph document into nodes and edges.

    Raises:
        MalformedGraphError: If the document does not match the schema.
    """
    try:
        document = GraphDocument.model_validate(data)
    except ValidationError as e:
        raise MalformedGraphError(f"Invalid graph document: {e}") from e

    nodes = [
        GraphNode(id=n.id, type=n.type, value=n.value, weight=n.weight)
        for n in document.nodes
    ]
    edges = [GraphEdge(source=e.source, target=e.target, type=e.type) for e in document.edges]
    return nodes, edges


def load_graph(path: str | Path) -> tuple[list[GraphNode], list[GraphEdge]]:
    """Read and parse a JSON graph document from disk.

    Raises:
        MalformedGraphError: If the file cannot be read, is not UTF-8 encoded
            JSON, or does not match the document schema.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedGraphError(f"{path} is not valid JSON: {e}") from e
    except OSError as e:
        raise MalformedGraphError(f"{path} cannot be read: {e}") from e

    nodes, edges = parse_graph(data)
    logger.debug("Graph loaded", path=str(path), node_count=len(nodes), edge_count=len(edges))
    return nodes, edges
