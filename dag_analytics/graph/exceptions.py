"""Errors raised by the graph analytics operations.

Every error is an input-integrity failure. None are retried or corrected
internally; they surface to the caller so that no partial result is ever
returned.
"""

from typing import Any


class GraphError(Exception):
    """Base exception for graph analytics errors."""


class DanglingReferenceError(GraphError):
    """Raised when an edge names a node id absent from the node collection."""

    def __init__(self, node_id: str, edge: Any = None):
        super().__init__(f"Edge references unknown node {node_id!r}")
        self.node_id = node_id
        self.edge = edge


class NotADAGError(GraphError):
    """Raised when value propagation finds a dependency cycle."""

    def __init__(self, cycle_nodes: list[str]):
        preview = ", ".join(cycle_nodes[:10])
        if len(cycle_nodes) > 10:
            preview += ", ..."
        super().__init__(
            f"Graph is not a DAG: {len(cycle_nodes)} node(s) lie on or "
            f"behind a cycle ({preview})"
        )
        self.cycle_nodes = cycle_nodes


class MalformedGraphError(GraphError):
    """Raised when graph input cannot be interpreted."""


class DuplicateNodeError(MalformedGraphError):
    """Raised when two nodes share the same id."""

    def __init__(self, node_id: str):
        super().__init__(f"Duplicate node id {node_id!r}")
        self.node_id = node_id


class GraphTooLargeError(GraphError):
    """Raised when a graph exceeds the configured validation limits."""

    def __init__(self, kind: str, count: int, limit: int):
        super().__init__(
            f"Graph too large for validation: {count} {kind} exceeds limit of {limit}"
        )
        self.kind = kind
        self.count = count
        self.limit = limit
