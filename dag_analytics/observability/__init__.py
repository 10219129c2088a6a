"""Observability layer - structured logging."""

from dag_analytics.observability.logging import bind_context, get_logger, setup_logging

__all__ = ["setup_logging", "get_logger", "bind_context"]
