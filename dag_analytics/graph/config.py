"""Configuration for the graph analytics operations.

All settings can be overridden via environment variables with GRAPH_ prefix.
Example: GRAPH_MAX_NODES=50000
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph analytics configuration."""

    model_config = SettingsConfigDict(
        env_prefix="GRAPH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Safety limits for bulk validation
    max_nodes: int = Field(
        default=1_000_000,
        ge=1,
        description="Maximum node count accepted by graph validation",
    )
    max_edges: int = Field(
        default=5_000_000,
        ge=1,
        description="Maximum edge count accepted by graph validation",
    )
