"""
Command-line interface for dag-analytics.

Each command reads a JSON graph document and prints its result as JSON.

Usage:
    dag-analytics adjacency graph.json     # Forward/reverse adjacency lists
    dag-analytics reachability graph.json  # Ancestors/descendants per node
    dag-analytics top-down graph.json      # Top-down value aggregation
    dag-analytics bottom-up graph.json     # Bottom-up value aggregation
    dag-analytics overview graph.json      # Overview statistics
    dag-analytics validate graph.json      # Data-quality statistics
"""

import json
import sys
from dataclasses import asdict, is_dataclass
from typing import Any, Callable

import click

from dag_analytics.observability.logging import bind_context, get_logger, setup_logging

logger = get_logger(__name__)

GRAPH_FILE = click.Path(exists=True, dir_okay=False)


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool) -> None:
    """DAG Analytics - adjacency, reachability and aggregation over typed graphs."""
    if debug:
        import os
        os.environ["DEBUG"] = "true"

        from dag_analytics.config.settings import get_settings

        get_settings.cache_clear()

    setup_logging()


def _to_jsonable(result: Any) -> Any:
    if isinstance(result, list):
        return [_to_jsonable(item) for item in result]
    if is_dataclass(result):
        return asdict(result)
    return result


def _run(graph_file: str, operation: Callable[..., Any]) -> None:
    """Load a graph, apply an operation and echo the result as JSON."""
    from dag_analytics.graph.exceptions import GraphError
    from dag_analytics.graph.loader import load_graph

    bind_context(graph_file=graph_file)

    try:
        nodes, edges = load_graph(graph_file)
        result = operation(nodes, edges)
    except GraphError as e:
        logger.debug("Graph command failed", error=str(e), error_type=type(e).__name__)
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(json.dumps(_to_jsonable(result), indent=2))


@main.command()
@click.argument("graph_file", type=GRAPH_FILE)
def adjacency(graph_file: str) -> None:
    """Print deduplicated forward and reverse adjacency lists.

    Example:
        dag-analytics adjacency graph.json
    """
    from dag_analytics.graph.adjacency import build_adjacency_lists

    _run(graph_file, lambda nodes, edges: build_adjacency_lists(edges))


@main.command()
@click.argument("graph_file", type=GRAPH_FILE)
def reachability(graph_file: str) -> None:
    """Print ancestors, descendants and reachable nodes for every node.

    Example:
        dag-analytics reachability graph.json
    """
    from dag_analytics.graph.reachability import ancestor_descendant

    _run(graph_file, ancestor_descendant)


@main.command("top-down")
@click.argument("graph_file", type=GRAPH_FILE)
def top_down(graph_file: str) -> None:
    """Distribute node values from ancestors down to descendants.

    Requires an acyclic graph; cycles are reported as errors.

    Example:
        dag-analytics top-down graph.json
    """
    from dag_analytics.graph.propagation import top_down_aggregation

    _run(graph_file, top_down_aggregation)


@main.command("bottom-up")
@click.argument("graph_file", type=GRAPH_FILE)
def bottom_up(graph_file: str) -> None:
    """Accumulate node values from descendants up to ancestors.

    Example:
        dag-analytics bottom-up graph.json
    """
    from dag_analytics.graph.propagation import bottom_up_aggregation

    _run(graph_file, bottom_up_aggregation)


@main.command()
@click.argument("graph_file", type=GRAPH_FILE)
def overview(graph_file: str) -> None:
    """Print overview statistics and type transitions.

    Example:
        dag-analytics overview graph.json
    """
    from dag_analytics.graph.statistics import overview_statistics

    _run(graph_file, overview_statistics)


@main.command()
@click.argument("graph_file", type=GRAPH_FILE)
def validate(graph_file: str) -> None:
    """Report duplicate, dangling and orphaned graph elements.

    Size limits come from GRAPH_MAX_NODES and GRAPH_MAX_EDGES.

    Example:
        dag-analytics validate graph.json
    """
    from dag_analytics.graph.config import GraphConfig
    from dag_analytics.graph.validation import validate_graph

    _run(graph_file, lambda nodes, edges: validate_graph(nodes, edges, GraphConfig()))


if __name__ == "__main__":
    main()
