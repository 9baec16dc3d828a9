"""
Edge-list loading for gdf-graph

Builds a Graph from a plain-text edge list.

Input Format:
    - One record per line, fields separated by whitespace
    - Blank lines and lines starting with "#" are skipped
    - A single name declares a vertex
    - "source target [weight ...]" declares an edge with optional weights

Example:
    # a path with a weighted middle edge
    A B
    B C 0.5 road
    D
"""

import logging
import time
from pathlib import Path
from typing import Iterable

from gdfgraph.errors import GraphLoadError
from gdfgraph.graph.graph import Graph
from gdfgraph.models import LoadResult

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"


def build_graph_from_lines(lines: Iterable[str]) -> LoadResult:
    """
    Build a Graph from edge-list lines.

    Args:
        lines: Lines of edge-list text, with or without trailing newlines

    Returns:
        LoadResult holding the graph and record counts

    Example:
        >>> result = build_graph_from_lines(["A B", "B C"])
        >>> result.graph.num_edges()
        2
    """
    start_time = time.time()
    result = LoadResult(graph=Graph())
    graph = result.graph

    for line in lines:
        result.lines_read += 1
        record = line.strip()
        if not record or record.startswith(COMMENT_PREFIX):
            continue

        fields = record.split()
        if len(fields) == 1:
            graph.add_vertex(fields[0])
            result.vertices_declared += 1
            continue

        source, target, *weights = fields
        if graph.has_edge(source, target):
            result.duplicate_edges += 1
        graph.add_edge(source, target, weights=weights)
        result.edges_read += 1

    result.load_time_seconds = time.time() - start_time
    logger.debug(
        "Loaded %d vertices and %d edges from %d lines (%d duplicate edges)",
        graph.num_vertices(),
        graph.num_edges(),
        result.lines_read,
        result.duplicate_edges,
    )
    return result


def build_graph_from_edge_list(path: Path | str) -> LoadResult:
    """
    Build a Graph from an edge-list file.

    Args:
        path: Path to a UTF-8 edge-list file

    Returns:
        LoadResult holding the graph and record counts

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the path is a directory
        GraphLoadError: If the file cannot be read or decoded
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Edge list not found: {path}")

    if path.is_dir():
        raise ValueError(f"Not a file: {path}")

    try:
        with path.open("r", encoding="utf-8") as handle:
            result = build_graph_from_lines(handle)
    except UnicodeDecodeError as e:
        raise GraphLoadError(str(path), f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise GraphLoadError(str(path), e.strerror or str(e)) from e

    logger.info(
        "Loaded %s: %d vertices, %d edges",
        path,
        result.vertex_count,
        result.edge_count,
    )
    return result
