"""
Breadth-first shortest paths for gdf-graph

Hop-count shortest paths that report their results through the
distance and predecessor fields of each Vertex. Exporting the graph
afterwards colors the resulting tree blue.

Only the public Graph interface is used: get_vertex(), get_vertices()
and adjacent_to(). Running this mutates every vertex in the graph, so
it must not overlap with another traversal on the same graph.
"""

import logging
from collections import deque

from gdfgraph.errors import VertexNotFoundError
from gdfgraph.graph.graph import Graph

logger = logging.getLogger(__name__)

UNREACHABLE = -1


def breadth_first_search(graph: Graph, source: str) -> dict[str, int]:
    """
    Compute hop distances from source to every reachable vertex.

    Every vertex is reset to distance UNREACHABLE with no predecessor
    before the search starts. Neighbors are visited in name order, so
    ties between equally short paths always resolve the same way.

    Args:
        graph: The graph to search
        source: Name of the start vertex

    Returns:
        Mapping of reached vertex names to their distance from source

    Raises:
        VertexNotFoundError: If source is not in the graph
    """
    start = graph.get_vertex(source)
    if start is None:
        raise VertexNotFoundError(source)

    for vertex in graph.get_vertices():
        vertex.distance = UNREACHABLE
        vertex.predecessor = None

    start.distance = 0
    reached = {start.name: 0}
    queue = deque([start])

    while queue:
        v = queue.popleft()
        for w in graph.adjacent_to(v):
            if w.distance == UNREACHABLE:
                w.distance = v.distance + 1
                w.predecessor = v
                reached[w.name] = w.distance
                queue.append(w)

    logger.debug(
        "BFS from %s reached %d of %d vertices",
        source,
        len(reached),
        graph.num_vertices(),
    )
    return reached


def path_to(graph: Graph, target: str) -> list[str]:
    """
    Read back the path found by the last breadth_first_search().

    Returns:
        Vertex names from the search source to target, or an empty list
        if target is unknown or was not reached
    """
    vertex = graph.get_vertex(target)
    if vertex is None or vertex.distance == UNREACHABLE:
        return []

    path = []
    while vertex is not None:
        path.append(vertex.name)
        vertex = vertex.predecessor
    path.reverse()
    return path


def shortest_path(graph: Graph, source: str, target: str) -> list[str]:
    """Run breadth_first_search() from source and return the path to target."""
    breadth_first_search(graph, source)
    return path_to(graph, target)
