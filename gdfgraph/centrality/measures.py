"""
Centrality measures for gdf-graph

Each measure scores every vertex, writes the score into the vertex's
centrality field and returns the scores by name. Measures only use the
public Graph interface (get_vertices() and adjacent_to()); path-based
measures project the graph into a NetworkX graph of names and use the
NetworkX algorithms on that.

Measures:
    degree: Size of the vertex's neighbor set
    closeness: Mean shortest-path distance to every other reachable
               vertex, 0.0 when nothing else is reachable
    betweenness: Normalized fraction of all-pairs shortest paths that
                 pass through the vertex
"""

import logging
from typing import Callable

import networkx as nx

from gdfgraph.errors import UnknownMeasureError
from gdfgraph.graph.graph import Graph

logger = logging.getLogger(__name__)

CentralityMeasure = Callable[[Graph], dict[str, float]]


def to_networkx(graph: Graph) -> nx.Graph:
    """
    Project a Graph into a NetworkX Graph keyed by vertex name.

    Args:
        graph: The graph to project

    Returns:
        A new undirected NetworkX graph with one node per vertex name
    """
    projected = nx.Graph()
    for v in graph.get_vertices():
        projected.add_node(v.name)
        for w in graph.adjacent_to(v):
            projected.add_edge(v.name, w.name)
    return projected


def _store(graph: Graph, scores: dict[str, float]) -> dict[str, float]:
    for vertex in graph.get_vertices():
        vertex.centrality = scores[vertex.name]
    return scores


def degree_centrality(graph: Graph) -> dict[str, float]:
    """Score each vertex by the number of its neighbors."""
    scores = {v.name: float(len(graph.adjacent_to(v))) for v in graph.get_vertices()}
    return _store(graph, scores)


def closeness_centrality(graph: Graph) -> dict[str, float]:
    """Score each vertex by its mean distance to the vertices it can reach."""
    projected = to_networkx(graph)
    scores = {}
    for name in projected.nodes:
        lengths = nx.single_source_shortest_path_length(projected, name)
        others = [length for other, length in lengths.items() if other != name]
        scores[name] = sum(others) / len(others) if others else 0.0
    return _store(graph, scores)


def betweenness_centrality(graph: Graph) -> dict[str, float]:
    """Score each vertex by the share of shortest paths passing through it."""
    projected = to_networkx(graph)
    scores = nx.betweenness_centrality(projected, normalized=True)
    return _store(graph, {name: float(score) for name, score in scores.items()})


MEASURES: dict[str, CentralityMeasure] = {
    "degree": degree_centrality,
    "closeness": closeness_centrality,
    "betweenness": betweenness_centrality,
}


def compute_centrality(graph: Graph, measure: str) -> dict[str, float]:
    """
    Run a centrality measure by name.

    Args:
        graph: The graph to score
        measure: One of "degree", "closeness" or "betweenness"

    Returns:
        Mapping of vertex names to scores

    Raises:
        UnknownMeasureError: If the measure name is not recognised
    """
    func = MEASURES.get(measure)
    if func is None:
        raise UnknownMeasureError(measure, sorted(MEASURES))
    logger.debug("Computing %s centrality for %d vertices", measure, graph.num_vertices())
    return func(graph)
