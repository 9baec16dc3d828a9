"""
Centrality module for gdf-graph.

Degree, closeness and betweenness measures computed over the public
Graph interface.
"""

from gdfgraph.centrality.measures import (
    MEASURES,
    betweenness_centrality,
    closeness_centrality,
    compute_centrality,
    degree_centrality,
    to_networkx,
)

__all__ = [
    "MEASURES",
    "betweenness_centrality",
    "closeness_centrality",
    "compute_centrality",
    "degree_centrality",
    "to_networkx",
]
