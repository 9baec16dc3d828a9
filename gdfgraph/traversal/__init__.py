"""
Traversal module for gdf-graph.

Shortest-path searches that write their results into vertex
distance and predecessor fields.
"""

from gdfgraph.traversal.bfs import (
    UNREACHABLE,
    breadth_first_search,
    path_to,
    shortest_path,
)

__all__ = [
    "UNREACHABLE",
    "breadth_first_search",
    "path_to",
    "shortest_path",
]
