"""
Graph module for gdf-graph.

This module provides the undirected Graph container and helpers for
building one from an edge-list file.
"""

from gdfgraph.graph.graph import Graph
from gdfgraph.graph.builder import (
    build_graph_from_lines,
    build_graph_from_edge_list,
)

__all__ = [
    "Graph",
    "build_graph_from_lines",
    "build_graph_from_edge_list",
]
