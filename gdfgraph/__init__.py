"""
gdf-graph

In-memory undirected graph container with adjacency queries,
breadth-first traversal, centrality measures and GDF export.
"""

from gdfgraph.models import Edge, Vertex
from gdfgraph.graph import Graph

__all__ = ["Edge", "Graph", "Vertex"]
__version__ = "0.1.0"
