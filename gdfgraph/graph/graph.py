"""
Graph container for gdf-graph

This module holds the undirected graph used by the rest of the package.
Vertices are unique by name, adjacency is symmetric, and stored edges
are keyed by the exact endpoint order given at insertion.

Design Decisions:
    - Adjacency lives in a NetworkX Graph whose nodes are Vertex objects
    - Neighbors are always returned sorted by vertex name
    - Vertex and edge counts are kept explicitly, not derived
    - Edge storage is directional ("A>B"), adjacency is not

Graph Properties:
    - Undirected: has_edge(a, b) == has_edge(b, a)
    - Self-loops are allowed and link a vertex to itself
    - Vertices are never removed
    - A re-inserted edge is stored under its own key but adds no adjacency
"""

import logging
from pathlib import Path
from typing import Optional, Union

import networkx as nx

from gdfgraph.export import render_adjacency, write_gdf
from gdfgraph.models import Edge, Vertex, edge_key

logger = logging.getLogger(__name__)


class Graph:
    """
    An undirected graph of named vertices.

    Wraps a NetworkX Graph to provide:
    - Idempotent vertex registration by name
    - Edge insertion with automatic endpoint creation
    - Sorted adjacency views
    - Text rendering and GDF export

    Returned Vertex objects are the graph's own instances. Callers may
    write their distance, predecessor and centrality fields; that is how
    traversal and centrality algorithms report results.

    Usage:
        graph = Graph()
        graph.add_edge("A", "B")
        graph.add_edge("B", "C")
        for vertex in graph.adjacent_to("B"):
            print(vertex.name)
        graph.output_gdf("path.gdf")
    """

    def __init__(self) -> None:
        """Initialize an empty graph."""
        self._adjacency: nx.Graph = nx.Graph()
        self._vertices: dict[str, Vertex] = {}
        self._edges: dict[str, Edge] = {}
        self._num_vertices = 0
        self._num_edges = 0

    def add_vertex(self, name: str, weights: Optional[list[str]] = None) -> Vertex:
        """
        Add a vertex with no neighbors, unless one with this name exists.

        Args:
            name: The vertex name
            weights: Weight strings, used only if the vertex is created here

        Returns:
            The new or pre-existing Vertex
        """
        vertex = self._vertices.get(name)
        if vertex is None:
            vertex = Vertex(name, weights=tuple(weights or ()))
            self._vertices[name] = vertex
            self._adjacency.add_node(vertex)
            self._num_vertices += 1
        return vertex

    def get_vertex(self, name: str) -> Optional[Vertex]:
        """Return the Vertex with this name, or None."""
        return self._vertices.get(name)

    def has_vertex(self, name: str) -> bool:
        return name in self._vertices

    def __contains__(self, name: object) -> bool:
        return name in self._vertices

    def has_edge(self, source: str, target: str) -> bool:
        """
        Check whether source and target are adjacent.

        The graph is undirected, so the order of the names does not matter.

        Returns:
            True iff both vertices exist and are neighbors
        """
        if not self.has_vertex(source) or not self.has_vertex(target):
            return False
        return self._adjacency.has_edge(self._vertices[source], self._vertices[target])

    def get_edge(self, source: str, target: str) -> Optional[Edge]:
        """
        Return the edge stored under the exact key "source>target".

        This lookup is directional: an edge inserted as (B, A) is not
        found by get_edge("A", "B"). Use find_edge() for an undirected
        lookup.
        """
        return self._edges.get(edge_key(source, target))

    def find_edge(self, a: str, b: str) -> Optional[Edge]:
        """Return the edge stored for a and b in either order, or None."""
        edge = self.get_edge(a, b)
        if edge is None:
            edge = self.get_edge(b, a)
        return edge

    def add_edge(
        self,
        source: str,
        target: str,
        weights: Optional[list[str]] = None,
    ) -> Edge:
        """
        Add an undirected edge between source and target.

        A new Edge is always built and stored under "source>target",
        replacing anything stored under that exact key. If the two
        vertices are already adjacent nothing else changes: no vertex is
        created, the edge count stays the same and the weights are only
        reachable through that key. Otherwise the edge count goes up,
        missing endpoints are created and each endpoint is added to the
        other's neighbors.

        Args:
            source: Name of the first endpoint
            target: Name of the second endpoint
            weights: Optional weight strings for the edge

        Returns:
            The newly built Edge
        """
        edge = Edge(source, target, weights=tuple(weights or ()))
        self._edges[edge.key] = edge

        if self.has_edge(source, target):
            logger.debug("Edge %s duplicates an existing adjacency", edge.key)
            return edge

        self._num_edges += 1
        src = self.add_vertex(source)
        dest = self.add_vertex(target)
        self._adjacency.add_edge(src, dest)
        return edge

    def adjacent_to(self, vertex: Union[str, Vertex]) -> list[Vertex]:
        """
        Return the neighbors of a vertex, sorted by name.

        Args:
            vertex: A vertex name or a Vertex

        Returns:
            A new list of neighboring Vertices; empty if the vertex is
            not in this graph
        """
        if isinstance(vertex, str):
            vertex = self._vertices.get(vertex)
            if vertex is None:
                return []
        if vertex not in self._adjacency:
            return []
        return sorted(self._adjacency.neighbors(vertex))

    def get_vertices(self) -> list[Vertex]:
        """Return all vertices sorted by name."""
        return sorted(self._vertices.values())

    def get_edges(self) -> list[Edge]:
        """
        Return every stored Edge sorted by key.

        This can be longer than num_edges(), since duplicate insertions
        are stored too.
        """
        return [self._edges[key] for key in sorted(self._edges)]

    def num_vertices(self) -> int:
        return self._num_vertices

    def num_edges(self) -> int:
        return self._num_edges

    def __str__(self) -> str:
        return render_adjacency(self)

    def __repr__(self) -> str:
        return f"Graph(vertices={self._num_vertices}, edges={self._num_edges})"

    def output_gdf(self, path: Union[str, Path]) -> None:
        """
        Write this graph to a GDF file.

        Raises:
            ExportError: If the file cannot be opened or written
        """
        write_gdf(self, path)
