"""
Core Data Models for gdf-graph

This module defines the value types held by a Graph:
- Vertex: A named vertex with scratch fields for traversal algorithms
- Edge: A stored edge between two vertex names
- LoadResult: Summary of building a graph from an edge list

Vertices compare, hash and sort by name only, so they can live in
sets and adjacency structures while their scratch fields change.
"""

from dataclasses import FrozenInstanceError, dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from gdfgraph.graph.graph import Graph


def _format_weights(weights: tuple[str, ...]) -> str:
    if not weights:
        return ""
    return "[" + ",".join(weights) + "]"


@dataclass(order=True, unsafe_hash=True)
class Vertex:
    """
    A single vertex in the graph.

    Identity is the name: two Vertex objects with the same name are equal,
    hash the same and sort together. The remaining fields never take part
    in comparisons.

    Attributes:
        name: Unique identifier of the vertex within its graph. Read-only
            once set, since it is the vertex's hash key.
        weights: Optional weight strings attached at creation
        distance: Scratch field written by traversal algorithms
        predecessor: Scratch field pointing back along a traversal tree.
            A reference only; the graph owns every vertex.
        centrality: Score written by centrality algorithms, None until set

    Note:
        distance and predecessor are shared mutable state. Two algorithms
        must not work on the same graph at the same time without external
        synchronization.
    """

    name: str
    weights: tuple[str, ...] = field(default=(), compare=False)
    distance: int = field(default=0, compare=False)
    predecessor: Optional["Vertex"] = field(default=None, compare=False, repr=False)
    centrality: Optional[float] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        self.weights = tuple(self.weights)

    def __setattr__(self, key: str, value: object) -> None:
        # name is the hash key inside the graph's adjacency
        if key == "name" and "name" in self.__dict__:
            raise FrozenInstanceError("cannot assign to field 'name'")
        object.__setattr__(self, key, value)

    def __str__(self) -> str:
        return self.name

    def weights_string(self) -> str:
        """Render the weights as "[w1,w2]", or "" when there are none."""
        return _format_weights(self.weights)


@dataclass(frozen=True)
class Edge:
    """
    A stored edge between two vertex names.

    The key is directional ("A>B" differs from "B>A") even though the
    graph's adjacency is undirected.

    Attributes:
        source: Name of the first endpoint as given at insertion
        target: Name of the second endpoint as given at insertion
        weights: Optional weight strings
    """

    source: str
    target: str
    weights: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "weights", tuple(self.weights))

    @property
    def key(self) -> str:
        """Return the composite key "source>target"."""
        return edge_key(self.source, self.target)

    def weights_string(self) -> str:
        return _format_weights(self.weights)


def edge_key(source: str, target: str) -> str:
    """Build the composite edge key for an ordered endpoint pair."""
    return f"{source}>{target}"


@dataclass
class LoadResult:
    """
    Result of building a graph from an edge list.

    Attributes:
        graph: The populated Graph
        lines_read: Number of lines in the input, including skipped ones
        vertices_declared: Number of single-name vertex records
        edges_read: Number of edge records
        duplicate_edges: Edge records whose endpoints were already adjacent
        load_time_seconds: Wall time spent loading
    """

    graph: "Graph"
    lines_read: int = 0
    vertices_declared: int = 0
    edges_read: int = 0
    duplicate_edges: int = 0
    load_time_seconds: float = 0.0

    @property
    def vertex_count(self) -> int:
        return self.graph.num_vertices()

    @property
    def edge_count(self) -> int:
        return self.graph.num_edges()
