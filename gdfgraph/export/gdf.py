"""
GDF export for gdf-graph

Renders a Graph in the GDF node/edge text format read by graph
visualization tools, plus the plain adjacency-list text used by
str(graph).

Output Format:
    nodedef> name,label,style,distance INTEGER
    v0,'A',6,0
    v1,'B',6,1
    edgedef> node1,node2,color
    v0,v1,blue

Ordering:
    - Vertices are numbered in get_vertices() order (sorted by name)
    - Each undirected pair is written once, from the vertex that sorts first
    - Self-loops are not written
    - An edge is blue when either endpoint's predecessor is the other
      endpoint object itself (an equal-named vertex from another graph
      does not count)

Limitations:
    - Names are written between single quotes with no escaping, so a
      name containing a quote or a comma gives a line that GDF readers
      will split incorrectly. Such names are written unchanged.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, Union

from gdfgraph.errors import ExportError
from gdfgraph.models import Vertex

if TYPE_CHECKING:
    from gdfgraph.graph.graph import Graph

logger = logging.getLogger(__name__)

NODE_HEADER = "nodedef> name,label,style,distance INTEGER"
EDGE_HEADER = "edgedef> node1,node2,color"
NODE_STYLE = "6"
TREE_COLOR = "blue"
EDGE_COLOR = "gray"


def _quoted(name: str) -> str:
    return f"'{name}'"


def _edge_color(v: Vertex, w: Vertex) -> str:
    if v.predecessor is w or w.predecessor is v:
        return TREE_COLOR
    return EDGE_COLOR


def iter_gdf_lines(graph: "Graph") -> Iterator[str]:
    """
    Yield the GDF lines for a graph, without newlines.

    Args:
        graph: The graph to render

    Yields:
        The node header, one line per vertex, the edge header and one
        line per undirected adjacency pair
    """
    vertices = graph.get_vertices()
    ids: dict[str, str] = {}

    yield NODE_HEADER
    for count, vertex in enumerate(vertices):
        ids[vertex.name] = f"v{count}"
        yield f"{ids[vertex.name]},{_quoted(vertex.name)},{NODE_STYLE},{vertex.distance}"

    yield EDGE_HEADER
    for v in vertices:
        for w in graph.adjacent_to(v):
            if v < w:
                yield f"{ids[v.name]},{ids[w.name]},{_edge_color(v, w)}"


def render_gdf(graph: "Graph") -> str:
    """Return the full GDF text for a graph, newline-terminated."""
    return "".join(f"{line}\n" for line in iter_gdf_lines(graph))


def write_gdf(graph: "Graph", path: Union[str, Path]) -> None:
    """
    Write a graph to a GDF file, replacing any existing file.

    Args:
        graph: The graph to export
        path: Destination file path

    Raises:
        ExportError: If the file cannot be opened, written or closed
    """
    path = Path(path)
    try:
        with path.open("w", encoding="utf-8") as out:
            for line in iter_gdf_lines(graph):
                out.write(line)
                out.write("\n")
    except OSError as e:
        raise ExportError(str(path), e.strerror or str(e)) from e

    logger.info(
        "Exported %d vertices and %d edges to %s",
        graph.num_vertices(),
        graph.num_edges(),
        path,
    )


def render_adjacency(graph: "Graph") -> str:
    """
    Render a graph as adjacency-list text, one line per vertex.

    Each line is the vertex name and weights, a colon, then for every
    neighbor the connecting edge's weights, "->", and the neighbor's name
    and weights.

    Example:
        >>> graph = Graph()
        >>> _ = graph.add_edge("A", "B", ["5"])
        >>> print(render_adjacency(graph), end="")
        A: [5]->B
        B: [5]->A
    """
    lines = []
    for v in graph.get_vertices():
        line = f"{v}{v.weights_string()}: "
        for w in graph.adjacent_to(v):
            edge = graph.find_edge(v.name, w.name)
            edge_weights = edge.weights_string() if edge is not None else ""
            line += f"{edge_weights}->{w}{w.weights_string()}"
        lines.append(line)
    return "".join(f"{line}\n" for line in lines)
