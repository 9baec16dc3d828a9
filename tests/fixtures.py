"""
Test fixtures for gdf-graph.

This module provides sample edge lists and small graph builders
shared by the test modules.
"""

from gdfgraph.graph import Graph

# A three-vertex path A - B - C
PATH_EDGES = """\
A B
B C
"""

# Weighted edges, a lone vertex, comments and blank lines
WEIGHTED_EDGES = """\
# roads between towns
A B 5 highway

B C 2
D
"""

# The same undirected edge given three times
DUPLICATE_EDGES = """\
A B 1
B A 2
A B 3
"""

# Two components: a triangle and a separate pair
TWO_COMPONENTS = """\
A B
B C
C A
X Y
"""

# A star centred on hub
STAR_EDGES = """\
hub a
hub b
hub c
hub d
"""


def path_graph() -> Graph:
    """Build the path graph A - B - C."""
    graph = Graph()
    graph.add_edge("A", "B")
    graph.add_edge("B", "C")
    return graph


def star_graph() -> Graph:
    """Build a star with four leaves around "hub"."""
    graph = Graph()
    for leaf in ("a", "b", "c", "d"):
        graph.add_edge("hub", leaf)
    return graph
