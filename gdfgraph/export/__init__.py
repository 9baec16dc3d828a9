"""
Export module for gdf-graph.

Renders graphs as GDF files and as adjacency-list text.
"""

from gdfgraph.export.gdf import (
    iter_gdf_lines,
    render_gdf,
    write_gdf,
    render_adjacency,
)

__all__ = [
    "iter_gdf_lines",
    "render_gdf",
    "write_gdf",
    "render_adjacency",
]
