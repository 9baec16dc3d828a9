"""
CLI module for gdf-graph.

The command-line interface providing export, show, centrality and
path commands.
"""

from cli.main import app

__all__ = ["app"]
