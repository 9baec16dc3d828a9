"""
Exceptions for gdf-graph.

Lookup misses are not errors and never raise; these cover the
operations that can actually fail: file export, edge-list loading,
traversal from an unknown vertex and unknown centrality measures.
"""

from typing import Optional


class GraphError(Exception):
    """Base exception for all gdf-graph errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.details = details or {}


class ExportError(GraphError):
    """Raised when writing a GDF file fails."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Failed to export graph to {path}: {reason}",
            details={"path": path, "reason": reason},
        )
        self.path = path


class GraphLoadError(GraphError):
    """Raised when an edge list cannot be read."""

    def __init__(self, path: str, reason: str, line_number: Optional[int] = None):
        location = f"{path}:{line_number}" if line_number is not None else path
        super().__init__(
            f"Failed to load graph from {location}: {reason}",
            details={"path": path, "line_number": line_number, "reason": reason},
        )
        self.path = path
        self.line_number = line_number


class VertexNotFoundError(GraphError):
    """Raised when an algorithm is started from a vertex the graph lacks."""

    def __init__(self, name: str):
        super().__init__(f"Vertex '{name}' not found", details={"name": name})
        self.name = name


class UnknownMeasureError(GraphError):
    """Raised when a centrality measure name is not recognised."""

    def __init__(self, measure: str, available: list[str]):
        super().__init__(
            f"Unknown centrality measure '{measure}' "
            f"(available: {', '.join(available)})",
            details={"measure": measure, "available": available},
        )
        self.measure = measure
        self.available = available
