"""
Tests for edge-list loading.

Tests building graphs from lines and from files.
"""

import pytest
from gdfgraph.errors import GraphLoadError
from gdfgraph.graph import build_graph_from_edge_list, build_graph_from_lines
from tests.fixtures import DUPLICATE_EDGES, PATH_EDGES, WEIGHTED_EDGES


class TestBuildFromLines:
    """Tests for build_graph_from_lines."""

    def test_path_edges(self):
        """Test loading a simple path."""
        result = build_graph_from_lines(PATH_EDGES.splitlines())

        assert result.vertex_count == 3
        assert result.edge_count == 2
        assert result.edges_read == 2
        assert result.graph.has_edge("B", "A")

    def test_weights_comments_and_vertices(self):
        """Test weights, comments, blank lines and vertex records."""
        result = build_graph_from_lines(WEIGHTED_EDGES.splitlines())
        graph = result.graph

        assert result.lines_read == 5
        assert result.vertices_declared == 1
        assert result.edges_read == 2
        assert graph.has_vertex("D")
        assert graph.adjacent_to("D") == []
        assert graph.get_edge("A", "B").weights == ("5", "highway")
        assert graph.get_edge("B", "C").weights == ("2",)

    def test_duplicate_edges_counted(self):
        """Test that repeated edges are reported but not linked twice."""
        result = build_graph_from_lines(DUPLICATE_EDGES.splitlines())

        assert result.edges_read == 3
        assert result.duplicate_edges == 2
        assert result.edge_count == 1
        assert result.graph.get_edge("A", "B").weights == ("3",)
        assert result.graph.get_edge("B", "A").weights == ("2",)

    def test_lines_with_newlines(self):
        """Test that trailing newlines and extra spaces are ignored."""
        result = build_graph_from_lines(["  A   B  \n", "\n", "B\tC\n"])

        assert result.edge_count == 2
        assert result.vertex_count == 3

    def test_empty_input(self):
        """Test that no lines gives an empty graph."""
        result = build_graph_from_lines([])

        assert result.vertex_count == 0
        assert result.lines_read == 0


class TestBuildFromFile:
    """Tests for build_graph_from_edge_list."""

    def test_load_file(self, tmp_path):
        """Test loading an edge list from disk."""
        source = tmp_path / "edges.txt"
        source.write_text(WEIGHTED_EDGES, encoding="utf-8")

        result = build_graph_from_edge_list(source)

        assert result.vertex_count == 4
        assert result.edge_count == 2
        assert result.load_time_seconds >= 0.0

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            build_graph_from_edge_list(tmp_path / "missing.txt")

    def test_directory(self, tmp_path):
        """Test that a directory is rejected."""
        with pytest.raises(ValueError):
            build_graph_from_edge_list(tmp_path)

    def test_invalid_encoding(self, tmp_path):
        """Test that undecodable input raises GraphLoadError."""
        source = tmp_path / "edges.txt"
        source.write_bytes(b"A B\n\xff\xfe C\n")

        with pytest.raises(GraphLoadError) as exc_info:
            build_graph_from_edge_list(source)

        assert exc_info.value.path == str(source)
