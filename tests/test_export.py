"""
Tests for the export module.

Tests GDF rendering, file writing and adjacency-list text.
"""

import pytest
from gdfgraph.errors import ExportError
from gdfgraph.export import render_adjacency, render_gdf, write_gdf
from gdfgraph.graph import Graph
from tests.fixtures import path_graph


def _sections(text: str) -> tuple[list[str], list[str]]:
    lines = text.splitlines()
    edge_header = lines.index("edgedef> node1,node2,color")
    return lines[1:edge_header], lines[edge_header + 1 :]


class TestRenderGDF:
    """Tests for GDF text rendering."""

    def test_path_graph_lines(self):
        """Test that the path graph gives 3 node lines and 2 edge lines."""
        nodes, edges = _sections(render_gdf(path_graph()))

        assert len(nodes) == 3
        assert len(edges) == 2

    def test_exact_output(self):
        """Test the full text for the path graph."""
        expected = (
            "nodedef> name,label,style,distance INTEGER\n"
            "v0,'A',6,0\n"
            "v1,'B',6,0\n"
            "v2,'C',6,0\n"
            "edgedef> node1,node2,color\n"
            "v0,v1,gray\n"
            "v1,v2,gray\n"
        )

        assert render_gdf(path_graph()) == expected

    def test_reverse_insertion_same_output(self):
        """Test that insertion order does not change the output."""
        graph = Graph()
        graph.add_edge("C", "B")
        graph.add_edge("B", "A")

        assert render_gdf(graph) == render_gdf(path_graph())

    def test_predecessor_colors_edge_blue(self):
        """Test that tree edges are blue in either direction."""
        graph = path_graph()
        graph.get_vertex("B").predecessor = graph.get_vertex("A")
        graph.get_vertex("B").distance = 1

        nodes, edges = _sections(render_gdf(graph))

        assert nodes[1] == "v1,'B',6,1"
        assert edges == ["v0,v1,blue", "v1,v2,gray"]

    def test_foreign_predecessor_stays_gray(self):
        """Test that an equal-named vertex from another graph is not a tree link."""
        graph = path_graph()
        other = path_graph()
        graph.get_vertex("B").predecessor = other.get_vertex("A")

        nodes, edges = _sections(render_gdf(graph))

        assert edges == ["v0,v1,gray", "v1,v2,gray"]

    def test_names_written_unescaped(self):
        """Test that names with quotes are written as-is between quotes."""
        graph = Graph()
        graph.add_vertex("O'Neil")

        nodes, edges = _sections(render_gdf(graph))

        assert nodes == ["v0,'O'Neil',6,0"]

    def test_empty_graph(self):
        """Test that an empty graph still gets both headers."""
        assert render_gdf(Graph()) == (
            "nodedef> name,label,style,distance INTEGER\n"
            "edgedef> node1,node2,color\n"
        )

    def test_self_loop_not_written(self):
        """Test that self-loops produce no edge line."""
        graph = Graph()
        graph.add_edge("A", "A")

        nodes, edges = _sections(render_gdf(graph))

        assert nodes == ["v0,'A',6,0"]
        assert edges == []

    def test_isolated_vertex_has_node_line(self):
        """Test that vertices without edges are still listed."""
        graph = path_graph()
        graph.add_vertex("D")

        nodes, edges = _sections(render_gdf(graph))

        assert nodes[-1] == "v3,'D',6,0"
        assert len(edges) == 2


class TestWriteGDF:
    """Tests for writing GDF files."""

    def test_write_file(self, tmp_path):
        """Test that the file holds the rendered text."""
        graph = path_graph()
        target = tmp_path / "path.gdf"

        graph.output_gdf(target)

        assert target.read_text(encoding="utf-8") == render_gdf(graph)

    def test_write_accepts_str_path(self, tmp_path):
        """Test that a plain string path works."""
        target = tmp_path / "path.gdf"

        write_gdf(path_graph(), str(target))

        assert target.exists()

    def test_overwrites_existing_file(self, tmp_path):
        """Test that an existing file is replaced."""
        target = tmp_path / "path.gdf"
        target.write_text("old contents\n" * 50, encoding="utf-8")

        path_graph().output_gdf(target)

        assert target.read_text(encoding="utf-8") == render_gdf(path_graph())

    def test_missing_directory_raises(self, tmp_path):
        """Test that an unwritable destination raises ExportError."""
        target = tmp_path / "no" / "such" / "dir" / "out.gdf"

        with pytest.raises(ExportError) as exc_info:
            path_graph().output_gdf(target)

        assert exc_info.value.path == str(target)
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_directory_destination_raises(self, tmp_path):
        """Test that a directory destination raises ExportError."""
        with pytest.raises(ExportError):
            write_gdf(path_graph(), tmp_path)


class TestRenderAdjacency:
    """Tests for adjacency-list text."""

    def test_path_graph(self):
        """Test the plain path graph rendering."""
        assert str(path_graph()) == "A: ->B\nB: ->A->C\nC: ->B\n"

    def test_weights_from_either_direction(self):
        """Test that edge weights are shown from both endpoints."""
        graph = Graph()
        graph.add_vertex("A", ["x"])
        graph.add_edge("A", "B", ["5"])

        assert render_adjacency(graph) == "A[x]: [5]->B\nB: [5]->A[x]\n"

    def test_isolated_vertex(self):
        """Test that a vertex without neighbors still has a line."""
        graph = Graph()
        graph.add_vertex("lonely")

        assert render_adjacency(graph) == "lonely: \n"
