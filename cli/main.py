"""
gdf-graph CLI

Command-line interface for loading edge lists, inspecting the graph
and exporting it to GDF for visualization tools.

Commands:
    gdfg export <edges>               Write the graph as a GDF file
    gdfg show <edges>                 Print the adjacency list
    gdfg centrality <edges>           Rank vertices by a centrality measure
    gdfg path <edges> <from> <to>     Print a shortest path

Usage:
    $ gdfg export network.txt -o network.gdf --source hub
    $ gdfg centrality network.txt --measure betweenness
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from gdfgraph import __version__
from gdfgraph.centrality import MEASURES, compute_centrality
from gdfgraph.errors import GraphError
from gdfgraph.graph import build_graph_from_edge_list
from gdfgraph.logging_config import setup_logging
from gdfgraph.models import LoadResult
from gdfgraph.traversal import breadth_first_search, shortest_path


app = typer.Typer(
    name="gdfg",
    help="gdf-graph: build undirected graphs from edge lists and export them to GDF",
    add_completion=False,
)
console = Console()


DEFAULT_SUFFIX = ".gdf"
DEFAULT_MEASURE = "degree"
DEFAULT_LIMIT = 10

EDGES_ARGUMENT = typer.Argument(
    ...,
    help="Path to a whitespace-separated edge list",
    exists=True,
    file_okay=True,
    dir_okay=False,
    resolve_path=True,
)


def _load(edges: Path) -> LoadResult:
    try:
        return build_graph_from_edge_list(edges)
    except (GraphError, FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def export(
    edges: Path = EDGES_ARGUMENT,
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Destination GDF file (default: the edge list with a .gdf suffix)",
    ),
    source: Optional[str] = typer.Option(
        None,
        "--source",
        "-s",
        help="Run a breadth-first search from this vertex before exporting",
    ),
    measure: Optional[str] = typer.Option(
        None,
        "--centrality",
        "-c",
        help=f"Compute a centrality measure ({', '.join(MEASURES)})",
    ),
) -> None:
    """
    Export an edge list as a GDF file.

    With --source, vertex distances come from a breadth-first search and
    the search tree is drawn in blue.
    """
    if output is None:
        output = edges.with_suffix(DEFAULT_SUFFIX)

    result = _load(edges)
    graph = result.graph

    try:
        if source is not None:
            breadth_first_search(graph, source)
        if measure is not None:
            compute_centrality(graph, measure)
        graph.output_gdf(output)
    except GraphError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    _print_export_summary(result, output, source, measure)


@app.command()
def show(edges: Path = EDGES_ARGUMENT) -> None:
    """
    Print the adjacency list of an edge list.
    """
    result = _load(edges)
    console.print(str(result.graph), end="", markup=False, highlight=False)


@app.command()
def centrality(
    edges: Path = EDGES_ARGUMENT,
    measure: str = typer.Option(
        DEFAULT_MEASURE,
        "--measure",
        "-m",
        help=f"Centrality measure ({', '.join(MEASURES)})",
    ),
    limit: int = typer.Option(
        DEFAULT_LIMIT,
        "--limit",
        "-n",
        help="Number of vertices to show",
    ),
) -> None:
    """
    Rank vertices by a centrality measure, highest first.
    """
    result = _load(edges)

    try:
        scores = compute_centrality(result.graph, measure)
    except GraphError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    ranked = sorted(scores.items(), key=lambda item: (-item[1], item[0]))

    table = Table(title=f"{measure.capitalize()} Centrality", box=box.ROUNDED)
    table.add_column("Vertex", style="cyan")
    table.add_column("Score", justify="right")

    for name, score in ranked[:limit]:
        table.add_row(name, f"{score:.4f}")

    console.print(table)

    if len(ranked) > limit:
        console.print(f"[dim]... and {len(ranked) - limit} more[/dim]")


@app.command()
def path(
    edges: Path = EDGES_ARGUMENT,
    source: str = typer.Argument(..., help="Start vertex"),
    target: str = typer.Argument(..., help="End vertex"),
) -> None:
    """
    Print a shortest path between two vertices.
    """
    result = _load(edges)

    try:
        names = shortest_path(result.graph, source, target)
    except GraphError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if not names:
        console.print(f"[yellow]No path from {source} to {target}.[/yellow]")
        raise typer.Exit(1)

    console.print(" -> ".join(names), markup=False, highlight=False)
    console.print(f"[dim]{len(names) - 1} hop(s)[/dim]")


# Helper functions for output formatting

def _print_export_summary(
    result: LoadResult,
    output: Path,
    source: Optional[str],
    measure: Optional[str],
) -> None:
    """Print a summary panel after exporting."""
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Label", style="dim")
    table.add_column("Value", style="bold")

    table.add_row("Vertices", str(result.vertex_count))
    table.add_row("Edges", str(result.edge_count))
    table.add_row("Duplicate edges", str(result.duplicate_edges))
    if source is not None:
        table.add_row("BFS source", source)
    if measure is not None:
        table.add_row("Centrality", measure)
    table.add_row("Load time", f"{result.load_time_seconds:.2f}s")
    table.add_row("Output", str(output))

    panel = Panel(table, title="[bold green]✓ Export Complete[/bold green]", border_style="green")
    console.print(panel)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable debug logging",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also write log records to this file",
        dir_okay=False,
        resolve_path=True,
    ),
) -> None:
    """
    gdf-graph: undirected graphs from edge lists, exported to GDF.
    """
    setup_logging("DEBUG" if verbose else "WARNING", log_file=log_file)
    if version:
        console.print(f"[bold]gdf-graph[/bold] version {__version__}")
        raise typer.Exit()


if __name__ == "__main__":
    app()
