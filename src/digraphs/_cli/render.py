"""Rich rendering utilities for the demo command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.panel import Panel
from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from digraphs._demo import DemoResult


def _format_order(order: tuple[int, ...]) -> str:
    return " ".join(str(vertex) for vertex in order)


def render_stage_table(result: DemoResult, console: Console) -> None:
    """Render one row per representation with its traversal orders.

    Args:
        result: DemoResult to render.
        console: Rich Console to output to.

    """
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Representation", style="bold")
    table.add_column("Vertices", justify="right")
    table.add_column("Edges", justify="right")
    table.add_column("BFS")
    table.add_column("DFS")

    for stage in result.stages:
        table.add_row(
            stage.representation.graph_class.__name__,
            str(stage.vertices_count),
            str(stage.edge_count),
            _format_order(stage.bfs_order),
            _format_order(stage.dfs_order),
        )

    console.print(Panel(table, title="[bold]Traversals[/bold]", border_style="cyan"))


def render_topological_order(result: DemoResult, console: Console) -> None:
    """Render the topological order of the demo graph."""
    console.print(f"[cyan]Topological order:[/cyan] {_format_order(result.topological_order)}")
