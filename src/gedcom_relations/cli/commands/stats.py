from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from gedcom_relations.cli.utils import load_graph

console = Console()


def stats_command(
    gedcom: Path = typer.Argument(..., help="GEDCOM file to read"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for a GEDCOM file.
    """
    graph = load_graph(gedcom, verbose=verbose)

    table = Table(title="GEDCOM Statistics")
    table.add_column("Entity", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("People", str(len(graph.people)))
    table.add_row("Families", str(len(graph.families)))
    table.add_row("Dangling references", str(len(graph.dangling_references())))

    console.print(table)
