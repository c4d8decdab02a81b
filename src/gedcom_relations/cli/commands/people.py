from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gedcom_relations.cli.utils import load_graph
from gedcom_relations.display import filter_ids, format_name, ordered_ids
from gedcom_relations.relationships.lifespan import format_lifespan

console = Console()


def people_command(
    gedcom: Path = typer.Argument(..., help="GEDCOM file to read"),
    search: Optional[str] = typer.Option(
        None,
        "--search",
        "-s",
        help="Only list people whose name contains this text",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    List everyone in the file, sorted by name.
    """
    graph = load_graph(gedcom, verbose=verbose)

    ids = ordered_ids(graph)
    if search:
        ids = filter_ids(graph, ids, search)

    if not ids:
        console.print("No relatives match that search.")
        return

    table = Table(title=f"Relatives ({len(ids)})")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Lifespan")

    for pid in ids:
        person = graph.people[pid]
        table.add_row(escape(pid), escape(format_name(person)), format_lifespan(person))

    console.print(table)
