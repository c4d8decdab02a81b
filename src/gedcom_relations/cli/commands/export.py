from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcom_relations.cli.utils import load_graph
from gedcom_relations.exporter import export_graph_json, serialize_graph_to_json_string

console = Console(stderr=True)


def export_command(
    gedcom: Path = typer.Argument(..., help="GEDCOM file to read"),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export people and families to JSON (stdout by default).
    """
    graph = load_graph(gedcom, verbose=verbose)
    indent = 2 if pretty else None

    if verbose:
        console.log("Exporting JSON")

    if out:
        export_graph_json(graph, out, indent=indent)
    else:
        print(serialize_graph_to_json_string(graph, indent=indent))

    if verbose:
        console.log("Export complete")
