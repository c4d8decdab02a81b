from __future__ import annotations

import time
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from gedcom_relations.core.exceptions import SourceRetrievalError
from gedcom_relations.loader.source import read_gedcom_text
from gedcom_relations.registry.build_graph import build_graph
from gedcom_relations.registry.entities import FamilyGraph

console = Console()
err_console = Console(stderr=True)


def load_graph(path: Path, *, verbose: bool = False) -> FamilyGraph:
    """
    Read and parse a GEDCOM file.

    A file that cannot be read is the one failure reported to the user:
    the message goes to stderr and the command exits with status 1.
    """
    t0 = time.perf_counter()

    try:
        text = read_gedcom_text(path)
    except SourceRetrievalError as exc:
        err_console.print(f"[red]Could not load family details:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    graph = build_graph(text)
    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(
            f"Loaded {len(graph.people)} relatives and "
            f"{len(graph.families)} families in {elapsed:.2f}s"
        )

    return graph
