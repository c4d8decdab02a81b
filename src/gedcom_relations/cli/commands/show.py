from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from gedcom_relations.cli.utils import load_graph
from gedcom_relations.display import (
    find_default_person_id,
    format_card_name,
    format_name,
    location_line,
    sex_label,
)
from gedcom_relations.relationships.lifespan import format_lifespan
from gedcom_relations.relationships.resolver import RelativeCard, relations_for

console = Console()


def _relatives_table(title: str, cards: List[RelativeCard]) -> Table:
    table = Table(title=title, title_justify="left")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Details")

    if not cards:
        table.add_row("", "—", "")
    for card in cards:
        table.add_row(escape(card.id), escape(format_card_name(card.name)), escape(card.meta))
    return table


def show_command(
    gedcom: Path = typer.Argument(..., help="GEDCOM file to read"),
    person_id: Optional[str] = typer.Argument(
        None,
        help="Pointer of the person to show, e.g. @I1@ (default: configured person)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show one person with their parents, spouses and children.
    """
    graph = load_graph(gedcom, verbose=verbose)

    if person_id is None:
        person_id = find_default_person_id(graph)
        if person_id is None:
            console.print("No relatives found in this file.")
            raise typer.Exit(code=1)

    relations = relations_for(graph, person_id)
    if relations is None:
        console.print(f"[red]No person with id {escape(person_id)}[/red]")
        raise typer.Exit(code=1)

    person = relations.person
    locations = location_line(person)

    # Names, dates and places are free text from the file, not markup.
    lines = [
        f"[bold]{escape(format_name(person))}[/bold]  ({sex_label(person).value})",
        escape(format_lifespan(person)) or "Dates unavailable",
        escape(locations) or "[dim]No locations recorded[/dim]",
    ]
    console.print(Panel("\n".join(lines), title=escape(person.id), expand=False))

    console.print(_relatives_table("Parents", relations.parents))
    console.print(_relatives_table("Spouses", relations.spouses))
    console.print(_relatives_table("Children", relations.children))
