from __future__ import annotations

import typer

from gedcom_relations.cli.commands.export import export_command
from gedcom_relations.cli.commands.people import people_command
from gedcom_relations.cli.commands.show import show_command
from gedcom_relations.cli.commands.stats import stats_command

app = typer.Typer(
    name="gedcom-relations",
    help="Browse parents, spouses and children in a GEDCOM file",
    add_completion=False,
)

app.command("people")(people_command)
app.command("show")(show_command)
app.command("stats")(stats_command)
app.command("export")(export_command)


def main():
    app()


if __name__ == "__main__":
    main()
