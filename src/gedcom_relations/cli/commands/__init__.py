"""
CLI command modules for gedcom_relations.

Each command module defines a single Typer-compatible command function.
"""

from gedcom_relations.cli.commands.export import export_command
from gedcom_relations.cli.commands.people import people_command
from gedcom_relations.cli.commands.show import show_command
from gedcom_relations.cli.commands.stats import stats_command

__all__ = [
    "export_command",
    "people_command",
    "show_command",
    "stats_command",
]
