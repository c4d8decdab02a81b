"""
CLI package for gedcom_relations.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from gedcom_relations.cli.app import app, main

__all__ = [
    "app",
    "main",
]
