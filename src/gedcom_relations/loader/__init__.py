# src/gedcom_relations/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

Intended usage from other parts of the project and tests:

    from gedcom_relations.loader import (
        Token,
        GedcomSyntaxError,
        tokenize_line,
        tokenize_text,
        tokenize_file,
        read_gedcom_text,
    )
"""

from __future__ import annotations

from .source import read_gedcom_text, resolve_input_path
from .tokenizer import GedcomSyntaxError, Token, tokenize_file, tokenize_line, tokenize_text

__all__ = [
    "Token",
    "GedcomSyntaxError",
    "tokenize_line",
    "tokenize_text",
    "tokenize_file",
    "read_gedcom_text",
    "resolve_input_path",
]
