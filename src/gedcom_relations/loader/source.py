"""
Source reader.

Obtains the raw GEDCOM text the record builder works on. This is the only
place where an upstream failure (missing or unreadable input) is raised.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from gedcom_relations.core.exceptions import SourceRetrievalError
from gedcom_relations.logging import get_logger

log = get_logger(__name__)


def resolve_input_path(path: Union[str, Path]) -> Path:
    """Convert a user-provided path into an absolute, validated file path."""
    abs_path = Path(path).expanduser().resolve()
    log.debug("Resolving input file: %s", abs_path)

    if not abs_path.exists():
        log.error("Input file does not exist: %s", abs_path)
        raise SourceRetrievalError(f"GEDCOM file not found: {abs_path}")

    if not abs_path.is_file():
        log.error("Input path is not a file: %s", abs_path)
        raise SourceRetrievalError(f"GEDCOM path is not a file: {abs_path}")

    return abs_path


def read_gedcom_text(path: Union[str, Path]) -> str:
    """
    Read the whole GEDCOM file as text.

    Undecodable bytes are replaced rather than rejected. A leading BOM is
    left in place for the tokenizer to strip.
    """
    file_path = resolve_input_path(path)

    try:
        text = file_path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        log.error("Could not read GEDCOM file %s: %s", file_path, exc)
        raise SourceRetrievalError(f"Could not read GEDCOM file: {file_path}") from exc

    log.info("Loaded GEDCOM text: %s (%d chars)", file_path, len(text))
    return text
