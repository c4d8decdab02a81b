# src/gedcom_relations/loader/tokenizer.py

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from gedcom_relations.loader.source import read_gedcom_text
from gedcom_relations.logging import get_logger

log = get_logger(__name__)

# <level> [<pointer>] <tag> [<value>]
LINE_RE = re.compile(r"^(\d+)\s+(?:(@[A-Za-z0-9_]+@)\s+)?(\S+)(?:\s+(.*))?$")
NEWLINE_RE = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class Token:
    """
    A single GEDCOM line token.

    Attributes:
        lineno: 1-based line number in the original text.
        level: Parsed GEDCOM level (0, 1, 2, ...).
        pointer: Optional cross-reference identifier, e.g. "@I1@" or None.
        tag: GEDCOM tag, e.g. "INDI", "FAM", "NAME", "DATE".
        value: The line value, trimmed; empty string when absent.
        raw: The original line content without line terminators.
    """
    lineno: int
    level: int
    pointer: Optional[str]
    tag: str
    value: str
    raw: str


class GedcomSyntaxError(ValueError):
    """Raised when a GEDCOM line does not match the line grammar."""


def tokenize_line(line: str, lineno: int = 0) -> Token:
    """
    Parse a single GEDCOM line into a Token.

    The required order is:
        <level> [<pointer>] <tag> [<value>]

    A pointer only counts as one when it has the ``@token@`` shape
    (letters, digits and underscores). Anything else in that position is
    read as the tag, so ``0 @bad-id@ INDI`` yields tag ``@bad-id@``.

    Examples:
        "0 HEAD"
        "0 @I1@ INDI"
        "1 NAME John /Doe/"
        "2 DATE 12 MAR 1850"
    """
    raw = line.rstrip("\r\n")

    if not raw.strip():
        raise GedcomSyntaxError(f"Empty or whitespace-only line at {lineno}")

    # Handle optional UTF-8 BOM on the very first line.
    if lineno == 1 and raw.startswith("\ufeff"):
        raw = raw.lstrip("\ufeff")

    match = LINE_RE.match(raw)
    if match is None:
        raise GedcomSyntaxError(f"Line {lineno}: does not match GEDCOM line grammar -> {raw!r}")

    level_str, pointer, tag, value = match.groups()

    return Token(
        lineno=lineno,
        level=int(level_str),
        pointer=pointer,
        tag=tag,
        value=(value or "").strip(),
        raw=raw,
    )


def tokenize_text(text: str, *, strict: bool = False) -> Iterator[Token]:
    """
    Yield Token objects for every meaningful line of ``text``.

    Lines may be terminated by CR, LF or CRLF. Whitespace-only lines are
    skipped. Lines that fail the grammar are skipped too (logged at DEBUG)
    unless ``strict`` is set, in which case GedcomSyntaxError propagates.
    """
    for lineno, raw_line in enumerate(NEWLINE_RE.split(text), start=1):
        if not raw_line.strip():
            continue

        try:
            yield tokenize_line(raw_line, lineno=lineno)
        except GedcomSyntaxError as exc:
            if strict:
                raise
            log.debug("Skipping malformed line: %s", exc)


def tokenize_file(path: Union[str, Path], *, strict: bool = False) -> Iterator[Token]:
    """
    Yield Token objects for every meaningful line in the given file.

    Raises:
        SourceRetrievalError: if the file cannot be read.
        GedcomSyntaxError: only when ``strict`` is set.
    """
    yield from tokenize_text(read_gedcom_text(path), strict=strict)
