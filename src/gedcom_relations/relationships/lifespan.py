from __future__ import annotations

import re
from typing import Optional

from gedcom_relations.registry.entities import Fact, Person

# Plausible years 1000-2100, first hit anywhere in the date text.
YEAR_RE = re.compile(r"(1[0-9]{3}|20[0-9]{2}|2100)")

LIFESPAN_DASH = "–"


def extract_year(text: Optional[str]) -> str:
    """Return the first plausible four-digit year in ``text``, or ``""``."""
    if not text:
        return ""
    match = YEAR_RE.search(text)
    return match.group(0) if match else ""


def format_years(birth_year: str, death_year: str) -> str:
    """
    Render a lifespan from two already-extracted years.

    >>> format_years("1850", "1920")
    '1850 – 1920'
    >>> format_years("1850", "")
    '1850 – '
    >>> format_years("", "")
    ''
    """
    if not birth_year and not death_year:
        return ""
    return f"{birth_year or '?'} {LIFESPAN_DASH} {death_year or ''}"


def _fact_date(fact: Optional[Fact]) -> Optional[str]:
    return fact.date if fact is not None else None


def format_lifespan(person: Optional[Person]) -> str:
    if person is None:
        return ""
    return format_years(
        extract_year(_fact_date(person.birth)),
        extract_year(_fact_date(person.death)),
    )
