from __future__ import annotations

from .lifespan import extract_year, format_lifespan, format_years
from .resolver import (
    PersonRelations,
    RelativeCard,
    get_children,
    get_parents,
    get_spouses,
    relations_for,
    to_card,
)

__all__ = [
    "PersonRelations",
    "RelativeCard",
    "extract_year",
    "format_lifespan",
    "format_years",
    "get_children",
    "get_parents",
    "get_spouses",
    "relations_for",
    "to_card",
]
