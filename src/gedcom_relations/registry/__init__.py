from __future__ import annotations

from .entities import Fact, Family, FamilyGraph, Person, Sex
from .build_graph import (
    DetailTag,
    FamilyTag,
    ParseState,
    PersonTag,
    RecordTag,
    build_graph,
    parse_gedcom,
)

__all__ = [
    "DetailTag",
    "Fact",
    "Family",
    "FamilyGraph",
    "FamilyTag",
    "ParseState",
    "Person",
    "PersonTag",
    "RecordTag",
    "Sex",
    "build_graph",
    "parse_gedcom",
]
