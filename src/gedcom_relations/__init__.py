"""
gedcom-relations: parse GEDCOM individuals and families into a graph and
answer parent / spouse / child queries over it.
"""

from gedcom_relations.registry import Fact, Family, FamilyGraph, Person, Sex, build_graph, parse_gedcom
from gedcom_relations.relationships import (
    RelativeCard,
    format_lifespan,
    get_children,
    get_parents,
    get_spouses,
    relations_for,
)

__version__ = "0.1.0"

__all__ = [
    "Fact",
    "Family",
    "FamilyGraph",
    "Person",
    "RelativeCard",
    "Sex",
    "build_graph",
    "format_lifespan",
    "get_children",
    "get_parents",
    "get_spouses",
    "parse_gedcom",
    "relations_for",
]
