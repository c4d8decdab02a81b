"""
Relationship queries over a FamilyGraph.

Parents, spouses and children are derived on demand from the stored
pointers. Nothing is cached and the graph is never modified, so the
functions are safe to call repeatedly and from several threads.

Pointers that do not resolve are dropped from the result (logged at DEBUG),
never replaced by placeholders.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

from gedcom_relations.logging import get_logger
from gedcom_relations.registry.entities import Family, FamilyGraph, Person
from gedcom_relations.relationships.lifespan import format_lifespan

log = get_logger(__name__)

PersonRef = Union[Person, str, None]


@dataclass(frozen=True)
class RelativeCard:
    """A related person plus the one-line fact shown next to them."""
    id: str
    name: str
    meta: str


@dataclass(frozen=True)
class PersonRelations:
    person: Person
    parents: List[RelativeCard] = field(default_factory=list)
    spouses: List[RelativeCard] = field(default_factory=list)
    children: List[RelativeCard] = field(default_factory=list)


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------

def _as_person(graph: FamilyGraph, person: PersonRef) -> Optional[Person]:
    if isinstance(person, Person):
        return person
    return graph.get_person(person)


def _resolve_person(graph: FamilyGraph, pointer: Optional[str], *, via: str) -> Optional[Person]:
    found = graph.get_person(pointer)
    if found is None and pointer:
        log.debug("Unresolved person %s referenced from %s", pointer, via)
    return found


def _resolve_family(graph: FamilyGraph, pointer: Optional[str], *, via: str) -> Optional[Family]:
    found = graph.get_family(pointer)
    if found is None and pointer:
        log.debug("Unresolved family %s referenced from %s", pointer, via)
    return found


def to_card(person: Person, meta: Optional[str] = None) -> RelativeCard:
    """Build a card for ``person``; ``meta`` defaults to their lifespan."""
    return RelativeCard(
        id=person.id,
        name=person.name or "",
        meta=format_lifespan(person) if meta is None else meta,
    )


def _other_spouse(family: Family, person_id: str) -> Optional[str]:
    if family.husband == person_id:
        other = family.wife
    elif family.wife == person_id:
        other = family.husband
    else:
        return None
    # A family naming the same person in both roles has no spouse to show.
    return None if other == person_id else other


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------

def get_parents(graph: FamilyGraph, person: PersonRef) -> List[RelativeCard]:
    """Husband then wife of the person's child-family, where they resolve."""
    subject = _as_person(graph, person)
    if subject is None or not subject.family_child:
        return []

    family = _resolve_family(graph, subject.family_child, via=subject.id)
    if family is None:
        return []

    parents: List[RelativeCard] = []
    for pointer in (family.husband, family.wife):
        if pointer == subject.id:
            continue
        parent = _resolve_person(graph, pointer, via=family.id)
        if parent is not None:
            parents.append(to_card(parent))
    return parents


def get_spouses(graph: FamilyGraph, person: PersonRef) -> List[RelativeCard]:
    """
    The other partner of each spouse-family, in FAMS order.

    The fact shown is ``"Married <date>"`` when the marriage has a date,
    otherwise the spouse's lifespan.
    """
    subject = _as_person(graph, person)
    if subject is None:
        return []

    spouses: List[RelativeCard] = []
    for fam_id in subject.families_spouse:
        family = _resolve_family(graph, fam_id, via=subject.id)
        if family is None:
            continue

        spouse = _resolve_person(graph, _other_spouse(family, subject.id), via=family.id)
        if spouse is None:
            continue

        if family.marriage is not None and family.marriage.date:
            meta = f"Married {family.marriage.date}"
        else:
            meta = format_lifespan(spouse)
        spouses.append(to_card(spouse, meta))

    return spouses


def get_children(graph: FamilyGraph, person: PersonRef) -> List[RelativeCard]:
    """
    Children of every spouse-family, in FAMS order then CHIL order.

    A child listed in two of the person's families appears twice.
    """
    subject = _as_person(graph, person)
    if subject is None:
        return []

    children: List[RelativeCard] = []
    for fam_id in subject.families_spouse:
        family = _resolve_family(graph, fam_id, via=subject.id)
        if family is None:
            continue
        for child_id in family.children:
            child = _resolve_person(graph, child_id, via=family.id)
            if child is not None:
                children.append(to_card(child))

    return children


def relations_for(graph: FamilyGraph, person_id: str) -> Optional[PersonRelations]:
    """Run all three queries for one person; None if the id is unknown."""
    person = graph.get_person(person_id)
    if person is None:
        return None

    return PersonRelations(
        person=person,
        parents=get_parents(graph, person),
        spouses=get_spouses(graph, person),
        children=get_children(graph, person),
    )
