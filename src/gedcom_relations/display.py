"""
Presentation helpers for people in a FamilyGraph.

The graph keeps names exactly as written (``John /Doe/``). These helpers
produce the cleaned-up strings the CLI shows, plus ordering and search.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from gedcom_relations.config import get_config
from gedcom_relations.registry.entities import FamilyGraph, Person, Sex

NAME_MARKERS_RE = re.compile(r'[/"]')
LOCATION_SEPARATOR = " • "


def unnamed_label() -> str:
    return get_config().display.get("unnamed_label") or "Unnamed relative"


def format_name(person: Optional[Person]) -> str:
    """Strip surname slashes and quotes; fall back to the unnamed label."""
    raw = person.name if person is not None else None
    cleaned = NAME_MARKERS_RE.sub("", raw or "").strip()
    return cleaned or unnamed_label()


def format_card_name(name: str) -> str:
    """Same cleanup as ``format_name`` for a name already taken off a Person."""
    return NAME_MARKERS_RE.sub("", name).strip() or unnamed_label()


def sex_label(person: Person) -> Sex:
    return Sex.from_code(person.sex)


def location_line(person: Person) -> str:
    """Birth place followed by residence places, empty ones dropped."""
    places = [person.birth.place if person.birth else None]
    places.extend(res.place for res in person.residences)
    return LOCATION_SEPARATOR.join(p for p in places if p)


def ordered_ids(graph: FamilyGraph) -> List[str]:
    """Person ids sorted by display name (case-insensitive), then by id."""
    return sorted(
        graph.people,
        key=lambda pid: (format_name(graph.people[pid]).casefold(), pid),
    )


def filter_ids(graph: FamilyGraph, ids: Iterable[str], query: str) -> List[str]:
    """Keep ids whose display name contains ``query``, ignoring case."""
    needle = query.strip().casefold()
    if not needle:
        return list(ids)
    return [pid for pid in ids if needle in format_name(graph.people[pid]).casefold()]


def find_default_person_id(graph: FamilyGraph, pattern: Optional[str] = None) -> Optional[str]:
    """
    Pick the person to show first.

    The first person (in display order) whose name matches ``pattern``,
    otherwise the first person, otherwise None for an empty graph.
    ``pattern`` defaults to ``display.default_person_pattern`` from config.
    """
    ids = ordered_ids(graph)
    if pattern is None:
        pattern = get_config().display.get("default_person_pattern")

    if pattern:
        rx = re.compile(pattern, re.IGNORECASE)
        for pid in ids:
            if rx.search(format_name(graph.people[pid])):
                return pid

    return ids[0] if ids else None
