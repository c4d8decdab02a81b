"""
Record builder: one forward pass over GEDCOM tokens into a FamilyGraph.

Only the subset of tags needed for names, sex, birth/death/residence facts,
family roles, children and marriage is modelled. Everything else is skipped
without error, so a partial graph is always produced.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple, Type, TypeVar, Union

from gedcom_relations.loader.tokenizer import Token, tokenize_text
from gedcom_relations.logging import get_logger
from gedcom_relations.registry.entities import Fact, Family, FamilyGraph, Person

log = get_logger(__name__)

RECORD_LEVEL = 0
ATTRIBUTE_LEVEL = 1
DETAIL_LEVEL = 2


# ----------------------------------------------------------------------
# Tags
# ----------------------------------------------------------------------

class RecordTag(str, Enum):
    INDI = "INDI"
    FAM = "FAM"


class PersonTag(str, Enum):
    NAME = "NAME"
    SEX = "SEX"
    BIRT = "BIRT"
    DEAT = "DEAT"
    RESI = "RESI"
    FAMS = "FAMS"
    FAMC = "FAMC"


class FamilyTag(str, Enum):
    HUSB = "HUSB"
    WIFE = "WIFE"
    CHIL = "CHIL"
    MARR = "MARR"


class DetailTag(str, Enum):
    DATE = "DATE"
    PLAC = "PLAC"


E = TypeVar("E", bound=Enum)


def _lookup(tag_type: Type[E], tag: str) -> Optional[E]:
    """Return the enum member for ``tag``, or None for tags we do not model."""
    try:
        return tag_type(tag)
    except ValueError:
        return None


# ----------------------------------------------------------------------
# Parse state
# ----------------------------------------------------------------------

@dataclass
class ParseState:
    """
    Context carried from one line to the next during a single parse.

    kind:   the record type currently open (None outside INDI/FAM records)
    record: the Person or Family receiving level-1 lines
    detail: the Fact receiving level-2 DATE/PLAC lines, if any
    """

    kind: Optional[RecordTag] = None
    record: Union[Person, Family, None] = None
    detail: Optional[Fact] = None

    def close(self) -> None:
        self.kind = None
        self.record = None
        self.detail = None


# ----------------------------------------------------------------------
# Line handlers
# ----------------------------------------------------------------------

def _open_record(graph: FamilyGraph, state: ParseState, tok: Token) -> None:
    state.close()

    if not tok.pointer:
        return

    kind = _lookup(RecordTag, tok.tag)
    if kind is RecordTag.INDI:
        state.kind, state.record = kind, graph.person_for(tok.pointer)
    elif kind is RecordTag.FAM:
        state.kind, state.record = kind, graph.family_for(tok.pointer)


def _apply_person_attribute(person: Person, state: ParseState, tok: Token) -> None:
    tag = _lookup(PersonTag, tok.tag)

    if tag is PersonTag.NAME:
        person.name = tok.value
    elif tag is PersonTag.SEX:
        person.sex = tok.value
    elif tag is PersonTag.BIRT:
        if person.birth is None:
            person.birth = Fact()
        state.detail = person.birth
    elif tag is PersonTag.DEAT:
        if person.death is None:
            person.death = Fact()
        state.detail = person.death
    elif tag is PersonTag.RESI:
        residence = Fact()
        person.residences.append(residence)
        state.detail = residence
    elif tag is PersonTag.FAMS:
        person.families_spouse.append(tok.value)
    elif tag is PersonTag.FAMC:
        # Only one child-family is kept; a later FAMC replaces an earlier one.
        person.family_child = tok.value
    else:
        pass


def _apply_family_attribute(family: Family, state: ParseState, tok: Token) -> None:
    tag = _lookup(FamilyTag, tok.tag)

    if tag is FamilyTag.HUSB:
        family.husband = tok.value
    elif tag is FamilyTag.WIFE:
        family.wife = tok.value
    elif tag is FamilyTag.CHIL:
        family.children.append(tok.value)
    elif tag is FamilyTag.MARR:
        if family.marriage is None:
            family.marriage = Fact()
        state.detail = family.marriage
    else:
        pass


def _apply_detail(state: ParseState, tok: Token) -> None:
    if state.detail is None:
        return

    tag = _lookup(DetailTag, tok.tag)
    if tag is DetailTag.DATE:
        state.detail.date = tok.value
    elif tag is DetailTag.PLAC:
        state.detail.place = tok.value


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------

def build_graph(source: Union[str, Iterable[Token]]) -> FamilyGraph:
    """
    Build a FamilyGraph from GEDCOM text or an already tokenized stream.

    Records are created the first time their level-0 line is seen and only
    mutated afterwards. Cross references are stored as raw pointer strings
    and are not checked here.
    """
    tokens = tokenize_text(source) if isinstance(source, str) else source

    graph = FamilyGraph()
    state = ParseState()
    ignored = 0

    for tok in tokens:
        if tok.level == RECORD_LEVEL:
            _open_record(graph, state, tok)
            continue

        if state.record is None:
            ignored += 1
            continue

        if tok.level == ATTRIBUTE_LEVEL:
            state.detail = None
            if state.kind is RecordTag.INDI:
                _apply_person_attribute(state.record, state, tok)
            else:
                _apply_family_attribute(state.record, state, tok)
        elif tok.level == DETAIL_LEVEL:
            _apply_detail(state, tok)

    log.info(
        "Built family graph (INDI=%d, FAM=%d)",
        len(graph.people),
        len(graph.families),
    )
    log.debug("Lines outside INDI/FAM records: %d", ignored)
    return graph


def parse_gedcom(text: str) -> Tuple[Dict[str, Person], Dict[str, Family]]:
    """Parse GEDCOM text into ``(people, families)`` keyed by pointer."""
    graph = build_graph(text)
    return graph.people, graph.families
