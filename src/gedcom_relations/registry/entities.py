from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


# -----------------------------
# Base records (small atoms)
# -----------------------------

class Sex(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    UNKNOWN = "Unknown"

    @classmethod
    def from_code(cls, code: Optional[str]) -> "Sex":
        """Map a raw GEDCOM SEX value onto the enumeration (M/F, else Unknown)."""
        if code == "M":
            return cls.MALE
        if code == "F":
            return cls.FEMALE
        return cls.UNKNOWN


@dataclass(slots=True)
class Fact:
    """
    A single recorded event: an optional date and an optional place.

    Both values are kept exactly as captured from the DATE/PLAC lines.
    """
    date: Optional[str] = None
    place: Optional[str] = None


# -----------------------------
# Entities
# -----------------------------

@dataclass(slots=True)
class Person:
    id: str

    # Raw captured values; presentation cleans them up later.
    name: Optional[str] = None
    sex: Optional[str] = None

    birth: Optional[Fact] = None
    death: Optional[Fact] = None
    residences: List[Fact] = field(default_factory=list)

    # Pointers as written in the file, unresolved
    family_child: Optional[str] = None                             # FAMC, last one wins
    families_spouse: List[str] = field(default_factory=list)       # FAMS


@dataclass(slots=True)
class Family:
    id: str

    # Positional roles, not checked against Person.sex
    husband: Optional[str] = None
    wife: Optional[str] = None
    children: List[str] = field(default_factory=list)

    marriage: Optional[Fact] = None


# -----------------------------
# Graph
# -----------------------------

@dataclass(slots=True)
class FamilyGraph:
    """
    In-memory person/family store indexed by GEDCOM pointer.

    The two mappings are independent namespaces: the same pointer may name
    a Person and a Family without collision.
    """
    people: Dict[str, Person] = field(default_factory=dict)
    families: Dict[str, Family] = field(default_factory=dict)

    def person_for(self, pointer: str) -> Person:
        """Fetch the Person for ``pointer``, creating it on first reference."""
        person = self.people.get(pointer)
        if person is None:
            person = Person(id=pointer)
            self.people[pointer] = person
        return person

    def family_for(self, pointer: str) -> Family:
        """Fetch the Family for ``pointer``, creating it on first reference."""
        family = self.families.get(pointer)
        if family is None:
            family = Family(id=pointer)
            self.families[pointer] = family
        return family

    def get_person(self, pointer: Optional[str]) -> Optional[Person]:
        if not pointer:
            return None
        return self.people.get(pointer)

    def get_family(self, pointer: Optional[str]) -> Optional[Family]:
        if not pointer:
            return None
        return self.families.get(pointer)

    def dangling_references(self) -> List[str]:
        """
        Return every stored pointer that does not resolve, in file order.

        Person pointers are checked against families and family pointers
        against people. Empty pointers (a bare `1 FAMS` or `1 CHIL`) are
        not references and are left out; duplicates are kept.
        """
        missing: List[str] = []

        for person in self.people.values():
            refs = [*person.families_spouse, person.family_child]
            missing.extend(ref for ref in refs if ref and ref not in self.families)

        for family in self.families.values():
            refs = [family.husband, family.wife, *family.children]
            missing.extend(ref for ref in refs if ref and ref not in self.people)

        return missing
