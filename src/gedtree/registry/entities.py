from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from gedtree.core.diagnostics import Diagnostic


PRECISION_UNKNOWN = "unknown"
PRECISION_YEAR = "year"
PRECISION_MONTH = "month"
PRECISION_DAY = "day"

GENDER_MALE = "M"
GENDER_FEMALE = "F"
GENDER_UNKNOWN = "U"


# -----------------------------
# Base records (small atoms)
# -----------------------------

@dataclass(slots=True, frozen=True)
class StructuredDate:
    """
    A parsed GEDCOM date label.

    ``approx_iso`` is filled whenever the year is known (missing month/day
    default to 01); ``exact_iso`` only at day precision.
    """
    original: Optional[str] = None
    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None
    precision: str = PRECISION_UNKNOWN
    exact_iso: Optional[str] = None
    approx_iso: Optional[str] = None


# -----------------------------
# Entities
# -----------------------------

@dataclass(slots=True)
class Person:
    id: str
    name: str = ""
    gender: str = GENDER_UNKNOWN
    birth: Optional[StructuredDate] = None
    death: Optional[StructuredDate] = None

    # Union membership, as a parent or a child (deduplicated)
    unions: List[str] = field(default_factory=list)

    def add_union(self, union_id: str) -> bool:
        if union_id in self.unions:
            return False
        self.unions.append(union_id)
        return True


@dataclass(slots=True)
class Union:
    id: str
    parents: List[str] = field(default_factory=list)
    children: List[str] = field(default_factory=list)
    marriage: Optional[StructuredDate] = None

    def add_parent(self, person_id: str) -> bool:
        if person_id in self.parents:
            return False
        self.parents.append(person_id)
        return True

    def add_child(self, person_id: str) -> bool:
        if person_id in self.children:
            return False
        self.children.append(person_id)
        return True


# -----------------------------
# Parse output
# -----------------------------

@dataclass(slots=True)
class ParseResult:
    people: List[Person] = field(default_factory=list)
    unions: List[Union] = field(default_factory=list)
    diagnostics: List["Diagnostic"] = field(default_factory=list)

    def get_person(self, person_id: str) -> Optional[Person]:
        for person in self.people:
            if person.id == person_id:
                return person
        return None

    def get_union(self, union_id: str) -> Optional[Union]:
        for union in self.unions:
            if union.id == union_id:
                return union
        return None
