from __future__ import annotations

from typing import Optional

from gedtree.loader.cursor import LineCursor
from gedtree.loader.scanner import Token, normalize_xref
from gedtree.logging import get_logger
from gedtree.registry.entities import (
    GENDER_FEMALE,
    GENDER_MALE,
    GENDER_UNKNOWN,
    Person,
)
from gedtree.registry.utils import clean_name, event_date

log = get_logger(__name__)

PERSON_TAG = "INDI"


class PersonBuilder:
    """
    Assembles one INDI record from the level-1 tags that follow its header.

    Handled tags: NAME, SEX, BIRT, DEAT, FAMS. Everything else is ignored.
    Never raises: malformed values simply leave fields unset.
    """

    def __init__(self, header: Token):
        person_id = normalize_xref(header.xref or header.value) or ""
        self.person = Person(id=person_id)
        log.debug("created person %s (line %d)", person_id, header.lineno)

    @property
    def id(self) -> str:
        return self.person.id

    def handle(self, token: Token, cursor: LineCursor) -> None:
        tag = token.tag
        person = self.person

        if tag == "NAME":
            person.name = clean_name(token.value)

        elif tag == "SEX":
            gender = token.value.strip().upper()
            person.gender = gender if gender in (GENDER_MALE, GENDER_FEMALE) else GENDER_UNKNOWN

        elif tag in ("BIRT", "DEAT"):
            date = event_date(token, cursor)
            if date is None:
                return
            if tag == "BIRT":
                person.birth = date
            else:
                person.death = date

        elif tag == "FAMS":
            union_id: Optional[str] = normalize_xref(token.value)
            if union_id:
                person.add_union(union_id)

    def build(self) -> Person:
        return self.person
