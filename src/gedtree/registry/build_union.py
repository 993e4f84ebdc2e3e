from __future__ import annotations

from gedtree.loader.cursor import LineCursor
from gedtree.loader.scanner import Token, normalize_xref
from gedtree.logging import get_logger
from gedtree.registry.entities import Union
from gedtree.registry.utils import event_date

log = get_logger(__name__)

UNION_TAG = "FAM"
PARENT_TAGS = frozenset({"HUSB", "WIFE"})
CHILD_TAG = "CHIL"


class UnionBuilder:
    """
    Assembles one FAM record: HUSB/WIFE parents, CHIL children and the MARR
    date. Parent and child lists keep first-seen order without duplicates.
    """

    def __init__(self, header: Token):
        union_id = normalize_xref(header.xref or header.value) or ""
        self.union = Union(id=union_id)
        log.debug("created union %s (line %d)", union_id, header.lineno)

    @property
    def id(self) -> str:
        return self.union.id

    def handle(self, token: Token, cursor: LineCursor) -> None:
        tag = token.tag
        union = self.union

        if tag in PARENT_TAGS:
            parent_id = normalize_xref(token.value)
            if parent_id:
                union.add_parent(parent_id)

        elif tag == CHILD_TAG:
            child_id = normalize_xref(token.value)
            if child_id:
                union.add_child(child_id)

        elif tag == "MARR":
            # MARR dates are only taken from the line directly beneath it
            date = event_date(token, cursor, max_depth=1)
            if date is not None:
                union.marriage = date

    def build(self) -> Union:
        return self.union
