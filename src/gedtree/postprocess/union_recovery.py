"""
Structural-recovery pass for union records.

Used when the structured pass produced no unions at all. Hand-edited files
often break strict nesting (lower-case tags, members at the wrong level,
stray indentation); this pass only looks for the shapes that matter:

    0 @F1@ FAM
    <any level> HUSB|WIFE|CHIL @I1@

and keeps scanning member lines until the next level-0 line.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Set

from gedtree.loader.scanner import normalize_xref
from gedtree.logging import get_logger
from gedtree.registry.entities import Union

log = get_logger(__name__)

UNION_HEADER_RE = re.compile(r"^\s*0+\s+@([^@\s]+)@\s+FAM\b", re.IGNORECASE)
MEMBER_RE = re.compile(r"^\s*\d+\s+(HUSB|WIFE|CHIL)\b\s*(\S*)", re.IGNORECASE)
TOP_LEVEL_RE = re.compile(r"^\s*0+\s")


def recover_unions(lines: Iterable[str], known_ids: Optional[Set[str]] = None) -> List[Union]:
    """
    Permissively re-scan raw lines for union headers and member references.

    Unions whose id is in ``known_ids`` are skipped. Returns the recovered
    unions in input order; membership linking is left to the caller.
    """
    known = set(known_ids or ())
    recovered: List[Union] = []
    current: Optional[Union] = None

    for line in lines:
        header = UNION_HEADER_RE.match(line)
        if header:
            union_id = normalize_xref(header.group(1))
            if union_id and union_id not in known:
                current = Union(id=union_id)
                known.add(union_id)
                recovered.append(current)
            else:
                current = None
            continue

        if TOP_LEVEL_RE.match(line):
            current = None
            continue

        if current is None:
            continue

        member = MEMBER_RE.match(line)
        if not member:
            continue

        person_id = normalize_xref(member.group(2))
        if not person_id:
            continue
        if member.group(1).upper() == "CHIL":
            current.add_child(person_id)
        else:
            current.add_parent(person_id)

    log.debug("recovered unions: %s", [u.id for u in recovered])
    return recovered
