from __future__ import annotations

from typing import Dict, Iterable, List

from gedtree.logging import get_logger
from gedtree.registry.entities import Person, Union

log = get_logger(__name__)


def link_references(people: Iterable[Person], unions: Iterable[Union]) -> int:
    """
    Cross-link unions into their members' membership lists.

    For every parent and child id of every union, the union id is added to
    that person's ``unions`` (deduplicated). Purely additive: nothing is ever
    removed here, dangling ids are left for ``validate_references``.

    Returns the number of membership entries added.
    """
    by_id: Dict[str, Person] = {p.id: p for p in people}
    added = 0

    for union in unions:
        members: List[str] = list(union.parents) + list(union.children)
        for person_id in members:
            person = by_id.get(person_id)
            if person is None:
                log.debug("union %s: no person %s to link", union.id, person_id)
                continue
            if person.add_union(union.id):
                added += 1

    log.debug("linked %d union memberships", added)
    return added
