"""
Relationship indexes shared by the level assignment and positioning code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Set, Tuple

from gedtree.registry.entities import Person, Union


@dataclass
class RelationshipMaps:
    """
    Lookups derived from the union list, all in first-seen order.

    child_unions:  person id -> unions listing them as a child
    parent_unions: person id -> unions listing them as a parent
    children_of:   person id -> child ids across all their unions
    parents_of:    person id -> parent ids across all unions they are a child in
    """
    child_unions: Dict[str, List[Union]] = field(default_factory=dict)
    parent_unions: Dict[str, List[Union]] = field(default_factory=dict)
    children_of: Dict[str, List[str]] = field(default_factory=dict)
    parents_of: Dict[str, List[str]] = field(default_factory=dict)

    def spouses_of(self, person_id: str) -> List[str]:
        spouses: List[str] = []
        for union in self.parent_unions.get(person_id, []):
            for other in union.parents:
                if other != person_id and other not in spouses:
                    spouses.append(other)
        return spouses


def _append_unique(index: Dict[str, list], key: str, value) -> None:
    bucket = index.setdefault(key, [])
    if value not in bucket:
        bucket.append(value)


def build_relationship_maps(unions: Sequence[Union]) -> RelationshipMaps:
    maps = RelationshipMaps()
    for union in unions:
        for child_id in union.children:
            _append_unique(maps.child_unions, child_id, union)
            for parent_id in union.parents:
                _append_unique(maps.parents_of, child_id, parent_id)
        for parent_id in union.parents:
            _append_unique(maps.parent_unions, parent_id, union)
            for child_id in union.children:
                _append_unique(maps.children_of, parent_id, child_id)
    return maps


def filter_by_max_trees(
    people: Sequence[Person],
    unions: Sequence[Union],
    max_trees: int,
) -> Tuple[List[Person], List[Union]]:
    """
    Keep the first ``max_trees`` root unions and every union descending from
    them. A root union is one whose parents are not children anywhere.
    People are kept when they are a member of a kept union.
    """
    if max_trees < 1 or not unions:
        return list(people), list(unions)

    is_child: Set[str] = {c for u in unions for c in u.children}
    roots = [u for u in unions if not any(p in is_child for p in u.parents)]
    selected = roots[:max_trees]
    if not selected:
        return list(people), list(unions)

    maps = build_relationship_maps(unions)
    allowed: Set[str] = set()
    stack = [u.id for u in reversed(selected)]
    by_id = {u.id: u for u in unions}

    while stack:
        union_id = stack.pop()
        if union_id in allowed:
            continue
        allowed.add(union_id)
        for child_id in by_id[union_id].children:
            for child_union in maps.parent_unions.get(child_id, []):
                if child_union.id not in allowed:
                    stack.append(child_union.id)

    kept_unions = [u for u in unions if u.id in allowed]
    members = {m for u in kept_unions for m in (*u.parents, *u.children)}
    kept_people = [p for p in people if p.id in members]
    return kept_people, kept_unions
