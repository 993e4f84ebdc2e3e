"""
Generation (level) assignment for the tree layout.

Two strategies:

* ``assign_ancestor_levels``: focal person at level 0, parents one level
  further per generation, bounded by the depth limit.
* ``assign_general_levels``: breadth-first from every person without
  recorded parents, then a capped relaxation that settles spouses on a
  shared level and children below their parents, then spouse adoption.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, Iterable, List, Optional, Sequence, Set

from gedtree.layout.relationships import RelationshipMaps, build_relationship_maps
from gedtree.logging import get_logger
from gedtree.registry.entities import Person, Union

log = get_logger(__name__)

MAX_RELAXATION_ROUNDS = 8

Levels = Dict[str, int]


# ---------------------------------------------------------------------------
# Ancestor walk
# ---------------------------------------------------------------------------

def assign_ancestor_levels(
    focal_id: str,
    people: Sequence[Person],
    unions: Sequence[Union],
    max_generations: int,
    maps: Optional[RelationshipMaps] = None,
) -> Levels:
    """
    Walk upward from ``focal_id``: the parents of every union listing a
    person as a child land one level above that person. Siblings and
    collateral lines are never visited. A person reached twice keeps the
    level of the first (shortest) path.
    """
    person_ids = {p.id for p in people}
    if focal_id not in person_ids:
        log.warning("focal person %s not found; ancestor layout is empty", focal_id)
        return {}

    maps = maps or build_relationship_maps(unions)
    levels: Levels = {focal_id: 0}
    queue = deque([focal_id])

    while queue:
        person_id = queue.popleft()
        level = levels[person_id]
        if level >= max_generations:
            continue
        for union in maps.child_unions.get(person_id, []):
            for parent_id in union.parents:
                if parent_id in levels or parent_id not in person_ids:
                    continue
                levels[parent_id] = level + 1
                queue.append(parent_id)

    return levels


# ---------------------------------------------------------------------------
# General assignment
# ---------------------------------------------------------------------------

def _seed_levels(person_ids: List[str], maps: RelationshipMaps) -> Levels:
    roots = [pid for pid in person_ids if pid not in maps.parents_of]
    if not roots and person_ids:
        # Every person has parents (a fully cyclic graph): start somewhere.
        roots = person_ids[:1]

    levels: Levels = {pid: 0 for pid in roots}
    queue = deque(roots)
    while queue:
        person_id = queue.popleft()
        wanted = levels[person_id] + 1
        for child_id in maps.children_of.get(person_id, []):
            current = levels.get(child_id)
            if current is None or wanted < current:
                levels[child_id] = wanted
                queue.append(child_id)
    return levels


def _set_level(levels: Levels, person_id: str, level: int, changed: Set[str]) -> None:
    if levels.get(person_id) != level:
        levels[person_id] = level
        changed.add(person_id)


def _relax_union(union: Union, levels: Levels) -> Set[str]:
    """Settle one union's members; return the ids whose level moved."""
    changed: Set[str] = set()

    target: Optional[int] = None
    for parent_id in union.parents:
        if parent_id in levels:
            target = levels[parent_id]
            break

    if target is not None:
        for parent_id in union.parents:
            _set_level(levels, parent_id, target, changed)
        for child_id in union.children:
            current = levels.get(child_id)
            if current is None or current < target + 1:
                _set_level(levels, child_id, target + 1, changed)

    child_levels = [levels[c] for c in union.children if c in levels]
    if child_levels and (target is None or any(lvl != target + 1 for lvl in child_levels)):
        wanted = min(child_levels) - 1
        for parent_id in union.parents:
            _set_level(levels, parent_id, wanted, changed)

    return changed


def _relax(unions: Sequence[Union], levels: Levels) -> int:
    """
    Work-list relaxation: only unions touching a person whose level moved
    in the previous round are revisited. Returns the rounds used.
    """
    unions_of: Dict[str, List[int]] = {}
    for index, union in enumerate(unions):
        for member in (*union.parents, *union.children):
            bucket = unions_of.setdefault(member, [])
            if index not in bucket:
                bucket.append(index)

    dirty: Set[int] = set(range(len(unions)))
    rounds = 0
    while dirty and rounds < MAX_RELAXATION_ROUNDS:
        rounds += 1
        pending = sorted(dirty)
        dirty = set()
        for index in pending:
            for person_id in _relax_union(unions[index], levels):
                dirty.update(unions_of.get(person_id, ()))

    if dirty:
        log.debug("relaxation stopped at the %d round cap", MAX_RELAXATION_ROUNDS)
    return rounds


def _adopt_spouse_levels(unions: Sequence[Union], levels: Levels, maps: RelationshipMaps) -> None:
    """In-laws take the level of the partner who is a child elsewhere."""
    for union in unions:
        anchor = None
        for parent_id in union.parents:
            if any(u.id != union.id for u in maps.child_unions.get(parent_id, [])):
                anchor = parent_id
                break
        if anchor is None or anchor not in levels:
            continue
        for parent_id in union.parents:
            levels[parent_id] = levels[anchor]


def _normalize(levels: Levels) -> Levels:
    if not levels:
        return levels
    lowest = min(levels.values())
    if lowest >= 0:
        return levels
    return {pid: lvl - lowest for pid, lvl in levels.items()}


def assign_general_levels(
    people: Sequence[Person],
    unions: Sequence[Union],
    maps: Optional[RelationshipMaps] = None,
) -> Levels:
    """
    Assign a level to every person reachable from the rootless set.

    Only ids of known people are kept; unreachable people get no level and
    are left out of the layout.
    """
    maps = maps or build_relationship_maps(unions)
    person_ids = [p.id for p in people]
    known = set(person_ids)

    levels = _seed_levels(person_ids, maps)
    rounds = _relax(unions, levels)
    _adopt_spouse_levels(unions, levels, maps)

    levels = _normalize({pid: lvl for pid, lvl in levels.items() if pid in known})
    log.debug("assigned %d levels in %d relaxation rounds", len(levels), rounds)
    return levels


def levels_by_generation(levels: Levels, order: Iterable[str]) -> Dict[int, List[str]]:
    """Group ids by level, keeping ``order`` within each level."""
    grouped: Dict[int, List[str]] = {}
    for person_id in order:
        if person_id in levels:
            grouped.setdefault(levels[person_id], []).append(person_id)
    return dict(sorted(grouped.items()))
