"""
Turns per-person levels into canvas coordinates.

Rows alternate person / union: level L puts people on row 2L and union
connectors on row 2L + 1. Within a level, spouses are paired into one group
and groups are spread evenly across the canvas width.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from gedtree.layout.config import LayoutConfig
from gedtree.layout.generations import Levels, levels_by_generation
from gedtree.layout.relationships import RelationshipMaps
from gedtree.registry.entities import Union

PADDING = 40.0
SPOUSE_GAP = 10.0
UNION_OFFSET_RATIO = 0.5


@dataclass(frozen=True)
class Position:
    x: float
    y: float


@dataclass(frozen=True)
class Bounds:
    width: float
    height: float


@dataclass
class LayoutResult:
    person_positions: Dict[str, Position] = field(default_factory=dict)
    union_positions: Dict[str, Position] = field(default_factory=dict)
    bounds: Bounds = field(default_factory=lambda: Bounds(0.0, 0.0))


# ---------------------------------------------------------------------------
# Grouping
# ---------------------------------------------------------------------------

def group_spouses(level_ids: Sequence[str], maps: RelationshipMaps) -> List[Tuple[str, ...]]:
    """
    Greedily pair people who are co-parents in some union.

    First match wins and nobody is placed twice; everyone left over forms a
    singleton group. Group order follows the first member's position.
    """
    in_level = set(level_ids)
    placed = set()
    groups: List[Tuple[str, ...]] = []

    for person_id in level_ids:
        if person_id in placed:
            continue
        placed.add(person_id)
        partner = next(
            (s for s in maps.spouses_of(person_id) if s in in_level and s not in placed),
            None,
        )
        if partner is None:
            groups.append((person_id,))
        else:
            placed.add(partner)
            groups.append((person_id, partner))
    return groups


def _group_width(size: int, config: LayoutConfig) -> float:
    return size * config.node_width + (size - 1) * SPOUSE_GAP


# ---------------------------------------------------------------------------
# Coordinates
# ---------------------------------------------------------------------------

def _row_center(row: int, config: LayoutConfig) -> float:
    return PADDING + row * config.row_height + config.row_height / 2


def _mean(points: Sequence[Position]) -> Position:
    count = len(points)
    return Position(sum(p.x for p in points) / count, sum(p.y for p in points) / count)


def place_people(
    levels: Levels,
    order: Sequence[str],
    maps: RelationshipMaps,
    config: LayoutConfig,
) -> Tuple[Dict[str, Position], Bounds]:
    by_level = levels_by_generation(levels, order)
    grouped = {lvl: group_spouses(ids, maps) for lvl, ids in by_level.items()}

    widest_count = max((len(g) for g in grouped.values()), default=1)
    widest_group = max(
        (_group_width(len(group), config) for groups in grouped.values() for group in groups),
        default=config.node_width,
    )
    slot = widest_group + config.horizontal_gap
    width = 2 * PADDING + widest_count * slot

    max_level = max(grouped, default=0)
    height = (2 * max_level + 1) * config.row_height + 2 * PADDING

    spouse_offset = (config.node_width + SPOUSE_GAP) / 2
    inner = width - 2 * PADDING
    positions: Dict[str, Position] = {}

    for level, groups in grouped.items():
        y = _row_center(2 * level, config)
        spacing = inner / len(groups)
        for index, group in enumerate(groups):
            center = PADDING + spacing * (index + 0.5)
            if len(group) == 1:
                positions[group[0]] = Position(center, y)
            else:
                positions[group[0]] = Position(center - spouse_offset, y)
                positions[group[1]] = Position(center + spouse_offset, y)

    # Keep dict order aligned with the input order of people.
    ordered = {pid: positions[pid] for pid in order if pid in positions}
    return ordered, Bounds(width=width, height=height)


def place_unions(
    unions: Sequence[Union],
    person_positions: Dict[str, Position],
    config: LayoutConfig,
) -> Dict[str, Position]:
    """
    Put each union between its placed parents and placed children. With only
    one side placed, the union sits half a row below the parents or above
    the children. Unions with no placed member are left out.
    """
    offset = UNION_OFFSET_RATIO * config.row_height
    positions: Dict[str, Position] = {}

    for union in unions:
        parents = [person_positions[p] for p in union.parents if p in person_positions]
        children = [person_positions[c] for c in union.children if c in person_positions]

        if parents and children:
            top, bottom = _mean(parents), _mean(children)
            positions[union.id] = Position((top.x + bottom.x) / 2, (top.y + bottom.y) / 2)
        elif parents:
            top = _mean(parents)
            positions[union.id] = Position(top.x, top.y + offset)
        elif children:
            bottom = _mean(children)
            positions[union.id] = Position(bottom.x, bottom.y - offset)

    return positions
