from __future__ import annotations

from typing import Optional, Sequence

from gedtree.layout.config import MODE_ANCESTOR, LayoutConfig
from gedtree.layout.generations import assign_ancestor_levels, assign_general_levels
from gedtree.layout.positioning import LayoutResult, place_people, place_unions
from gedtree.layout.relationships import build_relationship_maps, filter_by_max_trees
from gedtree.logging import get_logger
from gedtree.registry.entities import Person, Union

log = get_logger(__name__)


def compute_layout(
    people: Sequence[Person],
    unions: Sequence[Union],
    config: Optional[LayoutConfig] = None,
    focal_id: Optional[str] = None,
    mode: Optional[str] = None,
) -> LayoutResult:
    """
    Compute person and union coordinates plus canvas bounds.

    ``mode`` (default: ``config.mode``) picks the level assignment:

    * ``ancestor``: focal person (default: first person) and their
      ancestors up to ``config.max_generations``.
    * ``general``: every person reachable from the rootless set, dropping
      levels deeper than ``config.max_generations``.

    Without ``config`` the built-in LayoutConfig defaults apply; no file is
    read. Nothing is cached; the same inputs always give identical output.
    Raises LayoutConfigError for unusable spacing settings.
    """
    config = config if config is not None else LayoutConfig()
    if mode is not None:
        config = config.with_overrides(mode=mode)

    if config.max_trees is not None:
        people, unions = filter_by_max_trees(people, unions, config.max_trees)

    maps = build_relationship_maps(unions)
    order = [p.id for p in people]

    if config.mode == MODE_ANCESTOR:
        if focal_id is None and order:
            focal_id = order[0]
        levels = (
            assign_ancestor_levels(focal_id, people, unions, config.max_generations, maps=maps)
            if focal_id is not None
            else {}
        )
    else:
        levels = assign_general_levels(people, unions, maps=maps)
        levels = {pid: lvl for pid, lvl in levels.items() if lvl <= config.max_generations}

    person_positions, bounds = place_people(levels, order, maps, config)
    union_positions = place_unions(unions, person_positions, config)

    log.debug(
        "%s layout: %d people, %d unions placed on %.1fx%.1f",
        config.mode,
        len(person_positions),
        len(union_positions),
        bounds.width,
        bounds.height,
    )
    return LayoutResult(
        person_positions=person_positions,
        union_positions=union_positions,
        bounds=bounds,
    )
