from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional

from gedtree.config import get_config
from gedtree.core.exceptions import LayoutConfigError

MODE_GENERAL = "general"
MODE_ANCESTOR = "ancestor"
LAYOUT_MODES = (MODE_GENERAL, MODE_ANCESTOR)

_POSITIVE_FIELDS = ("horizontal_gap", "vertical_gap", "node_width", "node_height")


@dataclass(frozen=True)
class LayoutConfig:
    """
    Spacing and traversal settings for ``compute_layout``.

    Gaps and node sizes must be positive. ``max_generations`` bounds the
    ancestor walk and, in general mode, the deepest level that is placed.
    ``max_trees`` optionally keeps only the first N root unions and their
    descendants.
    """
    horizontal_gap: float = 40
    vertical_gap: float = 30
    node_width: float = 120
    node_height: float = 40
    max_generations: int = 5
    mode: str = MODE_GENERAL
    max_trees: Optional[int] = None

    def __post_init__(self) -> None:
        self.validate()

    @property
    def row_height(self) -> float:
        return self.node_height + self.vertical_gap

    def validate(self) -> None:
        for name in _POSITIVE_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise LayoutConfigError(f"{name} must be a number, got {value!r}")
            if not value > 0:
                raise LayoutConfigError(f"{name} must be positive, got {value!r}")
            if not math.isfinite(value):
                raise LayoutConfigError(f"{name} must be finite, got {value!r}")

        if isinstance(self.max_generations, bool) or not isinstance(self.max_generations, int):
            raise LayoutConfigError(
                f"max_generations must be an integer, got {self.max_generations!r}"
            )
        if self.max_generations < 0:
            raise LayoutConfigError(
                f"max_generations must not be negative, got {self.max_generations}"
            )

        if self.mode not in LAYOUT_MODES:
            raise LayoutConfigError(
                f"mode must be one of {', '.join(LAYOUT_MODES)}, got {self.mode!r}"
            )

        if self.max_trees is not None and (
            isinstance(self.max_trees, bool)
            or not isinstance(self.max_trees, int)
            or self.max_trees < 1
        ):
            raise LayoutConfigError(f"max_trees must be a positive integer, got {self.max_trees!r}")

    def with_overrides(self, **overrides: Any) -> "LayoutConfig":
        """Return a copy with the non-None overrides applied (and validated)."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "LayoutConfig":
        """Build from a config mapping such as the ``layout`` YAML section."""
        known = {f.name for f in fields(cls)}
        data = data or {}
        unknown = sorted(set(data) - known)
        if unknown:
            raise LayoutConfigError(f"Unknown layout settings: {', '.join(unknown)}")
        return cls(**dict(data))


def default_layout_config() -> LayoutConfig:
    """Layout defaults from ``config/gedtree.yml`` (built-in values if absent)."""
    return LayoutConfig.from_mapping(get_config().layout)
