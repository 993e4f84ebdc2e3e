from .config import LAYOUT_MODES, MODE_ANCESTOR, MODE_GENERAL, LayoutConfig
from .engine import compute_layout
from .positioning import Bounds, LayoutResult, Position

__all__ = [
    "Bounds",
    "LAYOUT_MODES",
    "LayoutConfig",
    "LayoutResult",
    "MODE_ANCESTOR",
    "MODE_GENERAL",
    "Position",
    "compute_layout",
]
