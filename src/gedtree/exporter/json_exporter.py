"""
json_exporter.py
JSON conversion for parse and layout results.

This exporter:
- Converts dataclasses and enums to plain dictionaries and strings
- Emits layout keys in the camelCase shape the rendering layer consumes
- Is deterministic: same input, same bytes
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict

from gedtree.layout.positioning import LayoutResult
from gedtree.logging import get_logger
from gedtree.registry.entities import ParseResult

log = get_logger(__name__)


def _to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Enums -> their value
    - Primitives pass through
    - dataclasses -> dict (recursively)
    - dict -> dict (recursively)
    - list / tuple / set -> list (recursively)
    """
    if isinstance(obj, Enum):
        return obj.value

    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if is_dataclass(obj):
        return {k: _to_json_compatible(v) for k, v in asdict(obj).items()}

    if isinstance(obj, dict):
        return {str(k): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [_to_json_compatible(v) for v in obj]

    raise TypeError(f"Cannot convert {type(obj).__name__} to JSON")


def parse_result_to_dict(result: ParseResult) -> Dict[str, Any]:
    return {
        "people": [_to_json_compatible(p) for p in result.people],
        "unions": [_to_json_compatible(u) for u in result.unions],
        "diagnostics": [_to_json_compatible(d) for d in result.diagnostics],
    }


def layout_to_dict(layout: LayoutResult) -> Dict[str, Any]:
    return {
        "personPositions": {
            pid: {"x": pos.x, "y": pos.y} for pid, pos in layout.person_positions.items()
        },
        "unionPositions": {
            uid: {"x": pos.x, "y": pos.y} for uid, pos in layout.union_positions.items()
        },
        "bounds": {"width": layout.bounds.width, "height": layout.bounds.height},
    }


def to_json_string(data: Dict[str, Any], pretty: bool = False) -> str:
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def export_json(data: Dict[str, Any], output_path: str | Path, pretty: bool = False) -> None:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    log.info("Exporting JSON to: %s", output_path)
    with output_path.open("w", encoding="utf-8") as f:
        f.write(to_json_string(data, pretty=pretty))

    size_bytes = output_path.stat().st_size
    log.info("JSON export complete. size=%d bytes", size_bytes)
