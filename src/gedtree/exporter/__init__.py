"""
Exporter package.

Re-exports the JSON conversion helpers used by the CLI.
"""

from __future__ import annotations

from .json_exporter import (
    export_json,
    layout_to_dict,
    parse_result_to_dict,
    to_json_string,
)

__all__ = ["export_json", "layout_to_dict", "parse_result_to_dict", "to_json_string"]
