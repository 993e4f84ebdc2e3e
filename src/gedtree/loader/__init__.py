# src/gedtree/loader/__init__.py

"""
Public interface for the line loader stack.

    from gedtree.loader import LineCursor, Token, scan_line, scan_text
"""

from __future__ import annotations

from .cursor import LineCursor
from .scanner import Token, normalize_xref, scan_line, scan_lines, scan_text, split_lines

__all__ = [
    "LineCursor",
    "Token",
    "normalize_xref",
    "scan_line",
    "scan_lines",
    "scan_text",
    "split_lines",
]
