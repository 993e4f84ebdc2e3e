from __future__ import annotations

from .entities import ParseResult, Person, StructuredDate, Union

__all__ = [
    "ParseResult",
    "Person",
    "StructuredDate",
    "Union",
]
