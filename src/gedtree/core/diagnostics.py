from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List


class DiagnosticKind(str, Enum):
    DANGLING_UNION_REF = "dangling-union-ref"
    DANGLING_PARENT_REF = "dangling-parent-ref"
    DANGLING_CHILD_REF = "dangling-child-ref"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A data-quality finding. Reported alongside results, never raised."""
    kind: DiagnosticKind
    message: str
    entity_id: str
    reference_id: str


class DiagnosticCollector:
    """
    Accumulates diagnostics for one parse.

    Callers may pass their own collector into ``parse_gedcom`` or the
    validator to gather findings across several calls.
    """

    def __init__(self) -> None:
        self._items: List[Diagnostic] = []

    def add(self, diagnostic: Diagnostic) -> None:
        self._items.append(diagnostic)

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        self._items.extend(diagnostics)

    def of_kind(self, kind: DiagnosticKind) -> List[Diagnostic]:
        return [d for d in self._items if d.kind == kind]

    def to_list(self) -> List[Diagnostic]:
        return list(self._items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
