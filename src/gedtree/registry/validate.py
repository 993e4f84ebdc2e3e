from __future__ import annotations

from typing import List, Optional, Sequence

from gedtree.core.diagnostics import Diagnostic, DiagnosticCollector, DiagnosticKind
from gedtree.logging import get_logger
from gedtree.registry.entities import Person, Union

log = get_logger(__name__)


def validate_references(
    people: Sequence[Person],
    unions: Sequence[Union],
    diagnostics: Optional[DiagnosticCollector] = None,
) -> List[Diagnostic]:
    """
    Remove references to records that do not exist.

    * person.unions entries without a matching union -> dangling-union-ref
    * union.parents entries without a matching person -> dangling-parent-ref
    * union.children entries without a matching person -> dangling-child-ref

    One diagnostic is produced per removed id. Must run after linking. A
    second run over the same graph finds nothing to remove.

    Returns the diagnostics found by this call; they are also added to
    ``diagnostics`` when a collector is given.
    """
    found: List[Diagnostic] = []
    person_ids = {p.id for p in people}
    union_ids = {u.id for u in unions}

    for person in people:
        kept: List[str] = []
        for union_id in person.unions:
            if union_id in union_ids:
                kept.append(union_id)
                continue
            found.append(
                Diagnostic(
                    kind=DiagnosticKind.DANGLING_UNION_REF,
                    message=f"Person {person.id} references non-existent union {union_id}",
                    entity_id=person.id,
                    reference_id=union_id,
                )
            )
        person.unions[:] = kept

    for union in unions:
        union.parents[:] = _filter_members(
            union, union.parents, person_ids, DiagnosticKind.DANGLING_PARENT_REF, "parent", found
        )
        union.children[:] = _filter_members(
            union, union.children, person_ids, DiagnosticKind.DANGLING_CHILD_REF, "child", found
        )

    for diagnostic in found:
        log.warning(diagnostic.message)

    if diagnostics is not None:
        diagnostics.extend(found)

    return found


def _filter_members(
    union: Union,
    member_ids: List[str],
    person_ids: set,
    kind: DiagnosticKind,
    role: str,
    found: List[Diagnostic],
) -> List[str]:
    kept: List[str] = []
    for person_id in member_ids:
        if person_id in person_ids:
            kept.append(person_id)
            continue
        found.append(
            Diagnostic(
                kind=kind,
                message=f"Union {union.id} references non-existent {role} {person_id}",
                entity_id=union.id,
                reference_id=person_id,
            )
        )
    return kept
