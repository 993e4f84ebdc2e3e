from gedtree.core.diagnostics import DiagnosticCollector, DiagnosticKind
from gedtree.registry.entities import Person, Union
from gedtree.registry.link_entities import link_references
from gedtree.registry.validate import validate_references


def _graph():
    people = [Person(id="I1"), Person(id="I2"), Person(id="I3", unions=["F404"])]
    unions = [Union(id="F1", parents=["I1", "I2", "I77"], children=["I3", "X"])]
    link_references(people, unions)
    return people, unions


def test_dangling_references_are_removed_with_one_diagnostic_each():
    people, unions = _graph()

    found = validate_references(people, unions)

    assert unions[0].parents == ["I1", "I2"]
    assert unions[0].children == ["I3"]
    assert people[2].unions == ["F1"]
    assert sorted(d.kind.value for d in found) == [
        "dangling-child-ref",
        "dangling-parent-ref",
        "dangling-union-ref",
    ]


def test_dangling_child_reports_reference_id():
    people, unions = _graph()

    found = validate_references(people, unions)
    child_refs = [d for d in found if d.kind == DiagnosticKind.DANGLING_CHILD_REF]

    assert len(child_refs) == 1
    assert child_refs[0].reference_id == "X"
    assert child_refs[0].entity_id == "F1"
    assert "X" in child_refs[0].message


def test_validation_is_idempotent():
    people, unions = _graph()
    validate_references(people, unions)
    snapshot = ([list(p.unions) for p in people], [(list(u.parents), list(u.children)) for u in unions])

    second = validate_references(people, unions)

    assert second == []
    assert ([list(p.unions) for p in people], [(list(u.parents), list(u.children)) for u in unions]) == snapshot


def test_collector_receives_diagnostics():
    people, unions = _graph()
    collector = DiagnosticCollector()

    validate_references(people, unions, diagnostics=collector)

    assert len(collector) == 3
    assert len(collector.of_kind(DiagnosticKind.DANGLING_PARENT_REF)) == 1
