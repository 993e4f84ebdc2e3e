from gedtree.registry.entities import Person, Union
from gedtree.registry.link_entities import link_references


def test_both_parents_are_linked_to_union():
    h = Person(id="I1")
    w = Person(id="I2")
    f = Union(id="F1", parents=["I1", "I2"])

    link_references([h, w], [f])

    assert "F1" in h.unions
    assert "F1" in w.unions


def test_child_relationships_linked():
    c = Person(id="I3")
    f = Union(id="F1", children=["I3"])

    link_references([c], [f])

    assert c.unions == ["F1"]


def test_linking_is_additive_and_deduplicated():
    p = Person(id="I1", unions=["F1", "F9"])
    f = Union(id="F1", parents=["I1"])

    added = link_references([p], [f])

    assert added == 0
    assert p.unions == ["F1", "F9"]


def test_missing_references_do_not_crash():
    f = Union(id="F1", parents=["I404"], children=["I999"])

    assert link_references([], [f]) == 0
    assert f.parents == ["I404"]
    assert f.children == ["I999"]
