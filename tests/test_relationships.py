from gedtree.layout.relationships import build_relationship_maps, filter_by_max_trees
from gedtree.registry.entities import Person, Union


UNIONS = [
    Union(id="F1", parents=["A", "B"], children=["C", "D"]),
    Union(id="F2", parents=["C", "E"], children=["G"]),
    Union(id="F3", parents=["X"], children=["Y"]),
]
PEOPLE = [Person(id=i) for i in ("A", "B", "C", "D", "E", "G", "X", "Y", "lonely")]


def test_maps_index_both_directions():
    maps = build_relationship_maps(UNIONS)

    assert maps.children_of["A"] == ["C", "D"]
    assert maps.parents_of["G"] == ["C", "E"]
    assert [u.id for u in maps.child_unions["C"]] == ["F1"]
    assert [u.id for u in maps.parent_unions["C"]] == ["F2"]


def test_spouses_of_collects_co_parents():
    maps = build_relationship_maps(UNIONS)
    assert maps.spouses_of("C") == ["E"]
    assert maps.spouses_of("X") == []
    assert maps.spouses_of("nobody") == []


def test_max_trees_keeps_descendant_unions():
    people, unions = filter_by_max_trees(PEOPLE, UNIONS, 1)

    assert [u.id for u in unions] == ["F1", "F2"]
    assert [p.id for p in people] == ["A", "B", "C", "D", "E", "G"]


def test_max_trees_larger_than_root_count_keeps_all_unions():
    people, unions = filter_by_max_trees(PEOPLE, UNIONS, 10)
    assert [u.id for u in unions] == ["F1", "F2", "F3"]
    # people outside every union are dropped
    assert "lonely" not in [p.id for p in people]


def test_max_trees_without_unions_is_a_no_op():
    people, unions = filter_by_max_trees(PEOPLE, [], 1)
    assert people == PEOPLE
    assert unions == []
