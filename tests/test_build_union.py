from gedtree.loader import LineCursor, scan_text
from gedtree.registry.build_union import UnionBuilder


def build(text):
    cursor = LineCursor(list(scan_text(text)))
    it = iter(cursor)
    builder = UnionBuilder(next(it))
    for token in it:
        if token.level == 1:
            builder.handle(token, cursor)
    return builder.build()


def test_build_union_basic():
    union = build(
        "0 @F1@ FAM\n"
        "1 HUSB @I1@\n"
        "1 WIFE @I2@\n"
        "1 CHIL @I3@\n"
        "1 CHIL @I4@\n"
    )

    assert union.id == "F1"
    assert union.parents == ["I1", "I2"]
    assert union.children == ["I3", "I4"]
    assert union.marriage is None


def test_parents_and_children_are_deduplicated_in_first_seen_order():
    union = build(
        "0 @F1@ FAM\n"
        "1 WIFE @I2@\n"
        "1 HUSB @I1@\n"
        "1 HUSB @I2@\n"
        "1 CHIL @I3@\n"
        "1 CHIL @I3@\n"
    )
    assert union.parents == ["I2", "I1"]
    assert union.children == ["I3"]


def test_marriage_date_from_next_level():
    union = build("0 @F1@ FAM\n1 MARR\n2 PLAC York\n2 DATE 3 JUN 1922\n")
    assert union.marriage.exact_iso == "1922-06-03"


def test_marriage_lookahead_is_one_level_deep():
    union = build("0 @F1@ FAM\n1 MARR\n2 SOUR @S1@\n3 DATE 1922\n")
    assert union.marriage is None


def test_empty_member_values_are_ignored():
    union = build("0 @F1@ FAM\n1 HUSB\n1 CHIL @@\n")
    assert union.parents == []
    assert union.children == []
