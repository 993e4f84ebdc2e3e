from gedtree.loader import LineCursor, scan_text

TEXT = """\
0 @I1@ INDI
1 BIRT
2 PLAC Leeds
3 DATE 1850
2 DATE 1851
1 DEAT
2 DATE 1900
0 TRLR
"""


def _cursor():
    return LineCursor(list(scan_text(TEXT)))


def test_cursor_yields_every_token_once():
    cursor = _cursor()
    assert [t.tag for t in cursor] == ["INDI", "BIRT", "PLAC", "DATE", "DATE", "DEAT", "DATE", "TRLR"]


def test_nested_stops_at_same_or_lower_level():
    cursor = _cursor()
    it = iter(cursor)
    next(it)
    birt = next(it)
    assert [t.tag for t in cursor.nested(birt.level)] == ["PLAC", "DATE", "DATE"]


def test_nested_is_restartable_and_does_not_move_cursor():
    cursor = _cursor()
    it = iter(cursor)
    next(it)
    birt = next(it)
    first = [t.lineno for t in cursor.nested(birt.level)]
    second = [t.lineno for t in cursor.nested(birt.level)]
    assert first == second
    assert next(it).tag == "PLAC"


def test_find_nested_first_match_wins():
    cursor = _cursor()
    it = iter(cursor)
    next(it)
    birt = next(it)
    found = cursor.find_nested(birt.level, "DATE")
    assert found.value == "1850"


def test_find_nested_respects_max_depth():
    cursor = _cursor()
    it = iter(cursor)
    next(it)
    birt = next(it)
    found = cursor.find_nested(birt.level, "DATE", max_depth=1)
    assert found.value == "1851"


def test_consume_through_skips_lookahead_lines():
    cursor = _cursor()
    it = iter(cursor)
    next(it)
    birt = next(it)
    date = cursor.find_nested(birt.level, "DATE", max_depth=1)
    cursor.consume_through(date)
    assert next(it).tag == "DEAT"
