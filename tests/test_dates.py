# tests/test_dates.py

from __future__ import annotations

import pytest

from gedtree.dates.normalizer import parse_date


def test_full_date():
    d = parse_date("12 JAN 1900")
    assert d.year == 1900
    assert d.month == 1
    assert d.day == 12
    assert d.precision == "day"
    assert d.exact_iso == "1900-01-12"
    assert d.approx_iso == "1900-01-12"
    assert d.original == "12 JAN 1900"


def test_month_year():
    d = parse_date("JAN 1900")
    assert d.precision == "month"
    assert d.exact_iso is None
    assert d.approx_iso == "1900-01-01"
    assert d.day is None


def test_simple_year():
    d = parse_date("1900")
    assert d.precision == "year"
    assert d.year == 1900
    assert d.month is None
    assert d.exact_iso is None
    assert d.approx_iso == "1900-01-01"


def test_month_names_are_case_insensitive():
    d = parse_date("3 jun 1922")
    assert d.precision == "day"
    assert d.exact_iso == "1922-06-03"


def test_year_is_zero_padded():
    assert parse_date("5 MAR 812").exact_iso == "0812-03-05"


def test_empty_and_absent_input():
    for raw in (None, "", "   "):
        d = parse_date(raw)
        assert d.precision == "unknown"
        assert d.year is None
        assert d.month is None
        assert d.day is None
        assert d.exact_iso is None
        assert d.approx_iso is None


def test_unparseable_shapes_are_unknown():
    for raw in ("ABT 1900", "BET 1900 AND 1910", "12 JANUARY 1900", "Unknown", "1 2 3 4"):
        d = parse_date(raw)
        assert d.precision == "unknown"
        assert d.year is None
        assert d.approx_iso is None
        assert d.original == raw


@pytest.mark.parametrize("raw", ["1_900", "+1900", "-5", "12 JAN 1_900", "+3 JAN 1900", "10000"])
def test_non_plain_numbers_are_unknown(raw):
    result = parse_date(raw)
    assert result.precision == "unknown"
    assert result.year is None
    assert result.approx_iso is None
    assert result.original == raw


def test_largest_four_digit_year():
    assert parse_date("9999").approx_iso == "9999-01-01"
