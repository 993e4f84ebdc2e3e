# src/gedtree/dates/normalizer.py

from __future__ import annotations

from typing import Dict, List, Optional

from gedtree.registry.entities import (
    PRECISION_DAY,
    PRECISION_MONTH,
    PRECISION_UNKNOWN,
    PRECISION_YEAR,
    StructuredDate,
)


# ---------------------------------------------------------------------------
# Month table
# ---------------------------------------------------------------------------

MONTHS: Dict[str, int] = {
    "JAN": 1,
    "FEB": 2,
    "MAR": 3,
    "APR": 4,
    "MAY": 5,
    "JUN": 6,
    "JUL": 7,
    "AUG": 8,
    "SEP": 9,
    "OCT": 10,
    "NOV": 11,
    "DEC": 12,
}

MAX_YEAR = 9999


# ---------------------------------------------------------------------------
# Core parsing helpers
# ---------------------------------------------------------------------------

def _to_int(token: str) -> Optional[int]:
    # Plain ASCII digits only: no sign, underscores or other scripts
    if not (token.isascii() and token.isdigit()):
        return None
    return int(token)


def _month_number(token: str) -> Optional[int]:
    return MONTHS.get(token.upper())


def _iso(year: int, month: Optional[int], day: Optional[int]) -> str:
    return f"{year:04d}-{month or 1:02d}-{day or 1:02d}"


def _unknown(original: Optional[str]) -> StructuredDate:
    return StructuredDate(original=original, precision=PRECISION_UNKNOWN)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_date(raw: Optional[str]) -> StructuredDate:
    """
    Convert a GEDCOM date phrase into a precision-tagged StructuredDate.

    Accepted shapes:
        "12 JAN 1900" -> day precision
        "JAN 1900"    -> month precision
        "1900"        -> year precision

    Anything else (qualifiers, ranges, free text, empty input) yields
    precision "unknown" with every numeric field left as None. The result is
    a label only: no calendar or timezone handling is attempted.
    """
    if raw is None:
        return _unknown(None)

    original = raw.strip()
    if not original:
        return _unknown(None)

    tokens: List[str] = original.split()
    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None

    if len(tokens) == 3:
        day = _to_int(tokens[0])
        month = _month_number(tokens[1])
        year = _to_int(tokens[2])
        if day is None or month is None or year is None:
            return _unknown(original)
        precision = PRECISION_DAY
    elif len(tokens) == 2:
        month = _month_number(tokens[0])
        year = _to_int(tokens[1])
        if month is None or year is None:
            return _unknown(original)
        precision = PRECISION_MONTH
    elif len(tokens) == 1:
        year = _to_int(tokens[0])
        if year is None:
            return _unknown(original)
        precision = PRECISION_YEAR
    else:
        return _unknown(original)

    if year > MAX_YEAR:
        return _unknown(original)

    approx_iso = _iso(year, month, day)
    return StructuredDate(
        original=original,
        year=year,
        month=month,
        day=day,
        precision=precision,
        exact_iso=approx_iso if precision == PRECISION_DAY else None,
        approx_iso=approx_iso,
    )
