from __future__ import annotations

import re
from typing import Optional

from gedtree.dates.normalizer import parse_date
from gedtree.loader.cursor import LineCursor
from gedtree.loader.scanner import Token
from gedtree.registry.entities import StructuredDate

DATE_TAG = "DATE"

_SURNAME_DELIMS = re.compile(r"\s*/\s*")
_WHITESPACE = re.compile(r"\s+")


def clean_name(value: str) -> str:
    """'John /Doe/' -> 'John Doe'."""
    return _WHITESPACE.sub(" ", _SURNAME_DELIMS.sub(" ", value)).strip()


def event_date(
    token: Token,
    cursor: LineCursor,
    max_depth: Optional[int] = None,
) -> Optional[StructuredDate]:
    """
    Resolve the date of an event tag such as BIRT, DEAT or MARR.

    An inline value wins. Otherwise the first nested DATE line below the
    event is used and the cursor skips past it. No date means None.
    """
    value = token.value.strip()
    if value:
        return parse_date(value)

    date_token = cursor.find_nested(token.level, DATE_TAG, max_depth=max_depth)
    if date_token is None:
        return None

    cursor.consume_through(date_token)
    if not date_token.value.strip():
        return None
    return parse_date(date_token.value)
