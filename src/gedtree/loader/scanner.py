# src/gedtree/loader/scanner.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

XREF_MARKER = "@"


@dataclass(frozen=True)
class Token:
    """
    A single scanned GEDCOM line.

    Attributes:
        lineno: 1-based line number in the original text.
        level: Parsed nesting level (0, 1, 2, ...).
        xref: Optional cross-reference identifier, e.g. "@I1@", or None.
        tag: GEDCOM tag, e.g. "INDI", "FAM", "NAME", "DATE".
        value: Remaining tokens joined by single spaces (may be empty).
    """
    lineno: int
    level: int
    xref: Optional[str]
    tag: str
    value: str


def normalize_xref(value: Optional[str]) -> Optional[str]:
    """Strip surrounding whitespace and the '@' delimiters from an id."""
    if not value:
        return None
    stripped = value.strip()
    if stripped.startswith(XREF_MARKER):
        stripped = stripped[1:]
    if stripped.endswith(XREF_MARKER):
        stripped = stripped[:-1]
    return stripped or None


def scan_line(line: str, lineno: int = 0) -> Optional[Token]:
    """
    Split one line into (level, xref, tag, value).

    Layout of a line:
        <level> [<xref>] <tag> [<value>]

    Examples:
        "0 HEAD"              -> level 0, tag HEAD
        "0 @I1@ INDI"         -> level 0, xref @I1@, tag INDI
        "1 NAME John /Doe/"   -> level 1, tag NAME, value "John /Doe/"

    Blank lines, lines with a non-numeric level and lines without a tag are
    not errors: they yield None and the caller skips them.
    """
    if lineno == 1 and line.startswith("\ufeff"):
        line = line.lstrip("\ufeff")

    parts = line.split()
    if len(parts) < 2:
        return None

    level_str = parts[0]
    # ASCII digits only; str.isdigit also admits superscripts like "²"
    if not (level_str.isascii() and level_str.isdigit()):
        return None

    xref: Optional[str] = None
    if parts[1].startswith(XREF_MARKER) and len(parts) >= 3:
        xref, tag, rest = parts[1], parts[2], parts[3:]
    else:
        tag, rest = parts[1], parts[2:]

    return Token(
        lineno=lineno,
        level=int(level_str),
        xref=xref,
        tag=tag,
        value=" ".join(rest),
    )


def split_lines(text: str) -> list[str]:
    """Split raw input on newlines, dropping trailing CR characters."""
    return [line.rstrip("\r") for line in text.split("\n")]


def scan_lines(lines: Iterable[str]) -> Iterator[Token]:
    """Yield a Token for every usable line, keeping 1-based line numbers."""
    for lineno, line in enumerate(lines, start=1):
        token = scan_line(line, lineno=lineno)
        if token is not None:
            yield token


def scan_text(text: str) -> Iterator[Token]:
    """Convenience wrapper: scan an in-memory GEDCOM string."""
    return scan_lines(split_lines(text))
