"""
parser_core.py
Single-pass parse orchestrator: lines -> people, unions, diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from gedtree.core.diagnostics import DiagnosticCollector
from gedtree.loader.cursor import LineCursor
from gedtree.loader.scanner import Token, scan_lines, split_lines
from gedtree.logging import get_logger
from gedtree.postprocess.union_recovery import recover_unions
from gedtree.registry.build_person import PERSON_TAG, PersonBuilder
from gedtree.registry.build_union import UNION_TAG, UnionBuilder
from gedtree.registry.entities import ParseResult, Person, Union
from gedtree.registry.link_entities import link_references
from gedtree.registry.validate import validate_references

log = get_logger(__name__)

RECORD_FIELD_LEVEL = 1


# ---------------------------------------------------------
# Open-record state machine
# ---------------------------------------------------------
@dataclass(frozen=True)
class NoRecord:
    """Nothing open; nested lines are ignored."""


@dataclass(frozen=True)
class OpenPerson:
    builder: PersonBuilder


@dataclass(frozen=True)
class OpenUnion:
    builder: UnionBuilder


RecordState = NoRecord | OpenPerson | OpenUnion
Flushed = Optional[Person | Union]


def _flush(state: RecordState) -> Flushed:
    if isinstance(state, NoRecord):
        return None
    if isinstance(state, (OpenPerson, OpenUnion)):
        return state.builder.build()
    raise TypeError(f"Unknown record state: {state!r}")


def transition(state: RecordState, token: Token, cursor: LineCursor) -> Tuple[RecordState, Flushed]:
    """
    Apply one scanned line to the open-record state.

    Level 0 always closes the open record (returned as the flushed value)
    and opens a person, a union or nothing depending on the tag. Level-1
    lines update the open record; deeper lines only matter to the date
    lookahead and are otherwise ignored.
    """
    if token.level == 0:
        flushed = _flush(state)
        if token.tag == PERSON_TAG:
            return OpenPerson(PersonBuilder(token)), flushed
        if token.tag == UNION_TAG:
            return OpenUnion(UnionBuilder(token)), flushed
        return NoRecord(), flushed

    if token.level != RECORD_FIELD_LEVEL:
        return state, None

    if isinstance(state, (OpenPerson, OpenUnion)):
        state.builder.handle(token, cursor)
    elif not isinstance(state, NoRecord):
        raise TypeError(f"Unknown record state: {state!r}")
    return state, None


# ---------------------------------------------------------
# Parse pipeline
# ---------------------------------------------------------
@dataclass
class _Records:
    people: List[Person] = field(default_factory=list)
    unions: List[Union] = field(default_factory=list)

    def add(self, record: Flushed) -> None:
        if isinstance(record, Person):
            self.people.append(record)
        elif isinstance(record, Union):
            self.unions.append(record)


def _structured_pass(lines: List[str]) -> _Records:
    records = _Records()
    cursor = LineCursor(list(scan_lines(lines)))
    state: RecordState = NoRecord()

    for token in cursor:
        state, flushed = transition(state, token, cursor)
        records.add(flushed)

    records.add(_flush(state))
    return records


def parse_gedcom(text: str, diagnostics: Optional[DiagnosticCollector] = None) -> ParseResult:
    """
    Parse GEDCOM text into a validated graph.

    Steps:
      1. structured single pass (scanner + record builders)
      2. structural recovery when no union was built
      3. link union membership into people
      4. strip dangling references, collecting diagnostics

    Malformed input never raises; problems surface as diagnostics.
    """
    collector = diagnostics if diagnostics is not None else DiagnosticCollector()
    lines = split_lines(text)

    records = _structured_pass(lines)
    log.debug(
        "structured pass: %d people, %d unions",
        len(records.people),
        len(records.unions),
    )

    if not records.unions:
        recovered = recover_unions(lines)
        if recovered:
            log.warning(
                "no unions found in structured pass; recovered %d by rescanning",
                len(recovered),
            )
        records.unions.extend(recovered)

    link_references(records.people, records.unions)
    found = validate_references(records.people, records.unions, diagnostics=collector)

    log.info(
        "parsed %d people, %d unions (%d diagnostics)",
        len(records.people),
        len(records.unions),
        len(found),
    )
    return ParseResult(
        people=records.people,
        unions=records.unions,
        diagnostics=collector.to_list(),
    )


def parse_file(path: str | Path, diagnostics: Optional[DiagnosticCollector] = None) -> ParseResult:
    """Read a GEDCOM file (UTF-8, undecodable bytes replaced) and parse it."""
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"GEDCOM file not found: {file_path}")

    log.info("Parsing GEDCOM file: %s", file_path)
    text = file_path.read_text(encoding="utf-8", errors="replace")
    return parse_gedcom(text, diagnostics=diagnostics)
