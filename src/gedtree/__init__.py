"""
gedtree: GEDCOM ingestion into a validated person/union graph, plus a
deterministic tree layout.

    from gedtree import parse_gedcom, compute_layout

    result = parse_gedcom(text)
    layout = compute_layout(result.people, result.unions)
"""

from gedtree.core.diagnostics import Diagnostic, DiagnosticCollector, DiagnosticKind
from gedtree.core.exceptions import ConfigFileError, GedtreeError, LayoutConfigError
from gedtree.dates.normalizer import parse_date
from gedtree.layout import Bounds, LayoutConfig, LayoutResult, Position, compute_layout
from gedtree.parser_core import parse_file, parse_gedcom
from gedtree.registry.entities import ParseResult, Person, StructuredDate, Union

__all__ = [
    "Bounds",
    "ConfigFileError",
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticKind",
    "GedtreeError",
    "LayoutConfig",
    "LayoutConfigError",
    "LayoutResult",
    "ParseResult",
    "Person",
    "Position",
    "StructuredDate",
    "Union",
    "compute_layout",
    "parse_date",
    "parse_file",
    "parse_gedcom",
]
