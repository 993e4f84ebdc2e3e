from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from gedtree.cli.utils import load_gedcom, write_json
from gedtree.exporter.json_exporter import parse_result_to_dict


def parse_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Report timing on stderr",
    ),
):
    """
    Export the validated people/union graph and diagnostics as JSON.
    """
    result = load_gedcom(gedcom, verbose=verbose)
    write_json(parse_result_to_dict(result), out=out, pretty=pretty)
