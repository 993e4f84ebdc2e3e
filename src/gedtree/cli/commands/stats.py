from __future__ import annotations

from collections import Counter
from pathlib import Path

import typer
from rich.table import Table

from gedtree.cli.utils import console, load_gedcom


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="List every diagnostic",
    ),
):
    """
    Show summary statistics and data-quality findings for a GEDCOM file.
    """
    result = load_gedcom(gedcom)

    table = Table(title="GEDCOM Statistics")
    table.add_column("Entity", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("People", str(len(result.people)))
    table.add_row("Unions", str(len(result.unions)))
    table.add_row("Diagnostics", str(len(result.diagnostics)))

    console.print(table)

    if not result.diagnostics:
        return

    kinds = Counter(d.kind.value for d in result.diagnostics)
    summary = Table(title="Diagnostics")
    summary.add_column("Kind", style="bold yellow")
    summary.add_column("Count", justify="right")
    for kind, count in sorted(kinds.items()):
        summary.add_row(kind, str(count))
    console.print(summary)

    if verbose:
        for diagnostic in result.diagnostics:
            console.print(f"[yellow]{diagnostic.kind.value}[/yellow] {diagnostic.message}")
