from __future__ import annotations

import time
from pathlib import Path
from typing import Any, Dict

import typer
from rich.console import Console

from gedtree.exporter.json_exporter import export_json, to_json_string
from gedtree.parser_core import parse_file
from gedtree.registry.entities import ParseResult

console = Console()
err_console = Console(stderr=True)


def load_gedcom(path: Path, *, verbose: bool = False) -> ParseResult:
    """
    Parse + link + validate a GEDCOM file for CLI commands.
    """
    t0 = time.perf_counter()
    result = parse_file(path)
    elapsed = time.perf_counter() - t0

    if verbose:
        err_console.log(
            f"Loaded {len(result.people)} people, {len(result.unions)} unions "
            f"in {elapsed:.2f}s ({len(result.diagnostics)} diagnostics)"
        )

    return result


def write_json(
    data: Dict[str, Any],
    *,
    out: Path | None,
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    if out:
        export_json(data, out, pretty=pretty)
    else:
        typer.echo(to_json_string(data, pretty=pretty))


def fail(message: str) -> None:
    err_console.print(f"[bold red]error:[/bold red] {message}")
    raise typer.Exit(code=1)
