from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from gedtree.cli.utils import fail, load_gedcom, write_json
from gedtree.core.exceptions import GedtreeError
from gedtree.exporter.json_exporter import layout_to_dict
from gedtree.layout.config import default_layout_config
from gedtree.layout.engine import compute_layout


def layout_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    focal: Optional[str] = typer.Option(
        None,
        "--focal",
        "-f",
        help="Focal person id (ancestor mode)",
    ),
    mode: Optional[str] = typer.Option(
        None,
        "--mode",
        "-m",
        help="Layout mode: general or ancestor",
    ),
    generations: Optional[int] = typer.Option(
        None,
        "--generations",
        "-g",
        help="Generation depth bound",
    ),
    h_gap: Optional[float] = typer.Option(None, "--h-gap", help="Horizontal gap"),
    v_gap: Optional[float] = typer.Option(None, "--v-gap", help="Vertical gap"),
    max_trees: Optional[int] = typer.Option(
        None,
        "--max-trees",
        help="Only lay out the first N root families and their descendants",
    ),
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
):
    """
    Compute node coordinates for a GEDCOM file and print them as JSON.
    """
    result = load_gedcom(gedcom)

    try:
        config = default_layout_config().with_overrides(
            mode=mode,
            max_generations=generations,
            horizontal_gap=h_gap,
            vertical_gap=v_gap,
            max_trees=max_trees,
        )
        layout = compute_layout(result.people, result.unions, config, focal_id=focal)
    except GedtreeError as exc:
        fail(str(exc))

    write_json(layout_to_dict(layout), out=out, pretty=pretty)
