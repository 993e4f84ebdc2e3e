from __future__ import annotations

import typer

from gedtree.cli.commands.layout import layout_command
from gedtree.cli.commands.parse import parse_command
from gedtree.cli.commands.stats import stats_command

app = typer.Typer(
    name="gedtree",
    help="GEDCOM family graph parser and tree layout",
    add_completion=False,
)

app.command("parse")(parse_command)
app.command("stats")(stats_command)
app.command("layout")(layout_command)


def main():
    app()


if __name__ == "__main__":
    main()
