"""
CLI command modules for gedtree.

Each command module defines a single Typer-compatible command function.
"""

from gedtree.cli.commands.layout import layout_command
from gedtree.cli.commands.parse import parse_command
from gedtree.cli.commands.stats import stats_command

__all__ = [
    "layout_command",
    "parse_command",
    "stats_command",
]
