"""
CLI package for gedtree.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from gedtree.cli.app import app, main

__all__ = [
    "app",
    "main",
]
