# src/gedtree/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]

# <root>/src/gedtree/utils/pathing.py -> parents[3] is <root>
PROJECT_ROOT = Path(__file__).resolve().parents[3]


def project_path(*parts: PathLike) -> Path:
    """
    Absolute path under the project root (the directory holding src/, tests/,
    config/ and mock_files/). Absolute ``parts`` win, as with ``Path``.
    """
    return PROJECT_ROOT.joinpath(*parts)


def default_config_path() -> Path:
    return project_path("config", "gedtree.yml")


def mock_file_path(filename: PathLike) -> Path:
    """Sample GEDCOM input under mock_files/, e.g. ``mock_file_path("family.ged")``."""
    return project_path("mock_files", filename)
