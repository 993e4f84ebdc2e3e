# src/gedtree/utils/__init__.py

from .pathing import (
    PROJECT_ROOT,
    default_config_path,
    mock_file_path,
    project_path,
)

__all__ = [
    "PROJECT_ROOT",
    "default_config_path",
    "mock_file_path",
    "project_path",
]
