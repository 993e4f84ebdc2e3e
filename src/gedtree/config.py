import os
from pathlib import Path

import yaml

from gedtree.core.exceptions import ConfigFileError
from gedtree.utils.pathing import default_config_path


class GTConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.layout = data.get("layout", {}) or {}
        self.debug = data.get("debug", False)


def _config_path() -> Path:
    override = os.environ.get("GEDTREE_CONFIG")
    return Path(override) if override else default_config_path()


def load_config(path: Path | None = None) -> 'GTConfig':
    path = path or _config_path()
    if not path.exists():
        # Installed without the project tree: run on built-in defaults.
        return GTConfig({})

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigFileError(f"Invalid config file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigFileError(f"Config file {path} must contain a mapping")

    return GTConfig(data)


_config_cache = None


def get_config() -> 'GTConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
