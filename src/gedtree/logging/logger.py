"""
Central logging setup for gedtree.

Every module asks ``get_logger(__name__)`` for its logger. Loggers live under
the ``gedtree`` namespace and share the handlers of the base logger:

* a stderr console handler (WARNING, or DEBUG when ``debug: true``) so that
  JSON written to stdout by the CLI stays clean;
* with ``logging.to_file`` on, a master log (``logs/gedtree.log`` by default)
  and one file per module, rotated when ``logging.rotate`` is set.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from gedtree.config import get_config
from gedtree.utils.pathing import project_path

BASE_LOGGER_NAME = "gedtree"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ROTATE_MAX_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5


@dataclass(frozen=True)
class LogSettings:
    level: int
    console_level: int
    to_file: bool
    rotate: bool
    log_dir: Path
    master_file: str

    @classmethod
    def from_config(cls) -> "LogSettings":
        cfg = get_config()
        section = cfg.logging
        debug = bool(cfg.debug)

        level = getattr(logging, str(section.get("level", "INFO")).upper(), logging.INFO)
        log_dir = Path(section.get("dir") or cfg.paths.get("logs_dir") or "logs")
        log_dir = project_path(log_dir)

        return cls(
            level=logging.DEBUG if debug else level,
            console_level=logging.DEBUG if debug else logging.WARNING,
            to_file=bool(section.get("to_file", False)),
            rotate=bool(section.get("rotate", False)),
            log_dir=log_dir,
            master_file=section.get("file", "gedtree.log"),
        )


_settings: Optional[LogSettings] = None
_loggers: Dict[str, Logger] = {}


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def _file_handler(settings: LogSettings, filename: str) -> logging.Handler:
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    path = settings.log_dir / filename
    if settings.rotate:
        handler: logging.Handler = RotatingFileHandler(
            path, maxBytes=ROTATE_MAX_BYTES, backupCount=ROTATE_BACKUPS, encoding="utf-8"
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(settings.level)
    handler.setFormatter(_formatter())
    return handler


def _setup() -> LogSettings:
    """Attach handlers to the base logger the first time a logger is requested."""
    global _settings
    if _settings is not None:
        return _settings

    settings = LogSettings.from_config()
    base = logging.getLogger(BASE_LOGGER_NAME)
    base.setLevel(settings.level)
    base.propagate = False

    if settings.to_file:
        base.addHandler(_file_handler(settings, settings.master_file))

    console = StreamHandler()
    console.setLevel(settings.console_level)
    console.setFormatter(_formatter())
    base.addHandler(console)

    _settings = settings
    return settings


def _qualified(name: Optional[str]) -> str:
    if not name or name == BASE_LOGGER_NAME:
        return BASE_LOGGER_NAME
    if name.startswith(BASE_LOGGER_NAME + "."):
        return name
    return f"{BASE_LOGGER_NAME}.{name}"


def get_logger(name: str | None = None) -> Logger:
    """Return the ``gedtree``-namespaced logger for ``name``."""
    settings = _setup()
    qualified = _qualified(name)
    logger = logging.getLogger(qualified)
    logger.setLevel(settings.level)

    if qualified != BASE_LOGGER_NAME:
        logger.propagate = True
        has_own_file = any(getattr(h, "gedtree_module_file", False) for h in logger.handlers)
        if settings.to_file and not has_own_file:
            handler = _file_handler(settings, f"{qualified.replace('.', '_')}.log")
            handler.gedtree_module_file = True  # type: ignore[attr-defined]
            logger.addHandler(handler)

    _loggers[qualified] = logger
    return logger


def list_active_loggers() -> List[str]:
    """Names of every logger handed out so far."""
    return list(_loggers)
