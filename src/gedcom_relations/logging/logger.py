"""
Shared logging setup for gedcom-relations.

All loggers hang off the ``gedcom_relations`` base logger, which owns a
console handler and (unless ``logging.to_file`` is false) the master log
file. Each module logger additionally writes ``<module>.log`` next to it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional

from gedcom_relations.config import get_config

BASE_LOGGER_NAME = "gedcom_relations"
PROJECT_ROOT = Path(__file__).resolve().parents[3]
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ROTATE_MAX_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5


@dataclass(frozen=True)
class LogSettings:
    level: int
    log_dir: Path
    master_file: str
    rotate: bool
    to_file: bool

    @classmethod
    def from_config(cls) -> "LogSettings":
        cfg = get_config()
        section = cfg.logging

        level = getattr(logging, str(section.get("level", "INFO")).upper(), logging.INFO)
        if cfg.debug:
            level = logging.DEBUG

        log_dir = Path(section.get("dir") or cfg.paths.get("logs_dir") or "logs")
        if not log_dir.is_absolute():
            log_dir = PROJECT_ROOT / log_dir

        return cls(
            level=level,
            log_dir=log_dir,
            master_file=section.get("file", "gedcom_relations.log"),
            rotate=bool(section.get("rotate", False)),
            to_file=bool(section.get("to_file", True)),
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


def _setup_base() -> LogSettings:
    global _settings
    if _settings is not None:
        return _settings

    settings = LogSettings.from_config()
    base = logging.getLogger(BASE_LOGGER_NAME)
    base.setLevel(settings.level)
    base.propagate = False

    if settings.to_file:
        base.addHandler(_file_handler(settings, settings.master_file))

    console = logging.StreamHandler()
    console.setLevel(settings.level)
    console.setFormatter(_formatter())
    base.addHandler(console)

    _settings = settings
    return settings


def get_logger(name: str | None = None) -> Logger:
    """
    Return a logger wired to the shared handlers.

    Calling it again for the same name returns the same logger without
    adding handlers twice.
    """
    settings = _setup_base()
    logger_name = name or BASE_LOGGER_NAME
    logger = logging.getLogger(logger_name)
    logger.setLevel(settings.level)

    if logger_name != BASE_LOGGER_NAME:
        logger.propagate = True
        has_own_file = any(getattr(h, "is_module_handler", False) for h in logger.handlers)
        if settings.to_file and not has_own_file:
            handler = _file_handler(settings, f"{logger_name.replace('.', '_')}.log")
            handler.is_module_handler = True  # type: ignore[attr-defined]
            logger.addHandler(handler)

    _loggers[logger_name] = logger
    return logger


def list_active_loggers() -> List[str]:
    """Names handed out by ``get_logger`` so far."""
    return list(_loggers)
