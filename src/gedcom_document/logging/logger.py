"""
Logging setup for gedcom_document.

Every module asks ``get_logger(__name__)`` for its logger. Loggers hang off
the ``gedcom_document`` base logger, which writes to the console and to a
master log file; each module additionally writes its own ``<module>.log``.
Levels, the log directory and rotation come from ``config/gedcom_document.yml``.
"""

from __future__ import annotations

import logging
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List

from gedcom_document.config import GPConfig, get_config

PROJECT_ROOT = Path(__file__).resolve().parents[3]
BASE_LOGGER_NAME = "gedcom_document"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ROTATE_MAX_BYTES = 5 * 1024 * 1024
ROTATE_BACKUPS = 5

_loggers: Dict[str, Logger] = {}
_level: int = logging.INFO
_log_dir: Path | None = None
_rotate: bool = False


def _level_from(cfg: GPConfig, key: str, default: str) -> int:
    name = str(cfg.logging.get(key, default)).upper()
    return getattr(logging, name, getattr(logging, default))


def _file_handler(path: Path) -> logging.Handler:
    if _rotate:
        handler: logging.Handler = RotatingFileHandler(
            path,
            maxBytes=ROTATE_MAX_BYTES,
            backupCount=ROTATE_BACKUPS,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _setup_base() -> Logger:
    """Attach the console and master-file handlers to the base logger, once."""
    global _level, _log_dir, _rotate

    base = logging.getLogger(BASE_LOGGER_NAME)
    if _log_dir is not None:
        return base

    cfg = get_config()
    _rotate = bool(cfg.logging.get("rotate", False))
    _level = logging.DEBUG if cfg.debug else _level_from(cfg, "level", "INFO")

    log_dir = Path(cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs")
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    _log_dir = log_dir

    base.setLevel(_level)
    base.propagate = False
    base.addHandler(_file_handler(log_dir / cfg.logging.get("file", "gedcom_document.log")))

    console = logging.StreamHandler()
    # diagnostics are logged at WARNING
    console.setLevel(logging.DEBUG if cfg.debug else _level_from(cfg, "console_level", "WARNING"))
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base.addHandler(console)
    return base


def get_logger(name: str | None = None) -> Logger:
    """
    Return the project logger for ``name``.

    Names outside the package are prefixed with ``gedcom_document.``, so
    ``get_logger("parser_core")`` and ``get_logger(__name__)`` both land
    under the base logger and share its handlers.
    """
    base = _setup_base()
    logger_name = name or BASE_LOGGER_NAME
    if not logger_name.startswith(BASE_LOGGER_NAME):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)
    logger.setLevel(_level)
    if logger is not base:
        filename = f"{logger_name.replace('.', '_')}.log"
        logger.addHandler(_file_handler(_log_dir / filename))  # type: ignore[operator]
        logger.propagate = True

    _loggers[logger_name] = logger
    return logger


def list_active_loggers() -> List[str]:
    """Names of the loggers handed out so far."""
    return list(_loggers)
