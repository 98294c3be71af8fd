# treezip/log.py
"""Logging setup for the treezip service."""

import logging
from dataclasses import dataclass
from typing import Dict

# string names accepted in TREEZIP_LOG_LEVEL
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

PACKAGE_LOGGER = "treezip"


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"
    fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"


def _resolve_level(name: str) -> int:
    return _LEVEL_MAP.get((name or "").upper(), logging.INFO)


def configure_logging(config: LoggingConfig = LoggingConfig()) -> logging.Logger:
    """Attach a single console handler to the package logger.

    Calling it again only updates the level, so app reloads do not stack
    handlers.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(_resolve_level(config.level))

    if not any(getattr(h, "_treezip", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(config.fmt, datefmt=config.datefmt))
        handler._treezip = True
        logger.addHandler(handler)

    return logger
