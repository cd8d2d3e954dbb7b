"""Logging utilities (simple wrapper)."""

from __future__ import annotations
import logging
from typing import Optional

_LOGGER: Optional[logging.Logger] = None


def get_logger() -> logging.Logger:
    global _LOGGER
    if _LOGGER is None:
        logger = logging.getLogger("video_player")
        handler = logging.StreamHandler()
        fmt = logging.Formatter("[%(asctime)s] %(levelname)s %(message)s")
        handler.setFormatter(fmt)
        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)
        _LOGGER = logger
    return _LOGGER


def set_level(level: str | int) -> None:
    """Adjust the package logger level ("DEBUG", "INFO", ... or a number)."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level '{level}'")
        level = resolved
    get_logger().setLevel(level)


__all__ = ["get_logger", "set_level"]
