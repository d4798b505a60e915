"""
Package logging.

A single ``seqview`` logger shared by every component. The engine only emits
debug records (width selection, policy fallbacks, range degeneration), so the
default level keeps it silent.

Usage::

    from ._logging import scoped_logger

    log = scoped_logger("reducer")
    log.debug("chunk width %d", width)

Environment::

    SEQVIEW_LOG_LEVEL=debug|info|warn|error|off (default: warn)
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, MutableMapping, Union

from .constants import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL

__all__ = ["logger", "setup_logging", "scoped_logger"]


# =============================================================================
# Level Mapping
# =============================================================================

_NAME_TO_LEVEL = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "off": logging.CRITICAL + 10,
    "none": logging.CRITICAL + 10,
}

_LEVEL_TO_SEVERITY = {
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
    logging.CRITICAL: "FATAL",
}


# =============================================================================
# Formatter
# =============================================================================

class HumanFormatter(logging.Formatter):
    """``HH:MM:SS LEVEL [scope] message`` on a single line."""

    def format(self, record: logging.LogRecord) -> str:
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        severity = _LEVEL_TO_SEVERITY.get(record.levelno, "INFO")
        scope = getattr(record, "scope", None) or record.name.split(".")[-1]
        line = f"{dt.strftime('%H:%M:%S')} {severity:<5} [{scope}] {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


# =============================================================================
# Logger Setup
# =============================================================================

def _parse_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    return _NAME_TO_LEVEL.get(level.lower(), logging.WARNING)


def _create_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(HumanFormatter())
    return handler


logger = logging.getLogger("seqview")


def _setup_default_handler() -> None:
    """Attach the default handler unless the application already did."""
    if logger.handlers:
        return
    logger.addHandler(_create_handler())
    logger.setLevel(_parse_level(os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)))


def setup_logging(level: Union[str, int] = "info") -> None:
    """
    Reconfigure seqview logging.

    Args:
        level: Level name ("debug", "info", "warn", "error", "off") or a
            ``logging`` constant.

    Example:
        >>> import seqview
        >>> seqview.setup_logging("debug")
    """
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.addHandler(_create_handler())
    logger.setLevel(_parse_level(level))


class _ScopedLoggerAdapter(logging.LoggerAdapter):
    """Merges a fixed ``scope`` into every record's extra attributes."""

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> tuple[str, MutableMapping[str, Any]]:
        extra = dict(self.extra) if self.extra else {}
        if "extra" in kwargs:
            extra.update(kwargs["extra"])
        kwargs["extra"] = extra
        return msg, kwargs


def scoped_logger(scope: str) -> logging.LoggerAdapter:
    """Logger adapter that tags records with ``scope`` (e.g. "counter")."""
    return _ScopedLoggerAdapter(logger, {"scope": scope})


_setup_default_handler()
