"""Logging setup for the ``sumcase`` logger tree.

The library is silent by default: the package logger carries only a
NullHandler until the application calls configure_logging().

Quick Start:
    >>> from sumcase.observability import configure_logging, get_logger
    >>>
    >>> configure_logging()          # level/format from SUMCASE_LOG_* env
    >>> log = get_logger("adapter")  # -> logging.getLogger("sumcase.adapter")
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, TextIO

import orjson

from ..foundation.config import get_settings

if TYPE_CHECKING:
    from ..foundation.config import SumcaseSettings

ROOT_LOGGER = "sumcase"

# Attribute set on handlers installed by configure_logging, so re-configuring replaces them
_HANDLER_MARK = "_sumcase_handler"

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger under the sumcase namespace. ``get_logger("adapter")`` -> ``sumcase.adapter``."""
    if not name or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


class JsonFormatter(logging.Formatter):
    """JSON Lines output, one object per record."""

    def __init__(self, *, include_timestamps: bool = True) -> None:
        super().__init__()
        self.include_timestamps = include_timestamps

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
        }
        if self.include_timestamps:
            payload["timestamp"] = datetime.fromtimestamp(record.created, UTC).isoformat()
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=str).decode()


def _text_formatter(include_timestamps: bool) -> logging.Formatter:
    fmt = "[%(levelname)s] %(name)s: %(message)s"
    return logging.Formatter(f"%(asctime)s {fmt}" if include_timestamps else fmt)


def configure_logging(
    settings: SumcaseSettings | None = None,
    *,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Attach a stream handler to the sumcase logger per settings.

    Calling it again replaces the handler it installed before, so it is
    safe to re-run after settings change.

    Args:
        settings: Settings to use (defaults to get_settings())
        stream: Output stream (defaults to stderr)

    Returns:
        The installed handler
    """
    settings = settings or get_settings()
    log_cfg = settings.logging

    handler = logging.StreamHandler(stream or sys.stderr)
    if log_cfg.format == "json":
        handler.setFormatter(JsonFormatter(include_timestamps=log_cfg.include_timestamps))
    else:
        handler.setFormatter(_text_formatter(log_cfg.include_timestamps))
    setattr(handler, _HANDLER_MARK, True)

    logger = logging.getLogger(ROOT_LOGGER)
    for old in [h for h in logger.handlers if getattr(h, _HANDLER_MARK, False)]:
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(settings.effective_log_level)
    return handler
