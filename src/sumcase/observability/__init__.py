"""Observability: stdlib logging configured from sumcase settings."""

from .logging import ROOT_LOGGER, JsonFormatter, configure_logging, get_logger

__all__ = ["ROOT_LOGGER", "JsonFormatter", "configure_logging", "get_logger"]
