"""Observability – kblog's own logging."""

from kblog.observability.logging import Logger, LoggerFactory, get_logger

__all__ = [
    "Logger",
    "LoggerFactory",
    "get_logger",
]
