"""Observability – structlog configuration and logger access."""
from kblog.observability.logging.factory import LoggerFactory
from kblog.observability.logging.processors import get_logger
from kblog.observability.logging.protocol import Logger

__all__ = [
    "Logger",
    "LoggerFactory",
    "get_logger",
]
