"""Observability – structured logging helpers."""
from optionkit.observability.logging.factory import JsonLoggerFactory
from optionkit.observability.logging.processors import get_logger

__all__ = [
    "JsonLoggerFactory",
    "get_logger",
]
