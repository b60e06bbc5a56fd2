"""Observability – structured logging helpers."""
from edge_messaging.observability.logging.factory import JsonLoggerFactory
from edge_messaging.observability.logging.filters import SensitiveFieldsFilter
from edge_messaging.observability.logging.processors import get_logger

__all__ = [
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
