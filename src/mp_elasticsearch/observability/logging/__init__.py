"""Observability – structured logging helpers."""
from mp_elasticsearch.observability.logging.protocol import Logger
from mp_elasticsearch.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from mp_elasticsearch.observability.logging.factory import JsonLoggerFactory
from mp_elasticsearch.observability.logging.processors import drop_search_bodies, get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "Logger",
    "SensitiveFieldsFilter",
    "drop_search_bodies",
    "get_logger",
]
