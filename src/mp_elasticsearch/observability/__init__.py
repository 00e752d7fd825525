"""Observability – logging and metrics."""

from mp_elasticsearch.observability.logging import JsonLoggerFactory, Logger, SensitiveFieldsFilter, get_logger
from mp_elasticsearch.observability.metrics import Metrics, NoopMetrics, SearchMetrics

__all__ = [
    "JsonLoggerFactory",
    "Logger",
    "Metrics",
    "NoopMetrics",
    "SearchMetrics",
    "SensitiveFieldsFilter",
    "get_logger",
]
