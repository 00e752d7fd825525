"""Observability – metrics ports."""
from mp_elasticsearch.observability.metrics.ports import Counter, Histogram, Metrics
from mp_elasticsearch.observability.metrics.noop import NoopMetrics
from mp_elasticsearch.observability.metrics.search import SearchMetrics

__all__ = ["Counter", "Histogram", "Metrics", "NoopMetrics", "SearchMetrics"]
