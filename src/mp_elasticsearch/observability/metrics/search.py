"""Observability – instruments recorded by the Elasticsearch data source."""
from __future__ import annotations

from mp_elasticsearch.observability.metrics.ports import Metrics

QUERIES_COUNTER = "data_source_queries"
FAILURES_COUNTER = "data_source_query_failures"
TOOK_HISTOGRAM = "search_took_ms"


class SearchMetrics:
    """Binds the data source instruments once so each call only records."""

    def __init__(self, metrics: Metrics, index_label: str = "index") -> None:
        self._queries = metrics.counter(QUERIES_COUNTER, "Search requests sent to Elasticsearch")
        self._failures = metrics.counter(FAILURES_COUNTER, "Search requests that raised")
        self._took = metrics.histogram(TOOK_HISTOGRAM, "Engine-reported search time", unit="ms")
        self._index_label = index_label

    def query_sent(self, index: str) -> None:
        self._queries.add(1, {self._index_label: index})

    def query_failed(self, index: str, error: BaseException) -> None:
        self._failures.add(1, {self._index_label: index, "error": type(error).__name__})

    def took(self, index: str, took_ms: float | None) -> None:
        if took_ms is not None:
            self._took.record(float(took_ms), {self._index_label: index})


__all__ = ["FAILURES_COUNTER", "QUERIES_COUNTER", "TOOK_HISTOGRAM", "SearchMetrics"]
