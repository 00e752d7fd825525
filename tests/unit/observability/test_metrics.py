"""Unit tests for observability metrics."""

from __future__ import annotations

from mp_elasticsearch.observability.metrics import NoopMetrics, SearchMetrics
from mp_elasticsearch.observability.metrics.search import FAILURES_COUNTER, QUERIES_COUNTER, TOOK_HISTOGRAM
from mp_elasticsearch.testing import FakeMetricsRegistry


class TestNoopMetrics:
    def test_instruments_accept_calls(self) -> None:
        metrics = NoopMetrics()
        metrics.counter("c").add(1, {"a": "b"})
        metrics.histogram("h").record(3.0)


class TestSearchMetrics:
    def test_query_sent_labels_index(self) -> None:
        registry = FakeMetricsRegistry()
        SearchMetrics(registry).query_sent("funds")
        assert registry.counter(QUERIES_COUNTER).calls == [(1, {"index": "funds"})]

    def test_query_failed_labels_error_type(self) -> None:
        registry = FakeMetricsRegistry()
        SearchMetrics(registry).query_failed("funds", TimeoutError())
        assert registry.counter(FAILURES_COUNTER).calls == [(1, {"index": "funds", "error": "TimeoutError"})]

    def test_took_skips_missing_values(self) -> None:
        registry = FakeMetricsRegistry()
        search_metrics = SearchMetrics(registry)
        search_metrics.took("funds", None)
        search_metrics.took("funds", 4)
        assert registry.histogram(TOOK_HISTOGRAM).values == [4.0]

    def test_custom_index_label(self) -> None:
        registry = FakeMetricsRegistry()
        SearchMetrics(registry, index_label="es_index").query_sent("funds")
        assert registry.counter(QUERIES_COUNTER).calls == [(1, {"es_index": "funds"})]


class TestFakeMetricsRegistry:
    def test_same_instrument_returned_by_name(self) -> None:
        registry = FakeMetricsRegistry()
        assert registry.counter("x") is registry.counter("x")

    def test_reset_clears_instruments(self) -> None:
        registry = FakeMetricsRegistry()
        registry.counter("x").add()
        registry.reset()
        assert registry.counter("x").total == 0.0
