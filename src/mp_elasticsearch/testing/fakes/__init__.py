"""Testing fakes – in-memory doubles for the data source ports."""
from mp_elasticsearch.testing.fakes.metrics import FakeMetricsRegistry
from mp_elasticsearch.testing.fakes.transport import FakeBadRequestError, FakeSearchTransport

__all__ = ["FakeBadRequestError", "FakeMetricsRegistry", "FakeSearchTransport"]
