"""Testing support – in-memory fakes for the search transport and metrics.

Usage::

    from mp_elasticsearch.testing import FakeSearchTransport
"""

from mp_elasticsearch.testing.fakes import FakeBadRequestError, FakeMetricsRegistry, FakeSearchTransport

__all__ = ["FakeBadRequestError", "FakeMetricsRegistry", "FakeSearchTransport"]
