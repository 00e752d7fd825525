"""Elasticsearch adapter – SearchTransport over the official async client.

Requires the ``elasticsearch`` extra::

    pip install "mp-elasticsearch[elasticsearch]"
"""

from mp_elasticsearch.adapters.elasticsearch.transport import ElasticsearchTransport

__all__ = ["ElasticsearchTransport"]
