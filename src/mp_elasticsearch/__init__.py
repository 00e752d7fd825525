"""
mp_elasticsearch – Elasticsearch data source for the platform search API.

Import path convention::

    from mp_elasticsearch.application.search import ElasticsearchDataSource, SearchRequest
    from mp_elasticsearch.adapters.elasticsearch import ElasticsearchTransport
    from mp_elasticsearch.kernel.errors import RequestError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
