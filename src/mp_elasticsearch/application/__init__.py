"""Application – search request compilation and execution (framework-agnostic)."""

from mp_elasticsearch.application.search import (
    ElasticsearchDataSource,
    QueryAssembler,
    ResultNormalizer,
    ResultSet,
    SearchRequest,
)

__all__ = [
    "ElasticsearchDataSource",
    "QueryAssembler",
    "ResultNormalizer",
    "ResultSet",
    "SearchRequest",
]
