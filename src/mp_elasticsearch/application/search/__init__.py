"""Application search – request model, query compilation, result normalization."""
from mp_elasticsearch.application.search.aggregations import AggregationCompiler, resolve_aliases
from mp_elasticsearch.application.search.assembler import FALLBACK_SIZE, QueryAssembler
from mp_elasticsearch.application.search.datasource import ElasticsearchDataSource, SearchTransport
from mp_elasticsearch.application.search.document import SearchQueryDocument
from mp_elasticsearch.application.search.filters import FilterCompiler
from mp_elasticsearch.application.search.normalizer import ResultNormalizer, flatten_keys
from mp_elasticsearch.application.search.request import (
    UNLIMITED,
    AggregateFunction,
    AggregateSpec,
    FilterCondition,
    FilterExpression,
    FilterOperator,
    OrderCriterion,
    QueryOptions,
    SearchRequest,
)
from mp_elasticsearch.application.search.result import ResultSet

__all__ = [
    "FALLBACK_SIZE",
    "UNLIMITED",
    "AggregateFunction",
    "AggregateSpec",
    "AggregationCompiler",
    "ElasticsearchDataSource",
    "FilterCompiler",
    "FilterCondition",
    "FilterExpression",
    "FilterOperator",
    "OrderCriterion",
    "QueryAssembler",
    "QueryOptions",
    "ResultNormalizer",
    "ResultSet",
    "SearchQueryDocument",
    "SearchRequest",
    "SearchTransport",
    "flatten_keys",
    "resolve_aliases",
]
