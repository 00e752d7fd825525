"""Application search – QueryAssembler.

Turns a :class:`SearchRequest` into the :class:`SearchQueryDocument` sent to
Elasticsearch: filter and free-text query, aggregations, sort, pagination and
``_source`` projection.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from mp_elasticsearch.application.search.aggregations import AggregationCompiler
from mp_elasticsearch.application.search.document import SearchQueryDocument
from mp_elasticsearch.application.search.filters import FilterCompiler
from mp_elasticsearch.application.search.request import (
    OrderCriterion,
    QueryOptions,
    SearchRequest,
)

__all__ = ["FALLBACK_SIZE", "SCORE_SORT", "QueryAssembler"]

# Elasticsearch has no "no limit"; this caps unlimited requests.
FALLBACK_SIZE = 1_000_000
SCORE_SORT = "_score"
ALL_FIELDS = "_all"


class QueryAssembler:
    def __init__(
        self,
        filter_compiler: FilterCompiler | None = None,
        aggregation_compiler: AggregationCompiler | None = None,
    ) -> None:
        self._filters = filter_compiler or FilterCompiler()
        self._aggregations = aggregation_compiler or AggregationCompiler()

    def assemble(self, request: SearchRequest) -> SearchQueryDocument:
        body: dict[str, Any] = {"size": page_size(request.limit)}
        search_type: str | None = None

        if request.page:
            body["from"] = (request.page - 1) * body["size"]

        query = self._build_query(request)
        if query is not None:
            body["query"] = query

        if request.aggregates:
            body["aggs"] = self._aggregations.compile(request.aggregates)
            if not request.limit:
                body["size"] = 0
                search_type = "count"

        if request.order:
            body["sort"] = build_sort(request.order, request.query_options.sort_map)

        return SearchQueryDocument(
            index=request.index,
            body=body,
            source=build_source(request.attributes),
            search_type=search_type,
        )

    def _build_query(self, request: SearchRequest) -> dict[str, Any] | None:
        filter_query = self._filters.compile(request.filter)

        text_query: Mapping[str, Any] | None = request.elasticsearch_query
        if text_query is None and request.search:
            text_query = build_text_query(request.search, request.query_options)

        if filter_query is not None and text_query:
            return {"bool": {"must": [filter_query, dict(text_query)]}}
        if text_query:
            return dict(text_query)
        return filter_query


def page_size(limit: Any) -> int:
    # bool is an int subclass but never a page size
    if isinstance(limit, int) and not isinstance(limit, bool):
        return limit
    return FALLBACK_SIZE


def build_text_query(search: str, options: QueryOptions) -> dict[str, Any]:
    """Phrase-prefix match over the boosted fields, optionally score-adjusted."""
    query: dict[str, Any] = {
        "multi_match": {
            "type": "phrase_prefix",
            "query": search,
            "fields": list(options.boost) if options.boost else [ALL_FIELDS],
        }
    }
    if options.field_value_factor:
        query = {
            "function_score": {
                "query": query,
                "field_value_factor": dict(options.field_value_factor),
            }
        }
    return query


def build_sort(
    order: Sequence[OrderCriterion], sort_map: Mapping[str, str] | None = None
) -> list[Any]:
    sort_map = sort_map or {}
    sort: list[Any] = [
        {sort_map.get(criterion.attribute) or criterion.attribute: criterion.direction}
        for criterion in order
    ]
    sort.append(SCORE_SORT)
    return sort


def build_source(attributes: Sequence[str]) -> list[str] | None:
    """Map requested attributes to ``_source`` includes.

    Nested attributes project their whole top-level object (``team.id`` ->
    ``team.*``).
    """
    if not attributes:
        return None
    source: list[str] = []
    for attribute in attributes:
        path = f"{attribute.split('.', 1)[0]}.*" if "." in attribute else attribute
        if path not in source:
            source.append(path)
    return source
