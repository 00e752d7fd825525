"""Application search – ElasticsearchDataSource and the SearchTransport port."""
from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from mp_elasticsearch.application.search.assembler import QueryAssembler
from mp_elasticsearch.application.search.document import SearchQueryDocument
from mp_elasticsearch.application.search.normalizer import ResultNormalizer
from mp_elasticsearch.application.search.request import QueryOptions, SearchRequest
from mp_elasticsearch.application.search.result import ResultSet
from mp_elasticsearch.kernel.errors import RequestError
from mp_elasticsearch.observability.logging import Logger, get_logger
from mp_elasticsearch.observability.metrics import Metrics, NoopMetrics, SearchMetrics

if TYPE_CHECKING:
    from mp_elasticsearch.config.settings import ElasticsearchSettings

__all__ = ["ElasticsearchDataSource", "SearchTransport"]

EXPLAIN_KEY = "elasticsearch"


@runtime_checkable
class SearchTransport(Protocol):
    """Port: performs the network round trip to the search engine."""

    async def search(self, document: SearchQueryDocument) -> Mapping[str, Any]: ...

    def is_bad_request(self, error: BaseException) -> bool:
        """Return ``True`` when *error* is the engine rejecting the query itself."""
        ...

    async def close(self) -> None: ...


class ElasticsearchDataSource:
    """Compiles a :class:`SearchRequest`, runs it once, normalizes the response.

    Usage::

        datasource = ElasticsearchDataSource.from_settings(settings)
        options = datasource.prepare({"boost": "name^5,description"})
        result = await datasource.execute(
            SearchRequest(index="funds", search="glob", query_options=options, limit=10)
        )

    There is no retry: a bad request becomes :class:`RequestError`, every
    other transport failure propagates unchanged.
    """

    def __init__(
        self,
        transport: SearchTransport,
        *,
        assembler: QueryAssembler | None = None,
        normalizer: ResultNormalizer | None = None,
        metrics: Metrics | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._transport = transport
        self._assembler = assembler or QueryAssembler()
        self._normalizer = normalizer or ResultNormalizer()
        self._metrics = SearchMetrics(metrics or NoopMetrics())
        self._log = (logger or get_logger(__name__)).bind(component="datasource-elasticsearch")

    @classmethod
    def from_settings(cls, settings: ElasticsearchSettings, **kwargs: Any) -> ElasticsearchDataSource:
        from mp_elasticsearch.adapters.elasticsearch import ElasticsearchTransport

        return cls(ElasticsearchTransport.from_settings(settings), **kwargs)

    @staticmethod
    def prepare(resource_config: Mapping[str, Any] | None) -> QueryOptions:
        """Derive per-resource :class:`QueryOptions` ahead of any request."""
        return QueryOptions.from_config(resource_config)

    def compile(self, request: SearchRequest) -> SearchQueryDocument:
        return self._assembler.assemble(request)

    async def execute(self, request: SearchRequest) -> ResultSet:
        document = self.compile(request)
        self._metrics.query_sent(document.index)
        self._log.debug("search.compiled", index=document.index, search=document.to_dict())

        try:
            response = await self._transport.search(document)
        except Exception as exc:
            self._metrics.query_failed(document.index, exc)
            if self._transport.is_bad_request(exc):
                self._log.warning("search.rejected", index=document.index, error=type(exc).__name__)
                raise RequestError.from_engine_error(exc) from exc
            self._log.error("search.failed", index=document.index, error=repr(exc))
            raise

        result = self._normalizer.normalize(response, request.aggregates)
        self._metrics.took(document.index, response.get("took"))
        self._log.debug(
            "search.completed",
            index=document.index,
            took=response.get("took"),
            rows=len(result.rows),
            total_count=result.total_count,
        )
        if request.explain is not None:
            request.explain[EXPLAIN_KEY] = explain_payload(document, response)
        return result

    process = execute

    async def close(self) -> None:
        await self._transport.close()


def explain_payload(document: SearchQueryDocument, response: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "search": json.dumps(document.to_dict(), default=str),
        "took": response.get("took"),
        "_shards": response.get("_shards"),
        "timed_out": response.get("timed_out"),
    }
