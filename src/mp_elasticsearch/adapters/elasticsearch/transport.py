"""Elasticsearch adapter – ElasticsearchTransport."""
from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from mp_elasticsearch.application.search.document import SearchQueryDocument

if TYPE_CHECKING:
    from mp_elasticsearch.config.settings import ElasticsearchSettings

# Removed from Elasticsearch; count-only searches are expressed as size=0.
_LEGACY_SEARCH_TYPES = frozenset({"count", "scan"})
_BODY_KEYS = {"query": "query", "aggs": "aggs", "sort": "sort", "from": "from_", "size": "size"}


def _require_elasticsearch() -> Any:
    try:
        import elasticsearch
        return elasticsearch
    except ImportError as exc:
        raise ImportError("Install 'mp-elasticsearch[elasticsearch]' to use the Elasticsearch adapter") from exc


class ElasticsearchTransport:
    """:class:`SearchTransport` backed by ``elasticsearch.AsyncElasticsearch``.

    The client owns connection pooling, timeouts and node selection; this
    adapter only maps a :class:`SearchQueryDocument` onto ``client.search``.
    """

    def __init__(self, client: Any = None, **client_options: Any) -> None:
        es = _require_elasticsearch()
        self._client = client if client is not None else es.AsyncElasticsearch(**client_options)

    @classmethod
    def from_settings(cls, settings: ElasticsearchSettings) -> ElasticsearchTransport:
        return cls(**settings.client_options())

    @property
    def client(self) -> Any:
        return self._client

    async def search(self, document: SearchQueryDocument) -> Mapping[str, Any]:
        response = await self._client.search(**self.search_kwargs(document))
        return getattr(response, "body", response)

    @staticmethod
    def search_kwargs(document: SearchQueryDocument) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"index": document.index}
        for key, argument in _BODY_KEYS.items():
            if key in document.body:
                kwargs[argument] = document.body[key]
        if document.source is not None:
            kwargs["source"] = document.source
        if document.search_type and document.search_type not in _LEGACY_SEARCH_TYPES:
            kwargs["search_type"] = document.search_type
        return kwargs

    def is_bad_request(self, error: BaseException) -> bool:
        es = _require_elasticsearch()
        return isinstance(error, es.ApiError) and error.meta.status == 400

    async def close(self) -> None:
        await self._client.close()

    async def __aenter__(self) -> ElasticsearchTransport:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()


__all__ = ["ElasticsearchTransport"]
