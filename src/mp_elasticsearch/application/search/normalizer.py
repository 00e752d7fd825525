"""Application search – ResultNormalizer.

Flattens hits into dotted-key rows and inverts the aggregation compilation,
driven by the aggregate specs of the original request.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from mp_elasticsearch.application.search.aggregations import BUCKET_KEYS, resolve_aliases
from mp_elasticsearch.application.search.request import AggregateFunction, AggregateSpec
from mp_elasticsearch.application.search.result import ResultSet

__all__ = ["ResultNormalizer", "flatten_keys"]


def flatten_keys(obj: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    """``{"team": {"id": 2}}`` -> ``{"team.id": 2}``. Lists are kept as values."""
    flat: dict[str, Any] = {}
    for key, value in obj.items():
        path = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(flatten_keys(value, f"{path}."))
        else:
            flat[path] = value
    return flat


class ResultNormalizer:
    def normalize(
        self,
        response: Mapping[str, Any],
        aggregates: Sequence[AggregateSpec] | None = None,
    ) -> ResultSet:
        hits = response.get("hits") or {}
        aggregations: dict[str, Any] = {}
        if aggregates:
            aggregations = self.invert_aggregations(aggregates, response.get("aggregations"))
        return ResultSet(
            rows=tuple(self.to_row(hit) for hit in hits.get("hits") or ()),
            total_count=self.total_count(hits),
            aggregations=aggregations,
        )

    @staticmethod
    def to_row(hit: Mapping[str, Any]) -> dict[str, Any]:
        document: dict[str, Any] = dict(hit.get("_source") or {})
        document["_id"] = hit.get("_id")
        if hit.get("_type") is not None:
            document["_type"] = hit["_type"]
        return flatten_keys(document)

    @staticmethod
    def total_count(hits: Mapping[str, Any]) -> int | None:
        total = hits.get("total")
        if isinstance(total, Mapping):
            return total.get("value")
        # Elasticsearch < 7 reports a bare integer
        if isinstance(total, int) and not isinstance(total, bool):
            return total
        return None

    def invert_aggregations(
        self,
        aggregates: Sequence[AggregateSpec],
        raw: Mapping[str, Any] | None,
        reserved: frozenset[str] = frozenset(),
    ) -> dict[str, Any]:
        raw = raw or {}
        return {
            alias: self._invert(spec, raw.get(alias))
            for alias, spec in resolve_aliases(aggregates, reserved)
        }

    def _invert(self, spec: AggregateSpec, raw: Mapping[str, Any] | None) -> Any:
        if raw is None:
            return None
        match AggregateFunction(spec.function_name):
            case AggregateFunction.COUNT:
                return [self._bucket(spec, bucket) for bucket in raw.get("buckets") or ()]
            case AggregateFunction.VALUES:
                return [bucket.get("key") for bucket in raw.get("buckets") or ()]
            case AggregateFunction.MIN | AggregateFunction.MAX:
                return raw.get("value")

    def _bucket(self, spec: AggregateSpec, bucket: Mapping[str, Any]) -> dict[str, Any]:
        result = {k: v for k, v in bucket.items() if k != "doc_count"}
        result["count"] = bucket.get("doc_count")
        if spec.children:
            result.update(self.invert_aggregations(spec.children, bucket, BUCKET_KEYS))
        return result
