"""Application search – AggregationCompiler.

``count``/``values`` become ``terms`` bucket aggregations (children nest under
``terms.aggs``), ``min``/``max`` become metric aggregations. Aliases are
resolved by :func:`resolve_aliases`, which the result normalizer reuses to
read the response back.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from mp_elasticsearch.application.search.request import AggregateFunction, AggregateSpec
from mp_elasticsearch.kernel.errors import (
    AggregationAliasConflictError,
    InvalidAggregationError,
    UnsupportedAggregationError,
)

__all__ = ["BUCKET_KEYS", "AggregationCompiler", "resolve_aliases"]

# Keys a normalized bucket already carries; sub-aggregates cannot use them.
BUCKET_KEYS: frozenset[str] = frozenset({"key", "key_as_string", "doc_count", "count"})


def resolve_aliases(
    specs: Sequence[AggregateSpec], reserved: frozenset[str] = frozenset()
) -> list[tuple[str, AggregateSpec]]:
    """Pair each spec with its alias; unnamed specs use their sibling index.

    Raises :class:`AggregationAliasConflictError` when two siblings resolve to
    the same alias or an alias is in *reserved*. The specs themselves are left
    untouched.
    """
    resolved: list[tuple[str, AggregateSpec]] = []
    seen: set[str] = set()
    for position, spec in enumerate(specs):
        alias = spec.alias if spec.alias else str(position)
        if alias in seen or alias in reserved:
            raise AggregationAliasConflictError(spec.function_name, alias)
        seen.add(alias)
        resolved.append((alias, spec))
    return resolved


def _coerce_function(function_name: Any) -> AggregateFunction:
    try:
        return AggregateFunction(function_name)
    except ValueError:
        raise UnsupportedAggregationError(str(getattr(function_name, "value", function_name))) from None


def _bucket_size(function: AggregateFunction, limit: int | str) -> int:
    try:
        return int(limit)
    except ValueError:
        raise InvalidAggregationError(
            function.value, f"Invalid {function.value} aggregation: limit {limit!r} is not a number"
        ) from None


class AggregationCompiler:
    def compile(
        self, specs: Sequence[AggregateSpec], reserved: frozenset[str] = frozenset()
    ) -> dict[str, dict[str, Any]]:
        return {alias: self.compile_one(spec) for alias, spec in resolve_aliases(specs, reserved)}

    def compile_one(self, spec: AggregateSpec) -> dict[str, Any]:
        function = _coerce_function(spec.function_name)
        if len(spec.fields) != 1:
            raise InvalidAggregationError(function.value)
        field = spec.fields[0]

        match function:
            case AggregateFunction.COUNT | AggregateFunction.VALUES:
                terms: dict[str, Any] = {"field": field}
                if spec.limit:
                    terms["size"] = _bucket_size(function, spec.limit)
                if spec.children:
                    terms["aggs"] = self.compile(spec.children, BUCKET_KEYS)
                return {"terms": terms}
            case AggregateFunction.MIN | AggregateFunction.MAX:
                if spec.children:
                    raise InvalidAggregationError(
                        function.value,
                        f"Invalid {function.value} aggregation: metric aggregations cannot have sub-aggregations",
                    )
                return {function.value: {"field": field}}
