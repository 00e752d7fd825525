"""Compilation errors — malformed search requests.

Raised synchronously while a request is translated into an Elasticsearch
search document. They describe caller input, so retrying never helps.
"""

from __future__ import annotations

from typing import Any

from mp_elasticsearch.kernel.errors.base import BaseError


class QueryCompilationError(BaseError):
    """The request cannot be expressed as an Elasticsearch query."""

    default_code = "query_compilation_error"


class UnsupportedOperatorError(QueryCompilationError):
    """A filter condition uses an operator the filter compiler cannot translate."""

    default_code = "unsupported_operator"

    def __init__(self, operator: str, **kwargs: Any) -> None:
        super().__init__(
            f'Operator "{operator}" not implemented',
            detail={"operator": operator},
            **kwargs,
        )
        self.operator = operator


class InvalidAggregationError(QueryCompilationError):
    """An aggregate specification is structurally invalid."""

    default_code = "invalid_aggregation"

    def __init__(
        self,
        function_name: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message or f"Invalid {function_name} aggregation: requires exactly one field",
            detail={"function_name": function_name},
            **kwargs,
        )
        self.function_name = function_name


class AggregationAliasConflictError(InvalidAggregationError):
    """An alias is already taken by a sibling aggregate or by a bucket key."""

    default_code = "aggregation_alias_conflict"

    def __init__(self, function_name: str, alias: str, **kwargs: Any) -> None:
        super().__init__(
            function_name,
            f"Invalid {function_name} aggregation: alias '{alias}' is already in use",
            **kwargs,
        )
        self.detail["alias"] = alias
        self.alias = alias


class UnsupportedAggregationError(QueryCompilationError):
    """The aggregate function has no Elasticsearch counterpart."""

    default_code = "unsupported_aggregation"

    def __init__(self, function_name: str, **kwargs: Any) -> None:
        super().__init__(
            f"Unsupported aggregate function: {function_name}",
            detail={"function_name": function_name},
            **kwargs,
        )
        self.function_name = function_name


__all__ = [
    "AggregationAliasConflictError",
    "InvalidAggregationError",
    "QueryCompilationError",
    "UnsupportedAggregationError",
    "UnsupportedOperatorError",
]
