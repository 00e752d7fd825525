"""Application search – FilterCompiler.

Compiles an OR-of-ANDs :data:`FilterExpression` into an Elasticsearch bool
query tree::

    [[a == 1, b > 2], [c == 3]]
    -> {"bool": {"should": [
           {"bool": {"must": [{"term": {"a": 1}}, {"range": {"b": {"gt": 2}}}]}},
           {"term": {"c": 3}},
       ]}}

Single clauses are never wrapped, so compiled queries stay minimal and can be
compared structurally.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from mp_elasticsearch.application.search.request import (
    FilterCondition,
    FilterExpression,
    FilterOperator,
)
from mp_elasticsearch.kernel.errors import UnsupportedOperatorError

__all__ = ["ID_ATTRIBUTE", "FilterCompiler"]

ID_ATTRIBUTE = "_id"

_RANGE_BOUNDS: dict[FilterOperator, str] = {
    FilterOperator.GREATER: "gt",
    FilterOperator.GREATER_OR_EQUAL: "gte",
    FilterOperator.LESS: "lt",
    FilterOperator.LESS_OR_EQUAL: "lte",
}


def _coerce_operator(operator: Any) -> FilterOperator:
    try:
        return FilterOperator(operator)
    except ValueError:
        raise UnsupportedOperatorError(str(getattr(operator, "value", operator))) from None


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


class FilterCompiler:
    """Stateless; one instance can be shared between concurrent requests."""

    def compile(self, expression: FilterExpression | None) -> dict[str, Any] | None:
        if not expression:
            return None
        clauses = [c for c in (self.compile_group(group) for group in expression) if c is not None]
        return _combine(clauses, "should")

    def compile_group(self, conditions: Sequence[FilterCondition]) -> dict[str, Any] | None:
        """Compile one AND-group; id and range conditions on one attribute share a clause."""
        by_attribute: dict[str, list[FilterCondition]] = {}
        for condition in conditions:
            by_attribute.setdefault(condition.attribute, []).append(condition)

        clauses = [
            clause
            for attribute, grouped in by_attribute.items()
            for clause in self._attribute_clauses(attribute, grouped)
        ]
        return _combine(clauses, "must")

    def _attribute_clauses(
        self, attribute: str, conditions: Sequence[FilterCondition]
    ) -> list[dict[str, Any]]:
        clauses: list[dict[str, Any]] = []
        ids: list[Any] | None = None
        bounds: dict[str, Any] | None = None
        for condition in conditions:
            operator, value = _coerce_operator(condition.operator), condition.value
            match operator:
                case FilterOperator.EQUAL if attribute == ID_ATTRIBUTE:
                    if ids is None:
                        ids = []
                        clauses.append({"ids": {"values": ids}})
                    if _is_sequence(value):
                        ids.extend(value)
                    else:
                        ids.append(value)
                case FilterOperator.EQUAL if _is_sequence(value):
                    clauses.append({"terms": {attribute: list(value)}})
                case FilterOperator.EQUAL:
                    clauses.append({"term": {attribute: value}})
                case (
                    FilterOperator.GREATER
                    | FilterOperator.GREATER_OR_EQUAL
                    | FilterOperator.LESS
                    | FilterOperator.LESS_OR_EQUAL
                ):
                    if bounds is None:
                        bounds = {}
                        clauses.append({"range": {attribute: bounds}})
                    bounds[_RANGE_BOUNDS[operator]] = value
        return clauses


def _combine(clauses: list[dict[str, Any]], occur: str) -> dict[str, Any] | None:
    if len(clauses) > 1:
        return {"bool": {occur: clauses}}
    if clauses:
        return clauses[0]
    return None
