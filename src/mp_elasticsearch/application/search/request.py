"""Application search – normalized search request value objects."""
from __future__ import annotations

import json
from collections.abc import Mapping, MutableMapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal

from mp_elasticsearch.config.validation import InvalidSettingValueError

__all__ = [
    "UNLIMITED",
    "AggregateFunction",
    "AggregateSpec",
    "FilterCondition",
    "FilterExpression",
    "FilterOperator",
    "OrderCriterion",
    "QueryOptions",
    "SearchRequest",
]

UNLIMITED: Literal["unlimited"] = "unlimited"


class FilterOperator(str, Enum):
    EQUAL = "equal"
    GREATER = "greater"
    GREATER_OR_EQUAL = "greaterOrEqual"
    LESS = "less"
    LESS_OR_EQUAL = "lessOrEqual"


class AggregateFunction(str, Enum):
    COUNT = "count"
    VALUES = "values"
    MIN = "min"
    MAX = "max"


@dataclass(frozen=True)
class FilterCondition:
    """A single ``attribute <operator> value`` test.

    ``operator`` is a plain string; anything outside :class:`FilterOperator`
    is rejected by the filter compiler, not here.
    """
    attribute: str
    operator: str
    value: Any


FilterExpression = Sequence[Sequence[FilterCondition]]
"""OR across the outer sequence, AND inside each group."""


@dataclass(frozen=True)
class AggregateSpec:
    """A named aggregate, optionally with nested sub-aggregates.

    ``count`` and ``values`` group by ``fields[0]``; ``min`` and ``max``
    compute a single metric over it.
    """
    function_name: str
    fields: tuple[str, ...] = ()
    alias: str | None = None
    limit: int | str | None = None
    children: tuple["AggregateSpec", ...] = ()


@dataclass(frozen=True)
class OrderCriterion:
    attribute: str
    direction: Literal["asc", "desc"] = "asc"


@dataclass(frozen=True)
class QueryOptions:
    """Per-resource search tuning derived from configuration."""
    boost: tuple[str, ...] | None = None
    field_value_factor: Mapping[str, Any] | None = None
    sort_map: Mapping[str, str] | None = None

    @classmethod
    def from_config(cls, config: Mapping[str, Any] | None) -> QueryOptions:
        """Build options from raw resource configuration.

        ``boost`` is a comma-separated field list (``"name^5,description"``);
        ``field_value_factor`` and ``sort_map`` are JSON strings or mappings.
        """
        if not config:
            return cls()
        boost = None
        if config.get("boost"):
            boost = tuple(f.strip() for f in str(config["boost"]).split(",") if f.strip())
        return cls(
            boost=boost,
            field_value_factor=_json_mapping(config, "field_value_factor"),
            sort_map=_json_mapping(config, "sort_map"),
        )


def _json_mapping(config: Mapping[str, Any], key: str) -> Mapping[str, Any] | None:
    raw = config.get(key)
    if not raw:
        return None
    if isinstance(raw, Mapping):
        return dict(raw)
    try:
        value = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise InvalidSettingValueError(key, raw, f"not valid JSON ({exc})") from exc
    if not isinstance(value, dict):
        raise InvalidSettingValueError(key, raw, "expected a JSON object")
    return value


@dataclass(frozen=True)
class SearchRequest:
    """Engine-agnostic description of one search.

    ``limit`` is an ``int`` page size, :data:`UNLIMITED` or ``None``;
    ``page`` is 1-based. ``explain`` is an optional mutable sink that receives
    the compiled search and engine timing after a successful call.
    """
    index: str
    filter: FilterExpression | None = None
    search: str | None = None
    query_options: QueryOptions = field(default_factory=QueryOptions)
    elasticsearch_query: Mapping[str, Any] | None = None
    aggregates: Sequence[AggregateSpec] | None = None
    order: Sequence[OrderCriterion] | None = None
    limit: int | Literal["unlimited"] | None = None
    page: int | None = None
    attributes: Sequence[str] = ()
    explain: MutableMapping[str, Any] | None = field(default=None, compare=False)
