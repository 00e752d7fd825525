"""Unit tests for the result normalizer."""
from __future__ import annotations

import copy

import pytest

from mp_elasticsearch.application.search import (
    AggregateSpec,
    AggregationCompiler,
    ResultNormalizer,
    ResultSet,
    flatten_keys,
)
from mp_elasticsearch.kernel.errors import AggregationAliasConflictError


class TestFlattenKeys:
    def test_flat_mapping_unchanged(self) -> None:
        assert flatten_keys({"id": 1, "name": "x"}) == {"id": 1, "name": "x"}

    def test_nested_mapping_uses_dotted_keys(self) -> None:
        assert flatten_keys({"a": {"b": {"c": 1}, "d": 2}}) == {"a.b.c": 1, "a.d": 2}

    def test_lists_kept_as_values(self) -> None:
        assert flatten_keys({"tags": [{"id": 1}], "x": None}) == {"tags": [{"id": 1}], "x": None}

    def test_empty_nested_mapping_disappears(self) -> None:
        assert flatten_keys({"a": {}, "b": 1}) == {"b": 1}


class TestRows:
    def test_empty_response(self) -> None:
        result = ResultNormalizer().normalize({"hits": {"hits": []}})
        assert result.rows == ()
        assert result.total_count is None

    def test_missing_hits(self) -> None:
        assert ResultNormalizer().normalize({}).rows == ()

    def test_non_empty_response(self) -> None:
        response = {
            "hits": {
                "hits": [
                    {"_id": 1, "_source": {"id": 1, "name": "Captain America"}},
                    {"_id": 2, "_source": {"id": 2, "name": "Iron Man"}},
                ]
            }
        }
        rows = ResultNormalizer().normalize(response).rows
        assert list(rows) == [
            {"_id": 1, "id": 1, "name": "Captain America"},
            {"_id": 2, "id": 2, "name": "Iron Man"},
        ]

    def test_nested_documents_flattened(self) -> None:
        response = {"hits": {"hits": [{"_id": 1, "_source": {"id": 1, "team": {"id": 2}}}]}}
        assert ResultNormalizer().normalize(response).rows == ({"_id": 1, "id": 1, "team.id": 2},)

    def test_type_injected_when_present(self) -> None:
        response = {"hits": {"hits": [{"_id": "a", "_type": "hero", "_source": {"n": 1}}]}}
        assert ResultNormalizer().normalize(response).rows[0] == {"_id": "a", "_type": "hero", "n": 1}

    def test_hit_identity_wins_over_source(self) -> None:
        response = {"hits": {"hits": [{"_id": "real", "_source": {"_id": "stale"}}]}}
        assert ResultNormalizer().normalize(response).rows[0]["_id"] == "real"

    def test_hit_without_source(self) -> None:
        response = {"hits": {"hits": [{"_id": "a"}]}}
        assert ResultNormalizer().normalize(response).rows == ({"_id": "a"},)


class TestTotalCount:
    def test_total_value(self) -> None:
        response = {"hits": {"hits": [], "total": {"value": 1337, "relation": "eq"}}}
        assert ResultNormalizer().normalize(response).total_count == 1337

    def test_legacy_integer_total(self) -> None:
        assert ResultNormalizer().normalize({"hits": {"hits": [], "total": 42}}).total_count == 42

    def test_missing_total(self) -> None:
        assert ResultNormalizer().normalize({"hits": {"hits": []}}).total_count is None


class TestAggregations:
    def test_count_renames_doc_count(self) -> None:
        specs = [AggregateSpec("count", ("brand",), alias="brands")]
        response = {"aggregations": {"brands": {"buckets": [{"key": "X", "doc_count": 3}]}}}
        result = ResultNormalizer().normalize(response, specs)
        assert result.aggregations == {"brands": [{"key": "X", "count": 3}]}

    def test_count_round_trip_with_positional_alias(self) -> None:
        specs = [AggregateSpec("count", ("brand",))]
        compiled = AggregationCompiler().compile(specs)
        response = {"aggregations": {alias: {"buckets": [{"key": "X", "doc_count": 3}]} for alias in compiled}}
        assert ResultNormalizer().normalize(response, specs).aggregations == {"0": [{"key": "X", "count": 3}]}

    def test_values_keeps_keys_only(self) -> None:
        specs = [AggregateSpec("values", ("brand",), alias="brands")]
        response = {
            "aggregations": {
                "brands": {"buckets": [{"key": "Nike", "doc_count": 2}, {"key": "Puma", "doc_count": 1}]}
            }
        }
        assert ResultNormalizer().normalize(response, specs).aggregations == {"brands": ["Nike", "Puma"]}

    @pytest.mark.parametrize("function_name", ["min", "max"])
    def test_metric_value(self, function_name: str) -> None:
        specs = [AggregateSpec(function_name, ("price",), alias="p")]
        response = {"aggregations": {"p": {"value": 12.5}}}
        assert ResultNormalizer().normalize(response, specs).aggregations == {"p": 12.5}

    def test_missing_alias_is_none(self) -> None:
        specs = [AggregateSpec("max", ("price",), alias="p"), AggregateSpec("count", ("b",), alias="b")]
        response = {"aggregations": {"p": {"value": 1}}}
        assert ResultNormalizer().normalize(response, specs).aggregations == {"p": 1, "b": None}

    def test_no_aggregations_in_response(self) -> None:
        specs = [AggregateSpec("values", ("brand",), alias="brands")]
        assert ResultNormalizer().normalize({"hits": {"hits": []}}, specs).aggregations == {"brands": None}

    def test_no_specs_no_aggregations(self) -> None:
        response = {"aggregations": {"x": {"value": 1}}}
        assert ResultNormalizer().normalize(response).aggregations == {}

    def test_nested_buckets_inverted(self) -> None:
        specs = [
            AggregateSpec(
                "count",
                ("country",),
                alias="countries",
                children=(
                    AggregateSpec("values", ("city",), alias="cities"),
                    AggregateSpec("max", ("population",), alias="largest"),
                ),
            )
        ]
        response = {
            "aggregations": {
                "countries": {
                    "buckets": [
                        {
                            "key": "DE",
                            "doc_count": 2,
                            "cities": {"buckets": [{"key": "Berlin", "doc_count": 1}]},
                            "largest": {"value": 3_600_000},
                        }
                    ]
                }
            }
        }
        assert ResultNormalizer().normalize(response, specs).aggregations == {
            "countries": [{"key": "DE", "count": 2, "cities": ["Berlin"], "largest": 3_600_000}]
        }

    @pytest.mark.parametrize("alias", ["count", "key", "doc_count", "key_as_string"])
    def test_child_alias_cannot_shadow_bucket_keys(self, alias: str) -> None:
        specs = [
            AggregateSpec("count", ("brand",), alias="b", children=(AggregateSpec("max", ("price",), alias=alias),))
        ]
        response = {"aggregations": {"b": {"buckets": [{"key": "X", "doc_count": 3, alias: {"value": 9}}]}}}
        with pytest.raises(AggregationAliasConflictError) as exc_info:
            ResultNormalizer().normalize(response, specs)
        assert exc_info.value.alias == alias

    def test_top_level_alias_may_be_count(self) -> None:
        specs = [AggregateSpec("max", ("price",), alias="count")]
        response = {"aggregations": {"count": {"value": 9}}}
        assert ResultNormalizer().normalize(response, specs).aggregations == {"count": 9}

    def test_response_not_mutated(self) -> None:
        specs = [AggregateSpec("count", ("brand",), alias="brands")]
        response = {
            "hits": {"hits": [{"_id": 1, "_source": {"team": {"id": 2}}}]},
            "aggregations": {"brands": {"buckets": [{"key": "X", "doc_count": 3}]}},
        }
        snapshot = copy.deepcopy(response)
        ResultNormalizer().normalize(response, specs)
        assert response == snapshot


class TestResultSet:
    def test_to_dict_envelope(self) -> None:
        result = ResultSet(rows=({"_id": 1},), total_count=1, aggregations={"p": 2})
        assert result.to_dict() == {"data": [{"_id": 1}], "totalCount": 1, "aggregations": {"p": 2}}

    def test_to_dict_omits_empty_aggregations(self) -> None:
        assert "aggregations" not in ResultSet().to_dict()

    def test_len_is_row_count(self) -> None:
        assert len(ResultSet(rows=({}, {}))) == 2
