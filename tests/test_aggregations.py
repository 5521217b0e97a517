from __future__ import annotations

import pytest

from es_query_maker import (
    Aggregation,
    Avg,
    Cardinality,
    FilterAgg,
    Max,
    Min,
    NestedAgg,
    Order,
    Percentiles,
    QueryBuildError,
    Stats,
    StringStats,
    Sum,
    Term,
    TermsAgg,
    TopHits,
    ValueCount,
    WeightedAvg,
)


@pytest.mark.parametrize(
    "cls,api_name",
    [
        (Avg, "avg"),
        (Max, "max"),
        (Min, "min"),
        (Sum, "sum"),
        (ValueCount, "value_count"),
        (Stats, "stats"),
    ],
)
def test_single_field_metrics(cls, api_name):
    agg = cls("agg_name", "price")
    assert isinstance(agg, Aggregation)
    assert agg.name == "agg_name"
    assert agg.map() == {api_name: {"field": "price"}}


def test_metric_missing_and_script():
    agg = Avg("avg_grade", "grade").missing(10).script({"source": "_value * 2"})
    assert agg.map() == {
        "avg": {"field": "grade", "missing": 10, "script": {"source": "_value * 2"}}
    }


def test_cardinality():
    agg = Cardinality("type_count", "type").precision_threshold(100)
    assert agg.map() == {"cardinality": {"field": "type", "precision_threshold": 100}}


def test_weighted_avg():
    agg = WeightedAvg("weighted_grade").value("grade", 2).weight("weight")
    assert agg.map() == {
        "weighted_avg": {
            "value": {"field": "grade", "missing": 2},
            "weight": {"field": "weight"},
        }
    }


def test_percentiles():
    agg = (
        Percentiles("load_time_outlier", "load_time")
        .percents(95, 99, 99.9)
        .keyed(False)
        .compression(200)
        .num_histogram_digits(3)
        .missing(0)
    )
    assert agg.map() == {
        "percentiles": {
            "field": "load_time",
            "missing": 0,
            "percents": [95.0, 99.0, 99.9],
            "keyed": False,
            "tdigest": {"compression": 200},
            "hdr": {"number_of_significant_value_digits": 3},
        }
    }


def test_percentiles_rejects_out_of_range_digits():
    with pytest.raises(QueryBuildError):
        Percentiles("p", "load_time").num_histogram_digits(300)


def test_string_stats():
    agg = StringStats("message_stats", "message.keyword").show_distribution(True)
    assert agg.map() == {
        "string_stats": {"field": "message.keyword", "show_distribution": True}
    }


def test_top_hits():
    agg = (
        TopHits("top_sales_hits")
        .from_(0)
        .size(1)
        .sort("date", Order.DESC)
        .source_includes("date", "price")
    )
    assert agg.map() == {
        "top_hits": {
            "from": 0,
            "size": 1,
            "sort": [{"date": {"order": "desc"}}],
            "_source": {"includes": ["date", "price"]},
        }
    }


def test_terms_agg_with_sub_aggregations():
    agg = (
        TermsAgg("genres", "genre")
        .size(10)
        .shard_size(100)
        .order({"_count": Order.ASC})
        .include("rock", "jazz")
        .aggs(Avg("avg_length", "length"), Max("max_length", "length"))
    )
    assert agg.map() == {
        "terms": {
            "field": "genre",
            "size": 10,
            "shard_size": 100,
            "order": {"_count": "asc"},
            "include": ["rock", "jazz"],
        },
        "aggs": {
            "avg_length": {"avg": {"field": "length"}},
            "max_length": {"max": {"field": "length"}},
        },
    }


def test_terms_agg_single_include_is_a_pattern():
    agg = TermsAgg("tags", "tags").include(".*sport.*")
    assert agg.map() == {"terms": {"field": "tags", "include": ".*sport.*"}}


def test_filter_agg():
    agg = FilterAgg("t_shirts", Term("type", "t-shirt")).aggs(Avg("avg_price", "price"))
    assert agg.map() == {
        "filter": {"term": {"type": {"value": "t-shirt"}}},
        "aggs": {"avg_price": {"avg": {"field": "price"}}},
    }


def test_nested_agg():
    agg = NestedAgg("resellers", "resellers").aggs(Min("min_price", "resellers.price"))
    assert agg.map() == {
        "nested": {"path": "resellers"},
        "aggs": {"min_price": {"min": {"field": "resellers.price"}}},
    }


def test_bucket_aggs_reject_queries_as_sub_aggregations():
    with pytest.raises(QueryBuildError):
        TermsAgg("a", "a").aggs(Term("a", 1))


@pytest.mark.parametrize(
    "setter,val",
    [("compression", -1), ("compression", 70000), ("num_histogram_digits", -1)],
)
def test_percentiles_nested_settings_raise_build_errors(setter, val):
    with pytest.raises(QueryBuildError):
        getattr(Percentiles("p", "load_time"), setter)(val)


def test_weighted_avg_rejects_empty_field():
    with pytest.raises(QueryBuildError):
        WeightedAvg("w").value("")
