import math

import pytest

from pyzebras.compute.aggregate import (
    CountAggregation,
    MaxAggregation,
    MeanAggregation,
    MinAggregation,
    StdAggregation,
    SumAggregation,
    gb_count,
    gb_describe,
    gb_max,
    gb_mean,
    gb_min,
    gb_std,
    gb_sum,
)
from pyzebras.compute.base import MISSING
from pyzebras.compute.grouping import group_by

TEST_DATA = [
    {"city": "New York", "shop": "Shop A", "n_employees": 10},
    {"city": "New York", "shop": "Shop B", "n_employees": 15},
    {"city": "Los Angeles", "shop": "Shop A", "n_employees": 8},
    {"city": "Los Angeles", "shop": "Shop A2", "n_employees": 12},
    {"city": "New York", "shop": "Shop B", "n_employees": 20},
]

DESCRIBE_DATA = [
    {"label": "A", "value": 7},
    {"label": "A", "value": 3},
    {"label": "B", "value": 2},
    {"label": "B", "value": 5},
    {"label": "C", "value": 75},
]


@pytest.fixture
def by_city():
    return group_by(lambda row: row["city"], TEST_DATA)


def test_sum_aggregation(by_city):
    result = gb_sum("n_employees", by_city)
    assert result == [
        {"group": "New York", "sum": 45},
        {"group": "Los Angeles", "sum": 20},
    ]


def test_sum_aggregation_skips_non_numeric():
    grouping = group_by(
        lambda row: row["k"], [{"k": "a", "v": 4}, {"k": "a", "v": "n/a"}, {"k": "a"}]
    )
    assert gb_sum("v", grouping) == [{"group": "a", "sum": 4}]


def test_min_aggregation(by_city):
    assert gb_min("n_employees", by_city) == [
        {"group": "New York", "min": 10},
        {"group": "Los Angeles", "min": 8},
    ]


def test_max_aggregation(by_city):
    assert gb_max("n_employees", by_city) == [
        {"group": "New York", "max": 20},
        {"group": "Los Angeles", "max": 12},
    ]


def test_min_max_ignore_values_that_are_not_numbers():
    grouping = group_by(
        lambda row: row["k"],
        [{"k": "a", "v": "x"}, {"k": "a", "v": 3}, {"k": "a", "v": math.nan}, {"k": "a"}],
    )
    assert gb_min("v", grouping) == [{"group": "a", "min": 3}]
    assert gb_max("v", grouping) == [{"group": "a", "max": 3}]


def test_min_max_without_numbers_keep_initial_value():
    grouping = group_by(lambda row: row["k"], [{"k": "a", "v": "x"}, {"k": "a", "v": MISSING}])
    assert gb_min("v", grouping) == [{"group": "a", "min": math.inf}]
    assert gb_max("v", grouping) == [{"group": "a", "max": -math.inf}]


def test_count_aggregation(by_city):
    assert gb_count("n_employees", by_city) == [
        {"group": "New York", "count": 3},
        {"group": "Los Angeles", "count": 2},
    ]


def test_count_aggregation_counts_all_rows():
    grouping = group_by(lambda row: row["k"], [{"k": "a", "v": "x"}, {"k": "a"}])
    assert gb_count("v", grouping) == [{"group": "a", "count": 2}]


def test_mean_aggregation(by_city):
    assert gb_mean("n_employees", by_city) == [
        {"group": "New York", "mean": 15},
        {"group": "Los Angeles", "mean": 10},
    ]


def test_mean_aggregation_divides_by_all_rows():
    # Non numeric values are not summed, but they are counted.
    grouping = group_by(lambda row: row["k"], [{"k": "a", "v": 4}, {"k": "a", "v": "n/a"}])
    assert gb_mean("v", grouping) == [{"group": "a", "mean": 2}]


def test_std_aggregation(by_city):
    result = gb_std("n_employees", by_city)
    assert [row["group"] for row in result] == ["New York", "Los Angeles"]
    assert result[0]["std"] == pytest.approx(5.0)
    assert result[1]["std"] == pytest.approx(math.sqrt(8))


@pytest.mark.parametrize("values", [[5], ["x", 5], ["x"]])
def test_std_aggregation_with_less_than_two_numbers(values):
    grouping = group_by(lambda row: "g", [{"v": v} for v in values])
    assert math.isnan(gb_std("v", grouping)[0]["std"])


def test_aggregations_accept_plain_dicts():
    grouping = {"a": [{"v": 1}, {"v": 3}], "b": [{"v": 2}]}
    assert gb_sum("v", grouping) == [{"group": "a", "sum": 4}, {"group": "b", "sum": 2}]


def test_aggregation_on_empty_group():
    grouping = {"a": []}
    assert gb_count("v", grouping) == [{"group": "a", "count": 0}]
    assert gb_sum("v", grouping) == [{"group": "a", "sum": 0}]
    assert math.isnan(gb_mean("v", grouping)[0]["mean"])


@pytest.mark.parametrize(
    "aggregation_class, expected",
    [
        (SumAggregation, "SumAggregation(n_employees)"),
        (MeanAggregation, "MeanAggregation(n_employees)"),
        (StdAggregation, "StdAggregation(n_employees)"),
        (MinAggregation, "MinAggregation(n_employees)"),
        (MaxAggregation, "MaxAggregation(n_employees)"),
        (CountAggregation, "CountAggregation(n_employees)"),
    ],
)
def test_aggregation_str(aggregation_class, expected):
    assert str(aggregation_class("n_employees")) == expected


def test_describe_aggregation():
    grouping = group_by(lambda row: row["label"], DESCRIBE_DATA)
    result = gb_describe("value", grouping)

    assert [row["group"] for row in result] == ["A", "B", "C"]
    for row in result:
        assert list(row) == ["group", "min", "max", "count", "sum", "mean", "std"]

    a, b, c = result
    assert {k: a[k] for k in ("min", "max", "count", "sum", "mean")} == {
        "min": 3,
        "max": 7,
        "count": 2,
        "sum": 10,
        "mean": 5,
    }
    assert a["std"] == pytest.approx(2.8284271247461903)
    assert {k: b[k] for k in ("min", "max", "count", "sum", "mean")} == {
        "min": 2,
        "max": 5,
        "count": 2,
        "sum": 7,
        "mean": 3.5,
    }
    assert b["std"] == pytest.approx(2.1213203435596424)
    assert {k: c[k] for k in ("min", "max", "count", "sum", "mean")} == {
        "min": 75,
        "max": 75,
        "count": 1,
        "sum": 75,
        "mean": 75,
    }
    assert math.isnan(c["std"])


def test_describe_aggregation_does_not_modify_input():
    snapshot = [dict(row) for row in DESCRIBE_DATA]
    gb_describe("value", group_by(lambda row: row["label"], DESCRIBE_DATA))
    assert DESCRIBE_DATA == snapshot


def test_describe_aggregation_50_rows():
    data = [
        {"city": f"City{city}", "n_employees": 10}
        for city in range(5)
        for _ in range(10)
    ]
    result = gb_describe("n_employees", group_by(lambda row: row["city"], data))
    assert [row["group"] for row in result] == [f"City{i}" for i in range(5)]
    assert [row["count"] for row in result] == [10] * 5
    assert [row["sum"] for row in result] == [100] * 5
    assert [row["std"] for row in result] == [0] * 5
