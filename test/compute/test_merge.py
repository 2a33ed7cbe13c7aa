import pytest

from pyzebras.compute.base import MISSING
from pyzebras.compute.join import merge

# Sample data for testing
LEFT_TEST_DATA = [
    {"id": 1, "name": "Alice"},
    {"id": 2, "name": "Bob"},
    {"id": 3, "name": "Charlie"},
    {"id": 4, "name": "David"},
]

RIGHT_TEST_DATA = [
    {"id": 3, "age": 25},
    {"id": 4, "age": 30},
    {"id": 5, "age": 35},
    {"id": 6, "age": 40},
]


@pytest.mark.parametrize(
    "left_key,right_key,expected_output",
    [
        (
            "id",
            "id",
            [
                {"id": 1, "name": "Alice", "age": MISSING},
                {"id": 2, "name": "Bob", "age": MISSING},
                {"id": 3, "name": "Charlie", "age": 25},
                {"id": 4, "name": "David", "age": 30},
            ],
        ),
    ],
)
def test_merge(left_key, right_key, expected_output):
    result = merge(LEFT_TEST_DATA, RIGHT_TEST_DATA, left_key, right_key, "_l", "_r")
    assert result == expected_output


def test_merge_is_left_biased():
    result = merge([{"k": "a", "x": 1}], [{"k": "b", "y": 2}], "k", "k", "_l", "_r")
    assert result == [{"k": "a", "x": 1, "y": MISSING}]
    assert result[0]["y"] is MISSING


def test_merge_renames_colliding_columns():
    result = merge([{"k": "a", "x": 1}], [{"k": "a", "x": 2}], "k", "k", "_l", "_r")
    assert result == [{"k": "a", "x_l": 1, "x_r": 2}]


def test_merge_renames_every_colliding_column():
    left = [{"k": "a", "x": 1, "y": 2, "z": 3}]
    right = [{"k": "a", "x": 4, "y": 5}]
    result = merge(left, right, "k", "k", "_l", "_r")
    assert result == [{"k": "a", "x_l": 1, "y_l": 2, "z": 3, "x_r": 4, "y_r": 5}]
    assert list(result[0]) == ["k", "x_l", "y_l", "z", "x_r", "y_r"]


def test_merge_without_collisions_keeps_names():
    result = merge([{"k": "a", "x": 1}], [{"k": "a", "y": 2}], "k", "k", "--", "--")
    assert result == [{"k": "a", "x": 1, "y": 2}]


def test_merge_different_keys():
    left = [{"user": 1, "name": "Alice"}]
    right = [{"user_id": 1, "amount": 100}]
    result = merge(left, right, "user", "user_id", "_l", "_r")
    assert result == [{"user": 1, "name": "Alice", "user_id": 1, "amount": 100}]


def test_merge_only_first_row_per_key():
    left = [{"k": "a", "x": 1}, {"k": "a", "x": 2}, {"k": "b", "x": 3}]
    right = [{"k": "a", "y": 10}, {"k": "a", "y": 20}]
    result = merge(left, right, "k", "k", "_l", "_r")
    assert result == [
        {"k": "a", "x": 1, "y": 10},
        {"k": "b", "x": 3, "y": MISSING},
    ]


def test_merge_fills_columns_missing_from_some_rows():
    left = [{"k": "a", "x": 1}, {"k": "b"}]
    right = [{"k": "a", "y": 2}, {"k": "b", "y": 3}]
    result = merge(left, right, "k", "k", "_l", "_r")
    assert result == [{"k": "a", "x": 1, "y": 2}, {"k": "b", "x": MISSING, "y": 3}]
    assert all(list(row) == ["k", "x", "y"] for row in result)


def test_merge_rows_without_key_never_match():
    left = [{"k": "a", "x": 1}, {"x": 2}, {"x": 3}, {"k": "MISSING", "x": 4}]
    right = [{"y": 10}, {"k": "a", "y": 20}, {"k": "MISSING", "y": 30}]
    result = merge(left, right, "k", "k", "_l", "_r")
    assert result == [
        {"k": "a", "x": 1, "y": 20},
        {"k": MISSING, "x": 2, "y": MISSING},
        {"k": MISSING, "x": 3, "y": MISSING},
        {"k": "MISSING", "x": 4, "y": 30},
    ]


def test_merge_suffix_clashing_with_existing_column():
    left = [{"k": "a", "x": 1, "x_l": 9}]
    right = [{"k": "a", "x": 2}]
    result = merge(left, right, "k", "k", "_l", "_r")
    assert result == [{"k": "a", "x_l": 9, "x_r": 2}]


def test_merge_does_not_modify_inputs():
    left = [{"k": "a", "x": 1}, {"k": "b", "x": 2}]
    right = [{"k": "a", "x": 3, "y": 4}]
    left_snapshot = [dict(row) for row in left]
    right_snapshot = [dict(row) for row in right]

    result = merge(left, right, "k", "k", "_l", "_r")

    assert left == left_snapshot
    assert right == right_snapshot
    assert all(row is not source for row in result for source in left + right)


def test_merge_empty_left():
    assert merge([], RIGHT_TEST_DATA, "id", "id", "_l", "_r") == []


def test_merge_empty_right():
    result = merge(LEFT_TEST_DATA[:1], [], "id", "id", "_l", "_r")
    assert result == [{"id": 1, "name": "Alice"}]
