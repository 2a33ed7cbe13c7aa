"""Functions that select, remove or add columns of a dataframe.

A common need when analysing data is to focus
on specific columns, or to project new columns
out of the existing ones.

All the functions build new records, the records of
the dataframe they receive are never modified.

>>> df = [{"a": 1, "b": 4, "c": 7}, {"a": 2, "b": 5, "c": 8}]
>>> get_col("a", df)
[1, 2]
>>> pick_cols(["a", "c"], df)
[{'a': 1, 'c': 7}, {'a': 2, 'c': 8}]
"""

from typing import Callable

from .base import MISSING, DataFrame, LengthMismatch, Record, Series

__all__ = ("get_col", "pick_cols", "drop_col", "add_col", "derive_col")


def get_col(column: str, df: DataFrame) -> Series:
    """Extract the values of a column as a series.

    Rows that lack the column contribute :data:`pyzebras.compute.base.MISSING`.
    """
    return [row.get(column, MISSING) for row in df]


def pick_cols(columns: list[str], df: DataFrame) -> DataFrame:
    """Only keep the listed columns, in the order they are listed.

    Columns that a row doesn't have are skipped for that row.
    """
    return [{c: row[c] for c in columns if c in row} for row in df]


def drop_col(column: str, df: DataFrame) -> DataFrame:
    """Remove a column from every row."""
    return [{k: v for k, v in row.items() if k != column} for row in df]


def add_col(column: str, values: Series, df: DataFrame) -> DataFrame | LengthMismatch:
    """Add a column with the provided values, one for each row.

    There must be exactly one value for each row,
    otherwise a :class:`pyzebras.compute.base.LengthMismatch` is returned.

    >>> add_col("b", [3, 4], [{"a": 1}, {"a": 2}])
    [{'a': 1, 'b': 3}, {'a': 2, 'b': 4}]
    >>> add_col("b", [3], [{"a": 1}, {"a": 2}])
    LengthMismatch(operation='add_col', left_length=2, right_length=1)
    """
    if len(df) != len(values):
        return LengthMismatch("add_col", len(df), len(values))
    return [{**row, column: value} for row, value in zip(df, values)]


def derive_col(func: Callable[[Record], Record], df: DataFrame) -> DataFrame:
    """Compute a new version of each row.

    ``func`` receives a copy of each row, which it is free
    to modify, and must return the derived row. Typically
    used to project new columns out of the existing ones:

    >>> def add_total(row):
    ...     row["total"] = row["price"] * row["quantity"]
    ...     return row
    >>> derive_col(add_total, [{"price": 2, "quantity": 3}])
    [{'price': 2, 'quantity': 3, 'total': 6}]
    """
    return [func(dict(row)) for row in df]
