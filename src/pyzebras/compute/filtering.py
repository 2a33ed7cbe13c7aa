"""Functions that filter and sort the rows of a dataframe.

A common request when analysing data is to
pick only the rows that respect a specific condition,
the equivalent of the ``WHERE`` condition in SQL queries,
or to rank them by the value of a column.

>>> df = [{"name": "Flamingo", "n_legs": 2}, {"name": "Centipede", "n_legs": 100},
...       {"name": "Horse", "n_legs": 4}]
>>> filter_rows(lambda row: row["n_legs"] >= 4, df)
[{'name': 'Centipede', 'n_legs': 100}, {'name': 'Horse', 'n_legs': 4}]
>>> [row["name"] for row in sort_by_col("n_legs", "desc", df)]
['Centipede', 'Horse', 'Flamingo']
"""

import functools
from typing import Callable

from .base import MISSING, DataFrame, Record

__all__ = ("filter_rows", "sort_rows", "sort_by_col")


def filter_rows(predicate: Callable[[Record], bool], df: DataFrame) -> DataFrame:
    """Only keep the rows for which ``predicate`` returns true."""
    return [row for row in df if predicate(row)]


def sort_rows(compare: Callable[[Record, Record], int], df: DataFrame) -> DataFrame:
    """Sort the rows using a comparison function.

    ``compare`` receives two rows and must return a negative
    number if the first row goes before the second one, a positive number
    if it goes after and zero if they are equivalent.
    Equivalent rows keep their original order.
    """
    return sorted(df, key=functools.cmp_to_key(compare))


def sort_by_col(column: str, direction: str, df: DataFrame) -> DataFrame:
    """Sort the rows by the values of a column.

    :param column: The column whose values dictate the order.
    :param direction: ``"asc"`` for ascending order or ``"desc"`` for descending order.
    :param df: The dataframe to sort.

    Rows lacking the column are read as :data:`pyzebras.compute.base.MISSING`,
    which can't be ordered against other values and leads to a :class:`TypeError`.
    """
    if direction not in ("asc", "desc"):
        raise ValueError(f"Sort direction must be 'asc' or 'desc', not {direction!r}")
    return sorted(df, key=lambda row: row.get(column, MISSING), reverse=direction == "desc")
