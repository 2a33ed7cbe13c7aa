"""Compute per-group statistics.

Frequently when analysing data is necessary
to compute statistics like the min, max, average, etc...
for each group of rows sharing the same key.

The aggregations in this module reduce one column
within every group of a :class:`pyzebras.compute.grouping.Grouping`
to a single value, producing a dataframe with one row per group.

For example, given the following data::

    city, shop, n_employees
    New York, Shop A, 10
    New York, Shop B, 15
    Los Angeles, Shop C, 8
    Los Angeles, Shop D, 12
    New York, Shop E, 20

We could group by city and compute the sum of the employees
to get::

    group, sum
    New York, 45
    Los Angeles, 20

>>> from pyzebras.compute.grouping import group_by
>>> shops = [
...     {"city": "New York", "n_employees": 10},
...     {"city": "New York", "n_employees": 15},
...     {"city": "Los Angeles", "n_employees": 8},
...     {"city": "Los Angeles", "n_employees": 12},
...     {"city": "New York", "n_employees": 20},
... ]
>>> gb_sum("n_employees", group_by(lambda row: row["city"], shops))
[{'group': 'New York', 'sum': 45.0}, {'group': 'Los Angeles', 'sum': 20.0}]

All the statistics can be computed at once
with :func:`gb_describe`, which joins the results of each
aggregation in a single table.
"""

import abc
import math
from collections.abc import Mapping
from typing import Any

from . import statistics
from .base import DataFrame, divide
from .join import merge
from .selection import get_col

__all__ = (
    "Aggregation",
    "SumAggregation",
    "MeanAggregation",
    "StdAggregation",
    "MinAggregation",
    "MaxAggregation",
    "CountAggregation",
    "gb_sum",
    "gb_mean",
    "gb_std",
    "gb_min",
    "gb_max",
    "gb_count",
    "gb_describe",
)

GroupedRows = Mapping[str, DataFrame]

GROUP_COLUMN = "group"
DESCRIBE_SUFFIX = "--"


class Aggregation(abc.ABC):
    """Base class for aggregations.

    Every aggregation is expected to implement
    a method to reduce the rows of a single group
    to the value of the statistic. The aggregation
    takes care of applying it to every group.
    """

    name: str

    def __init__(self, column: str) -> None:
        """
        :param column: The column whose values have to be aggregated.
        """
        self.column = column

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.column})"

    __repr__ = __str__

    @abc.abstractmethod
    def compute(self, rows: DataFrame) -> Any:
        """Reduce the rows of one group to the value of the statistic."""
        ...

    def apply(self, grouping: GroupedRows) -> DataFrame:
        """Compute the statistic for each group.

        Returns a dataframe with a row for each group, in the
        order of the grouping, like ``{"group": "New York", "sum": 45}``.
        """
        return [
            {GROUP_COLUMN: label, self.name: self.compute(rows)}
            for label, rows in grouping.items()
        ]


class SumAggregation(Aggregation):
    """Sum of the numeric values of the column."""

    name = "sum"

    def compute(self, rows: DataFrame) -> Any:
        return statistics.sum_values(get_col(self.column, rows))


class MeanAggregation(Aggregation):
    """Mean of the column computed as the sum over the number of rows.

    The sum only accounts for numeric values, while the
    number of rows includes rows with non numeric values.
    So non numeric values count as zeros: for a group
    with the values ``[4, "n/a"]`` the mean is ``2``.
    """

    name = "mean"

    def compute(self, rows: DataFrame) -> Any:
        return divide(SumAggregation(self.column).compute(rows), len(rows))


class StdAggregation(Aggregation):
    """Sample standard deviation of the numeric values of the column.

    Groups with less than two numeric values have a NaN standard deviation.
    """

    name = "std"

    def compute(self, rows: DataFrame) -> Any:
        return statistics.std(get_col(self.column, rows))


class _FoldAggregation(Aggregation):
    """Fold all the values of the column, starting from ``initial``.

    Values are not filtered, but only real numbers are
    compared, so any other value (strings, missing values, ...)
    never replaces the current result. NaN never does either
    as it's not ordered against any number. For a group
    without numbers the result is ``initial`` itself.
    """

    initial: float

    @abc.abstractmethod
    def _replaces(self, value: Any, current: Any) -> bool: ...

    def compute(self, rows: DataFrame) -> Any:
        result = self.initial
        for value in get_col(self.column, rows):
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                if self._replaces(value, result):
                    result = value
        return result


class MinAggregation(_FoldAggregation):
    """Smallest value of the column, ``inf`` when the group has no numbers."""

    name = "min"
    initial = math.inf

    def _replaces(self, value: Any, current: Any) -> bool:
        return value < current


class MaxAggregation(_FoldAggregation):
    """Biggest value of the column, ``-inf`` when the group has no numbers."""

    name = "max"
    initial = -math.inf

    def _replaces(self, value: Any, current: Any) -> bool:
        return value > current


class CountAggregation(Aggregation):
    """Number of rows in the group, whatever their value is."""

    name = "count"

    def compute(self, rows: DataFrame) -> Any:
        return len(rows)


def gb_sum(column: str, grouping: GroupedRows) -> DataFrame:
    """Sum of the numeric values of ``column`` for each group."""
    return SumAggregation(column).apply(grouping)


def gb_mean(column: str, grouping: GroupedRows) -> DataFrame:
    """Mean of ``column`` for each group.

    The mean divides the sum of the numeric values
    by the total number of rows of the group, see :class:`MeanAggregation`.
    """
    return MeanAggregation(column).apply(grouping)


def gb_std(column: str, grouping: GroupedRows) -> DataFrame:
    """Sample standard deviation of ``column`` for each group."""
    return StdAggregation(column).apply(grouping)


def gb_min(column: str, grouping: GroupedRows) -> DataFrame:
    """Smallest value of ``column`` for each group."""
    return MinAggregation(column).apply(grouping)


def gb_max(column: str, grouping: GroupedRows) -> DataFrame:
    """Biggest value of ``column`` for each group."""
    return MaxAggregation(column).apply(grouping)


def gb_count(column: str, grouping: GroupedRows) -> DataFrame:
    """Number of rows for each group."""
    return CountAggregation(column).apply(grouping)


def gb_describe(column: str, grouping: GroupedRows) -> DataFrame:
    """Summary statistics of ``column`` for each group.

    Each statistic is computed independently and then
    the results are joined on the group label, one after the other,
    to build a table with one row for each group and
    one column for each statistic::

        min ⋈ max ⋈ count ⋈ sum ⋈ mean ⋈ std

    >>> from pyzebras.compute.grouping import group_by
    >>> df = [{"label": "A", "value": 7}, {"label": "A", "value": 3}, {"label": "C", "value": 75}]
    >>> gb_describe("value", group_by(lambda row: row["label"], df))
    [{'group': 'A', 'min': 3, 'max': 7, 'count': 2, 'sum': 10.0, 'mean': 5.0, 'std': 2.828...},
     {'group': 'C', 'min': 75, 'max': 75, 'count': 1, 'sum': 75.0, 'mean': 75.0, 'std': nan}]
    """
    # Each merge relies on the columns produced by the previous one,
    # so their order can't change.
    result = gb_min(column, grouping)
    for statistic in (gb_max, gb_count, gb_sum, gb_mean, gb_std):
        result = merge(
            result,
            statistic(column, grouping),
            GROUP_COLUMN,
            GROUP_COLUMN,
            DESCRIBE_SUFFIX,
            DESCRIBE_SUFFIX,
        )
    return result
