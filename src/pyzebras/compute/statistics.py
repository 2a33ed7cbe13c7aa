"""Descriptive statistics of a series.

All the statistics are computed ignoring the values
of the series that can't take part in arithmetic,
like strings or NaN. See :func:`pyzebras.compute.base.is_numeric`.

The remaining values are loaded in a :class:`pyarrow.Array`
and reduced using the :mod:`pyarrow.compute` kernels.

>>> closes = [7, 2, 30, 56, 75]
>>> mean(closes), median(closes), min_value(closes), max_value(closes)
(34.0, 30.0, 2.0, 75.0)

When no numeric value is left to compute the statistic,
the statistic is NaN instead of failing:

>>> mean(["a", "b"])
nan

The exceptions are :func:`count_unique`, :func:`unique` and
:func:`value_counts` that look at all the values of the series,
as they only need to compare values for equality.
"""

import math
from collections import Counter
from typing import Any

import pyarrow as pa
import pyarrow.compute as pc

from .base import (
    LengthMismatch,
    Record,
    Series,
    divide,
    is_numeric,
    numeric_values,
    to_float,
)

__all__ = (
    "mean",
    "median",
    "std",
    "skew",
    "kurt",
    "corr",
    "min_value",
    "max_value",
    "sum_values",
    "prod_values",
    "get_range",
    "unique",
    "count_unique",
    "value_counts",
    "describe",
    "describe_raw",
)


def _to_array(values: list[int | float]) -> pa.Array:
    # Convert in Python, pyarrow refuses integers
    # that can't be represented exactly as a double.
    return pa.array([to_float(v) for v in values], type=pa.float64())


def mean(series: Series) -> float:
    """Arithmetic mean of the numeric values."""
    values = numeric_values(series)
    if not values:
        return math.nan
    return pc.mean(_to_array(values)).as_py()


def median(series: Series) -> float:
    """Middle value of the sorted numeric values.

    For an even number of values, the median is the
    average of the two values in the middle:

    >>> median([1, 4, 2, 3])
    2.5
    """
    values = numeric_values(series)
    if not values:
        return math.nan
    return pc.quantile(_to_array(values), q=0.5, interpolation="linear")[0].as_py()


def std(series: Series) -> float:
    """Sample standard deviation of the numeric values.

    The sample standard deviation divides by ``n - 1``,
    so it is NaN when there are less than two values.
    """
    values = numeric_values(series)
    if len(values) < 2:
        return math.nan
    return pc.stddev(_to_array(values), ddof=1).as_py()


def _standardized_moment(values: list[int | float], order: int) -> float:
    """Average of the deviations from the mean raised to ``order``, over std**order."""
    if len(values) < 2:
        return math.nan
    deviations = pc.subtract(_to_array(values), mean(values))
    summed = pc.sum(pc.power(deviations, float(order))).as_py()
    return divide(summed / len(values), std(values) ** order)


def skew(series: Series) -> float:
    """Skewness of the numeric values."""
    return _standardized_moment(numeric_values(series), 3)


def kurt(series: Series) -> float:
    """Excess kurtosis of the numeric values.

    The kurtosis of a normal distribution is 3,
    that gets subtracted so that normally distributed values
    have a kurtosis of 0.
    """
    return _standardized_moment(numeric_values(series), 4) - 3


def corr(series1: Series, series2: Series) -> float | LengthMismatch:
    """Pearson correlation between two series.

    The two series are compared position by position,
    so they must have the same length, otherwise
    a :class:`pyzebras.compute.base.LengthMismatch` is returned.

    Positions where either of the two values is not numeric
    are ignored.

    >>> round(corr([1, 2, 3, 4], [2, 4, 6, 8]), 6)
    1.0
    """
    if len(series1) != len(series2):
        return LengthMismatch("corr", len(series1), len(series2))

    pairs = [(a, b) for a, b in zip(series1, series2) if is_numeric(a) and is_numeric(b)]
    if len(pairs) < 2:
        return math.nan

    xs = [a for a, _ in pairs]
    ys = [b for _, b in pairs]
    products = pc.multiply(
        pc.subtract(_to_array(xs), mean(xs)), pc.subtract(_to_array(ys), mean(ys))
    )
    summed = pc.sum(products).as_py()
    return divide(summed, (len(pairs) - 1) * std(xs) * std(ys))


def min_value(series: Series) -> float:
    """Smallest numeric value, NaN when there are none."""
    values = numeric_values(series)
    if not values:
        return math.nan
    return pc.min(_to_array(values)).as_py()


def max_value(series: Series) -> float:
    """Biggest numeric value, NaN when there are none."""
    values = numeric_values(series)
    if not values:
        return math.nan
    return pc.max(_to_array(values)).as_py()


def sum_values(series: Series) -> float:
    """Sum of the numeric values, 0 when there are none."""
    values = numeric_values(series)
    if not values:
        return 0
    return pc.sum(_to_array(values)).as_py()


def prod_values(series: Series) -> float:
    """Product of the numeric values, 1 when there are none."""
    values = numeric_values(series)
    if not values:
        return 1
    return pc.product(_to_array(values)).as_py()


def get_range(series: Series) -> list[float]:
    """The ``[min, max]`` range of the numeric values."""
    return [min_value(series), max_value(series)]


def unique(series: Series) -> Series:
    """Distinct values of the series, in order of first appearance.

    >>> unique(["b", "a", "b", 1])
    ['b', 'a', 1]
    """
    return list(dict.fromkeys(series))


def count_unique(series: Series) -> int:
    """How many distinct values are in the series."""
    return len(unique(series))


def value_counts(series: Series) -> dict[Any, int]:
    """How many times each distinct value appears in the series.

    >>> value_counts(["b", "a", "b"])
    {'b': 2, 'a': 1}
    """
    return dict(Counter(series))


def describe_raw(series: Series) -> list[Record]:
    """Summary statistics of a series as a single row dataframe.

    Like :func:`describe` but statistics are kept as numbers,
    for when they need to be further processed.
    """
    return [
        {
            "count": len(series),
            "countUnique": count_unique(series),
            "min": min_value(series),
            "max": max_value(series),
            "median": median(series),
            "mean": mean(series),
            "std": std(series),
        }
    ]


def describe(series: Series, precision: int = 5) -> list[Record]:
    """Summary statistics of a series, formatted for display.

    The numeric statistics are formatted as strings
    with ``precision`` decimal digits:

    >>> describe([7, 2, 30, 56, 75])
    [{'count': 5, 'countUnique': 5, 'min': '2.00000', 'max': '75.00000',
      'median': '30.00000', 'mean': '34.00000', 'std': '31.36080'}]
    """
    return [
        {
            name: value if name in ("count", "countUnique") else _format_fixed(value, precision)
            for name, value in row.items()
        }
        for row in describe_raw(series)
    ]


def _format_fixed(value: float, precision: int) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return f"{value:.{precision}f}"
