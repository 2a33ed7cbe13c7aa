"""Functions computing a new value for each position of a series.

Each function returns a series with the same length
of the one it received, where each value is computed
from the values preceding it.

For example the moving average of the closing prices
of the last two days can be computed with :func:`rolling`:

>>> from pyzebras.compute.statistics import mean
>>> rolling(mean, 2, [7, 2, 30, 30, 56, 75])
['NotANumber', 4.5, 16.0, 30.0, 43.0, 65.5]

The first position didn't have enough values to fill
the window, thus it gets the :data:`pyzebras.compute.base.NOT_A_NUMBER`
placeholder.
"""

import math
from typing import Any, Callable

from .base import NOT_A_NUMBER, Series, divide, is_numeric

__all__ = ("pct_change", "diff", "rolling", "cumulative")


def pct_change(series: Series) -> Series:
    """Change of each value relative to the previous one.

    The first value has no previous value, so it's always NaN.
    Positions involving non numeric values are NaN too.

    >>> pct_change([10, 15, 30])
    [nan, 0.5, 1.0]
    """
    if not series:
        return []
    return [math.nan] + [
        divide(current, previous) - 1
        if is_numeric(current) and is_numeric(previous)
        else math.nan
        for previous, current in zip(series, series[1:])
    ]


def diff(series: Series) -> Series:
    """Difference of each value from the previous one.

    >>> diff([10, 15, 12])
    [nan, 5, -3]
    """
    if not series:
        return []
    return [math.nan] + [
        current - previous
        if is_numeric(current) and is_numeric(previous)
        else math.nan
        for previous, current in zip(series, series[1:])
    ]


def rolling(func: Callable[[Series], Any], window_size: int, series: Series) -> Series:
    """Apply ``func`` to a window of ``window_size`` values ending at each position.

    Until enough values are available to fill the window,
    :data:`pyzebras.compute.base.NOT_A_NUMBER` is emitted.

    :param func: The function to apply to each window, usually a statistic.
    :param window_size: How many values each window contains.
    :param series: The values to roll the window over.
    """
    if window_size < 1:
        raise ValueError("The rolling window must contain at least one value")

    return [
        NOT_A_NUMBER if idx + 1 < window_size else func(series[idx - window_size + 1 : idx + 1])
        for idx in range(len(series))
    ]


def cumulative(func: Callable[[Series], Any], series: Series) -> Series:
    """Apply ``func`` to all the values up to each position.

    >>> from pyzebras.compute.statistics import sum_values
    >>> cumulative(sum_values, [1, 2, 3])
    [1.0, 3.0, 6.0]
    """
    return [func(series[: idx + 1]) for idx in range(len(series))]
