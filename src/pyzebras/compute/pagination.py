"""Support taking only a portion of the rows of a dataframe.

>>> df = [{"n": n} for n in range(5)]
>>> head(2, df)
[{'n': 0}, {'n': 1}]
>>> tail(2, df)
[{'n': 3}, {'n': 4}]
>>> slice_rows(1, 3, df)
[{'n': 1}, {'n': 2}]
"""

from .base import DataFrame

__all__ = ("head", "tail", "slice_rows", "concat")


def head(n: int, df: DataFrame) -> DataFrame:
    """The first ``n`` rows."""
    return list(df[:n])


def tail(n: int, df: DataFrame) -> DataFrame:
    """The last ``n`` rows."""
    if n <= 0:
        return []
    return list(df[-n:])


def slice_rows(start: int, end: int, df: DataFrame) -> DataFrame:
    """The rows from ``start`` up to, but excluding, ``end``."""
    return list(df[start:end])


def concat(df1: DataFrame, df2: DataFrame) -> DataFrame:
    """The rows of ``df1`` followed by the rows of ``df2``."""
    return [*df1, *df2]
