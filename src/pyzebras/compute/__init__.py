"""The pyzebras compute functions.

Data is kept in memory as plain Python objects:
a dataframe is a list of records (dicts) sharing
the same columns, and a series is a list of values,
usually the values of one column.

Every function is a pure transformation: it receives
the data as its last argument and returns new data,
never modifying what it received.
This allows to easily build analysis pipelines like::

    (dataframe)-->function1--(dataframe)-->function2--(series)-->statistic

The functions are split by concern in the modules
of this package and the most commonly used ones are
exported here for convenience:

>>> from pyzebras.compute import group_by, gb_describe, parse_nums, read_csv
>>> df = parse_nums(["n_legs"], [
...     {"class": "Bird", "animal": "Flamingo", "n_legs": "2"},
...     {"class": "Mammal", "animal": "Horse", "n_legs": "4"},
...     {"class": "Mammal", "animal": "Human", "n_legs": "2"},
... ])
>>> for row in gb_describe("n_legs", group_by(lambda row: row["class"], df)):
...     print(row)
{'group': 'Bird', 'min': 2.0, 'max': 2.0, 'count': 1, 'sum': 2.0, 'mean': 2.0, 'std': nan}
{'group': 'Mammal', 'min': 2.0, 'max': 4.0, 'count': 2, 'sum': 6.0, 'mean': 3.0, 'std': 1.414...}
"""

from .aggregate import (
    gb_count,
    gb_describe,
    gb_max,
    gb_mean,
    gb_min,
    gb_std,
    gb_sum,
)
from .base import MISSING, NOT_A_NUMBER, LengthMismatch, is_numeric
from .conversion import parse_dates, parse_nums
from .datasources import from_arrow, read_csv, to_arrow, write_csv
from .filtering import filter_rows, sort_by_col, sort_rows
from .grouping import GroupKey, Grouping, group_by
from .join import merge
from .pagination import concat, head, slice_rows, tail
from .pipeline import Pipeline, pipe
from .selection import add_col, derive_col, drop_col, get_col, pick_cols
from .statistics import (
    corr,
    count_unique,
    describe,
    describe_raw,
    get_range,
    kurt,
    max_value,
    mean,
    median,
    min_value,
    prod_values,
    skew,
    std,
    sum_values,
    unique,
    value_counts,
)
from .windows import cumulative, diff, pct_change, rolling

__all__ = (
    "MISSING",
    "NOT_A_NUMBER",
    "LengthMismatch",
    "is_numeric",
    "read_csv",
    "write_csv",
    "from_arrow",
    "to_arrow",
    "parse_nums",
    "parse_dates",
    "filter_rows",
    "sort_rows",
    "sort_by_col",
    "head",
    "tail",
    "slice_rows",
    "concat",
    "get_col",
    "pick_cols",
    "drop_col",
    "add_col",
    "derive_col",
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
    "pct_change",
    "diff",
    "rolling",
    "cumulative",
    "GroupKey",
    "Grouping",
    "group_by",
    "gb_sum",
    "gb_mean",
    "gb_std",
    "gb_min",
    "gb_max",
    "gb_count",
    "gb_describe",
    "merge",
    "pipe",
    "Pipeline",
)
