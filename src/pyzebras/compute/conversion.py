"""Parse the values of columns loaded as text.

Data read from CSV files will only contain strings,
columns need to be explicitly converted to numbers
before statistics can be computed on them.

>>> df = [{"Date": "2019-01-02", "Close": "39.48"}, {"Date": "2019-01-03", "Close": "n/a"}]
>>> parse_nums(["Close"], df)
[{'Date': '2019-01-02', 'Close': 39.48}, {'Date': '2019-01-03', 'Close': nan}]
>>> parse_dates(["Date"], df)[0]["Date"]
1546387200000.0
"""

import math
from datetime import datetime, timezone
from typing import Any, Callable

from .base import DataFrame

__all__ = ("parse_nums", "parse_dates")


def _convert_columns(
    columns: list[str], converter: Callable[[Any], Any], df: DataFrame
) -> DataFrame:
    return [
        {k: converter(v) if k in columns else v for k, v in row.items()} for row in df
    ]


def _to_number(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def _to_timestamp(value: Any) -> float:
    """Milliseconds since the Unix epoch, dates without a timezone are UTC."""
    try:
        parsed = datetime.fromisoformat(str(value))
    except ValueError:
        return math.nan
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp() * 1000


def parse_nums(columns: list[str], df: DataFrame) -> DataFrame:
    """Convert the listed columns to numbers.

    Values that can't be parsed as numbers become NaN.
    """
    return _convert_columns(columns, _to_number, df)


def parse_dates(columns: list[str], df: DataFrame) -> DataFrame:
    """Convert the listed columns from ISO 8601 dates to timestamps in milliseconds.

    Values that can't be parsed as dates become NaN.
    """
    return _convert_columns(columns, _to_timestamp, df)
