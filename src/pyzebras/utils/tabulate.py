"""Format tabular data into a text table for print.

the `tabulate` function takes a dataframe and formats it into a text table.
It will truncate long strings, format floats to 2 decimal places, and limit the number of rows to display.
The function is used to display the results of the ``pyzebras-describe`` command.

Example:

    >>> df = [
    ...     {"Product": "Videogame", "Quantity": 8, "Price": 66.5},
    ...     {"Product": "Laptop", "Quantity": 8, "Price": 38.72},
    ...     {"Product": "Laptop", "Quantity": 7, "Price": 77.46},
    ... ]
    >>> print(tabulate(df))
    Product   | Quantity | Price
    --------- | -------- | -----
    Videogame | 8        | 66.50
    Laptop    | 8        | 38.72
    Laptop    | 7        | 77.46
"""

import math
from typing import Any

from ..compute.base import MISSING, DataFrame
from ..compute.pagination import head, tail


def tabulate(df: DataFrame, max_rows: int = 20) -> str:
    """Format a dataframe into a text table.

    The columns are those of the first row,
    rows lacking one of the columns show an empty cell.

    Will produce a string like::

        Product   | Quantity | Price | Total
        --------- | -------- | ----- | ------
        Videogame | 8        | 66.50 | 532.00
        Laptop    | 8        | 38.72 | 309.76
        Laptop    | 7        | 77.46 | 542.22
    """
    cols = list(df[0]) if df else []
    rows = [
        [format_value(row.get(c, MISSING)) for c in cols] for row in head(max_rows, df)
    ]

    colsizes = compute_max_colsize(cols, rows)
    header = [maketablerow(cols, colsizes=colsizes)]
    separator = [maketablerow(["-"] * len(cols), colsizes=colsizes, fillvalue="-")]
    textrows = [maketablerow(row, colsizes=colsizes) for row in rows]

    table = "\n".join(header + separator + textrows)
    if len(df) > max_rows:
        table += f"\n... and {len(df) - max_rows} more rows"
    return table


def print_head(n: int, df: DataFrame) -> str:
    """Format the first ``n`` rows of a dataframe into a text table."""
    return tabulate(head(n, df), max_rows=max(n, 0))


def print_tail(n: int, df: DataFrame) -> str:
    """Format the last ``n`` rows of a dataframe into a text table."""
    return tabulate(tail(n, df), max_rows=max(n, 0))


def compute_max_colsize(cols: list[str], rows: list[list[str]]) -> list[int]:
    """Compute the maximum size of each column in a table."""
    return [
        max([len(row[colidx]) for row in rows] + [len(cols[colidx])])
        for colidx, _ in enumerate(cols)
    ]


def maketablerow(cols: list[str], colsizes: list[int], fillvalue: str = " ") -> str:
    """Make a table row with the given column sizes."""
    return " | ".join(
        [col.ljust(colsizes[idx], fillvalue) for idx, col in enumerate(cols)]
    )


def format_value(v: Any) -> str:
    """Format a value to be printed in the table.

    This function will format floats to 2 decimal places,
    and truncate long strings. Missing values are left empty.
    """
    if v is MISSING or v is None:
        return ""
    elif isinstance(v, float):
        if math.isnan(v):
            return "NaN"
        return f"{v:.2f}"
    elif isinstance(v, bool):
        return "true" if v else "false"

    v = str(v)
    if len(v) > 30:
        v = v[:27] + "..."
    return v
