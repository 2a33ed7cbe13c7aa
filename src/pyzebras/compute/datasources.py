"""Load and store dataframes.

The datasource functions fetch the data from some source,
convert it into a dataframe the compute functions can work on,
or do the opposite to save a dataframe.

They are used to do things like loading
data from CSV files or exchanging data with
Apache Arrow based tools.

CSV files are parsed with :mod:`pyarrow.csv`, but no type
inference is performed: all the values are loaded as text
and must be explicitly parsed with :func:`pyzebras.compute.conversion.parse_nums`
or :func:`pyzebras.compute.conversion.parse_dates`.
"""

import logging
from typing import Any

import pyarrow as pa
import pyarrow.csv

from .base import MISSING, DataFrame

__all__ = ("read_csv", "write_csv", "from_arrow", "to_arrow")

logger = logging.getLogger(__name__)


def read_csv(filename: str, block_size: int | None = None) -> DataFrame:
    """Load a CSV file as a dataframe.

    The first line of the file provides the column names,
    each subsequent line becomes a row with all values as strings.

    :param filename: The path of the local CSV file.
    :param block_size: How many bytes to process at a time
                       while reading the file.
    """
    read_options = pa.csv.ReadOptions(block_size=block_size)

    # Only read the header, to know the columns
    # and force all of them to be loaded as text.
    with pa.csv.open_csv(filename, read_options=read_options) as reader:
        columns = reader.schema.names

    table = pa.csv.read_csv(
        filename,
        read_options=read_options,
        convert_options=pa.csv.ConvertOptions(
            column_types={name: pa.string() for name in columns}
        ),
    )
    logger.debug("Read %d rows with columns %s from %s", table.num_rows, columns, filename)
    return from_arrow(table)


def write_csv(filename: str, df: DataFrame) -> None:
    """Save a dataframe to a CSV file.

    The header contains every column appearing in the dataframe,
    values are written as text and missing values as empty cells.

    :param filename: The path of the local CSV file to write.
    :param df: The dataframe to save.
    """
    columns = list(dict.fromkeys(c for row in df for c in row))
    table = pa.table(
        {
            c: pa.array([_to_text(row.get(c, MISSING)) for row in df], type=pa.string())
            for c in columns
        }
    )
    pa.csv.write_csv(table, filename)
    logger.debug("Wrote %d rows to %s", len(df), filename)


def from_arrow(table: pa.Table | pa.RecordBatch) -> DataFrame:
    """Convert a :class:`pyarrow.Table` or :class:`pyarrow.RecordBatch` to a dataframe."""
    return table.to_pylist()


def to_arrow(df: DataFrame) -> pa.Table:
    """Convert a dataframe to a :class:`pyarrow.Table`.

    Missing values become nulls. Columns must contain values
    of a type pyarrow can infer, mixing text and numbers
    in the same column is not supported.
    """
    columns = list(dict.fromkeys(c for row in df for c in row))
    return pa.table(
        {c: [_to_nullable(row.get(c, MISSING)) for row in df] for c in columns}
    )


def _to_nullable(value: Any) -> Any:
    return None if value is MISSING else value


def _to_text(value: Any) -> str:
    if value is MISSING or value is None:
        return ""
    return str(value)
