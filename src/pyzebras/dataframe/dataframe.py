"""The Dataframe object itself."""
from typing import Any, Callable, Iterator, Self

import pyarrow as pa

from .. import compute
from ..compute.base import DataFrame, LengthMismatch, Record, Series
from ..compute.grouping import Grouping
from ..utils.tabulate import tabulate


class Dataframe:
  """Data structure that handles data in rows and columns.

  The Dataframe object allows to represent in-memory data
  and perform transformations over it.

  The pyzebras dataframe object is immutable, which means that
  any transformation returns a new Dataframe and the rows
  of the original one are never modified.

  >>> df = Dataframe([{"city": "Rome", "price": "4"}, {"city": "Milan", "price": "9"},
  ...                 {"city": "Rome", "price": "6"}])
  >>> print(df.parse_nums(["price"]).sort_by("price", "desc").head(2))
  city  | price
  ----- | -----
  Milan | 9.00
  Rome  | 6.00
  """
  def __init__(self, rows: DataFrame | None = None) -> None:
    """
    :param rows: The records of the dataframe.
    """
    if rows is None:
      rows = []

    if not isinstance(rows, list):
      raise ValueError("Invalid input, expected a list of records")

    self.rows = rows

  @classmethod
  def open_csv(cls, filename: str) -> Self:
    """Open a CSV file and create a Dataframe out of its data.

    :param filename: The path to a local CSV file.
    """
    return cls(compute.read_csv(filename))

  @classmethod
  def from_arrow(cls, table: pa.Table) -> Self:
    """Create a Dataframe out of the data of a `pyarrow.Table`."""
    return cls(compute.from_arrow(table))

  def __len__(self) -> int:
    return len(self.rows)

  def __iter__(self) -> Iterator[Record]:
    return iter(self.rows)

  def __str__(self) -> str:
    return tabulate(self.rows)

  def filter(self, predicate: Callable[[Record], bool]) -> Self:
    """Only keep the rows matching the predicate and return a new Dataframe.

    :param predicate: The function telling if a row should be kept,
                      for example ``lambda row: row["A"] > row["B"]``.
    """
    return self.__class__(compute.filter_rows(predicate, self.rows))

  def sort_by(self, column: str, direction: str = "asc") -> Self:
    """Sort rows by the values of a column, ``"asc"`` or ``"desc"``."""
    return self.__class__(compute.sort_by_col(column, direction, self.rows))

  def pick(self, columns: list[str]) -> Self:
    """Only keep the listed columns."""
    return self.__class__(compute.pick_cols(columns, self.rows))

  def drop(self, column: str) -> Self:
    """Remove a column."""
    return self.__class__(compute.drop_col(column, self.rows))

  def add_col(self, column: str, values: Series) -> Self:
    """Add a column with one value for each row.

    Differently from :func:`pyzebras.compute.selection.add_col`
    a mismatch in the number of values raises ``ValueError``,
    as there would be no Dataframe to return.
    """
    rows = compute.add_col(column, values, self.rows)
    if isinstance(rows, LengthMismatch):
      raise ValueError(str(rows))
    return self.__class__(rows)

  def derive(self, func: Callable[[Record], Record]) -> Self:
    """Replace each row with the one computed by ``func``."""
    return self.__class__(compute.derive_col(func, self.rows))

  def parse_nums(self, columns: list[str]) -> Self:
    """Convert the listed columns to numbers."""
    return self.__class__(compute.parse_nums(columns, self.rows))

  def parse_dates(self, columns: list[str]) -> Self:
    """Convert the listed columns to timestamps in milliseconds."""
    return self.__class__(compute.parse_dates(columns, self.rows))

  def head(self, n: int) -> Self:
    """Only keep the first ``n`` rows."""
    return self.__class__(compute.head(n, self.rows))

  def tail(self, n: int) -> Self:
    """Only keep the last ``n`` rows."""
    return self.__class__(compute.tail(n, self.rows))

  def col(self, column: str) -> Series:
    """The values of a column."""
    return compute.get_col(column, self.rows)

  def describe(self, column: str) -> Self:
    """Summary statistics of a column."""
    return self.__class__(compute.describe(self.col(column)))

  def group_by(self, key_func: Callable[[Record], Any]) -> Grouping:
    """Split the rows in groups based on the key computed by ``key_func``."""
    return compute.group_by(key_func, self.rows)

  def merge(
    self,
    other: "Dataframe",
    left_on: str,
    right_on: str | None = None,
    suffixes: tuple[str, str] = ("_x", "_y"),
  ) -> Self:
    """Join another dataframe to this one.

    See :func:`pyzebras.compute.join.merge` for details.

    :param other: The dataframe to join.
    :param left_on: The key column in this dataframe.
    :param right_on: The key column in the other dataframe, same as ``left_on`` by default.
    :param suffixes: Appended to columns existing in both dataframes.
    """
    return self.__class__(
      compute.merge(
        self.rows,
        other.rows,
        left_on,
        right_on if right_on is not None else left_on,
        suffixes[0],
        suffixes[1],
      )
    )

  def to_records(self) -> DataFrame:
    """The rows of the dataframe, as a list of dicts."""
    return list(self.rows)

  def to_arrow(self) -> pa.Table:
    """Collect all the data and return a pyarrow.Table"""
    return compute.to_arrow(self.rows)
