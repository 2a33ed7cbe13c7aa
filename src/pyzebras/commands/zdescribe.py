"""Command line interface for describing the columns of CSV files.

This module provides a command line interface that loads a CSV file
with :func:`pyzebras.compute.datasources.read_csv` and computes
the summary statistics of one of its columns, through
:func:`pyzebras.compute.statistics.describe` or, when a group column
is provided, :func:`pyzebras.compute.aggregate.gb_describe`.

The results are then printed to the console in a tabular format
using the :mod:`pyzebras.utils.tabulate` module.
"""

import argparse
import logging

import pyarrow as pa

from pyzebras import compute
from pyzebras.utils import tabulate

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Parse the command line arguments and describe the column."""
    parser = argparse.ArgumentParser(description="Describe a column of a CSV file.")
    parser.add_argument("filename", type=str, help="The CSV file to load.")
    parser.add_argument(
        "-c", "--column", required=True, help="The column to compute statistics for."
    )
    parser.add_argument(
        "-g",
        "--group",
        help="Compute the statistics for each group of rows sharing the value of this column.",
    )
    parser.add_argument(
        "--max-rows", type=int, default=20, help="How many rows to print at most."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log what is being done."
    )
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        df = compute.read_csv(args.filename)
    except (OSError, pa.ArrowInvalid) as e:
        print(f"Unable to read {args.filename}, {e}")
        return

    if df and args.column not in df[0]:
        print(f"Invalid column {args.column}, available columns: {', '.join(df[0])}")
        return

    df = compute.parse_nums([args.column], df)
    if args.group:
        logger.debug("Describing %s grouped by %s", args.column, args.group)
        grouping = compute.group_by(lambda row: row.get(args.group, compute.MISSING), df)
        result = compute.gb_describe(args.column, grouping)
    else:
        logger.debug("Describing %s", args.column)
        result = compute.describe(compute.get_col(args.column, df))

    print(tabulate.tabulate(result, max_rows=args.max_rows))


if __name__ == "__main__":
    main()
