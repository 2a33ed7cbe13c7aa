"""Join two dataframes on a key.

The join is performed by grouping the rows of both dataframes
by their key and then, for each key of the left dataframe,
combining the left row with the right row sharing the same key.

Left Join
=========

Provided by :func:`merge`, the function provides a complete description
of the steps involved in performing the join operation.

>>> left = [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}, {"id": 3, "name": "Charlie"}]
>>> right = [{"id": 3, "age": 25}, {"id": 2, "age": 30}, {"id": 4, "age": 40}]
>>> merge(left, right, "id", "id", "_left", "_right")
[{'id': 1, 'name': 'Alice', 'age': MISSING},
 {'id': 2, 'name': 'Bob', 'age': 30},
 {'id': 3, 'name': 'Charlie', 'age': 25}]
"""

from .base import MISSING, DataFrame, Record
from .grouping import GroupKey, group_by

__all__ = ("merge",)


def merge(
    left: DataFrame,
    right: DataFrame,
    left_on: str,
    right_on: str,
    left_suffix: str,
    right_suffix: str,
) -> DataFrame:
    """Join two dataframes keeping all the keys of the left one.

    Supposing we have two tables::

        left:
        +----+--------+-------+
        | id | name   | score |
        +----+--------+-------+
        | 1  | Alice  | 10    |
        | 2  | Bob    | 20    |
        | 3  | Charlie| 30    |
        +----+--------+-------+


        right:
        +----+-----+-------+
        | id | age | score |
        +----+-----+-------+
        | 3  | 25  | 7     |
        | 2  | 30  | 8     |
        | 4  | 40  | 9     |
        +----+-----+-------+

    Joining them on ``id`` with ``"_l"`` and ``"_r"`` suffixes
    would perform the following steps:

    1. Find the columns that, apart from the keys, exist in both tables
       and would collide once joined: ``score``.

    2. Rename the colliding columns appending the suffixes
       so that they can coexist in the result::

        left: id, name, score_l
        right: id, age, score_r

    3. Group the rows of both tables by their key.
       Only the first row of each key takes part in the join,
       any other row sharing the same key is ignored.
       Rows that lack the key column have no key: they never
       match any row, left ones are kept with the right columns
       marked as missing and right ones are ignored.

    4. For each key of the left table, in the order they appear,
       combine the left row with the right row having the same key.
       Keys that only exist in the right table (``4``) are not part
       of the result, keys that only exist in the left table (``1``)
       are preserved with all the right columns marked as
       :data:`pyzebras.compute.base.MISSING`::

        combined:
        +----+--------+---------+---------+---------+
        | id | name   | score_l | age     | score_r |
        +----+--------+---------+---------+---------+
        | 1  | Alice  | 10      | MISSING | MISSING |
        | 2  | Bob    | 20      | 30      | 8       |
        | 3  | Charlie| 30      | 25      | 7       |
        +----+--------+---------+---------+---------+

    Every row of the result has all the columns of both tables,
    in the same order, and is a new record: the rows of the
    joined tables are never modified.

    Renaming doesn't check for columns that already use the suffixed name.
    If the left table had both ``score`` and ``score_l``, the renamed
    ``score`` would replace ``score_l`` and only one of the two values would
    survive. Pick suffixes that don't clash with existing columns.

    :param left: The dataframe whose keys drive the join.
    :param right: The dataframe whose rows are joined to the left ones.
    :param left_on: The key column in the left dataframe.
    :param right_on: The key column in the right dataframe.
    :param left_suffix: Appended to left columns that also exist in the right dataframe.
    :param right_suffix: Appended to right columns that also exist in the left dataframe.
    """
    keys = (left_on, right_on)
    left_columns = _columns(left)
    right_columns = _columns(right)
    colliding = [c for c in left_columns if c in right_columns and c not in keys]

    renamed_left = _rename_columns(left, colliding, left_suffix)
    renamed_right = _rename_columns(right, colliding, right_suffix)

    # Columns of the result, left ones first.
    # dict.fromkeys is used as an ordered set.
    all_columns = list(
        dict.fromkeys(
            _renamed(left_columns, colliding, left_suffix)
            + _renamed(right_columns, colliding, right_suffix)
        )
    )

    right_groups = group_by(
        lambda row: row[right_on], [row for row in renamed_right if right_on in row]
    )

    result = []
    joined_labels = set()
    for row in renamed_left:
        combined = dict(row)
        if left_on in row:
            label = GroupKey.from_value(row[left_on]).label
            if label in joined_labels:
                continue
            joined_labels.add(label)
            if label in right_groups:
                combined.update(right_groups[label][0])
        result.append({c: combined.get(c, MISSING) for c in all_columns})
    return result


def _columns(df: DataFrame) -> list[str]:
    """All the columns appearing in any row, in order of first appearance."""
    return list(dict.fromkeys(c for row in df for c in row))


def _renamed(columns: list[str], colliding: list[str], suffix: str) -> list[str]:
    return [c + suffix if c in colliding else c for c in columns]


def _rename_columns(df: DataFrame, colliding: list[str], suffix: str) -> DataFrame:
    """Append the suffix to the colliding columns, preserving the order of columns."""
    return [_rename_row(row, colliding, suffix) for row in df]


def _rename_row(row: Record, colliding: list[str], suffix: str) -> Record:
    return {(k + suffix if k in colliding else k): v for k, v in row.items()}
