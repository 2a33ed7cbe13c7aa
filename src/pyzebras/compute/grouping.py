"""Partition the rows of a dataframe in groups.

Before computing per-group statistics, rows have
to be split in groups based on some key.

The key is computed for each row by a function provided
by the caller, and rows that share the same key end up in the same group.

For example, given the following data::

    city, shop, n_employees
    New York, Shop A, 10
    New York, Shop B, 15
    Los Angeles, Shop C, 8
    Los Angeles, Shop D, 12
    New York, Shop E, 20

Grouping by city would lead to two groups::

    New York: Shop A, Shop B, Shop E
    Los Angeles: Shop C, Shop D

Groups are identified by their label, which is the ``str()``
of the key. This means that keys which look the same once
converted to text, like ``1`` and ``"1"``, share the same group.
Each group remembers the first key that created it, so that
the original type of the key is not lost.

>>> shops = [
...     {"city": "New York", "shop": "Shop A", "n_employees": 10},
...     {"city": "New York", "shop": "Shop B", "n_employees": 15},
...     {"city": "Los Angeles", "shop": "Shop C", "n_employees": 8},
...     {"city": "Los Angeles", "shop": "Shop D", "n_employees": 12},
...     {"city": "New York", "shop": "Shop E", "n_employees": 20},
... ]
>>> grouping = group_by(lambda row: row["city"], shops)
>>> list(grouping)
['New York', 'Los Angeles']
>>> [row["shop"] for row in grouping["Los Angeles"]]
['Shop C', 'Shop D']
"""

from collections.abc import Mapping
from typing import Any, Callable, Iterator, NamedTuple

from .base import DataFrame, Record

__all__ = ("GroupKey", "Grouping", "group_by")


class GroupKey(NamedTuple):
    """The key that originated a group.

    :param kind: The name of the type of the key, like ``"int"`` or ``"str"``.
    :param label: The text representation of the key, which identifies the group.
    :param value: The key itself, as returned by the key function.
    """

    kind: str
    label: str
    value: Any

    @classmethod
    def from_value(cls, value: Any) -> "GroupKey":
        return cls(type(value).__name__, str(value), value)


class Grouping(Mapping):
    """Rows of a dataframe partitioned in groups.

    Behaves as a read-only mapping from the group label to the
    rows of the group. Groups are in the order the first
    row of each group appeared in the source dataframe,
    and the rows of each group preserve their original order.
    """

    def __init__(self, groups: dict[str, DataFrame], keys: dict[str, GroupKey]) -> None:
        """
        :param groups: The rows of each group, by group label.
        :param keys: The key that originated each group, by group label.
        """
        self._groups = groups
        self._keys = keys

    def __getitem__(self, label: str) -> DataFrame:
        return self._groups[label]

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __repr__(self) -> str:
        sizes = ", ".join(f"{label!r}: {len(rows)}" for label, rows in self._groups.items())
        return f"Grouping({{{sizes}}})"

    def key(self, label: str) -> GroupKey:
        """The key that originated the group with the given label."""
        return self._keys[label]


def group_by(key_func: Callable[[Record], Any], df: DataFrame) -> Grouping:
    """Split the rows of a dataframe in groups.

    :param key_func: Function computing the key of a row.
                     Any exception it raises is propagated.
    :param df: The dataframe to partition.
    """
    groups: dict[str, DataFrame] = {}
    keys: dict[str, GroupKey] = {}
    for row in df:
        key = GroupKey.from_value(key_func(row))
        if key.label not in groups:
            groups[key.label] = []
            keys[key.label] = key
        groups[key.label].append(row)
    return Grouping(groups, keys)
