"""Compose functions into pipelines.

Every compute function receives the data as its last argument,
so :func:`functools.partial` can bind all the other arguments
and leave a function that only waits for the data.
Those functions can then be chained one after the other:

>>> from functools import partial
>>> from pyzebras.compute.filtering import filter_rows
>>> from pyzebras.compute.selection import get_col
>>> from pyzebras.compute.statistics import mean
>>> df = [{"city": "Rome", "price": 4}, {"city": "Rome", "price": 6}, {"city": "Milan", "price": 9}]
>>> pipe([partial(filter_rows, lambda row: row["city"] == "Rome"), partial(get_col, "price"), mean], df)
5.0
"""

from typing import Any, Callable

from ..utils.inspect import get_qualname

__all__ = ("pipe", "Pipeline")


class Pipeline:
    """A reusable sequence of functions.

    Calling the pipeline invokes each function with the
    result of the previous one, starting from the provided data.

    >>> from pyzebras.compute.statistics import unique
    >>> count_distinct = Pipeline(unique, len)
    >>> count_distinct(["a", "b", "a"])
    2
    >>> print(count_distinct)
    Pipeline(pyzebras.compute.statistics.unique -> builtins.len)
    """

    def __init__(self, *funcs: Callable[[Any], Any]) -> None:
        """
        :param funcs: The functions to apply, in the order they have to be applied.
        """
        self.funcs = funcs

    def __str__(self) -> str:
        return f"Pipeline({' -> '.join(get_qualname(f) for f in self.funcs)})"

    def __call__(self, data: Any) -> Any:
        for func in self.funcs:
            data = func(data)
        return data


def pipe(funcs: list[Callable[[Any], Any]], data: Any) -> Any:
    """Apply the functions to the data, one after the other."""
    return Pipeline(*funcs)(data)
