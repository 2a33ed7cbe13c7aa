"""Base types and markers shared by the compute functions.

Data is represented with plain Python containers:

* A **series** is a ``list`` of scalar values.
* A **record** is a ``dict`` mapping column names to values.
* A **dataframe** is a ``list`` of records, all expected
  to share the same columns.

No compute function ever modifies the data it receives,
every transformation returns newly built lists and dicts.

Next to the containers, this module defines the few special
values the compute functions can emit:

* :data:`MISSING` marks a column that was absent in a row.
* :data:`NOT_A_NUMBER` is emitted by rolling windows that are not yet full.
* :class:`LengthMismatch` is returned in place of a result when two
  inputs that should be aligned have different lengths.
"""

import math
from dataclasses import dataclass
from typing import Any

Series = list[Any]
Record = dict[str, Any]
DataFrame = list[Record]

NOT_A_NUMBER = "NotANumber"


class _Missing:
    """Marker for a column that is absent from a row.

    There is only one instance of this class, :data:`MISSING`,
    it can be compared by identity and it is falsy.
    """

    _instance = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"


MISSING = _Missing()


@dataclass(frozen=True)
class LengthMismatch:
    """Result of an operation whose inputs were expected to have the same length.

    Instead of raising, operations like :func:`pyzebras.compute.statistics.corr`
    and :func:`pyzebras.compute.selection.add_col` return this value
    so that the caller can tell apart malformed inputs from a legit result:

    >>> from pyzebras.compute.statistics import corr
    >>> result = corr([1, 2, 3], [1, 2])
    >>> isinstance(result, LengthMismatch)
    True
    >>> print(result)
    corr: inputs are not the same length (3 != 2)
    """

    operation: str
    left_length: int
    right_length: int

    def __str__(self) -> str:
        return (
            f"{self.operation}: inputs are not the same length "
            f"({self.left_length} != {self.right_length})"
        )


def is_numeric(value: Any) -> bool:
    """Tell if a value can take part in arithmetic.

    Any ``int`` and finite ``float`` values are numeric,
    numeric strings are not converted and booleans are excluded.

    >>> [is_numeric(v) for v in (3, 2.5, "3", float("nan"), True, None)]
    [True, True, False, False, False, False]
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # math.isfinite would convert ints to float, which overflows for huge ints.
    return not isinstance(value, float) or math.isfinite(value)


def numeric_values(series: Series) -> list[int | float]:
    """Only keep the values of the series that are numeric."""
    return [v for v in series if is_numeric(v)]


def to_float(value: int | float) -> float:
    """Convert a number to float.

    Integers too large for a float become infinity
    instead of raising :class:`OverflowError`.

    >>> to_float(3), to_float(-10**400)
    (3.0, -inf)
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def divide(dividend: float, divisor: float) -> float:
    """Divide following IEEE 754 floating point rules.

    Dividing by zero doesn't raise, it leads to
    infinity or to NaN when the dividend is zero too.
    Results beyond the float range become infinity.

    >>> divide(1, 0), divide(-1, 0), divide(0, 0)
    (inf, -inf, nan)
    >>> divide(10**400, 3)
    inf
    """
    if divisor == 0:
        dividend = to_float(dividend)
        if dividend == 0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1, divisor)
    try:
        return dividend / divisor
    except OverflowError:
        return to_float(dividend) / to_float(divisor)
