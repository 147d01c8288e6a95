"""
Descriptive statistics over numeric-or-Number sequences.

Every element is strictly normalized and fitted to the native word first, so
strings, Number instances and numeric objects mix freely. Results are Number
instances; int results are kept where the arithmetic is exact.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from collections import abc
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import StatisticsError
from .formatters import fmt_type
from .number import Number, exact_divide

__all__ = ['mean', 'median', 'midrange', 'mode', 'standard_deviation', 'variance']


# Methods --------------------------------------------------------------------------------------------------------------

def mean(values: abc.Iterable) -> Number:
    """
    Arithmetic mean; int when the sum divides evenly.

    Examples:
        >>> mean([1, 2, 3, 4, 5]).value
        3
        >>> mean([1, 2, 2, 3, 100]).value
        21.6
    """
    data = _collect(values, "mean")
    return Number(exact_divide(sum(data), len(data)))


def median(values: abc.Iterable) -> Number:
    """
    Middle value of the sorted data.

    For an odd count the middle element is returned with its own type; for an
    even count the mean of the two middle elements is returned as float.

    Examples:
        >>> median([3, 1, 2]).value
        2
        >>> median([1, 2, 3, 4]).value
        2.5
    """
    data = sorted(_collect(values, "median"))
    n = len(data)
    mid = n // 2
    if n % 2:
        return Number(data[mid])
    return Number((data[mid - 1] + data[mid]) / 2)


def mode(values: abc.Iterable) -> Number:
    """
    Most frequent value as float; ties go to the value seen first.

    Examples:
        >>> mode([1, 2, 2, 3]).value
        2.0
    """
    data = _collect(values, "mode")
    counts = {}
    for x in data:
        counts[x] = counts.get(x, 0) + 1
    # dict keeps first-seen order, max() keeps the first of equal counts
    best = max(counts, key=counts.__getitem__)
    return Number(float(best))


def variance(values: abc.Iterable, *, population: bool = False) -> Number:
    """
    Sample variance (n - 1 denominator), or population variance when population=True.

    Raises:
        StatisticsError: If values is empty, or holds a single value for the sample variance.
    """
    data = _collect(values, "variance")
    n = len(data)
    if not population and n < 2:
        raise StatisticsError("Cannot calculate sample variance of fewer than two values", value=data)
    avg = sum(data) / n
    squares = math.fsum((x - avg) * (x - avg) for x in data)
    return Number(squares / (n if population else n - 1))


def standard_deviation(values: abc.Iterable, *, population: bool = False) -> Number:
    """
    Square root of variance(); sample by default.

    Examples:
        >>> round(standard_deviation([1, 2, 3, 4, 5]).value, 2)
        1.58
        >>> round(standard_deviation([1, 2, 3, 4, 5], population=True).value, 2)
        1.41
    """
    return variance(values, population=population).sqrt()


def midrange(values: abc.Iterable) -> Number:
    """
    Mean of the smallest and the largest value; int when exact.

    Examples:
        >>> midrange([1, 5]).value
        3
        >>> midrange([1, 4]).value
        2.5
    """
    data = _collect(values, "midrange")
    return Number(exact_divide(min(data) + max(data), 2))


# Private Methods ------------------------------------------------------------------------------------------------------

def _collect(values: Any, operation: str) -> list[int | float]:
    if isinstance(values, (str, bytes, bytearray)) or not isinstance(values, abc.Iterable):
        raise TypeError(f"values must be a non-text iterable, got {fmt_type(values)}")
    data = [Number(v).value for v in values]
    if not data:
        raise StatisticsError(f"Cannot calculate {operation} of empty sequence", value=data)
    return data
