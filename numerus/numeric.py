"""
Unwrap numeric objects from the stdlib and third-party libraries.

The normalizer handles str, bool, None, int, float and Number itself; every
other object is offered to std_numeric(), which recognizes numeric protocols
(NumPy scalars, Decimal, Fraction, custom __index__/__float__ types) and
rejects the rest.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import io
import operator
from collections import abc
from typing import Literal, Protocol, runtime_checkable

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type

__all__ = ['SupportsFloat', 'is_handle', 'std_numeric']


@runtime_checkable
class SupportsFloat(Protocol):
    """Protocol for duck-typed numeric conversion."""

    def __float__(self) -> float: ...


def std_numeric(
        value,
        *,
        on_error: Literal["raise", "none"] = "raise",
) -> int | float | None:
    """
    Convert a numeric object to a standard Python int or float.

    Parameters
    ----------
    value : various
        Numeric object. str, bytes, bool, containers and I/O handles are never
        numeric here, even when they implement a numeric dunder.

    on_error : {"raise", "none"}, default "raise"
        What to do when value has no numeric interpretation:

        - "raise": Raise TypeError
        - "none": Return None, leaving the diagnostic to the caller

    Returns
    -------
    int
        For int, types implementing __index__ (NumPy integers), integer-valued
        Decimal/Fraction, and types implementing only __int__.

    float
        For float and float-like types via __float__, including inf and nan.

    None
        Only when on_error="none" and value is unsupported.

    Raises
    ------
    TypeError
        When on_error="raise" and value is unsupported.

    Detection Priority
    ------------------
    1. int/float fast path
    2. __index__() → int (NumPy integers, strictest)
    3. .item() → int or float (array scalars)
    4. Integer-valued Decimal/Fraction → int
    5. __int__() → int (when __float__ not available)
    6. __float__() → float (general fallback)

    Examples
    --------
    >>> from decimal import Decimal
    >>> std_numeric(Decimal('42.0'))
    42
    >>> std_numeric(Decimal('3.5'))
    3.5
    >>> std_numeric([1, 2], on_error="none") is None
    True
    """
    # bool is an int subclass but carries no magnitude here
    if isinstance(value, bool) or value is None:
        return _unsupported(value, on_error)

    if isinstance(value, (int, float)):
        return value

    # Text, containers and handles are never numeric
    if isinstance(value, (str, bytes, bytearray, memoryview, abc.Collection)) or is_handle(value):
        return _unsupported(value, on_error)

    # Priority 1: __index__ marks exact integers
    if hasattr(value, '__index__'):
        try:
            return operator.index(value)
        except (TypeError, ValueError):
            return _unsupported(value, on_error)

    # Priority 2: array scalars, .item() returns a Python scalar
    if hasattr(value, 'item') and callable(value.item):
        try:
            result = value.item()
        except (TypeError, ValueError, AttributeError):
            result = None
        if isinstance(result, (int, float)) and not isinstance(result, bool):
            return result

    # Priority 3: integer-valued Decimal/Fraction stay exact
    if type(value).__name__ in ('Decimal', 'Fraction') and hasattr(value, '__int__'):
        try:
            as_int = int(value)
            if value == type(value)(as_int):
                return as_int
        except (TypeError, ValueError, OverflowError):
            pass

    # Priority 4: __int__ without __float__
    if hasattr(value, '__int__') and not hasattr(value, '__float__'):
        try:
            return int(value)
        except (TypeError, ValueError, OverflowError):
            return _unsupported(value, on_error)

    # Priority 5: __float__, may overflow to inf or underflow to 0.0
    if isinstance(value, SupportsFloat):
        try:
            return float(value)
        except (TypeError, ValueError):
            return _unsupported(value, on_error)

    return _unsupported(value, on_error)


def is_handle(value) -> bool:
    """True for file objects and other I/O handles."""
    return isinstance(value, io.IOBase) or (hasattr(value, 'read') and hasattr(value, 'close'))


# Private Methods ------------------------------------------------------------------------------------------------------

def _unsupported(value, on_error: str) -> None:
    if on_error == "raise":
        raise TypeError(
            f"unsupported numeric type: {fmt_type(value)}. "
            f"Expected int, float, or types implementing __index__, __int__, "
            f"__float__ or .item() (e.g., numpy scalars, Decimal, Fraction)"
        )
    return None
