"""
Formatting utilities for numbers and diagnostics.

Two groups of helpers live here:

- fmt_type() and fmt_value() render arbitrary objects as short type-value pairs
  for exception messages and logs, robust to broken __repr__.
- format_number(), format_fixed(), format_exponential() and format_plain() render
  canonical int/float values for display. They never consult process locale: the
  decimal point and thousands separator are always explicit arguments.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import re
from typing import Any

__all__ = [
    'fmt_type',
    'fmt_value',
    'format_exponential',
    'format_fixed',
    'format_number',
    'format_plain',
]

# Constants ------------------------------------------------------------------------------------------------------------

_EXPONENT_RE = re.compile(r"e([+-])0*(\d)")


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(obj: Any, *, max_repr: int = 120) -> str:
    """Format type information for exception messages.

    Args:
        obj: A type or an instance.
        max_repr: Maximum length of the type name before truncation.

    Returns:
        String like "<type: int>".

    Examples:
        >>> fmt_type(42)
        '<type: int>'
        >>> fmt_type(list)
        '<type: list>'
    """
    target_type = obj if isinstance(obj, type) else type(obj)
    try:
        type_name = target_type.__name__
    except AttributeError:
        type_name = str(target_type)
    return f"<type: {_fmt_truncate(type_name, max_repr)}>"


def fmt_value(x: Any, *, max_repr: int = 120) -> str:
    """
    Format a single value as a type-value pair for exception messages.

    Handles broken __repr__ gracefully and escapes ">" so the wrapper brackets
    stay unambiguous.

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("0xZZ")
        "<str: '0xZZ'>"
    """
    t = type(x).__name__
    try:
        base_repr = repr(x)
    except Exception as e:
        base_repr = f"<{t} object (repr failed: {type(e).__name__})>"
    base_repr = base_repr.replace(">", "\\>")
    return f"<{t}: {_fmt_truncate(base_repr, max_repr)}>"


def format_number(
        value: int | float,
        decimals: int = 0,
        decimal_point: str = ".",
        thousands_sep: str = ",",
        prefix: str = "",
        suffix: str = "",
) -> str:
    """
    Format a number with grouped thousands and a fixed count of decimals.

    Rounding is half away from zero, so 0.125 with 2 decimals gives "0.13".

    Args:
        value: Canonical int or float.
        decimals: Digits after the decimal point, must be >= 0.
        decimal_point: Decimal separator.
        thousands_sep: Thousands separator, may be empty.
        prefix: Text prepended to the result (e.g. a currency sign).
        suffix: Text appended to the result (e.g. " USD").

    Returns:
        Formatted string. Non-finite floats render as "nan", "inf" or "-inf"
        with prefix and suffix applied.

    Examples:
        >>> format_number(1234.567, 2)
        '1,234.57'
        >>> format_number(1234.56, 2, ".", ",", "$", " USD")
        '$1,234.56 USD'
        >>> format_number(1000, 0, ".", " ")
        '1 000'
    """
    _check_decimals(decimals)

    if isinstance(value, float) and not math.isfinite(value):
        return f"{prefix}{value}{suffix}"

    rounded = _round_half_away(value, decimals)
    sign = "-" if rounded < 0 else ""
    body = f"{abs(rounded):,.{decimals}f}"

    # Swap separators through placeholders so "," and "." can trade places
    body = body.replace(",", "\0").replace(".", "\1")
    body = body.replace("\0", thousands_sep).replace("\1", decimal_point)
    return f"{prefix}{sign}{body}{suffix}"


def format_fixed(value: int | float, decimals: int = 0) -> str:
    """
    Fixed-point notation without grouping, rounded half away from zero.

    Examples:
        >>> format_fixed(1234.567, 2)
        '1234.57'
    """
    return format_number(value, decimals, decimal_point=".", thousands_sep="")


def format_exponential(value: int | float, decimals: int = 0) -> str:
    """
    Exponential notation with an unpadded, always-signed exponent.

    Examples:
        >>> format_exponential(1234.567, 2)
        '1.23e+3'
        >>> format_exponential(0.000123, 1)
        '1.2e-4'
    """
    _check_decimals(decimals)
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    return _EXPONENT_RE.sub(r"e\1\2", f"{value:.{decimals}e}")


def format_plain(value: int | float) -> str:
    """
    Shortest plain representation of a canonical value.

    Whole floats drop the trailing ".0" so that 1000.0 reads "1000",
    matching how integers print.
    """
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer() and abs(value) < 1e15:
            return f"{value:.0f}"
        return repr(value)
    return str(value)


# Private Methods ------------------------------------------------------------------------------------------------------

def _check_decimals(decimals: int) -> None:
    if not isinstance(decimals, int) or isinstance(decimals, bool):
        raise TypeError(f"decimals must be int, got {fmt_type(decimals)}")
    if decimals < 0:
        raise ValueError(f"decimals must be >= 0, got {decimals}")


def _fmt_truncate(s: str, max_len: int, ellipsis: str = "...") -> str:
    """Truncate s to max_len characters, ellipsis included."""
    if len(s) <= max_len:
        return s
    if max_len <= len(ellipsis):
        return s[:max_len]
    return s[:max_len - len(ellipsis)] + ellipsis


def _round_half_away(value: int | float, decimals: int) -> int | float:
    """Round half away from zero; ints with no decimals pass through."""
    if isinstance(value, int):
        return value
    factor = 10 ** decimals
    scaled = abs(value) * factor
    # repr-based correction keeps 1.005 -> 1.01 style cases stable
    scaled = float(f"{scaled:.9f}")
    return math.copysign(math.floor(scaled + 0.5) / factor, value)
