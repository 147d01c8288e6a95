"""
Normalize dynamic input into a canonical int or float.

All conversion goes through try_normalize(), which returns a (result, error) pair.
The public entry points differ only in how they treat the error:

- convert_to_number() / normalize(): strict, raise the ConversionError
- convert_value(): lenient, return the original input unchanged

Coercion policy:
    str             parsed by notation (hex, binary, octal, decimal, scientific)
    bool            True → 1, False → 0
    None            0
    Number          unwrapped to its value
    int, float      unchanged
    numeric objects Decimal, Fraction, NumPy scalars etc. via std_numeric()
    anything else   UnsupportedTypeError (containers, I/O handles, opaque objects)

Strings padded with whitespace are always rejected: parsing never guesses intent
around whitespace. Decimal parsing is locale-agnostic and touches no global state.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
from collections import abc
from enum import StrEnum, unique
from typing import Any

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .convert import base_to_decimal, parse_decimal
from .detect import Notation, classify
from .errors import (
    ConversionError,
    EmptyInputError,
    InvalidFormatError,
    UnsupportedTypeError,
    WhitespaceRejectedError,
)
from .formatters import fmt_type, fmt_value
from .numeric import is_handle, std_numeric

__all__ = [
    'InputKind',
    'convert_to_number',
    'convert_value',
    'convert_values',
    'get_conversion_info',
    'input_kind',
    'is_numeric',
    'normalize',
    'try_normalize',
]

logger = logging.getLogger(__name__)


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class InputKind(StrEnum):
    """Shapes of input accepted by the normalizer, one branch each."""
    STRING = "string"
    BOOL = "bool"
    NONE = "none"
    PRIMITIVE = "primitive"
    WRAPPED = "wrapped"
    NUMERIC_OBJECT = "numeric_object"
    UNSUPPORTED = "unsupported"


# Methods --------------------------------------------------------------------------------------------------------------

def input_kind(value: Any) -> InputKind:
    """Classify the runtime shape of value for normalization."""
    from .number import Number

    if isinstance(value, str):
        return InputKind.STRING
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return InputKind.BOOL
    if value is None:
        return InputKind.NONE
    if isinstance(value, (int, float)):
        return InputKind.PRIMITIVE
    if isinstance(value, Number):
        return InputKind.WRAPPED
    if std_numeric(value, on_error="none") is not None:
        return InputKind.NUMERIC_OBJECT
    return InputKind.UNSUPPORTED


def try_normalize(value: Any) -> tuple[int | float | None, ConversionError | None]:
    """
    Convert value to a canonical int or float without raising.

    Returns:
        (result, None) on success, (None, error) on failure. The error is the
        exception the strict API would raise.

    Examples:
        >>> try_normalize("0xFF")
        (255, None)
        >>> try_normalize(" 1 ")[1]
        WhitespaceRejectedError('Cannot convert string with whitespace to number: " 1 "')
    """
    kind = input_kind(value)

    if kind is InputKind.STRING:
        return _normalize_string(value)
    if kind is InputKind.BOOL:
        return int(value), None
    if kind is InputKind.NONE:
        return 0, None
    if kind is InputKind.PRIMITIVE:
        return value, None
    if kind is InputKind.WRAPPED:
        return value.value, None
    if kind is InputKind.NUMERIC_OBJECT:
        return std_numeric(value), None
    return None, UnsupportedTypeError(_unsupported_message(value), value=value)


def convert_to_number(value: Any) -> int | float:
    """
    Strictly convert value to a canonical int or float.

    Raises:
        EmptyInputError: For "".
        WhitespaceRejectedError: For strings with leading or trailing whitespace.
        InvalidFormatError: For strings matching no numeric notation.
        UnsupportedTypeError: For containers, I/O handles and opaque objects.

    Examples:
        >>> convert_to_number("0b1010")
        10
        >>> convert_to_number("1e3")
        1000.0
        >>> convert_to_number(None)
        0
        >>> convert_to_number("123abc")
        Traceback (most recent call last):
            ...
        numerus.errors.InvalidFormatError: Cannot convert non-numeric string to number: "123abc"
    """
    result, error = try_normalize(value)
    if error is not None:
        raise error
    return result


def normalize(value: Any) -> int | float:
    """Strict normalization, same contract as convert_to_number()."""
    return convert_to_number(value)


def convert_value(value: Any) -> Any:
    """
    Leniently convert value, returning the original input when it is not convertible.

    This is the only place where conversion errors are suppressed. The reason is
    logged at DEBUG level.

    Examples:
        >>> convert_value("45.67")
        45.67
        >>> convert_value(" 123 ")
        ' 123 '
        >>> convert_value("hello")
        'hello'
    """
    result, error = try_normalize(value)
    if error is not None:
        logger.debug("keeping %s unchanged: %s", fmt_value(value, max_repr=60), error)
        return value
    return result


def convert_values(values: abc.Mapping | abc.Iterable) -> dict | list:
    """
    Apply convert_value() to every element, preserving mapping keys.

    Args:
        values: Mapping (keys kept, values converted) or any other iterable.

    Returns:
        dict for mappings, list otherwise.

    Raises:
        TypeError: If values is a str/bytes or not iterable.

    Examples:
        >>> convert_values({"id": "123", "name": "hello", "hex": "0xFF"})
        {'id': 123, 'name': 'hello', 'hex': 255}
        >>> convert_values(["123", "45.67", "hello"])
        [123, 45.67, 'hello']
    """
    if isinstance(values, abc.Mapping):
        return {k: convert_value(v) for k, v in values.items()}
    if isinstance(values, (str, bytes, bytearray)) or not isinstance(values, abc.Iterable):
        raise TypeError(f"values must be a mapping or a non-text iterable, got {fmt_type(values)}")
    return [convert_value(v) for v in values]


def is_numeric(value: Any) -> bool:
    """
    Check whether value converts to a number under the strict rules.

    bool and None are not numeric even though the normalizer coerces them.

    Examples:
        >>> is_numeric("0755")
        True
        >>> is_numeric(" 123 ")
        False
        >>> is_numeric(True)
        False
    """
    if isinstance(value, bool) or value is None:
        return False
    return try_normalize(value)[1] is None


def get_conversion_info(value: Any) -> frozendict:
    """
    Describe how a string would be converted, without converting it.

    Returns:
        Immutable mapping with keys:
            will_convert: True if the string converts under the strict rules.
            original_value: The input.
            target_type: "int" or "float" when converting, else type(value).__name__.
            is_scientific, is_integer, is_float: Result shape.
            is_hex, is_octal, is_binary: Prefixed notation detected.

        Non-string inputs always report will_convert=False.

    Examples:
        >>> info = get_conversion_info("0xFF")
        >>> info["target_type"], info["is_hex"]
        ('int', True)
    """
    info = {
        "will_convert": False,
        "original_value": value,
        "target_type": type(value).__name__,
        "is_scientific": False,
        "is_integer": False,
        "is_float": False,
        "is_hex": False,
        "is_octal": False,
        "is_binary": False,
    }
    if not isinstance(value, str):
        return frozendict(info)

    result, error = _normalize_string(value)
    if error is not None:
        return frozendict(info)

    notation = classify(value).notation
    info.update(
        will_convert=True,
        target_type=type(result).__name__,
        is_scientific=notation is Notation.SCIENTIFIC,
        is_integer=isinstance(result, int),
        is_float=isinstance(result, float),
        is_hex=notation is Notation.HEX,
        is_octal=notation in (Notation.OCTAL_MODERN, Notation.OCTAL_TRADITIONAL),
        is_binary=notation is Notation.BINARY,
    )
    return frozendict(info)


# Private Methods ------------------------------------------------------------------------------------------------------

def _normalize_string(value: str) -> tuple[int | float | None, ConversionError | None]:
    if value == "":
        return None, EmptyInputError("Cannot convert empty string to number", value=value)

    if value != value.strip():
        return None, WhitespaceRejectedError(
            f'Cannot convert string with whitespace to number: "{value}"', value=value)

    c = classify(value)
    if c.notation is Notation.INVALID:
        return None, InvalidFormatError(
            f'Cannot convert non-numeric string to number: "{value}"', value=value)
    if c.notation in (Notation.DECIMAL, Notation.SCIENTIFIC):
        return parse_decimal(c.payload), None
    return base_to_decimal(c.payload, c.radix), None


def _unsupported_message(value: Any) -> str:
    if is_handle(value):
        return "Cannot convert resource to number"
    if isinstance(value, (abc.Collection, bytes, bytearray, memoryview)):
        return f"Cannot convert {type(value).__name__} to number"
    return f"Cannot convert object of type {type(value).__name__} to number"
