"""
Radix conversion between numeral strings and canonical int/float values.

Prefixed notations ("0x", "0b", "0o", leading "0") are converted with their
fixed radix, explicit radixes 2..36 use positional notation, and plain decimal
literals go through a locale-agnostic parser. Integers beyond the native word
(see NumeralConf) are returned as float.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import math
import re

# Local ----------------------------------------------------------------------------------------------------------------
from .detect import Notation, NumeralConf, classify, decimal_prefix, is_base, is_decimal, validate_radix
from .errors import EmptyInputError, InvalidFormatError
from .formatters import fmt_type

__all__ = [
    'base_to_decimal',
    'binary_to_decimal',
    'convert_base',
    'fit_native',
    'hex_to_decimal',
    'octal_to_decimal',
    'parse_decimal',
    'parse_float',
    'parse_int',
    'to_base',
]

logger = logging.getLogger(__name__)

_HEX_PREFIX_RE = re.compile(r"0[xX](?=.)")
_BINARY_PREFIX_RE = re.compile(r"0[bB](?=.)")
_OCTAL_PREFIX_RE = re.compile(r"0[oO](?=.)")
_MAX_WORD_DIGITS = len(str(NumeralConf.INT_MAX))


# Methods --------------------------------------------------------------------------------------------------------------

def base_to_decimal(value: str, radix: int) -> int | float:
    """
    Convert a string of radix digits to its decimal value.

    The string is validated in full before conversion, so a half-valid string is
    never partially converted.

    Args:
        value: Digits of the given radix, no prefix, no sign, case-insensitive.
        radix: Radix in [2, 36].

    Returns:
        int, or float when the value exceeds the native word size.

    Raises:
        RadixOutOfRangeError: If radix is outside [2, 36].
        EmptyInputError: If value is empty.
        InvalidFormatError: If any character is not a digit of radix.
        TypeError: If value is not a str.

    Examples:
        >>> base_to_decimal("ZZ", 36)
        1295
        >>> base_to_decimal("89", 8)
        Traceback (most recent call last):
            ...
        numerus.errors.InvalidFormatError: Value '89' is not valid for base 8
    """
    validate_radix(radix)
    if not isinstance(value, str):
        raise TypeError(f"value must be str, got {fmt_type(value)}")
    if value == "":
        raise EmptyInputError("Empty string cannot be converted", value=value)
    if not is_base(value, radix):
        raise InvalidFormatError(f"Value '{value}' is not valid for base {radix}", value=value)
    return fit_native(int(value, radix))


def hex_to_decimal(value: str) -> int | float:
    """Convert hexadecimal digits, with or without a "0x" prefix."""
    return base_to_decimal(_strip(value, _HEX_PREFIX_RE), 16)


def binary_to_decimal(value: str) -> int | float:
    """Convert binary digits, with or without a "0b" prefix."""
    return base_to_decimal(_strip(value, _BINARY_PREFIX_RE), 2)


def octal_to_decimal(value: str) -> int | float:
    """
    Convert octal digits in modern ("0o755"), traditional ("0755") or bare ("755") form.

    A traditional leading zero is a valid octal digit, so it needs no stripping.
    """
    return base_to_decimal(_strip(value, _OCTAL_PREFIX_RE), 8)


def parse_decimal(value: str) -> int | float:
    """
    Parse a decimal literal without consulting the process locale.

    The decimal point is always ".". Literals with a decimal point or an exponent
    marker become float; scientific notation is float even when whole ("1e3" is
    1000.0). Integer literals become int unless they exceed the native word size.

    Raises:
        InvalidFormatError: If value is not a decimal literal.
        TypeError: If value is not a str.

    Examples:
        >>> parse_decimal("-42")
        -42
        >>> parse_decimal("000123")
        123
        >>> parse_decimal("2.5e-3")
        0.0025
    """
    if not isinstance(value, str):
        raise TypeError(f"value must be str, got {fmt_type(value)}")
    if not is_decimal(value):
        raise InvalidFormatError(f"Value '{value}' is not a decimal number", value=value)
    if any(ch in value for ch in ".eE"):
        return float(value)
    # Wider than any native word, skip the int round trip
    if len(value.lstrip("+-").lstrip("0")) > _MAX_WORD_DIGITS:
        return float(value)
    return fit_native(int(value, 10))


def convert_base(value: str, radix: int | None = None) -> int | float:
    """
    Convert a numeral string to a decimal value, auto-detecting the base if needed.

    With an explicit radix the whole string must consist of that radix's digits.
    Without one the notation is detected with precedence hexadecimal, binary,
    octal, decimal; decimal and scientific literals are parsed as such.

    Args:
        value: Numeral string.
        radix: Radix in [2, 36], or None to auto-detect.

    Returns:
        Canonical int or float.

    Raises:
        EmptyInputError: If value is empty.
        RadixOutOfRangeError: If radix is given and outside [2, 36].
        InvalidFormatError: If value is not valid for radix, or no notation matches.
        TypeError: If value is not a str.

    Examples:
        >>> convert_base("FF", 16)
        255
        >>> convert_base("0o755")
        493
        >>> convert_base("0b1010")
        10
        >>> convert_base("123.45")
        123.45
    """
    if not isinstance(value, str):
        raise TypeError(f"value must be str, got {fmt_type(value)}")
    if value == "":
        raise EmptyInputError("Empty string cannot be converted", value=value)

    if radix is not None:
        return base_to_decimal(value, radix)

    c = classify(value)
    logger.debug("auto-detected %s notation for %r", c.notation, value)

    if c.notation is Notation.INVALID:
        raise InvalidFormatError(f"Cannot auto-detect base for value: {value}", value=value)
    if c.notation in (Notation.DECIMAL, Notation.SCIENTIFIC):
        return parse_decimal(c.payload)
    return base_to_decimal(c.payload, c.radix)


def parse_int(value, radix: int = 10) -> int:
    """
    Forgiving integer parse: read the leading run of radix digits, default to 0.

    Surrounding whitespace is ignored and an optional sign is honored. Numbers
    are truncated toward zero. Unparsable input gives 0 rather than an error.

    Raises:
        RadixOutOfRangeError: If radix is outside [2, 36].

    Examples:
        >>> parse_int("42")
        42
        >>> parse_int("1010", 2)
        10
        >>> parse_int("42px")
        42
        >>> parse_int("invalid")
        0
    """
    validate_radix(radix)
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        try:
            return int(value)
        except (ValueError, OverflowError):
            return 0
    if not isinstance(value, str):
        return 0

    text = value.strip()
    sign = -1 if text.startswith("-") else 1
    if text[:1] in ("+", "-"):
        text = text[1:]

    digits = []
    for ch in text:
        if not is_base(ch, radix):
            break
        digits.append(ch)
    if not digits:
        return 0
    return sign * int("".join(digits), radix)


def parse_float(value) -> float:
    """
    Forgiving float parse: read the leading decimal literal, default to 0.0.

    Examples:
        >>> parse_float("42.5")
        42.5
        >>> parse_float("3.5e2 meters")
        350.0
        >>> parse_float("invalid")
        0.0
    """
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        return 0.0
    head = decimal_prefix(value.strip())
    return float(head) if head else 0.0


def to_base(number: int, radix: int) -> str:
    """
    Render an integer in radix 2..36 with lowercase digits.

    Negative numbers keep a leading "-".

    Raises:
        RadixOutOfRangeError: If radix is outside [2, 36].
        TypeError: If number is not an int.

    Examples:
        >>> to_base(255, 16)
        'ff'
        >>> to_base(1295, 36)
        'zz'
        >>> to_base(-5, 2)
        '-101'
    """
    validate_radix(radix)
    if not isinstance(number, int) or isinstance(number, bool):
        raise TypeError(f"number must be int, got {fmt_type(number)}")
    if number == 0:
        return "0"

    digits = NumeralConf.DIGITS.lower()
    sign = "-" if number < 0 else ""
    n = abs(number)
    out = []
    while n:
        n, remainder = divmod(n, radix)
        out.append(digits[remainder])
    return sign + "".join(reversed(out))


def fit_native(n: int) -> int | float:
    """
    Represent integers beyond the native word as float.

    Magnitudes past the float range become signed infinity.

    Examples:
        >>> fit_native(2 ** 63 - 1)
        9223372036854775807
        >>> fit_native(2 ** 64)
        1.8446744073709552e+19
        >>> fit_native(-10 ** 400)
        -inf
    """
    if NumeralConf.INT_MIN <= n <= NumeralConf.INT_MAX:
        return n
    try:
        return float(n)
    except OverflowError:
        return math.inf if n > 0 else -math.inf


# Private Methods ------------------------------------------------------------------------------------------------------

def _strip(value: str, prefix_re: re.Pattern) -> str:
    if not isinstance(value, str):
        raise TypeError(f"value must be str, got {fmt_type(value)}")
    m = prefix_re.match(value)
    return value[m.end():] if m else value
