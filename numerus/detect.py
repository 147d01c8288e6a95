"""
Numeral notation detection.

Classifies strings as hexadecimal, binary, octal (traditional "0755" and modern
"0o755"), decimal or scientific notation. Each predicate is strict: it answers
True only when every condition of its notation holds, so one string never
satisfies two prefix notations at once.

Auto-detection precedence (highest first): hexadecimal, binary, octal, decimal.

The decimal tokenizer accepts ASCII digits, ".", "e"/"E" and "+"/"-" only and
never consults the process locale.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re
from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import RadixOutOfRangeError
from .formatters import fmt_type

__all__ = [
    'Classification',
    'Notation',
    'NumeralConf',
    'classify',
    'decimal_prefix',
    'is_base',
    'is_binary',
    'is_decimal',
    'is_hex',
    'is_octal',
    'is_scientific',
    'validate_radix',
]


# @formatter:off

class NumeralConf:
    """
    Numeral system constants.

    Attributes:
        DIGITS: Digit alphabet for radix 2..36, uppercase.
        MIN_RADIX, MAX_RADIX: Inclusive radix bounds.
        INT_MIN, INT_MAX: Native word bounds. Parsed integers outside this
            range are represented as float.
    """
    DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    MIN_RADIX = 2
    MAX_RADIX = 36
    INT_MIN = -2 ** 63
    INT_MAX = 2 ** 63 - 1


_HEX_RE          = re.compile(r"0[xX][0-9a-fA-F]+")
_BINARY_RE       = re.compile(r"0[bB][01]+")
_OCTAL_MODERN_RE = re.compile(r"0[oO][0-7]+")
# Exactly one leading zero: "0123" is octal, "00123" and "0" are decimal
_OCTAL_TRAD_RE   = re.compile(r"0[1-7][0-7]*")
_DECIMAL_RE      = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# @formatter:on

# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Notation(StrEnum):
    """Numeric notations recognized by classify()."""
    HEX = "hex"
    BINARY = "binary"
    OCTAL_MODERN = "octal_modern"
    OCTAL_TRADITIONAL = "octal_traditional"
    DECIMAL = "decimal"
    SCIENTIFIC = "scientific"
    INVALID = "invalid"


@dataclass(frozen=True)
class Classification:
    """
    Result of classify().

    Attributes:
        notation: Detected notation.
        payload: Digits to convert, prefix stripped. For decimal and scientific
            notation this is the whole string; for INVALID it is the raw input.
        radix: Radix of the payload, None for INVALID.
    """
    notation: Notation
    payload: str
    radix: int | None = None

    @property
    def is_valid(self) -> bool:
        return self.notation is not Notation.INVALID

    @property
    def is_prefixed(self) -> bool:
        """True for notations identified by a literal prefix or a leading zero."""
        return self.notation in (Notation.HEX, Notation.BINARY,
                                 Notation.OCTAL_MODERN, Notation.OCTAL_TRADITIONAL)


# Methods --------------------------------------------------------------------------------------------------------------

def classify(value: str) -> Classification:
    """
    Classify a string by numeric notation.

    Precedence is hexadecimal, binary, octal, then decimal. Strings matching none
    of them, including any alphabetic content outside a valid prefix notation or
    exponent marker, are INVALID; they are never read as decimal.

    Args:
        value: String to classify. Whitespace is significant.

    Returns:
        Classification with the notation, prefix-stripped payload and radix.

    Raises:
        TypeError: If value is not a str.

    Examples:
        >>> classify("0xFF")
        Classification(notation=<Notation.HEX: 'hex'>, payload='FF', radix=16)
        >>> classify("0755").notation
        <Notation.OCTAL_TRADITIONAL: 'octal_traditional'>
        >>> classify("000755").notation
        <Notation.DECIMAL: 'decimal'>
        >>> classify("1e3").notation
        <Notation.SCIENTIFIC: 'scientific'>
        >>> classify("FF").notation
        <Notation.INVALID: 'invalid'>
    """
    if not isinstance(value, str):
        raise TypeError(f"value must be str, got {fmt_type(value)}")

    if _HEX_RE.fullmatch(value):
        return Classification(Notation.HEX, value[2:], 16)
    if _BINARY_RE.fullmatch(value):
        return Classification(Notation.BINARY, value[2:], 2)
    if _OCTAL_MODERN_RE.fullmatch(value):
        return Classification(Notation.OCTAL_MODERN, value[2:], 8)
    if _OCTAL_TRAD_RE.fullmatch(value):
        return Classification(Notation.OCTAL_TRADITIONAL, value[1:], 8)
    if _DECIMAL_RE.fullmatch(value):
        if "e" in value or "E" in value:
            return Classification(Notation.SCIENTIFIC, value, 10)
        return Classification(Notation.DECIMAL, value, 10)
    return Classification(Notation.INVALID, value)


def is_hex(value: Any) -> bool:
    """
    Check for "0x"/"0X" prefixed hexadecimal, e.g. "0xFF".

    Non-strings, a bare "0x" and unprefixed digits like "FF" are not hex.
    """
    return isinstance(value, str) and _HEX_RE.fullmatch(value) is not None


def is_binary(value: Any) -> bool:
    """Check for "0b"/"0B" prefixed binary, e.g. "0b1010"."""
    return isinstance(value, str) and _BINARY_RE.fullmatch(value) is not None


def is_octal(value: Any) -> bool:
    """
    Check for octal in modern ("0o755", "0O755") or traditional ("0755") notation.

    Traditional notation needs exactly one leading zero: "0123" is octal while
    "000123" is a decimal with padding zeros.
    """
    if not isinstance(value, str):
        return False
    return (_OCTAL_MODERN_RE.fullmatch(value) is not None
            or _OCTAL_TRAD_RE.fullmatch(value) is not None)


def is_decimal(value: Any) -> bool:
    """
    Check for a plain decimal literal, scientific notation included.

    Accepts an optional sign, ASCII digits, one optional decimal point and an
    optional exponent. "1." and ".5" are decimal; "1e", "e5", "1.2.3", " 1" are not.
    """
    return isinstance(value, str) and _DECIMAL_RE.fullmatch(value) is not None


def is_scientific(value: Any) -> bool:
    """Check for a decimal literal carrying an "e"/"E" exponent marker."""
    return is_decimal(value) and ("e" in value or "E" in value)


def is_base(value: Any, radix: int) -> bool:
    """
    Check that every character of value is a digit of the given radix.

    Valid digits are the first `radix` symbols of 0-9A-Z, case-insensitive.

    Args:
        value: Candidate string. Non-strings and empty strings are never valid.
        radix: Radix in [2, 36].

    Returns:
        True if value is a non-empty string of radix digits.

    Raises:
        RadixOutOfRangeError: If radix is outside [2, 36], regardless of value.
        TypeError: If radix is not an int.

    Examples:
        >>> is_base("ff", 16)
        True
        >>> is_base("89", 8)
        False
        >>> is_base("", 10)
        False
    """
    validate_radix(radix)
    if not isinstance(value, str) or not value:
        return False
    allowed = NumeralConf.DIGITS[:radix] + NumeralConf.DIGITS[10:radix].lower()
    return all(ch in allowed for ch in value)


def validate_radix(radix: int) -> int:
    """
    Return radix unchanged if it is an int within [2, 36].

    Raises:
        TypeError: If radix is not an int (bool excluded).
        RadixOutOfRangeError: If radix is outside [2, 36].
    """
    if not isinstance(radix, int) or isinstance(radix, bool):
        raise TypeError(f"radix must be int, got {fmt_type(radix)}")
    if not NumeralConf.MIN_RADIX <= radix <= NumeralConf.MAX_RADIX:
        raise RadixOutOfRangeError(
            f"Base must be between {NumeralConf.MIN_RADIX} and {NumeralConf.MAX_RADIX}, got {radix}",
            value=radix,
        )
    return radix


def decimal_prefix(value: str) -> str:
    """
    Return the longest leading decimal literal of value, or "" if there is none.

    Examples:
        >>> decimal_prefix("42.5kg")
        '42.5'
        >>> decimal_prefix("1e")
        '1'
        >>> decimal_prefix("abc")
        ''
    """
    if not isinstance(value, str):
        raise TypeError(f"value must be str, got {fmt_type(value)}")
    m = _DECIMAL_RE.match(value)
    return m.group(0) if m else ""
