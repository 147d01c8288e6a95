"""
Numerus exception taxonomy.

Every failure raised by the library derives from NumberError, and each concrete
error also inherits the matching builtin (ValueError, TypeError, ZeroDivisionError),
so callers may catch either the precise class or the familiar builtin.

Hierarchy:
    NumberError
    ├── ConversionError                 input could not be turned into a number
    │   ├── InvalidFormatError          ValueError
    │   ├── EmptyInputError             ValueError
    │   ├── WhitespaceRejectedError     ValueError
    │   └── UnsupportedTypeError        TypeError
    ├── RadixOutOfRangeError            ValueError
    ├── ArithmeticFailure               ZeroDivisionError
    ├── NegativeDomainError             ValueError
    └── StatisticsError                 ValueError

Only ConversionError subclasses are ever suppressed, and only by the lenient
conversion API (normalize.convert_value).
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

__all__ = [
    'NumberError',
    'ConversionError',
    'InvalidFormatError',
    'EmptyInputError',
    'WhitespaceRejectedError',
    'UnsupportedTypeError',
    'RadixOutOfRangeError',
    'ArithmeticFailure',
    'NegativeDomainError',
    'StatisticsError',
]


# Classes --------------------------------------------------------------------------------------------------------------

class NumberError(Exception):
    """
    Base class for all numerus errors.

    Attributes:
        value: The offending input, kept as-is for inspection by callers.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class ConversionError(NumberError):
    """Input value has no numeric interpretation."""


class InvalidFormatError(ConversionError, ValueError):
    """String does not match any supported numeric notation."""


class EmptyInputError(ConversionError, ValueError):
    """Empty string given where a numeric string is required."""


class WhitespaceRejectedError(ConversionError, ValueError):
    """String is surrounded by whitespace; parsing never guesses intent around it."""


class UnsupportedTypeError(ConversionError, TypeError):
    """Container, handle or opaque object with no numeric interpretation."""


class RadixOutOfRangeError(NumberError, ValueError):
    """Requested radix outside the [2, 36] range."""


class ArithmeticFailure(NumberError, ZeroDivisionError):
    """Division, modulo or percentage-of by a zero-valued operand."""


class NegativeDomainError(NumberError, ValueError):
    """Operation defined for non-negative arguments only got a negative one."""


class StatisticsError(NumberError, ValueError):
    """Statistical helper got too few data points."""
