"""
Immutable numeric value with arithmetic, predicates, base conversion and formatting.

Number wraps exactly one canonical int or float produced by the normalizer. Every
operation normalizes its operand the same way the constructor does and returns a
new Number; instances never change after construction.

Examples:
    >>> Number.from_value("0xFF").value
    255
    >>> Number(10).add("5").multiply(2).subtract(5).divide(5).value
    5
    >>> Number.from_value("1e3").is_integer()
    False
"""

# Standard library -----------------------------------------------------------------------------------------------------
import json
import math
import random as _random
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any, ClassVar, Self

# Local ----------------------------------------------------------------------------------------------------------------
from . import convert, detect
from .detect import NumeralConf, validate_radix
from .errors import ArithmeticFailure, NegativeDomainError
from .formatters import fmt_type, format_exponential, format_fixed, format_number, format_plain
from .normalize import convert_value, normalize

__all__ = ['Number', 'NumberConf']

# Bases that make Miller-Rabin deterministic below 3.3e24
_PRIME_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


# @formatter:off

class NumberConf:
    """
    Default configuration constants for Number.

    Attributes:
        DECIMAL_POINT: Default decimal separator for Number.format().
        THOUSANDS_SEP: Default thousands separator for Number.format().
        ROUND_CONTEXT_PREC: Decimal context precision used by Number.round(),
            wide enough for any float at any requested precision.
        FACTORIAL_MAX: Largest n whose factorial is a finite float.
        FIBONACCI_MAX: Largest position whose Fibonacci number is a finite float.
        POWER_MAX_BITS: Integer powers wider than this many bits are computed in float.
    """
    DECIMAL_POINT = "."
    THOUSANDS_SEP = ","
    ROUND_CONTEXT_PREC = 400
    FACTORIAL_MAX = 170
    FIBONACCI_MAX = 1476
    POWER_MAX_BITS = 63

# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Number:
    """
    Immutable holder of a canonical int or float.

    The constructor accepts anything the strict normalizer accepts: numeric
    strings in hex ("0xFF"), binary ("0b1010"), octal ("0755", "0o755"), decimal
    or scientific notation, bool, None, int, float, numeric objects such as
    Decimal, and other Number instances. Anything else raises a ConversionError.

    Type policy:
        - Integral results of int-only operations stay int: add, subtract,
          multiply, exact division, mod, non-negative integer power.
        - Integers never leave the signed 64-bit word: wider results become
          float, and ±inf past the float range.
        - Inexact division, sqrt, logs, trig, ceil/floor/round, percent and
          scientific-notation input produce float.
        - NaN and ±inf are valid float states; math outside an operation's domain
          yields them instead of raising.
        - Division, modulo and percent_of by a zero-valued operand raise
          ArithmeticFailure.

    Representation vs. value:
        is_integer() answers "stored as int"; Number.check_integer() answers
        "mathematically whole". Number(42.0).is_integer() is False while
        Number.check_integer(42.0) is True.

    Equality:
        == and equals() compare values loosely (Number(10) == 10.0);
        strict_equals() also requires the same representation.
    """

    value: int | float = 0

    PI: ClassVar[float] = math.pi
    E: ClassVar[float] = math.e
    GOLDEN_RATIO: ClassVar[float] = 1.618033988749
    EULER_GAMMA: ClassVar[float] = 0.5772156649015329

    def __post_init__(self):
        value = normalize(self.value)
        if isinstance(value, int):
            value = convert.fit_native(value)
        object.__setattr__(self, 'value', value)

    @classmethod
    def from_value(cls, value: Any = 0) -> Self:
        """Strictly construct a Number, raising ConversionError on invalid input."""
        return cls(value)

    # Arithmetic -------------------------------------------------------------------------------------------------------

    def add(self, other: Any) -> Self:
        return Number(self.value + normalize(other))

    def subtract(self, other: Any) -> Self:
        return Number(self.value - normalize(other))

    def multiply(self, other: Any) -> Self:
        return Number(self.value * normalize(other))

    def divide(self, other: Any) -> Self:
        """
        Divide by other; int / int stays int when exact.

        Raises:
            ArithmeticFailure: If other normalizes to zero.
        """
        divisor = _nonzero(other, "Division by zero")
        return Number(exact_divide(self.value, divisor))

    def mod(self, other: Any) -> Self:
        """
        Remainder of truncated division by other, with the sign of the dividend.

        Number(-7).mod(3) is -1 and Number(7).mod(-3) is 1.

        Raises:
            ArithmeticFailure: If other normalizes to zero.
        """
        divisor = _nonzero(other, "Modulo by zero")
        return Number(_remainder(self.value, divisor))

    def power(self, exponent: Any) -> Self:
        return Number(_power(self.value, normalize(exponent)))

    def abs(self) -> Self:
        return Number(abs(self.value))

    def negate(self) -> Self:
        return Number(-self.value)

    def sqrt(self) -> Self:
        """Square root; NaN for negative values."""
        return Number(_float_op(math.sqrt, self.value))

    def cbrt(self) -> Self:
        return Number(_float_op(math.cbrt, self.value))

    def exp(self) -> Self:
        return Number(_float_op(math.exp, self.value))

    def log(self, base: Any = None) -> Self:
        """
        Logarithm, natural by default.

        Zero gives -inf, negative values give NaN, as do bases <= 0 or equal to 1.
        """
        x = self.value
        if base is None:
            return Number(_log(math.log, x))
        b = normalize(base)
        if not b > 0 or b == 1:
            return Number(math.nan)
        return Number(_log(lambda v: math.log(v, b), x))

    def log10(self) -> Self:
        return Number(_log(math.log10, self.value))

    def log2(self) -> Self:
        return Number(_log(math.log2, self.value))

    def sin(self) -> Self:
        return Number(_float_op(math.sin, self.value))

    def cos(self) -> Self:
        return Number(_float_op(math.cos, self.value))

    def tan(self) -> Self:
        return Number(_float_op(math.tan, self.value))

    def asin(self) -> Self:
        return Number(_float_op(math.asin, self.value))

    def acos(self) -> Self:
        return Number(_float_op(math.acos, self.value))

    def atan(self) -> Self:
        return Number(_float_op(math.atan, self.value))

    # Rounding ---------------------------------------------------------------------------------------------------------

    def ceil(self) -> Self:
        if not _finite(self.value):
            return Number(float(self.value))
        return Number(float(math.ceil(self.value)))

    def floor(self) -> Self:
        if not _finite(self.value):
            return Number(float(self.value))
        return Number(float(math.floor(self.value)))

    def round(self, precision: int = 0) -> Self:
        """
        Round half away from zero to `precision` decimals, result is float.

        Negative precision rounds to tens, hundreds, etc.

        Examples:
            >>> Number(2.5).round().value
            3.0
            >>> Number(1234).round(-2).value
            1200.0
        """
        if not isinstance(precision, int) or isinstance(precision, bool):
            raise TypeError(f"precision must be int, got {fmt_type(precision)}")
        if not _finite(self.value):
            return Number(float(self.value))
        with localcontext() as ctx:
            ctx.prec = NumberConf.ROUND_CONTEXT_PREC
            quantum = Decimal(1).scaleb(-precision)
            rounded = Decimal(repr(self.value)).quantize(quantum, rounding=ROUND_HALF_UP)
        return Number(float(rounded))

    def trunc(self) -> Self:
        """Truncate toward zero to an int; NaN and ±inf pass through unchanged."""
        if not _finite(self.value):
            return Number(self.value)
        return Number(math.trunc(self.value))

    def sign(self) -> int:
        """-1, 0 or 1; NaN gives 0."""
        return (self.value > 0) - (self.value < 0)

    # Comparison -------------------------------------------------------------------------------------------------------

    def equals(self, other: Any, strict: bool = False) -> bool:
        """
        Compare with other after normalization.

        Args:
            other: Any normalizable value.
            strict: Also require the same representation (int vs. float).

        Examples:
            >>> Number(10).equals("10")
            True
            >>> Number(10).equals(10.0, strict=True)
            False
        """
        other_value = normalize(other)
        if strict and type(other_value) is not type(self.value):
            return False
        return self.value == other_value

    def strict_equals(self, other: Any) -> bool:
        return self.equals(other, strict=True)

    def compare(self, other: Any) -> int:
        """Three-way comparison: -1, 0 or 1."""
        other_value = normalize(other)
        return (self.value > other_value) - (self.value < other_value)

    def less_than(self, other: Any) -> bool:
        return self.value < normalize(other)

    def greater_than(self, other: Any) -> bool:
        return self.value > normalize(other)

    def less_than_or_equal(self, other: Any) -> bool:
        return self.value <= normalize(other)

    def greater_than_or_equal(self, other: Any) -> bool:
        return self.value >= normalize(other)

    def max(self, other: Any) -> Self:
        other_value = normalize(other)
        return Number(other_value) if other_value > self.value else self

    def min(self, other: Any) -> Self:
        other_value = normalize(other)
        return Number(other_value) if other_value < self.value else self

    def clamp(self, lower: Any, upper: Any) -> Self:
        """
        Limit the value to [lower, upper].

        Raises:
            ValueError: If lower > upper.
        """
        lo, hi = normalize(lower), normalize(upper)
        if lo > hi:
            raise ValueError(f"lower bound {lo} is greater than upper bound {hi}")
        if self.value < lo:
            return Number(lo)
        if self.value > hi:
            return Number(hi)
        return self

    def percent(self, other: Any) -> Self:
        """other percent of this value: Number(10).percent(10) is 1.0."""
        return Number(self.value / 100 * normalize(other))

    def percent_of(self, other: Any) -> Self:
        """
        This value as a percentage of other: Number(10).percent_of(20) is 50.0.

        Raises:
            ArithmeticFailure: If other normalizes to zero.
        """
        whole = _nonzero(other, "Percentage of zero")
        return Number(self.value / whole * 100)

    # Predicates -------------------------------------------------------------------------------------------------------

    def is_integer(self) -> bool:
        """True if stored as int. See check_integer() for mathematical wholeness."""
        return isinstance(self.value, int)

    def is_float(self) -> bool:
        return isinstance(self.value, float)

    def is_finite(self) -> bool:
        return _finite(self.value)

    def is_infinite(self) -> bool:
        return isinstance(self.value, float) and math.isinf(self.value)

    def is_nan(self) -> bool:
        return isinstance(self.value, float) and math.isnan(self.value)

    def is_positive(self) -> bool:
        return self.value > 0

    def is_negative(self) -> bool:
        return self.value < 0

    def is_zero(self) -> bool:
        return self.value == 0

    def is_even(self) -> bool:
        return Number.check_integer(self.value) and int(self.value) % 2 == 0

    def is_odd(self) -> bool:
        return Number.check_integer(self.value) and int(self.value) % 2 == 1

    # Conversion & Formatting ------------------------------------------------------------------------------------------

    def to_int(self) -> int:
        """
        Truncate toward zero.

        Raises:
            ValueError: If the value is NaN or infinite.
        """
        if not _finite(self.value):
            raise ValueError(f"cannot convert {self.value} to int")
        return int(self.value)

    def to_float(self) -> float:
        return float(self.value)

    def to_number(self) -> int | float:
        return self.value

    def to_string(self) -> str:
        return format_plain(self.value)

    def to_fixed(self, decimals: int = 0) -> str:
        return format_fixed(self.value, decimals)

    def to_exponential(self, decimals: int = 0) -> str:
        return format_exponential(self.value, decimals)

    def format(
            self,
            decimals: int = 0,
            decimal_point: str = NumberConf.DECIMAL_POINT,
            thousands_sep: str = NumberConf.THOUSANDS_SEP,
    ) -> str:
        """Grouped display, e.g. Number(1234.567).format(2) gives "1,234.57"."""
        return format_number(self.value, decimals, decimal_point, thousands_sep)

    def to_hex(self) -> str:
        return self.to_base(16)

    def to_octal(self) -> str:
        return self.to_base(8)

    def to_binary(self) -> str:
        return self.to_base(2)

    def to_base(self, radix: int) -> str:
        """
        Render the truncated integer value in radix 2..36, lowercase.

        Raises:
            RadixOutOfRangeError: If radix is outside [2, 36].
            ValueError: If the value is NaN or infinite.
        """
        validate_radix(radix)
        return convert.to_base(self.to_int(), radix)

    def to_json(self) -> str:
        """
        JSON number literal of the value.

        Raises:
            ValueError: If the value is NaN or infinite, which JSON cannot represent.
        """
        return json.dumps(self.value, allow_nan=False)

    # Static Helpers ---------------------------------------------------------------------------------------------------

    @staticmethod
    def check_integer(value: Any) -> bool:
        """
        True if value is mathematically whole: an int, or a float with no fractional part.

        Strings and bool are never integers here; Number instances are unwrapped.
        """
        if isinstance(value, Number):
            value = value.value
        if isinstance(value, bool):
            return False
        if isinstance(value, int):
            return True
        return isinstance(value, float) and value.is_integer()

    @staticmethod
    def check_finite(value: Any) -> bool:
        """True if value converts leniently to a finite number ("42" counts)."""
        converted = convert_value(value)
        if isinstance(converted, bool) or not isinstance(converted, (int, float)):
            return False
        return _finite(converted)

    @staticmethod
    def check_nan(value: Any) -> bool:
        if isinstance(value, Number):
            value = value.value
        return isinstance(value, float) and math.isnan(value)

    @staticmethod
    def max_safe_integer() -> int:
        return NumeralConf.INT_MAX

    @staticmethod
    def min_safe_integer() -> int:
        return NumeralConf.INT_MIN

    @staticmethod
    def parse_int(value: Any, radix: int = 10) -> int:
        return convert.parse_int(value, radix)

    @staticmethod
    def parse_float(value: Any) -> float:
        return convert.parse_float(value)

    @staticmethod
    def convert_base(value: str, radix: int | None = None) -> "Number":
        """Number from a numeral string, auto-detecting the base when radix is None."""
        return Number(convert.convert_base(value, radix))

    @staticmethod
    def is_hex(value: Any) -> bool:
        return detect.is_hex(value)

    @staticmethod
    def is_octal(value: Any) -> bool:
        return detect.is_octal(value)

    @staticmethod
    def is_binary(value: Any) -> bool:
        return detect.is_binary(value)

    @staticmethod
    def is_base(value: Any, radix: int) -> bool:
        return detect.is_base(value, radix)

    @staticmethod
    def format_number(
            value: Any,
            decimals: int = 0,
            decimal_point: str = NumberConf.DECIMAL_POINT,
            thousands_sep: str = NumberConf.THOUSANDS_SEP,
            prefix: str = "",
            suffix: str = "",
    ) -> str:
        """
        Format any normalizable value.

        Examples:
            >>> Number.format_number(1234.56, 2, ".", ",", "$", " USD")
            '$1,234.56 USD'
        """
        return format_number(normalize(value), decimals, decimal_point, thousands_sep, prefix, suffix)

    # Number Theory ----------------------------------------------------------------------------------------------------

    @staticmethod
    def is_prime(value: Any) -> bool:
        """Deterministic Miller-Rabin test, exact across the native word."""
        n = Number(value).value
        if not Number.check_integer(n) or n < 2:
            return False
        n = int(n)
        for p in _PRIME_WITNESSES:
            if n % p == 0:
                return n == p
        d, s = n - 1, 0
        while d % 2 == 0:
            d, s = d // 2, s + 1
        for a in _PRIME_WITNESSES:
            x = pow(a, d, n)
            if x in (1, n - 1):
                continue
            for _ in range(s - 1):
                x = pow(x, 2, n)
                if x == n - 1:
                    break
            else:
                return False
        return True

    @staticmethod
    def is_perfect(value: Any) -> bool:
        """True if value equals the sum of its proper divisors (6, 28, 496, ...)."""
        n = Number(value).value
        if not Number.check_integer(n) or n < 2:
            return False
        n = int(n)
        # Even perfect numbers are 2**(p-1) * (2**p - 1) with 2**p - 1 prime; no odd one is below 10**1500
        p = (n.bit_length() + 1) // 2
        mersenne = (1 << p) - 1
        return n == (1 << (p - 1)) * mersenne and Number.is_prime(mersenne)

    @staticmethod
    def factorial(value: Any) -> "Number":
        """
        Factorial of a whole number; inf once the result leaves the float range.

        Raises:
            NegativeDomainError: If value is negative.
            ValueError: If value is not whole.
        """
        n = _whole(value, "factorial")
        if n < 0:
            raise NegativeDomainError(f"Factorial is not defined for negative numbers, got {n}", value=value)
        if n > NumberConf.FACTORIAL_MAX:
            return Number(math.inf)
        return Number(math.factorial(n))

    @staticmethod
    def fibonacci(position: Any) -> "Number":
        """
        Fibonacci number at a zero-based position: 0, 1, 1, 2, 3, 5, ...

        Positions past the float range give inf.

        Raises:
            NegativeDomainError: If position is negative.
            ValueError: If position is not whole.
        """
        n = _whole(position, "fibonacci")
        if n < 0:
            raise NegativeDomainError(f"Fibonacci position must be non-negative, got {n}", value=position)
        if n > NumberConf.FIBONACCI_MAX:
            return Number(math.inf)
        a, b = 0, 1
        for _ in range(n):
            a, b = b, a + b
        return Number(a)

    @staticmethod
    def gcd(a: Any, b: Any) -> "Number":
        return Number(math.gcd(_whole(a, "gcd"), _whole(b, "gcd")))

    @staticmethod
    def lcm(a: Any, b: Any) -> "Number":
        return Number(math.lcm(_whole(a, "lcm"), _whole(b, "lcm")))

    # Geometry & Interpolation -----------------------------------------------------------------------------------------

    @staticmethod
    def degrees_to_radians(degrees: Any) -> "Number":
        return Number(math.radians(normalize(degrees)))

    @staticmethod
    def radians_to_degrees(radians: Any) -> "Number":
        return Number(math.degrees(normalize(radians)))

    @staticmethod
    def distance_2d(x1: Any, y1: Any, x2: Any, y2: Any) -> "Number":
        return Number(math.dist(_floats(x1, y1), _floats(x2, y2)))

    @staticmethod
    def distance_3d(x1: Any, y1: Any, z1: Any, x2: Any, y2: Any, z2: Any) -> "Number":
        return Number(math.dist(_floats(x1, y1, z1), _floats(x2, y2, z2)))

    @staticmethod
    def lerp(start: Any, end: Any, t: Any) -> "Number":
        """Linear interpolation, float result: lerp(0, 10, 0.5) is 5.0."""
        a, b, k = _floats(start, end, t)
        return Number(a + (b - a) * k)

    @staticmethod
    def map_range(value: Any, in_min: Any, in_max: Any, out_min: Any, out_max: Any) -> "Number":
        """
        Project value from [in_min, in_max] onto [out_min, out_max], float result.

        Raises:
            ArithmeticFailure: If the input range is empty (in_min == in_max).
        """
        x, a, b, c, d = _floats(value, in_min, in_max, out_min, out_max)
        if a == b:
            raise ArithmeticFailure("Cannot map from an empty input range", value=(in_min, in_max))
        return Number((x - a) / (b - a) * (d - c) + c)

    @staticmethod
    def range(start: Any, end: Any, step: Any = 1) -> list["Number"]:
        """
        Inclusive arithmetic sequence from start to end.

        Raises:
            ValueError: If step is zero.

        Examples:
            >>> [n.value for n in Number.range(0, 10, 2)]
            [0, 2, 4, 6, 8, 10]
            >>> [n.value for n in Number.range(5, 1, -1)]
            [5, 4, 3, 2, 1]
        """
        first, last, delta = normalize(start), normalize(end), normalize(step)
        if delta == 0:
            raise ValueError("step must be non-zero")
        if not all(_finite(v) for v in (first, last, delta)):
            raise ValueError(f"range bounds and step must be finite, got {first}, {last}, {delta}")

        result = []
        i = 0
        while True:
            current = first + i * delta
            if (delta > 0 and current > last) or (delta < 0 and current < last):
                break
            result.append(Number(current))
            i += 1
        return result

    # Random -----------------------------------------------------------------------------------------------------------

    @staticmethod
    def random(minimum: Any = 0, maximum: Any = 1, *, seed: int | None = None) -> "Number":
        """
        Uniform random float in [minimum, maximum].

        Args:
            seed: If provided, use a dedicated deterministic RNG seeded with this value.
                  If None, use random.SystemRandom.
        """
        lo, hi = _bounds(minimum, maximum)
        return Number(_rng(seed).uniform(lo, hi))

    @staticmethod
    def random_int(minimum: Any = 0, maximum: Any = 100, *, seed: int | None = None) -> "Number":
        """Uniform random int in [minimum, maximum], bounds truncated to whole numbers."""
        lo, hi = _bounds(minimum, maximum)
        lo, hi = math.ceil(lo), math.floor(hi)
        if lo > hi:
            raise ValueError(f"no integer between {minimum} and {maximum}")
        return Number(_rng(seed).randint(lo, hi))

    # Python Protocols -------------------------------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_string()

    def __int__(self) -> int:
        return self.to_int()

    def __float__(self) -> float:
        return float(self.value)

    def __bool__(self) -> bool:
        return self.value != 0

    def __hash__(self) -> int:
        return hash(self.value)

    def __eq__(self, other: Any) -> bool:
        other_value = _comparable(other)
        if other_value is NotImplemented:
            return NotImplemented
        return self.value == other_value

    def __lt__(self, other: Any) -> bool:
        other_value = _comparable(other)
        return NotImplemented if other_value is NotImplemented else self.value < other_value

    def __le__(self, other: Any) -> bool:
        other_value = _comparable(other)
        return NotImplemented if other_value is NotImplemented else self.value <= other_value

    def __gt__(self, other: Any) -> bool:
        other_value = _comparable(other)
        return NotImplemented if other_value is NotImplemented else self.value > other_value

    def __ge__(self, other: Any) -> bool:
        other_value = _comparable(other)
        return NotImplemented if other_value is NotImplemented else self.value >= other_value

    def __add__(self, other: Any) -> Self:
        return self.add(other)

    def __radd__(self, other: Any) -> Self:
        return Number(other).add(self)

    def __sub__(self, other: Any) -> Self:
        return self.subtract(other)

    def __rsub__(self, other: Any) -> Self:
        return Number(other).subtract(self)

    def __mul__(self, other: Any) -> Self:
        return self.multiply(other)

    def __rmul__(self, other: Any) -> Self:
        return Number(other).multiply(self)

    def __truediv__(self, other: Any) -> Self:
        return self.divide(other)

    def __rtruediv__(self, other: Any) -> Self:
        return Number(other).divide(self)

    def __mod__(self, other: Any) -> Self:
        return self.mod(other)

    def __pow__(self, other: Any) -> Self:
        return self.power(other)

    def __neg__(self) -> Self:
        return self.negate()

    def __abs__(self) -> Self:
        return self.abs()


# Private Methods ------------------------------------------------------------------------------------------------------

def _bounds(minimum: Any, maximum: Any) -> tuple[int | float, int | float]:
    lo, hi = normalize(minimum), normalize(maximum)
    if lo > hi:
        raise ValueError(f"minimum {lo} is greater than maximum {hi}")
    return lo, hi


def _comparable(other: Any) -> int | float:
    """Value of other for Python operators, NotImplemented for non-numeric types."""
    if isinstance(other, Number):
        return other.value
    if isinstance(other, (int, float)) and not isinstance(other, bool):
        return other
    return NotImplemented


def exact_divide(a: int | float, b: int | float) -> int | float:
    """True division that keeps int / int as int when the quotient is whole."""
    if isinstance(a, int) and isinstance(b, int) and a % b == 0:
        return a // b
    try:
        return a / b
    except OverflowError:
        # int quotient past the float range
        return math.inf if (a < 0) == (b < 0) else -math.inf


def _finite(value: int | float) -> bool:
    return isinstance(value, int) or math.isfinite(value)


def _float_op(func, x: int | float) -> float:
    """Apply a math function, mapping domain errors to NaN and overflow to inf."""
    try:
        return float(func(x))
    except ValueError:
        return math.nan
    except OverflowError:
        return math.inf


def _floats(*values: Any) -> tuple[float, ...]:
    return tuple(float(normalize(v)) for v in values)


def _log(func, x: int | float) -> float:
    if x == 0:
        return -math.inf
    return _float_op(func, x)


def _nonzero(value: Any, message: str) -> int | float:
    n = normalize(value)
    if n == 0:
        raise ArithmeticFailure(message, value=value)
    return n


def _power(base: int | float, exponent: int | float) -> int | float:
    if isinstance(exponent, int):
        exponent = convert.fit_native(exponent)
    if (isinstance(base, int) and isinstance(exponent, int) and exponent > 0 and abs(base) > 1
            and exponent * math.log2(abs(base)) > NumberConf.POWER_MAX_BITS):
        # Wider than the native word, so float is the result type anyway
        base = float(base)
    try:
        result = base ** exponent
    except ZeroDivisionError:
        # 0 raised to a negative power
        return math.inf
    except OverflowError:
        odd = Number.check_integer(exponent) and int(exponent) % 2 == 1
        return -math.inf if base < 0 and odd else math.inf
    if isinstance(result, complex):
        # negative base with a fractional exponent
        return math.nan
    return result


def _remainder(a: int | float, b: int | float) -> int | float:
    if isinstance(a, int) and isinstance(b, int):
        r = abs(a) % abs(b)
        return -r if a < 0 else r
    try:
        return math.fmod(a, b)
    except ValueError:
        # infinite dividend
        return math.nan


def _rng(seed: int | None) -> _random.Random:
    return _random.Random(seed) if seed is not None else _random.SystemRandom()


def _whole(value: Any, operation: str) -> int:
    n = Number(value).value
    if not Number.check_integer(n):
        raise ValueError(f"{operation} requires a whole number, got {n}")
    return int(n)
