#
# Numerus - Number Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import dataclasses
import math
from decimal import Decimal

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from numerus.errors import (
    ArithmeticFailure,
    EmptyInputError,
    InvalidFormatError,
    NegativeDomainError,
    RadixOutOfRangeError,
    UnsupportedTypeError,
    WhitespaceRejectedError,
)
from numerus.number import Number, NumberConf, exact_divide


# Tests ----------------------------------------------------------------------------------------------------------------

class TestConstruction:
    """Constructor normalizes strictly."""

    @pytest.mark.parametrize(
        "value, expected, expected_type",
        [
            pytest.param("0xFF", 255, int, id="hex"),
            pytest.param("0b1010", 10, int, id="binary"),
            pytest.param("0755", 493, int, id="octal"),
            pytest.param("1e3", 1000.0, float, id="scientific"),
            pytest.param("42.5", 42.5, float, id="float-str"),
            pytest.param(True, 1, int, id="bool"),
            pytest.param(None, 0, int, id="none"),
            pytest.param(Decimal("2.5"), 2.5, float, id="decimal"),
        ],
    )
    def test_from_value(self, value, expected, expected_type):
        n = Number.from_value(value)
        assert n.value == expected
        assert type(n.value) is expected_type

    def test_default_zero(self):
        assert Number().value == 0

    def test_unwraps_number(self):
        inner = Number("0xFF")
        assert Number(inner).value == 255

    @pytest.mark.parametrize(
        "value, exc",
        [
            pytest.param("abc", InvalidFormatError, id="word"),
            pytest.param("", EmptyInputError, id="empty"),
            pytest.param(" 1 ", WhitespaceRejectedError, id="whitespace"),
            pytest.param([], UnsupportedTypeError, id="list"),
            pytest.param(object(), UnsupportedTypeError, id="object"),
        ],
    )
    def test_rejects(self, value, exc):
        with pytest.raises(exc):
            Number.from_value(value)

    def test_rejects_handle(self, open_handle):
        with pytest.raises(UnsupportedTypeError, match=r"resource"):
            Number(open_handle)

    def test_frozen(self):
        n = Number(5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            n.value = 6

    def test_constants(self):
        assert Number.PI == math.pi
        assert Number.E == math.e
        assert Number.GOLDEN_RATIO == 1.618033988749
        assert Number.EULER_GAMMA == 0.5772156649015329

    def test_safe_integer_bounds(self):
        assert Number.max_safe_integer() == 2 ** 63 - 1
        assert Number.min_safe_integer() == -2 ** 63


class TestArithmetic:
    def test_operations_return_new_instances(self):
        n = Number(10)
        m = n.add(5)
        assert n.value == 10
        assert m.value == 15
        assert m is not n

    def test_chain(self):
        res = Number(10).add(5).multiply(2).subtract(5).divide(5)
        assert res.value == 5
        assert isinstance(res.value, int)

    @pytest.mark.parametrize(
        "method, a, b, expected, expected_type",
        [
            pytest.param("add", 10, "5", 15, int, id="add-str"),
            pytest.param("add", 10, 0.5, 10.5, float, id="add-float"),
            pytest.param("subtract", 10, 3, 7, int, id="subtract"),
            pytest.param("multiply", 4, "0x2", 8, int, id="multiply-hex"),
            pytest.param("divide", 10, 5, 2, int, id="divide-exact"),
            pytest.param("divide", 10, 4, 2.5, float, id="divide-inexact"),
            pytest.param("divide", 10.0, 5, 2.0, float, id="divide-float"),
            pytest.param("mod", 10, 3, 1, int, id="mod"),
            pytest.param("mod", -7, 3, -1, int, id="mod-negative-dividend"),
            pytest.param("mod", 7, -3, 1, int, id="mod-negative-divisor"),
            pytest.param("mod", -7.5, 2, -1.5, float, id="mod-float-negative"),
            pytest.param("mod", 7.5, -2, 1.5, float, id="mod-float-negative-divisor"),
            pytest.param("power", 2, 10, 1024, int, id="power"),
            pytest.param("power", 2, -1, 0.5, float, id="power-negative"),
        ],
    )
    def test_binary_ops(self, method, a, b, expected, expected_type):
        res = getattr(Number(a), method)(b)
        assert res.value == expected
        assert type(res.value) is expected_type

    @pytest.mark.parametrize("zero", [0, 0.0, "0", "0x0", None, False], ids=["int", "float", "str", "hex", "none", "false"])
    def test_divide_by_zero(self, zero):
        with pytest.raises(ArithmeticFailure, match=r"Division by zero"):
            Number(10).divide(zero)

    def test_mod_by_zero(self):
        with pytest.raises(ArithmeticFailure, match=r"Modulo by zero"):
            Number(10).mod(0)

    def test_mod_infinite_dividend_is_nan(self):
        assert math.isnan(Number(math.inf).mod(3).value)

    def test_mod_operator_matches_method(self):
        assert (Number(-7) % 3).value == -1

    def test_divide_by_zero_is_zero_division_error(self):
        with pytest.raises(ZeroDivisionError):
            Number(1) / 0

    def test_abs_negate(self):
        assert Number(-5).abs().value == 5
        assert Number(5).negate().value == -5

    @pytest.mark.parametrize(
        "method, value, expected",
        [
            pytest.param("sqrt", 16, 4.0, id="sqrt"),
            pytest.param("cbrt", 27, 3.0, id="cbrt"),
            pytest.param("log2", 16, 4.0, id="log2"),
            pytest.param("log10", 1000, 3.0, id="log10"),
            pytest.param("exp", 0, 1.0, id="exp"),
            pytest.param("sin", 0, 0.0, id="sin"),
            pytest.param("cos", 0, 1.0, id="cos"),
            pytest.param("atan", 0, 0.0, id="atan"),
        ],
    )
    def test_unary_math(self, method, value, expected):
        res = getattr(Number(value), method)()
        assert res.value == pytest.approx(expected)
        assert isinstance(res.value, float)

    def test_log_natural_and_base(self):
        assert Number(math.e).log().value == pytest.approx(1.0)
        assert Number(8).log(2).value == pytest.approx(3.0)


class TestNativeWord:
    """Integers wider than the signed 64-bit word are held as float."""

    def test_multiply_past_word_is_float(self):
        res = Number(2 ** 62).multiply(4)
        assert type(res.value) is float
        assert res.value == 2.0 ** 64

    def test_int_and_string_agree(self):
        assert Number(2 ** 64).strict_equals(Number("18446744073709551616"))

    def test_word_max_stays_int(self):
        assert type(Number(2 ** 63 - 1).value) is int
        assert type(Number(-2 ** 63).value) is int

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(10 ** 400, math.inf, id="positive"),
            pytest.param(-10 ** 400, -math.inf, id="negative"),
        ],
    )
    def test_past_float_range_is_infinite(self, value, expected):
        assert Number(value).value == expected

    def test_add_past_word(self):
        res = Number(2 ** 63 - 1).add(1)
        assert type(res.value) is float

    def test_inexact_big_divide_does_not_raise(self):
        res = Number.factorial(200).divide(401)
        assert res.value == math.inf

    def test_power_huge_exponent_is_infinite(self):
        assert Number(10).power(3_000_000).value == math.inf
        assert Number(10).power(10 ** 12).value == math.inf
        assert Number(10).power(10 ** 400).value == math.inf

    def test_power_huge_exponent_odd_negative_base(self):
        assert Number(-10).power(3_000_001).value == -math.inf

    def test_power_huge_exponent_vanishes(self):
        assert Number(0.5).power(10 ** 400).value == 0.0
        assert Number(10).power(-(10 ** 12)).value == 0.0

    def test_power_within_word_stays_int(self):
        res = Number(2).power(62)
        assert res.value == 2 ** 62
        assert type(res.value) is int

    def test_power_past_word_is_float(self):
        res = Number(3).power(41)
        assert type(res.value) is float
        assert res.value == pytest.approx(3.0 ** 41)


class TestOutOfDomain:
    """Out-of-domain math yields NaN or infinity instead of raising."""

    def test_sqrt_negative(self):
        assert Number(-1).sqrt().is_nan()

    def test_log_zero(self):
        assert Number(0).log().value == -math.inf

    def test_log_negative(self):
        assert Number(-1).log10().is_nan()

    @pytest.mark.parametrize("base", [1, 0, -2], ids=["one", "zero", "negative"])
    def test_log_bad_base(self, base):
        assert Number(8).log(base).is_nan()

    def test_asin_outside(self):
        assert Number(2).asin().is_nan()

    def test_exp_overflow(self):
        assert Number(10000).exp().value == math.inf

    def test_power_zero_negative(self):
        assert Number(0).power(-1).value == math.inf

    def test_power_negative_fractional(self):
        assert Number(-8).power(0.5).is_nan()

    def test_power_overflow(self):
        assert Number(10.0).power(400).value == math.inf
        assert Number(-10.0).power(401).value == -math.inf

    def test_nan_propagates(self):
        assert Number(math.nan).add(1).is_nan()


class TestRounding:
    @pytest.mark.parametrize(
        "method, value, expected",
        [
            pytest.param("ceil", 3.2, 4.0, id="ceil"),
            pytest.param("floor", 3.7, 3.0, id="floor"),
            pytest.param("round", 3.7, 4.0, id="round"),
            pytest.param("ceil", -3.7, -3.0, id="ceil-negative"),
            pytest.param("floor", -3.2, -4.0, id="floor-negative"),
            pytest.param("ceil", 3, 3.0, id="ceil-int"),
        ],
    )
    def test_float_results(self, method, value, expected):
        res = getattr(Number(value), method)()
        assert res.value == expected
        assert isinstance(res.value, float)

    @pytest.mark.parametrize(
        "value, precision, expected",
        [
            pytest.param(2.5, 0, 3.0, id="half-up"),
            pytest.param(-2.5, 0, -3.0, id="half-away-negative"),
            pytest.param(1.2345, 2, 1.23, id="precision"),
            pytest.param(1.005, 2, 1.01, id="decimal-half"),
            pytest.param(1234, -2, 1200.0, id="negative-precision"),
            pytest.param(1250, -2, 1300.0, id="negative-precision-half"),
        ],
    )
    def test_round(self, value, precision, expected):
        assert Number(value).round(precision).value == expected

    def test_round_non_finite(self):
        assert Number(math.inf).round().value == math.inf

    def test_round_precision_type(self):
        with pytest.raises(TypeError):
            Number(1.5).round(1.0)

    def test_trunc(self):
        res = Number(3.7).trunc()
        assert res.value == 3
        assert isinstance(res.value, int)
        assert Number(-3.7).trunc().value == -3

    def test_trunc_non_finite(self):
        assert Number(-math.inf).trunc().value == -math.inf

    @pytest.mark.parametrize(
        "value, expected",
        [pytest.param(-4.2, -1, id="neg"), pytest.param(0, 0, id="zero"), pytest.param(9, 1, id="pos")],
    )
    def test_sign(self, value, expected):
        assert Number(value).sign() == expected


class TestComparison:
    def test_equals_loose(self):
        assert Number(10).equals(10)
        assert Number(10).equals(10.0)
        assert Number(10).equals("0xA")

    def test_equals_strict(self):
        assert not Number(10).equals(10.0, strict=True)
        assert Number(10).strict_equals(10)
        assert not Number(10).strict_equals(10.0)

    @pytest.mark.parametrize(
        "a, b, expected",
        [pytest.param(5, 10, -1, id="less"), pytest.param(10, 10.0, 0, id="equal"), pytest.param(10, 5, 1, id="greater")],
    )
    def test_compare(self, a, b, expected):
        assert Number(a).compare(b) == expected

    def test_ordering_methods(self):
        n = Number(5)
        assert n.less_than(10)
        assert n.greater_than("4")
        assert n.less_than_or_equal(5)
        assert n.greater_than_or_equal(5.0)
        assert not n.greater_than(5)

    def test_max_min(self):
        assert Number(5).max(10).value == 10
        assert Number(5).min(10).value == 5
        n = Number(5)
        assert n.max(1) is n

    @pytest.mark.parametrize(
        "value, expected",
        [pytest.param(10, 15, id="below"), pytest.param(20, 20, id="inside"), pytest.param(30, 25, id="above")],
    )
    def test_clamp(self, value, expected):
        assert Number(value).clamp(15, 25).value == expected

    def test_clamp_inverted(self):
        with pytest.raises(ValueError):
            Number(1).clamp(10, 0)

    def test_percent(self):
        assert Number(10).percent(10).value == 1.0
        assert Number(10).percent_of(20).value == 50.0

    def test_percent_of_zero(self):
        with pytest.raises(ArithmeticFailure):
            Number(10).percent_of(0)


class TestPythonOperators:
    def test_arithmetic_operators(self):
        assert (Number(10) + 5).value == 15
        assert (5 + Number(10)).value == 15
        assert (Number(10) - 3).value == 7
        assert (3 - Number(10)).value == -7
        assert (Number(4) * 2).value == 8
        assert (2 * Number(4)).value == 8
        assert (Number(9) / 3).value == 3
        assert (9 / Number(2)).value == 4.5
        assert (Number(9) % 4).value == 1
        assert (Number(2) ** 3).value == 8
        assert (-Number(2)).value == -2
        assert abs(Number(-2)).value == 2

    def test_equality_and_hash(self):
        assert Number(10) == Number(10.0)
        assert Number(10) == 10
        assert Number(10) != "10"
        assert hash(Number(10)) == hash(10)
        assert len({Number(1), Number(1.0), 1}) == 1

    def test_ordering(self):
        assert Number(1) < Number(2)
        assert Number(2) >= 2
        assert sorted([Number(3), Number(1), Number(2)]) == [1, 2, 3]

    def test_ordering_unsupported(self):
        with pytest.raises(TypeError):
            Number(1) < "2"

    def test_conversions(self):
        assert int(Number(3.9)) == 3
        assert float(Number(3)) == 3.0
        assert bool(Number(0)) is False
        assert bool(Number(0.1)) is True


class TestPredicates:
    @pytest.mark.parametrize(
        "value, integer, floating",
        [
            pytest.param(42, True, False, id="int"),
            pytest.param(42.0, False, True, id="whole-float"),
            pytest.param("1e3", False, True, id="scientific"),
        ],
    )
    def test_representation(self, value, integer, floating):
        n = Number(value)
        assert n.is_integer() is integer
        assert n.is_float() is floating

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(42, True, id="int"),
            pytest.param(42.0, True, id="whole-float"),
            pytest.param(42.5, False, id="fraction"),
            pytest.param("42", False, id="str"),
            pytest.param(True, False, id="bool"),
            pytest.param(Number(7.0), True, id="number"),
            pytest.param(math.inf, False, id="inf"),
        ],
    )
    def test_check_integer(self, value, expected):
        assert Number.check_integer(value) is expected

    def test_whole_float_differs(self):
        """Representation and mathematical wholeness are separate questions."""
        assert not Number(42.0).is_integer()
        assert Number.check_integer(42.0)

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param("42", True, id="numeric-str"),
            pytest.param(1.5, True, id="float"),
            pytest.param(math.inf, False, id="inf"),
            pytest.param(math.nan, False, id="nan"),
            pytest.param("abc", False, id="word"),
        ],
    )
    def test_check_finite(self, value, expected):
        assert Number.check_finite(value) is expected

    def test_check_nan(self):
        assert Number.check_nan(math.nan)
        assert Number.check_nan(Number(math.nan))
        assert not Number.check_nan(1)

    def test_finite_infinite_nan(self):
        assert Number(1).is_finite()
        assert Number(math.inf).is_infinite()
        assert not Number(math.inf).is_finite()
        assert Number(math.nan).is_nan()

    def test_sign_predicates(self):
        assert Number(3).is_positive()
        assert Number(-3).is_negative()
        assert Number(0).is_zero()
        assert Number(0.0).is_zero()
        assert not Number(0).is_positive()

    @pytest.mark.parametrize(
        "value, even, odd",
        [
            pytest.param(4, True, False, id="even"),
            pytest.param(7, False, True, id="odd"),
            pytest.param(-3, False, True, id="negative-odd"),
            pytest.param(4.0, True, False, id="whole-float"),
            pytest.param(4.5, False, False, id="fraction"),
        ],
    )
    def test_parity(self, value, even, odd):
        assert Number(value).is_even() is even
        assert Number(value).is_odd() is odd


class TestFormatting:
    def test_to_fixed(self):
        assert Number(1234.567).to_fixed(2) == "1234.57"

    def test_to_exponential(self):
        assert Number(1234.567).to_exponential(2) == "1.23e+3"

    def test_to_string(self):
        assert Number(1234.567).to_string() == "1234.567"
        assert str(Number(42)) == "42"
        assert str(Number("1e3")) == "1000"

    def test_format(self):
        assert Number(1234.567).format(2) == "1,234.57"
        assert Number(1234.567).format(2, ",", ".") == "1.234,57"

    def test_format_defaults(self):
        assert NumberConf.DECIMAL_POINT == "."
        assert NumberConf.THOUSANDS_SEP == ","

    def test_format_number(self):
        assert Number.format_number(1234.56, 2, ".", ",", "$", " USD") == "$1,234.56 USD"
        assert Number.format_number(Number(1000), 0, ".", " ") == "1 000"
        assert Number.format_number("0xFF") == "255"

    def test_to_json(self):
        assert Number(42.5).to_json() == "42.5"
        assert Number(42).to_json() == "42"

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf], ids=["nan", "inf", "neg-inf"])
    def test_to_json_rejects_non_finite(self, value):
        with pytest.raises(ValueError):
            Number(value).to_json()

    def test_repr(self):
        assert repr(Number(42)) == "Number(value=42)"


class TestConversion:
    def test_to_native(self):
        n = Number(3.9)
        assert n.to_int() == 3
        assert n.to_float() == 3.9
        assert n.to_number() == 3.9

    def test_to_int_non_finite(self):
        with pytest.raises(ValueError):
            Number(math.nan).to_int()

    @pytest.mark.parametrize(
        "method, expected",
        [
            pytest.param("to_hex", "ff", id="hex"),
            pytest.param("to_octal", "377", id="octal"),
            pytest.param("to_binary", "11111111", id="binary"),
        ],
    )
    def test_to_radix(self, method, expected):
        assert getattr(Number(255), method)() == expected

    def test_to_base(self):
        assert Number(1295).to_base(36) == "zz"
        assert Number(255.9).to_base(16) == "ff"

    @pytest.mark.parametrize("radix", [1, 37], ids=["1", "37"])
    def test_to_base_out_of_range(self, radix):
        with pytest.raises(RadixOutOfRangeError):
            Number(255).to_base(radix)


class TestStaticParsing:
    def test_parse(self):
        assert Number.parse_int("1010", 2) == 10
        assert Number.parse_float("invalid") == 0.0

    def test_convert_base(self):
        assert Number.convert_base("FF", 16).value == 255
        assert Number.convert_base("0b11").value == 3

    def test_detectors(self):
        assert Number.is_hex("0xFF")
        assert Number.is_octal("0755")
        assert not Number.is_octal("000123")
        assert Number.is_binary("0b1")
        assert Number.is_base("zz", 36)


class TestNumberTheory:
    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(2, True, id="2"),
            pytest.param(3, True, id="3"),
            pytest.param(17, True, id="17"),
            pytest.param(7919, True, id="7919"),
            pytest.param(1, False, id="1"),
            pytest.param(0, False, id="0"),
            pytest.param(-7, False, id="negative"),
            pytest.param(9, False, id="square"),
            pytest.param(7.5, False, id="fraction"),
            pytest.param(7.0, True, id="whole-float"),
            pytest.param("0x11", True, id="hex-str"),
            pytest.param(2 ** 61 - 1, True, id="mersenne-61"),
            pytest.param(2 ** 63 - 25, True, id="largest-word-prime"),
            pytest.param(3215031751, False, id="strong-pseudoprime"),
            pytest.param(2.0 ** 70, False, id="float-past-word"),
        ],
    )
    def test_is_prime(self, value, expected):
        assert Number.is_prime(value) is expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(6, True, id="6"),
            pytest.param(28, True, id="28"),
            pytest.param(496, True, id="496"),
            pytest.param(8128, True, id="8128"),
            pytest.param(2305843008139952128, True, id="2305843008139952128"),
            pytest.param(8127, False, id="8127"),
            pytest.param(120, False, id="abundant"),
            pytest.param(12, False, id="12"),
            pytest.param(1, False, id="1"),
        ],
    )
    def test_is_perfect(self, value, expected):
        assert Number.is_perfect(value) is expected

    def test_factorial(self):
        assert Number.factorial(5).value == 120
        assert Number.factorial(0).value == 1

    def test_factorial_largest_finite(self):
        res = Number.factorial(NumberConf.FACTORIAL_MAX)
        assert type(res.value) is float
        assert math.isfinite(res.value)

    def test_factorial_past_float_range(self):
        assert Number.factorial(NumberConf.FACTORIAL_MAX + 1).value == math.inf
        assert Number.factorial(10 ** 9).value == math.inf

    def test_factorial_past_word_is_float(self):
        assert Number.factorial(20).value == 2432902008176640000
        assert type(Number.factorial(21).value) is float

    def test_factorial_negative(self):
        with pytest.raises(NegativeDomainError):
            Number.factorial(-1)

    def test_factorial_fraction(self):
        with pytest.raises(ValueError, match=r"whole number"):
            Number.factorial(2.5)

    @pytest.mark.parametrize(
        "position, expected",
        [pytest.param(0, 0, id="0"), pytest.param(1, 1, id="1"), pytest.param(10, 55, id="10")],
    )
    def test_fibonacci(self, position, expected):
        assert Number.fibonacci(position).value == expected

    def test_fibonacci_past_float_range(self):
        assert math.isfinite(Number.fibonacci(NumberConf.FIBONACCI_MAX).value)
        assert Number.fibonacci(NumberConf.FIBONACCI_MAX + 1).value == math.inf
        assert Number.fibonacci(100_000).value == math.inf

    def test_fibonacci_negative(self):
        with pytest.raises(NegativeDomainError):
            Number.fibonacci(-1)

    def test_gcd_lcm(self):
        assert Number.gcd(12, 18).value == 6
        assert Number.gcd(10, 0).value == 10
        assert Number.lcm(4, 6).value == 12
        assert Number.lcm(0, 5).value == 0


class TestGeometry:
    def test_angles(self):
        assert Number.degrees_to_radians(180).value == pytest.approx(math.pi)
        assert Number.radians_to_degrees(math.pi).value == pytest.approx(180.0)

    def test_distance(self):
        assert Number.distance_2d(0, 0, 3, 4).value == 5.0
        assert Number.distance_3d(0, 0, 0, 1, 2, 2).value == 3.0

    def test_lerp(self):
        res = Number.lerp(0, 10, 0.5)
        assert res.value == 5.0
        assert isinstance(res.value, float)
        assert Number.lerp(10, 20, 0.25).value == 12.5

    def test_map_range(self):
        assert Number.map_range(5, 0, 10, 0, 100).value == 50.0
        assert Number.map_range(2, 0, 4, 10, 20).value == 15.0

    def test_map_range_empty_input(self):
        with pytest.raises(ArithmeticFailure):
            Number.map_range(1, 5, 5, 0, 1)


class TestRange:
    @pytest.mark.parametrize(
        "args, expected",
        [
            pytest.param((1, 5), [1, 2, 3, 4, 5], id="default-step"),
            pytest.param((0, 10, 2), [0, 2, 4, 6, 8, 10], id="step-2"),
            pytest.param((5, 1, -1), [5, 4, 3, 2, 1], id="descending"),
            pytest.param((0, 1, 0.25), [0, 0.25, 0.5, 0.75, 1.0], id="float-step"),
            pytest.param((5, 1), [], id="wrong-direction"),
            pytest.param((3, 3), [3], id="single"),
        ],
    )
    def test_range(self, args, expected):
        assert [n.value for n in Number.range(*args)] == expected

    def test_zero_step(self):
        with pytest.raises(ValueError, match=r"step must be non-zero"):
            Number.range(1, 5, 0)


class TestRandom:
    def test_random_bounds(self):
        for _ in range(50):
            assert 10 <= Number.random(10, 20).value <= 20

    def test_random_int_bounds(self):
        values = {Number.random_int(5, 15).value for _ in range(200)}
        assert values <= set(range(5, 16))
        assert all(isinstance(v, int) for v in values)

    def test_seeded_repeatable(self):
        assert Number.random(0, 1, seed=7) == Number.random(0, 1, seed=7)
        assert Number.random_int(0, 1000, seed=7) == Number.random_int(0, 1000, seed=7)

    def test_inverted_bounds(self):
        with pytest.raises(ValueError):
            Number.random(5, 1)


class TestExactDivide:
    @pytest.mark.parametrize(
        "a, b, expected, expected_type",
        [
            pytest.param(10, 5, 2, int, id="exact"),
            pytest.param(7, 2, 3.5, float, id="inexact"),
            pytest.param(9.0, 3, 3.0, float, id="float-operand"),
            pytest.param(10 ** 400, 3, math.inf, float, id="overflow"),
            pytest.param(-(10 ** 400), 3, -math.inf, float, id="overflow-negative"),
            pytest.param(10 ** 400 + 1, 10 ** 399, 10.0, float, id="big-operands-small-quotient"),
        ],
    )
    def test_exact_divide(self, a, b, expected, expected_type):
        res = exact_divide(a, b)
        assert res == expected
        assert type(res) is expected_type


class TestIdempotence:
    @pytest.mark.parametrize("value", ["0xFF", "0b1010", "1e3", "0755", "-2.5", True, None])
    def test_reconstruct(self, value):
        once = Number.from_value(value)
        again = Number.from_value(once.value)
        assert again == once
        assert again.strict_equals(once)
