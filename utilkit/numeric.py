"""Number helpers modelled on the familiar JavaScript ``Number`` API."""

from __future__ import annotations

import math
import re
import string
from decimal import Decimal
from itertools import takewhile

_MAX_SAFE_INTEGER = 9007199254740991.0  # 2**53 - 1
_MAX_FORMAT_DIGITS = 100
_I64_MAX = 2**63 - 1

# Sign, digits with at most one dot, then an optional exponent that may not
# open the string.
_FLOAT_PREFIX = re.compile(r"[+-]?[0-9]*(?:\.[0-9]*)?(?:(?<=[\s\S])[eE][+-]?[0-9]*)?")


class NumberUtilsError(ValueError):
    """Base class for errors raised by the number helpers."""


class InvalidFormatError(NumberUtilsError):
    """The text does not hold a number in the expected form."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid format: {message}")
        self.message = message


class OutOfRangeError(NumberUtilsError):
    """An argument lies outside the range the operation accepts."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Out of range: {message}")
        self.message = message


def is_finite(n: float) -> bool:
    """Return True when ``n`` is neither infinite nor NaN."""
    return math.isfinite(n)


def is_nan(n: float) -> bool:
    """Return True when ``n`` is NaN."""
    return math.isnan(n)


def is_integer(n: float) -> bool:
    """Return True when ``n`` is finite and has no fractional part."""
    n = float(n)
    return math.isfinite(n) and n.is_integer()


def is_safe_integer(n: float) -> bool:
    """Return True when ``n`` is an integer exactly representable as a double."""
    return is_integer(n) and abs(float(n)) <= _MAX_SAFE_INTEGER


def parse_float(s: str) -> float:
    """Parse the longest leading decimal number in ``s``."""
    text = s.strip()
    if not text:
        raise InvalidFormatError("Empty string")
    prefix = _FLOAT_PREFIX.match(text).group()
    if prefix in ("", "+", "-"):
        raise InvalidFormatError("No valid number found")
    try:
        return float(prefix)
    except ValueError:
        raise InvalidFormatError(f"Cannot parse: {prefix}") from None


def _digit_value(ch: str) -> int:
    if ch in string.digits:
        return ord(ch) - ord("0")
    if ch in string.ascii_letters:
        return ord(ch.lower()) - ord("a") + 10
    return 99


def parse_int(s: str, radix: int) -> int:
    """Parse the longest leading integer in ``s`` written in base ``radix``."""
    if not 2 <= radix <= 36:
        raise InvalidFormatError("Radix must be between 2 and 36")
    text = s.strip()
    if not text:
        raise InvalidFormatError("Empty string")

    negative = text[0] == "-"
    body = text[1:] if text[0] in "+-" else text
    digits = "".join(takewhile(lambda ch: _digit_value(ch) < radix, body))
    if not digits:
        raise InvalidFormatError("No valid digits found")

    value = int(digits, radix)
    if value > _I64_MAX:
        raise InvalidFormatError(f"Cannot parse: {digits}")
    return -value if negative else value


def _non_finite_text(n: float) -> str:
    if math.isnan(n):
        return "NaN"
    return "inf" if n > 0 else "-inf"


def _check_digits(digits: int, name: str) -> int:
    if digits < 0:
        raise OutOfRangeError(f"{name} must not be negative")
    return min(digits, _MAX_FORMAT_DIGITS)


def _exponent_form(n: float, digits: int | None = None) -> str:
    """Scientific notation with a bare exponent, e.g. ``4.20e-4``."""
    if not math.isfinite(n):
        return _non_finite_text(n)
    if digits is not None:
        mantissa, exponent = f"{n:.{digits}e}".split("e")
        return f"{mantissa}e{int(exponent)}"

    sign, digit_tuple, exp = Decimal(repr(n)).normalize().as_tuple()
    mantissa_digits = "".join(map(str, digit_tuple))
    exponent = exp + len(digit_tuple) - 1
    mantissa = mantissa_digits[0]
    if len(mantissa_digits) > 1:
        mantissa += "." + mantissa_digits[1:]
    return f"{'-' if sign else ''}{mantissa}e{exponent}"


def _display(n: float) -> str:
    """Shortest round-tripping decimal form, never in exponent notation."""
    if not math.isfinite(n):
        return _non_finite_text(n)
    return format(Decimal(repr(n)).normalize(), "f")


def to_fixed(n: float, digits: int) -> str:
    """Format ``n`` with exactly ``digits`` decimal places (at most 100)."""
    digits = _check_digits(digits, "digits")
    n = float(n)
    if not math.isfinite(n):
        return _non_finite_text(n)
    return f"{n:.{digits}f}"


def to_exponential(n: float, fraction_digits: int | None = None) -> str:
    """Format ``n`` in exponential notation, e.g. ``4.20e1``."""
    if fraction_digits is not None:
        fraction_digits = _check_digits(fraction_digits, "fraction_digits")
    return _exponent_form(float(n), fraction_digits)


def to_precision(n: float, precision: int | None = None) -> str:
    """Format ``n`` to ``precision`` significant digits."""
    n = float(n)
    if precision is None or precision <= 0:
        return _display(n)
    precision = min(precision, _MAX_FORMAT_DIGITS)
    if n == 0:
        return "0" * precision
    if not math.isfinite(n):
        return _non_finite_text(n)

    magnitude = math.floor(math.log10(abs(n)))
    if 0 <= magnitude < precision:
        places = precision - magnitude - 1
        return f"{n:.{places}f}".rstrip("0").rstrip(".")
    return _exponent_form(n, precision - 1)


def max_safe_integer() -> float:
    """The largest integer a double holds exactly (2**53 - 1)."""
    return _MAX_SAFE_INTEGER


def min_safe_integer() -> float:
    """The smallest integer a double holds exactly (-(2**53 - 1))."""
    return -_MAX_SAFE_INTEGER


def positive_infinity() -> float:
    """Positive infinity."""
    return math.inf


def negative_infinity() -> float:
    """Negative infinity."""
    return -math.inf


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Limit ``value`` to the closed range [minimum, maximum]."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation between ``start`` and ``end``."""
    return start + (end - start) * t


def map_range(
    value: float, in_min: float, in_max: float, out_min: float, out_max: float
) -> float:
    """Map ``value`` from [in_min, in_max] onto [out_min, out_max]."""
    numerator = (value - in_min) * (out_max - out_min)
    denominator = in_max - in_min
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        ratio = math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    else:
        ratio = numerator / denominator
    return ratio + out_min