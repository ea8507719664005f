"""Exact rational numbers over arbitrary-precision integers with NumPy interoperability."""
from __future__ import annotations

import decimal
import logging
import math
import numbers
import operator
from fractions import Fraction
from typing import Any, Optional, Tuple, Union

import numpy as np

from . import decimal_text
from .decimal_text import DEFAULT_PRECISION

LOG = logging.getLogger(__name__)

NumberLike = Union["Rational", Fraction, decimal.Decimal, numbers.Real]

DEFAULT_MAX_DENOMINATOR = 10**6

# Reductions of pairs wider than this are worth a debug record.
_LARGE_PAIR_BITS = 4096

_SQRT_DIGITS = 20
_LOG10_2 = math.log10(2)

# Quotient width used when narrowing into types wider than float64.
_EXTENDED_QUOTIENT_BITS = 128


def _ensure_int(value: Any, *, name: str) -> int:
    """Convert *value* to ``int`` when it represents an integer."""
    if isinstance(value, numbers.Integral):
        return int(value)
    raise TypeError(f"{name} must be an integer, got {type(value)!r}")


def _truncated_quotient(num: int, den: int) -> int:
    quotient = abs(num) // abs(den)
    return -quotient if (num < 0) != (den < 0) else quotient


def _divide_extended(num: int, den: int, dtype: np.dtype) -> np.floating:
    """Divide in a floating type wider than float64.

    The quotient is taken as a ``_EXTENDED_QUOTIENT_BITS``-wide integer and
    scaled back with ``ldexp``, so neither component has to fit the type.
    """
    negative = (num < 0) != (den < 0)
    num, den = abs(num), abs(den)
    if num == 0:
        return dtype.type(0)
    info = np.finfo(dtype)
    exponent = num.bit_length() - den.bit_length()
    if exponent < info.minexp - info.nmant - 2:
        return dtype.type(-0.0 if negative else 0.0)
    shift = _EXTENDED_QUOTIENT_BITS - exponent
    if shift >= 0:
        quotient = (num << shift) // den
    else:
        quotient = num // (den << -shift)
    result = np.ldexp(dtype.type(quotient), -shift)
    return -result if negative else result


class Rational:
    """Exact rational number stored as an unreduced numerator/denominator pair.

    The pair is never reduced implicitly: ``Rational(2, 4)`` keeps its
    components and arithmetic multiplies denominators without taking a gcd.
    Call :meth:`factor` to bring a value to lowest terms with a positive
    denominator. Equality, ordering and hashing depend only on the value, so
    ``Rational(1, 2)``, ``Rational(2, 4)`` and ``Rational(-1, -2)`` are
    interchangeable, including as dictionary keys.

    Floats compare through their shortest decimal text, so
    ``Rational(1, 10) == 0.1`` holds while ``hash(0.1)`` differs from
    ``hash(Rational(1, 10))``. Do not mix floats and :class:`Rational` values
    as keys of one dict or set; ints and :class:`~fractions.Fraction` are safe.
    """

    __slots__ = ("_numerator", "_denominator")
    __array_priority__ = 1000.0  # Prefer Rational semantics in NumPy expressions.

    def __init__(
        self,
        numerator: Union[int, numbers.Integral] = 0,
        denominator: Union[int, numbers.Integral] = 1,
    ) -> None:
        num = _ensure_int(numerator, name="numerator")
        den = _ensure_int(denominator, name="denominator")
        if den == 0:
            raise ZeroDivisionError("denominator must be non-zero")

        self._numerator = num
        self._denominator = den

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_float(cls, value: Union[float, np.floating]) -> "Rational":
        """Return the value of the shortest decimal text that round-trips *value*.

        The denominator of the result is always a power of ten, so ``0.1``
        becomes ``1/10`` rather than its binary expansion.
        """
        if isinstance(value, numbers.Integral):
            return cls(int(value))
        if not np.isfinite(value):
            raise ValueError("cannot convert NaN or infinity to Rational")
        return cls.parse(
            decimal_text.render_float(value), decimal_separator=".", group_separator=""
        )

    @classmethod
    def from_decimal(cls, value: decimal.Decimal) -> "Rational":
        """Create a :class:`Rational` holding the exact value of *value*."""
        if isinstance(value, numbers.Integral):
            return cls(int(value))
        if not isinstance(value, decimal.Decimal):
            raise TypeError(f"expected Decimal, got {type(value)!r}")
        if not value.is_finite():
            raise ValueError("cannot convert NaN or infinity to Rational")
        return cls.parse(
            decimal_text.render_decimal(value), decimal_separator=".", group_separator=""
        )

    @classmethod
    def from_fraction(cls, value: Fraction) -> "Rational":
        """Create a :class:`Rational` from :class:`fractions.Fraction`."""
        return cls(value.numerator, value.denominator)

    @classmethod
    def rationalize(cls, value: NumberLike) -> "Rational":
        """Coerce a numeric-like value into :class:`Rational`."""
        if isinstance(value, Rational):
            return value
        if isinstance(value, Fraction):
            return cls.from_fraction(value)
        if isinstance(value, numbers.Integral):
            return cls(int(value))
        if isinstance(value, decimal.Decimal):
            return cls.from_decimal(value)
        if isinstance(value, np.floating):  # keep float32/float16 shortest text
            return cls.from_float(value)
        if isinstance(value, np.generic):
            return cls.rationalize(value.item())
        if isinstance(value, numbers.Real):
            return cls.from_float(float(value))
        raise TypeError(f"Cannot convert {type(value)!r} to Rational")

    @classmethod
    def parse(
        cls,
        text: Optional[str],
        *,
        decimal_separator: Optional[str] = None,
        group_separator: Optional[str] = None,
    ) -> "Rational":
        """Parse decimal *text* such as ``"-1,234.5"`` into a reduced :class:`Rational`.

        Separators default to the active locale. ``None`` raises
        :class:`TypeError`; malformed text raises :class:`ValueError`.
        """
        num, den = decimal_text.parse_decimal(
            text, decimal_separator=decimal_separator, group_separator=group_separator
        )
        return cls(num, den).factor()

    @classmethod
    def try_parse(
        cls,
        text: Optional[str],
        *,
        decimal_separator: Optional[str] = None,
        group_separator: Optional[str] = None,
    ) -> Optional["Rational"]:
        """Like :meth:`parse`, but return ``None`` when *text* cannot be parsed."""
        try:
            return cls.parse(
                text, decimal_separator=decimal_separator, group_separator=group_separator
            )
        except (TypeError, ValueError):
            return None

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @property
    def is_normalized(self) -> bool:
        """``True`` when the pair is in lowest terms with a positive denominator."""
        return self._denominator > 0 and math.gcd(self._numerator, self._denominator) == 1

    def as_fraction(self) -> Fraction:
        """Return a :class:`Fraction` with the same value."""
        return Fraction(self._numerator, self._denominator)

    def factor(self) -> "Rational":
        """Return the value in lowest terms with a positive denominator.

        Reduction takes a gcd over the full magnitude of both components, which
        is why arithmetic never does it. Long arithmetic chains should call
        this periodically to keep the components from growing without bound.
        """
        if self._denominator == 1:
            return self
        num, den = self._normalize(self._numerator, self._denominator)
        return Rational(num, den)

    def limit_denominator(self, max_denominator: int = DEFAULT_MAX_DENOMINATOR) -> "Rational":
        """Return the closest value whose denominator is at most *max_denominator*.

        This is an approximation; use it to bound growth when exactness can be
        traded away.
        """
        fraction = self.as_fraction().limit_denominator(max_denominator)
        return Rational.from_fraction(fraction)

    @staticmethod
    def _normalize(num: int, den: int) -> Tuple[int, int]:
        if den < 0:
            num, den = -num, -den
        bits = max(num.bit_length(), den.bit_length())
        if bits > _LARGE_PAIR_BITS:
            LOG.debug("reducing a %d-bit rational pair", bits)
        gcd = math.gcd(num, den)
        return num // gcd, den // gcd

    def _positive_pair(self) -> Tuple[int, int]:
        if self._denominator < 0:
            return -self._numerator, -self._denominator
        return self._numerator, self._denominator

    # ------------------------------------------------------------------
    # Numeric protocol
    def __float__(self) -> float:
        return float(self.to_numpy(np.float64))

    def __int__(self) -> int:
        return _truncated_quotient(self._numerator, self._denominator)

    def __bool__(self) -> bool:
        return self._numerator != 0

    def to_numpy(self, dtype: Any = np.float64) -> np.floating:
        """Narrow to a NumPy floating scalar, raising :class:`OverflowError` out of range.

        ``float16``, ``float32`` and ``float64`` go through the correctly
        rounded ``int / int`` division; ``longdouble`` divides in its own
        precision.
        """
        dtype = np.dtype(dtype)
        if dtype.kind != "f":
            raise TypeError(f"cannot narrow Rational to {dtype}")
        info = np.finfo(dtype)
        extended = dtype.itemsize > 8
        largest = Rational(*(info.max if extended else float(info.max)).as_integer_ratio())
        if self < -largest:
            LOG.debug("%r is below the %s range", self, dtype)
            raise OverflowError(f"value is less than the minimum of {dtype}")
        if self > largest:
            LOG.debug("%r is above the %s range", self, dtype)
            raise OverflowError(f"value is greater than the maximum of {dtype}")
        if extended:
            return _divide_extended(self._numerator, self._denominator, dtype)
        return dtype.type(self._numerator / self._denominator)

    def to_decimal(self, context: Optional[decimal.Context] = None) -> decimal.Decimal:
        """Divide the components in *context*, or the current decimal context."""
        if context is None:
            context = decimal.getcontext()
        return context.divide(decimal.Decimal(self._numerator), decimal.Decimal(self._denominator))

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        if format_spec == "":
            return str(self)
        if format_spec in ("r", "R"):
            return self.to_rational_string()
        if format_spec in ("m", "M"):
            return self.to_mixed_string()
        return format(float(self), format_spec)

    def to_string(
        self,
        precision: int = DEFAULT_PRECISION,
        trailing_zeros: bool = False,
        *,
        decimal_separator: Optional[str] = None,
    ) -> str:
        """Return decimal text with up to *precision* truncated fraction digits.

        >>> Rational(1, 3).to_string(5)
        '0.33333'
        >>> Rational(3, 2).to_string(3, trailing_zeros=True)
        '1.500'
        """
        value = self.factor()
        return decimal_text.format_decimal(
            value._numerator,
            value._denominator,
            precision,
            trailing_zeros,
            decimal_separator=decimal_separator,
        )

    def to_mixed_string(self) -> str:
        """Return ``"q"`` or ``"q, r/d"``, where ``q`` is truncated toward zero."""
        value = self.factor()
        quotient = _truncated_quotient(value._numerator, value._denominator)
        remainder = value._numerator - quotient * value._denominator
        if remainder == 0:
            return str(quotient)
        return f"{quotient}, {remainder}/{value._denominator}"

    def to_rational_string(self) -> str:
        value = self.factor()
        return f"{value._numerator} / {value._denominator}"

    # ------------------------------------------------------------------
    # Internal helpers
    def _binary_operation(self, other: Any, op):
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(
                lambda x: op(self, Rational.rationalize(x)),
                otypes=[object],
            )
            return vectorised(other)
        try:
            other_rat = Rational.rationalize(other)
        except TypeError:
            return NotImplemented
        return op(self, other_rat)

    def _reflected_operation(self, other: Any, op):
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(
                lambda x: op(Rational.rationalize(x), self),
                otypes=[object],
            )
            return vectorised(other)
        try:
            other_rat = Rational.rationalize(other)
        except TypeError:
            return NotImplemented
        return op(other_rat, self)

    def _coerce_power(self, value: Any) -> int:
        if isinstance(value, numbers.Integral):
            return int(value)
        if isinstance(value, Rational):
            if not value.is_integer():
                raise ValueError("Exponent must be an integer")
            return int(value)
        if isinstance(value, np.generic):
            return self._coerce_power(value.item())
        if isinstance(value, numbers.Real):
            if not float(value).is_integer():
                raise ValueError("Exponent must be an integer")
            return int(value)
        raise TypeError("Unsupported exponent type")

    # ------------------------------------------------------------------
    # Arithmetic operators
    def __add__(self, other: Any) -> Any:
        return self._binary_operation(other, _add)

    def __radd__(self, other: Any) -> Any:
        return self._reflected_operation(other, _add)

    def __sub__(self, other: Any) -> Any:
        return self._binary_operation(other, _sub)

    def __rsub__(self, other: Any) -> Any:
        return self._reflected_operation(other, _sub)

    def __mul__(self, other: Any) -> Any:
        return self._binary_operation(other, _mul)

    def __rmul__(self, other: Any) -> Any:
        return self._reflected_operation(other, _mul)

    def __truediv__(self, other: Any) -> Any:
        return self._binary_operation(other, _truediv)

    def __rtruediv__(self, other: Any) -> Any:
        return self._reflected_operation(other, _truediv)

    def __floordiv__(self, other: Any) -> Any:
        return self._binary_operation(other, _floordiv)

    def __rfloordiv__(self, other: Any) -> Any:
        return self._reflected_operation(other, _floordiv)

    def __mod__(self, other: Any) -> Any:
        return self._binary_operation(other, _mod)

    def __rmod__(self, other: Any) -> Any:
        return self._reflected_operation(other, _mod)

    def __divmod__(self, other: Any) -> Any:
        return self._binary_operation(other, _divmod)

    def __rdivmod__(self, other: Any) -> Any:
        return self._reflected_operation(other, _divmod)

    def __pow__(self, exponent: Any) -> Any:
        if isinstance(exponent, np.ndarray):
            vectorised = np.vectorize(lambda x: self.__pow__(x), otypes=[object])
            return vectorised(exponent)
        try:
            power = self._coerce_power(exponent)
        except TypeError:
            return NotImplemented
        if self._numerator == 0:
            # Zero stays zero for non-negative powers, including 0 ** 0.
            if power < 0:
                raise ZeroDivisionError("0 cannot be raised to a negative power")
            return self
        if power >= 0:
            return Rational(self._numerator ** power, self._denominator ** power)
        positive = -power
        return Rational(self._denominator ** positive, self._numerator ** positive)

    def __rpow__(self, base: Any) -> Any:
        try:
            base_rat = Rational.rationalize(base)
        except TypeError:
            return NotImplemented
        return base_rat ** self

    def __lshift__(self, shift: Any) -> Any:
        """Move the decimal point *shift* places to the right (multiply by ``10**shift``)."""
        if not isinstance(shift, numbers.Integral):
            return NotImplemented
        shift = int(shift)
        if shift < 0:
            return self >> -shift
        return Rational(self._numerator * 10 ** shift, self._denominator)

    def __rshift__(self, shift: Any) -> Any:
        """Move the decimal point *shift* places to the left (divide by ``10**shift``)."""
        if not isinstance(shift, numbers.Integral):
            return NotImplemented
        shift = int(shift)
        if shift < 0:
            return self << -shift
        return Rational(self._numerator, self._denominator * 10 ** shift)

    def __neg__(self) -> "Rational":
        return Rational(-self._numerator, self._denominator)

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        return Rational(abs(self._numerator), abs(self._denominator))

    def __invert__(self) -> "Rational":
        return self.inverse()

    def inverse(self) -> "Rational":
        if self._numerator == 0:
            raise ZeroDivisionError("0 has no inverse")
        return Rational(self._denominator, self._numerator)

    def increment(self) -> "Rational":
        return Rational(self._numerator + self._denominator, self._denominator)

    def decrement(self) -> "Rational":
        return Rational(self._numerator - self._denominator, self._denominator)

    # ------------------------------------------------------------------
    # Rounding
    def floor(self) -> "Rational":
        """Return the largest integer value not greater than this one."""
        return Rational(self._numerator // self._denominator)

    def ceil(self) -> "Rational":
        """Return the smallest integer value not less than this one."""
        return Rational(-(-self._numerator // self._denominator))

    def truncate(self) -> "Rational":
        """Return the integer part, dropping the fraction toward zero."""
        return Rational(_truncated_quotient(self._numerator, self._denominator))

    def round(self, ndigits: Optional[int] = None) -> "Rational":
        """Round half up, toward positive infinity.

        Ties are not rounded to even and the rule is not symmetric around
        zero: ``-1/2`` rounds to ``0`` and ``-3/2`` to ``-1``. With *ndigits*
        the rounding happens at that decimal place instead of the unit.
        """
        if ndigits:
            return ((self << ndigits).round() >> ndigits).factor()
        if self.decimals() >= ONE_HALF:
            return self.ceil()
        return self.floor()

    def decimals(self) -> "Rational":
        """Return the fractional part ``self - self.floor()``, always in ``[0, 1)``."""
        num, den = self._positive_pair()
        return Rational(num % den, den)

    def __floor__(self) -> "Rational":
        return self.floor()

    def __ceil__(self) -> "Rational":
        return self.ceil()

    def __trunc__(self) -> "Rational":
        return self.truncate()

    def __round__(self, ndigits: Optional[int] = None) -> "Rational":
        return self.round(ndigits)

    # ------------------------------------------------------------------
    # Approximate functions
    def sqrt(self) -> "Rational":
        """Return the (principal) square root within the available precision.

        The result is exact only when both reduced components are perfect
        squares. Otherwise it is truncated to about ``_SQRT_DIGITS``
        significant digits over a power-of-ten denominator, for any
        magnitude.
        """
        value = self.factor()
        if value._numerator < 0:
            raise ValueError("square root is undefined for negative Rational values")
        if value._numerator == 0:
            return ZERO

        num_sqrt = math.isqrt(value._numerator)
        den_sqrt = math.isqrt(value._denominator)
        if num_sqrt * num_sqrt == value._numerator and den_sqrt * den_sqrt == value._denominator:
            return Rational(num_sqrt, den_sqrt)

        # Enough decimal places to carry _SQRT_DIGITS digits of a root below one.
        magnitude = int((value._denominator.bit_length() - value._numerator.bit_length()) * _LOG10_2)
        places = max(0, magnitude // 2) + _SQRT_DIGITS
        root = math.isqrt(value._numerator * 10 ** (2 * places) // value._denominator)
        return Rational(root, 10 ** places)

    def log10(self) -> float:
        """Approximate base-10 logarithm."""
        num, den = self._positive_pair()
        if num <= 0:
            raise ValueError("logarithm is undefined for non-positive Rational values")
        return math.log10(num) - math.log10(den)

    def log(self, base: float = math.e) -> float:
        """Approximate logarithm in *base* (natural by default)."""
        num, den = self._positive_pair()
        if num <= 0:
            raise ValueError("logarithm is undefined for non-positive Rational values")
        return math.log(num, base) - math.log(den, base)

    # ------------------------------------------------------------------
    # Predicates
    def sign(self) -> int:
        if self._numerator == 0:
            return 0
        return -1 if (self._numerator < 0) != (self._denominator < 0) else 1

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_negative(self) -> bool:
        return self.sign() < 0

    def is_positive(self) -> bool:
        return self.sign() > 0

    def is_integer(self) -> bool:
        return self._numerator % self._denominator == 0

    def is_even_integer(self) -> bool:
        return self.is_integer() and int(self) % 2 == 0

    def is_odd_integer(self) -> bool:
        return self.is_integer() and int(self) % 2 == 1

    # ------------------------------------------------------------------
    # Comparisons
    def compare_to(self, other: Any) -> int:
        """Return ``-1``, ``0`` or ``1`` as this value is below, equal to or above *other*."""
        if other is None:
            raise TypeError("cannot compare Rational with None")
        try:
            other_rat = Rational.rationalize(other)
        except ValueError as exc:
            raise TypeError(f"cannot compare Rational with {other!r}") from exc
        return _cross_compare(self, other_rat)

    def _compare(self, other: Any, op) -> Any:
        try:
            other_rat = Rational.rationalize(other)
        except (TypeError, ValueError):
            return NotImplemented
        return op(_cross_compare(self, other_rat), 0)

    def __eq__(self, other: Any) -> Any:
        try:
            other_rat = Rational.rationalize(other)
        except (TypeError, ValueError):
            return NotImplemented
        return self._numerator * other_rat._denominator == other_rat._numerator * self._denominator

    def __lt__(self, other: Any) -> Any:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> Any:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> Any:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> Any:
        return self._compare(other, operator.ge)

    def __hash__(self) -> int:
        # Fraction reduces the pair, so every scaling of a value hashes alike
        # and matches hash() of the equal int or Fraction.
        return hash(Fraction(self._numerator, self._denominator))

    # ------------------------------------------------------------------
    # NumPy interoperability
    _UFUNC_DISPATCH = {
        np.add: operator.add,
        np.subtract: operator.sub,
        np.multiply: operator.mul,
        np.true_divide: operator.truediv,
        np.floor_divide: operator.floordiv,
        np.remainder: operator.mod,
        np.negative: operator.neg,
        np.positive: operator.pos,
        np.absolute: abs,
        np.power: operator.pow,
        np.floor: math.floor,
        np.ceil: math.ceil,
        np.trunc: math.trunc,
        np.sqrt: lambda a: a.sqrt(),
    }

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if method != "__call__":
            return NotImplemented
        if kwargs.get("out") is not None:
            raise NotImplementedError("`out` argument is not supported for Rational ufuncs")
        op = self._UFUNC_DISPATCH.get(ufunc)
        if op is None:
            return NotImplemented

        coerced = []
        has_array = False
        for value in inputs:
            if isinstance(value, Rational):
                coerced.append(value)
            elif isinstance(value, np.ndarray):
                vectorised = np.vectorize(Rational.rationalize, otypes=[object])
                coerced.append(vectorised(value))
                has_array = True
            else:
                coerced.append(Rational.rationalize(value))
        if has_array:
            vectorised = np.vectorize(lambda *args: op(*args), otypes=[object])
            return vectorised(*coerced)
        return op(*coerced)


def _add(a: Rational, b: Rational) -> Rational:
    return Rational(
        a._numerator * b._denominator + b._numerator * a._denominator,
        a._denominator * b._denominator,
    )


def _sub(a: Rational, b: Rational) -> Rational:
    return Rational(
        a._numerator * b._denominator - b._numerator * a._denominator,
        a._denominator * b._denominator,
    )


def _mul(a: Rational, b: Rational) -> Rational:
    return Rational(a._numerator * b._numerator, a._denominator * b._denominator)


def _truediv(a: Rational, b: Rational) -> Rational:
    if b._numerator == 0:
        raise ZeroDivisionError("division by zero")
    return Rational(a._numerator * b._denominator, a._denominator * b._numerator)


def _floordiv(a: Rational, b: Rational) -> Rational:
    return _truediv(a, b).floor()


def _mod(a: Rational, b: Rational) -> Rational:
    return _sub(a, _mul(_floordiv(a, b), b))


def _divmod(a: Rational, b: Rational) -> Tuple[Rational, Rational]:
    quotient = _floordiv(a, b)
    return quotient, _sub(a, _mul(quotient, b))


def _cross_compare(a: Rational, b: Rational) -> int:
    left = a._numerator * b._denominator
    right = b._numerator * a._denominator
    result = (left > right) - (left < right)
    # Cross multiplication scales both sides by the denominator product.
    if (a._denominator < 0) != (b._denominator < 0):
        result = -result
    return result


ZERO = Rational(0, 1)
ONE = Rational(1, 1)
MINUS_ONE = Rational(-1, 1)
ONE_HALF = Rational(1, 2)

E = Rational(27182818284590452353602874713526624977572, 10**40)
PI = Rational(31415926535897932384626433832795028841971, 10**40)
TAU = Rational(62831853071795864769252867665590057683943, 10**40)


def rationalize(value: NumberLike) -> Rational:
    """Public helper to convert *value* into :class:`Rational`."""

    return Rational.rationalize(value)


def parse(
    text: Optional[str],
    *,
    decimal_separator: Optional[str] = None,
    group_separator: Optional[str] = None,
) -> Rational:
    return Rational.parse(
        text, decimal_separator=decimal_separator, group_separator=group_separator
    )


def factor(value: NumberLike) -> Rational:
    """Reduce *value* to lowest terms with a positive denominator."""

    return Rational.rationalize(value).factor()


def compare(left: NumberLike, right: NumberLike) -> int:
    return Rational.rationalize(left).compare_to(right)


def clamp(value: NumberLike, low: NumberLike, high: NumberLike) -> Rational:
    """Return *value* limited to the closed interval ``[low, high]``."""

    value, low, high = (Rational.rationalize(v) for v in (value, low, high))
    if low > high:
        raise ValueError("clamp requires low <= high")
    if value < low:
        return low
    if value > high:
        return high
    return value


__all__ = [
    "DEFAULT_MAX_DENOMINATOR",
    "DEFAULT_PRECISION",
    "E",
    "MINUS_ONE",
    "ONE",
    "ONE_HALF",
    "PI",
    "Rational",
    "TAU",
    "ZERO",
    "clamp",
    "compare",
    "factor",
    "parse",
    "rationalize",
]
