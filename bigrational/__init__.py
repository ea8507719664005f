"""Exact arbitrary-precision rational numbers."""

from .arrays import as_rational_array, factor_array, to_float_array, zeros, zeros_like
from .decimal_text import DEFAULT_PRECISION
from .rational import (
    DEFAULT_MAX_DENOMINATOR,
    E,
    MINUS_ONE,
    ONE,
    ONE_HALF,
    PI,
    TAU,
    ZERO,
    Rational,
    clamp,
    compare,
    factor,
    parse,
    rationalize,
)

__all__ = [
    "Rational",
    "rationalize",
    "parse",
    "factor",
    "compare",
    "clamp",
    "DEFAULT_PRECISION",
    "DEFAULT_MAX_DENOMINATOR",
    "ZERO",
    "ONE",
    "MINUS_ONE",
    "ONE_HALF",
    "E",
    "PI",
    "TAU",
    "as_rational_array",
    "factor_array",
    "to_float_array",
    "zeros",
    "zeros_like",
]
