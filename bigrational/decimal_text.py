"""Decimal text grammar for :class:`bigrational.Rational`.

Everything here works on plain integer pairs so the grammar can be tested on
its own. Text accepted by :func:`parse_decimal` is an optional sign followed by
ASCII digits, with at most one decimal separator and any number of group
separators, e.g. ``"-1,234.5"``. Exponents are not part of the grammar.
"""
from __future__ import annotations

import decimal
import locale
import logging
import re
from typing import Optional, Tuple, Union

import numpy as np

LOG = logging.getLogger(__name__)

DEFAULT_PRECISION = 100

_SIGNED_DIGITS = re.compile(r"[+-]?[0-9]*")
_DIGITS = re.compile(r"[0-9]*")


def separators(
    decimal_separator: Optional[str] = None,
    group_separator: Optional[str] = None,
) -> Tuple[str, str]:
    """Return the ``(decimal, group)`` separators in effect.

    Separators not given explicitly come from the active locale. When the
    locale defines no grouping character ``","`` is used, or ``"."`` for
    locales whose decimal separator is a comma. An empty group separator
    disables group removal.
    """
    if decimal_separator is None or group_separator is None:
        conv = locale.localeconv()
        if decimal_separator is None:
            decimal_separator = conv["decimal_point"] or "."
        if group_separator is None:
            group_separator = conv["thousands_sep"] or (
                "." if decimal_separator == "," else ","
            )
    if not decimal_separator:
        raise ValueError("decimal separator must be non-empty")
    if decimal_separator == group_separator:
        raise ValueError(
            f"decimal and group separators must differ, both are {decimal_separator!r}"
        )
    return decimal_separator, group_separator


def parse_decimal(
    text: Optional[str],
    *,
    decimal_separator: Optional[str] = None,
    group_separator: Optional[str] = None,
) -> Tuple[int, int]:
    """Split decimal *text* into an unreduced ``(numerator, 10**k)`` pair.

    ``k`` is the number of digits after the decimal separator, so
    ``"3.1400"`` yields ``(31400, 10000)``.
    """
    if text is None:
        raise TypeError("cannot parse None as a decimal number")
    if not isinstance(text, str):
        raise TypeError(f"decimal text must be str, got {type(text)!r}")

    decimal_sep, group_sep = separators(decimal_separator, group_separator)
    value = text.strip()
    if group_sep:
        value = value.replace(group_sep, "")

    count = value.count(decimal_sep)
    if count > 1:
        LOG.debug("rejecting %r: %d decimal separators", text, count)
        raise ValueError(f"invalid decimal literal: {text!r}")

    integral, _, fraction = value.partition(decimal_sep)
    if (
        _SIGNED_DIGITS.fullmatch(integral) is None
        or _DIGITS.fullmatch(fraction) is None
        or not (integral.lstrip("+-") or fraction)
    ):
        LOG.debug("rejecting %r: not a signed digit sequence", text)
        raise ValueError(f"invalid decimal literal: {text!r}")
    return int(integral + fraction), 10 ** len(fraction)


def format_decimal(
    numerator: int,
    denominator: int,
    precision: int = DEFAULT_PRECISION,
    trailing_zeros: bool = False,
    *,
    decimal_separator: Optional[str] = None,
) -> str:
    """Render ``numerator / denominator`` with at most *precision* decimals.

    Digits beyond *precision* are truncated, not rounded. A value whose
    fraction does not show within *precision* digits renders as its integer
    part. With *trailing_zeros* the fraction keeps all *precision* digits, and
    integers get a single ``0`` decimal.
    """
    if precision < 0:
        raise ValueError("precision must be >= 0")
    if denominator == 0:
        raise ZeroDivisionError("denominator must be non-zero")
    decimal_sep, _ = separators(decimal_separator, "")

    negative = (numerator < 0) != (denominator < 0)
    numerator, denominator = abs(numerator), abs(denominator)
    integral, remainder = divmod(numerator, denominator)
    fraction = remainder * 10 ** precision // denominator if remainder else 0

    if fraction == 0:
        text = str(integral)
        if trailing_zeros:
            text += decimal_sep + "0"
    else:
        digits = str(fraction).rjust(precision, "0")
        if not trailing_zeros:
            digits = digits.rstrip("0")
        text = f"{integral}{decimal_sep}{digits}"

    if negative and (integral or fraction):
        text = "-" + text
    return text


def render_float(value: Union[float, np.floating]) -> str:
    """Return the shortest positional text that round-trips *value* in its own type."""
    text = np.format_float_positional(value, unique=True, trim="-")
    LOG.debug("rendered %r as %r", value, text)
    return text


def render_decimal(value: decimal.Decimal) -> str:
    """Return the exact positional text of a finite :class:`~decimal.Decimal`."""
    text = format(value, "f")
    LOG.debug("rendered %r as %r", value, text)
    return text


__all__ = [
    "DEFAULT_PRECISION",
    "format_decimal",
    "parse_decimal",
    "render_decimal",
    "render_float",
    "separators",
]
