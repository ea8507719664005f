"""NumPy object-array helpers for :class:`~bigrational.rational.Rational`."""
from __future__ import annotations

from typing import Any

import numpy as np

from .rational import ZERO, Rational


def as_rational_array(values: Any, *, copy: bool = True) -> np.ndarray:
    """Return a ``numpy.ndarray`` of :class:`Rational` values.

    ``values`` can be any iterable containing numeric-like entries or an existing
    NumPy array. When ``copy`` is ``False`` and ``values`` is already a NumPy
    array with ``dtype=object`` holding only :class:`Rational` entries, the
    original array is returned unchanged.
    """

    if isinstance(values, np.ndarray):
        array = values.copy() if copy else values
    elif isinstance(values, (list, tuple)):
        array = np.array(values, dtype=object)
    else:
        array = np.array(list(values), dtype=object)

    if array.dtype == object and all(isinstance(item, Rational) for item in array.flat):
        return array
    vectorised = np.vectorize(Rational.rationalize, otypes=[object])
    return vectorised(array)


def zeros(length: int) -> np.ndarray:
    """Return a one-dimensional array of length ``length`` filled with zeros."""

    if length < 0:
        raise ValueError("length must be non-negative")
    array = np.empty(length, dtype=object)
    array.fill(ZERO)
    return array


def zeros_like(values: Any) -> np.ndarray:
    """Return a zero-filled array that matches the shape of ``values``."""

    array = np.empty(as_rational_array(values, copy=False).shape, dtype=object)
    array.fill(ZERO)
    return array


def factor_array(values: Any) -> np.ndarray:
    """Reduce every entry of ``values`` to lowest terms.

    Vectorised arithmetic grows numerators and denominators just like scalar
    chains do; call this between steps of a long computation.
    """

    array = as_rational_array(values)
    if array.size == 0:
        return array
    return np.vectorize(Rational.factor, otypes=[object])(array)


def to_float_array(values: Any, dtype: Any = np.float64) -> np.ndarray:
    """Narrow every entry to ``dtype``; raises ``OverflowError`` like :meth:`Rational.to_numpy`."""

    dtype = np.dtype(dtype)
    array = as_rational_array(values, copy=False)
    if array.size == 0:
        return np.zeros(array.shape, dtype=dtype)
    return np.vectorize(lambda item: item.to_numpy(dtype), otypes=[dtype])(array)


__all__ = [
    "as_rational_array",
    "factor_array",
    "to_float_array",
    "zeros",
    "zeros_like",
]
