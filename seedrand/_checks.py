"""
Argument checks shared by the sampling algorithms.

Wrong kinds of value raise TypeError; values of the right kind outside the
allowed domain raise ValueError. Checks run before the first draw so a
rejected call never advances a generator.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Sequence
from typing import Any

_TEXT_TYPES = (str, bytes, bytearray, memoryview)


def is_real(value: Any) -> bool:
    """True for real numbers, excluding bool."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_integral(value: Any) -> bool:
    """True for ints (not bool) and for floats holding an exact integer."""
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Integral):
        return True
    return isinstance(value, float) and value.is_integer()


def is_exact_int(value: Any) -> bool:
    """True for arbitrary-precision integers only (no floats, no bool)."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def is_count(value: Any) -> bool:
    """True for non-negative integral values."""
    return is_integral(value) and value >= 0


def require_sequence(value: Any, message: str) -> Sequence[Any]:
    """Return *value* if it is a list-like sequence, else raise TypeError."""
    if not isinstance(value, Sequence) or isinstance(value, _TEXT_TYPES):
        raise TypeError(message)
    return value


def require_positive(value: Any, message: str) -> float:
    """Return *value* if it is a real number strictly above zero."""
    if not is_real(value) or math.isnan(value) or value <= 0:
        raise ValueError(message)
    return value


def byte_view(buffer: Any) -> memoryview:
    """
    Return a writable unsigned-byte view over *buffer*.

    Accepts anything exposing the buffer protocol (bytearray, memoryview,
    array.array, numpy arrays, ...). Multi-byte element types are viewed
    byte-wise.
    """
    try:
        view = memoryview(buffer)
    except TypeError:
        raise TypeError("Buffer must support the buffer protocol") from None
    if view.readonly:
        raise TypeError("Buffer must be writable")
    if view.format != "B" or view.ndim != 1:
        try:
            view = view.cast("B")
        except TypeError:
            raise TypeError("Buffer must be C-contiguous") from None
    return view
