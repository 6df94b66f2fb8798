"""
Range and quantization algorithms.

Each range is a small frozen dataclass validated on construction and sampled
against a uniform source:

- NumberRange: continuous [lo, hi), optionally quantized to ``lo + k*step``
- IntRange: integers in [lo, hi], optionally on a step grid
- BigIntRange: like IntRange but with exact integer bounds of any size

The module-level helpers build a range and sample it in one call.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass

from seedrand._checks import is_exact_int, is_integral, is_real, require_positive
from seedrand.source import UniformSource, resolve_source


@dataclass(frozen=True)
class NumberRange:
    """
    Continuous range over [lo, hi).

    Without a step the draw is ``lo + u*(hi-lo)``, which never reaches hi.
    With a step the draw is quantized to ``lo + N*step`` for
    ``N`` in ``0..floor((hi-lo)/step)``, then clamped down to hi. The top
    bucket is not redistributed when rounding pushes it past hi, so it may be
    under-represented relative to interior buckets.

    When hi - lo itself overflows to infinity (bounds near the float
    maximum with opposite signs), the unstepped draw is nan for u == 0 and
    infinite otherwise, so results fall outside [lo, hi).
    """

    lo: float
    hi: float
    step: float | None = None

    def __post_init__(self) -> None:
        if not is_real(self.lo) or not is_real(self.hi):
            raise TypeError("Lower and upper bounds must be numbers")
        if not (math.isfinite(self.lo) and math.isfinite(self.hi)):
            raise ValueError("Bounds must be finite")
        if not self.lo < self.hi:
            raise ValueError("Lower bound must be less than upper bound")
        if self.step is not None:
            require_positive(self.step, "Step must be a positive number")

    def sample(self, source: UniformSource | None = None) -> float:
        u = resolve_source(source)
        if self.step is None:
            return float(self.lo + u.random() * (self.hi - self.lo))

        quotient = (self.hi - self.lo) / self.step
        # Grids with more points than a float can count are indexed up to
        # the largest float.
        max_n = math.floor(quotient if math.isfinite(quotient) else sys.float_info.max)
        n = math.floor(u.random() * (max_n + 1))
        result = self.lo + n * self.step
        return float(self.hi if result > self.hi else result)


@dataclass(frozen=True)
class IntRange:
    """Integers in [lo, hi], both inclusive, optionally on a step grid."""

    lo: int
    hi: int
    step: int | None = None

    def __post_init__(self) -> None:
        if not is_integral(self.lo) or not is_integral(self.hi):
            raise TypeError("Lower and upper bounds must be integers")
        if self.lo > self.hi:
            raise ValueError("Lower bound must be less than or equal to upper bound")
        if self.step is not None and not (is_integral(self.step) and self.step > 0):
            raise ValueError("Step must be a positive integer")

        # Integral floats are stored as ints.
        object.__setattr__(self, "lo", int(self.lo))
        object.__setattr__(self, "hi", int(self.hi))
        if self.step is not None:
            object.__setattr__(self, "step", int(self.step))

    def sample(self, source: UniformSource | None = None) -> int:
        u = resolve_source(source)
        if self.step is None:
            return math.floor(u.random() * (self.hi - self.lo + 1)) + self.lo

        max_n = (self.hi - self.lo) // self.step
        n = math.floor(u.random() * (max_n + 1))
        return self.lo + n * self.step


@dataclass(frozen=True)
class BigIntRange:
    """
    Arbitrary-precision integers in [lo, hi].

    Bounds and step are exact, but the random index is a float draw scaled
    by the range size converted to float. Ranges wider than 2**53 therefore
    cannot reach every value, and ranges beyond the float maximum raise
    OverflowError when sampled.
    """

    lo: int
    hi: int
    step: int | None = None

    def __post_init__(self) -> None:
        if not is_exact_int(self.lo) or not is_exact_int(self.hi):
            raise TypeError("Lower and upper bounds must be integers")
        if self.lo > self.hi:
            raise ValueError("Lower bound must be less than or equal to upper bound")
        if self.step is not None and not (is_exact_int(self.step) and self.step > 0):
            raise ValueError("Step must be a positive integer")

    def sample(self, source: UniformSource | None = None) -> int:
        u = resolve_source(source)
        if self.step is None:
            span = self.hi - self.lo + 1
            return self.lo + math.floor(u.random() * float(span))

        max_n = (self.hi - self.lo) // self.step
        n = math.floor(u.random() * (float(max_n) + 1))
        return self.lo + n * self.step


def number(
    lo: float,
    hi: float,
    step: float | None = None,
    source: UniformSource | None = None,
) -> float:
    """
    Draw a float from [lo, hi), or from the grid ``lo + k*step`` if *step*
    is given.

    Raises:
        TypeError: If a bound is not a number.
        ValueError: If ``lo >= hi``, a bound is infinite or *step* is not
            positive.
    """
    return NumberRange(lo, hi, step).sample(source)


def integer(
    lo: int,
    hi: int,
    step: int | None = None,
    source: UniformSource | None = None,
) -> int:
    """
    Draw an integer from [lo, hi], or from ``lo + k*step`` if *step* is given.

    Example:
        die = integer(1, 6)
        even = integer(0, 20, 2)
    """
    return IntRange(lo, hi, step).sample(source)


def bigint(
    lo: int,
    hi: int,
    step: int | None = None,
    source: UniformSource | None = None,
) -> int:
    """Draw an arbitrary-precision integer from [lo, hi]."""
    return BigIntRange(lo, hi, step).sample(source)
