"""
Distribution and collection sampling.

Parameterized distributions are frozen dataclasses validated on construction,
each with a ``sample(source)`` method. Collection helpers (choice, sample,
shuffle) are plain functions. Everything draws from a UniformSource.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Protocol, Sequence, TypeVar

from seedrand._checks import is_count, is_real, require_positive, require_sequence
from seedrand.source import UniformSource, resolve_source

T = TypeVar("T")


class Distribution(Protocol):
    """Protocol for parameterized distributions."""

    def sample(self, source: UniformSource | None = None) -> Any:
        """Sample a value from this distribution."""
        ...


@dataclass(frozen=True)
class Bernoulli:
    """True with the given probability."""

    probability: float = 0.5

    def __post_init__(self) -> None:
        p = self.probability
        if not is_real(p) or not math.isfinite(p) or not 0 <= p <= 1:
            raise ValueError("Probability must be a number between 0 and 1")

    def sample(self, source: UniformSource | None = None) -> bool:
        return resolve_source(source).random() < self.probability


@dataclass(frozen=True)
class Normal:
    """
    Normal distribution, sampled with the Box-Muller transform.

    Two draws are consumed per sample; only the cosine branch is used. A first
    draw of exactly 0 gives an infinite radius, as in the closed form.
    """

    mean: float = 0.0
    std_dev: float = 1.0

    def __post_init__(self) -> None:
        if not is_real(self.mean) or not is_real(self.std_dev):
            raise TypeError("Mean and standard deviation must be numbers")
        if not self.std_dev > 0:
            raise ValueError("Standard deviation must be positive")

    def sample(self, source: UniformSource | None = None) -> float:
        u = resolve_source(source)
        u1 = u.random()
        u2 = u.random()

        radius = math.sqrt(-2.0 * math.log(u1)) if u1 > 0.0 else math.inf
        z0 = radius * math.cos(2.0 * math.pi * u2)
        return z0 * self.std_dev + self.mean


@dataclass(frozen=True)
class Exponential:
    """Exponential distribution with rate lambda, by inverse-CDF sampling."""

    rate: float = 1.0

    def __post_init__(self) -> None:
        require_positive(self.rate, "Rate must be a positive number")

    def sample(self, source: UniformSource | None = None) -> float:
        return -math.log(1.0 - resolve_source(source).random()) / self.rate


@dataclass(frozen=True)
class Weighted:
    """
    Weighted choice over *items*.

    Draws ``r = u * total`` and returns the first item whose running weight
    sum reaches r. Zero-weight items are only returned when r is exactly
    their running sum, which for a leading zero weight means ``u == 0``.
    """

    items: tuple[Any, ...]
    weights: tuple[float, ...]

    def __post_init__(self) -> None:
        items = require_sequence(self.items, "Items and weights must be sequences")
        weights = require_sequence(self.weights, "Items and weights must be sequences")
        if len(items) != len(weights):
            raise ValueError("Items and weights must have the same length")
        if not items:
            raise ValueError("Items and weights cannot be empty")
        if any(not is_real(w) or math.isnan(w) or w < 0 for w in weights):
            raise ValueError("All weights must be non-negative numbers")
        if sum(weights) <= 0:
            raise ValueError("Total weight must be greater than 0")

        object.__setattr__(self, "items", tuple(items))
        object.__setattr__(self, "weights", tuple(weights))

    @property
    def total(self) -> float:
        return sum(self.weights)

    def sample(self, source: UniformSource | None = None) -> Any:
        r = resolve_source(source).random() * self.total
        cumulative = 0.0
        for item, weight in zip(self.items, self.weights):
            cumulative += weight
            if r <= cumulative:
                return item
        # Rounding in the running sum can leave r just above it.
        return self.items[-1]


# Convenience functions


def boolean(probability: float = 0.5, source: UniformSource | None = None) -> bool:
    """
    Return True with the given probability.

    Raises:
        ValueError: If *probability* is not a finite number in [0, 1].
    """
    return Bernoulli(probability).sample(source)


def choice(seq: Sequence[T], source: UniformSource | None = None) -> T:
    """
    Return a uniformly chosen element of *seq*.

    Raises:
        TypeError: If *seq* is not a list-like sequence.
        ValueError: If *seq* is empty.
    """
    require_sequence(seq, "Input must be a sequence")
    if len(seq) == 0:
        raise ValueError("Sequence cannot be empty")
    u = resolve_source(source)
    return seq[int(u.random() * len(seq))]


def sample(seq: Sequence[T], count: int, source: UniformSource | None = None) -> list[T]:
    """
    Return *count* distinct elements of *seq*, by position, in draw order.

    Uses rejection sampling on indices: each draw is kept only if its index
    has not been chosen already. The expected number of draws grows as
    *count* approaches ``len(seq)``, and the worst case is unbounded.

    Raises:
        TypeError: If *seq* is not a list-like sequence.
        ValueError: Unless ``0 <= count <= len(seq)`` with an integer count.
    """
    require_sequence(seq, "Input must be a sequence")
    if not is_count(count):
        raise ValueError("Count must be a non-negative integer")
    if count > len(seq):
        raise ValueError("Count cannot be greater than sequence length")

    u = resolve_source(source)
    size = len(seq)
    chosen: set[int] = set()
    result: list[T] = []
    while len(result) < count:
        index = int(u.random() * size)
        if index not in chosen:
            chosen.add(index)
            result.append(seq[index])
    return result


def shuffle(seq: Sequence[T], source: UniformSource | None = None) -> list[T]:
    """
    Return a shuffled copy of *seq* (Fisher-Yates). *seq* is not modified.

    Raises:
        TypeError: If *seq* is not a list-like sequence.
    """
    require_sequence(seq, "Input must be a sequence")
    u = resolve_source(source)
    result = list(seq)
    for i in range(len(result) - 1, 0, -1):
        j = int(u.random() * (i + 1))
        result[i], result[j] = result[j], result[i]
    return result


def weighted_choice(
    items: Sequence[T],
    weights: Sequence[float],
    source: UniformSource | None = None,
) -> T:
    """
    Return an element of *items* chosen in proportion to *weights*.

    Example:
        weighted_choice(["common", "rare"], [9, 1])

    Raises:
        TypeError: If either argument is not a list-like sequence.
        ValueError: On mismatched or empty inputs, negative or NaN weights,
            or a zero total weight.
    """
    return Weighted(items, weights).sample(source)


def normal(
    mean: float = 0.0,
    std_dev: float = 1.0,
    source: UniformSource | None = None,
) -> float:
    """Draw from a normal distribution with the given mean and standard deviation."""
    return Normal(mean, std_dev).sample(source)


def exponential(rate: float = 1.0, source: UniformSource | None = None) -> float:
    """Draw from an exponential distribution with the given rate."""
    return Exponential(rate).sample(source)
