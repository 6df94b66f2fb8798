"""
SeededRandom: a reproducible generator built on the 32-bit LCG.

A SeededRandom owns its state exclusively. Every draw mutates it, and the same
seed always yields the same sequence of draws for the same sequence of calls.
It implements :class:`~seedrand.source.UniformSource`, and every range,
encoding and distribution helper is also available as a bound method drawing
from the instance.

The generator is neither cryptographically secure nor thread-safe. Share an
instance between threads only under an external lock.
"""

from __future__ import annotations

from typing import Any, Sequence, TypeVar

from seedrand import distributions, encoding, ranges
from seedrand._checks import is_exact_int
from seedrand._lcg import LCG
from seedrand.seeding import (
    state_from_exact_seed,
    state_from_fixed,
    state_from_seed,
)

T = TypeVar("T")
B = TypeVar("B")


class SeededRandom:
    """
    Reproducible pseudorandom generator.

    Example:
        rng = SeededRandom(12345)
        rng.random()            # first LCG draw for seed 12345
        rng.integer(1, 6)

        checkpoint = rng.get_state()
        a = rng.random()
        rng.set_state(checkpoint)
        assert rng.random() == a
    """

    __slots__ = ("_lcg",)

    def __init__(self, seed: Any) -> None:
        """
        Create a generator from a number or a bytes-like seed.

        Numbers are reduced modulo 2**32. Byte buffers may hold at most 32
        bytes; only the first four are folded into the state.

        Raises:
            TypeError: If *seed* is neither a number nor bytes-like.
            ValueError: If a byte seed is longer than 32 bytes.
        """
        self._lcg = LCG(state_from_seed(seed))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_seed(cls, seed: Any) -> SeededRandom:
        """
        Create a generator from exactly 32 bytes of seed material.

        Only the first four bytes reach the 32-bit state.

        Raises:
            TypeError: If *seed* is not bytes-like.
            ValueError: If *seed* is not exactly 32 bytes long.
        """
        return cls.from_state(state_from_exact_seed(seed))

    @classmethod
    def from_state(cls, state: int) -> SeededRandom:
        """Create a generator positioned at a raw 32-bit *state*."""
        instance = cls(0)
        instance.set_state(state)
        return instance

    @classmethod
    def from_fixed(cls, byte: int) -> SeededRandom:
        """
        Create a generator from a single byte value.

        Raises:
            ValueError: If *byte* is not an integer in [0, 255].
        """
        return cls(state_from_fixed(byte))

    # ------------------------------------------------------------------
    # Core
    # ------------------------------------------------------------------

    def random(self) -> float:
        """Advance the generator and return a float in [0, 1)."""
        return self._lcg.next()

    @property
    def state(self) -> int:
        """The current 32-bit state."""
        return self._lcg.state

    def get_state(self) -> int:
        """Return the current 32-bit state, for a later :meth:`set_state`."""
        return self._lcg.state

    def set_state(self, state: int) -> SeededRandom:
        """
        Reposition the generator at *state* (taken modulo 2**32).

        Returns:
            This generator, for chaining.

        Raises:
            TypeError: If *state* is not an integer.
        """
        if not is_exact_int(state):
            raise TypeError("State must be an integer")
        self._lcg.state = int(state)
        return self

    def seed(self) -> bytes:
        """Draw 32 bytes suitable for seeding a child generator."""
        return encoding.seed(self)

    def spawn(self) -> SeededRandom:
        """Return a child generator seeded from :meth:`seed`."""
        return SeededRandom.from_seed(self.seed())

    def numpy(self) -> Any:
        """
        Create a NumPy Generator seeded from a fresh :meth:`seed` buffer.

        Requires numpy to be installed (optional dependency). The NumPy
        stream is independent of this generator's LCG stream after seeding.

        Raises:
            ImportError: If numpy is not installed.
        """
        try:
            import numpy as np
        except ImportError as e:
            raise ImportError(
                "numpy is required for SeededRandom.numpy(). "
                "Install it with: pip install seedrand[numpy]"
            ) from e

        return np.random.default_rng(list(self.seed()))

    # ------------------------------------------------------------------
    # Ranges
    # ------------------------------------------------------------------

    def number(self, lo: float, hi: float, step: float | None = None) -> float:
        """Draw a float from [lo, hi), optionally on a step grid."""
        return ranges.number(lo, hi, step, source=self)

    def integer(self, lo: int, hi: int, step: int | None = None) -> int:
        """Draw an integer from [lo, hi], optionally on a step grid."""
        return ranges.integer(lo, hi, step, source=self)

    def bigint(self, lo: int, hi: int, step: int | None = None) -> int:
        """Draw an arbitrary-precision integer from [lo, hi]."""
        return ranges.bigint(lo, hi, step, source=self)

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def bytes(self, n: int) -> bytes:
        return encoding.random_bytes(n, source=self)

    def fill_bytes(self, buffer: B, start: int | None = None, end: int | None = None) -> B:
        return encoding.fill_bytes(buffer, start, end, source=self)

    def string(self, length: int, charset: str | None = None) -> str:
        return encoding.string(length, charset, source=self)

    def uuid4(self) -> str:
        return encoding.uuid4(source=self)

    # ------------------------------------------------------------------
    # Distributions and collections
    # ------------------------------------------------------------------

    def boolean(self, probability: float = 0.5) -> bool:
        return distributions.boolean(probability, source=self)

    def choice(self, seq: Sequence[T]) -> T:
        return distributions.choice(seq, source=self)

    def sample(self, seq: Sequence[T], count: int) -> list[T]:
        return distributions.sample(seq, count, source=self)

    def shuffle(self, seq: Sequence[T]) -> list[T]:
        return distributions.shuffle(seq, source=self)

    def weighted_choice(self, items: Sequence[T], weights: Sequence[float]) -> T:
        return distributions.weighted_choice(items, weights, source=self)

    def normal(self, mean: float = 0.0, std_dev: float = 1.0) -> float:
        return distributions.normal(mean, std_dev, source=self)

    def exponential(self, rate: float = 1.0) -> float:
        return distributions.exponential(rate, source=self)

    def __repr__(self) -> str:
        return f"SeededRandom(state={self._lcg.state})"
