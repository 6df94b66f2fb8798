"""
Linear-congruential core.

The transition is the Numerical Recipes LCG:

    state' = (1664525 * state + 1013904223) mod 2**32

and each draw is ``state' / 2**32``, a float in [0, 1). The multiply-add is
truncated to 32 bits after every step; skipping the mask produces a different
(and incompatible) sequence.
"""

from __future__ import annotations

MULTIPLIER = 1664525
INCREMENT = 1013904223
MODULUS = 2**32
MASK = MODULUS - 1


def step(state: int) -> int:
    """Advance a 32-bit state by one LCG transition."""
    return (MULTIPLIER * state + INCREMENT) & MASK


def to_unit(state: int) -> float:
    """Map a 32-bit state onto [0, 1)."""
    return state / MODULUS


def to_uint32(value: int) -> int:
    """Wrap an integer into the unsigned 32-bit range (negatives wrap too)."""
    return value & MASK


class LCG:
    """
    Mutable 32-bit LCG.

    Not thread-safe: concurrent callers must synchronize externally.
    """

    __slots__ = ("_state",)

    def __init__(self, state: int = 0) -> None:
        self._state = to_uint32(state)

    @property
    def state(self) -> int:
        return self._state

    @state.setter
    def state(self, value: int) -> None:
        self._state = to_uint32(value)

    def next(self) -> float:
        """Advance the state and return the new draw in [0, 1)."""
        self._state = step(self._state)
        return to_unit(self._state)

    def __repr__(self) -> str:
        return f"LCG(state={self._state})"
