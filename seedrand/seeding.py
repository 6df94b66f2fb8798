"""
Seed derivation: map external seed material to an initial 32-bit state.

Three kinds of seed material are understood:

- numbers, reduced modulo 2**32
- byte buffers of at most 32 bytes, of which only the first four are folded
  big-endian into the state
- a single fixed byte in [0, 255]

The byte fold order is part of the reproducibility contract: two generators
seeded from the same buffer must produce the same sequence in every
implementation.
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import Any

from seedrand._checks import is_integral
from seedrand._lcg import to_uint32

logger = logging.getLogger(__name__)

SEED_LENGTH = 32
FOLDED_BYTES = 4


def is_bytes_like(value: Any) -> bool:
    """True if *value* exposes the buffer protocol."""
    try:
        memoryview(value)
    except TypeError:
        return False
    return True


def _as_bytes(buffer: Any) -> bytes:
    try:
        view = memoryview(buffer)
    except TypeError:
        raise TypeError("Seed must be a bytes-like object") from None
    return view.tobytes()


def state_from_number(seed: Any) -> int:
    """
    Coerce a numeric seed to an unsigned 32-bit state.

    Fractional seeds truncate toward zero and non-finite ones map to 0, so
    any real number is accepted. Negative seeds wrap.

    Raises:
        TypeError: If *seed* is not a real number.
    """
    if isinstance(seed, bool) or not isinstance(seed, numbers.Real):
        raise TypeError("Seed must be a number or bytes-like object")
    if isinstance(seed, numbers.Integral):
        return to_uint32(int(seed))
    seed = float(seed)
    if not math.isfinite(seed):
        return 0
    return to_uint32(math.trunc(seed))


def state_from_bytes(buffer: Any) -> int:
    """
    Fold up to the first four bytes of *buffer* into a 32-bit state.

    The fold is ``n = (n << 8) | byte`` starting from zero, so buffers
    shorter than four bytes leave the high-order bytes clear.

    Raises:
        TypeError: If *buffer* is not bytes-like.
        ValueError: If *buffer* is longer than 32 bytes.
    """
    data = _as_bytes(buffer)
    if len(data) > SEED_LENGTH:
        raise ValueError(f"Seed must be {SEED_LENGTH} bytes or less")
    if len(data) > FOLDED_BYTES:
        logger.debug(
            f"Folding {FOLDED_BYTES} of {len(data)} seed bytes into state; "
            "remaining bytes are ignored"
        )

    state = 0
    for byte in data[:FOLDED_BYTES]:
        state = (state << 8) | byte
    return to_uint32(state)


def state_from_seed(seed: Any) -> int:
    """Dispatch to the number or byte-buffer derivation rule."""
    if isinstance(seed, numbers.Real) and not isinstance(seed, bool):
        return state_from_number(seed)
    if is_bytes_like(seed):
        return state_from_bytes(seed)
    raise TypeError("Seed must be a number or bytes-like object")


def state_from_exact_seed(buffer: Any) -> int:
    """
    Derive a state from a buffer of exactly 32 bytes.

    Only the first four bytes reach the state; the length check exists for
    API compatibility with full-entropy seeds.

    Raises:
        TypeError: If *buffer* is not bytes-like.
        ValueError: If *buffer* is not exactly 32 bytes long.
    """
    data = _as_bytes(buffer)
    if len(data) != SEED_LENGTH:
        raise ValueError(f"Seed must be exactly {SEED_LENGTH} bytes")
    return state_from_bytes(data)


def state_from_fixed(byte: Any) -> int:
    """
    Derive a state from a single byte value.

    Raises:
        ValueError: If *byte* is not an integer in [0, 255].
    """
    if not is_integral(byte) or not 0 <= byte <= 255:
        raise ValueError("Byte must be an integer between 0 and 255")
    return int(byte)
