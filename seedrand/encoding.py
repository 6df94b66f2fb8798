"""
Encoding helpers: bytes, strings and UUIDs built from uniform draws.

Each output unit costs exactly one draw, taken in output order, so a seeded
generator always produces the same bytes, strings and UUIDs.
"""

from __future__ import annotations

from typing import TypeVar

from seedrand._checks import byte_view, is_count, is_integral
from seedrand.source import UniformSource, get_config, resolve_source

HEX_DIGITS = "0123456789abcdef"
SEED_LENGTH = 32
UUID_LENGTH = 36
_UUID_DASHES = frozenset({8, 13, 18, 23})
_UUID_VERSION = 14
_UUID_VARIANT = 19

B = TypeVar("B")


def _byte(u: UniformSource) -> int:
    return int(u.random() * 256)


def random_bytes(n: int, source: UniformSource | None = None) -> bytes:
    """
    Return *n* random bytes.

    Raises:
        ValueError: If *n* is not a non-negative integer.
    """
    if not is_count(n):
        raise ValueError("Number of bytes must be a non-negative integer")
    u = resolve_source(source)
    return bytes(_byte(u) for _ in range(int(n)))


def fill_bytes(
    buffer: B,
    start: int | None = None,
    end: int | None = None,
    source: UniformSource | None = None,
) -> B:
    """
    Overwrite ``buffer[start:end]`` (byte offsets) with random bytes in place.

    Args:
        buffer: Any writable buffer-protocol object. Buffers with wider
            element types are filled byte-wise.
        start: First byte offset to fill (default 0).
        end: Byte offset to stop before (default: buffer length).
        source: Uniform source; ``None`` for the ambient default.

    Returns:
        The same *buffer* object.

    Raises:
        TypeError: If *buffer* is not a writable, contiguous buffer, or a
            position is not an integer.
        ValueError: Unless ``0 <= start <= end <= len(buffer)``.
    """
    view = byte_view(buffer)
    start_pos = 0 if start is None else start
    end_pos = len(view) if end is None else end

    if not is_integral(start_pos) or not is_integral(end_pos):
        raise TypeError("Start and end positions must be integers")
    if start_pos < 0 or end_pos > len(view) or start_pos > end_pos:
        raise ValueError("Invalid start or end position")

    u = resolve_source(source)
    for i in range(int(start_pos), int(end_pos)):
        view[i] = _byte(u)
    return buffer


def string(
    length: int,
    charset: str | None = None,
    source: UniformSource | None = None,
) -> str:
    """
    Return a string of *length* characters drawn uniformly from *charset*.

    *charset* defaults to the configured ``default_charset`` (ASCII letters
    and digits unless overridden).

    Raises:
        ValueError: If *length* is not a non-negative integer.
        TypeError: If *charset* is not a non-empty string.
    """
    if not is_count(length):
        raise ValueError("Length must be a non-negative integer")
    if charset is None:
        charset = get_config().default_charset
    if not isinstance(charset, str) or not charset:
        raise TypeError("Charset must be a non-empty string")

    u = resolve_source(source)
    size = len(charset)
    return "".join(charset[int(u.random() * size)] for _ in range(int(length)))


def uuid4(source: UniformSource | None = None) -> str:
    """
    Return a version 4 UUID string such as
    ``'3f2b8c1e-9a4d-4e57-b0c3-6d1f2a9e8b70'``.

    The version digit is fixed to ``4`` and the variant digit is drawn from
    ``{8, 9, a, b}``. Every other digit costs one draw.
    """
    u = resolve_source(source)
    chars: list[str] = []
    for i in range(UUID_LENGTH):
        if i in _UUID_DASHES:
            chars.append("-")
        elif i == _UUID_VERSION:
            chars.append("4")
        elif i == _UUID_VARIANT:
            chars.append(HEX_DIGITS[int(u.random() * 4) + 8])
        else:
            chars.append(HEX_DIGITS[int(u.random() * 16)])
    return "".join(chars)


def seed(source: UniformSource | None = None) -> bytes:
    """Return a 32-byte buffer suitable for seeding a new generator."""
    return random_bytes(SEED_LENGTH, source)
