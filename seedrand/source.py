"""
Uniform sources: anything that can supply floats in [0, 1).

Every range, encoding and distribution algorithm is written against the
:class:`UniformSource` protocol and takes a ``source`` argument. Passing
``None`` selects the ambient default source, a process-wide singleton.

The ambient default is a :class:`SystemSource` seeded from OS entropy, so its
output is not reproducible across runs. Code that needs reproducibility should
own a :class:`~seedrand.generator.SeededRandom` and pass it explicitly, or pin
the ambient source with :func:`configure` while debugging.
"""

from __future__ import annotations

import logging
import random as stdlib_random
from typing import Any, Callable, Iterable, Protocol, runtime_checkable

from seedrand.config import RandomConfig

logger = logging.getLogger(__name__)


@runtime_checkable
class UniformSource(Protocol):
    """Protocol for uniform sources."""

    def random(self) -> float:
        """Return the next value in [0, 1)."""
        ...


class SystemSource:
    """
    Platform source backed by a private stdlib ``random.Random``.

    Seeded from OS entropy on construction; not reproducible and not
    suitable for cryptographic use.
    """

    def __init__(self) -> None:
        self._rng = stdlib_random.Random()

    def random(self) -> float:
        return self._rng.random()

    def __repr__(self) -> str:
        return "SystemSource()"


class CallableSource:
    """Adapt a nullary callable returning floats in [0, 1) to UniformSource."""

    def __init__(self, fn: Callable[[], float]) -> None:
        if not callable(fn):
            raise TypeError("CallableSource requires a callable")
        self._fn = fn

    def random(self) -> float:
        return self._fn()

    def __repr__(self) -> str:
        return f"CallableSource({self._fn!r})"


class FixedSource:
    """
    Replay a fixed list of draws.

    Useful for driving an algorithm to a known output and for checking how
    many draws it consumed.

    Example:
        src = FixedSource([0.0, 0.5, 0.999])
        seedrand.integer(1, 6, source=src)  # 1
        src.draws                           # 1

    Raises:
        ValueError: If any value lies outside [0, 1).
    """

    def __init__(self, values: Iterable[float]) -> None:
        self._values = tuple(float(v) for v in values)
        for value in self._values:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"FixedSource values must lie in [0, 1), got {value}")
        self._position = 0

    @property
    def draws(self) -> int:
        """Number of values consumed so far."""
        return self._position

    @property
    def remaining(self) -> int:
        """Number of values left to replay."""
        return len(self._values) - self._position

    def random(self) -> float:
        if self._position >= len(self._values):
            raise IndexError(
                f"FixedSource exhausted after {len(self._values)} draws"
            )
        value = self._values[self._position]
        self._position += 1
        return value

    def __repr__(self) -> str:
        return f"FixedSource(draws={self._position}, remaining={self.remaining})"


# Process-wide ambient state. Replaced only through configure().
_default_source: UniformSource = SystemSource()
_config: RandomConfig = RandomConfig()


def default_source() -> UniformSource:
    """Return the ambient default source."""
    return _default_source


def get_config() -> RandomConfig:
    """Return the active configuration."""
    return _config


def configure(config: RandomConfig | None = None, *, seed: Any = None) -> UniformSource:
    """
    Install the ambient default source.

    With neither *seed* nor ``config.ambient_seed`` set, a fresh
    :class:`SystemSource` is installed. Otherwise the ambient source becomes a
    :class:`~seedrand.generator.SeededRandom` built from the seed, which makes
    free-function calls reproducible for the rest of the process.

    Args:
        config: Settings to activate. Defaults to ``RandomConfig()``.
        seed: Seed overriding ``config.ambient_seed``.

    Returns:
        The newly installed ambient source.
    """
    global _default_source, _config

    config = config or RandomConfig()
    if seed is None:
        seed = config.ambient_seed

    source: UniformSource
    if seed is None:
        source = SystemSource()
    else:
        from seedrand.generator import SeededRandom

        source = SeededRandom(seed)

    _default_source = source
    _config = config
    logger.debug(f"Installed ambient source {source!r} (seeded={seed is not None})")
    return source


def resolve_source(source: UniformSource | Callable[[], float] | None) -> UniformSource:
    """
    Return the source an algorithm should draw from.

    ``None`` maps to the ambient default; bare callables are wrapped in
    :class:`CallableSource`.

    Raises:
        TypeError: If *source* is neither a UniformSource nor a callable.
    """
    if source is None:
        return _default_source
    if isinstance(source, UniformSource):
        return source
    if callable(source):
        return CallableSource(source)
    raise TypeError("source must provide random() or be a callable")
