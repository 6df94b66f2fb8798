"""
seedrand: Seeded, reproducible random sampling.

A 32-bit linear-congruential generator with exact, portable seed derivation,
plus range, encoding and distribution algorithms that run against any uniform
source.

Every free function draws from the ambient default source unless a
``source=`` is passed. The ambient default is seeded from OS entropy and is not
reproducible; own a SeededRandom when you need the same output twice.

Example:
    import seedrand

    # Ambient default source
    die = seedrand.integer(1, 6)
    token = seedrand.string(16)

    # Reproducible generator
    rng = seedrand.SeededRandom(12345)
    values = [rng.random() for _ in range(3)]
    picked = rng.weighted_choice(["a", "b", "c"], [5, 3, 2])

    # Same algorithms, explicit source
    x = seedrand.normal(0.0, 1.0, source=rng)
"""

__version__ = "0.1.0"

# Configuration
from seedrand.config import RandomConfig

# Distributions and collections
from seedrand.distributions import (
    Bernoulli,
    Distribution,
    Exponential,
    Normal,
    Weighted,
    boolean,
    choice,
    exponential,
    normal,
    sample,
    shuffle,
    weighted_choice,
)

# Encoding
from seedrand.encoding import fill_bytes, random_bytes, seed, string, uuid4

# Generator
from seedrand.generator import SeededRandom

# Ranges
from seedrand.ranges import BigIntRange, IntRange, NumberRange, bigint, integer, number

# Sources
from seedrand.source import (
    CallableSource,
    FixedSource,
    SystemSource,
    UniformSource,
    configure,
    default_source,
    get_config,
    resolve_source,
)


def random(source: UniformSource | None = None) -> float:
    """Return a float in [0, 1) from *source* (default: the ambient source)."""
    return resolve_source(source).random()


__all__ = [
    # Version
    "__version__",
    # Generator
    "SeededRandom",
    # Sources
    "UniformSource",
    "SystemSource",
    "FixedSource",
    "CallableSource",
    "default_source",
    "configure",
    "get_config",
    "resolve_source",
    # Config
    "RandomConfig",
    # Core draw
    "random",
    # Ranges
    "NumberRange",
    "IntRange",
    "BigIntRange",
    "number",
    "integer",
    "bigint",
    # Encoding
    "random_bytes",
    "fill_bytes",
    "string",
    "uuid4",
    "seed",
    # Distributions
    "Distribution",
    "Bernoulli",
    "Normal",
    "Exponential",
    "Weighted",
    "boolean",
    "choice",
    "sample",
    "shuffle",
    "weighted_choice",
    "normal",
    "exponential",
]
