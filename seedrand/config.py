"""
RandomConfig: Project-level configuration loader for seedrand.

This module provides:

- find_config_file: Walk up directories to locate .seedrand.toml
- deep_merge: Recursively merge two dicts (override wins for leaf values)
- RandomConfig: Typed settings read from the ``[random]`` table

Configuration is loaded from `.seedrand.toml` with optional
`.seedrand.local.toml` overrides from the same directory.

Example config::

    [random]
    ambient_seed = 12345
    default_charset = "0123456789abcdef"

Example:
    >>> config = RandomConfig.load()
    >>> seedrand.configure(config)
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from seedrand._checks import is_exact_int

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".seedrand.toml"
LOCAL_CONFIG_FILENAME = ".seedrand.local.toml"

DEFAULT_CHARSET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"


# ---------------------------------------------------------------------------
# Utility helpers
# ---------------------------------------------------------------------------


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """
    Walk up from *start_dir* to find `.seedrand.toml`.

    Args:
        start_dir: Directory to start searching from. Defaults to ``Path.cwd()``.

    Returns:
        Path to the config file, or ``None`` if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate

        parent = current.parent
        if parent == current:
            return None
        current = parent


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep-merge two dicts. *override* wins for leaf values.

    Neither input is mutated; a new dict is returned.
    """
    merged: dict[str, Any] = {}

    for key in base.keys() | override.keys():
        if key in base and key in override:
            base_val = base[key]
            over_val = override[key]
            if isinstance(base_val, dict) and isinstance(over_val, dict):
                merged[key] = deep_merge(base_val, over_val)
            else:
                merged[key] = over_val
        elif key in base:
            merged[key] = base[key]
        else:
            merged[key] = override[key]

    return merged


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RandomConfig:
    """
    Settings for the ambient default source and the encoding helpers.

    Attributes:
        ambient_seed: When set, the ambient default source is a generator
            seeded with this value instead of the system source. Useful for
            replaying a failing run; leave unset in production.
        default_charset: Characters used by ``string()`` when no charset is
            passed.
    """

    ambient_seed: int | None = None
    default_charset: str = DEFAULT_CHARSET

    def __post_init__(self) -> None:
        if self.ambient_seed is not None and not is_exact_int(self.ambient_seed):
            raise ValueError(
                f"ambient_seed must be an integer, got {self.ambient_seed!r}"
            )
        if not isinstance(self.default_charset, str) or not self.default_charset:
            raise ValueError("default_charset must be a non-empty string")

    @classmethod
    def load(cls, start_dir: Path | None = None) -> RandomConfig:
        """
        Find and load configuration.

        Walks up from *start_dir* (default: cwd) to locate ``.seedrand.toml``,
        parses it, and deep-merges ``.seedrand.local.toml`` from the same
        directory when present.

        Raises:
            FileNotFoundError: If no ``.seedrand.toml`` is found.
        """
        config_path = find_config_file(start_dir)
        if config_path is None:
            raise FileNotFoundError(
                f"Could not find {CONFIG_FILENAME} in {start_dir or Path.cwd()} "
                f"or any parent directory"
            )

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        local_path = config_path.parent / LOCAL_CONFIG_FILENAME
        if local_path.is_file():
            with open(local_path, "rb") as f:
                data = deep_merge(data, tomllib.load(f))

        logger.info(f"Loaded seedrand config from {config_path}")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RandomConfig:
        """
        Create a :class:`RandomConfig` from a parsed TOML dict.

        Only the ``[random]`` table is read; unknown keys in it are rejected.

        Raises:
            ValueError: If the table holds unknown keys or invalid values.
        """
        section = data.get("random", {})
        if not isinstance(section, dict):
            raise ValueError("[random] must be a table")
        unknown = sorted(set(section) - {"ambient_seed", "default_charset"})
        if unknown:
            raise ValueError(f"Unknown keys in [random]: {', '.join(unknown)}")

        return cls(
            ambient_seed=section.get("ambient_seed"),
            default_charset=section.get("default_charset", DEFAULT_CHARSET),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the ``[random]`` table this config was built from."""
        table: dict[str, Any] = {"default_charset": self.default_charset}
        if self.ambient_seed is not None:
            table["ambient_seed"] = self.ambient_seed
        return {"random": table}
