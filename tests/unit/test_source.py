"""Tests for uniform sources and the ambient default."""

from __future__ import annotations

import logging
import random as stdlib_random

import pytest

import seedrand
from seedrand import (
    CallableSource,
    FixedSource,
    RandomConfig,
    SeededRandom,
    SystemSource,
    UniformSource,
    configure,
    default_source,
    get_config,
)
from seedrand.source import resolve_source


@pytest.fixture
def reset_ambient():
    """Restore an unseeded ambient source after the test."""
    yield
    configure()


class TestFixedSource:
    """Tests for FixedSource."""

    def test_replays_values(self):
        src = FixedSource([0.1, 0.2])
        assert [src.random(), src.random()] == [0.1, 0.2]

    def test_counts_draws(self):
        src = FixedSource([0.1, 0.2, 0.3])
        src.random()
        assert src.draws == 1
        assert src.remaining == 2

    def test_exhaustion(self):
        src = FixedSource([0.5])
        src.random()
        with pytest.raises(IndexError):
            src.random()

    @pytest.mark.parametrize("value", [1.0, -0.1, 2])
    def test_rejects_out_of_range(self, value):
        with pytest.raises(ValueError):
            FixedSource([value])


class TestSources:
    """Tests for the protocol and its implementations."""

    def test_system_source_range(self):
        src = SystemSource()
        for _ in range(100):
            assert 0 <= src.random() < 1

    def test_protocol_membership(self):
        assert isinstance(SystemSource(), UniformSource)
        assert isinstance(FixedSource([]), UniformSource)
        assert isinstance(SeededRandom(1), UniformSource)

    def test_callable_source(self):
        src = CallableSource(lambda: 0.25)
        assert src.random() == 0.25

    def test_callable_source_requires_callable(self):
        with pytest.raises(TypeError):
            CallableSource(0.5)

    def test_resolve_none_is_ambient(self):
        assert resolve_source(None) is default_source()

    def test_resolve_passes_sources_through(self):
        rng = SeededRandom(1)
        assert resolve_source(rng) is rng

    def test_resolve_wraps_callables(self):
        src = resolve_source(lambda: 0.5)
        assert isinstance(src, CallableSource)
        assert src.random() == 0.5

    def test_resolve_accepts_stdlib_random(self):
        rng = stdlib_random.Random(0)
        assert resolve_source(rng) is rng

    def test_resolve_rejects_other_values(self):
        with pytest.raises(TypeError):
            resolve_source(42)

    def test_algorithms_accept_callables(self):
        assert seedrand.integer(1, 6, source=lambda: 0.0) == 1


class TestAmbient:
    """Tests for the process-wide default source."""

    def test_default_is_system_source(self):
        assert isinstance(default_source(), SystemSource)

    def test_random_in_unit_interval(self):
        for _ in range(100):
            value = seedrand.random()
            assert 0 <= value < 1

    def test_configure_with_seed(self, reset_ambient):
        """A seeded ambient source makes free functions reproducible."""
        configure(seed=12345)
        expected = ((1664525 * 12345 + 1013904223) % 2**32) / 2**32
        assert seedrand.random() == expected

    def test_configure_from_config(self, reset_ambient):
        configure(RandomConfig(ambient_seed=7))
        first = [seedrand.integer(1, 100) for _ in range(5)]
        configure(RandomConfig(ambient_seed=7))
        second = [seedrand.integer(1, 100) for _ in range(5)]
        assert first == second
        assert get_config().ambient_seed == 7

    def test_seed_argument_overrides_config(self, reset_ambient):
        source = configure(RandomConfig(ambient_seed=7), seed=8)
        assert source.get_state() == 8

    def test_configure_without_seed_installs_system_source(self, reset_ambient):
        configure(seed=1)
        source = configure()
        assert isinstance(source, SystemSource)
        assert default_source() is source
        assert get_config() == RandomConfig()

    def test_configure_logs(self, reset_ambient, caplog):
        with caplog.at_level(logging.DEBUG, logger="seedrand.source"):
            configure(seed=3)
        assert "seeded=True" in caplog.text
