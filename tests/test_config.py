"""Tests for seedrand.config module."""

from __future__ import annotations

import logging

import pytest

from seedrand.config import (
    CONFIG_FILENAME,
    DEFAULT_CHARSET,
    LOCAL_CONFIG_FILENAME,
    RandomConfig,
    deep_merge,
    find_config_file,
)

SAMPLE_TOML = """\
[random]
ambient_seed = 12345
default_charset = "0123456789abcdef"
"""


# ---------------------------------------------------------------------------
# deep_merge
# ---------------------------------------------------------------------------


class TestDeepMerge:
    def test_basic(self):
        base = {"a": 1, "b": {"c": 2, "d": 3}}
        override = {"b": {"c": 99, "e": 5}}
        assert deep_merge(base, override) == {"a": 1, "b": {"c": 99, "d": 3, "e": 5}}

    def test_does_not_mutate_inputs(self):
        base = {"a": {"x": 1}}
        override = {"a": {"y": 2}}
        deep_merge(base, override)
        assert base == {"a": {"x": 1}}
        assert override == {"a": {"y": 2}}

    def test_override_dict_with_scalar(self):
        assert deep_merge({"a": {"nested": 1}}, {"a": "scalar"})["a"] == "scalar"


# ---------------------------------------------------------------------------
# find_config_file
# ---------------------------------------------------------------------------


class TestFindConfigFile:
    def test_in_start_dir(self, tmp_path):
        path = tmp_path / CONFIG_FILENAME
        path.write_text(SAMPLE_TOML)
        assert find_config_file(tmp_path) == path

    def test_in_ancestor(self, tmp_path):
        path = tmp_path / CONFIG_FILENAME
        path.write_text(SAMPLE_TOML)
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_file(nested) == path


# ---------------------------------------------------------------------------
# RandomConfig
# ---------------------------------------------------------------------------


class TestRandomConfig:
    def test_defaults(self):
        config = RandomConfig()
        assert config.ambient_seed is None
        assert config.default_charset == DEFAULT_CHARSET

    def test_from_dict(self):
        config = RandomConfig.from_dict({"random": {"ambient_seed": 3}})
        assert config.ambient_seed == 3
        assert config.default_charset == DEFAULT_CHARSET

    def test_from_dict_without_table(self):
        assert RandomConfig.from_dict({}) == RandomConfig()

    def test_random_not_a_table(self):
        with pytest.raises(ValueError, match="must be a table"):
            RandomConfig.from_dict({"random": 5})

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown keys"):
            RandomConfig.from_dict({"random": {"seed": 3}})

    def test_invalid_seed(self):
        with pytest.raises(ValueError):
            RandomConfig(ambient_seed="12")
        with pytest.raises(ValueError):
            RandomConfig(ambient_seed=1.5)

    def test_invalid_charset(self):
        with pytest.raises(ValueError):
            RandomConfig(default_charset="")

    def test_to_dict_roundtrip(self):
        config = RandomConfig(ambient_seed=9, default_charset="ab")
        assert RandomConfig.from_dict(config.to_dict()) == config

    def test_load(self, tmp_path, caplog):
        (tmp_path / CONFIG_FILENAME).write_text(SAMPLE_TOML)
        with caplog.at_level(logging.INFO, logger="seedrand.config"):
            config = RandomConfig.load(tmp_path)
        assert config.ambient_seed == 12345
        assert config.default_charset == "0123456789abcdef"
        assert "Loaded seedrand config" in caplog.text

    def test_load_with_local_override(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text(SAMPLE_TOML)
        (tmp_path / LOCAL_CONFIG_FILENAME).write_text("[random]\nambient_seed = 1\n")
        config = RandomConfig.load(tmp_path)
        assert config.ambient_seed == 1
        assert config.default_charset == "0123456789abcdef"

    def test_load_missing(self, tmp_path, monkeypatch):
        monkeypatch.setattr("seedrand.config.find_config_file", lambda start_dir=None: None)
        with pytest.raises(FileNotFoundError):
            RandomConfig.load(tmp_path)
