"""
Tests for EngineConfig / SearchConfig.
"""

import logging

import pytest

from beacon_cli.config import EngineConfig, SearchConfig


def test_defaults():
    config = EngineConfig()
    assert config.row == 2_000_000
    assert config.search.bounds == (0, 0, 4_000_000, 4_000_000)
    assert config.search.strategy == "skip"
    assert config.log_level_value == logging.INFO


def test_from_yaml(tmp_path):
    path = tmp_path / "engine.yaml"
    path.write_text(
        "row: 10\n"
        "log_level: debug\n"
        "search:\n"
        "  max_x: 20\n"
        "  max_y: 20\n"
        "  strategy: step\n"
    )
    config = EngineConfig.from_yaml(path)
    assert config.row == 10
    assert config.log_level == "DEBUG"
    assert config.search.bounds == (0, 0, 20, 20)
    assert config.search.strategy == "step"
    assert config.search.tuning_multiplier == 4_000_000


def test_from_yaml_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert EngineConfig.from_yaml(path) == EngineConfig()


def test_from_yaml_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        EngineConfig.from_yaml(tmp_path / "nope.yaml")


def test_from_yaml_malformed(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("search: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid YAML"):
        EngineConfig.from_yaml(path)


@pytest.mark.parametrize("kwargs", [
    {"strategy": "jump"},
    {"min_x": 5, "max_x": 4},
    {"min_y": 5, "max_y": 4},
    {"tuning_multiplier": 0},
])
def test_search_config_validation(kwargs):
    with pytest.raises(ValueError):
        SearchConfig(**kwargs)


def test_invalid_log_level():
    with pytest.raises(ValueError):
        EngineConfig(log_level="LOUD")


def test_with_overrides_ignores_none():
    config = EngineConfig(row=10).with_overrides(
        row=None,
        bounds=(0, 0, 20, 20),
        strategy="step",
        tuning_multiplier=None,
        log_level=None,
    )
    assert config.row == 10
    assert config.search.bounds == (0, 0, 20, 20)
    assert config.search.strategy == "step"
    assert config.search.tuning_multiplier == 4_000_000


def test_with_overrides_revalidates():
    with pytest.raises(ValueError):
        EngineConfig().with_overrides(bounds=(10, 0, 0, 0))
