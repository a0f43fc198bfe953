"""Tests for config module."""

from pathlib import Path

import pytest

from lazy_sequence.config import DemoConfig, get_demo_config


def test_defaults(monkeypatch):
    """Test configuration defaults with a clean environment."""
    for name in ["SEQUENCE_LIMIT", "BATCH_SIZE", "OUTPUT_FILE", "COMPRESSION", "VERBOSE"]:
        monkeypatch.delenv(name, raising=False)

    config = get_demo_config()
    assert config.sequence_limit == 7
    assert config.batch_size == 1000
    assert config.output_file is None
    assert config.compression == "snappy"
    assert config.verbose is False


def test_from_env(monkeypatch):
    """Test loading every setting from the environment."""
    monkeypatch.setenv("SEQUENCE_LIMIT", "3")
    monkeypatch.setenv("BATCH_SIZE", "2")
    monkeypatch.setenv("OUTPUT_FILE", "out/sums.parquet")
    monkeypatch.setenv("COMPRESSION", "zstd")
    monkeypatch.setenv("VERBOSE", "TRUE")

    config = DemoConfig.from_env()
    assert config.sequence_limit == 3
    assert config.batch_size == 2
    assert config.output_file == Path("out/sums.parquet")
    assert config.compression == "zstd"
    assert config.verbose is True


def test_validation():
    """Test that invalid values are rejected."""
    with pytest.raises(ValueError, match="sequence_limit"):
        DemoConfig(sequence_limit=-1)
    with pytest.raises(ValueError, match="batch_size must be positive"):
        DemoConfig(batch_size=0)
