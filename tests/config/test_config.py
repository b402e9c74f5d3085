# Copyright 2026 Typegraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the configuration module."""

import logging
from pathlib import Path

import pytest

from typegraph.config import CONFIG_FILE_NAME, TypegraphConfig, load_config, parse_config
from typegraph.errors import ConfigError

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a config file and return its path."""
    config_file = tmp_path / CONFIG_FILE_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    """An empty file yields the default configuration."""
    config = load_config(_write_config(tmp_path, ""))

    assert config == TypegraphConfig()
    assert config.log_level == "WARNING"
    assert config.strict_names is True
    assert config.empty_enum == "warning"


def test_full_config(tmp_path: Path) -> None:
    """All keys are read from the file."""
    content = """\
log-level: debug
strict-names: false
empty-enum: error
"""
    config = load_config(_write_config(tmp_path, content))

    assert config == TypegraphConfig(log_level="DEBUG", strict_names=False, empty_enum="error")


def test_apply_logging_sets_level() -> None:
    """Applying the config configures the typegraph logger."""
    logger = TypegraphConfig(log_level="ERROR").apply_logging()
    assert logger.name == "typegraph"
    assert logger.level == logging.ERROR


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    """A missing file is reported as ConfigError."""
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.yaml")


def test_invalid_yaml() -> None:
    """Malformed YAML is reported as ConfigError."""
    with pytest.raises(ConfigError, match="Invalid YAML"):
        parse_config("log-level: [unclosed")


def test_non_mapping_document() -> None:
    """The document must be a mapping."""
    with pytest.raises(ConfigError, match="must be a YAML mapping"):
        parse_config("- a\n- b\n")


def test_unknown_key() -> None:
    """Unknown keys are rejected rather than ignored."""
    with pytest.raises(ConfigError, match="unknown key"):
        parse_config("strict_names: true\n")


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("log-level: LOUD\n", "'log-level' must be one of"),
        ("log-level: 10\n", "'log-level' must be a string"),
        ("strict-names: yes-please\n", "'strict-names' must be a boolean"),
        ("empty-enum: fatal\n", "'empty-enum' must be one of"),
    ],
)
def test_invalid_values(content: str, message: str) -> None:
    """Values of the wrong type or outside the allowed set are rejected."""
    with pytest.raises(ConfigError, match=message):
        parse_config(content)
