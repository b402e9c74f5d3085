# Copyright 2026 Typegraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the typegraph configuration file."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

import yaml

from typegraph.errors import ConfigError
from typegraph.logger import configure_logging

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".typegraph.yaml"

Severity = Literal["warning", "error", "ignore"]


@dataclass(frozen=True)
class TypegraphConfig:
    """Settings that tune logging and schema validation.

    Attributes:
        log_level: Level applied to the ``typegraph`` logger.
        strict_names: Report invalid GraphQL names as errors instead of warnings.
        empty_enum: Severity used when an enum declares no values.
    """

    log_level: str = "WARNING"
    strict_names: bool = True
    empty_enum: Severity = "warning"

    def apply_logging(self) -> logging.Logger:
        """Configure the ``typegraph`` logger with this config's level."""
        return configure_logging(self.log_level)


def load_config(path: Path) -> TypegraphConfig:
    """Load and parse a typegraph configuration file.

    Args:
        path: Path to the ``.typegraph.yaml`` file.

    Returns:
        A TypegraphConfig instance populated from the file.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return parse_config(text, source_label=str(path))


def parse_config(text: str, source_label: str = "<string>") -> TypegraphConfig:
    """Parse configuration YAML text into a TypegraphConfig.

    An empty document yields the default configuration.

    Raises:
        ConfigError: If the YAML is invalid or a value has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return TypegraphConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: config must be a YAML mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown key(s): {', '.join(unknown)}")

    defaults = TypegraphConfig()
    log_level = _optional_string(data, "log-level", source_label, defaults.log_level).upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigError(f"{source_label}: 'log-level' must be one of {', '.join(_LOG_LEVELS)}")

    strict_names = data.get("strict-names", defaults.strict_names)
    if not isinstance(strict_names, bool):
        raise ConfigError(f"{source_label}: 'strict-names' must be a boolean")

    empty_enum = _optional_string(data, "empty-enum", source_label, defaults.empty_enum)
    if empty_enum not in _SEVERITIES:
        raise ConfigError(f"{source_label}: 'empty-enum' must be one of {', '.join(_SEVERITIES)}")

    return TypegraphConfig(log_level=log_level, strict_names=strict_names, empty_enum=empty_enum)


# ################
# Implementation
# ################

_KNOWN_KEYS = {"log-level", "strict-names", "empty-enum"}
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_SEVERITIES = ("warning", "error", "ignore")


def _optional_string(mapping: dict[str, object], key: str, source_label: str, default: str) -> str:
    """Extract an optional string field from a mapping, raising ConfigError on a wrong type."""
    value = mapping.get(key, default)
    if not isinstance(value, str):
        raise ConfigError(f"{source_label}: '{key}' must be a string")
    return value
