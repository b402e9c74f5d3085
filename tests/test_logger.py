# Copyright 2026 Typegraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the logging helpers."""

import io
import logging

from rich.console import Console
from rich.logging import RichHandler

from typegraph.logger import configure_logging, get_logger


def test_get_logger_names() -> None:
    """Loggers are children of the typegraph logger."""
    assert get_logger().name == "typegraph"
    assert get_logger("schema").name == "typegraph.schema"
    assert get_logger("typegraph.schema.builders").name == "typegraph.schema.builders"


def test_configure_logging_is_idempotent() -> None:
    """Repeated configuration installs a single Rich handler."""
    console = Console(file=io.StringIO())
    logger = configure_logging("INFO", console=console)
    configure_logging(logging.DEBUG, console=console)

    rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    assert len(rich_handlers) == 1
    assert logger.level == logging.DEBUG
