# Copyright 2026 Typegraph Contributors
# SPDX-License-Identifier: Apache-2.0

"""Logging helpers for typegraph.

The library never configures logging on import. Applications either install
their own handlers or call :func:`configure_logging` to get Rich console output.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

# ###############
# Public Interface
# ###############

ROOT_LOGGER_NAME = "typegraph"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the typegraph logger, or one of its children.

    Args:
        name: Optional child name, e.g. ``"schema"`` yields ``typegraph.schema``.
            A name already starting with ``typegraph`` is used as-is.

    Returns:
        A standard :class:`logging.Logger`.
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: int | str = logging.WARNING, console: Console | None = None) -> logging.Logger:
    """Attach a Rich console handler to the typegraph logger.

    Calling this more than once only updates the level; a second handler is
    never added.

    Args:
        level: Logging level name or number.
        console: Optional Rich console to write to (defaults to stderr).

    Returns:
        The configured ``typegraph`` logger.
    """
    logger = get_logger()
    logger.setLevel(level)
    if not any(isinstance(h, _TypegraphRichHandler) for h in logger.handlers):
        handler = _TypegraphRichHandler(
            console=console or Console(stderr=True),
            rich_tracebacks=True,
            show_time=True,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
    return logger


# ################
# Implementation
# ################


class _TypegraphRichHandler(RichHandler):
    """RichHandler subclass used to recognise handlers installed by this module."""
