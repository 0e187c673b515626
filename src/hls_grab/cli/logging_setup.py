"""Loguru sink configuration for the CLI.

Diagnostics go to stderr through loguru; user-facing messages go
through the Rich console.  Configured once per invocation.
"""

from __future__ import annotations

import sys

from loguru import logger

from hls_grab.utils.settings import DEFAULT_LOG_LEVEL, LOG_FORMAT, VERBOSE_LOG_LEVEL


def configure_logging(verbose: bool = False) -> str:
    """Replace loguru's default sink and return the active level name."""
    level = VERBOSE_LOG_LEVEL if verbose else DEFAULT_LOG_LEVEL
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    return level
