"""Filesystem helpers used around a download."""

from __future__ import annotations

from pathlib import Path

from loguru import logger


def remove_partial_output(path: Path) -> None:
    """Delete *path* if it exists; a missing file is not an error."""
    try:
        path.unlink()
    except FileNotFoundError:
        logger.debug(f"No partial output to remove at {path}")
        return
    logger.info(f"Removed partial output {path}")
