"""Overwrite confirmation for an existing output file.

questionary is imported lazily: the prompt is only shown when the
destination already exists and ``-y`` was not given.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from hls_grab.exceptions import EnvironmentError, OperationCancelledError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive confirmation."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
            hint="Or pass -y to overwrite without asking.",
        ) from exc
    return questionary


def confirm_overwrite(destination: Path, *, force: bool = False) -> None:
    """Return when *destination* may be written, else raise.

    No prompt is shown when *force* is set or the file does not exist.

    Raises
    ------
    OperationCancelledError
        If the user answers "no" or cancels the prompt (Ctrl+C / Esc).
    """
    if force or not destination.is_file():
        return

    questionary = _import_questionary()
    answer: bool | None = questionary.confirm(
        f"File {destination} already exists. Overwrite?",
        default=False,
    ).ask()  # Returns None on Ctrl+C / Esc

    if not answer:
        raise OperationCancelledError(
            "Operation cancelled.",
            hint="Pass -y to overwrite existing files without a prompt.",
        )
