"""Infrastructure: ffmpeg/ffprobe detection and platform guidance.

Locates the external tools hls-grab shells out to and provides
platform-specific installation guidance when they are missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from hls_grab.exceptions import ToolNotFoundError
from hls_grab.utils.settings import REQUIRED_TOOLS, tool_executable


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ToolStatus:
    """Result of a single tool detection probe.

    Attributes
    ----------
    name : str
        Logical tool name (``"ffmpeg"`` or ``"ffprobe"``).
    found : bool
        Whether the executable was located.
    path : Path | None
        Absolute path to the binary, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing the tool on the current
        platform.  Empty when the tool is already present.
    """

    name: str
    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_tool(name: str) -> ToolStatus:
    """Probe the system for *name*, honouring the environment override.

    Returns a :class:`ToolStatus` regardless of whether the tool is
    present — the caller decides whether to abort or merely warn.
    """
    executable = tool_executable(name)
    result = shutil.which(executable)

    if result is not None:
        resolved = Path(result).resolve()
        logger.debug(f"{name} found at {resolved}")
        return ToolStatus(name=name, found=True, path=resolved, install_commands=())

    logger.debug(f"{name} not found (looked for {executable!r})")
    return ToolStatus(
        name=name,
        found=False,
        path=None,
        install_commands=_platform_install_commands(),
    )


def detect_required_tools() -> tuple[ToolStatus, ...]:
    """Detect every tool a download needs, in a stable order."""
    return tuple(detect_tool(name) for name in REQUIRED_TOOLS)


def require_tools() -> dict[str, Path]:
    """Locate all required tools or raise :class:`ToolNotFoundError`.

    The error lists every missing tool, not just the first.
    """
    statuses = detect_required_tools()
    missing = [status.name for status in statuses if not status.found]
    if missing:
        hint_lines: list[str] = ["Install ffmpeg (it ships ffprobe) using one of:"]
        hint_lines.extend(f"  {cmd}" for cmd in _platform_install_commands())
        raise ToolNotFoundError(
            "\n".join(f"{name} is not installed. Please install it first." for name in missing),
            hint="\n".join(hint_lines),
        )
    return {status.name: status.path for status in statuses if status.path is not None}


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands() -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return (
            "winget install Gyan.FFmpeg",
            "choco install ffmpeg",
        )
    if system == "linux":
        return (
            "sudo apt install ffmpeg",
            "sudo dnf install ffmpeg",
            "sudo pacman -S ffmpeg",
        )
    if system == "darwin":
        return ("brew install ffmpeg",)
    return ("Please install ffmpeg from https://ffmpeg.org/download.html",)
