"""Runtime settings shared across layers.

There is no configuration file: everything tunable lives here as a
module constant, and the location of the external tools can be
overridden through the environment.
"""

from __future__ import annotations

import os

# --- External tools ----------------------------------------------------------

FFMPEG_ENV_VAR: str = "HLS_GRAB_FFMPEG"
FFPROBE_ENV_VAR: str = "HLS_GRAB_FFPROBE"

REQUIRED_TOOLS: tuple[str, ...] = ("ffmpeg", "ffprobe")
"""Executables that must be present before a download is attempted."""


def tool_executable(name: str) -> str:
    """Return the configured executable for *name* (``ffmpeg``/``ffprobe``).

    ``HLS_GRAB_FFMPEG`` / ``HLS_GRAB_FFPROBE`` may hold a bare command
    name or an absolute path.  Unset or blank falls back to *name*.
    """
    env_var = {"ffmpeg": FFMPEG_ENV_VAR, "ffprobe": FFPROBE_ENV_VAR}.get(name)
    if env_var is None:
        return name
    override = os.environ.get(env_var, "").strip()
    return override or name


# --- Progress ----------------------------------------------------------------

POLL_INTERVAL_SECONDS: float = 0.1
"""Liveness poll interval of the busy indicator."""

SPINNER_FRAMES: str = "|/-\\"

# --- Network -----------------------------------------------------------------

REACHABILITY_TIMEOUT_SECONDS: float = 10.0

# --- Logging -----------------------------------------------------------------

LOG_FORMAT: str = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
DEFAULT_LOG_LEVEL: str = "WARNING"
VERBOSE_LOG_LEVEL: str = "DEBUG"
