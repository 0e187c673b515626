"""ffprobe backed implementation of :class:`~hls_grab.core.protocols.ProbeProvider`.

This module is the **only** place in the codebase that runs ffprobe.
Queries are best-effort: a non-zero exit or unreadable output is
logged and returned as whatever text ffprobe printed (often empty).
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from loguru import logger

from hls_grab.exceptions import ToolNotFoundError
from hls_grab.utils.settings import tool_executable


class FfprobeProvider:
    """Concrete :class:`ProbeProvider` backed by the ffprobe CLI.

    This class satisfies the :class:`~hls_grab.core.protocols.ProbeProvider`
    protocol structurally — no explicit inheritance required.
    """

    def __init__(self, executable: str | None = None) -> None:
        self._executable: str = executable or tool_executable("ffprobe")

    # ------------------------------------------------------------------
    # Command construction (pure)
    # ------------------------------------------------------------------

    def duration_command(self, url: str) -> list[str]:
        return [
            self._executable,
            "-i", url,
            "-show_entries", "format=duration",
            "-v", "quiet",
            "-of", "csv=p=0",
        ]

    def format_command(self, url: str) -> list[str]:
        return [
            self._executable,
            "-i", url,
            "-show_entries", "format=format_name,format_long_name",
            "-v", "quiet",
            "-of", "csv=p=0",
        ]

    def resolution_command(self, path: Path) -> list[str]:
        return [
            self._executable,
            "-v", "error",
            "-select_streams", "v:0",
            "-show_entries", "stream=width,height",
            "-of", "csv=s=x:p=0",
            str(path),
        ]

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def query_duration(self, url: str) -> str:
        return self._run(self.duration_command(url))

    def query_format(self, url: str) -> str:
        return self._run(self.format_command(url))

    def query_resolution(self, path: Path) -> str:
        return self._run(self.resolution_command(path))

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def _run(self, command: list[str]) -> str:
        """Run *command* and return its stdout, whatever the exit status.

        Raises
        ------
        ToolNotFoundError
            When the ffprobe executable itself cannot be started.
        """
        logger.debug(f"Running: {subprocess.list2cmdline(command)}")
        try:
            completed = subprocess.run(
                command,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                errors="replace",
                check=False,
            )
        except FileNotFoundError as exc:
            raise ToolNotFoundError(
                f"ffprobe could not be started: {self._executable}",
            ) from exc
        except OSError as exc:
            logger.warning(f"ffprobe query failed to run: {exc}")
            return ""

        if completed.returncode != 0:
            logger.warning(
                f"ffprobe exited with status {completed.returncode}; "
                "using its output as-is"
            )
        return completed.stdout
