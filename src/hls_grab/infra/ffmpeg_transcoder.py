"""ffmpeg backed implementation of :class:`~hls_grab.core.protocols.TranscodeProvider`.

This module is the **only** place in the codebase that launches ffmpeg.
The stream is remuxed without re-encoding:

* ``-c copy`` — copy audio and video as-is;
* ``-bsf:a aac_adtstoasc`` — turn ADTS-framed AAC from the MPEG-TS
  segments into MP4-compatible packets;
* ``-movflags +faststart`` — move the ``moov`` atom to the front;
* ``-y`` — overwrite; the overwrite decision was made by the caller.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from loguru import logger

from hls_grab.exceptions import TranscodeFailedError
from hls_grab.utils.settings import tool_executable


class FfmpegTranscodeProvider:
    """Concrete :class:`TranscodeProvider` backed by the ffmpeg CLI."""

    def __init__(self, executable: str | None = None) -> None:
        self._executable: str = executable or tool_executable("ffmpeg")

    def build_command(self, url: str, destination: Path) -> list[str]:
        """Return the remux command line for *url* → *destination*."""
        return [
            self._executable,
            "-i", url,
            "-c", "copy",
            "-bsf:a", "aac_adtstoasc",
            "-movflags", "+faststart",
            "-y",
            str(destination),
        ]

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def start(
        self,
        url: str,
        destination: Path,
        *,
        capture_status: bool,
    ) -> subprocess.Popen[str]:
        """Launch ffmpeg and return the running process.

        With *capture_status* stderr is merged into a text-mode stdout
        pipe.  Universal newlines split ffmpeg's ``\\r``-terminated
        stats updates into separate lines.

        Raises
        ------
        TranscodeFailedError
            When ffmpeg cannot be started at all.
        """
        command = self.build_command(url, destination)
        logger.debug(f"Running: {subprocess.list2cmdline(command)}")

        output = subprocess.PIPE if capture_status else subprocess.DEVNULL
        errors = subprocess.STDOUT if capture_status else subprocess.DEVNULL
        try:
            process = subprocess.Popen(
                command,
                stdin=subprocess.DEVNULL,
                stdout=output,
                stderr=errors,
                text=True,
                errors="replace",
            )
        except OSError as exc:
            raise TranscodeFailedError(
                f"ffmpeg could not be started: {exc}",
                hint="Run 'hls-grab doctor' to check your ffmpeg installation.",
            ) from exc

        logger.debug(f"ffmpeg started with pid {process.pid}")
        return process
