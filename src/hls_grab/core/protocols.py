"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol


class TranscodeProcess(Protocol):
    """The subset of :class:`subprocess.Popen` the core relies on."""

    @property
    def stdout(self) -> Iterable[str] | None:
        """Merged status stream, or ``None`` when output is suppressed."""
        ...  # pragma: no cover

    def poll(self) -> int | None:
        ...  # pragma: no cover

    def wait(self) -> int:
        ...  # pragma: no cover

    def kill(self) -> None:
        ...  # pragma: no cover


class ProbeProvider(Protocol):
    """Contract for metadata query backends (ffprobe).

    Every method returns the raw text printed by the backend.  Failures
    surface as empty or garbage text, never as exceptions — metadata is
    best-effort.
    """

    def query_duration(self, url: str) -> str:
        """Return the container duration in seconds as text."""
        ...  # pragma: no cover

    def query_format(self, url: str) -> str:
        """Return ``"<short>,<long>"`` container names as text."""
        ...  # pragma: no cover

    def query_resolution(self, path: Path) -> str:
        """Return ``"<width>x<height>"`` of the first video stream."""
        ...  # pragma: no cover


class TranscodeProvider(Protocol):
    """Contract for transcode backends (ffmpeg).

    Implementations map launch failures to
    :class:`~hls_grab.exceptions.TranscodeFailedError`.
    """

    def start(
        self,
        url: str,
        destination: Path,
        *,
        capture_status: bool,
    ) -> TranscodeProcess:
        """Launch the stream-copy transcode of *url* into *destination*.

        Parameters
        ----------
        capture_status:
            When ``True`` the returned process exposes its status
            stream as text lines on ``stdout``; otherwise all output is
            discarded and ``stdout`` is ``None``.

        Raises
        ------
        TranscodeFailedError
            When the process cannot be started.
        """
        ...  # pragma: no cover
