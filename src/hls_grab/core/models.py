"""Domain models for hls-grab.

Value objects are **frozen** dataclasses with no behaviour beyond data
access.  :class:`TranscodeJob` is the one mutable object: it owns the
running subprocess for the lifetime of a single download.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from hls_grab.core.protocols import TranscodeProcess
from hls_grab.exceptions import InvalidURLError


# ---------------------------------------------------------------------------
# Source / probe
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class StreamSource:
    """A validated source URL (typically an ``.m3u8`` playlist)."""

    url: str

    @classmethod
    def from_url(cls, url: str) -> StreamSource:
        """Validate *url* and wrap it.

        Raises
        ------
        InvalidURLError
            For empty or non-HTTP(S) URLs.
        """
        stripped = url.strip()
        if not stripped:
            raise InvalidURLError("URL must not be empty.")
        if not stripped.lower().startswith(("http://", "https://")):
            raise InvalidURLError(
                f"Invalid URL: {stripped}",
                hint="URL must start with http:// or https://",
            )
        return cls(url=stripped)


@dataclass(frozen=True, slots=True)
class ProbeResult:
    """Up-front metadata about the stream."""

    total_duration_seconds: int | None
    """Whole seconds, or ``None`` when the duration is not determinable."""

    format_label: str
    """``"<short> (<long>)"`` container description, passed through as-is."""

    @property
    def duration_known(self) -> bool:
        return self.total_duration_seconds is not None


# ---------------------------------------------------------------------------
# Progress
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ProgressSample:
    """One ``time=HH:MM:SS`` marker converted to elapsed seconds."""

    elapsed_seconds: int


# ---------------------------------------------------------------------------
# Job
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class TranscodeJob:
    """A single download run.

    The job exclusively owns *process* once the transcode has been
    launched.  ``return_code`` always reflects the transcode process
    itself, never whatever consumed its output.
    """

    source: StreamSource
    destination: Path
    probe: ProbeResult
    process: TranscodeProcess | None = field(default=None, repr=False)
    return_code: int | None = None

    def wait(self) -> int:
        """Block until the transcode exits and record its exit status."""
        if self.process is None:
            raise RuntimeError("Transcode process has not been started.")
        self.return_code = self.process.wait()
        return self.return_code

    def close(self) -> None:
        """Kill the process if it is still running (idempotent)."""
        if self.process is not None and self.process.poll() is None:
            self.process.kill()
            self.return_code = self.process.wait()


# ---------------------------------------------------------------------------
# Outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Success:
    """The transcode exited 0; *resolution* is e.g. ``"1920x1080"``."""

    resolution: str = ""

    @property
    def succeeded(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    """The transcode exited non-zero or could not be started."""

    reason: str
    return_code: int | None = None

    @property
    def succeeded(self) -> bool:
        return False


Outcome = Union[Success, Failure]
