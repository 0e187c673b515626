"""Custom exception hierarchy for hls-grab.

All exceptions that cross layer boundaries must inherit from
:class:`HlsGrabError`.  Raw third-party exceptions (``requests``,
``OSError`` from subprocess launches) must not propagate beyond the
infrastructure layer — they are caught and re-raised as a typed
subclass defined here.

Hierarchy
---------
HlsGrabError
├── InvalidURLError
├── UnreachableSourceError
├── TranscodeFailedError
├── ToolNotFoundError
├── OperationCancelledError
└── EnvironmentError
"""

from __future__ import annotations


class HlsGrabError(Exception):
    """Base exception for all hls-grab errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Source validation -----------------------------------------------------

class InvalidURLError(HlsGrabError):
    """Raised when the provided URL is empty or not http(s)."""


class UnreachableSourceError(HlsGrabError):
    """Raised when the pre-flight HEAD request against the source fails."""


# --- Transcode ---------------------------------------------------------------

class TranscodeFailedError(HlsGrabError):
    """Raised when ffmpeg exits non-zero or cannot be started."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        return_code: int | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.return_code: int | None = return_code


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(HlsGrabError):
    """Raised when a required runtime dependency is not available."""


class ToolNotFoundError(HlsGrabError):
    """Raised when ffmpeg or ffprobe cannot be located."""


# --- User interaction --------------------------------------------------------

class OperationCancelledError(HlsGrabError):
    """Raised when the user declines to overwrite an existing output file."""
