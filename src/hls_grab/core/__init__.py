"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem, network or subprocess I/O of its own — all of it goes
  through the providers described in :mod:`hls_grab.core.protocols`.
* No imports from ``cli`` or ``infra``.
"""

from hls_grab.core.models import (
    Failure,
    Outcome,
    ProbeResult,
    ProgressSample,
    StreamSource,
    Success,
    TranscodeJob,
)
from hls_grab.core.outcome_service import OutcomeHandler
from hls_grab.core.probe_service import MediaProbe
from hls_grab.core.progress_parser import iter_samples, parse_time_marker
from hls_grab.core.progress_reporter import ProgressReporter, compute_percentage
from hls_grab.core.protocols import ProbeProvider, TranscodeProcess, TranscodeProvider
from hls_grab.core.transcode_service import TranscodeOrchestrator

__all__: list[str] = [
    "Failure",
    "MediaProbe",
    "Outcome",
    "OutcomeHandler",
    "ProbeProvider",
    "ProbeResult",
    "ProgressReporter",
    "ProgressSample",
    "StreamSource",
    "Success",
    "TranscodeJob",
    "TranscodeOrchestrator",
    "TranscodeProcess",
    "TranscodeProvider",
    "compute_percentage",
    "iter_samples",
    "parse_time_marker",
]
