"""Core transcode orchestration.

Launches the transcode through a
:class:`~hls_grab.core.protocols.TranscodeProvider` and follows it to
completion in one of two mutually exclusive modes, chosen once from the
probe result:

* **percentage** — duration known: the merged status stream is read
  line by line, parsed and reported as it arrives;
* **busy indicator** — duration unknown: output is discarded and the
  process is polled for liveness at a fixed interval.

Success or failure is always decided from the transcode process's own
exit status, never from the stage that consumed its output.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from hls_grab.core.models import Failure, Outcome, Success, TranscodeJob
from hls_grab.core.progress_parser import iter_samples
from hls_grab.core.progress_reporter import ProgressReporter, spinner_frames
from hls_grab.core.protocols import TranscodeProcess, TranscodeProvider
from hls_grab.exceptions import TranscodeFailedError
from hls_grab.utils.settings import POLL_INTERVAL_SECONDS


def _ignore(_text: str) -> None:
    return None


class TranscodeOrchestrator:
    """Drive one :class:`TranscodeJob` and classify its outcome.

    Parameters
    ----------
    provider:
        Any object satisfying the :class:`TranscodeProvider` protocol.
    on_progress:
        Receives percentage text (``"49.99"``) in percentage mode.
    on_tick:
        Receives one spinner frame per poll in busy-indicator mode.
    poll_interval:
        Seconds between liveness polls in busy-indicator mode.
    sleep:
        Injected for tests; defaults to :func:`time.sleep`.
    """

    def __init__(
        self,
        provider: TranscodeProvider,
        *,
        on_progress: Callable[[str], None] = _ignore,
        on_tick: Callable[[str], None] = _ignore,
        poll_interval: float = POLL_INTERVAL_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._provider: TranscodeProvider = provider
        self._on_progress: Callable[[str], None] = on_progress
        self._on_tick: Callable[[str], None] = on_tick
        self._poll_interval: float = poll_interval
        self._sleep: Callable[[float], None] = sleep

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, job: TranscodeJob) -> Outcome:
        """Run *job* to completion.

        Returns :class:`Success` (resolution not yet filled in) when the
        transcode exits 0, :class:`Failure` otherwise.  The job's process
        is killed if this method is left early (e.g. ``KeyboardInterrupt``).
        """
        total = job.probe.total_duration_seconds
        try:
            process = self._provider.start(
                job.source.url,
                job.destination,
                capture_status=total is not None,
            )
        except TranscodeFailedError as exc:
            return Failure(reason=str(exc), return_code=exc.return_code)

        job.process = process
        try:
            if total is not None:
                self._follow_status(process, total)
            else:
                self._spin_until_exit(process)
            return_code = job.wait()
        finally:
            job.close()

        if return_code == 0:
            return Success()
        return Failure(
            reason=f"ffmpeg exited with status {return_code}",
            return_code=return_code,
        )

    # ------------------------------------------------------------------
    # Consumers (exactly one runs per job)
    # ------------------------------------------------------------------

    def _follow_status(self, process: TranscodeProcess, total_seconds: int) -> None:
        stream = process.stdout
        if stream is None:
            return
        reporter = ProgressReporter(total_seconds, self._on_progress)
        reporter.consume(iter_samples(stream))

    def _spin_until_exit(self, process: TranscodeProcess) -> None:
        frames = spinner_frames()
        while process.poll() is None:
            self._on_tick(next(frames))
            self._sleep(self._poll_interval)
