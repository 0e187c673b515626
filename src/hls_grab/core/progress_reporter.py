"""Percentage computation and busy-indicator frames.

Rendering is left to the CLI layer: the reporter hands plain text to a
callback and never touches the terminal itself.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator

from hls_grab.core.models import ProgressSample
from hls_grab.utils.settings import SPINNER_FRAMES


def compute_percentage(elapsed_seconds: int, total_seconds: int) -> str | None:
    """Return ``elapsed / total * 100`` with two decimals.

    ``None`` when *total_seconds* is zero: the update is suppressed.
    """
    if total_seconds == 0:
        return None
    return f"{elapsed_seconds / total_seconds * 100:.2f}"


def format_duration(total_seconds: int) -> str:
    """Render whole seconds as ``HH:MM:SS`` (hours may exceed 99)."""
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def spinner_frames(frames: str = SPINNER_FRAMES) -> Iterator[str]:
    """Cycle through the busy-indicator characters forever."""
    return itertools.cycle(frames)


class ProgressReporter:
    """Turn samples into percentage updates for a known total duration.

    Samples are reported in arrival order.  Non-monotonic markers are
    reported as they come, so the percentage may go backwards.

    Parameters
    ----------
    total_seconds:
        Known stream duration.  Zero suppresses every update.
    on_update:
        Called with the percentage text (``"49.99"``) per sample.
    """

    def __init__(
        self,
        total_seconds: int,
        on_update: Callable[[str], None],
    ) -> None:
        self._total_seconds: int = total_seconds
        self._on_update: Callable[[str], None] = on_update
        self.updates_emitted: int = 0
        self.last_percentage: str | None = None

    def report(self, sample: ProgressSample) -> None:
        percentage = compute_percentage(sample.elapsed_seconds, self._total_seconds)
        if percentage is None:
            return
        self.last_percentage = percentage
        self.updates_emitted += 1
        self._on_update(percentage)

    def consume(self, samples: Iterable[ProgressSample]) -> None:
        """Report every sample until the stream is exhausted."""
        for sample in samples:
            self.report(sample)
