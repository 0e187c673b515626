"""Extraction of elapsed-time markers from ffmpeg's status stream.

ffmpeg reports progress as ``... time=00:08:09.52 bitrate=...``.  Only
the whole-second part of the first marker on a line is used.  Parsing
is stateless per line.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from hls_grab.core.models import ProgressSample

_TIME_MARKER = re.compile(r"time=(\d+):(\d+):(\d+)")


def parse_time_marker(line: str) -> ProgressSample | None:
    """Return the sample encoded in *line*, or ``None`` when it has none.

    Components are read as base-10 integers, so ``"08"`` is eight.
    """
    match = _TIME_MARKER.search(line)
    if match is None:
        return None
    hours, minutes, seconds = (int(part, 10) for part in match.groups())
    return ProgressSample(elapsed_seconds=hours * 3600 + minutes * 60 + seconds)


def iter_samples(lines: Iterable[str]) -> Iterator[ProgressSample]:
    """Lazily map a line stream to progress samples, skipping non-matches."""
    for line in lines:
        sample = parse_time_marker(line)
        if sample is not None:
            yield sample
