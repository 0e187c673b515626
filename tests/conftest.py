"""Shared pytest fixtures and configuration for the hls-grab test suite.

Guidelines
----------
* No internet access in any test.
* ffmpeg/ffprobe are never executed — providers are mocked at the infra
  boundary and subprocess handles are replaced by :class:`FakeProcess`.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

import pytest
from loguru import logger

from hls_grab.core.models import ProbeResult, StreamSource, TranscodeJob


class FakeProcess:
    """Scripted stand-in for :class:`subprocess.Popen`.

    *polls_before_exit* is how many ``poll()`` calls report "still
    running" before the process is considered finished.
    """

    def __init__(
        self,
        *,
        lines: Iterable[str] | None = None,
        return_code: int = 0,
        polls_before_exit: int = 0,
    ) -> None:
        self.stdout = iter(lines) if lines is not None else None
        self._return_code = return_code
        self._polls_left = polls_before_exit
        self.poll_calls = 0
        self.wait_calls = 0
        self.killed = False

    def poll(self) -> int | None:
        self.poll_calls += 1
        if self._polls_left > 0:
            self._polls_left -= 1
            return None
        return self._return_code

    def wait(self) -> int:
        self.wait_calls += 1
        self._polls_left = 0
        return self._return_code

    def kill(self) -> None:
        self.killed = True
        self._polls_left = 0
        self._return_code = -9


class FakeTranscodeProvider:
    """Records ``start`` calls and hands out a prepared :class:`FakeProcess`."""

    def __init__(self, process: FakeProcess) -> None:
        self.process = process
        self.calls: list[tuple[str, Path, bool]] = []

    def start(self, url: str, destination: Path, *, capture_status: bool) -> FakeProcess:
        self.calls.append((url, destination, capture_status))
        if not capture_status:
            self.process.stdout = None
        return self.process


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Drop sinks added by `configure_logging` against captured streams."""
    yield
    logger.remove()


@pytest.fixture
def source() -> StreamSource:
    return StreamSource(url="https://example.com/stream.m3u8")


@pytest.fixture
def make_job(source: StreamSource, tmp_path: Path):
    """Factory for a :class:`TranscodeJob` with a given duration."""

    def _make(duration: int | None) -> TranscodeJob:
        return TranscodeJob(
            source=source,
            destination=tmp_path / "output.mp4",
            probe=ProbeResult(
                total_duration_seconds=duration,
                format_label="hls (Apple HTTP Live Streaming)",
            ),
        )

    return _make
