"""Tests for runtime settings and logging configuration."""

from __future__ import annotations

import pytest

from hls_grab.cli.logging_setup import configure_logging
from hls_grab.utils.settings import POLL_INTERVAL_SECONDS, SPINNER_FRAMES, tool_executable


class TestToolExecutable:
    @pytest.fixture(autouse=True)
    def _clean_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("HLS_GRAB_FFMPEG", raising=False)
        monkeypatch.delenv("HLS_GRAB_FFPROBE", raising=False)

    def test_defaults_to_name(self) -> None:
        assert tool_executable("ffmpeg") == "ffmpeg"
        assert tool_executable("ffprobe") == "ffprobe"

    def test_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HLS_GRAB_FFMPEG", " /opt/bin/ffmpeg ")
        assert tool_executable("ffmpeg") == "/opt/bin/ffmpeg"
        assert tool_executable("ffprobe") == "ffprobe"

    def test_unknown_tool_is_returned_unchanged(self) -> None:
        assert tool_executable("curl") == "curl"


class TestDefaults:
    def test_poll_interval(self) -> None:
        assert POLL_INTERVAL_SECONDS == pytest.approx(0.1)

    def test_spinner_frames(self) -> None:
        assert SPINNER_FRAMES == "|/-\\"


class TestConfigureLogging:
    def test_default_level(self) -> None:
        assert configure_logging() == "WARNING"

    def test_verbose_level(self) -> None:
        assert configure_logging(verbose=True) == "DEBUG"
