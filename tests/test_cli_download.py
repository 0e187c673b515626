"""CLI integration tests for the download command (mocked end-to-end).

Every external boundary is patched where ``_handle_download`` imports
it from: tool detection, the HEAD check, ffprobe, ffmpeg and the Rich
display.  No process is started and no network is touched.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock, call, patch

import pytest

from conftest import FakeProcess, FakeTranscodeProvider
from hls_grab.cli import exit_codes
from hls_grab.cli.app import main
from hls_grab.exceptions import (
    OperationCancelledError,
    TranscodeFailedError,
    UnreachableSourceError,
)

URL = "https://example.com/stream.m3u8"


class _Env:
    """Handles to the patched collaborators of one test."""

    def __init__(self, patches: dict[str, MagicMock], display: MagicMock) -> None:
        self.patches = patches
        self.display = display
        self.transcoder: FakeTranscodeProvider | None = None

    @property
    def ffprobe(self) -> MagicMock:
        return self.patches["ffprobe"].return_value

    def use_process(self, process: FakeProcess) -> None:
        self.transcoder = FakeTranscodeProvider(process)
        self.patches["ffmpeg"].return_value = self.transcoder


@pytest.fixture
def env() -> Iterator[_Env]:
    targets = {
        "require_tools": "hls_grab.infra.tool_detector.require_tools",
        "check_reachable": "hls_grab.infra.reachability.check_reachable",
        "ffprobe": "hls_grab.infra.ffprobe_provider.FfprobeProvider",
        "ffmpeg": "hls_grab.infra.ffmpeg_transcoder.FfmpegTranscodeProvider",
        "display": "hls_grab.cli.progress.RichTranscodeDisplay",
    }
    started: dict[str, Any] = {}
    patchers = [patch(target) for target in targets.values()]
    try:
        for key, patcher in zip(targets, patchers):
            started[key] = patcher.start()

        display = MagicMock()
        started["display"].return_value.__enter__.return_value = display
        started["display"].return_value.__exit__.return_value = False

        probe = started["ffprobe"].return_value
        probe.query_duration.return_value = "100.480000\n"
        probe.query_format.return_value = "hls,Apple HTTP Live Streaming\n"
        probe.query_resolution.return_value = "1920x1080\n"

        yield _Env(started, display)
    finally:
        for patcher in patchers:
            patcher.stop()


# ---------------------------------------------------------------------------
# Happy paths
# ---------------------------------------------------------------------------

class TestDownloadSuccess:
    def test_known_duration(
        self, env: _Env, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        dest = tmp_path / "out.mp4"
        env.use_process(
            FakeProcess(
                lines=["Stream mapping:", "time=00:00:50.00 bitrate=1k", "time=00:01:40.48"],
                return_code=0,
            )
        )

        code = main([URL, str(dest)])

        assert code == exit_codes.SUCCESS
        assert env.display.on_progress.call_args_list == [call("50.00"), call("100.00")]
        env.display.on_tick.assert_not_called()
        assert env.transcoder is not None
        assert env.transcoder.calls == [(URL, dest, True)]

        err = capsys.readouterr().err
        assert f"Starting download of: {URL}" in err
        assert "Format: hls (Apple HTTP Live Streaming)" in err
        assert "Content length determined: 00:01:40" in err
        assert "Download completed successfully!" in err
        assert "File saved in 1920x1080 as:" in err

    def test_unknown_duration_uses_busy_indicator(
        self, env: _Env, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        env.ffprobe.query_duration.return_value = "N/A\n"
        env.use_process(FakeProcess(return_code=0, polls_before_exit=2))

        code = main([URL, str(tmp_path / "out.mp4")])

        assert code == exit_codes.SUCCESS
        env.display.on_progress.assert_not_called()
        assert env.display.on_tick.call_count == 2
        assert env.transcoder is not None
        assert env.transcoder.calls[0][2] is False
        assert "Content length not determinable." in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------

class TestDownloadFailure:
    def test_transcode_failure_removes_output(self, env: _Env, tmp_path: Path) -> None:
        dest = tmp_path / "out.mp4"
        dest.write_bytes(b"partial")
        env.use_process(FakeProcess(lines=["time=00:00:10"], return_code=1))

        with pytest.raises(TranscodeFailedError, match="Download failed!"):
            main(["-y", URL, str(dest)])

        assert not dest.exists()
        env.ffprobe.query_resolution.assert_not_called()

    def test_unreachable_source_stops_before_probe(self, env: _Env, tmp_path: Path) -> None:
        env.patches["check_reachable"].side_effect = UnreachableSourceError("nope")

        with pytest.raises(UnreachableSourceError):
            main([URL, str(tmp_path / "out.mp4")])

        env.ffprobe.query_duration.assert_not_called()
        env.patches["ffmpeg"].assert_not_called()


# ---------------------------------------------------------------------------
# Overwrite prompt
# ---------------------------------------------------------------------------

class TestOverwritePrompt:
    @patch("hls_grab.cli.prompt._import_questionary")
    def test_declined_keeps_file(
        self, mock_import: MagicMock, env: _Env, tmp_path: Path,
    ) -> None:
        dest = tmp_path / "out.mp4"
        dest.write_bytes(b"keep me")
        mock_import.return_value.confirm.return_value.ask.return_value = False

        with pytest.raises(OperationCancelledError, match="Operation cancelled."):
            main([URL, str(dest)])

        assert dest.read_bytes() == b"keep me"
        env.patches["require_tools"].assert_not_called()

    @patch("hls_grab.cli.prompt._import_questionary")
    def test_accepted_proceeds(
        self, mock_import: MagicMock, env: _Env, tmp_path: Path,
    ) -> None:
        dest = tmp_path / "out.mp4"
        dest.write_bytes(b"old")
        mock_import.return_value.confirm.return_value.ask.return_value = True
        env.use_process(FakeProcess(return_code=0))

        assert main([URL, str(dest)]) == exit_codes.SUCCESS

    @patch("hls_grab.cli.prompt._import_questionary")
    def test_force_skips_prompt(
        self, mock_import: MagicMock, env: _Env, tmp_path: Path,
    ) -> None:
        dest = tmp_path / "out.mp4"
        dest.write_bytes(b"old")
        env.use_process(FakeProcess(return_code=0))

        assert main(["-y", URL, str(dest)]) == exit_codes.SUCCESS
        mock_import.assert_not_called()
