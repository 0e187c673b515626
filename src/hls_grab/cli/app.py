"""CLI application entry point and command routing for hls-grab.

This module is the **sole error boundary** for the entire application.
It catches :class:`~hls_grab.exceptions.HlsGrabError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core/service
  and infrastructure layers.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from hls_grab.cli import exit_codes
from hls_grab.cli.console import console
from hls_grab.cli.logging_setup import configure_logging
from hls_grab.exceptions import HlsGrabError
from hls_grab.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

_EPILOG = 'Example: hls-grab "https://example.com/stream.m3u8" "output.mp4"'


class _UsageParser(argparse.ArgumentParser):
    """ArgumentParser whose usage errors exit with GENERAL_ERROR (1)."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(exit_codes.GENERAL_ERROR, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``hls-grab [-y] <url> <output>`` — download a stream
    * ``hls-grab doctor``             — environment diagnostics
    * ``hls-grab --version``
    """
    parser = _UsageParser(
        prog="hls-grab",
        description="Download an HLS (m3u8) stream into a single MP4 file.",
        epilog=_EPILOG,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-y",
        "--yes",
        dest="force",
        action="store_true",
        help="Overwrite existing output files without prompt.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log executed commands and diagnostics to stderr.",
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=None,
        help="Stream URL (m3u8) to download, or 'doctor' to run diagnostics.",
    )
    parser.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Output file name, e.g. output.mp4.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_download(url: str, destination: Path, *, force: bool) -> int:
    """Download *url* into *destination*.

    Flow:
    1. Validate the URL and confirm overwriting an existing file.
    2. Check ffmpeg/ffprobe are present and the source answers HEAD.
    3. Probe duration and format.
    4. Run the transcode with a live progress line.
    5. Report the resolution, or clean up and fail.
    """
    from hls_grab.cli.progress import RichTranscodeDisplay
    from hls_grab.cli.prompt import confirm_overwrite
    from hls_grab.core.models import StreamSource, TranscodeJob
    from hls_grab.core.outcome_service import OutcomeHandler
    from hls_grab.core.probe_service import MediaProbe
    from hls_grab.core.progress_reporter import format_duration
    from hls_grab.core.transcode_service import TranscodeOrchestrator
    from hls_grab.infra.ffmpeg_transcoder import FfmpegTranscodeProvider
    from hls_grab.infra.ffprobe_provider import FfprobeProvider
    from hls_grab.infra.filesystem import remove_partial_output
    from hls_grab.infra.reachability import check_reachable
    from hls_grab.infra.tool_detector import require_tools

    source = StreamSource.from_url(url)
    confirm_overwrite(destination, force=force)
    require_tools()
    check_reachable(source.url)

    probe_provider = FfprobeProvider()
    probe = MediaProbe(probe_provider).probe(source)

    console.print(f"Starting download of: {source.url}")
    console.print(f"Format: {probe.format_label}")
    console.print(f"Output will be saved as: {destination}")
    if probe.total_duration_seconds is None:
        console.print("Content length not determinable.")
    else:
        console.print(
            f"Content length determined: {format_duration(probe.total_duration_seconds)}"
        )

    job = TranscodeJob(source=source, destination=destination, probe=probe)
    with RichTranscodeDisplay() as display:
        orchestrator = TranscodeOrchestrator(
            FfmpegTranscodeProvider(),
            on_progress=display.on_progress,
            on_tick=display.on_tick,
        )
        outcome = orchestrator.run(job)

    handler = OutcomeHandler(probe_provider, remove_partial_output)
    success = handler.handle(outcome, destination)

    console.print("[bold green]Download completed successfully![/bold green]")
    console.print(f"File saved in {success.resolution} as: {destination}")
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from hls_grab.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the hls-grab CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.target is None:
        parser.print_help(sys.stderr)
        return exit_codes.GENERAL_ERROR

    target: str = args.target

    if target.lower() == "doctor" and args.output is None:
        return _handle_doctor()

    if args.output is None:
        parser.error("the following arguments are required: output")

    return _handle_download(target, Path(args.output), force=args.force)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except HlsGrabError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
