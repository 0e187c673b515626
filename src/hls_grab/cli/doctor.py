"""``hls-grab doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment can perform a download.  Purely
collects and displays diagnostic data.
"""

from __future__ import annotations

import platform
import sys

from hls_grab.cli import exit_codes
from hls_grab.cli.console import console
from hls_grab.infra.tool_detector import ToolStatus, detect_required_tools
from hls_grab.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _requests_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the requests row."""
    try:
        import requests
    except ImportError:
        return "requests", "NOT INSTALLED", "[red]FAIL[/red]"
    return "requests", str(getattr(requests, "__version__", "unknown")), "[green]OK[/green]"


def _tool_check(status_obj: ToolStatus) -> tuple[str, str, str]:
    """Return (label, value, status) for an external tool row."""
    if status_obj.found:
        path_str = str(status_obj.path) if status_obj.path else "found"
        return status_obj.name, path_str, "[green]OK[/green]"
    return status_obj.name, "not found", "[red]FAIL[/red]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _hlsgrab_version_check() -> tuple[str, str, str]:
    return "hls-grab", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nhls-grab doctor", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<32} {'Status':<8}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<32} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all checks pass,
        :data:`exit_codes.GENERAL_ERROR` if any check fails.
    """
    tools = detect_required_tools()
    checks = [
        _hlsgrab_version_check(),
        _python_version_check(),
        _requests_version_check(),
        *(_tool_check(tool) for tool in tools),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="hls-grab doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    missing = [tool for tool in tools if not tool.found]
    if missing and missing[0].install_commands:
        console.print("ffmpeg/ffprobe are not installed.")
        console.print("Install using one of the following commands:\n")
        for cmd in missing[0].install_commands:
            console.print(f"  {cmd}")
        console.print()

    if has_failure:
        console.print("Some checks failed.")
        return exit_codes.GENERAL_ERROR

    console.print("All checks passed.")
    return exit_codes.SUCCESS
