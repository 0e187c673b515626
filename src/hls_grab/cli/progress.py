"""Rich-based live status line for a running transcode.

The core orchestrator reports plain text through two callbacks; this
module renders them in a single self-overwriting Rich line:

* :meth:`RichTranscodeDisplay.on_progress` — ``Progress: 49.99%`` with a
  bar, when the stream duration is known;
* :meth:`RichTranscodeDisplay.on_tick` — a rotating ``[|]`` frame,
  when it is not.

Calls made before :meth:`start` or after :meth:`stop` are ignored.
"""

from __future__ import annotations

from typing import Any

from hls_grab.cli.console import get_rich_console
from hls_grab.exceptions import EnvironmentError


class RichTranscodeDisplay:
    """Callback target for :class:`~hls_grab.core.TranscodeOrchestrator`.

    Usage::

        with RichTranscodeDisplay() as display:
            orchestrator = TranscodeOrchestrator(
                provider,
                on_progress=display.on_progress,
                on_tick=display.on_tick,
            )
            outcome = orchestrator.run(job)
    """

    def __init__(self) -> None:
        try:
            from rich.progress import BarColumn, Progress, TextColumn
        except ModuleNotFoundError as exc:
            raise EnvironmentError(
                "rich is not installed. Install with: pip install rich",
            ) from exc

        self._progress: Any = Progress(
            # Spinner frames such as "[/]" must not be read as markup.
            TextColumn("{task.description}", style="bold blue", markup=False),
            BarColumn(),
            console=get_rich_console(),
            transient=True,
        )
        self._task_id: Any = None
        self._started: bool = False

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> RichTranscodeDisplay:
        self.start()
        return self

    def __exit__(self, *_args: object) -> None:
        self.stop()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        if not self._started:
            self._progress.start()
            self._started = True

    def stop(self) -> None:
        """Stop the live display (idempotent)."""
        if self._started:
            self._progress.stop()
            self._started = False

    # ------------------------------------------------------------------
    # Orchestrator callbacks
    # ------------------------------------------------------------------

    def on_progress(self, percentage: str) -> None:
        """Show *percentage* (``"49.99"``), replacing the previous value."""
        if not self._started:
            return
        task_id = self._ensure_task(total=100.0)
        self._progress.update(
            task_id,
            completed=_safe_float(percentage),
            description=f"Progress: {percentage}%",
        )

    def on_tick(self, frame: str) -> None:
        """Advance the busy indicator to *frame*."""
        if not self._started:
            return
        task_id = self._ensure_task(total=None)
        self._progress.update(task_id, description=f"Downloading [{frame}]")

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _ensure_task(self, *, total: float | None) -> Any:
        if self._task_id is None:
            self._task_id = self._progress.add_task("", total=total)
        return self._task_id


def _safe_float(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        return 0.0
