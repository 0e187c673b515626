"""Core probe service — stream duration and container format.

Depends on a :class:`~hls_grab.core.protocols.ProbeProvider` injected
at construction time.  Probing is best-effort: unparseable output
degrades to "unknown duration" or is passed through verbatim, and
nothing here raises on bad metadata.
"""

from __future__ import annotations

import re

from hls_grab.core.models import ProbeResult, StreamSource
from hls_grab.core.protocols import ProbeProvider

_WHOLE_SECONDS = re.compile(r"^[0-9]+$")


class MediaProbe:
    """Stateless service that queries up-front stream metadata.

    Parameters
    ----------
    provider:
        Any object satisfying the :class:`ProbeProvider` protocol.
    """

    def __init__(self, provider: ProbeProvider) -> None:
        self._provider: ProbeProvider = provider

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def probe(self, source: StreamSource) -> ProbeResult:
        """Return duration and format information for *source*."""
        return ProbeResult(
            total_duration_seconds=self.parse_duration(
                self._provider.query_duration(source.url),
            ),
            format_label=self.compose_format_label(
                self._provider.query_format(source.url),
            ),
        )

    # ------------------------------------------------------------------
    # Raw text → domain values (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def parse_duration(raw: str) -> int | None:
        """Truncate ``"3661.48"`` to ``3661``; anything else is ``None``.

        The fractional part is dropped textually (everything from the
        first ``.``), then the remainder must be plain digits.  Negative
        values, ``"N/A"`` and empty output are all "not determinable".
        """
        whole = raw.strip().split(".", 1)[0]
        if not _WHOLE_SECONDS.match(whole):
            return None
        return int(whole, 10)

    @staticmethod
    def compose_format_label(raw: str) -> str:
        """Turn ``"hls,Apple HTTP Live Streaming"`` into ``"hls (Apple HTTP Live Streaming)"``.

        Malformed output is tolerated: the text before the first comma is
        the short name and the rest (possibly empty) the long name.
        """
        lines = raw.strip().splitlines()
        first = lines[0] if lines else ""
        short_name, _, long_name = first.partition(",")
        return f"{short_name} ({long_name})"
