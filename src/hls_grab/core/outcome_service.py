"""Final handling of a transcode outcome.

On success the output file is probed for its resolution; on failure
the partial output is removed and a
:class:`~hls_grab.exceptions.TranscodeFailedError` is raised so the CLI
exits non-zero.  The destination is therefore only ever left on disk
after a successful run.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from hls_grab.core.models import Failure, Outcome, Success
from hls_grab.core.protocols import ProbeProvider
from hls_grab.exceptions import TranscodeFailedError


class OutcomeHandler:
    """Report or clean up after a transcode.

    Parameters
    ----------
    provider:
        Used for the post-download resolution query.
    remove_file:
        Idempotent deletion of a path; absence is not an error.
    """

    def __init__(
        self,
        provider: ProbeProvider,
        remove_file: Callable[[Path], None],
    ) -> None:
        self._provider: ProbeProvider = provider
        self._remove_file: Callable[[Path], None] = remove_file

    def handle(self, outcome: Outcome, destination: Path) -> Success:
        """Return the completed :class:`Success` or raise after cleanup.

        Raises
        ------
        TranscodeFailedError
            When *outcome* is a :class:`Failure`.  *destination* has
            been removed by the time this propagates.
        """
        if isinstance(outcome, Failure):
            self._remove_file(destination)
            raise TranscodeFailedError(
                "Download failed!",
                hint=outcome.reason,
                return_code=outcome.return_code,
            )

        # An empty or odd resolution string is reported as-is.
        resolution = self._provider.query_resolution(destination).strip()
        return Success(resolution=resolution)
