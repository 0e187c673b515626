"""Infrastructure layer — external system integration.

This layer wraps all interaction with ffmpeg, ffprobe, the network and
the filesystem.  Every raw third-party exception must be caught here
and re-raised as a :class:`~hls_grab.exceptions.HlsGrabError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from hls_grab.infra.ffmpeg_transcoder import FfmpegTranscodeProvider
from hls_grab.infra.ffprobe_provider import FfprobeProvider
from hls_grab.infra.filesystem import remove_partial_output
from hls_grab.infra.reachability import check_reachable
from hls_grab.infra.tool_detector import (
    ToolStatus,
    detect_required_tools,
    detect_tool,
    require_tools,
)

__all__: list[str] = [
    "FfmpegTranscodeProvider",
    "FfprobeProvider",
    "ToolStatus",
    "check_reachable",
    "detect_required_tools",
    "detect_tool",
    "remove_partial_output",
    "require_tools",
]
