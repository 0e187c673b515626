"""hls-grab — download a segmented HTTP media stream into one MP4 file.

The heavy lifting is delegated to ffmpeg/ffprobe; this package probes
the stream, drives the transcode and reports progress.
"""

from hls_grab.version import __version__

__all__: list[str] = ["__version__"]
