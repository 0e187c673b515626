"""Allow ``python -m hls_grab`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m hls_grab`` behaves identically to the ``hls-grab``
console script.
"""

from __future__ import annotations

from hls_grab.cli.app import cli

if __name__ == "__main__":
    cli()
