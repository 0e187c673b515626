"""Pre-flight reachability check of the source URL.

A single HEAD request: any response below 400 counts as reachable.
Redirects are not followed — a redirect response is itself proof that
the server answered.
"""

from __future__ import annotations

import requests
from loguru import logger

from hls_grab.exceptions import UnreachableSourceError
from hls_grab.utils.settings import REACHABILITY_TIMEOUT_SECONDS


def check_reachable(url: str, *, timeout: float = REACHABILITY_TIMEOUT_SECONDS) -> None:
    """Raise :class:`UnreachableSourceError` unless *url* answers a HEAD request."""
    message = f"Invalid URL or resource not accessible: {url}"
    try:
        response = requests.head(url, timeout=timeout, allow_redirects=False)
    except requests.RequestException as exc:
        logger.debug(f"HEAD {url} raised {type(exc).__name__}: {exc}")
        raise UnreachableSourceError(
            message,
            hint="Check the URL and your network connection.",
        ) from exc

    logger.debug(f"HEAD {url} -> {response.status_code}")
    if response.status_code >= 400:
        raise UnreachableSourceError(
            message,
            hint=f"The server answered with HTTP {response.status_code}.",
        )
