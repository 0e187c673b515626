"""Tests for the pre-flight HEAD check (infra/reachability.py).

``requests.head`` is mocked — no network access.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
import requests

from hls_grab.exceptions import UnreachableSourceError
from hls_grab.infra.reachability import check_reachable

URL = "https://example.com/stream.m3u8"


def _response(status: int) -> MagicMock:
    response = MagicMock()
    response.status_code = status
    return response


class TestCheckReachable:
    @pytest.mark.parametrize("status", [200, 204, 301, 302])
    @patch("hls_grab.infra.reachability.requests.head")
    def test_reachable(self, mock_head: MagicMock, status: int) -> None:
        mock_head.return_value = _response(status)
        check_reachable(URL)
        mock_head.assert_called_once()
        assert mock_head.call_args.kwargs["allow_redirects"] is False

    @pytest.mark.parametrize("status", [400, 403, 404, 500])
    @patch("hls_grab.infra.reachability.requests.head")
    def test_http_error(self, mock_head: MagicMock, status: int) -> None:
        mock_head.return_value = _response(status)
        with pytest.raises(UnreachableSourceError, match="not accessible") as exc_info:
            check_reachable(URL)
        assert str(status) in (exc_info.value.hint or "")

    @patch(
        "hls_grab.infra.reachability.requests.head",
        side_effect=requests.ConnectionError("refused"),
    )
    def test_network_error(self, _mock_head: MagicMock) -> None:
        with pytest.raises(UnreachableSourceError) as exc_info:
            check_reachable(URL)
        assert URL in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    @patch("hls_grab.infra.reachability.requests.head")
    def test_timeout_is_forwarded(self, mock_head: MagicMock) -> None:
        mock_head.return_value = _response(200)
        check_reachable(URL, timeout=2.5)
        assert mock_head.call_args.kwargs["timeout"] == 2.5
