"""Tests for the HTTP retrieval step, with the network patched out."""

from __future__ import annotations

import pytest
import requests

from docgrid.errors import FetchError
from docgrid.fetch import fetch_document


@pytest.mark.smoke
class TestFetchDocument:
    def test_returns_body_and_passes_timeout(self, fake_get, make_response):
        fake_get.response = make_response("<table></table>")

        body = fetch_document("https://example.com/doc", timeout=5)

        assert body == "<table></table>"
        assert fake_get.calls == [("https://example.com/doc", {"timeout": 5})]
        assert fake_get.response.closed

    @pytest.mark.parametrize("status", [301, 404, 500])
    def test_non_success_status_is_fatal(
        self, fake_get, make_response, status: int
    ):
        fake_get.response = make_response("nope", status_code=status)

        with pytest.raises(FetchError, match=f"HTTP {status}"):
            fetch_document("https://example.com/doc")

        assert fake_get.response.closed

    def test_transport_error_is_wrapped(self, fake_get):
        fake_get.error = requests.ConnectionError("connection refused")

        with pytest.raises(FetchError, match="connection refused") as info:
            fetch_document("https://example.com/doc")

        assert isinstance(info.value.__cause__, requests.ConnectionError)

    def test_missing_encoding_uses_detected(self, fake_get, make_response):
        fake_get.response = make_response("body", encoding=None)

        fetch_document("https://example.com/doc")

        assert fake_get.response.encoding == "utf-8"
