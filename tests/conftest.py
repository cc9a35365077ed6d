"""Shared fixtures for the docgrid test suite."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

import pytest

Row = Sequence[str]


def table_html(rows: Iterable[Row], header: Row = ("x", "char", "y")) -> str:
    """Build a minimal document whose first table holds ``rows``."""
    lines = ["<html><body><p>Intro</p><table>"]
    lines.append("<tr>" + "".join(f"<td>{cell}</td>" for cell in header) + "</tr>")
    for row in rows:
        lines.append("<tr>" + "".join(f"<td>{cell}</td>" for cell in row) + "</tr>")
    lines.append("</table></body></html>")
    return "\n".join(lines)


class FakeResponse:
    """Stand-in for ``requests.Response`` supporting the context protocol."""

    def __init__(self, text: str, status_code: int = 200, encoding: str | None = "utf-8"):
        self.text = text
        self.status_code = status_code
        self.encoding = encoding
        self.apparent_encoding = "utf-8"
        self.closed = False

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, *exc_info) -> None:
        self.closed = True


@pytest.fixture
def make_table() -> Callable[..., str]:
    """Return a builder for documents whose first table holds the given rows."""
    return table_html


@pytest.fixture
def make_response() -> Callable[..., FakeResponse]:
    """Return a factory for canned HTTP responses."""
    return FakeResponse


@pytest.fixture
def fake_get(monkeypatch: pytest.MonkeyPatch):
    """Patch ``requests.get`` and return a recorder for issued requests.

    Set ``recorder.response`` (or ``recorder.error``) before the code under
    test runs.
    """

    class Recorder:
        response: FakeResponse = FakeResponse("")
        error: Exception | None = None
        calls: list = []

    recorder = Recorder()
    recorder.calls = []

    def _get(url, **kwargs):
        recorder.calls.append((url, kwargs))
        if recorder.error is not None:
            raise recorder.error
        return recorder.response

    monkeypatch.setattr("docgrid.fetch.requests.get", _get)
    return recorder


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers bound to a previous test's captured stderr."""
    import logging

    yield
    logger = logging.getLogger("docgrid")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
