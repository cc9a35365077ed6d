"""Exception types raised by the document-to-grid pipeline."""

from __future__ import annotations


class DocGridError(RuntimeError):
    """Base class for every fatal condition reported by docgrid."""


class UsageError(DocGridError):
    """Raised when the command line does not name exactly one URL."""


class FetchError(DocGridError):
    """Raised when the document cannot be retrieved."""


class DocumentParseError(DocGridError):
    """Raised when the fetched markup cannot be interpreted."""


class EmptyResultError(DocGridError):
    """Raised when no valid table rows were found."""


class GridTooLargeError(DocGridError):
    """Raised when the grid bounds exceed the configured cell limit."""


__all__ = [
    "DocGridError",
    "DocumentParseError",
    "EmptyResultError",
    "FetchError",
    "GridTooLargeError",
    "UsageError",
]
