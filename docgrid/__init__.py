"""Render the coordinate table of a shared document as a text grid."""

from __future__ import annotations

from importlib import metadata

from .api import render_document, render_markup
from .config import GridConfig
from .errors import (
    DocGridError,
    DocumentParseError,
    EmptyResultError,
    FetchError,
    GridTooLargeError,
    UsageError,
)
from .extract import PositionedCharacter, extract_characters, parse_document
from .render import render_lines, write_grid

__all__ = [
    "DocGridError",
    "DocumentParseError",
    "EmptyResultError",
    "FetchError",
    "GridConfig",
    "GridTooLargeError",
    "PositionedCharacter",
    "UsageError",
    "extract_characters",
    "parse_document",
    "render_document",
    "render_lines",
    "render_markup",
    "write_grid",
    "__version__",
]

try:  # pragma: no cover - metadata only available when installed
    __version__ = metadata.version("docgrid")
except metadata.PackageNotFoundError:  # pragma: no cover - fallback for local dev
    __version__ = "1.0.0"
