"""Public facing helpers that run the fetch, extract and render pipeline."""

from __future__ import annotations

from typing import List

from .config import GridConfig
from .errors import EmptyResultError
from .extract import extract_characters, parse_document
from .fetch import fetch_document
from .logging_config import get_logger
from .render import render_lines

logger = get_logger(__name__)


def render_markup(markup: str | bytes, *, config: GridConfig | None = None) -> List[str]:
    """Render the first table of already-fetched ``markup`` as grid lines."""
    config = config or GridConfig()

    cells = extract_characters(parse_document(markup))
    if not cells:
        raise EmptyResultError("No valid table data found.")

    logger.debug(f"cells: {cells}")
    return render_lines(cells, blank=config.blank, max_cells=config.max_cells)


def render_document(url: str, *, config: GridConfig | None = None) -> List[str]:
    """Fetch ``url`` and render the first table it contains as grid lines."""
    config = config or GridConfig()
    markup = fetch_document(url, timeout=config.timeout)
    return render_markup(markup, config=config)


__all__ = ["render_document", "render_markup"]
