"""Extraction of positioned characters from the first HTML table."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

from bs4 import BeautifulSoup, ParserRejectedMarkup

from .errors import DocumentParseError
from .logging_config import get_logger

logger = get_logger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")

# Column order within each data row.
X_COLUMN, CHAR_COLUMN, Y_COLUMN = 0, 1, 2
MIN_COLUMNS = 3


@dataclass(frozen=True, slots=True)
class PositionedCharacter:
    """A character (or short string) drawn at column ``x``, row ``y``."""

    x: int
    y: int
    c: str


def parse_document(markup: str | bytes) -> BeautifulSoup:
    """Parse ``markup`` into a queryable document tree."""
    try:
        return BeautifulSoup(markup, "lxml")
    except ParserRejectedMarkup as exc:
        raise DocumentParseError(f"Failed to parse document HTML: {exc}") from exc


def _parse_coordinate(text: str) -> Optional[int]:
    if not _INTEGER.fullmatch(text):
        return None
    return int(text)


def extract_characters(document: BeautifulSoup) -> List[PositionedCharacter]:
    """Collect ``(x, character, y)`` rows from the first table in ``document``.

    The first row is treated as a header. Rows with fewer than three ``td``
    cells, non-integer coordinates or negative coordinates are skipped.
    Records are returned in document order.
    """
    table = document.find("table")
    if table is None:
        logger.debug("No table found in document")
        return []

    cells: List[PositionedCharacter] = []
    for index, row in enumerate(table.find_all("tr")):
        if index == 0:
            continue

        tds = row.find_all("td")
        if len(tds) < MIN_COLUMNS:
            logger.debug(f"Skipping row {index}: {len(tds)} cells")
            continue

        x_text = tds[X_COLUMN].get_text().strip()
        char = tds[CHAR_COLUMN].get_text().strip()
        y_text = tds[Y_COLUMN].get_text().strip()

        x = _parse_coordinate(x_text)
        y = _parse_coordinate(y_text)
        if x is None or y is None:
            logger.warning(f"Skipping invalid row: {x_text!r} {y_text!r}")
            continue
        if x < 0 or y < 0:
            logger.warning(f"Skipping row with negative coordinate: {x} {y}")
            continue

        cells.append(PositionedCharacter(x=x, y=y, c=char))

    logger.debug(f"Extracted {len(cells)} cells")
    return cells


__all__ = ["PositionedCharacter", "extract_characters", "parse_document"]
