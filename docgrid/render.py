"""Rendering of positioned characters as a bottom-up text grid."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Sequence, TextIO, Tuple

from .errors import EmptyResultError, GridTooLargeError
from .extract import PositionedCharacter


def grid_bounds(cells: Sequence[PositionedCharacter]) -> Tuple[int, int]:
    """Return ``(max_x, max_y)`` over ``cells``."""
    if not cells:
        raise EmptyResultError("No valid table data found.")
    return max(cell.x for cell in cells), max(cell.y for cell in cells)


def build_grid(
    cells: Sequence[PositionedCharacter],
    *,
    blank: str = " ",
    max_cells: Optional[int] = None,
) -> List[List[str]]:
    """Place every cell into a dense, blank-filled grid indexed ``[y][x]``.

    Cells later in ``cells`` overwrite earlier ones at the same coordinate.
    """
    max_x, max_y = grid_bounds(cells)
    if min(cell.x for cell in cells) < 0 or min(cell.y for cell in cells) < 0:
        raise ValueError("coordinates must be non-negative")

    width, height = max_x + 1, max_y + 1
    if max_cells is not None and width * height > max_cells:
        raise GridTooLargeError(
            f"Grid of {width}x{height} exceeds the limit of {max_cells} cells"
        )

    grid = [[blank] * width for _ in range(height)]
    for cell in cells:
        grid[cell.y][cell.x] = cell.c
    return grid


def render_lines(
    cells: Sequence[PositionedCharacter],
    *,
    blank: str = " ",
    max_cells: Optional[int] = None,
) -> List[str]:
    """Return the printable rows, highest ``y`` first, trailing blanks trimmed."""
    grid = build_grid(cells, blank=blank, max_cells=max_cells)
    return ["".join(row).rstrip(blank) for row in reversed(grid)]


def write_grid(lines: Iterable[str], stream: TextIO | None = None) -> None:
    """Write one line per grid row to ``stream`` (stdout by default)."""
    out = sys.stdout if stream is None else stream
    for line in lines:
        out.write(f"{line}\n")


__all__ = ["build_grid", "grid_bounds", "render_lines", "write_grid"]
