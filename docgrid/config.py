"""Configuration for controlling fetching and grid rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_CELLS = 10_000_000


@dataclass(slots=True)
class GridConfig:
    """Runtime configuration for the fetch and render pipeline.

    Attributes:
        timeout: Seconds to wait for the HTTP request before giving up.
        blank: Character used to fill unoccupied grid cells. Trailing
            occurrences are trimmed from every printed row.
        max_cells: Upper bound on ``(max_x + 1) * (max_y + 1)``. ``None``
            disables the check.
        verbose: Enable verbose logging for debugging.
    """

    timeout: float = DEFAULT_TIMEOUT
    blank: str = " "
    max_cells: Optional[int] = DEFAULT_MAX_CELLS
    verbose: bool = False

    def __post_init__(self) -> None:
        if len(self.blank) != 1:
            raise ValueError("blank must be a single character")
        if self.timeout <= 0:
            raise ValueError("timeout must be > 0")
        if self.max_cells is not None and self.max_cells < 1:
            raise ValueError("max_cells must be >= 1 or None")


__all__ = ["DEFAULT_MAX_CELLS", "DEFAULT_TIMEOUT", "GridConfig"]
