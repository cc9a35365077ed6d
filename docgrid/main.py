#!/usr/bin/env python3
"""Command line entry point: print the grid hidden in a shared document."""

from __future__ import annotations

import sys
from pathlib import Path

from .api import render_document
from .config import GridConfig
from .errors import DocGridError, UsageError
from .logging_config import configure_logging, get_logger
from .render import write_grid

logger = get_logger(__name__)

VERBOSE_FLAGS = ("-v", "--verbose")


def _parse_args(argv: list[str]) -> tuple[str, bool]:
    verbose = any(arg in VERBOSE_FLAGS for arg in argv)
    positional = [arg for arg in argv if arg not in VERBOSE_FLAGS]
    if len(positional) != 1 or positional[0].startswith("-"):
        script = Path(sys.argv[0]).name
        raise UsageError(f"Usage: {script} [-v|--verbose] <public_document_url>")
    return positional[0], verbose


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for rendering a document's coordinate table."""
    argv = list(sys.argv[1:] if argv is None else argv)

    configure_logging()
    try:
        url, verbose = _parse_args(argv)
    except UsageError as exc:
        logger.error(str(exc))
        return 1

    config = GridConfig(verbose=verbose)
    configure_logging(verbose=config.verbose)
    try:
        lines = render_document(url, config=config)
    except DocGridError as exc:
        logger.error(f"error: {exc}")
        return 1

    write_grid(lines)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual usage
    raise SystemExit(main())
