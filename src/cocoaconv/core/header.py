"""
Header input resolution.

A run reads either the header named on the command line or the configured
fallback header. Nothing is read lazily: the whole file is loaded before
any output is produced.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import InputUnavailableError

logger = logging.getLogger(__name__)


def resolve_header_path(explicit: Path | None, fallback: Path) -> Path:
    """
    Pick the header to read.

    Args:
        explicit: Path given by the user, if any
        fallback: Configured default location

    Raises:
        InputUnavailableError: If no path was given and the fallback is missing
    """
    if explicit is not None:
        return explicit
    if not fallback.is_file():
        raise InputUnavailableError(fallback)
    logger.info("No header given; using fallback %s", fallback)
    return fallback


def read_header_lines(path: Path) -> list[str]:
    """Read all lines of a header, keeping line endings."""
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            return f.readlines()
    except OSError as e:
        logger.debug("Cannot open %s: %s", path, e)
        raise InputUnavailableError(path) from e
