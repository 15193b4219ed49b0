"""Plain text sources and sinks for numbers kept on disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_first_line(path: PathLike) -> Optional[str]:
    """Return the first line of ``path``, or None if it cannot be read."""
    try:
        lines = Path(path).read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError):
        logger.warning("Could not read number from %s", path, exc_info=True)
        return None
    if not lines:
        return None
    return lines[0]


def write_text(path: PathLike, text: str) -> bool:
    """Store ``text`` at ``path``, replacing its contents."""
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError:
        logger.warning("Could not write number to %s", path, exc_info=True)
        return False
    logger.debug("Wrote %d characters to %s", len(text), path)
    return True
