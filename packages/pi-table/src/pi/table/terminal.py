"""Terminal queries: output width and whether stdout is a terminal.

Both lookups are one-shot and never raise. A failed size query means
"unknown", which callers treat like a non-terminal.
"""

from __future__ import annotations

import logging
import os
import sys

logger = logging.getLogger(__name__)


def terminal_size() -> tuple[int, int] | None:
    """Return ``(columns, rows)`` of the terminal attached to stdout, or ``None``."""
    try:
        size = os.get_terminal_size(sys.stdout.fileno())
    except (AttributeError, ValueError, OSError) as exc:
        logger.debug("Terminal size unavailable: %s", exc)
        return None
    return size.columns, size.lines


def is_terminal() -> bool:
    """Return ``True`` if stdout is an interactive terminal."""
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False
