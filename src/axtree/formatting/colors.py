"""ANSI color codes and color-aware width measurement.

ColorCode is a closed StrEnum of the escape sequences the formatters emit.
``strip_colors`` removes exactly those sequences (other escapes are left
alone) and ``visible_length`` measures what remains. Width is counted in code
points, the same unit the wrapper and tree printer use for every limit.

The text wrapper re-measures the unconsumed text on every iteration, so
``strip_colors`` results are memoised in a bounded LRU cache.
"""

from __future__ import annotations

import re
import threading
from enum import StrEnum

from cachetools import LRUCache, cached

__all__ = ["ColorCode", "colorize", "strip_colors", "visible_length"]


class ColorCode(StrEnum):
    """Terminal color and style escape sequences.

    Members are plain strings, so they concatenate directly into output.
    """

    RESET = "\x1b[0m"
    BOLD = "\x1b[1m"
    GRAY = "\x1b[90m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    BLUE = "\x1b[34m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"
    WHITE = "\x1b[37m"
    BRIGHT_BLUE = "\x1b[94m"
    BRIGHT_MAGENTA = "\x1b[95m"
    BRIGHT_CYAN = "\x1b[96m"


# Alternation of the literal codes only; unknown escapes must survive.
_KNOWN_CODES = re.compile("|".join(re.escape(code.value) for code in ColorCode))


@cached(cache=LRUCache(maxsize=2048), lock=threading.Lock())
def strip_colors(text: str) -> str:
    """Remove every known color code from ``text``.

    Removal repeats until no known code is left, because deleting one code
    can splice its neighbours into a new one (``"\\x1b[\\x1b[0m1m"``). The
    result therefore never contains a known code and stripping is idempotent.

    Args:
        text: Text that may contain color codes.

    Returns:
        The text with all known codes removed.
    """
    count = 1
    while count:
        text, count = _KNOWN_CODES.subn("", text)
    return text


def visible_length(text: str) -> int:
    """Return the number of characters left after stripping color codes."""
    return len(strip_colors(text))


def colorize(text: str, code: str, enabled: bool = True) -> str:
    """Wrap ``text`` in ``code`` and a reset, or return it unchanged.

    Nothing is added when coloring is disabled or ``code`` is empty.
    """
    if not enabled or not code:
        return text
    return f"{code}{text}{ColorCode.RESET}"
