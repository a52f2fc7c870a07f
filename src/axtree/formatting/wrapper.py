"""Prefix-preserving text wrapping with optional color-aware measurement.

``wrap`` breaks text into lines no wider than ``max_width`` once the prefix is
added. It prefers the last space inside the available width, drops that
space, and falls back to a hard cut when a run has no space at all.

With ``use_colors=True`` widths are measured with ``visible_length`` so color
codes in the prefix or text do not count against the limit.
"""

from __future__ import annotations

from typing import TextIO

from axtree.formatting.colors import ColorCode, visible_length

__all__ = ["print_wrapped", "wrap"]


def wrap(text: str, prefix: str, max_width: int, use_colors: bool = False) -> list[str]:
    """Wrap ``text`` into prefixed lines of at most ``max_width`` characters.

    The space left for text is ``max_width`` minus the prefix width, floored
    at 1: a prefix as wide as the line still makes progress one character at
    a time instead of looping forever.

    Args:
        text:       The text to wrap.
        prefix:     String prepended to every line (e.g. tree indentation).
        max_width:  Maximum line width including the prefix.
        use_colors: Measure widths ignoring known color codes.

    Returns:
        The wrapped lines, each starting with ``prefix``. Empty for empty text.

    Example::

        wrap("Hello World Extra", "", 12)   # ["Hello World", "Extra"]
        wrap("Hi", "", 1)                   # ["H", "i"]
    """
    measure = visible_length if use_colors else len
    available = max(1, max_width - measure(prefix))

    lines: list[str] = []
    remaining = text
    while remaining:
        if measure(remaining) <= available:
            lines.append(f"{prefix}{remaining}")
            break

        space = remaining.rfind(" ", 0, available)
        if space != -1:
            lines.append(f"{prefix}{remaining[:space]}")
            remaining = remaining[space + 1 :]
        else:
            # no break point in range: hard cut
            lines.append(f"{prefix}{remaining[:available]}")
            remaining = remaining[available:]

    return lines


def print_wrapped(
    text: str,
    prefix: str,
    max_width: int,
    color: str = "",
    file: TextIO | None = None,
) -> None:
    """Wrap ``text`` and print each line, optionally wrapped in ``color``.

    Measurement is color-aware exactly when a color is given.
    """
    for line in wrap(text, prefix, max_width, use_colors=bool(color)):
        if color:
            print(f"{color}{line}{ColorCode.RESET}", file=file)
        else:
            print(line, file=file)
