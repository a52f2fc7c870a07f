"""Trait decoding: 64-bit accessibility trait words to ordered trait names.

Accessibility traits arrive either as an already human-readable string or as a
packed bitmask. ``decode_traits`` handles the bitmask form using a fixed table
indexed by bit position; ``normalize_traits`` folds every accepted input form
into the tuple of names stored on a Node, so renderers never decode again.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

__all__ = ["TRAIT_NAMES", "decode_traits", "normalize_traits"]

logger = logging.getLogger(__name__)

# Index is the bit position; order is the decode order.
TRAIT_NAMES: tuple[str, ...] = (
    "button",
    "link",
    "image",
    "selected",
    "playsSound",
    "keyboardKey",
    "staticText",
    "summaryElement",
    "notEnabled",
    "updatesFrequently",
    "searchField",
    "startsMediaSession",
    "adjustable",
    "allowsDirectInteraction",
    "causesPageTurn",
    "tabBar",
    "header",
    "toggle",
)

_WORD_MASK = (1 << 64) - 1


def decode_traits(bitmask: int) -> list[str]:
    """Decode a trait bitmask into trait names.

    Bits 0-17 map to ``TRAIT_NAMES``; every higher bit is ignored. The value
    is read as an unsigned 64-bit word, so negative ints decode as their
    two's-complement pattern.

    Args:
        bitmask: Packed trait flags.

    Returns:
        Names of the set bits in ascending bit order. ``[]`` for 0.
    """
    word = bitmask & _WORD_MASK
    return [name for bit, name in enumerate(TRAIT_NAMES) if word >> bit & 1]


def normalize_traits(raw: int | str | Sequence[str] | None) -> tuple[str, ...] | None:
    """Fold a raw trait attribute into the tuple form stored on a Node.

    - None stays None.
    - An int is decoded once; a mask with no known bits becomes None.
    - A string is a single, already readable trait description.
    - A sequence of strings is kept in its given order.

    Raises:
        TypeError: For booleans, non-string sequence items, or any other type.
    """
    if raw is None:
        return None

    # bool subclasses int; a bare true/false is not a trait word
    if isinstance(raw, bool):
        raise TypeError("traits must be a bitmask, a string or a list of strings, got bool")

    if isinstance(raw, int):
        decoded = decode_traits(raw)
        if not decoded:
            logger.debug("trait bitmask %#x has no known bits", raw)
            return None
        return tuple(decoded)

    if isinstance(raw, str):
        return (raw,)

    if isinstance(raw, Sequence):
        items = tuple(raw)
        for item in items:
            if not isinstance(item, str):
                raise TypeError(f"trait names must be strings, got {type(item)!r}")
        return items

    raise TypeError(f"Unsupported traits value type: {type(raw)!r}")
