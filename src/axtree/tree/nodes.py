"""Node and Frame dataclasses for the accessibility tree representation.

Provides the data types every renderer consumes. Nodes are produced either by
hand or by NodeBuilder from a JSON document, and are never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["Frame", "Node"]


@dataclass(frozen=True, slots=True)
class Frame:
    """Position and size of an element in screen points.

    Attributes:
        x:      Horizontal origin.
        y:      Vertical origin.
        width:  Element width.
        height: Element height.
    """

    x: float
    y: float
    width: float
    height: float

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True, slots=True)
class Node:
    """A node in the accessibility tree.

    Attributes:
        role:        Element kind (e.g. "AXButton"); None when unknown.
        label:       Accessibility label.
        title:       Title; shown in the tree only when label is missing.
        value:       Current value rendered as a string.
        identifier:  Accessibility identifier used by UI tests.
        hint:        Hint text.
        traits:      Decoded trait names in ascending bit order, or None.
        frame:       Screen frame; only emitted by the JSON formatter.
        children:    Child nodes in render order. A node without children is
                     a leaf.

    Lists passed for ``traits`` or ``children`` are frozen to tuples so a
    constructed node is immutable all the way down.
    """

    role: str | None = None
    label: str | None = None
    title: str | None = None
    value: str | None = None
    identifier: str | None = None
    hint: str | None = None
    traits: tuple[str, ...] | None = None
    frame: Frame | None = None
    children: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        # frozen dataclass: bypass __setattr__ to normalise sequences
        if self.traits is not None and not isinstance(self.traits, tuple):
            object.__setattr__(self, "traits", tuple(self.traits))
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def display_label(self) -> str | None:
        """Label for display, falling back to title when label is empty."""
        return self.label or self.title

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping with absent and empty fields omitted.

        Strings are kept whenever they are not None (an empty string is still
        a present value). ``traits`` and ``children`` are dropped when empty.
        """
        data: dict[str, Any] = {}
        for key in ("role", "label", "title", "value", "identifier", "hint"):
            field_value = getattr(self, key)
            if field_value is not None:
                data[key] = field_value
        if self.traits:
            data["traits"] = list(self.traits)
        if self.frame is not None:
            data["frame"] = self.frame.to_dict()
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data

