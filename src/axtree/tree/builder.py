"""NodeBuilder: converts a JSON document into a typed Node tree.

Uses recursive dispatch over JSON objects. Each object becomes one Node; its
``children`` array is converted in order. Traits are normalised once here
(bitmask, single string or list of names) so the renderers only ever see
decoded names.

Unknown keys are ignored, which lets documents carry extra platform data
without breaking the loader.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from axtree.tree.nodes import Frame, Node
from axtree.tree.traits import normalize_traits

__all__ = ["NodeBuilder"]

_STRING_FIELDS = ("role", "label", "title", "value", "identifier", "hint")
_FRAME_FIELDS = ("x", "y", "width", "height")


@dataclass
class NodeBuilder:
    """Converts JSON-like mappings into Node trees.

    The accepted shape is the one ``format_json`` produces, so JSON output
    loads back into an equal tree::

        builder = NodeBuilder()
        node = builder.build({"role": "AXButton", "traits": 1})
        # node.traits == ("button",)
    """

    def build(self, data: Any) -> Node:
        """Convert one JSON object to a Node tree.

        Args:
            data: A mapping with optional ``role``, ``label``, ``title``,
                  ``value``, ``identifier``, ``hint``, ``traits``, ``frame``
                  and ``children`` keys.

        Returns:
            The root Node.

        Raises:
            TypeError:  If a field has the wrong JSON type.
            ValueError: If a frame is missing a coordinate.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"node must be a JSON object, got {type(data)!r}")

        strings: dict[str, str | None] = {}
        for key in _STRING_FIELDS:
            field_value = data.get(key)
            if field_value is not None and not isinstance(field_value, str):
                raise TypeError(f"{key!r} must be a string, got {type(field_value)!r}")
            strings[key] = field_value

        children = data.get("children")
        if children is None:
            children = []
        if not isinstance(children, list):
            raise TypeError(f"'children' must be an array, got {type(children)!r}")

        return Node(
            **strings,
            traits=normalize_traits(data.get("traits")),
            frame=self._build_frame(data.get("frame")),
            children=tuple(self.build(child) for child in children),
        )

    def build_many(self, data: Any) -> tuple[Node, ...]:
        """Convert a single JSON object or an array of them to root Nodes."""
        if isinstance(data, list):
            return tuple(self.build(item) for item in data)
        return (self.build(data),)

    def _build_frame(self, data: Any) -> Frame | None:
        """Build a Frame from ``{"x", "y", "width", "height"}``.

        Args:
            data: The raw ``frame`` value, possibly None.

        Returns:
            A Frame with float coordinates, or None when absent.
        """
        if data is None:
            return None
        if not isinstance(data, Mapping):
            raise TypeError(f"'frame' must be a JSON object, got {type(data)!r}")

        coords: dict[str, float] = {}
        for key in _FRAME_FIELDS:
            if key not in data:
                raise ValueError(f"frame is missing {key!r}")
            coord = data[key]
            # CRITICAL: bool subclasses int, reject it before the numeric check
            if isinstance(coord, bool) or not isinstance(coord, (int, float)):
                raise TypeError(f"frame {key!r} must be a number, got {type(coord)!r}")
            coords[key] = float(coord)
        return Frame(**coords)
