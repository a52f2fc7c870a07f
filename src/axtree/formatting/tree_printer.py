"""Tree printer: renders Node trees as indented diagrams.

Each node produces a main line (connector + role) followed by one line per
present attribute and then its children. Attribute order is fixed:

    label (or title), value, traits, id, hint

An attribute that would overflow ``max_width`` becomes a ``name:`` header
followed by the value wrapped two columns deeper.

Example output (colors off)::

    └── AXWindow
        label: Settings
        └── AXGroup
            label: Actions
            ├── AXButton
            │   label: Delete
            └── AXButton
                label: Cancel
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

from axtree.formatting.colors import ColorCode, colorize, visible_length
from axtree.formatting.config import TreeConfig
from axtree.formatting.wrapper import wrap
from axtree.tree.nodes import Node

__all__ = [
    "PLACEHOLDER_ROLE",
    "format_roots",
    "format_tree",
    "print_roots",
    "print_tree",
]

PLACEHOLDER_ROLE = "AXElement"

_LAST_CONNECTOR = "└── "
_MID_CONNECTOR = "├── "
_LAST_CONTINUATION = "    "
_MID_CONTINUATION = "│   "

# Extra indent for the wrapped body of an attribute that did not fit
_WRAP_INDENT = "  "


def format_tree(
    node: Node,
    is_last: bool = True,
    prefix: str = "",
    config: TreeConfig | None = None,
) -> str:
    """Format a node and its descendants as a tree diagram.

    Args:
        node:    The node to format.
        is_last: Whether the node is the last of its siblings.
        prefix:  Indentation inherited from the ancestors.
        config:  Width and color settings. Defaults to ``TreeConfig()``.

    Returns:
        The diagram lines joined by newlines, without a trailing newline.
    """
    cfg = config if config is not None else TreeConfig()
    return "\n".join(_node_lines(node, is_last, prefix, cfg))


def format_roots(nodes: Sequence[Node], config: TreeConfig | None = None) -> str:
    """Format several nodes as top-level siblings."""
    cfg = config if config is not None else TreeConfig()
    last = len(nodes) - 1
    return "\n".join(
        format_tree(node, is_last=index == last, prefix="", config=cfg)
        for index, node in enumerate(nodes)
    )


def print_tree(
    node: Node,
    is_last: bool = True,
    prefix: str = "",
    config: TreeConfig | None = None,
    file: TextIO | None = None,
) -> None:
    print(format_tree(node, is_last=is_last, prefix=prefix, config=config), file=file)


def print_roots(
    nodes: Sequence[Node],
    config: TreeConfig | None = None,
    file: TextIO | None = None,
) -> None:
    print(format_roots(nodes, config=config), file=file)


def _node_lines(node: Node, is_last: bool, prefix: str, config: TreeConfig) -> list[str]:
    """Recursively collect the lines for ``node`` and its subtree."""
    connector = _LAST_CONNECTOR if is_last else _MID_CONNECTOR
    continuation = _LAST_CONTINUATION if is_last else _MID_CONTINUATION

    role = node.role if node.role is not None else PLACEHOLDER_ROLE
    lines = [f"{prefix}{connector}{colorize(role, ColorCode.MAGENTA, config.use_colors)}"]

    attr_prefix = prefix + continuation
    traits = f"[{', '.join(node.traits)}]" if node.traits else None

    for name, attr_value, color in (
        ("label", node.display_label, ColorCode.BOLD),
        ("value", node.value, ""),
        ("traits", traits, ColorCode.GRAY),
        ("id", node.identifier, ColorCode.CYAN),
        ("hint", node.hint, ""),
    ):
        lines.extend(
            _attribute_lines(
                name,
                attr_value,
                attr_prefix,
                config,
                color if config.use_colors else "",
            )
        )

    last_child = len(node.children) - 1
    for index, child in enumerate(node.children):
        lines.extend(_node_lines(child, index == last_child, attr_prefix, config))

    return lines


def _attribute_lines(
    name: str,
    value: str | None,
    prefix: str,
    config: TreeConfig,
    color: str,
) -> list[str]:
    """Format one ``name: value`` attribute, wrapping it when too wide.

    Args:
        name:   Attribute label shown before the colon.
        value:  Attribute value; None or "" produces no lines.
        prefix: Indentation for the attribute lines.
        config: Width and color settings.
        color:  Color code for the value, "" for none.

    Returns:
        Zero, one, or (header + wrapped body) lines.
    """
    if not value:
        return []

    single = f"{prefix}{name}: {value}"
    width = visible_length(single) if config.use_colors else len(single)
    if width <= config.max_width:
        return [f"{prefix}{name}: {colorize(value, color)}"]

    lines = [f"{prefix}{name}:"]
    for line in wrap(value, prefix + _WRAP_INDENT, config.max_width):
        lines.append(colorize(line, color))
    return lines
