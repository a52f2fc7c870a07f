"""Public API functions for axtree.

This module provides the user-facing entry points: ``render`` and
``render_roots`` dispatch on ``RenderConfig.output_format``, and
``load_nodes`` turns JSON text into Node roots. Every call is a pure function
of its arguments; nothing is cached between calls apart from the color-code
stripping memo.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from axtree.formatting.config import OutputFormat, RenderConfig
from axtree.formatting.json_formatter import format_json
from axtree.formatting.tree_printer import format_roots
from axtree.tree.builder import NodeBuilder
from axtree.tree.nodes import Node

__all__ = ["load_nodes", "render", "render_roots"]


def render(node: Node, config: RenderConfig | None = None) -> str:
    """Render an application's node tree.

    In tree mode the node is treated as the application container and its
    children are drawn as top-level siblings. In JSON mode the whole node,
    container included, is encoded.

    Args:
        node:   Root node of the tree.
        config: Output settings. Defaults to ``RenderConfig()``.

    Returns:
        The rendered text without a trailing newline.
    """
    cfg = config if config is not None else RenderConfig()
    if cfg.output_format is OutputFormat.JSON:
        return format_json(node)
    return format_roots(node.children, cfg.tree_config())


def render_roots(nodes: Sequence[Node], config: RenderConfig | None = None) -> str:
    """Render several nodes as top-level siblings.

    JSON output has a single top-level object, so the nodes are wrapped in a
    synthetic node holding only ``children``.

    Args:
        nodes:  Root nodes in display order.
        config: Output settings. Defaults to ``RenderConfig()``.

    Returns:
        The rendered text without a trailing newline.
    """
    cfg = config if config is not None else RenderConfig()
    if cfg.output_format is OutputFormat.JSON:
        return format_json(Node(children=tuple(nodes)))
    return format_roots(nodes, cfg.tree_config())


def load_nodes(source: str) -> tuple[Node, ...]:
    """Parse JSON text holding one node object or an array of them.

    Raises:
        json.JSONDecodeError: If ``source`` is not valid JSON.
        TypeError: If the document does not have the node shape.
        ValueError: If a frame is incomplete.
    """
    return NodeBuilder().build_many(json.loads(source))
