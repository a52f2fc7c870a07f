"""axtree - tree and JSON rendering for accessibility element trees."""

from __future__ import annotations

from axtree.api import load_nodes, render, render_roots
from axtree.formatting import (
    ColorCode,
    OutputFormat,
    RenderConfig,
    TreeConfig,
    format_json,
    format_roots,
    format_tree,
    strip_colors,
    visible_length,
    wrap,
)
from axtree.tree import Frame, Node, NodeBuilder, decode_traits, normalize_traits

__version__: str = "0.1.0"
__all__: list[str] = [
    "ColorCode",
    "Frame",
    "Node",
    "NodeBuilder",
    "OutputFormat",
    "RenderConfig",
    "TreeConfig",
    "decode_traits",
    "format_json",
    "format_roots",
    "format_tree",
    "load_nodes",
    "normalize_traits",
    "render",
    "render_roots",
    "strip_colors",
    "visible_length",
    "wrap",
]
