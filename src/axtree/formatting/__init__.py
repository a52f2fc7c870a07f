"""Formatting subpackage: color codes, wrapping, tree and JSON output.

Re-exports:
- ColorCode / strip_colors / visible_length / colorize: ANSI handling
- wrap / print_wrapped: prefix-preserving text wrapping
- TreeConfig / RenderConfig / OutputFormat: output configuration
- format_tree / format_roots / print_tree / print_roots: tree diagrams
- format_json: sorted, empty-omitting JSON documents
"""

from axtree.formatting.colors import ColorCode, colorize, strip_colors, visible_length
from axtree.formatting.config import OutputFormat, RenderConfig, TreeConfig
from axtree.formatting.json_formatter import format_json
from axtree.formatting.tree_printer import (
    PLACEHOLDER_ROLE,
    format_roots,
    format_tree,
    print_roots,
    print_tree,
)
from axtree.formatting.wrapper import print_wrapped, wrap

__all__ = [
    "PLACEHOLDER_ROLE",
    "ColorCode",
    "OutputFormat",
    "RenderConfig",
    "TreeConfig",
    "colorize",
    "format_json",
    "format_roots",
    "format_tree",
    "print_roots",
    "print_tree",
    "print_wrapped",
    "strip_colors",
    "visible_length",
    "wrap",
]
