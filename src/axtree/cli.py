"""Command-line shell: read a node document and print it as a tree or JSON.

Usage::

    axtree snapshot.json                  # tree output with colors
    axtree snapshot.json --format json    # JSON output
    cat snapshot.json | axtree --no-color --width 120

The input is a JSON node object (its children are printed as top-level
siblings, the object itself being the application container) or an array of
node objects. ``-`` or no argument reads standard input.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from collections.abc import Sequence

from axtree import __version__
from axtree.api import load_nodes, render, render_roots
from axtree.formatting.config import OutputFormat, RenderConfig

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if value < 1:
        raise argparse.ArgumentTypeError(f"invalid width {raw!r}: must be a positive number")
    return value


def _output_format(raw: str) -> OutputFormat:
    try:
        return OutputFormat(raw.lower())
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid format {raw!r}: use 'tree' or 'json'") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="axtree",
        description="Print an accessibility element tree as an indented diagram or JSON.",
        epilog="Colors are also disabled when the NO_COLOR environment variable is non-empty.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="JSON file with a node object or an array of nodes (default: stdin)",
    )
    parser.add_argument(
        "-f",
        "--format",
        type=_output_format,
        default=OutputFormat.TREE,
        metavar="{tree,json}",
        help="output format (default: tree)",
    )
    parser.add_argument("--no-color", action="store_true", help="disable colored output")
    parser.add_argument(
        "-w",
        "--width",
        type=_positive_int,
        default=80,
        help="column width for tree output (default: 80)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug details to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit status.

    The rendered text is always followed by a newline, so a container with no
    children prints a single empty line in tree mode.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = RenderConfig(
        output_format=args.format,
        use_colors=not args.no_color and not os.environ.get("NO_COLOR"),
        max_width=args.width,
    )

    try:
        text = _read_text(args.input)
        nodes = load_nodes(text)
        if text.lstrip().startswith("["):
            logger.debug("loaded %d root nodes from %s", len(nodes), args.input)
            output = render_roots(nodes, config)
        else:
            node = nodes[0]
            logger.debug("loaded node %r with %d children", node.role, len(node.children))
            output = render(node, config)
    except (OSError, json.JSONDecodeError, TypeError, ValueError) as exc:
        print(f"axtree: error: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0
