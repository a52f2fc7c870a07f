"""JSON formatter for Node trees.

Produces a pretty-printed document with two-space indentation and keys sorted
alphabetically at every level. Absent fields are omitted, as are empty
``traits`` and ``children`` arrays; children keep their original order.
"""

from __future__ import annotations

import json
import logging

from axtree.tree.nodes import Node

__all__ = ["format_json"]

logger = logging.getLogger(__name__)


def format_json(node: Node) -> str:
    """Encode ``node`` and its subtree as a JSON string.

    Non-finite frame numbers (NaN, infinity) have no JSON representation, and a
    tree nested past the interpreter recursion limit cannot be walked. When
    encoding fails the error is logged and a diagnostic string is returned in
    place of the document.

    Args:
        node: The root node.

    Returns:
        The JSON text, or ``"Error encoding JSON: <reason>"``.
    """
    try:
        return json.dumps(
            node.to_dict(),
            indent=2,
            sort_keys=True,
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError, RecursionError) as exc:
        logger.warning("could not encode node tree as JSON: %s", exc)
        return f"Error encoding JSON: {exc}"
