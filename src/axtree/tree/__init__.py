"""Tree subpackage for the accessibility node model.

Re-exports the public API for the tree module:
- Node: frozen dataclass representing one accessibility element
- Frame: frozen dataclass holding an element's screen frame
- NodeBuilder: converts JSON documents into Node trees
- TRAIT_NAMES / decode_traits / normalize_traits: trait bitmask decoding
"""

from axtree.tree.builder import NodeBuilder
from axtree.tree.nodes import Frame, Node
from axtree.tree.traits import TRAIT_NAMES, decode_traits, normalize_traits

__all__ = [
    "TRAIT_NAMES",
    "Frame",
    "Node",
    "NodeBuilder",
    "decode_traits",
    "normalize_traits",
]
