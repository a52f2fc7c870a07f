"""TreeConfig, RenderConfig and OutputFormat for output configuration.

Both configs are frozen (immutable) dataclasses validated on construction.
TreeConfig carries what the tree printer needs; RenderConfig adds the choice
of output format for the public ``render`` functions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["OutputFormat", "RenderConfig", "TreeConfig"]


class OutputFormat(StrEnum):
    """Which renderer produces the output.

    - TREE: indented tree diagram with box-drawing connectors.
    - JSON: pretty-printed JSON with sorted keys.
    """

    TREE = auto()
    JSON = auto()


def _check_width(max_width: int) -> None:
    if max_width < 1:
        msg = f"max_width must be >= 1, got {max_width}"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class TreeConfig:
    """Immutable configuration for the tree printer.

    Attributes:
        max_width:  Maximum line width, prefix and connectors included.
        use_colors: Emit ANSI colors and measure widths ignoring them.
    """

    max_width: int = 80
    use_colors: bool = True

    def __post_init__(self) -> None:
        _check_width(self.max_width)


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable configuration for the public render functions.

    Attributes:
        output_format: Tree diagram or JSON document.
        use_colors:    Colorize tree output. JSON output is never colored.
        max_width:     Tree line width limit.
    """

    output_format: OutputFormat = OutputFormat.TREE
    use_colors: bool = True
    max_width: int = 80

    def __post_init__(self) -> None:
        _check_width(self.max_width)

    def tree_config(self) -> TreeConfig:
        return TreeConfig(max_width=self.max_width, use_colors=self.use_colors)
