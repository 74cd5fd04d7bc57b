from __future__ import annotations

from typing import Sequence, Tuple

from ..core.gene import Gene, NodeType

_MAX_COLOR_VALUE = 0xB0
_MAX_LUMA_VALUE = 0xB0


def create_color(genome: Sequence[Gene]) -> Tuple[int, int, int]:
    """Derive a display color from the first and last genes only."""
    if not genome:
        raise ValueError("Cannot color an empty genome")
    first = genome[0]
    last = genome[-1]
    c = (
        int(first.head_type is NodeType.INPUT)
        | (int(last.head_type is NodeType.INPUT) << 1)
        | (int(first.tail_type is NodeType.INNER) << 2)
        | (int(last.tail_type is NodeType.INNER) << 3)
        | ((first.head_node.index & 1) << 4)
        | ((first.tail_node.index & 1) << 5)
        | ((last.head_node.index & 1) << 6)
        | ((last.tail_node.index & 1) << 7)
    )
    red = c
    green = (c & 0x1F) << 3
    blue = (c & 7) << 5

    if (red * 3 + green + blue * 4) // 8 > _MAX_LUMA_VALUE:
        if red > _MAX_COLOR_VALUE:
            red %= _MAX_COLOR_VALUE
        if green > _MAX_COLOR_VALUE:
            green %= _MAX_COLOR_VALUE
        if blue > _MAX_COLOR_VALUE:
            blue %= _MAX_COLOR_VALUE
    return red, green, blue
