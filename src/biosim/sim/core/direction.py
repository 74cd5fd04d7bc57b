from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Dict, Tuple

if TYPE_CHECKING:
    from .rng import DeterministicRng


class Direction(str, Enum):
    NORTH = "N"
    NORTH_EAST = "NE"
    EAST = "E"
    SOUTH_EAST = "SE"
    SOUTH = "S"
    SOUTH_WEST = "SW"
    WEST = "W"
    NORTH_WEST = "NW"

    @property
    def offset(self) -> Tuple[int, int]:
        return _OFFSETS[self]

    @staticmethod
    def random(rng: "DeterministicRng") -> "Direction":
        return _ORDER[rng.next_int(len(_ORDER))]

    @staticmethod
    def from_offset(dx: int, dy: int) -> "Direction":
        try:
            return _FROM_OFFSET[(dx, dy)]
        except KeyError:
            raise ValueError(f"No compass direction for offset ({dx}, {dy})") from None

    def rotate_cw90(self) -> "Direction":
        return _CW90[self]

    def rotate_ccw90(self) -> "Direction":
        return _CCW90[self]

    def rotate180(self) -> "Direction":
        return _ROT180[self]


_ORDER = (
    Direction.NORTH,
    Direction.NORTH_EAST,
    Direction.EAST,
    Direction.SOUTH_EAST,
    Direction.SOUTH,
    Direction.SOUTH_WEST,
    Direction.WEST,
    Direction.NORTH_WEST,
)

# y grows towards the north.
_OFFSETS: Dict[Direction, Tuple[int, int]] = {
    Direction.NORTH: (0, 1),
    Direction.NORTH_EAST: (1, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH_EAST: (1, -1),
    Direction.SOUTH: (0, -1),
    Direction.SOUTH_WEST: (-1, -1),
    Direction.WEST: (-1, 0),
    Direction.NORTH_WEST: (-1, 1),
}

_FROM_OFFSET: Dict[Tuple[int, int], Direction] = {
    (0, 1): Direction.NORTH,
    (1, 1): Direction.NORTH_EAST,
    (1, 0): Direction.EAST,
    (1, -1): Direction.SOUTH_EAST,
    (0, -1): Direction.SOUTH,
    (-1, -1): Direction.SOUTH_WEST,
    (-1, 0): Direction.WEST,
    (-1, 1): Direction.NORTH_WEST,
}

_CCW90: Dict[Direction, Direction] = {
    Direction.NORTH: Direction.WEST,
    Direction.NORTH_EAST: Direction.NORTH_WEST,
    Direction.EAST: Direction.NORTH,
    Direction.SOUTH_EAST: Direction.NORTH_EAST,
    Direction.SOUTH: Direction.EAST,
    Direction.SOUTH_WEST: Direction.SOUTH_EAST,
    Direction.WEST: Direction.SOUTH,
    Direction.NORTH_WEST: Direction.SOUTH_WEST,
}

_CW90: Dict[Direction, Direction] = {
    Direction.WEST: Direction.NORTH,
    Direction.NORTH_WEST: Direction.NORTH_EAST,
    Direction.NORTH: Direction.EAST,
    Direction.NORTH_EAST: Direction.SOUTH_EAST,
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH_EAST: Direction.SOUTH_WEST,
    Direction.SOUTH: Direction.WEST,
    Direction.SOUTH_WEST: Direction.NORTH_WEST,
}

_ROT180: Dict[Direction, Direction] = {
    Direction.NORTH: Direction.SOUTH,
    Direction.NORTH_EAST: Direction.SOUTH_WEST,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH_EAST: Direction.NORTH_WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.SOUTH_WEST: Direction.NORTH_EAST,
    Direction.WEST: Direction.EAST,
    Direction.NORTH_WEST: Direction.SOUTH_EAST,
}
