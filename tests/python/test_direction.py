from __future__ import annotations

from collections import Counter

import pytest

from biosim.sim.core.direction import Direction
from biosim.sim.core.rng import DeterministicRng


def test_offsets_match_compass():
    assert Direction.NORTH.offset == (0, 1)
    assert Direction.NORTH_EAST.offset == (1, 1)
    assert Direction.EAST.offset == (1, 0)
    assert Direction.SOUTH_EAST.offset == (1, -1)
    assert Direction.SOUTH.offset == (0, -1)
    assert Direction.SOUTH_WEST.offset == (-1, -1)
    assert Direction.WEST.offset == (-1, 0)
    assert Direction.NORTH_WEST.offset == (-1, 1)


def test_from_offset_inverts_every_offset():
    for direction in Direction:
        assert Direction.from_offset(*direction.offset) is direction


@pytest.mark.parametrize("offset", [(0, 0), (2, 0), (0, -2), (5, 5)])
def test_from_offset_rejects_non_unit_offsets(offset):
    with pytest.raises(ValueError):
        Direction.from_offset(*offset)


def test_rotations_compose_to_identity():
    for direction in Direction:
        assert direction.rotate180().rotate180() is direction
        assert direction.rotate_ccw90().rotate_cw90() is direction
        assert direction.rotate_cw90().rotate_ccw90() is direction
        assert direction.rotate_cw90().rotate_cw90() is direction.rotate180()


def test_rotation_tables():
    assert Direction.NORTH.rotate_cw90() is Direction.EAST
    assert Direction.NORTH.rotate_ccw90() is Direction.WEST
    assert Direction.NORTH_EAST.rotate_ccw90() is Direction.NORTH_WEST
    assert Direction.SOUTH_WEST.rotate_cw90() is Direction.NORTH_WEST
    assert Direction.SOUTH_EAST.rotate180() is Direction.NORTH_WEST


def test_rotated_offsets_are_perpendicular_or_opposite():
    for direction in Direction:
        dx, dy = direction.offset
        cw = direction.rotate_cw90().offset
        ccw = direction.rotate_ccw90().offset
        assert cw == (dy, -dx)
        assert ccw == (-dy, dx)
        assert direction.rotate180().offset == (-dx, -dy)


def test_random_covers_all_directions():
    rng = DeterministicRng(5)
    counts = Counter(Direction.random(rng) for _ in range(4000))
    assert set(counts) == set(Direction)
    assert min(counts.values()) > 350
