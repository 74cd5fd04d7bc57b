from __future__ import annotations

import pytest

from biosim.sim.core.cell import MovementData
from biosim.sim.core.config import SelectionConfig
from biosim.sim.core.direction import Direction
from biosim.sim.systems.selection import survives


def _at(x: int, y: int) -> MovementData:
    return MovementData(x, y, Direction.NORTH)


@pytest.mark.parametrize(
    "region, inside, outside",
    [
        ("east", (5, 0), (4, 9)),
        ("west", (4, 9), (5, 0)),
        ("north", (0, 5), (9, 4)),
        ("south", (9, 4), (0, 5)),
        ("center", (5, 4), (0, 0)),
    ],
)
def test_half_grid_regions(region, inside, outside):
    selection = SelectionConfig(region=region, fraction=0.5)
    assert survives(_at(*inside), selection, 10, 10)
    assert not survives(_at(*outside), selection, 10, 10)


def test_full_fraction_keeps_everyone():
    selection = SelectionConfig(region="east", fraction=1.0)
    assert all(survives(_at(x, 3), selection, 10, 10) for x in range(10))


def test_unknown_region_is_rejected():
    with pytest.raises(ValueError):
        survives(_at(0, 0), SelectionConfig(region="up"), 10, 10)
