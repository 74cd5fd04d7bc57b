from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.cell import MovementData
    from ..core.config import SelectionConfig


def survives(movement: MovementData, selection: SelectionConfig, grid_width: int, grid_height: int) -> bool:
    """True when the cell ends the generation inside the survival region."""
    fraction = selection.fraction
    region = selection.region
    if region == "east":
        return movement.x >= grid_width * (1.0 - fraction)
    if region == "west":
        return movement.x < grid_width * fraction
    if region == "north":
        return movement.y >= grid_height * (1.0 - fraction)
    if region == "south":
        return movement.y < grid_height * fraction
    if region == "center":
        half_w = grid_width * fraction / 2.0
        half_h = grid_height * fraction / 2.0
        return (
            abs(movement.x + 0.5 - grid_width / 2.0) <= half_w
            and abs(movement.y + 0.5 - grid_height / 2.0) <= half_h
        )
    raise ValueError(f"Unknown selection region: {region}")
