from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

import numpy as np
from pygame.math import Vector2

from ..core.config import check_grid_bounds, check_steps_per_gen
from ..core.direction import Direction
from ..core.gene import ACTION_INDEX, NodeID

if TYPE_CHECKING:
    from ..core.cell import MovementData, NeuronData
    from ..core.rng import DeterministicRng

_EAST = ACTION_INDEX[NodeID.MOVE_EAST]
_WEST = ACTION_INDEX[NodeID.MOVE_WEST]
_NORTH = ACTION_INDEX[NodeID.MOVE_NORTH]
_SOUTH = ACTION_INDEX[NodeID.MOVE_SOUTH]
_RANDOM = ACTION_INDEX[NodeID.MOVE_RANDOM]
_FORWARD = ACTION_INDEX[NodeID.MOVE_FORWARD]
_REVERSE = ACTION_INDEX[NodeID.MOVE_REVERSE]
_LEFT = ACTION_INDEX[NodeID.MOVE_LEFT]
_RIGHT = ACTION_INDEX[NodeID.MOVE_RIGHT]


def oscillator_signal(tick: int, oscillator_period: int) -> float:
    """Square wave: +1 for the first period, -1 for the next, and so on."""
    if oscillator_period <= 0:
        return 1.0
    return 1.0 - 2.0 * ((tick // oscillator_period) % 2)


def build_sensors(
    movement: MovementData,
    oscillator_period: int,
    grid_width: int,
    grid_height: int,
    steps_per_gen: int,
    tick: int,
) -> np.ndarray:
    f32 = np.float32
    return np.array(
        [
            f32(2 * movement.x) / f32(grid_width) - f32(1.0),
            f32(2 * movement.y) / f32(grid_height) - f32(1.0),
            f32(tick) / f32(steps_per_gen),
            oscillator_signal(tick, oscillator_period),
        ],
        dtype=np.float32,
    )


def action_vector(outputs: np.ndarray, last_move_dir: Direction, rng: DeterministicRng) -> Vector2:
    """Sum the action activations into a movement intent and squash each axis with tanh."""
    random_offset = Vector2(Direction.random(rng).offset)
    desired = Vector2(
        float(outputs[_EAST]) - float(outputs[_WEST]),
        float(outputs[_NORTH]) - float(outputs[_SOUTH]),
    )
    desired += random_offset * float(outputs[_RANDOM])
    desired += Vector2(last_move_dir.offset) * float(outputs[_FORWARD])
    desired += Vector2(last_move_dir.rotate180().offset) * float(outputs[_REVERSE])
    desired += Vector2(last_move_dir.rotate_ccw90().offset) * float(outputs[_LEFT])
    desired += Vector2(last_move_dir.rotate_cw90().offset) * float(outputs[_RIGHT])
    squashed = np.tanh(np.array([desired.x, desired.y], dtype=np.float32))
    return Vector2(float(squashed[0]), float(squashed[1]))


def _step_axis(value: int, amount: float, upper: int, rng: DeterministicRng) -> int:
    if rng.next_float() < abs(amount):
        if amount > 0.0:
            value += 1
        else:
            value = max(0, value - 1)
    return min(max(value, 0), upper - 1)


def one_step(
    neuron: NeuronData,
    movement: MovementData,
    grid_width: int,
    grid_height: int,
    steps_per_gen: int,
    tick: int,
    rng: DeterministicRng,
) -> Tuple[int, int]:
    """Advance one cell's network by a tick and return the coordinates it wants to occupy.

    The caller owns ``last_move_dir`` and occupancy; nothing on ``movement``
    is changed here.
    """
    check_grid_bounds(grid_width, grid_height)
    check_steps_per_gen(steps_per_gen)

    net = neuron.neural_net
    net.feed_forward(
        build_sensors(movement, neuron.oscillator_period, grid_width, grid_height, steps_per_gen, tick)
    )
    intent = action_vector(net.outputs, movement.last_move_dir, rng)

    new_x = _step_axis(movement.x, intent.x, grid_width, rng)
    new_y = _step_axis(movement.y, intent.y, grid_height, rng)
    return new_x, new_y
