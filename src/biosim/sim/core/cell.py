from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence, Tuple

from .direction import Direction
from .gene import Gene, Genome
from .neural_net import NeuralNet
from ..systems.phenotype import create_color

if TYPE_CHECKING:
    from .rng import DeterministicRng


@dataclass(slots=True)
class MovementData:
    x: int
    y: int
    last_move_dir: Direction

    @property
    def coords(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def set_coords(self, coords: Tuple[int, int]) -> None:
        self.x, self.y = coords


@dataclass(slots=True)
class NeuronData:
    neural_net: NeuralNet
    oscillator_period: int


@dataclass(slots=True)
class OtherData:
    color: Tuple[int, int, int]
    genome: Genome
    is_alive: bool = True


CellParts = Tuple[MovementData, NeuronData, OtherData]


@dataclass(slots=True)
class Cell:
    """A living cell as held by the world: its three parts plus bookkeeping."""

    id: int
    generation: int
    movement: MovementData
    neuron: NeuronData
    other: OtherData
    moves: int = 0

    @property
    def alive(self) -> bool:
        return self.other.is_alive


def new_cell(
    genome: Sequence[Gene], oscillator_period: int, steps_per_gen: int, rng: "DeterministicRng"
) -> CellParts:
    """Birth constructor shared by random creation and both reproduction modes."""
    genome = tuple(genome)
    movement = MovementData(x=0, y=0, last_move_dir=Direction.random(rng))
    neuron = NeuronData(
        neural_net=NeuralNet(genome),
        oscillator_period=oscillator_period % steps_per_gen,
    )
    other = OtherData(color=create_color(genome), genome=genome)
    return movement, neuron, other
