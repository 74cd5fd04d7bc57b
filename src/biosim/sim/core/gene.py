from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Dict, Tuple

if TYPE_CHECKING:
    from .rng import DeterministicRng


class NodeType(int, Enum):
    INPUT = 0
    INNER = 1
    OUTPUT = 2


class NodeID(Enum):
    LOC_X = "LocX"
    LOC_Y = "LocY"
    AGE = "Age"
    OSCILLATOR = "Oscillator"
    INNER_0 = "Inner0"
    INNER_1 = "Inner1"
    INNER_2 = "Inner2"
    INNER_3 = "Inner3"
    MOVE_EAST = "MoveEast"
    MOVE_WEST = "MoveWest"
    MOVE_NORTH = "MoveNorth"
    MOVE_SOUTH = "MoveSouth"
    MOVE_RANDOM = "MoveRandom"
    MOVE_FORWARD = "MoveForward"
    MOVE_REVERSE = "MoveReverse"
    MOVE_LEFT = "MoveLeft"
    MOVE_RIGHT = "MoveRight"

    @property
    def index(self) -> int:
        return _NODE_INDEX[self]

    @property
    def node_type(self) -> NodeType:
        if self.index < INPUT_NODE_COUNT:
            return NodeType.INPUT
        if self.index < INPUT_NODE_COUNT + INNER_NODE_COUNT:
            return NodeType.INNER
        return NodeType.OUTPUT

    @staticmethod
    def from_index(index: int) -> "NodeID":
        return _NODES[index]

    @staticmethod
    def resolve(node_type: NodeType, raw_index: int) -> "NodeID":
        """Map a (type, raw index) pair onto a node, wrapping the index into range."""
        start, count = _TYPE_SPANS[node_type]
        return _NODES[start + raw_index % count]


_NODES: Tuple[NodeID, ...] = tuple(NodeID)
_NODE_INDEX: Dict[NodeID, int] = {node: i for i, node in enumerate(_NODES)}

INPUT_NODE_COUNT = 4
INNER_NODE_COUNT = 4
OUTPUT_NODE_COUNT = 9
NODE_COUNT = INPUT_NODE_COUNT + INNER_NODE_COUNT + OUTPUT_NODE_COUNT

_TYPE_SPANS: Dict[NodeType, Tuple[int, int]] = {
    NodeType.INPUT: (0, INPUT_NODE_COUNT),
    NodeType.INNER: (INPUT_NODE_COUNT, INNER_NODE_COUNT),
    NodeType.OUTPUT: (INPUT_NODE_COUNT + INNER_NODE_COUNT, OUTPUT_NODE_COUNT),
}

SENSORS: Tuple[NodeID, ...] = _NODES[:INPUT_NODE_COUNT]
ACTIONS: Tuple[NodeID, ...] = _NODES[INPUT_NODE_COUNT + INNER_NODE_COUNT :]

# Position of each action inside NeuralNet.outputs.
ACTION_INDEX: Dict[NodeID, int] = {node: i for i, node in enumerate(ACTIONS)}


_TYPE_BITS = 2
_INDEX_BITS = 6
_WEIGHT_BITS = 16

_WEIGHT_SHIFT = 0
_TAIL_INDEX_SHIFT = _WEIGHT_SHIFT + _WEIGHT_BITS
_TAIL_TYPE_SHIFT = _TAIL_INDEX_SHIFT + _INDEX_BITS
_HEAD_INDEX_SHIFT = _TAIL_TYPE_SHIFT + _TYPE_BITS
_HEAD_TYPE_SHIFT = _HEAD_INDEX_SHIFT + _INDEX_BITS

_TYPE_MASK = (1 << _TYPE_BITS) - 1
_INDEX_MASK = (1 << _INDEX_BITS) - 1
_WEIGHT_MASK = (1 << _WEIGHT_BITS) - 1
_WEIGHT_SIGN = 1 << (_WEIGHT_BITS - 1)

GENE_BITS = 32
GENE_MASK = (1 << GENE_BITS) - 1
WEIGHT_SCALE = 8192.0


def _decode_type(raw: int) -> NodeType:
    # Two bits carry three types; 3 folds onto OUTPUT so every pattern decodes.
    return NodeType(min(raw, NodeType.OUTPUT))


@dataclass(frozen=True, slots=True)
class Gene:
    """One packed network edge: head (source) -> tail (sink) with a signed weight.

    Layout, most significant bit first: head type (2), head index (6),
    tail type (2), tail index (6), weight (16, two's complement).
    """

    bits: int

    @staticmethod
    def encode(
        head_type: NodeType, head_index: int, tail_type: NodeType, tail_index: int, weight: int
    ) -> "Gene":
        bits = (
            ((int(head_type) & _TYPE_MASK) << _HEAD_TYPE_SHIFT)
            | ((head_index & _INDEX_MASK) << _HEAD_INDEX_SHIFT)
            | ((int(tail_type) & _TYPE_MASK) << _TAIL_TYPE_SHIFT)
            | ((tail_index & _INDEX_MASK) << _TAIL_INDEX_SHIFT)
            | ((weight & _WEIGHT_MASK) << _WEIGHT_SHIFT)
        )
        return Gene(bits)

    @staticmethod
    def random(rng: "DeterministicRng") -> "Gene":
        return Gene(rng.next_bits(GENE_BITS))

    def decode(self) -> Tuple[NodeType, int, NodeType, int, int]:
        return (self.head_type, self.head_index, self.tail_type, self.tail_index, self.weight)

    def flip_bit(self, bit: int) -> "Gene":
        return Gene((self.bits ^ (1 << (bit % GENE_BITS))) & GENE_MASK)

    @property
    def head_type(self) -> NodeType:
        return _decode_type((self.bits >> _HEAD_TYPE_SHIFT) & _TYPE_MASK)

    @property
    def head_index(self) -> int:
        return (self.bits >> _HEAD_INDEX_SHIFT) & _INDEX_MASK

    @property
    def tail_type(self) -> NodeType:
        return _decode_type((self.bits >> _TAIL_TYPE_SHIFT) & _TYPE_MASK)

    @property
    def tail_index(self) -> int:
        return (self.bits >> _TAIL_INDEX_SHIFT) & _INDEX_MASK

    @property
    def weight(self) -> int:
        raw = (self.bits >> _WEIGHT_SHIFT) & _WEIGHT_MASK
        return raw - (1 << _WEIGHT_BITS) if raw & _WEIGHT_SIGN else raw

    @property
    def weight_value(self) -> float:
        return self.weight / WEIGHT_SCALE

    @property
    def head_node(self) -> NodeID:
        return NodeID.resolve(self.head_type, self.head_index)

    @property
    def tail_node(self) -> NodeID:
        return NodeID.resolve(self.tail_type, self.tail_index)


Genome = Tuple[Gene, ...]
