from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from .gene import (
    INNER_NODE_COUNT,
    INPUT_NODE_COUNT,
    NODE_COUNT,
    Gene,
    NodeID,
    NodeType,
)

_OUTPUT_START = INPUT_NODE_COUNT + INNER_NODE_COUNT


class NeuralNet:
    """Recurrent network wired from a genome.

    Every gene adds its weight to the edge head -> tail. Sensors are never
    written, so a gene whose tail is an input is redirected to the inner
    neuron with the same wrapped index. Edges read the activation left by
    the previous ``feed_forward`` call, which makes evaluation independent
    of gene order.
    """

    def __init__(self, genome: Sequence[Gene]):
        self._weights = np.zeros((NODE_COUNT, NODE_COUNT), dtype=np.float32)
        self._connections: List[Tuple[NodeID, NodeID, float]] = []
        for gene in genome:
            head = gene.head_node
            tail_type = gene.tail_type
            if tail_type is NodeType.INPUT:
                tail_type = NodeType.INNER
            tail = NodeID.resolve(tail_type, gene.tail_index)
            weight = np.float32(gene.weight_value)
            self._weights[head.index, tail.index] += weight
            self._connections.append((head, tail, float(weight)))
        self._activations = np.zeros(NODE_COUNT, dtype=np.float32)

    @property
    def connections(self) -> List[Tuple[NodeID, NodeID, float]]:
        return self._connections

    @property
    def activations(self) -> np.ndarray:
        return self._activations

    @property
    def outputs(self) -> np.ndarray:
        return self._activations[_OUTPUT_START:]

    def reset(self) -> None:
        self._activations.fill(0.0)

    def feed_forward(self, inputs: Sequence[float]) -> None:
        if len(inputs) != INPUT_NODE_COUNT:
            raise ValueError(f"Expected {INPUT_NODE_COUNT} sensor values, got {len(inputs)}")
        previous = self._activations.copy()
        previous[:INPUT_NODE_COUNT] = np.asarray(inputs, dtype=np.float32)
        incoming = previous @ self._weights
        activations = np.tanh(incoming)
        activations[:INPUT_NODE_COUNT] = previous[:INPUT_NODE_COUNT]
        self._activations = activations
