from __future__ import annotations

import math

import numpy as np
import pytest
from pytest import approx

from biosim.sim.core.gene import ACTION_INDEX, OUTPUT_NODE_COUNT, Gene, NodeID, NodeType
from biosim.sim.core.neural_net import NeuralNet

ONE = 8192


def test_empty_network_outputs_zero():
    net = NeuralNet(())
    net.feed_forward([0.3, -0.2, 0.5, 1.0])
    assert net.outputs.shape == (OUTPUT_NODE_COUNT,)
    assert not net.outputs.any()
    assert net.outputs.dtype == np.float32


def test_sensor_drives_action_directly():
    net = NeuralNet([Gene.encode(NodeType.INPUT, 0, NodeType.OUTPUT, 0, ONE)])
    net.feed_forward([0.5, 0.0, 0.0, 0.0])
    assert net.outputs[ACTION_INDEX[NodeID.MOVE_EAST]] == approx(math.tanh(0.5), rel=1e-5)


def test_inner_neurons_read_previous_tick():
    genome = [
        Gene.encode(NodeType.INPUT, 0, NodeType.INNER, 0, ONE),
        Gene.encode(NodeType.INNER, 0, NodeType.OUTPUT, 2, ONE),
    ]
    net = NeuralNet(genome)
    north = ACTION_INDEX[NodeID.MOVE_NORTH]

    net.feed_forward([0.8, 0.0, 0.0, 0.0])
    assert net.outputs[north] == approx(0.0)
    net.feed_forward([0.8, 0.0, 0.0, 0.0])
    assert net.outputs[north] == approx(math.tanh(math.tanh(0.8)), rel=1e-5)

    net.reset()
    assert not net.activations.any()


def test_input_tails_are_redirected_to_inner_neurons():
    net = NeuralNet([Gene.encode(NodeType.INPUT, 1, NodeType.INPUT, 2, ONE)])
    assert net.connections == [(NodeID.LOC_Y, NodeID.INNER_2, approx(1.0))]
    net.feed_forward([0.0, 0.25, 0.0, 0.0])
    assert net.activations[NodeID.LOC_Y.index] == approx(0.25)
    assert net.activations[NodeID.INNER_2.index] == approx(math.tanh(0.25), rel=1e-5)


def test_duplicate_edges_sum():
    gene = Gene.encode(NodeType.INPUT, 3, NodeType.OUTPUT, 4, ONE // 2)
    net = NeuralNet([gene, gene])
    net.feed_forward([0.0, 0.0, 0.0, 1.0])
    assert net.outputs[ACTION_INDEX[NodeID.MOVE_RANDOM]] == approx(math.tanh(1.0), rel=1e-5)


def test_feed_forward_rejects_wrong_sensor_count():
    net = NeuralNet(())
    with pytest.raises(ValueError):
        net.feed_forward([0.0, 0.0, 0.0])
