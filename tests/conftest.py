"""Pytest configuration and shared fixtures."""

import pytest
import sys
import numpy as np
from pathlib import Path

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def reset_random_state():
    """Seed the process-scoped generator so every test starts from the same state."""
    from evonet.utils import random_state
    random_state.seed(12345)
    yield
    random_state.seed(None)


@pytest.fixture
def rng():
    """A private, seeded random generator."""
    return np.random.default_rng(2024)


@pytest.fixture
def fixed_network():
    """
    A 2-2-1 sigmoid network with hand-picked parameters:
        weights_input_hidden  = [[0.5, -0.4], [0.3, 0.8]]
        bias_hidden           = [[0.1], [-0.2]]
        weights_hidden_output = [[0.7, -0.6]]
        bias_output           = [[0.05]]
    """
    from evonet import Matrix, NeuralNetwork

    network = NeuralNetwork(2, 2, 1, initialize=False)
    network.weights_input_hidden  = Matrix.from_array([[0.5, -0.4], [0.3, 0.8]])
    network.bias_hidden           = Matrix.from_array([[0.1], [-0.2]])
    network.weights_hidden_output = Matrix.from_array([[0.7, -0.6]])
    network.bias_output           = Matrix.from_array([[0.05]])
    return network


@pytest.fixture
def xor_data():
    """The four XOR cases as (inputs, targets) lists."""
    inputs  = [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]]
    targets = [[0.0],      [1.0],      [1.0],      [0.0]]
    return inputs, targets
