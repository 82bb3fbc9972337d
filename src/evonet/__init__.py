"""
evonet - a small neural network engine for neuroevolution of game agents.

This package provides a feedforward neural network with one hidden layer,
trained either by backpropagation or by evolving its parameters through
crossover and mutation across generations.

Main components:
- linalg: Immutable dense Matrix with elementwise and linear-algebra operations
- activations: Activation functions paired with their derivatives
- phenotype: The NeuralNetwork (prediction, training, genetic operators) and the sensor boundary
- pool: Population of networks and generational reproduction
- run: Configuration and trial execution
- utils: Random generator and logging helpers

Example:
    >>> from evonet import NeuralNetwork
    >>> network = NeuralNetwork(2, 4, 1)
    >>> network.train([1.0, 0.0], [1.0])
    >>> child = NeuralNetwork.mutate(NeuralNetwork.reproduce(network, network))
    >>> len(child.predict([1.0, 0.0]))
    1
"""

import logging

__version__ = "0.1.0"

from evonet.errors import (
    EvonetError,
    InvalidDimension,
    InvalidTopology,
    InvalidLearningRate,
    DimensionMismatch,
    ShapeMismatch,
    ShapeError,
    TopologyMismatch,
)
from evonet.activations import Activation, activations, get_activation
from evonet.linalg      import Matrix
from evonet.phenotype   import NeuralNetwork, uniform_perturbation, sensor_inputs
from evonet.pool        import Population
from evonet.run         import Config, Trial
from evonet.utils       import seed, get_rng, setup_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "EvonetError",
    "InvalidDimension",
    "InvalidTopology",
    "InvalidLearningRate",
    "DimensionMismatch",
    "ShapeMismatch",
    "ShapeError",
    "TopologyMismatch",
    "Activation",
    "activations",
    "get_activation",
    "Matrix",
    "NeuralNetwork",
    "uniform_perturbation",
    "sensor_inputs",
    "Population",
    "Config",
    "Trial",
    "seed",
    "get_rng",
    "setup_logging",
]
