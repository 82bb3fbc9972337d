"""
Evonet Neural Network Module

This module implements a feedforward neural network with a single hidden layer,
trained either by backpropagation (one online gradient step at a time) or by
evolution (crossover and mutation of its parameters across generations).

The network owns four parameter matrices:
    weights_input_hidden:  (hidden x input)
    weights_hidden_output: (output x hidden)
    bias_hidden:           (hidden x 1)
    bias_output:           (output x 1)

Classes:
    NeuralNetwork: Single hidden layer network with backpropagation and genetic operators

Functions:
    uniform_perturbation(strength, rng): Build the default mutation function
"""

import logging
import math
import numbers
import numpy as np
from typing import Callable, Iterable

from evonet.activations         import Activation, get_activation
from evonet.errors              import (DimensionMismatch, InvalidLearningRate, InvalidTopology,
                                        ShapeMismatch, TopologyMismatch)
from evonet.linalg              import Matrix
from evonet.phenotype.sensors   import sensor_inputs
from evonet.utils.random_state  import get_rng

logger = logging.getLogger(__name__)

DEFAULT_LEARNING_RATE     = 0.15
DEFAULT_MUTATION_STRENGTH = 0.15

MutationFn = Callable[[float, int, int], float]

def uniform_perturbation(strength: float = DEFAULT_MUTATION_STRENGTH,
                         rng: np.random.Generator | None = None) -> MutationFn:
    """
    Build a mutation function adding independent uniform noise in [-strength, strength)
    to every parameter it is applied to.

    Parameters:
        strength: Half-width of the perturbation interval (must be >= 0)
        rng:      Random generator (defaults to the process-scoped one, looked up on each call)
    """
    if strength < 0:
        raise ValueError(f"Mutation strength must be non-negative, got {strength}")

    def perturb(value: float, row: int, col: int) -> float:
        return value + get_rng(rng).uniform(-strength, strength)

    return perturb

def _parameter(attr: str, doc: str) -> property:
    """Property giving checked access to one of the four parameter matrices."""
    def getter(self) -> Matrix:
        return getattr(self, attr)

    def setter(self, matrix: Matrix):
        self._assign_parameter(attr, matrix)

    return property(getter, setter, doc=doc)

class NeuralNetwork:
    """
    A feedforward neural network with one hidden layer.

    Public Attributes:
        input_nodes:  Number of input nodes
        hidden_nodes: Number of hidden nodes
        output_nodes: Number of output nodes
        fitness:      Score assigned by an evolutionary driver (never read by the network)

    Public Properties:
        weights_input_hidden, weights_hidden_output, bias_hidden, bias_output:
                       The parameter matrices; assigning checks the shape and stores a copy
        learning_rate: Step size used by 'train' (must be > 0)
        activation:    Activation pair used by both layers
        topology:      (input_nodes, hidden_nodes, output_nodes)
        display_color: Cosmetic color derived from parameter averages

    Public Methods:
        predict(inputs):                         Forward pass
        predict_from_sensors(readings, extras):  Forward pass on sensor readings
        train(inputs, targets):                  One step of backpropagation
        is_compatible(other):                    Whether two networks can be recombined

    Static Methods (genetic operators):
        reproduce(a, b, rng):           Offspring by per-entry crossover
        mutate(network, mutation_fn):   Offspring by perturbing every parameter
        copy(network):                  Independent deep copy
    """

    PARAMETER_NAMES = ('weights_input_hidden', 'weights_hidden_output', 'bias_hidden', 'bias_output')

    weights_input_hidden  = _parameter('_weights_input_hidden' , "Weights from input to hidden layer (hidden x input).")
    weights_hidden_output = _parameter('_weights_hidden_output', "Weights from hidden to output layer (output x hidden).")
    bias_hidden           = _parameter('_bias_hidden'          , "Hidden layer biases (hidden x 1).")
    bias_output           = _parameter('_bias_output'          , "Output layer biases (output x 1).")

    def __init__(self,
                 input_nodes  : int,
                 hidden_nodes : int,
                 output_nodes : int,
                 initialize   : bool = True,
                 learning_rate: float = DEFAULT_LEARNING_RATE,
                 activation   : 'str | Activation' = 'sigmoid',
                 rng          : np.random.Generator | None = None):
        """
        Create a network.

        Parameters:
            input_nodes:   Number of input nodes (> 0)
            hidden_nodes:  Number of hidden nodes (> 0)
            output_nodes:  Number of output nodes (> 0)
            initialize:    If True, draw all weights and biases uniformly from [-1, 1);
                           if False, leave them at zero for the caller to overwrite
            learning_rate: Step size for 'train' (> 0)
            activation:    Activation name (see evonet.activations) or Activation object
            rng:           Random generator used for initialization
        """
        for name, value in (('input_nodes', input_nodes),
                            ('hidden_nodes', hidden_nodes),
                            ('output_nodes', output_nodes)):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
                raise InvalidTopology(f"{name} must be a positive integer, got {value!r}")

        self.input_nodes : int = int(input_nodes)
        self.hidden_nodes: int = int(hidden_nodes)
        self.output_nodes: int = int(output_nodes)

        self.learning_rate = learning_rate
        self._activation: Activation = get_activation(activation)
        self.fitness: float = 0.0

        # Expected (rows, cols) of each parameter matrix
        self._shapes = {
            '_weights_input_hidden' : (self.hidden_nodes, self.input_nodes),
            '_weights_hidden_output': (self.output_nodes, self.hidden_nodes),
            '_bias_hidden'          : (self.hidden_nodes, 1),
            '_bias_output'          : (self.output_nodes, 1),
        }

        if initialize:
            generator = get_rng(rng)
            for attr, (rows, cols) in self._shapes.items():
                setattr(self, attr, Matrix.random(rows, cols, generator))
        else:
            for attr, (rows, cols) in self._shapes.items():
                setattr(self, attr, Matrix(rows, cols))

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def learning_rate(self) -> float:
        return self._learning_rate

    @learning_rate.setter
    def learning_rate(self, value: float):
        if isinstance(value, bool) or not isinstance(value, numbers.Real) \
                or not math.isfinite(value) or value <= 0:
            raise InvalidLearningRate(f"Learning rate must be a finite number > 0, got {value!r}")
        self._learning_rate = float(value)

    @property
    def activation(self) -> Activation:
        return self._activation

    @property
    def topology(self) -> tuple[int, int, int]:
        return self.input_nodes, self.hidden_nodes, self.output_nodes

    @property
    def parameters(self) -> dict[str, Matrix]:
        """The four parameter matrices, by name."""
        return {name: getattr(self, name) for name in self.PARAMETER_NAMES}

    @property
    def display_color(self) -> tuple[float, float, float]:
        """
        A purely cosmetic color, recomputed from the current parameters:
            (average of weights_input_hidden,
             average of weights_hidden_output,
             average of bias_hidden * bias_output)

        The bias vectors only have the same length when hidden_nodes == output_nodes;
        otherwise their elementwise product covers their first min(hidden, output) entries.
        """
        size = min(self.hidden_nodes, self.output_nodes)
        bias_hidden = Matrix.from_array(self._bias_hidden.to_array()[:size])
        bias_output = Matrix.from_array(self._bias_output.to_array()[:size])
        return (self._weights_input_hidden.average(),
                self._weights_hidden_output.average(),
                bias_hidden.multiply_elementwise(bias_output).average())

    def _assign_parameter(self, attr: str, matrix: Matrix):
        if not isinstance(matrix, Matrix):
            raise TypeError(f"{attr.lstrip('_')} must be a Matrix, got {type(matrix).__name__}")
        expected = self._shapes[attr]
        if matrix.shape != expected:
            raise ShapeMismatch(f"{attr.lstrip('_')} must have shape {expected}, got {matrix.shape}")
        setattr(self, attr, matrix.copy())

    def is_compatible(self, other: 'NeuralNetwork') -> bool:
        """Two networks can be recombined iff all their node counts match."""
        return self.topology == other.topology

    # ------------------------------------------------------------------
    # Inference and training
    # ------------------------------------------------------------------

    @staticmethod
    def _to_column(values: Iterable[float], expected: int, what: str) -> Matrix:
        values = [float(value) for value in values]
        if len(values) != expected:
            raise DimensionMismatch(f"Expected {expected} {what}, got {len(values)}")
        return Matrix.from_sequence(values)

    def _feed_forward(self, inputs: Matrix) -> tuple[Matrix, Matrix]:
        """Return the (hidden, output) activations for an input column vector."""
        function = self._activation.function
        hidden = (self._weights_input_hidden @ inputs + self._bias_hidden).apply(function)
        output = (self._weights_hidden_output @ hidden + self._bias_output).apply(function)
        return hidden, output

    def predict(self, inputs: Iterable[float]) -> list[float]:
        """
        Compute the network output for one input sample.

        Parameters:
            inputs: Sequence of 'input_nodes' numbers

        Returns:
            List of 'output_nodes' floats
        """
        _, output = self._feed_forward(self._to_column(inputs, self.input_nodes, 'inputs'))
        return output.to_sequence()

    def predict_from_sensors(self,
                             readings    : Iterable[float],
                             extra_inputs: Iterable[float] = ()) -> list[float]:
        """
        Compute the network output from sensor readings (see evonet.phenotype.sensors).

        Parameters:
            readings:     One non-negative distance per sensor, 0.0 meaning "no detection"
            extra_inputs: Additional scalars appended after the readings
        """
        return self.predict(sensor_inputs(readings, extra_inputs, expected_size=self.input_nodes))

    def train(self, inputs: Iterable[float], targets: Iterable[float]) -> None:
        """
        Perform one step of online gradient descent (backpropagation) on a single sample.

        Both sequences are validated before any parameter changes. The hidden layer
        errors are propagated through the output weights as they were BEFORE this
        step's update.

        Parameters:
            inputs:  Sequence of 'input_nodes' numbers
            targets: Sequence of 'output_nodes' desired outputs
        """
        inputs  = self._to_column(inputs, self.input_nodes, 'inputs')
        targets = self._to_column(targets, self.output_nodes, 'targets')

        derivative = self._activation.derivative
        hidden, output = self._feed_forward(inputs)

        # Output layer
        output_errors = targets - output
        gradient = output.apply(derivative) * output_errors * self._learning_rate

        # Back-propagate through the pre-update output weights
        hidden_errors = self._weights_hidden_output.T @ output_errors

        self._weights_hidden_output = self._weights_hidden_output + gradient @ hidden.T
        self._bias_output = self._bias_output + gradient

        # Hidden layer
        hidden_gradient = hidden.apply(derivative) * hidden_errors * self._learning_rate

        self._weights_input_hidden = self._weights_input_hidden + hidden_gradient @ inputs.T
        self._bias_hidden = self._bias_hidden + hidden_gradient

    # ------------------------------------------------------------------
    # Genetic operators
    # ------------------------------------------------------------------

    def _offspring(self) -> 'NeuralNetwork':
        """An uninitialized network with the same topology and hyperparameters."""
        return NeuralNetwork(self.input_nodes, self.hidden_nodes, self.output_nodes,
                             initialize=False,
                             learning_rate=self._learning_rate,
                             activation=self._activation)

    @staticmethod
    def reproduce(a: 'NeuralNetwork', b: 'NeuralNetwork',
                  rng: np.random.Generator | None = None) -> 'NeuralNetwork':
        """
        Create an offspring by crossover: every entry of every parameter matrix is
        taken from parent 'a' or from parent 'b' with equal probability.

        The offspring inherits learning rate and activation from 'a'.

        Parameters:
            a, b: Parents with identical node counts
            rng:  Random generator (defaults to the process-scoped one)
        """
        if not a.is_compatible(b):
            raise TopologyMismatch(f"Cannot reproduce networks with topologies {a.topology} and {b.topology}")

        generator = get_rng(rng)
        child = a._offspring()
        for name in NeuralNetwork.PARAMETER_NAMES:
            setattr(child, name, getattr(a, name).blend(getattr(b, name), generator))

        logger.debug("Reproduced network with topology %s", child.topology)
        return child

    @staticmethod
    def mutate(network    : 'NeuralNetwork',
               mutation_fn: MutationFn | None = None,
               rng        : np.random.Generator | None = None) -> 'NeuralNetwork':
        """
        Create an offspring by passing every parameter entry through a mutation function.

        Parameters:
            network:     The network to mutate (left unchanged)
            mutation_fn: Called as mutation_fn(value, row, col) for every entry;
                         defaults to uniform noise in [-0.15, 0.15)
            rng:         Random generator for the default mutation function
        """
        if mutation_fn is None:
            mutation_fn = uniform_perturbation(DEFAULT_MUTATION_STRENGTH, rng)

        child = network._offspring()
        for name in NeuralNetwork.PARAMETER_NAMES:
            setattr(child, name, getattr(network, name).map(mutation_fn))

        logger.debug("Mutated network with topology %s", child.topology)
        return child

    @staticmethod
    def copy(network: 'NeuralNetwork') -> 'NeuralNetwork':
        """
        Create a fully independent deep copy of a network, fitness included.
        """
        child = network._offspring()
        for name in NeuralNetwork.PARAMETER_NAMES:
            setattr(child, name, getattr(network, name))
        child.fitness = network.fitness
        return child

    def __repr__(self):
        return (f"NeuralNetwork(input_nodes={self.input_nodes}, hidden_nodes={self.hidden_nodes}, "
                f"output_nodes={self.output_nodes}, learning_rate={self._learning_rate}, "
                f"activation={self._activation.name!r})")

    def __str__(self):
        return (f"{self.input_nodes}-{self.hidden_nodes}-{self.output_nodes} network "
                f"({self._activation.name}), fitness={self.fitness:.4f}")
