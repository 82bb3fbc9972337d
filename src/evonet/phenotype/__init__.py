"""
Evonet Phenotype Package

This package implements the executable side of evonet: the neural network
that maps inputs to outputs, learns by backpropagation and is recombined by
the genetic operators, plus the boundary that turns sensor readings into
network inputs.

Modules:
    neural_network: NeuralNetwork class and the default mutation function
    sensors:        Validation of sensor readings supplied by a host simulation

Exported:
    NeuralNetwork:        Single hidden layer network
    uniform_perturbation: Factory for the default mutation function
    sensor_inputs:        Build a network input list from sensor readings
"""

from evonet.phenotype.neural_network import NeuralNetwork, uniform_perturbation
from evonet.phenotype.sensors        import sensor_inputs

__all__ = ['NeuralNetwork',
           'uniform_perturbation',
           'sensor_inputs']
