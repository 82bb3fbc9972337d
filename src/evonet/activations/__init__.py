"""
Activations Package

This package provides the activation functions for evonet neural networks.
Each activation is an Activation value bundling the forward function with its
derivative (expressed in terms of the activated output).

Exported:
    Activation:       Named (name, function, derivative) triple
    activations:      Dictionary mapping activation names to Activation objects
    activation_codes: Dictionary mapping activation names to 3-letter codes
    get_activation:   Resolve an activation by name
    Individual functions: sigmoid_activation, sigmoid_derivative, tanh_activation,
                          tanh_derivative, relu_activation, relu_derivative,
                          identity_activation, identity_derivative
"""

from evonet.activations.basic_activations import (
    Activation,
    activations,
    activation_codes,
    get_activation,
    sigmoid_activation,
    sigmoid_derivative,
    tanh_activation,
    tanh_derivative,
    relu_activation,
    relu_derivative,
    identity_activation,
    identity_derivative
)

__all__ = [
    'Activation',
    'activations',
    'activation_codes',
    'get_activation',
    'sigmoid_activation',
    'sigmoid_derivative',
    'tanh_activation',
    'tanh_derivative',
    'relu_activation',
    'relu_derivative',
    'identity_activation',
    'identity_derivative'
]
