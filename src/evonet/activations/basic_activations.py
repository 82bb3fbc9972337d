import numpy as np
from typing import Callable, NamedTuple

class Activation(NamedTuple):
    """
    An activation function paired with its derivative.

    The derivative is expressed in terms of the ACTIVATED value y = function(z),
    not the pre-activation z. Backpropagation relies on this convention, so a
    custom activation must follow it as well.
    """
    name      : str
    function  : Callable[[np.ndarray], np.ndarray]
    derivative: Callable[[np.ndarray], np.ndarray]

def sigmoid_activation(z):
    z = np.clip(z, -500, 500)   # exp overflows past ~709
    return 1.0 / (1.0 + np.exp(-z))

def sigmoid_derivative(y):
    return y * (1.0 - y)

def tanh_activation(z):
    return np.tanh(z)

def tanh_derivative(y):
    return 1.0 - y ** 2

def relu_activation(z):
    return np.maximum(0.0, z)

def relu_derivative(y):
    return np.where(y > 0.0, 1.0, 0.0)

def identity_activation(z):
    return z

def identity_derivative(y):
    return np.ones_like(y)

activations = {
    "sigmoid" : Activation("sigmoid" , sigmoid_activation , sigmoid_derivative),
    "tanh"    : Activation("tanh"    , tanh_activation    , tanh_derivative),
    "relu"    : Activation("relu"    , relu_activation    , relu_derivative),
    "identity": Activation("identity", identity_activation, identity_derivative),
    }

# 3-letter identifiers for each activation function
activation_codes = {
    "sigmoid" : "SIG",
    "tanh"    : "TNH",
    "relu"    : "RLU",
    "identity": "IDN",
    }

def get_activation(activation: 'str | Activation') -> Activation:
    """
    Resolve an activation given by name (or pass an Activation through unchanged).
    """
    if isinstance(activation, Activation):
        return activation
    try:
        return activations[activation]
    except (KeyError, TypeError):
        raise ValueError(f"Unknown activation function {activation!r}, "
                         f"choose one of: {', '.join(activations)}") from None
