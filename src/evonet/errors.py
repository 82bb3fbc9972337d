"""
Evonet Errors Module

Exceptions raised by the numeric engine. Every error is a precondition
violation detected before any computation (or state change) takes place.
All of them derive from ValueError, so callers can catch the builtin.

Classes:
    EvonetError:         Base class for all evonet errors
    InvalidDimension:    Non-positive matrix dimensions
    InvalidTopology:     Non-positive node counts for a network
    InvalidLearningRate: Learning rate that is not strictly positive
    DimensionMismatch:   Input/target sequence of the wrong length
    ShapeMismatch:       Matrix operation on incompatible shapes
    ShapeError:          Matrix with the wrong shape for a conversion
    TopologyMismatch:    Recombination of networks with different node counts
"""

class EvonetError(ValueError):
    """Base class for all evonet errors."""

class InvalidDimension(EvonetError):
    """Raised when a matrix is created with a non-positive number of rows or columns."""

class InvalidTopology(EvonetError):
    """Raised when a network is created with a non-positive number of nodes in a layer."""

class InvalidLearningRate(EvonetError):
    """Raised when the learning rate is not a finite, strictly positive number."""

class DimensionMismatch(EvonetError):
    """Raised when the input or target sequence length does not match the network."""

class ShapeMismatch(EvonetError):
    """Raised when a matrix operation is applied to operands of incompatible shapes."""

class ShapeError(EvonetError):
    """Raised when a matrix cannot be converted because of its shape."""

class TopologyMismatch(EvonetError):
    """Raised when recombining networks whose node counts differ."""
