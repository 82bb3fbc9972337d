"""
Evonet Random State Module

A single process-scoped random generator shared by every stochastic operation
(initialization, crossover, mutation, parent selection). Operations accept an
explicit generator as well; when none is passed, the process-scoped one is used.
Nothing in the package re-seeds implicitly.

Functions:
    seed(value): Re-create the process-scoped generator from a seed
    get_rng(rng): Return 'rng' if given, else the process-scoped generator
"""

import numpy as np

_rng: np.random.Generator = np.random.default_rng()

def seed(value: int | None = None) -> np.random.Generator:
    """
    Re-create the process-scoped generator.

    Parameters:
        value: Seed for the new generator (None draws fresh OS entropy)

    Returns:
        The new process-scoped generator
    """
    global _rng
    _rng = np.random.default_rng(value)
    return _rng

def get_rng(rng: np.random.Generator | None = None) -> np.random.Generator:
    """
    Return the generator to use for a random operation.

    Parameters:
        rng: An explicit generator, or None to use the process-scoped one
    """
    if rng is not None:
        return rng
    return _rng
