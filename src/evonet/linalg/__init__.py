"""
Linear Algebra Package

Exported:
    Matrix: Dense, immutable 2D matrix of floats
"""

from evonet.linalg.matrix import Matrix

__all__ = ['Matrix']
