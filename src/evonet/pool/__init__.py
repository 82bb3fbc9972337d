"""
Evonet Pool Package

Exported:
    Population: A generation of neural networks evolving together
"""

from evonet.pool.population import Population

__all__ = ['Population']
