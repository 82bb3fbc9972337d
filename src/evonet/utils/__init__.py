"""
Utilities Package

Exported:
    seed, get_rng: Process-scoped random generator handling
    setup_logging: Console/file logging configuration for scripts
"""

from evonet.utils.random_state import seed, get_rng
from evonet.utils.logger       import setup_logging

__all__ = ['seed', 'get_rng', 'setup_logging']
