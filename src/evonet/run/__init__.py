"""
Evonet Run Package

Modules:
    config: INI-file configuration
    trial:  Abstract evolutionary trial with parallel fitness evaluation

Exported:
    Config: Configuration parameters
    Trial:  Abstract base class for evolutionary trials
"""

from evonet.run.config import Config
from evonet.run.trial  import Trial

__all__ = ['Config', 'Trial']
