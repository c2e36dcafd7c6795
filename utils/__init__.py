"""
Utility functions package for the Hunger Games simulation.
"""

from .random_utils import UniformRandom

__all__ = ['UniformRandom']
