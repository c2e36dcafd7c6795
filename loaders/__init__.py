"""
Setup loaders package for the Hunger Games simulation.
"""

from .panem_loader import PanemLoader

__all__ = ['PanemLoader']
