"""
Duel engine package for the Hunger Games simulation.
"""

from .duel_engine import DuelEngine

__all__ = ['DuelEngine']
