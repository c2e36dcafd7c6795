"""
Models package for the Hunger Games simulation.

This package contains all data models and dataclasses used throughout the system.
"""

from .person import Person
from .district import District
from .tree_node import TreeNode
from .duel import DuelPair, DuelRecord

__all__ = ['Person', 'District', 'TreeNode', 'DuelPair', 'DuelRecord']
