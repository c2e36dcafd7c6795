"""
District registry package for the Hunger Games simulation.
"""

from .district_registry import DistrictRegistry

__all__ = ['DistrictRegistry']
