"""
Configuration package for the Hunger Games simulation.
"""

from .config_manager import ConfigManager

__all__ = ['ConfigManager']
